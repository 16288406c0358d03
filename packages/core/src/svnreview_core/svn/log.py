from __future__ import annotations

import logging
import subprocess

from svnreview_core.errors import LogSourceError

logger = logging.getLogger(__name__)


def build_log_command(path: str, revision: str | None = None, svn_command: str = "svn") -> list[str]:
    cmd = [svn_command, "log", "-v", "--xml", "--non-interactive", path]
    if revision:
        cmd += ["-r", revision]
    return cmd


def fetch_log(path: str, revision: str | None = None, svn_command: str = "svn") -> str:
    """Run `svn log -v --xml` for path and return the raw XML document.

    Raises LogSourceError if svn is not installed, exits non-zero, or prints nothing.
    """
    cmd = build_log_command(path, revision, svn_command)
    logger.info("Running %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, encoding="utf-8", errors="replace")
    except FileNotFoundError as e:
        raise LogSourceError(f"svn client not found: {svn_command!r}") from e

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise LogSourceError(f"svn log exited with status {result.returncode}: {stderr or 'no error output'}")

    output = result.stdout or ""
    if not output.strip():
        raise LogSourceError(f"svn log returned no output for {path}")
    logger.debug("svn log returned %d characters", len(output))
    return output
