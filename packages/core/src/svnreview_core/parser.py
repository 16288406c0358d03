"""Parse `svn log -v --xml` output into CommitRecords.

The expected document shape:

    <log>
      <logentry revision="42">
        <author>jdoe</author>
        <date>2024-03-01T09:15:02.123456Z</date>
        <paths>
          <path action="M" kind="file">/trunk/src/a.rb</path>
        </paths>
        <msg>fix bug &lt;alice&gt; [PJ117]</msg>
      </logentry>
    </log>

Entries are returned in document order; the parser never sorts them.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Callable

from svnreview_core.errors import MalformedLogError
from svnreview_core.extract import extract_metadata
from svnreview_core.models import CommitRecord
from svnreview_core.svn.log import fetch_log

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("author", "date", "msg")


def _required_text(entry: ET.Element, tag: str, revision: str) -> str:
    elem = entry.find(tag)
    if elem is None:
        raise MalformedLogError(f"log entry r{revision} has no <{tag}> element")
    # <msg/> on an empty commit message is present, just empty.
    return elem.text or ""


def _changed_paths(entry: ET.Element, revision: str) -> tuple[str, ...]:
    paths = entry.find("paths")
    if paths is None:
        return ()
    changed = []
    for path in paths.findall("path"):
        action = path.get("action")
        if action is None:
            raise MalformedLogError(f"changed path in r{revision} has no action attribute")
        changed.append(f"{action} {(path.text or '').strip()}".rstrip())
    return tuple(changed)


def parse_entry(entry: ET.Element) -> CommitRecord:
    revision = entry.get("revision")
    if revision is None:
        raise MalformedLogError("log entry has no revision attribute")

    author, date, message = (_required_text(entry, tag, revision) for tag in _REQUIRED_FIELDS)
    reviewer, project, work_package = extract_metadata(message)
    return CommitRecord(
        revision=revision,
        author=author,
        date=date,
        message=message,
        changed_paths=_changed_paths(entry, revision),
        reviewer=reviewer,
        project=project,
        work_package=work_package,
    )


def parse_log(xml_text: str) -> tuple[CommitRecord, ...]:
    """Return one CommitRecord per <logentry>, in document order."""
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise MalformedLogError(f"svn log is not well-formed XML: {e}") from e

    if root.tag != "log":
        raise MalformedLogError(f"expected <log> root element, got <{root.tag}>")

    commits = tuple(parse_entry(entry) for entry in root.findall("logentry"))
    logger.debug("Parsed %d log entries", len(commits))
    return commits


def load_commits(
    path: str,
    revision: str | None = None,
    svn_command: str = "svn",
    fetch: Callable[..., str] | None = None,
) -> tuple[CommitRecord, ...]:
    """Fetch the log for path once and parse it."""
    fetch = fetch or fetch_log
    return parse_log(fetch(path, revision, svn_command=svn_command))
