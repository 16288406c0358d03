"""Render a Report as a plain-text review record."""

from __future__ import annotations

from datetime import datetime

from jinja2 import Environment

from svnreview_core.models import Report
from svnreview_core.reports import report_id

REPORT_TEMPLATE = (
    "-----------------------------------------------------------------------\n"
    "REVIEW RECORD\n"
    "\n"
    "Id:               {{ report_id }}\n"
    "Printout time:    {{ printout_time }}\n"
    "Reviewer:         {{ report.reviewer or '' }}\n"
    "\n"
    "Path used:        {{ source_path }}\n"
    "----------------------------------------------------------------------\n"
    "\n"
    "Reviewed revisions:\n"
    "\n"
    "{% for commit in report.commits %}\n"
    "{{ commit.revision }}\t{{ commit.author }}\t{{ commit.date }}\t{{ commit.reviewer or '' }}\n"
    "{% for changed in commit.changed_paths %}\n"
    "\t\t\t{{ changed | trim }}\n"
    "{% endfor %}\n"
    "\t\tNumber of changed files: {{ commit.changed_paths | length }}\n"
    "\t\t{{ commit.message | collapse_escapes }}\n"
    "{% endfor %}\n"
    "\n"
    "Reviewer signature: ______________________________\n"
    "                    ({{ report.reviewer or '' }})\n"
)


def collapse_escapes(message: str) -> str:
    """Replace literal backslash-n sequences (not real newlines) with spaces."""
    return message.replace("\\n", " ")


def _environment() -> Environment:
    env = Environment(trim_blocks=True, lstrip_blocks=True, keep_trailing_newline=True, autoescape=False)
    env.filters["collapse_escapes"] = collapse_escapes
    return env


def render_report(
    report: Report,
    source_path: str,
    generated_at: datetime,
    template: str | None = None,
) -> str:
    """Expand the review record template for report.

    ``template`` replaces the built-in REPORT_TEMPLATE when given; it receives
    ``report``, ``report_id``, ``printout_time`` and ``source_path``.
    """
    tmpl = _environment().from_string(template or REPORT_TEMPLATE)
    return tmpl.render(
        report=report,
        report_id=report_id(report, generated_at),
        printout_time=generated_at.strftime("%Y-%m-%d %H:%M:%S %z").rstrip(),
        source_path=source_path,
    )
