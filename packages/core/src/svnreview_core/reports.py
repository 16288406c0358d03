"""Build one Report per reviewer from a single, already-parsed commit list."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Sequence

from svnreview_core.filters import filter_commits
from svnreview_core.models import CommitRecord, Report, ReviewCriteria

logger = logging.getLogger(__name__)

_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def build_report(commits: Sequence[CommitRecord], criteria: ReviewCriteria) -> Report:
    selected = filter_commits(commits, criteria)
    logger.debug("Reviewer %r: %d of %d commits selected", criteria.reviewer, len(selected), len(commits))
    return Report(
        reviewer=criteria.reviewer,
        project=criteria.project,
        work_package=criteria.work_package,
        commits=selected,
    )


def build_reports(
    commits: Sequence[CommitRecord],
    reviewers: Sequence[str],
    project: str | None = None,
    work_package: str | None = None,
) -> list[Report]:
    """Return a Report for each reviewer, in the order given.

    Every report filters the same commit sequence; nothing is re-fetched.
    """
    return [
        build_report(commits, ReviewCriteria(reviewer=name, project=project, work_package=work_package))
        for name in reviewers
    ]


def report_id(report: Report, generated_at: datetime) -> str:
    """e.g. ``PJ117-CIR-20240301_091502-alice``; an absent project leaves the prefix empty."""
    return f"{report.project or ''}-CIR-{generated_at.strftime(_TIMESTAMP_FORMAT)}-{report.reviewer or ''}"


def report_file_name(report: Report, generated_at: datetime) -> str:
    return f"{report_id(report, generated_at)}.txt"
