"""Decide which commits belong in a reviewer's report.

Project and work package treat an absent criterion as a wildcard. The
reviewer field does not: a report with no reviewer collects only commits
that carry no reviewer tag, and a named reviewer never collects untagged
commits.
"""

from __future__ import annotations

from typing import Iterable

from svnreview_core.models import CommitRecord, ReviewCriteria


def same_text(left: str, right: str) -> bool:
    """Case-insensitive equality used for every metadata comparison.

    Uses str.casefold, so it is wider than ASCII case folding: "Straße" equals "STRASSE".
    """
    return left.casefold() == right.casefold()


def reviewer_fits(expected: str | None, actual: str | None) -> bool:
    if expected is None or actual is None:
        return expected is None and actual is None
    return same_text(expected, actual)


def tag_fits(expected: str | None, actual: str | None) -> bool:
    if expected is None:
        return True
    return actual is not None and same_text(expected, actual)


def matches(commit: CommitRecord, criteria: ReviewCriteria) -> bool:
    return (
        reviewer_fits(criteria.reviewer, commit.reviewer)
        and tag_fits(criteria.project, commit.project)
        and tag_fits(criteria.work_package, commit.work_package)
    )


def filter_commits(commits: Iterable[CommitRecord], criteria: ReviewCriteria) -> tuple[CommitRecord, ...]:
    return tuple(c for c in commits if matches(c, criteria))
