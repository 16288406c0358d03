"""Commit history and review record data models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CommitRecord:
    """One svn log entry plus the review metadata found in its message.

    ``reviewer``, ``project`` and ``work_package`` are derived from
    ``message`` by the parser; each is None when the message carries no tag.
    """

    revision: str
    author: str
    date: str  # verbatim svn timestamp, e.g. 2024-03-01T09:15:02.123456Z
    message: str
    changed_paths: tuple[str, ...] = ()  # "<action> <path>", log order
    reviewer: str | None = None
    project: str | None = None
    work_package: str | None = None


@dataclass(frozen=True)
class ReviewCriteria:
    """Which commits belong in a report. None leaves a field unconstrained."""

    reviewer: str | None = None
    project: str | None = None
    work_package: str | None = None


@dataclass(frozen=True)
class Report:
    """The commits one reviewer is responsible for, in log order."""

    reviewer: str | None
    project: str | None = None
    work_package: str | None = None
    commits: tuple[CommitRecord, ...] = field(default_factory=tuple)

    @property
    def criteria(self) -> ReviewCriteria:
        return ReviewCriteria(reviewer=self.reviewer, project=self.project, work_package=self.work_package)
