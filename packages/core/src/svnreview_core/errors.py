"""Exceptions raised while retrieving and parsing commit history.

Both are fatal for a run: the CLI aborts before any report is written.
"""

from __future__ import annotations


class SvnReviewError(Exception):
    """Base class for all svnreview failures."""


class LogSourceError(SvnReviewError):
    """The svn client could not be run or returned nothing usable."""


class MalformedLogError(SvnReviewError):
    """The retrieved log is not valid svn XML or an entry lacks a required field."""
