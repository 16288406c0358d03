"""Review metadata extraction from free-text commit messages.

Committers tag a message with the reviewer in angle brackets and with the
project and work package in square brackets:

    fix login redirect <alice> [PJ117] [wp3]

Each tag is described by an ExtractionRule — a pattern plus how many
delimiter characters to cut from either end of the matched span.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractionRule:
    pattern: re.Pattern[str]
    strip_leading: int = 1
    strip_trailing: int = 1

    def extract_first(self, message: str | None) -> str | None:
        """Return the first tag value in message, or None if there is none.

        A matched span shorter than the delimiters yields "" rather than an error.
        """
        if message is None:
            return None
        match = self.pattern.search(message)
        if match is None:
            return None
        span = match.group(0)
        end = len(span) - self.strip_trailing
        if end <= self.strip_leading:
            return ""
        return span[self.strip_leading : end]


REVIEWER_RULE = ExtractionRule(re.compile(r"<(.*?)>"))
PROJECT_RULE = ExtractionRule(re.compile(r"\[pj(.*?)\]", re.IGNORECASE), strip_leading=3)
PACKAGE_RULE = ExtractionRule(re.compile(r"\[wp(.*?)\]", re.IGNORECASE), strip_leading=3)


def extract_first(message: str | None, rule: ExtractionRule) -> str | None:
    return rule.extract_first(message)


def extract_metadata(message: str | None) -> tuple[str | None, str | None, str | None]:
    """Return (reviewer, project, work_package) found in message."""
    return (
        REVIEWER_RULE.extract_first(message),
        PROJECT_RULE.extract_first(message),
        PACKAGE_RULE.extract_first(message),
    )
