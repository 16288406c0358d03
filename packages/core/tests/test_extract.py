"""Tests for review metadata extraction from commit messages."""

import re

from svnreview_core.extract import (
    PACKAGE_RULE,
    PROJECT_RULE,
    REVIEWER_RULE,
    ExtractionRule,
    extract_first,
    extract_metadata,
)


class TestReviewerRule:
    def test_extracts_name_between_angle_brackets(self):
        assert extract_first("fix bug <alice>", REVIEWER_RULE) == "alice"

    def test_preserves_case_and_inner_whitespace(self):
        assert extract_first("refactor <Mary  Ann> done", REVIEWER_RULE) == "Mary  Ann"

    def test_first_occurrence_wins(self):
        assert extract_first("<bob> then <carol>", REVIEWER_RULE) == "bob"

    def test_no_match_returns_none(self):
        assert extract_first("no reviewer here", REVIEWER_RULE) is None

    def test_none_message_returns_none(self):
        assert extract_first(None, REVIEWER_RULE) is None

    def test_empty_brackets_yield_empty_string(self):
        assert extract_first("odd <> tag", REVIEWER_RULE) == ""

    def test_tag_split_across_lines_does_not_match(self):
        assert extract_first("start <ali\nce> end", REVIEWER_RULE) is None


class TestProjectAndPackageRules:
    def test_upper_case_project(self):
        assert extract_first("fix [PJ42]", PROJECT_RULE) == "42"

    def test_lower_case_project(self):
        assert extract_first("fix [pj42]", PROJECT_RULE) == "42"

    def test_mixed_case_project(self):
        assert extract_first("fix [Pj117]", PROJECT_RULE) == "117"

    def test_work_package(self):
        assert extract_first("fix [WP3] [wp4]", PACKAGE_RULE) == "3"

    def test_empty_project_tag_yields_empty_string(self):
        assert extract_first("[pj]", PROJECT_RULE) == ""

    def test_project_rule_ignores_work_package_tag(self):
        assert extract_first("fix [wp3]", PROJECT_RULE) is None

    def test_non_numeric_project_kept(self):
        assert extract_first("[pjAlpha-2]", PROJECT_RULE) == "Alpha-2"


class TestExtractionRule:
    def test_custom_rule_with_own_strip_policy(self):
        rule = ExtractionRule(re.compile(r"#rev:\S+"), strip_leading=5, strip_trailing=0)
        assert rule.extract_first("see #rev:jdoe please") == "jdoe"

    def test_short_span_never_raises(self):
        rule = ExtractionRule(re.compile(r"x"))
        assert rule.extract_first("x") == ""


class TestExtractMetadata:
    def test_all_three_tags(self):
        assert extract_metadata("reviewed by <bob> [PJ9] [wp2] fix bug") == ("bob", "9", "2")

    def test_untagged_message(self):
        assert extract_metadata("plain commit message") == (None, None, None)

    def test_none_message(self):
        assert extract_metadata(None) == (None, None, None)

    def test_repeatable(self):
        message = "<alice> [pj1]"
        assert extract_metadata(message) == extract_metadata(message)
