"""Tests for activity filters."""

from collections.abc import Callable

import pytest
from conftest import change

from daily_report.filters import (
    ActivityFilter,
    AndFilter,
    ExcludeProjectFilter,
    HasCommentFilter,
    MeaningfulChangeFilter,
    NotFilter,
    OrFilter,
    build_default_filter,
)
from daily_report.models.activity import Activity
from daily_report.models.config import AppConfig

MakeActivity = Callable[..., Activity]


class AlwaysFilter(ActivityFilter):
    """Filter returning a fixed answer."""

    def __init__(self, answer: bool):
        self.answer = answer

    def evaluate(self, activity: Activity) -> bool:
        return self.answer

    def describe(self) -> str:
        return str(self.answer).lower()


class TestHasCommentFilter:
    """Tests for HasCommentFilter."""

    def test_passes_non_empty_comment(self, make_activity: MakeActivity) -> None:
        assert HasCommentFilter().evaluate(make_activity(comment="Done")) is True

    @pytest.mark.parametrize("body", ["", "   ", "\n\t "])
    def test_rejects_blank_comment(self, make_activity: MakeActivity, body: str) -> None:
        assert HasCommentFilter().evaluate(make_activity(comment=body)) is False

    def test_rejects_missing_comment(self, make_activity: MakeActivity) -> None:
        assert HasCommentFilter().evaluate(make_activity()) is False

    def test_rejects_null_comment_body(self) -> None:
        activity = Activity.model_validate(
            {
                "id": 1,
                "project": {"id": 1, "projectKey": "ABC", "name": "Alpha"},
                "type": 3,
                "content": {"comment": {"id": 5, "content": None}},
                "created": "2024-05-01T10:00:00Z",
            }
        )
        assert HasCommentFilter().evaluate(activity) is False


class TestExcludeProjectFilter:
    """Tests for ExcludeProjectFilter."""

    def test_rejects_excluded_key(self, make_activity: MakeActivity) -> None:
        f = ExcludeProjectFilter(["DAILY_REPORT"])
        assert f.evaluate(make_activity(project_key="DAILY_REPORT")) is False

    def test_passes_other_keys(self, make_activity: MakeActivity) -> None:
        f = ExcludeProjectFilter(["DAILY_REPORT"])
        assert f.evaluate(make_activity(project_key="ABC")) is True

    @pytest.mark.parametrize("key", ["daily_report", "Daily_Report", "DAILY_REPORT2"])
    def test_match_is_exact_and_case_sensitive(self, make_activity: MakeActivity, key: str) -> None:
        f = ExcludeProjectFilter(["DAILY_REPORT"])
        assert f.evaluate(make_activity(project_key=key)) is True

    def test_default_excludes_daily_report(self, make_activity: MakeActivity) -> None:
        assert ExcludeProjectFilter().evaluate(make_activity(project_key="DAILY_REPORT")) is False


class TestMeaningfulChangeFilter:
    """Tests for MeaningfulChangeFilter."""

    def test_no_changes_is_not_meaningful(self, make_activity: MakeActivity) -> None:
        assert MeaningfulChangeFilter().evaluate(make_activity()) is False

    def test_empty_changes_is_not_meaningful(self, make_activity: MakeActivity) -> None:
        assert MeaningfulChangeFilter().evaluate(make_activity(changes=[])) is False

    def test_null_changes_is_not_meaningful(self) -> None:
        activity = Activity.model_validate(
            {
                "id": 1,
                "project": {"id": 1, "projectKey": "ABC", "name": "Alpha"},
                "type": 2,
                "content": {"changes": None},
                "created": "2024-05-01T10:00:00Z",
            }
        )
        assert MeaningfulChangeFilter().evaluate(activity) is False

    @pytest.mark.parametrize("field", ["milestone", "limitDate", "dueDate", "期限日"])
    def test_single_milestone_change(self, make_activity: MakeActivity, field: str) -> None:
        activity = make_activity(changes=[change(field)])
        assert MeaningfulChangeFilter().evaluate(activity) is False

    @pytest.mark.parametrize("field", ["assigner", "assignee", "担当者"])
    def test_single_assignee_change(self, make_activity: MakeActivity, field: str) -> None:
        activity = make_activity(changes=[change(field)])
        assert MeaningfulChangeFilter().evaluate(activity) is False

    def test_single_change_matched_by_label(self, make_activity: MakeActivity) -> None:
        activity = make_activity(changes=[change("customField_12", field_text="担当")])
        assert MeaningfulChangeFilter().evaluate(activity) is False

    def test_single_other_change_is_meaningful(self, make_activity: MakeActivity) -> None:
        activity = make_activity(changes=[change("status", "Status")])
        assert MeaningfulChangeFilter().evaluate(activity) is True

    def test_all_milestone_changes_are_not_meaningful(self, make_activity: MakeActivity) -> None:
        activity = make_activity(changes=[change("milestone"), change("limitDate")])
        assert MeaningfulChangeFilter().evaluate(activity) is False

    def test_all_assignee_changes_are_not_meaningful(self, make_activity: MakeActivity) -> None:
        activity = make_activity(changes=[change("assigner"), change("x", field_text="担当者")])
        assert MeaningfulChangeFilter().evaluate(activity) is False

    def test_milestone_plus_other_is_meaningful(self, make_activity: MakeActivity) -> None:
        activity = make_activity(changes=[change("dueDate"), change("description")])
        assert MeaningfulChangeFilter().evaluate(activity) is True

    def test_milestone_plus_assignee_is_meaningful(self, make_activity: MakeActivity) -> None:
        # Neither "all milestone" nor "all assignee" holds for a mixed set
        activity = make_activity(changes=[change("dueDate"), change("assigner")])
        assert MeaningfulChangeFilter().evaluate(activity) is True

    def test_custom_field_sets(self, make_activity: MakeActivity) -> None:
        f = MeaningfulChangeFilter(milestone_fields=["sprint"], assignee_fields=["owner"])
        assert f.evaluate(make_activity(changes=[change("sprint")])) is False
        assert f.evaluate(make_activity(changes=[change("dueDate")])) is True


class TestCombinators:
    """Tests for AndFilter, OrFilter and NotFilter."""

    def test_empty_and_is_true(self, make_activity: MakeActivity) -> None:
        assert AndFilter([]).evaluate(make_activity()) is True

    def test_empty_or_is_false(self, make_activity: MakeActivity) -> None:
        assert OrFilter([]).evaluate(make_activity()) is False

    @pytest.mark.parametrize(
        ("answers", "expected_and", "expected_or"),
        [
            ([True, True], True, True),
            ([True, False], False, True),
            ([False, False], False, False),
        ],
    )
    def test_truth_tables(
        self,
        make_activity: MakeActivity,
        answers: list[bool],
        expected_and: bool,
        expected_or: bool,
    ) -> None:
        children = [AlwaysFilter(a) for a in answers]
        activity = make_activity()
        assert AndFilter(children).evaluate(activity) is expected_and
        assert OrFilter(children).evaluate(activity) is expected_or

    def test_not_is_exact_complement(self, make_activity: MakeActivity) -> None:
        activities = [
            make_activity(1, comment="hello"),
            make_activity(2, comment=" "),
            make_activity(3, changes=[change("dueDate")]),
            make_activity(4, project_key="DAILY_REPORT"),
        ]
        for base in (HasCommentFilter(), MeaningfulChangeFilter(), ExcludeProjectFilter()):
            negated = NotFilter(base)
            for activity in activities:
                assert base.evaluate(activity) != negated.evaluate(activity)

    def test_operators_build_combinators(self, make_activity: MakeActivity) -> None:
        expr = (HasCommentFilter() | MeaningfulChangeFilter()) & ~ExcludeProjectFilter(["ABC"])
        assert isinstance(expr, AndFilter)
        assert expr.evaluate(make_activity(project_key="ABC", comment="hi")) is True
        assert expr.evaluate(make_activity(project_key="XYZ", comment="hi")) is False

    def test_combinator_children_are_not_shared(self, make_activity: MakeActivity) -> None:
        children: list[ActivityFilter] = [AlwaysFilter(True)]
        combined = AndFilter(children)
        children.append(AlwaysFilter(False))
        assert combined.evaluate(make_activity()) is True

    def test_describe(self) -> None:
        expr = AndFilter([OrFilter([HasCommentFilter(), MeaningfulChangeFilter()])])
        assert expr.describe() == "((has_comment OR meaningful_change))"
        assert NotFilter(HasCommentFilter()).describe() == "NOT has_comment"


class TestDefaultFilter:
    """Tests for build_default_filter."""

    def test_comment_outside_excluded_project_passes(self, make_activity: MakeActivity) -> None:
        assert build_default_filter().evaluate(make_activity(comment="ok")) is True

    def test_meaningful_change_passes(self, make_activity: MakeActivity) -> None:
        activity = make_activity(changes=[change("status")])
        assert build_default_filter().evaluate(activity) is True

    def test_excluded_project_rejected_even_with_comment(self, make_activity: MakeActivity) -> None:
        activity = make_activity(project_key="DAILY_REPORT", comment="ok")
        assert build_default_filter().evaluate(activity) is False

    def test_uses_config_lists(self, make_activity: MakeActivity) -> None:
        config = AppConfig(excluded_project_keys=["ABC"], milestone_fields=["status"])
        f = build_default_filter(config)
        assert f.evaluate(make_activity(project_key="ABC", comment="ok")) is False
        assert f.evaluate(make_activity(project_key="XYZ", changes=[change("status")])) is False
