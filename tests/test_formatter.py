"""Tests for grouping, ranking and projection of applications.

Covers:
1. All four aggregation modes
2. Score-descending order with stable ties
3. Not-found sentinel vs empty mapping
4. Projection drops only the grouping field
"""

import pytest

from collegeapps.aggregation.formatter import (
    AggregationMode,
    AllByApplicant,
    AllByCollege,
    SingleApplicant,
    SingleCollege,
    aggregate,
    group_records,
)
from collegeapps.models.domain import ApplicationRecord


def _rec(name, college, score):
    return ApplicationRecord(name=name, college=college, score=score)


class TestGroupRecords:
    """Test the shared group/sort/project primitive."""

    def test_groups_only_identical_keys(self):
        """Each group holds records with exactly that key."""
        records = [_rec("Ann", "MIT", 50), _rec("ann", "MIT", 60), _rec("Ann", "Yale", 70)]

        grouped = group_records(records, "name", ("college", "score"))

        assert set(grouped) == {"Ann", "ann"}
        assert len(grouped["Ann"]) == 2
        assert len(grouped["ann"]) == 1

    def test_groups_in_first_seen_order(self):
        """Group keys follow first appearance."""
        records = [_rec("Zed", "MIT", 1), _rec("Amy", "MIT", 2), _rec("Zed", "Yale", 3)]

        grouped = group_records(records, "name", ("college", "score"))

        assert list(grouped) == ["Zed", "Amy"]

    def test_scores_non_increasing(self):
        """Entries within a group are sorted by score descending."""
        records = [_rec("Ann", c, s) for c, s in [("AAA", 40), ("BBB", 95), ("CCC", 70), ("DDD", 88)]]

        entries = group_records(records, "name", ("college", "score"))["Ann"]

        scores = [e["score"] for e in entries]
        assert scores == sorted(scores, reverse=True)

    def test_equal_scores_keep_input_order(self):
        """Ties keep their relative input order."""
        records = [
            _rec("Kim", "first", 80),
            _rec("Lee", "first", 90),
            _rec("Max", "first", 80),
            _rec("Ned", "first", 80),
        ]

        entries = group_records(records, "college", ("name", "score"))["first"]

        assert [e["name"] for e in entries] == ["Lee", "Kim", "Max", "Ned"]

    def test_projection_drops_only_grouping_field(self):
        """Entries carry exactly the two retained fields."""
        grouped = group_records([_rec("Ann", "MIT", 90)], "name", ("college", "score"))

        assert grouped["Ann"] == [{"college": "MIT", "score": 90}]
        assert set(grouped["Ann"][0]) | {"name"} == {"name", "college", "score"}

    def test_projection_preserves_types(self):
        """Score stays a number, names stay text."""
        grouped = group_records([_rec("Ann", "MIT", 87.5)], "college", ("name", "score"))

        entry = grouped["MIT"][0]
        assert entry["score"] == 87.5
        assert isinstance(entry["score"], float)
        assert isinstance(entry["name"], str)


class TestAggregateAllModes:
    """Test the all-by-applicant and all-by-college views."""

    def test_all_by_college(self, scenario_b_records):
        """Colleges map to applicants ranked by score."""
        result = aggregate(scenario_b_records, AllByCollege())

        assert result == {
            "Yale": [{"name": "Carol", "score": 80}, {"name": "Bob", "score": 70}],
            "Harvard": [{"name": "Bob", "score": 95}],
        }

    def test_all_by_applicant(self, scenario_b_records):
        """Applicants map to colleges ranked by score."""
        result = aggregate(scenario_b_records, AllByApplicant())

        assert result == {
            "Bob": [{"college": "Harvard", "score": 95}, {"college": "Yale", "score": 70}],
            "Carol": [{"college": "Yale", "score": 80}],
        }

    def test_all_by_applicant_empty(self):
        """Empty input gives an empty mapping, not the not-found sentinel."""
        result = aggregate([], AllByApplicant())

        assert result == {}
        assert result is not None

    def test_all_by_college_empty(self):
        """Empty input gives an empty mapping."""
        assert aggregate([], AllByCollege()) == {}


class TestAggregateSingleModes:
    """Test the single-applicant and single-college views."""

    def test_single_applicant(self, scenario_b_records):
        """One applicant's applications, best first."""
        result = aggregate(scenario_b_records, SingleApplicant("Bob"))

        assert result == {
            "name": "Bob",
            "applications": [
                {"college": "Harvard", "score": 95},
                {"college": "Yale", "score": 70},
            ],
        }

    def test_single_applicant_equal_scores_stable(self):
        """Duplicate records with equal scores keep insertion order."""
        first = _rec("Dan", "MIT", 60)
        second = _rec("Dan", "MIT", 60)

        result = aggregate([first, second], SingleApplicant("Dan"))

        assert result["applications"] == [
            {"college": "MIT", "score": 60},
            {"college": "MIT", "score": 60},
        ]

    def test_single_applicant_ignores_other_applicants(self, scenario_b_records):
        """Records for other names are filtered out."""
        result = aggregate(scenario_b_records, SingleApplicant("Carol"))

        assert result == {"name": "Carol", "applications": [{"college": "Yale", "score": 80}]}

    def test_single_applicant_not_found(self, scenario_b_records):
        """No match returns the not-found sentinel."""
        assert aggregate(scenario_b_records, SingleApplicant("Alice")) is None

    def test_single_applicant_empty_input(self):
        """Empty input returns the not-found sentinel."""
        assert aggregate([], SingleApplicant("Alice")) is None

    def test_single_college(self, scenario_b_records):
        """One college's applicants, best first."""
        result = aggregate(scenario_b_records, SingleCollege("Yale"))

        assert result == {
            "college": "Yale",
            "applications": [{"name": "Carol", "score": 80}, {"name": "Bob", "score": 70}],
        }

    def test_single_college_not_found(self):
        """Empty input for a college lookup returns the sentinel."""
        assert aggregate([], SingleCollege("Brown")) is None


class TestAggregateUnknownMode:
    """Unrecognized modes fail loudly."""

    @pytest.mark.parametrize(
        "mode", [AllByApplicant(), SingleApplicant("Ann"), AllByCollege(), SingleCollege("MIT")]
    )
    def test_mode_type_covers_all_variants(self, mode):
        """AggregationMode is the union of the four mode types."""
        assert isinstance(mode, AggregationMode)

    def test_mode_type_excludes_strings(self):
        """Plain strings are not aggregation modes."""
        assert not isinstance("colleges", AggregationMode)

    @pytest.mark.parametrize("mode", ["all", "colleges", None, object()])
    def test_unknown_mode_raises(self, mode):
        """Anything but the four mode types raises TypeError."""
        with pytest.raises(TypeError, match="Unknown aggregation mode"):
            aggregate([], mode)
