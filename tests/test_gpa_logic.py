import itertools
import math

import pytest

from gpa_tools.course_table import new_row, reset_table
from gpa_tools.gpa_logic import (
    GRADE_POINTS,
    GPASummary,
    compute_summary,
    format_credits,
    format_gpa,
    format_points,
    gpa_progress,
    grade_options,
    grade_points,
    parse_credits,
)


def rows_of(*pairs):
    return [new_row(credits=c, grade=g) for c, g in pairs]


# ------------------------
# Grade scale
# ------------------------

def test_grade_scale_values():
    assert grade_options() == ["A+", "A", "A-", "B+", "B", "B-", "C+", "C", "C-", "D+", "D", "F"]
    assert GRADE_POINTS["A+"] == 4.0
    assert GRADE_POINTS["B-"] == 2.7
    assert GRADE_POINTS["F"] == 0.0
    assert all(0.0 <= p <= 4.0 for p in GRADE_POINTS.values())


def test_grade_scale_is_read_only():
    with pytest.raises(TypeError):
        GRADE_POINTS["A"] = 5.0


def test_unknown_grade_is_zero_points():
    assert grade_points("E") == 0.0
    assert grade_points(None) == 0.0


# ------------------------
# Credits parsing
# ------------------------

@pytest.mark.parametrize(
    "text, expected",
    [
        ("3", 3.0), (" 4.5 ", 4.5), ("-1", -1.0), ("0", 0.0), ("1e1", 10.0),
        (".5", 0.5), ("3.", 3.0), ("0x10", 16.0), ("0b11", 3.0),
    ],
)
def test_parse_credits_numbers(text, expected):
    assert parse_credits(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "abc", "3 credits", "nan", "inf", "-inf", "Infinity", "1_0", "\uff13", "0x", "0b2", "--1", "1e", None],
)
def test_parse_credits_rejects_non_numbers(text):
    assert parse_credits(text) is None


# ------------------------
# compute_summary
# ------------------------

def test_two_courses():
    summary = compute_summary(rows_of(("3", "A"), ("4", "B")))
    assert summary.quality_points == 24.0
    assert summary.total_credits == 7.0
    assert summary.gpa == pytest.approx(24 / 7)
    assert round(summary.gpa, 4) == 3.4286


def test_negative_credits_are_excluded():
    summary = compute_summary(rows_of(("3", "A"), ("-1", "A")))
    assert summary == GPASummary(4.0, 3.0, 12.0)


def test_empty_table():
    assert compute_summary([]) == (0, 0, 0)


def test_all_rows_invalid():
    summary = compute_summary(rows_of(("0", "A"), ("-2", "B"), ("abc", "C"), ("", "A")))
    assert summary == (0.0, 0.0, 0.0)


def test_unknown_grade_counts_credits_only():
    summary = compute_summary(rows_of(("3", "Z")))
    assert summary.total_credits == 3.0
    assert summary.quality_points == 0.0
    assert summary.gpa == 0.0


def test_gpa_is_quality_over_credits_and_in_range():
    rows = rows_of(("3", "A-"), ("4", "C+"), ("1.5", "F"), ("2", "B+"))
    summary = compute_summary(rows)
    assert summary.gpa == summary.quality_points / summary.total_credits
    assert 0.0 <= summary.gpa <= 4.0


def test_order_does_not_matter():
    rows = rows_of(("3", "A-"), ("0.1", "B+"), ("4", "C"), ("0.2", "D+"), ("2.7", "B"))
    expected = compute_summary(rows)
    for perm in itertools.permutations(rows):
        assert compute_summary(perm) == expected


def test_accepts_any_iterable():
    rows = rows_of(("3", "A"), ("3", "B"))
    assert compute_summary(iter(rows)) == compute_summary(rows)


def test_course_name_does_not_matter():
    a = [new_row(course="Calculus I", credits="3", grade="B")]
    b = [new_row(course="", credits="3", grade="B")]
    assert compute_summary(a) == compute_summary(b)


def test_default_table_summary():
    assert compute_summary(reset_table()) == GPASummary(4.0, 9.0, 36.0)


# ------------------------
# Display helpers
# ------------------------

def test_format_gpa_places():
    summary = compute_summary(rows_of(("3", "A"), ("4", "B")))
    assert format_gpa(summary, 2) == "3.43"
    assert format_gpa(summary, 3) == "3.429"


def test_format_gpa_without_credits():
    summary = compute_summary([])
    assert format_gpa(summary, 2) == "0.00"
    assert format_gpa(summary, 3) == "0.000"


def test_format_points_and_credits():
    assert format_points(24.0) == "24.00"
    assert format_points(8.1) == "8.10"
    assert format_credits(9.0) == "9"
    assert format_credits(7.5) == "7.5"


def test_gpa_progress():
    assert gpa_progress(GPASummary(4.0, 3.0, 12.0)) == 100.0
    assert gpa_progress(GPASummary(3.0, 3.0, 9.0)) == 75.0
    assert gpa_progress(GPASummary(0.0, 0.0, 0.0)) == 0.0
    assert gpa_progress(GPASummary(math.nan, math.inf, math.inf)) == 0.0


def test_digit_separators_are_not_counted():
    summary = compute_summary(rows_of(("1_0", "A"), ("3", "B")))
    assert summary == GPASummary(3.0, 3.0, 9.0)


def test_large_values_format_in_full():
    summary = compute_summary(rows_of(("3e25", "A")))
    assert summary.quality_points == 1.2e26
    assert format_points(summary.quality_points) == "120000000000000000000000000.00"
    assert format_gpa(summary, 2) == "4.00"
    assert format_gpa(summary, 3) == "4.000"
    assert format_credits(summary.total_credits) == "3e+25"


def test_format_non_finite():
    assert format_points(math.inf) == "inf"
    assert format_points(math.nan) == "nan"


def test_format_credits_keeps_whole_numbers():
    assert format_credits(1234567.0) == "1234567"
    assert format_credits(0.0) == "0"
