import pytest

from exam_portal.core.config import PART_LABELS, QUESTION_LABELS
from exam_portal.db.seed import GRADED_MARKS
from exam_portal.schemas.evaluation import MarksRow
from exam_portal.services.scoring import (
    NotApplicable,
    Scored,
    compute_total,
    empty_marks,
    format_part,
    parse_part,
    points,
    row_total,
)


def row(q="Q1", **parts) -> MarksRow:
    values = {label: "0" for label in PART_LABELS}
    values.update(parts)
    return MarksRow(q=q, parts=values)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("-", NotApplicable()),
        ("7", Scored(7)),
        ("0", Scored(0)),
        ("", Scored(0)),
        (" 4 ", Scored(4)),
        ("3x", Scored(0)),
        ("abc", Scored(0)),
        ("-2", Scored(0)),
        ("1.5", Scored(0)),
        ("999999999", Scored(999999999)),
        ("1" * 10, Scored(0)),
        ("1" * 5000, Scored(0)),
    ],
)
def test_parse_part(raw, expected):
    assert parse_part(raw) == expected


def test_not_applicable_is_not_zero():
    assert parse_part("-") != parse_part("0")
    assert format_part(NotApplicable()) == "-"
    assert format_part(Scored(5)) == "5"


def test_row_total_skips_dash_and_junk():
    assert row_total(row(a="2", b="3", c="5", d="4", e="-")) == 14
    assert row_total(row(a="3x", b="", c="-", d="10", e="1")) == 11


def test_seed_fixture_totals_seventy():
    assert [row_total(r) for r in GRADED_MARKS] == [14, 14, 14, 14, 14]
    assert compute_total(GRADED_MARKS) == 70


def test_compute_total_equals_sum_of_rows():
    marks = [row("Q1", a="9"), row("Q2", b="-", c="12"), row("Q3", e="oops")]
    assert compute_total(marks) == sum(row_total(r) for r in marks) == 21


def test_compute_total_of_nothing_is_zero():
    assert compute_total([]) == 0


def test_empty_marks_is_zero_grid():
    marks = empty_marks()
    assert [r.q for r in marks] == list(QUESTION_LABELS)
    assert all(set(r.parts.values()) == {"0"} for r in marks)
    assert compute_total(marks) == 0


def test_marks_row_rejects_wrong_part_keys():
    with pytest.raises(ValueError):
        MarksRow(q="Q1", parts={"a": "1", "b": "2"})
    with pytest.raises(ValueError):
        MarksRow(q="Q1", parts={"a": "1", "b": "2", "c": "3", "d": "4", "e": "5", "f": "6"})


def test_not_applicable_scores_nothing():
    assert points(NotApplicable()) == 0
    assert points(Scored(6)) == 6


def test_compute_total_survives_enormous_digit_strings():
    huge = "1" * 5000
    marks = [row("Q1", a=huge, b=huge, c="4"), row("Q2", a="9" * 9)]
    assert compute_total(marks) == 4 + 999999999
