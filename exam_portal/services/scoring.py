"""
Part scores and totals.

Scores travel as strings (that's what faculty type into the grid). They are
turned into a `PartScore` only when something has to be added up:

- "-"  -> NotApplicable (part not asked; different from a zero)
- "7"  -> Scored(7)
- ""   -> Scored(0)
- anything else ("3x", "-2", "abc", ten or more digits) -> Scored(0)

Malformed input is never rejected, it just doesn't score.
"""
import re
from dataclasses import dataclass
from typing import Iterable, Union

from exam_portal.core.config import NOT_APPLICABLE, PART_LABELS, QUESTION_LABELS, UNEVALUATED_SCORE
from exam_portal.schemas.evaluation import MarksRow

# no real mark runs past nine digits; longer runs are junk and score nothing
_UNSIGNED_INT = re.compile(r"\s*[0-9]{1,9}\s*")


@dataclass(frozen=True)
class Scored:
    points: int


@dataclass(frozen=True)
class NotApplicable:
    pass


PartScore = Union[Scored, NotApplicable]


def parse_part(value: str) -> PartScore:
    if value == NOT_APPLICABLE:
        return NotApplicable()
    if _UNSIGNED_INT.fullmatch(value):
        return Scored(int(value))
    return Scored(0)


def points(score: PartScore) -> int:
    if isinstance(score, NotApplicable):
        return 0
    return score.points


def format_part(score: PartScore) -> str:
    if isinstance(score, NotApplicable):
        return NOT_APPLICABLE
    return str(score.points)


def row_total(row: MarksRow) -> int:
    return sum(points(parse_part(v)) for v in row.parts.values())


def compute_total(marks: Iterable[MarksRow]) -> int:
    return sum(row_total(row) for row in marks)


def empty_marks() -> list[MarksRow]:
    """Placeholder grid for a script nobody has evaluated yet."""
    return [
        MarksRow(q=q, parts={label: UNEVALUATED_SCORE for label in PART_LABELS})
        for q in QUESTION_LABELS
    ]
