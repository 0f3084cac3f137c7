import uuid
from dataclasses import dataclass, field, fields, replace
from typing import List, Optional

from gpa_tools.gpa_logic import TOP_GRADE, parse_credits

DEFAULT_CREDITS = "3"
DEFAULT_GRADE = TOP_GRADE
DEFAULT_TABLE_SIZE = 3


def new_row_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class CourseRow:
    """
    One course line of the calculator.

    `credits` is kept as the raw text the user typed; `credits_value` is the
    parsed number (None if it does not parse). `course` is only a label.
    """
    id: str = field(default_factory=new_row_id)
    course: str = ""
    credits: str = DEFAULT_CREDITS
    grade: str = DEFAULT_GRADE

    @property
    def credits_value(self) -> Optional[float]:
        return parse_credits(self.credits)


ROW_FIELDS = frozenset(f.name for f in fields(CourseRow))


# ------------------------
# Table lifecycle
# Every operation returns a new list; the list passed in is left alone.
# ------------------------
def new_row(**values) -> CourseRow:
    return CourseRow(**values)


def default_table(size: int = DEFAULT_TABLE_SIZE) -> List[CourseRow]:
    return [new_row() for _ in range(size)]


def add_row(rows: List[CourseRow]) -> List[CourseRow]:
    return [*rows, new_row()]


def update_row(rows: List[CourseRow], row_id: str, **changes) -> List[CourseRow]:
    unknown = set(changes) - ROW_FIELDS
    if unknown:
        raise TypeError(f"Unknown row fields: {sorted(unknown)}")
    if "id" in changes and changes["id"] != row_id:
        raise ValueError("A row's id cannot be changed")
    changes.pop("id", None)
    return [replace(r, **changes) if r.id == row_id else r for r in rows]


def remove_row(rows: List[CourseRow], row_id: str) -> List[CourseRow]:
    return [r for r in rows if r.id != row_id]


def reset_table() -> List[CourseRow]:
    return default_table()
