import pandas as pd
from typing import List

from gpa_tools.course_table import CourseRow, DEFAULT_GRADE, new_row

# ------------------------
# CSV helpers (UI-side)
# ------------------------

CSV_COLUMNS = ["Course", "Credits", "Grade"]


def _normalise_cols(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df.columns = [str(c).strip().lower() for c in df.columns]
    # allow singular "credit" and a couple of spellings of the course column
    if "credit" in df.columns and "credits" not in df.columns:
        df = df.rename(columns={"credit": "credits"})
    if "course" not in df.columns:
        for alias in ("course name", "name"):
            if alias in df.columns:
                df = df.rename(columns={alias: "course"})
                break
    return df


def read_csv_upload(uploaded_file) -> pd.DataFrame:
    # everything stays text, the calculator parses credits itself
    df = pd.read_csv(uploaded_file, dtype=str, keep_default_na=False)
    return _normalise_cols(df)


def validate_courses_csv(df: pd.DataFrame) -> pd.DataFrame:
    required = {"credits"}
    missing = required - set(df.columns)
    if missing:
        raise ValueError(f"Missing columns: {sorted(missing)}. Expected: Course, Credits, Grade.")
    out = df.copy()
    if "course" not in out.columns:
        out["course"] = ""
    if "grade" not in out.columns:
        out["grade"] = DEFAULT_GRADE
    out = out[["course", "credits", "grade"]]
    out = out.rename(columns={"course": "Course", "credits": "Credits", "grade": "Grade"})
    return out


def parse_courses(df: pd.DataFrame) -> List[CourseRow]:
    """
    Turn a validated frame into calculator rows with fresh ids.

    Bad credits or grades are kept as typed; they are left out of the
    GPA the same way a bad manual entry is.
    """
    rows = []
    for _, row in df.iterrows():
        rows.append(
            new_row(
                course=_cell_text(row.get("Course")),
                credits=_cell_text(row.get("Credits")),
                grade=_cell_text(row.get("Grade")).upper() or DEFAULT_GRADE,
            )
        )
    return rows


def rows_to_frame(rows: List[CourseRow]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Course": r.course, "Credits": r.credits, "Grade": r.grade} for r in rows],
        columns=CSV_COLUMNS,
    )


def rows_to_csv(rows: List[CourseRow]) -> str:
    return rows_to_frame(rows).to_csv(index=False)


def _cell_text(value) -> str:
    if value is None or pd.isna(value):
        return ""
    return str(value).strip()
