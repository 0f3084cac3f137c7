import math
import re
from types import MappingProxyType
from typing import Iterable, NamedTuple, Optional
import numpy as np
from decimal import Decimal, ROUND_HALF_UP, localcontext

# ------------------------
# Grade scale (standard 4.0)
# ------------------------
GRADE_POINTS = MappingProxyType({
    "A+": 4.0,
    "A": 4.0,
    "A-": 3.7,
    "B+": 3.3,
    "B": 3.0,
    "B-": 2.7,
    "C+": 2.3,
    "C": 2.0,
    "C-": 1.7,
    "D+": 1.3,
    "D": 1.0,
    "F": 0.0,
})

SCALE_MAX = 4.0
TOP_GRADE = "A"


def grade_options():
    return list(GRADE_POINTS.keys())


def grade_points(grade) -> float:
    # unknown symbols count as zero points rather than failing
    return GRADE_POINTS.get(grade, 0.0)


# ------------------------
# Core logic
# ------------------------
class GPASummary(NamedTuple):
    gpa: float
    total_credits: float
    quality_points: float


# plain ASCII number syntax only: no digit separators, no non-ASCII digits
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_PREFIXED_INT = re.compile(r"0([xXoObB])([0-9a-fA-F]+)")
_PREFIX_BASES = {"x": 16, "o": 8, "b": 2}


def parse_credits(text) -> Optional[float]:
    """
    Parse the raw credits text of a row.

    Returns the value as a float, or None if the text is not a number
    or is not finite (nan / inf). Sign is not checked here.
    """
    if text is None:
        return None
    text = str(text).strip()
    match = _PREFIXED_INT.fullmatch(text)
    if match:
        # 0x / 0o / 0b integers; a digit outside the base fails the parse
        try:
            return float(int(match.group(2), _PREFIX_BASES[match.group(1).lower()]))
        except (ValueError, OverflowError):
            return None
    if not _DECIMAL.fullmatch(text):
        return None
    value = float(text)
    if not np.isfinite(value):
        return None
    return value


def _total(values) -> float:
    try:
        return math.fsum(values)
    except OverflowError:
        return float(sum(values))


def compute_summary(rows: Iterable) -> GPASummary:
    """
    rows: iterable of CourseRow-like objects with `credits_value` (parsed
          credits, None on a failed parse) and `grade` attributes
    returns: GPASummary(gpa, total_credits, quality_points)

    Rows whose credits do not parse, or parse to <= 0, are skipped. An unknown
    grade contributes its credits with zero grade points.
    """
    credits_counted = []
    points_counted = []

    for row in rows:
        credits = row.credits_value
        if credits is None or credits <= 0:
            continue
        credits_counted.append(credits)
        points_counted.append(credits * grade_points(row.grade))

    # fsum is exactly rounded, so the totals do not depend on row order
    total_credits = _total(credits_counted)
    quality_points = _total(points_counted)

    if total_credits > 0:
        gpa = quality_points / total_credits
    else:
        gpa = 0.0

    return GPASummary(gpa, total_credits, quality_points)


# ------------------------
# Display helpers
# ------------------------
def format_fixed(x: float, places: int) -> str:
    if not np.isfinite(x):
        return str(x)
    value = Decimal(str(x))
    quantum = Decimal(1).scaleb(-places)
    # room for every integer digit plus the requested places
    with localcontext() as ctx:
        ctx.prec = max(28, value.adjusted() + places + 2)
        return str(value.quantize(quantum, rounding=ROUND_HALF_UP))


def format_gpa(summary: GPASummary, places: int = 2) -> str:
    if summary.total_credits <= 0:
        return format_fixed(0.0, places)
    return format_fixed(summary.gpa, places)


def format_points(value: float, places: int = 2) -> str:
    return format_fixed(value, places)


def format_credits(value: float) -> str:
    # 9.0 -> "9", 1234567.0 -> "1234567", 7.5 -> "7.5", 3e25 -> "3e+25"
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def gpa_progress(summary: GPASummary, scale_max: float = SCALE_MAX) -> float:
    """Share of the grade scale reached, as a percentage in [0, 100]."""
    if scale_max <= 0 or not np.isfinite(summary.gpa):
        return 0.0
    pct = summary.gpa / scale_max * 100.0
    return float(np.clip(pct, 0.0, 100.0))
