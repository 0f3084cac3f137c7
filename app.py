import streamlit as st
from gpa_tools.app_logger import setup_logging, get_logger
from gpa_tools.gpa_logic import *
from gpa_tools.course_table import *
from gpa_tools.io_csv import *

# ------------------------
# Streamlit UI (GPA calculator with optional CSV upload)
# ------------------------

setup_logging()
logger = get_logger("app")

st.set_page_config(
    page_title="GPA Calculator and Grade Tools | Free 4.0 Scale GPA Calculator",
    page_icon="🎓",
    layout="wide",
)

st.markdown(
    """
    <style>
    .gpa-footer {
        padding: 12px 16px;
        border-top: 1px solid #99f6e4;
        background: #f9fafb;
        border-radius: 0 0 14px 14px;
        font-size: 15px;
    }
    </style>
    """,
    unsafe_allow_html=True
)

if "rows" not in st.session_state:
    st.session_state["rows"] = default_table()
if "csv_error" not in st.session_state:
    st.session_state["csv_error"] = None


# ------------------------
# Table callbacks (one lifecycle operation each)
# ------------------------

def _set_rows(rows):
    st.session_state["rows"] = rows


def _on_field_change(row_id, field_name):
    value = st.session_state[f"{field_name}_{row_id}"]
    logger.debug("update row %s: %s=%r", row_id, field_name, value)
    _set_rows(update_row(st.session_state["rows"], row_id, **{field_name: value}))


def _on_remove(row_id):
    logger.debug("remove row %s", row_id)
    _set_rows(remove_row(st.session_state["rows"], row_id))


def _on_add():
    rows = add_row(st.session_state["rows"])
    logger.debug("add row %s", rows[-1].id)
    _set_rows(rows)


def _on_reset():
    logger.debug("reset table")
    _set_rows(reset_table())


def _on_load_csv():
    uploaded = st.session_state.get("courses_csv")
    if uploaded is None:
        st.session_state["csv_error"] = "Choose a CSV file to load first."
        return
    try:
        rows = parse_courses(validate_courses_csv(read_csv_upload(uploaded)))
    except ValueError as e:
        logger.warning("could not load courses CSV: %s", e)
        st.session_state["csv_error"] = str(e)
        return
    logger.info("loaded %d courses from CSV", len(rows))
    st.session_state["csv_error"] = None
    _set_rows(rows)


rows = st.session_state["rows"]
summary = compute_summary(rows)

# ------------------------
# Header + instant preview
# ------------------------

st.title("🎓 Free GPA Calculator for Students")
st.write(
    "Compute your semester GPA in seconds. Enter each course with its credit hours "
    "and letter grade; the calculator uses the standard 4.0 scale."
)

st.subheader("Instant GPA preview")
col1, col2, col3 = st.columns(3)
with col1:
    st.metric("GPA", format_gpa(summary, 2))
with col2:
    st.metric("Total credits", format_credits(summary.total_credits))
with col3:
    st.metric("Quality points", format_points(summary.quality_points))

st.progress(int(round(gpa_progress(summary))), text="GPA progress toward 4.0")

# ------------------------
# Calculator table
# ------------------------

st.markdown("---")
st.subheader("GPA Calculator")
st.markdown("Enter your courses, credits, and grades. Courses with missing or zero credits are not counted.")

head1, head2, head3, head4 = st.columns([6, 2, 2, 1])
head1.markdown("**Course**")
head2.markdown("**Credits**")
head3.markdown("**Grade**")

options = grade_options()

for row in rows:
    c1, c2, c3, c4 = st.columns([6, 2, 2, 1])
    with c1:
        st.text_input(
            "Course name",
            value=row.course,
            key=f"course_{row.id}",
            placeholder="e.g., Calculus I",
            label_visibility="collapsed",
            on_change=_on_field_change,
            args=(row.id, "course"),
        )
    with c2:
        st.text_input(
            "Credit hours",
            value=row.credits,
            key=f"credits_{row.id}",
            placeholder=DEFAULT_CREDITS,
            label_visibility="collapsed",
            on_change=_on_field_change,
            args=(row.id, "credits"),
        )
    with c3:
        st.selectbox(
            "Letter grade",
            options,
            index=options.index(row.grade) if row.grade in options else None,
            key=f"grade_{row.id}",
            label_visibility="collapsed",
            on_change=_on_field_change,
            args=(row.id, "grade"),
        )
    with c4:
        st.button("Remove", key=f"remove_{row.id}", on_click=_on_remove, args=(row.id,))

if not rows:
    st.info("No courses yet. Click **Add course** to start.")

st.markdown(
    f'<div class="gpa-footer"><b>GPA:</b> {format_gpa(summary, 3)} &middot; '
    f"<b>Credits:</b> {format_credits(summary.total_credits)} &middot; "
    f"<b>Quality Points:</b> {format_points(summary.quality_points)}</div>",
    unsafe_allow_html=True
)

b1, b2, _ = st.columns([1, 1, 6])
with b1:
    st.button("Add course", key="add_row", type="primary", on_click=_on_add)
with b2:
    st.button("Reset", key="reset_table", on_click=_on_reset)

# ------------------------
# CSV import / export
# ------------------------

with st.expander("Import or export your courses (CSV)"):
    st.file_uploader(
        "Upload a courses CSV (Course, Credits, Grade)",
        type=["csv"],
        key="courses_csv",
    )
    st.button("Load courses from CSV", key="load_csv", on_click=_on_load_csv)
    if st.session_state["csv_error"]:
        st.error(f"Courses CSV error: {st.session_state['csv_error']}")

    st.download_button(
        "Download courses as CSV",
        data=rows_to_csv(rows),
        file_name="courses.csv",
        mime="text/csv",
        key="download_csv",
    )


st.header("FAQ")

st.subheader("How do I calculate GPA?")
st.write(
    "Enter each course with its credit hours and letter grade. The calculator multiplies "
    "grade points by credits, sums everything, then divides by total credits. "
    "Example: an A in a 3 credit course is 4.0 × 3 = 12 quality points."
)

st.subheader("What GPA scale does this tool use?")
st.write(
    "The standard unweighted 4.0 scale: A+ and A are 4.0, A- 3.7, B+ 3.3, B 3.0, B- 2.7, "
    "C+ 2.3, C 2.0, C- 1.7, D+ 1.3, D 1.0 and F 0.0."
)

st.subheader("Is the GPA calculator free?")
st.write("Yes. The GPA calculator is free to use for everyone.")

st.subheader("What data do you collect or store?")
st.write(
    "This tool does **not** store, save, or transmit your data. "
    "Courses and grades you enter live only in your browser session "
    "and are cleared when you refresh or close the page."
)
