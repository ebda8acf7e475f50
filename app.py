"""
Streamlit Student Grade Tracker

Add, search, sort, update and delete students, preview the chart of
averages and download the Excel report.
"""

import logging

import streamlit as st
import pandas as pd

from grade_tracker import (
    Registry,
    Response,
    SortKey,
    build_report,
    build_view,
    generate_workbook,
    load_config,
    round_half_up,
    seed_registry,
    validate_config,
    validate_students,
    workbook_to_bytes,
)

logger = logging.getLogger("app")

NO_SORT = "Insertion order"


# Page configuration
st.set_page_config(
    page_title="Student Grade Tracker",
    page_icon="📊",
    layout="wide",
)


def init_session_state():
    """Initialize session state with default values."""
    if "config" not in st.session_state:
        st.session_state.config = load_config()
        logging.basicConfig(
            level=st.session_state.config["log_level"],
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    if "registry" not in st.session_state:
        registry = Registry()
        seed_registry(registry, st.session_state.config["seed_students"])
        st.session_state.registry = registry
        logger.info("Seeded registry with %d students", len(registry))

    if "search" not in st.session_state:
        st.session_state.search = st.session_state.config["view"]["search"]

    if "sort" not in st.session_state:
        st.session_state.sort = st.session_state.config["view"]["sort"] or NO_SORT


def check_config(config: dict) -> bool:
    """Show configuration issues; False if any of them is an error."""
    issues = validate_config(config)
    for issue in issues:
        if issue["type"] == "error":
            st.error(f"❌ Config error: {issue['message']}")
        else:
            st.warning(f"⚠️ {issue['message']}")
    return not any(i["type"] == "error" for i in issues)


def current_view() -> tuple:
    """Records visible under the current search term and sort order."""
    sort = st.session_state.sort
    return build_view(
        st.session_state.registry.all(),
        st.session_state.search,
        None if sort == NO_SORT else sort,
    )


def records_to_df(records) -> pd.DataFrame:
    """Tabular view of records: name, grades, average, highest, lowest."""
    return pd.DataFrame(
        [
            {
                "Name": r.name,
                "Grades": r.grades.as_text(),
                "Average": float(round_half_up(r.average)),
                "Highest": r.highest,
                "Lowest": r.lowest,
            }
            for r in records
        ],
        columns=["Name", "Grades", "Average", "Highest", "Lowest"],
    )


def show_response(response: Response):
    if response.success:
        st.success(f"✓ {response.detail}")
    else:
        st.error(f"❌ {response.detail}")


def flash(response: Response):
    """Keep the response for the next run and rerun so every section sees the change."""
    st.session_state.flash = response
    st.rerun()


def render_add_student():
    """Render the add-student form."""
    st.header("Add Student")

    with st.form("add_student"):
        name = st.text_input("Student Name", key="add_name")
        grades = st.text_input("Grades (comma separated)", placeholder="85, 90, 78", key="add_grades")
        submitted = st.form_submit_button("Add Student", type="primary")

    if submitted:
        response = st.session_state.registry.add(name, grades)
        if not response.success:
            # keep the typed values so they can be corrected
            show_response(response)
            return
        del st.session_state["add_name"]
        del st.session_state["add_grades"]
        flash(response)


def render_students():
    """Render search, sort and the student table."""
    st.header("Students")

    col1, col2 = st.columns([2, 1])
    with col1:
        st.text_input("Search by name", key="search")
    with col2:
        st.selectbox("Sort", options=[NO_SORT] + SortKey.labels(), key="sort")

    view = current_view()
    st.dataframe(records_to_df(view), hide_index=True, use_container_width=True)
    st.caption(f"Showing {len(view)} of {len(st.session_state.registry)} students")

    for issue in validate_students(st.session_state.registry.all()):
        st.warning(f"⚠️ {issue['message']}")


def render_edit_student():
    """Render update/delete for a student picked from the visible view."""
    st.header("Update / Delete Student")

    view = current_view()
    if not view:
        st.info("No students to edit")
        return

    registry = st.session_state.registry
    labels = {r.record_id: f"{r.name} (#{r.record_id})" for r in view}
    if st.session_state.get("selected_record") not in labels:
        st.session_state.pop("selected_record", None)
    record_id = st.selectbox(
        "Select student",
        options=list(labels),
        format_func=labels.get,
        key="selected_record",
    )
    record = registry.get(record_id)
    if record is None:
        st.warning("Selected student no longer exists. Refresh the list.")
        return

    # Keys include the id so the fields are prefilled per selection
    name = st.text_input("Student Name", value=record.name, key=f"edit_name_{record_id}")
    grades = st.text_input(
        "Grades (comma separated)",
        value=record.grades.as_text(),
        key=f"edit_grades_{record_id}",
    )

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Update Selected", type="primary", key="update_selected"):
            flash(registry.update(record_id, name, grades))
    with col2:
        confirm = st.checkbox("Confirm delete", key=f"confirm_delete_{record_id}")
        if st.button("Delete Selected", disabled=not confirm, key="delete_selected"):
            flash(registry.delete(record_id))


def render_report():
    """Render the chart preview, report lines and the Excel download."""
    config = st.session_state.config
    st.header("Reports & Charts")

    report = build_report(current_view(), title=config["report"]["title"])
    if report.is_empty():
        st.info("No students to report")
        return

    st.subheader(config["chart"]["title"])
    st.bar_chart(report.to_frame().set_index("Student"))

    with st.expander("Report preview"):
        for line in report.lines:
            st.text(line)

    wb = generate_workbook(report, config)
    st.download_button(
        "📥 Download Excel Report",
        data=workbook_to_bytes(wb),
        file_name=config["output_file"],
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        type="primary",
    )


def main():
    """Main application entry point."""
    init_session_state()

    st.title("📊 Student Grade Tracker")

    if not check_config(st.session_state.config):
        st.stop()

    if "flash" in st.session_state:
        show_response(st.session_state.pop("flash"))

    render_add_student()
    st.divider()
    render_students()
    st.divider()
    render_edit_student()
    st.divider()
    render_report()


if __name__ == "__main__":
    main()
