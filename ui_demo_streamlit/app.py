"""Streamlit UI for task-viewer."""

from __future__ import annotations

import logging
from typing import Any

from task_viewer.config import load_config, setup_logging
from task_viewer.display import format_records, hour_percentages, summary_rows
from task_viewer.pipeline import InputFormat, analyze, guess_format

logger = logging.getLogger(__name__)

FORMAT_OPTIONS = {
    "Block text (copied task list)": InputFormat.BLOCK_TEXT,
    "CSV": InputFormat.TABULAR,
}


def _decode_uploaded(uploaded_file, max_bytes: int) -> str:
    data = uploaded_file.getvalue()
    if len(data) > max_bytes:
        raise ValueError(f"{uploaded_file.name} is larger than the {max_bytes} byte limit")
    return data.decode("utf-8-sig")


def run_analysis(raw_text: str, input_format: InputFormat | str, show_details: bool = False) -> dict[str, Any]:
    """Run the pipeline and return a UI-friendly result payload."""

    result = analyze(raw_text, input_format)
    task_pct, exceeded_pct, other_pct = hour_percentages(result.summary)
    return {
        "has_results": bool(result.records),
        "input_format": result.input_format.value,
        "record_count": len(result.records),
        "summary": summary_rows(result.summary),
        "hour_percentages": {"Task": task_pct, "Exceeded Time": exceeded_pct, "Other": other_pct},
        "records": format_records(result.records) if show_details else [],
    }


def main() -> None:
    import streamlit as st

    config = load_config()
    setup_logging(config)

    st.set_page_config(page_title="Task Viewer", layout="wide")
    st.title("Task Viewer")

    with st.sidebar:
        st.header("Input")
        uploaded = st.file_uploader("Upload export", type=["csv", "txt"])
        format_labels = list(FORMAT_OPTIONS)
        try:
            default_format = InputFormat.from_hint(config.default_format)
        except ValueError:
            logger.warning("Unknown default format %r, using block text", config.default_format)
            default_format = InputFormat.BLOCK_TEXT
        default_index = [FORMAT_OPTIONS[label] for label in format_labels].index(default_format)
        format_label = st.radio("Pasted text format", format_labels, index=default_index)
        show_details = st.checkbox("Show task details", value=config.show_details)
        run = st.button("Analyze", type="primary")

    raw_text = st.text_area("Paste your task list", height=240)

    if not run:
        st.info("Paste a task list or upload an export, then click **Analyze**.")
        return

    try:
        if uploaded is not None:
            payload = _decode_uploaded(uploaded, config.max_input_bytes)
            input_format = guess_format(uploaded.name)
        elif raw_text.strip():
            if len(raw_text.encode("utf-8")) > config.max_input_bytes:
                raise ValueError(f"Pasted text is larger than the {config.max_input_bytes} byte limit")
            payload = raw_text
            input_format = FORMAT_OPTIONS[format_label]
        else:
            st.error("Please paste a task list or upload a file.")
            return

        result = run_analysis(payload, input_format, show_details=show_details)
    except (ValueError, UnicodeDecodeError) as exc:
        st.error(f"Input error: {exc}")
        return

    if not result["has_results"]:
        st.warning("No tasks were found in the input.")
        return

    st.success(f"Loaded {result['record_count']} records ({result['input_format']}).")

    st.subheader("Summary")
    summary = result["summary"]
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Tasks", summary["Tasks"])
    c2.metric("Total hours", summary["Total hours"])
    c3.metric("Total value", summary["Total value"])
    c4.metric("Average hourly rate", summary["Average hourly rate"])
    st.table([summary])

    st.subheader("Hours by type")
    for label, pct in result["hour_percentages"].items():
        st.write(f"{label}: {pct:.1f}%")
        st.progress(min(100, int(round(pct))))

    if show_details:
        st.subheader("Task details")
        st.dataframe(result["records"])


if __name__ == "__main__":
    main()
