from ui_demo_streamlit.app import run_analysis

BLOCK_TEXT = "\n".join(
    ["2024-01-01", "T1", "Proj A", "", "1h 30m $10.00/hr $15.00", "Task", "", "Approved"]
)


def test_run_analysis_payload():
    result = run_analysis(BLOCK_TEXT, "block-text", show_details=True)
    assert result["has_results"] is True
    assert result["record_count"] == 1
    assert result["input_format"] == "block-text"
    assert result["summary"]["Total hours"] == "1.50 h (1h 30min)"
    assert result["hour_percentages"]["Task"] == 100.0
    assert result["records"][0]["Duration"] == "1h 30m"


def test_run_analysis_without_details():
    result = run_analysis(BLOCK_TEXT, "text")
    assert result["records"] == []


def test_run_analysis_empty():
    result = run_analysis("", "tabular")
    assert result["has_results"] is False
    assert result["summary"]["Tasks"] == "0"
