"""Demo script for task-viewer."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from task_viewer.config import load_config, setup_logging
from task_viewer.display import summary_rows
from task_viewer.pipeline import analyze

EXAMPLES_DIR = Path(__file__).resolve().parent


def main() -> None:
    setup_logging(load_config())
    for file_name, input_format in (("sample_dataset.csv", "tabular"), ("sample_tasks.txt", "block-text")):
        raw_text = (EXAMPLES_DIR / file_name).read_text(encoding="utf-8")
        result = analyze(raw_text, input_format)
        print(f"{file_name}: {len(result.records)} records")
        for label, value in summary_rows(result.summary).items():
            print(f"  {label}: {value}")


if __name__ == "__main__":
    main()
