"""Summarize a work-item export (CSV or block text) as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from task_viewer.config import load_config, setup_logging
from task_viewer.pipeline import InputFormat, analyze, guess_format, read_payload

logger = logging.getLogger(__name__)


def main() -> int:
    config = load_config()
    setup_logging(config)

    parser = argparse.ArgumentParser(description="Summarize task-viewer exports")
    parser.add_argument("--data", required=True, help="Path to a CSV or block-text export")
    parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in InputFormat],
        help="Input format; guessed from the file extension when omitted",
    )
    parser.add_argument("--details", action="store_true", default=config.show_details, help="Include records")
    parser.add_argument("--output", help="Also write the JSON report to this path")
    args = parser.parse_args()

    data_path = Path(args.data)
    input_format = InputFormat.from_hint(args.format) if args.format else guess_format(data_path.name)
    try:
        payload = read_payload(data_path, config.max_input_bytes)
    except (OSError, ValueError) as exc:
        logger.error("Cannot read %s: %s", data_path, exc)
        return 1

    result = analyze(payload, input_format)
    report = {
        "input_format": result.input_format.value,
        "record_count": len(result.records),
        "summary": result.summary.to_dict(),
    }
    if args.details:
        report["records"] = [record.to_dict() for record in result.records]

    print(json.dumps(report, indent=2))

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
        print(f"Saved summary to {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
