"""Block-text adapter for work items copied from the platform's task list.

Each work item is an 8-line block::

    0  date
    1  item id
    2  category / project
    3  (blank)
    4  duration, rate and payout, e.g. "1h 30m $10.00/hr $15.00"
    5  pay type label
    6  (blank)
    7  status

Anything that does not fit the shape is treated as noise and skipped one
line at a time.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator

from task_viewer.coercion import coerce_currency, coerce_rate
from task_viewer.durations import parse_duration
from task_viewer.schema import PLACEHOLDER, PayType, WorkRecord

logger = logging.getLogger(__name__)

BLOCK_SIZE = 8
_FILLED_LINES = (0, 1, 2, 4, 5, 7)
_BLANK_LINES = (3, 6)


class _State(Enum):
    EXPECT_BLANK_OR_START = "expect_blank_or_start"
    MATCHING_BLOCK = "matching_block"
    REJECT = "reject"


def split_amounts(line: str) -> tuple[str, float, float]:
    """Split the amounts line into (duration, rate, value).

    Tokens are claimed right to left: the payout is the last token when it
    starts with "$" and is not a rate, the rate is the token before it (or
    the last token when there is no payout). Whatever is left is the
    duration.
    """

    tokens = line.split()
    end = len(tokens)

    value = 0.0
    if end and tokens[end - 1].startswith("$") and "/hr" not in tokens[end - 1]:
        value = coerce_currency(tokens[end - 1])
        end -= 1

    rate = 0.0
    if end:
        candidate = tokens[end - 1]
        if ("$" in candidate and "/hr" in candidate) or candidate.startswith("$"):
            rate = coerce_rate(candidate)
            end -= 1

    duration_tokens = tokens[:end]
    if not duration_tokens or all(token == PLACEHOLDER for token in duration_tokens):
        duration = PLACEHOLDER
    else:
        duration = " ".join(duration_tokens)
    if duration.startswith("$"):
        duration = PLACEHOLDER

    return duration, rate, value


def _matches_shape(block: list[str]) -> bool:
    return all(block[i].strip() for i in _FILLED_LINES) and not any(block[i].strip() for i in _BLANK_LINES)


def _build_record(block: list[str]) -> WorkRecord:
    duration, rate, value = split_amounts(block[4])
    raw_type = block[5].strip()
    return WorkRecord(
        date=block[0].strip(),
        id=block[1].strip(),
        category=block[2].strip(),
        duration=duration,
        duration_minutes=parse_duration(duration),
        rate=rate,
        value=value,
        pay_type=PayType.from_source(raw_type),
        raw_type=raw_type,
        status=block[7].strip(),
    )


class BlockScanner:
    """Line cursor that recovers 8-line blocks from free-form text."""

    def __init__(self, lines: list[str]):
        self._lines = lines
        self._cursor = 0
        self._state = _State.EXPECT_BLANK_OR_START

    @property
    def cursor(self) -> int:
        return self._cursor

    def records(self) -> Iterator[WorkRecord]:
        lines = self._lines
        while self._cursor < len(lines):
            if self._state is _State.EXPECT_BLANK_OR_START:
                if lines[self._cursor].strip():
                    self._state = _State.MATCHING_BLOCK
                else:
                    self._cursor += 1

            elif self._state is _State.MATCHING_BLOCK:
                block = lines[self._cursor : self._cursor + BLOCK_SIZE]
                if len(block) < BLOCK_SIZE:
                    logger.debug("Dropping %d trailing lines, not enough for a block", len(block))
                    self._cursor = len(lines)
                elif _matches_shape(block):
                    yield _build_record(block)
                    self._cursor += BLOCK_SIZE
                    self._state = _State.EXPECT_BLANK_OR_START
                else:
                    self._state = _State.REJECT

            else:
                logger.debug("Line %d does not start a block, skipping", self._cursor + 1)
                self._cursor += 1
                self._state = _State.EXPECT_BLANK_OR_START


def parse_text(raw_text: str) -> list[WorkRecord]:
    """Parse block-text content into work records, in source order."""

    records = list(BlockScanner(raw_text.split("\n")).records())
    logger.info("Parsed %d records from text", len(records))
    return records


def parse(file_path: str) -> list[WorkRecord]:
    """Parse a block-text file into a list of work records."""

    with open(file_path, encoding="utf-8-sig") as handle:
        return parse_text(handle.read())
