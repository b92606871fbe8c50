"""
Task code resolution from a free-form lookup sheet.

The task code sheet has no fixed layout. Every cell containing the master
control marker ("總控") is treated as a candidate task code row; the code is
taken from column B (falling back to column A) and the shift it belongs to is
inferred from keywords anywhere in the row.

Keyword rules are an ordered list so further locales can be appended without
touching the scan itself. When no rule matches, the code fills the first
still-empty bucket in early/middle/late order.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from shift_converter.logics.shift_classifier import ShiftBucket, cell_to_text

logger = logging.getLogger(__name__)

MASTER_MARKER = "總控"

SHIFT_SUFFIXES: Dict[str, str] = {
    ShiftBucket.EARLY: "早",
    ShiftBucket.MIDDLE: "中",
    ShiftBucket.LATE: "晚",
}

BUCKET_ORDER: Tuple[str, ...] = (ShiftBucket.EARLY, ShiftBucket.MIDDLE, ShiftBucket.LATE)


@dataclass(frozen=True)
class ShiftKeywordRule:
    """Keywords that mark a lookup row as belonging to one shift bucket."""
    bucket: str
    keywords: Tuple[str, ...]

    def matches(self, row_text: str) -> bool:
        lowered = row_text.lower()
        return any(keyword.lower() in lowered for keyword in self.keywords)


DEFAULT_SHIFT_RULES: Tuple[ShiftKeywordRule, ...] = (
    ShiftKeywordRule(ShiftBucket.EARLY, ("早", "morning")),
    ShiftKeywordRule(ShiftBucket.MIDDLE, ("中", "middle")),
    ShiftKeywordRule(ShiftBucket.LATE, ("晚", "evening", "night")),
)


@dataclass
class TaskCodeSet:
    early: Optional[str] = None
    middle: Optional[str] = None
    late: Optional[str] = None

    def get(self, bucket: str) -> Optional[str]:
        return getattr(self, bucket)

    def set(self, bucket: str, code: Optional[str]) -> None:
        setattr(self, bucket, code)

    def code_for(self, bucket: str) -> str:
        """Resolved code for the bucket, or the marker default when unset."""
        return self.get(bucket) or fallback_task_code(bucket)

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"early": self.early, "middle": self.middle, "late": self.late}


def fallback_task_code(bucket: str) -> str:
    return f"{MASTER_MARKER}-{SHIFT_SUFFIXES[bucket]}"


def default_task_codes() -> TaskCodeSet:
    """Task codes used when the lookup sheet could not be obtained at all."""
    return TaskCodeSet(**{bucket: fallback_task_code(bucket) for bucket in BUCKET_ORDER})


def _candidate_code(row: List[str]) -> str:
    second = row[1] if len(row) > 1 else ""
    first = row[0] if row else ""
    return second or first


def resolve_task_codes(
    lookup_grid: Sequence[Sequence],
    rules: Sequence[ShiftKeywordRule] = DEFAULT_SHIFT_RULES,
    marker: str = MASTER_MARKER
) -> TaskCodeSet:
    """
    Locate the early/middle/late task codes inside a lookup grid.

    Args:
        lookup_grid: Decoded lookup sheet rows
        rules: Ordered keyword rules; the first matching rule wins
        marker: Substring identifying task code rows

    Returns:
        TaskCodeSet with None for any bucket that was not found
    """
    result = TaskCodeSet()

    for raw_row in lookup_grid:
        row = [cell_to_text(cell) for cell in raw_row]
        row_text = " ".join(row)

        for cell in row:
            if marker not in cell:
                continue

            task_code = _candidate_code(row)
            matched = next((rule for rule in rules if rule.matches(row_text)), None)

            if matched is not None:
                # Labelled rows always win, even over an earlier assignment.
                result.set(matched.bucket, task_code)
                continue

            for bucket in BUCKET_ORDER:
                if not result.get(bucket):
                    result.set(bucket, task_code)
                    break

    logger.info(f"Task codes found: {result.to_dict()}")
    return result
