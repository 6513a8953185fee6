"""Result dataclasses for element processing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..core.types import Direction
from .element import Element


@dataclass
class ElementReport:
    """What happened to one element."""

    index: int
    tag: str
    direction: Direction
    applied: bool
    text_preview: str = ""
    reason: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "tag": self.tag,
            "direction": self.direction.name,
            "applied": self.applied,
            "text_preview": self.text_preview,
            "reason": self.reason,
        }


@dataclass
class ProcessResult:
    """Aggregated output of a processing run."""

    elements: List[Element] = field(default_factory=list)
    reports: List[ElementReport] = field(default_factory=list)
    pruned: int = 0

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def counts(self) -> Dict[str, int]:
        counts = {direction.name: 0 for direction in Direction}
        for report in self.reports:
            counts[report.direction.name] += 1
        return counts

    def to_dict(self) -> Dict[str, Any]:
        return {
            "counts": self.counts(),
            "pruned": self.pruned,
            "elements": [report.to_dict() for report in self.reports],
        }
