"""
Direction Processing Instrumentation
====================================

Per-run counters and structured decision logs for element processing.
"""

import json
import logging
import time
from collections import Counter
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..core.types import Direction, DirectionAnalysis
from ..utils.log_safety import mask_sensitive


@dataclass
class RunMetrics:
    """Counters for one processing run."""

    elements_seen: int = 0
    rtl: int = 0
    ltr: int = 0
    neutral: int = 0
    effects_applied: int = 0
    overrides_pruned: int = 0
    processing_time_seconds: float = 0.0

    def record(self, direction: Direction, applied: bool):
        self.elements_seen += 1
        if direction is Direction.RTL:
            self.rtl += 1
        elif direction is Direction.LTR:
            self.ltr += 1
        else:
            self.neutral += 1
        if applied:
            self.effects_applied += 1

    @property
    def rtl_share(self) -> float:
        strong = self.rtl + self.ltr
        return self.rtl / strong if strong else 0.0


@dataclass
class DecisionLog:
    """Structured log entry for one element decision."""

    run_id: str
    index: int
    tag: str
    strategy: str
    counts: Dict[str, int]
    threshold: Optional[float]
    decision: str  # RTL, LTR, NEUTRAL
    reason: str
    text_preview: str = ""
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["text_preview"] = mask_sensitive(self.text_preview)
        return data


class MetricsCollector:
    """Collects counters and decision logs for a processing run."""

    def __init__(self, run_id: str = "run"):
        self.run_id = run_id
        self.metrics = RunMetrics()
        self.decision_logs: List[DecisionLog] = []
        self.reasons = Counter()
        self.start_time = time.time()

        self.logger = logging.getLogger(f"{__name__}.{run_id}")

    def log_decision(
        self,
        index: int,
        tag: str,
        analysis: DirectionAnalysis,
        applied: bool,
        text_preview: str = "",
    ) -> DecisionLog:
        """Record the verdict for one element."""
        entry = DecisionLog(
            run_id=self.run_id,
            index=index,
            tag=tag,
            strategy=analysis.strategy,
            counts={
                "rtl": analysis.rtl_count,
                "ltr": analysis.ltr_count,
                "strong": analysis.strong_count,
            },
            threshold=analysis.threshold,
            decision=analysis.direction.name,
            reason=analysis.reason,
            text_preview=text_preview,
        )
        self.decision_logs.append(entry)
        self.metrics.record(analysis.direction, applied)
        self.reasons[analysis.reason] += 1

        self.logger.debug(f"DECISION: {entry.to_dict()}")
        return entry

    def log_pruning(self, count: int):
        self.metrics.overrides_pruned += count
        self.logger.info(f"PRUNE: removed={count}")

    def finalize(self) -> RunMetrics:
        self.metrics.processing_time_seconds = time.time() - self.start_time
        self.logger.info(f"FINAL_METRICS: {asdict(self.metrics)}")
        return self.metrics

    def export(self) -> Dict[str, Any]:
        return {
            "run_id": self.run_id,
            "metrics": asdict(self.metrics),
            "decision_logs": [log.to_dict() for log in self.decision_logs],
            "reasons": dict(self.reasons),
            "export_timestamp": datetime.now().isoformat(),
        }

    def save(self, output_path: Union[str, Path]) -> Path:
        """Write the export as JSON and return the path."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(self.export(), f, indent=2, ensure_ascii=False)
        return output_path

    def summary(self) -> str:
        """Human-readable summary."""
        m = self.metrics
        lines = [
            f"=== Direction report for {self.run_id} ===",
            f"Elements: {m.elements_seen} (rtl={m.rtl} ltr={m.ltr} neutral={m.neutral})",
            f"Effects applied: {m.effects_applied}",
            f"Overrides pruned: {m.overrides_pruned}",
            f"RTL share: {m.rtl_share:.1%}",
            f"Processing: {m.processing_time_seconds:.3f}s",
        ]
        return "\n".join(lines)


__all__ = ["RunMetrics", "DecisionLog", "MetricsCollector"]
