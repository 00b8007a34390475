"""portfolio_qa.tracing

Per-question step traces for debug mode.

QuestionService records one entry per step (normalize, score, then match or classify) with the
milliseconds elapsed since the question arrived. The Streamlit debug panels and scripts/ask.py
read them; HTTP envelopes never include them.
"""

from __future__ import annotations
import time
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class TraceCollector:
    traces: list[dict[str, Any]] = field(default_factory=list)
    started: float = field(default_factory=time.perf_counter)

    def add(self, step_name: str, payload: dict[str, Any]) -> None:
        elapsed_ms = round((time.perf_counter() - self.started) * 1000, 2)
        self.traces.append({"step": step_name, "elapsedMs": elapsed_ms, "payload": payload})


def find_step(traces: Optional[list[dict[str, Any]]], step_name: str) -> Optional[dict[str, Any]]:
    """Payload of the first trace named `step_name`, or None."""
    for t in traces or []:
        if t.get("step") == step_name:
            return t.get("payload")
    return None
