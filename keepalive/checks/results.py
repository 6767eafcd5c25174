from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CheckResult:
    url: str
    success: bool
    attempts: int
    latency_ms: int
    status_code: int | None = None
    error: str | None = None
