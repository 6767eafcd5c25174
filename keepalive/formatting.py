from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from keepalive.checks.results import CheckResult

ALL_HEALTHY_MESSAGE = "所有服务运行正常 (状态码 200)."
ALERT_HEADER = "⚠️ **Koyeb 保活失败报警**"


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def failure_summary(count: int) -> str:
    return f"检测完成，发现 {count} 个异常，已发送通知。"


def format_alert(failures: Iterable[CheckResult], ts: str | None = None) -> str:
    lines = [ALERT_HEADER, ""]
    for f in failures:
        lines.append(f"❌ **URL**: {f.url}")
        lines.append(f"**Error**: {f.error}")
        lines.append("")
    lines.append(f"Time: {ts or utcnow_iso()}")
    return "\n".join(lines)
