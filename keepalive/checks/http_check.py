from __future__ import annotations

import logging
import time

import requests

from keepalive.checks.results import CheckResult
from keepalive.config import KeepaliveConfig

logger = logging.getLogger(__name__)


def run_http(url: str, timeout_s: float, user_agent: str) -> CheckResult:
    start = time.perf_counter()
    headers = {
        "User-Agent": user_agent,
        "Connection": "keep-alive",
    }
    try:
        r = requests.get(url, headers=headers, timeout=timeout_s)
        latency_ms = int((time.perf_counter() - start) * 1000)
        # Only an exact 200 counts; redirects and other 2xx are failures.
        if r.status_code == 200:
            return CheckResult(
                url=url, success=True, attempts=1, latency_ms=latency_ms, status_code=200
            )
        return CheckResult(
            url=url,
            success=False,
            attempts=1,
            latency_ms=latency_ms,
            status_code=r.status_code,
            error=f"Status {r.status_code}",
        )
    except Exception as e:
        latency_ms = int((time.perf_counter() - start) * 1000)
        return CheckResult(url=url, success=False, attempts=1, latency_ms=latency_ms, error=str(e))


def check_with_retry(url: str, cfg: KeepaliveConfig) -> CheckResult:
    """
    Probe ``url`` up to ``cfg.max_retries`` times, sleeping ``cfg.retry_delay_s``
    between attempts. Every failure class is retried the same way.
    """
    start = time.perf_counter()
    last: CheckResult | None = None

    for attempt in range(1, cfg.max_retries + 1):
        res = run_http(url, timeout_s=cfg.timeout_s, user_agent=cfg.user_agent)
        if res.success:
            res.attempts = attempt
            res.latency_ms = int((time.perf_counter() - start) * 1000)
            return res

        last = res
        logger.warning("[Attempt %d/%d] %s failed: %s", attempt, cfg.max_retries, url, res.error)
        if attempt < cfg.max_retries:
            time.sleep(cfg.retry_delay_s)

    last_error = last.error if last is not None else None
    return CheckResult(
        url=url,
        success=False,
        attempts=cfg.max_retries,
        latency_ms=int((time.perf_counter() - start) * 1000),
        status_code=last.status_code if last is not None else None,
        error=f"尝试 {cfg.max_retries} 次后失败。最后一次错误: {last_error}",
    )
