from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from keepalive.checks.http_check import check_with_retry
from keepalive.checks.results import CheckResult
from keepalive.config import KeepaliveConfig, settings
from keepalive.formatting import ALL_HEALTHY_MESSAGE, failure_summary, format_alert
from keepalive.notifier import TelegramConfig, TelegramNotifier

logger = logging.getLogger(__name__)


@dataclass
class SweepOutcome:
    message: str
    failures: list[CheckResult] = field(default_factory=list)


def build_notifier() -> TelegramNotifier | None:
    if not settings.TG_BOT_TOKEN or not settings.TG_CHAT_ID:
        return None
    return TelegramNotifier(
        TelegramConfig(bot_token=settings.TG_BOT_TOKEN, chat_id=settings.TG_CHAT_ID)
    )


def dispatch_alert(notifier: TelegramNotifier | None, failures: list[CheckResult]) -> None:
    if notifier is None or not failures:
        return

    text = format_alert(failures)
    try:
        notifier.send(text)
    except Exception as exc:
        # Alerting is best effort and never fails the sweep.
        logger.warning("Telegram alert failed: %s", exc.__class__.__name__)


def run_all(cfg: KeepaliveConfig, notifier: TelegramNotifier | None = None) -> SweepOutcome:
    if not cfg.urls:
        return SweepOutcome(message=ALL_HEALTHY_MESSAGE)

    with ThreadPoolExecutor(max_workers=len(cfg.urls), thread_name_prefix="keepalive") as pool:
        results = list(pool.map(lambda url: check_with_retry(url, cfg), cfg.urls))

    failures = [r for r in results if not r.success]
    if not failures:
        logger.info("All %d endpoints healthy", len(results))
        return SweepOutcome(message=ALL_HEALTHY_MESSAGE)

    logger.warning("%d of %d endpoints failed", len(failures), len(results))
    dispatch_alert(notifier, failures)
    return SweepOutcome(message=failure_summary(len(failures)), failures=failures)


def run_on_demand(cfg: KeepaliveConfig, notifier: TelegramNotifier | None = None) -> str:
    return run_all(cfg, notifier=notifier).message


def schedule_run(cfg: KeepaliveConfig, notifier: TelegramNotifier | None = None) -> threading.Thread:
    """
    Start a sweep in a background thread and return the thread as its
    completion handle. The sweep outcome is discarded.
    """
    t = threading.Thread(
        target=run_all,
        args=(cfg,),
        kwargs={"notifier": notifier},
        name="keepalive-sweep",
    )
    t.start()
    return t


def loop_forever(
    cfg: KeepaliveConfig, interval_s: int, notifier: TelegramNotifier | None = None
) -> None:
    while True:
        start = time.perf_counter()
        schedule_run(cfg, notifier=notifier).join()
        elapsed = time.perf_counter() - start
        sleep_s = max(0.0, interval_s - elapsed)
        time.sleep(sleep_s)
