import logging

from keepalive.config import DEFAULT_CONFIG, LOG_FORMAT, settings
from keepalive.runner import build_notifier, schedule_run


def main() -> int:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format=LOG_FORMAT,
    )
    schedule_run(DEFAULT_CONFIG, notifier=build_notifier()).join()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
