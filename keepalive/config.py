import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_URLS: tuple[str, ...] = (
    "https://1.koyeb.app",
    "https://2.koyeb.app",
    "https://3.koyeb.app",
)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


@dataclass(frozen=True)
class KeepaliveConfig:
    urls: tuple[str, ...] = DEFAULT_URLS
    max_retries: int = 3
    retry_delay_s: float = 5.0
    timeout_s: float = 10.0
    user_agent: str = USER_AGENT


DEFAULT_CONFIG = KeepaliveConfig()


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings:
    TG_BOT_TOKEN: str = os.getenv("TG_BOT_TOKEN")
    TG_CHAT_ID: str = os.getenv("TG_CHAT_ID")
    KEEPALIVE_INTERVAL_S: int = int(os.getenv("KEEPALIVE_INTERVAL_S", 300))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
