from __future__ import annotations

from dataclasses import dataclass

import requests

TELEGRAM_API_BASE = "https://api.telegram.org"


@dataclass
class TelegramConfig:
    bot_token: str
    chat_id: str
    parse_mode: str = "Markdown"
    timeout_s: float = 10.0


class TelegramNotifier:
    def __init__(self, cfg: TelegramConfig) -> None:
        self.cfg = cfg

    @property
    def url(self) -> str:
        return f"{TELEGRAM_API_BASE}/bot{self.cfg.bot_token}/sendMessage"

    def send(self, text: str) -> None:
        payload = {
            "chat_id": self.cfg.chat_id,
            "text": text,
            "parse_mode": self.cfg.parse_mode,
        }
        # Fire once; the Bot API response is not inspected.
        requests.post(self.url, json=payload, timeout=self.cfg.timeout_s)
