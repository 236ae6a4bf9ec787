"""
Requery channel

Outbound port telling external consumers (e.g. a host automation plugin) that
timer conditions may have changed. Fire-and-forget: failures are logged only.
"""
import logging
from typing import Callable, List, Optional
import requests

from .config import config

logger = logging.getLogger(__name__)


class RequeryChannel:
    def __init__(self, webhook_url: Optional[str] = None, source: str = "timer_worker") -> None:
        self.webhook_url = webhook_url
        self.source = source
        self._subscribers: List[Callable[[], None]] = []

    def subscribe(self, callback: Callable[[], None]) -> None:
        self._subscribers.append(callback)

    def request_requery(self) -> None:
        for callback in list(self._subscribers):
            try:
                callback()
            except Exception as e:
                logger.error(f"Requery subscriber failed: {e}")

        if not self.webhook_url:
            return
        try:
            resp = requests.post(
                self.webhook_url,
                json={"event": "request_requery", "source": self.source},
                timeout=5
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"Requery webhook failed: {e}")


def default_channel() -> RequeryChannel:
    return RequeryChannel(webhook_url=config.REQUERY_WEBHOOK_URL)
