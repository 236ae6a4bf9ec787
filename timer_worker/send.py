import json
import logging
import threading
from typing import Dict, Mapping, Optional, Tuple
import requests
from .config import config
from .effects import ShowNotification
# Setup logger
logger = logging.getLogger(__name__)

def _get_show_payload(notification: ShowNotification) -> str:
    indicator = notification.indicator
    return json.dumps(
        {
            "action": "show",
            "timer_id": notification.timer_id,
            "text": notification.text,
            "tone": notification.tone,
            "use_indicator": notification.use_indicator,
            "indicator": {
                "on_ms": indicator.on_ms,
                "off_ms": indicator.off_ms,
                "argb": f"#{indicator.argb:08x}",
            } if indicator else None,
            "when": notification.when_millis,
            "persistent": notification.persistent,
        }
    )

def _get_cancel_payload(timer_id: int) -> str:
    return json.dumps({"action": "cancel", "timer_id": timer_id})


class Notifier:
    """
    Shows and cancels timer notifications.

    Active notifications are keyed by timer id, so showing again replaces the
    previous one. When a webhook is configured each change is forwarded to it.
    """

    def __init__(self, webhook_url: Optional[str] = None) -> None:
        self.webhook_url = webhook_url
        self.active: Dict[int, ShowNotification] = {}
        self._lock = threading.Lock()

    def show(self, notification: ShowNotification) -> Tuple[Mapping, int]:
        with self._lock:
            self.active[notification.timer_id] = notification
        logger.info(f"🔔 Notified timer {notification.timer_id}: {notification.text}")
        return self._post(_get_show_payload(notification))

    def cancel(self, timer_id: int) -> Tuple[Mapping, int]:
        with self._lock:
            self.active.pop(timer_id, None)
        logger.info(f"🔕 Cancelled notification for timer {timer_id}")
        return self._post(_get_cancel_payload(timer_id))

    def _post(self, payload: str) -> Tuple[Mapping, int]:
        if not self.webhook_url:
            return {"status": "ok"}, 200

        headers = {"Content-type": "application/json"}
        try:
            resp = requests.post(self.webhook_url, data=payload, headers=headers, timeout=15)
            resp.raise_for_status()
            return {"status": "ok"}, resp.status_code

        except requests.Timeout:
            logger.error("Notification webhook timed out")
            return {"status": "error", "message": "Request timed out"}, 408

        except requests.RequestException as e:
            logger.error(f"Notification webhook error: {e}")
            return {"status": "error", "message": "Failed to deliver notification"}, 500


def default_notifier() -> Notifier:
    return Notifier(webhook_url=config.NOTIFY_WEBHOOK_URL)
