import logging
import time
from prometheus_client import start_http_server
from .config import config
from .scheduler import TimerScheduler
from .store import ApiTimerStore

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def start_worker():
    """
    Start the alarm scheduler and keep the process alive until interrupted.
    """
    if config.METRICS_PORT:
        start_http_server(config.METRICS_PORT)
        logger.info(f"Metrics exposed on :{config.METRICS_PORT}")

    timer_scheduler = TimerScheduler(ApiTimerStore())
    timer_scheduler.start()
    logger.info(f"Worker started. Timers from: {timer_scheduler.store.base_url} (timezone {config.TIMEZONE})")

    try:
        while True:
            time.sleep(60)
    except (KeyboardInterrupt, SystemExit):
        timer_scheduler.stop()


if __name__ == "__main__":
    start_worker()
