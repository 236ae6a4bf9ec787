import os
from pathlib import Path
from dotenv import load_dotenv

current_file_path = Path(__file__).resolve()
root_dir = current_file_path.parent.parent
env_path = root_dir / ".env.dev"

if env_path.exists():
    load_dotenv(dotenv_path=env_path)
else:
    load_dotenv()

class TimerWorkerConfig:
    def __init__(self) -> None:
        self.TIMEZONE = os.getenv("TIMEZONE", "UTC")
        self.DEFAULT_ALARM_TONE = os.getenv("DEFAULT_ALARM_TONE", "content://settings/system/alarm_alert")
        self.INTERNAL_API_URL = os.getenv("INTERNAL_API_URL", "http://localhost:8000/internals")
        self.NOTIFY_WEBHOOK_URL = os.getenv("NOTIFY_WEBHOOK_URL")
        self.REQUERY_WEBHOOK_URL = os.getenv("REQUERY_WEBHOOK_URL")
        self.METRICS_PORT = int(os.getenv("METRICS_PORT", "9100"))

config = TimerWorkerConfig()
