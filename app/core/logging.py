import sys
import json
from loguru import logger as loguru_logger

from app.core.config import settings

# Remove default logger
loguru_logger.remove()

PLAIN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


class CloudLoggingAdapter:
    """
    Sink that writes Loguru records as one Cloud Logging compatible JSON object per line
    """
    def __init__(self, environment: str, service_name: str):
        self.env = environment
        self.service_name = service_name

    def write(self, message):
        record = message.record

        # Basic structure required by Cloud Logging
        cloud_log = {
            "severity": record["level"].name,
            "time": record["time"].isoformat(),
            "message": record["message"],
            "logger": record["name"],
            "logging.googleapis.com/labels": {
                "environment": self.env,
                "service": self.service_name
            }
        }

        # Fields attached with logger.bind(...)
        for k, v in record["extra"].items():
            cloud_log[k] = v

        if record["exception"] is not None:
            exc_type, exc_value, _ = record["exception"]
            cloud_log["exception"] = f"{exc_type.__name__ if exc_type else 'Exception'}: {exc_value}"

        print(json.dumps(cloud_log, default=str), file=sys.stderr)


def configure_logging(level: str = settings.LOG_LEVEL, json_output: bool = settings.LOG_JSON) -> None:
    """(Re)configure the process-wide Loguru handlers."""
    if json_output:
        handler = {
            "sink": CloudLoggingAdapter(settings.ENVIRONMENT, settings.PROJECT_NAME).write,
            "level": level,
            "format": "{message}",
        }
    else:
        handler = {
            "sink": sys.stderr,
            "level": level,
            "format": PLAIN_FORMAT,
            "backtrace": False,
        }
    loguru_logger.configure(handlers=[handler])


configure_logging()

# Export the logger
logger = loguru_logger
