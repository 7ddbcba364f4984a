"""JSON logging for processes hosting the shortener

Call `initialize_logging()` once at process start (e.g. in the adapter that
hosts the service). Library modules only ever call `logging.getLogger(__name__)`
and pass structured fields through `extra={...}`.

Every line is one JSON object:
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "tinylinks.service",
    "message": "Created short URL mapping.",
    "app": "tinylinks",
    "env": "prod",
    "shortcode": "aZ4k9Qx",
    "target": "https://example.com/article/123"
}

`app`/`env` come from APP_NAME/APP_ENV and are left out when APP_NAME is unset.
Records logged with exc_info carry an "error" object:
{"type": "DataStoreError", "detail": "Can't connect to Redis at ...", "traceback": "..."}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from tinylinks.constants import ENV
from tinylinks.utils.config import app_env, app_name


# Attributes every LogRecord carries; anything else arrived through `extra`
RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {'message', 'asctime'}


class JsonFormatter(logging.Formatter):
    """Render records as single-line JSON with app context and `extra` fields

    Args:
        app (str | None):
            Application name stamped on every line.
        env (str | None):
            Application environment stamped on every line.
    """

    def __init__(self, app: str | None = None, env: str | None = None):
        super().__init__()
        self.context = {key: value for key, value in (('app', app), ('env', env)) if value is not None}

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        return datetime.fromtimestamp(record.created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            **self.context,
        }
        entry.update((key, value) for key, value in vars(record).items() if key not in RECORD_ATTRS)

        if record.exc_info and record.exc_info[0] is not None:
            error_type, error, _ = record.exc_info
            entry['error'] = {
                'type': error_type.__name__,
                'detail': str(error),
                'traceback': self.formatException(record.exc_info),
            }

        return json.dumps(entry, default=str)


def initialize_logging(level: str | None = None) -> None:
    """Send JSON lines to stdout at `level` (default: LOG_LEVEL, then INFO)."""
    log_level = (level or os.getenv(ENV.App.LOG_LEVEL, 'INFO')).upper()
    name = app_name()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                    'app': name,
                    'env': app_env() if name is not None else None,
                }
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
