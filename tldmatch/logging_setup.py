from __future__ import annotations
import json
import logging
import logging.config
from pathlib import Path


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        data = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False)


def _ensure_parent(path: str) -> None:
    try:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass


def build_dict_config(cfg: dict) -> dict:
    level = (cfg.get("level") or "INFO").upper()
    log_file = cfg.get("file")
    rotate = cfg.get("rotate") or {}
    to_console = bool(cfg.get("console", True))
    as_json = bool(cfg.get("json", False))

    if as_json:
        fmt_name = "json"
        fmt_config = {"()": "tldmatch.logging_setup.JsonFormatter"}
    else:
        fmt_name = "standard"
        fmt_config = {"format": "%(asctime)s %(levelname)s [%(name)s] %(message)s"}

    handlers = {}
    if to_console:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": fmt_name,
            "stream": "ext://sys.stderr",
        }
    if log_file:
        _ensure_parent(log_file)
        handlers["file"] = {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "level": level,
            "filename": log_file,
            "when": rotate.get("when", "midnight"),
            "backupCount": int(rotate.get("backupCount", 14)),
            "encoding": "utf-8",
            "formatter": fmt_name,
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            fmt_name: fmt_config
        },
        "handlers": handlers,
        "loggers": {
            "": {
                "handlers": list(handlers.keys()),
                "level": level,
            },
        },
    }


def setup_logging(app_cfg: dict) -> None:
    cfg = app_cfg.get("logging", {}) if app_cfg else {}
    logging.config.dictConfig(build_dict_config(cfg or {}))
