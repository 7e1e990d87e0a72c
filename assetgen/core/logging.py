"""Loguru setup for generation runs, with optional Slack alerts on errors."""

import logging
import sys
from pathlib import Path
from typing import Any, Dict

import httpx
from loguru import logger

from assetgen.core.config import settings

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {extra[name]}:{function}:{line} | {message}"
LOG_FILE_NAME = "assetgen.log"
LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}

_logging_configured = False


class InterceptHandler(logging.Handler):
    """Forward stdlib records (httpx and friends) to Loguru under their logger name."""

    def emit(self, record: logging.LogRecord) -> None:
        level = record.levelname if record.levelname in LEVELS else record.levelno
        logger.bind(name=record.name).opt(exception=record.exc_info).log(level, record.getMessage())


def slack_text(record: Dict[str, Any]) -> str:
    """One-line Slack alert naming the run target and the failing component."""
    target = settings.CHAIN_ID or settings.CHAIN_NAME or "assetgen"
    name = record["extra"].get("name", "assetgen")
    return f":rotating_light: [{target}] {record['level'].name} in {name}: {record['message']}"


def _slack_sink(message: Any) -> None:
    try:
        httpx.post(settings.SLACK_WEBHOOK_URL, json={"text": slack_text(message.record)}, timeout=5.0)
    except httpx.HTTPError:
        # Logging from here would re-enter this sink
        pass


def _normalize_level(raw: str | None) -> str:
    level = (raw or "INFO").strip().upper()
    level = {"WARN": "WARNING", "FATAL": "CRITICAL"}.get(level, level)
    return level if level in LEVELS else "INFO"


def configure_logging() -> None:
    global _logging_configured

    if _logging_configured:
        return
    _logging_configured = True

    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    level = _normalize_level(settings.effective_log_level)

    logger.remove()
    logger.configure(extra={"name": "assetgen"})
    logger.add(sys.stdout, level=level, format=LOG_FORMAT, backtrace=False, diagnose=False)
    logger.add(
        log_dir / LOG_FILE_NAME,
        level=level,
        format=LOG_FORMAT,
        rotation="10 MB",
        retention="14 days",
        enqueue=True,
        backtrace=False,
        diagnose=False,
    )
    if settings.SLACK_WEBHOOK_URL:
        logger.add(_slack_sink, level="ERROR", enqueue=True)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def get_logger(name: str) -> logger.__class__:
    return logger.bind(name=name)


configure_logging()
