"""
Logging Configuration

Централизованная настройка логирования движка калькулятора.
Поддерживает структурированный JSON вывод и обычный текстовый формат.
Модули пишут в logging.getLogger(__name__) внутри иерархии "src".
"""

import json
import logging
import sys
from typing import Any, Dict, Final, Optional

ROOT_LOGGER_NAME: Final[str] = "src"

# Стандартные атрибуты LogRecord, не попадающие в extra поля
_RESERVED_RECORD_ATTRS: Final[frozenset[str]] = frozenset(
    {
        "args", "asctime", "created", "exc_info", "exc_text", "filename",
        "funcName", "levelname", "levelno", "lineno", "module", "msecs",
        "message", "msg", "name", "pathname", "process", "processName",
        "relativeCreated", "stack_info", "thread", "threadName", "taskName",
    }
)

_logging_configured = False


class JSONFormatter(logging.Formatter):
    """Formatter, выводящий каждую запись одной JSON строкой."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # extra={...} поля записи
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_ATTRS and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = True,
    force: bool = False,
) -> logging.Logger:
    """
    Настройка логирования иерархии "src".

    Повторный вызов без force ничего не меняет.

    Args:
        level: Уровень (DEBUG, INFO, WARNING, ERROR)
        log_file: Необязательный файл для записи логов
        json_format: JSON формат (default: True), иначе текстовый
        force: Переконфигурировать даже если уже настроено

    Returns:
        Корневой логгер "src"
    """
    global _logging_configured

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _logging_configured and not force:
        return root_logger

    if json_format:
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Удаляем существующие handlers во избежание дублей
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _logging_configured = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Логгер модуля внутри иерархии "src".

    Args:
        name: Имя модуля (префикс "src." добавляется, если его нет)
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
