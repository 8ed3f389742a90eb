"""Helpers for unpacking JSON payloads of the domain API."""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def unwrap_list(data: Any, key: str) -> list[Any]:
    """Return the list under ``key``, or ``data`` itself when it is a bare list."""
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        value = data.get(key)
        if isinstance(value, list):
            return value
    return []


def parse_records(model: type[M], raw_items: list[Any]) -> list[M]:
    """Validate each item, skipping (and logging) the ones that do not fit ``model``."""
    records: list[M] = []
    for raw in raw_items:
        try:
            records.append(model.model_validate(raw))
        except ValidationError as e:
            logger.warning(f"Skipping invalid {model.__name__}: {e.error_count()} error(s)")
    return records


def parse_record(model: type[M], data: Any, key: str | None = None) -> M | None:
    """Validate the object under ``key`` (or ``data`` itself); None when absent or invalid."""
    raw = data.get(key) if key is not None and isinstance(data, dict) else data
    if not isinstance(raw, dict):
        return None
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Ignoring invalid {model.__name__} in response: {e.error_count()} error(s)")
        return None


def total_count(data: Any, default: int) -> int:
    if isinstance(data, dict):
        try:
            return int(data.get("total", default))
        except (TypeError, ValueError):
            return default
    return default
