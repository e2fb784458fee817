import os
from datetime import date
from typing import Optional

from fastapi import HTTPException, status

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def env_text(name: str, default: str) -> str:
    """Stripped env value, or default when unset or blank."""
    return os.getenv(name, "").strip() or default


def env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def env_date(name: str) -> Optional[date]:
    value = env_text(name, "")
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise RuntimeError(f"{name}_INVALID") from exc


def assert_feature_enabled(*, name: str, default: bool, detail: str) -> None:
    """Raise 404 with the given detail when the flag is off."""
    if env_flag(name, default):
        return
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
