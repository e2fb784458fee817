from __future__ import annotations

import os

from src.api.routers.payment_instructions_config import business_date_override

_PRODUCTION_PROFILE = "PRODUCTION"
_LOCAL_PROFILE = "LOCAL"


def app_runtime_profile_name() -> str:
    profile = os.getenv("APP_RUNTIME_PROFILE", _LOCAL_PROFILE).strip().upper()
    return _PRODUCTION_PROFILE if profile == _PRODUCTION_PROFILE else _LOCAL_PROFILE


def validate_runtime_profile_guardrails() -> None:
    override = business_date_override()
    if app_runtime_profile_name() != _PRODUCTION_PROFILE:
        return
    if override is not None:
        raise RuntimeError("RUNTIME_PROFILE_FORBIDS_BUSINESS_DATE_OVERRIDE")
