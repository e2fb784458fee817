from datetime import date
from typing import Optional

from src.api.routers.runtime_utils import env_date, env_flag, env_text

DEFAULT_SERVICE_NAME = "payment-instructions"


def service_name() -> str:
    return env_text("SERVICE_NAME", DEFAULT_SERVICE_NAME)


def metrics_enabled() -> bool:
    return env_flag("PAYMENT_METRICS_ENABLED", True)


def business_date_override() -> Optional[date]:
    """Fixed business date for replay and demo environments; None means today's UTC date."""
    return env_date("PAYMENT_BUSINESS_DATE_OVERRIDE")
