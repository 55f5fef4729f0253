import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


APP_TITLE = os.getenv("APP_TITLE", "Storefront")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

METRICS_ENABLED = _env_flag("METRICS_ENABLED", True)

# Tracing stays off unless a collector is configured
OTLP_ENDPOINT = os.getenv("OTLP_ENDPOINT") or None
