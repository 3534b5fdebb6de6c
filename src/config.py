import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings() -> Settings:
    host = os.environ.get("RECEIPTS_HOST", DEFAULT_HOST)
    raw_port = os.environ.get("RECEIPTS_PORT", str(DEFAULT_PORT))
    log_level = os.environ.get("RECEIPTS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"RECEIPTS_PORT must be an integer, got {raw_port!r}")

    if not 0 < port < 65536:
        raise ValueError(f"RECEIPTS_PORT out of range: {port}")

    return Settings(host=host, port=port, log_level=log_level)
