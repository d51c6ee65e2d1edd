import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(dotenv_path=Path(__file__).parent / ".env")

NWS_API_BASE = os.getenv("NWS_API_BASE", "https://api.weather.gov").rstrip("/")
USER_AGENT = os.getenv("NWS_USER_AGENT", "weather-app/1.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Unset means the httpx client default applies
_timeout = os.getenv("NWS_TIMEOUT")
NWS_TIMEOUT = float(_timeout) if _timeout else None
