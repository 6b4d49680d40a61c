# src/config/settings.py

"""Central configuration for the catalog console."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the catalog console."""

    # --- Remote API ---
    API_BASE_URL: str = os.getenv(
        "CATALOG_API_URL", "https://dummyjson.com"
    ).rstrip("/")
    PRODUCTS_PATH: str = "/products"
    CREATE_PATH: str = "/products/add"
    REQUEST_TIMEOUT: int = int(
        os.getenv("CATALOG_REQUEST_TIMEOUT", "15")
    )                                   # Seconds before a request times out

    # --- Caching ---
    LIST_STALE_TIME: float = 60.0 * 10  # Cached list is fresh for 10 min

    # --- Presentation ---
    NOTIFICATION_TIMEOUT: float = 3.0   # Toasts auto-dismiss (secs)
    DISPLAY_LIMIT: int = 5              # Products shown in the list
    UPDATED_SUFFIX: str = " (Updated)"  # Appended by the quick update
    HEALTH_SLOW_MS: float = 5000.0      # Latency above this is "slow"

    # --- HTTP client ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Accept-Language": "en-US,en;q=0.9",
        "Content-Type": "application/json",
    }

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"

    @classmethod
    def products_url(cls) -> str:
        """Full URL of the product collection."""
        return f"{cls.API_BASE_URL}{cls.PRODUCTS_PATH}"

    @classmethod
    def product_url(cls, product_id: int | str) -> str:
        """Full URL of a single product resource."""
        return f"{cls.API_BASE_URL}{cls.PRODUCTS_PATH}/{product_id}"

    @classmethod
    def create_url(cls) -> str:
        """Full URL the create request is posted to."""
        return f"{cls.API_BASE_URL}{cls.CREATE_PATH}"
