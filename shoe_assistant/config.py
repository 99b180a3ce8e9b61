import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent.parent
load_dotenv(ROOT_DIR / ".env")


def _as_bool(value: str, default: bool = False) -> bool:
    if value is None:
        return default
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    openai_api_key: str = os.getenv("OPENAI_API_KEY", "")
    openai_base_url: str = os.getenv("OPENAI_BASE_URL", "")
    openai_model: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    products_csv_path: str = os.getenv("PRODUCTS_CSV_PATH", str(ROOT_DIR / "products_export.csv"))
    product_base_url: str = os.getenv("PRODUCT_BASE_URL", "https://example.com/products/")
    placeholder_image_url: str = os.getenv(
        "PLACEHOLDER_IMAGE_URL", "https://via.placeholder.com/200x150?text=No+Image"
    )
    recommendation_top_k: int = int(os.getenv("RECOMMENDATION_TOP_K", "6"))
    catalog_refresh_seconds: int = int(os.getenv("CATALOG_REFRESH_SECONDS", "0"))
    request_timeout_seconds: int = int(os.getenv("REQUEST_TIMEOUT_SECONDS", "12"))
    max_image_bytes: int = int(os.getenv("MAX_IMAGE_BYTES", str(10 * 1024 * 1024)))
    debug_log: bool = _as_bool(os.getenv("DEBUG_LOG", "0"))
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


settings = Settings()
