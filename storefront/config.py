import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent.parent
PACKAGE_DIR = Path(__file__).resolve().parent
load_dotenv(ROOT_DIR / ".env")


def _as_bool(value: str, default: bool = False) -> bool:
    if value is None:
        return default
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    catalog_path: str = os.getenv("CATALOG_PATH", str(PACKAGE_DIR / "data" / "products.json"))
    debug_log: bool = _as_bool(os.getenv("DEBUG_LOG", "0"))
    fuzzy_max_distance: int = int(os.getenv("FUZZY_MAX_DISTANCE", "2"))
    default_min_price: float = float(os.getenv("DEFAULT_MIN_PRICE", "0"))
    default_max_price: float = float(os.getenv("DEFAULT_MAX_PRICE", "5000"))
    suggestions_limit: int = int(os.getenv("SUGGESTIONS_LIMIT", "5"))
    gradio_server_name: str = os.getenv("GRADIO_SERVER_NAME", "0.0.0.0")
    gradio_server_port: int = int(os.getenv("GRADIO_SERVER_PORT", "7860"))


settings = Settings()
