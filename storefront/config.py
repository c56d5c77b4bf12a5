from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]  # project root, holds .env and data/
load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int | None = None) -> int | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return int(v)


def _get_float(*keys: str, default: float | None = None) -> float | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return float(v)


def _get_bool(*keys: str, default: bool = False) -> bool:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return v.lower() in ("1", "true", "yes", "on")


def _get_path(*keys: str, default: str) -> str:
    v = _get_env(*keys, default=default)
    return str(v)


@dataclass(frozen=True)
class Settings:
    catalog_url: str
    catalog_timeout: float
    cart_db_path: str
    currency: str
    decimals: int
    refresh_on_readd: bool
    host: str
    port: int
    log_level: str


def load_settings() -> Settings:
    s = Settings(
        catalog_url=(_get_env("CATALOG_URL", default="https://dummyjson.com") or "").rstrip("/"),
        catalog_timeout=_get_float("CATALOG_TIMEOUT", default=10.0),
        cart_db_path=_get_path("CART_DB_PATH", "DB_PATH", default=str(ROOT_DIR / "data" / "cart.db")),
        currency=_get_env("CURRENCY", default="€") or "€",
        decimals=_get_int("DECIMALS", default=2),
        refresh_on_readd=_get_bool("CART_REFRESH_ON_READD", default=False),
        host=_get_env("HOST", default="127.0.0.1") or "127.0.0.1",
        port=_get_int("PORT", default=8000),
        log_level=(_get_env("LOG_LEVEL", default="INFO") or "INFO").upper(),
    )
    if s.decimals < 0:
        raise RuntimeError("DECIMALS must be >= 0")
    if s.catalog_timeout <= 0:
        raise RuntimeError("CATALOG_TIMEOUT must be > 0")
    return s


settings = load_settings()
