import os


def _int_env(name: str, default: int) -> int:
    try:
        return int((os.getenv(name) or "").strip() or default)
    except ValueError:
        return default


def _csv(raw: str) -> list[str]:
    return [o.strip() for o in (raw or "").split(",") if o.strip()]


class Config:
    ENV = (os.getenv("STOREFRONT_ENV", "dev") or "dev").strip().lower()
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")

    # CORS: comma-separated origins for web builds (e.g. https://shop.example.ng)
    CORS_ORIGINS = _csv(os.getenv("CORS_ORIGINS", ""))

    # List endpoints: ?page=&limit=
    DEFAULT_PAGE_LIMIT = _int_env("DEFAULT_PAGE_LIMIT", 20)
    MAX_PAGE_LIMIT = _int_env("MAX_PAGE_LIMIT", 100)

    # Segment short names to skip at boot, e.g. "meta"
    DISABLED_SEGMENTS = _csv(os.getenv("DISABLED_SEGMENTS", ""))

    LOG_LEVEL = (os.getenv("LOG_LEVEL", "INFO") or "INFO").strip().upper()


def is_production(env: str | None) -> bool:
    return (env or "").strip().lower() in ("prod", "production")
