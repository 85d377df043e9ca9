import logging
import os

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]

APP_ENV = os.getenv("APP_ENV", "development")
DEBUG = _get_bool(os.getenv("DEBUG"), default=False)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DEFAULT_DATABASE_URL = "sqlite:///./portfolio.db"
DATABASE_URL = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)

CORS_ORIGINS = _get_list(os.getenv("CORS_ORIGINS", "http://localhost:4200"))

RESUME_PATH = os.getenv("RESUME_PATH", "static/resume.pdf")
RESUME_DOWNLOAD_NAME = os.getenv("RESUME_DOWNLOAD_NAME", "resume.pdf")

PASSWORD_HASH_ROUNDS = int(os.getenv("PASSWORD_HASH_ROUNDS", "12"))

# fail | skip
SEED_ON_CONFLICT = os.getenv("SEED_ON_CONFLICT", "fail").strip().lower()


def configure_logging() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def validate_runtime_config() -> None:
    if APP_ENV.lower() == "production" and DATABASE_URL == DEFAULT_DATABASE_URL:
        raise RuntimeError("DATABASE_URL must be set in production.")
    if SEED_ON_CONFLICT not in {"fail", "skip"}:
        raise RuntimeError("SEED_ON_CONFLICT must be 'fail' or 'skip'.")
