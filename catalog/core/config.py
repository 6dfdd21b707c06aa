import os

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]

APP_ENV = os.getenv("APP_ENV", "development")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./fsjstd-restapi.db")
DB_ENABLE_LOGGING = _get_bool(os.getenv("DB_ENABLE_LOGGING"), default=False)

PASSWORD_HASH_ROUNDS = int(os.getenv("PASSWORD_HASH_ROUNDS", "10"))

# Only the owner of a course may update or delete it.
ENFORCE_COURSE_OWNERSHIP = _get_bool(os.getenv("ENFORCE_COURSE_OWNERSHIP"), default=True)

CORS_ALLOWED_ORIGINS = _get_list(
    os.getenv("CORS_ALLOWED_ORIGINS"),
    default=["http://localhost:3000"],
)

def validate_runtime_config() -> None:
    in_memory = DATABASE_URL in {"sqlite://", "sqlite:///:memory:"}
    if APP_ENV.lower() == "production" and in_memory:
        raise RuntimeError("DATABASE_URL must point at a persistent database in production.")
