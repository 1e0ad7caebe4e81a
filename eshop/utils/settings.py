# eshop/utils/settings.py
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()


class SettingsError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    """
    Konfiguracja procesu, budowana raz przy starcie i przekazywana dalej.
    Haslo do bazy pochodzi z DB_PASSWORD albo z pliku DB_PASSWORD_FILE (secret).
    """

    db_driver: str = "postgresql+psycopg2"
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "eshop"
    db_user: str = "postgres"
    db_password: str = ""
    database_url: str | None = None
    db_echo: bool = False
    db_connect_attempts: int = 5
    log_level: str = "INFO"
    app_host: str = "0.0.0.0"
    app_port: int = 8000

    @property
    def sqlalchemy_url(self) -> str | URL:
        # DATABASE_URL wins over the assembled parts
        if self.database_url:
            return self.database_url
        return URL.create(
            drivername=self.db_driver,
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


def _read_password(env: Mapping[str, str]) -> str:
    secret_file = env.get("DB_PASSWORD_FILE")
    if secret_file:
        path = Path(secret_file)
        if not path.is_file():
            raise SettingsError(f"DB_PASSWORD_FILE points to a missing file: {secret_file}")
        return path.read_text(encoding="utf-8").strip()
    return env.get("DB_PASSWORD", "")


def _as_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise SettingsError(f"{key} must be an integer, got {raw!r}")


def _as_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if env is None else env

    attempts = _as_int(env, "DB_CONNECT_ATTEMPTS", 5)
    if attempts < 1:
        raise SettingsError("DB_CONNECT_ATTEMPTS must be at least 1")

    return Settings(
        db_driver=env.get("DB_DRIVER", "postgresql+psycopg2"),
        db_host=env.get("DB_HOST", "localhost"),
        db_port=_as_int(env, "DB_PORT", 5432),
        db_name=env.get("DB_NAME", "eshop"),
        db_user=env.get("DB_USER", "postgres"),
        db_password=_read_password(env),
        database_url=env.get("DATABASE_URL") or None,
        db_echo=_as_bool(env, "DB_ECHO", False),
        db_connect_attempts=attempts,
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
        app_host=env.get("APP_HOST", "0.0.0.0"),
        app_port=_as_int(env, "APP_PORT", 8000),
    )
