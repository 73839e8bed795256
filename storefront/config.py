"""Configuration for the storefront backend, read from the environment."""

import os

from pydantic import BaseModel


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class PostgresSettings(BaseModel):
    host: str = "localhost"
    port: int = 5432
    database: str = "postgres"
    user: str = "postgres"
    password: str = "postgres"
    dsn: str | None = None

    @classmethod
    def from_env(cls) -> "PostgresSettings":
        return cls(
            host=os.getenv("POSTGRES_HOST", "localhost"),
            port=int(os.getenv("POSTGRES_PORT", "5432")),
            database=os.getenv("POSTGRES_DB", "postgres"),
            user=os.getenv("POSTGRES_USER", "postgres"),
            password=os.getenv("POSTGRES_PASSWORD", "postgres"),
            dsn=os.getenv("POSTGRES_DSN"),
        )

    def connect_kwargs(self) -> dict:
        """Keyword arguments for psycopg2.connect."""
        if self.dsn:
            return {"dsn": self.dsn}
        return {
            "host": self.host,
            "port": self.port,
            "dbname": self.database,
            "user": self.user,
            "password": self.password,
        }

    @property
    def sqlalchemy_url(self) -> str:
        if self.dsn:
            # SQLAlchemy wants the driver spelled out for plain libpq URLs
            if self.dsn.startswith("postgres://"):
                return "postgresql+psycopg2://" + self.dsn[len("postgres://") :]
            if self.dsn.startswith("postgresql://"):
                return "postgresql+psycopg2://" + self.dsn[len("postgresql://") :]
            return self.dsn
        return f"postgresql+psycopg2://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"


class AppSettings(BaseModel):
    postgres: PostgresSettings
    create_tables_on_startup: bool = True

    @classmethod
    def from_env(cls) -> "AppSettings":
        return cls(
            postgres=PostgresSettings.from_env(),
            create_tables_on_startup=_env_flag("STOREFRONT_CREATE_TABLES", True),
        )
