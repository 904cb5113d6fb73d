# invoicing/config.py
"""
Process configuration read from the environment (and a local .env file).

Settings are built once at startup with `load_settings()` and passed to the
components that need them; there is no module-level instance.
"""

from typing import Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings


class ConfigError(RuntimeError):
    """Raised when required environment variables are missing or invalid."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("Invalid configuration: " + "; ".join(problems))


class Settings(BaseSettings):
    NODE_ENV: str
    APP_ORIGIN: str
    PORT: str
    BASE_PATH: str
    DATABASE_URL: str

    # TLS for PostgreSQL connections
    DATABASE_SSL: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
        frozen = True

    @field_validator("PORT")
    @classmethod
    def check_port(cls, value: str) -> str:
        value = value.strip()
        if not value.isdigit() or not 0 < int(value) < 65536:
            raise ValueError("PORT must be a number between 1 and 65535")
        return value

    @property
    def port(self) -> int:
        return int(self.PORT)

    @property
    def base_path(self) -> str:
        """BASE_PATH as a router prefix: '' or '/segment[/segment...]'."""
        stripped = self.BASE_PATH.strip().strip("/")
        return f"/{stripped}" if stripped else ""

    @property
    def is_production(self) -> bool:
        return self.NODE_ENV.strip().lower() == "production"


def load_settings(env_file: Optional[str] = ".env") -> Settings:
    """
    Read and validate settings, failing fast with every offending variable named.
    """
    try:
        return Settings(_env_file=env_file)
    except ValidationError as exc:
        problems = []
        for err in exc.errors():
            name = ".".join(str(part) for part in err["loc"])
            if err["type"] == "missing":
                problems.append(f"{name} is not set")
            else:
                problems.append(f"{name}: {err['msg']}")
        raise ConfigError(problems) from exc
