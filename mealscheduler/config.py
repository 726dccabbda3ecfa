"""
Configuration management using Pydantic models loaded from YAML.
"""

import os
from pathlib import Path
from typing import List, Literal, Optional

import pendulum
import yaml
from pydantic import BaseModel, Field, field_validator

from .domain.models import Congregation

PORT_ENV = "PORT"
MODE_ENV = "MEALSCHEDULER_MODE"


class ServerConfig(BaseModel):
    """Settings for the web harness."""
    host: str = "127.0.0.1"
    port: int = 5000
    mode: Literal["development", "production"] = "development"
    dist_dir: Path = Path("dist")
    client_dir: Path = Path("client")

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate port is between 1 and 65535."""
        if not 1 <= v <= 65535:
            raise ValueError(f"Port must be between 1 and 65535, got {v}")
        return v

    @property
    def is_production(self) -> bool:
        return self.mode == "production"


class CongregationConfig(BaseModel):
    """Congregation entry offered to the selector."""
    id: int
    name: str
    access_code: str = ""
    description: Optional[str] = None
    active: bool = True

    def to_domain(self) -> Congregation:
        return Congregation(
            id=self.id,
            name=self.name,
            access_code=self.access_code,
            description=self.description,
            active=self.active,
        )


class AppConfig(BaseModel):
    """Application configuration."""
    timezone: str = "Europe/Berlin"
    log_level: str = "INFO"
    server: ServerConfig = Field(default_factory=ServerConfig)
    congregations: List[CongregationConfig] = Field(default_factory=list)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Ensure the timezone is known to pendulum."""
        try:
            pendulum.timezone(value)
        except Exception as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("congregations")
    @classmethod
    def validate_congregations(cls, value: List[CongregationConfig]) -> List[CongregationConfig]:
        """Ensure congregation ids and names are unique."""
        seen_ids: set[int] = set()
        seen_names: set[str] = set()
        for congregation in value:
            name_key = congregation.name.lower()
            if congregation.id in seen_ids:
                raise ValueError(f"Duplicate congregation id detected: {congregation.id}")
            if name_key in seen_names:
                raise ValueError(f"Duplicate congregation name detected: {congregation.name}")
            seen_ids.add(congregation.id)
            seen_names.add(name_key)
        return value

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data).with_env_overrides()

    def with_env_overrides(self) -> "AppConfig":
        """Apply ``PORT`` and ``MEALSCHEDULER_MODE`` from the environment."""
        updates = {}
        if os.environ.get(PORT_ENV):
            updates["port"] = int(os.environ[PORT_ENV])
        if os.environ.get(MODE_ENV):
            updates["mode"] = os.environ[MODE_ENV]

        if not updates:
            return self

        server = ServerConfig(**{**self.server.model_dump(), **updates})
        return self.model_copy(update={"server": server})

    def user_congregations(self) -> List[Congregation]:
        """Active congregations as domain objects."""
        return [c.to_domain() for c in self.congregations if c.active]


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load the configuration file, falling back to defaults when absent."""
    path = config_path or get_default_config_path()
    if config_path is None and not path.exists():
        return AppConfig().with_env_overrides()
    return AppConfig.load_from_yaml(path)
