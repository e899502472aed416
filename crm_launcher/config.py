"""
Configuration management using Pydantic Settings
Loads port settings from the environment and fills in launcher defaults
"""

from functools import lru_cache
from typing import Dict, Mapping, Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


DEFAULT_BACKEND_PORT = "3002"
DEFAULT_FRONTEND_PORT = "5173"
DEFAULT_POSTGRES_PORT = "5434"
DEFAULT_OLLAMA_PORT = "11435"

PORT_DEFAULTS: Dict[str, str] = {
    "CRM2_BACKEND_PORT": DEFAULT_BACKEND_PORT,
    "CRM2_FRONTEND_PORT": DEFAULT_FRONTEND_PORT,
    "CRM2_POSTGRES_PORT": DEFAULT_POSTGRES_PORT,
    "CRM2_OLLAMA_PORT": DEFAULT_OLLAMA_PORT,
}


class Settings(BaseSettings):
    """Launcher settings loaded from environment variables"""

    # Service ports (consumed by docker-compose.yml)
    CRM2_BACKEND_PORT: str = Field(default=DEFAULT_BACKEND_PORT, description="Backend API port")
    CRM2_FRONTEND_PORT: str = Field(default=DEFAULT_FRONTEND_PORT, description="Frontend port")
    CRM2_POSTGRES_PORT: str = Field(default=DEFAULT_POSTGRES_PORT, description="PostgreSQL port")
    CRM2_OLLAMA_PORT: str = Field(default=DEFAULT_OLLAMA_PORT, description="Ollama inference port")

    # Launcher Settings
    CRM_PROJECT_DIR: Optional[str] = Field(default=None, description="Directory holding docker-compose.yml")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_JSON: bool = Field(default=False, description="Render log events as JSON")

    class Config:
        case_sensitive = True
        extra = "ignore"

    @field_validator(*PORT_DEFAULTS.keys(), mode="before")
    @classmethod
    def default_empty_port(cls, value, info):
        # An empty variable counts as unset
        if value is None or value == "":
            return PORT_DEFAULTS[info.field_name]
        return value

    @property
    def frontend_url(self) -> str:
        """URL the browser is pointed at"""
        port = self.CRM2_FRONTEND_PORT or DEFAULT_FRONTEND_PORT
        return f"http://localhost:{port}"

    def port_environment(self) -> Dict[str, str]:
        """Effective port variables, keyed by environment variable name"""
        return {name: getattr(self, name) for name in PORT_DEFAULTS}

    def compose_environment(self, base: Mapping[str, str]) -> Dict[str, str]:
        """
        Build the environment handed to the compose command

        Args:
            base: Environment to start from (usually os.environ)

        Returns:
            Copy of base with every port variable set to its effective value
        """
        env = dict(base)
        # Compose must see the same ports the browser URL is built from
        env.update(self.port_environment())
        return env


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance
    Returns singleton Settings object
    """
    return Settings()
