"""Configuration module for the product catalog API.

Loads settings from environment-specific config files:
- APP_ENV=dev  → config_dev.yaml
- APP_ENV=test → config_test.yaml
- Default      → config.yaml

Credentials are loaded from the .env file.
Fails fast with clear error messages if required configuration is missing.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


# Named latency profiles mapped to Cosmos client options
LATENCY_PROFILES: dict[str, dict[str, Any]] = {
    "default": {},
    "wan_development": {"connection_timeout": 20},
}


def _get_project_root() -> Path:
    """Get the project root directory (where config.yaml lives)."""
    # Navigate from src/config/ up to project root
    return Path(__file__).parent.parent.parent


def _get_config_filename() -> str:
    """Get config filename based on APP_ENV environment variable.

    Returns:
        Config filename:
        - APP_ENV=dev  → config_dev.yaml
        - APP_ENV=test → config_test.yaml
        - Default      → config.yaml
    """
    app_env = os.environ.get("APP_ENV", "").lower()

    if app_env == "dev":
        return "config_dev.yaml"
    elif app_env == "test":
        return "config_test.yaml"
    else:
        return "config.yaml"


def _load_yaml_config() -> dict:
    """Load configuration from environment-specific config file."""
    config_filename = _get_config_filename()
    config_path = _get_project_root() / config_filename

    if not config_path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}. "
            f"Set APP_ENV to 'dev' or 'test', or create {config_filename}."
        )

    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def _get_required_env(key: str) -> str:
    """Get required environment variable or raise ConfigurationError."""
    value = os.environ.get(key)
    if not value:
        raise ConfigurationError(
            f"Required environment variable '{key}' is not set. "
            f"Please add it to your .env file."
        )
    return value


@dataclass(frozen=True)
class CosmosDBConfig:
    """Azure Cosmos DB connection configuration."""
    endpoint: str
    key: str
    profile: str

    @property
    def client_options(self) -> dict[str, Any]:
        """Cosmos client keyword options for the configured latency profile."""
        return dict(LATENCY_PROFILES[self.profile])


@dataclass(frozen=True)
class AzureAISearchConfig:
    """Azure AI Search configuration."""
    api_key: str
    endpoint: str


@dataclass(frozen=True)
class ServerConfig:
    """HTTP server configuration."""
    host: str
    port: int


@dataclass(frozen=True)
class ApiConfig:
    """GraphQL gateway configuration."""
    mask_errors: bool
    graphiql: bool


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""
    level: str


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration container."""
    cosmosdb: CosmosDBConfig
    azure_ai_search: AzureAISearchConfig
    server: ServerConfig
    api: ApiConfig
    logging: LoggingConfig


def load_config() -> AppConfig:
    """
    Load and validate all application configuration.

    Loads from the YAML config file for non-sensitive settings and .env for
    credentials. Fails fast if required configuration is missing.

    Returns:
        AppConfig: Validated application configuration.

    Raises:
        ConfigurationError: If required configuration is missing or invalid.
    """
    # Load environment variables from .env file
    load_dotenv()

    yaml_config = _load_yaml_config()

    # Build CosmosDB config
    cosmosdb_section = yaml_config.get("cosmosdb", {})
    profile = cosmosdb_section.get("profile", "wan_development")
    if profile not in LATENCY_PROFILES:
        raise ConfigurationError(
            f"Unknown Cosmos DB latency profile '{profile}'. "
            f"Expected one of: {', '.join(sorted(LATENCY_PROFILES))}."
        )

    cosmosdb_config = CosmosDBConfig(
        endpoint=_get_required_env("COSMOSDB_ENDPOINT"),
        key=_get_required_env("COSMOSDB_KEY"),
        profile=profile,
    )

    # Build Azure AI Search config
    ai_search_section = yaml_config.get("ai_search", {})
    search_endpoint = ai_search_section.get("endpoint") or _get_required_env("AI_SEARCH_ENDPOINT")

    azure_ai_search_config = AzureAISearchConfig(
        api_key=_get_required_env("AI_SEARCH_KEY"),
        endpoint=search_endpoint,
    )

    # Build Server config
    server_section = yaml_config.get("server", {})

    server_config = ServerConfig(
        host=server_section.get("host", "0.0.0.0"),
        port=int(server_section.get("port", 4000)),
    )

    # Build API config
    api_section = yaml_config.get("api", {})

    api_config = ApiConfig(
        mask_errors=bool(api_section.get("mask_errors", False)),
        graphiql=bool(api_section.get("graphiql", True)),
    )

    # Build Logging config
    logging_section = yaml_config.get("logging", {})

    logging_config = LoggingConfig(
        level=logging_section.get("level", "INFO"),
    )

    return AppConfig(
        cosmosdb=cosmosdb_config,
        azure_ai_search=azure_ai_search_config,
        server=server_config,
        api=api_config,
        logging=logging_config,
    )


# Module-level singleton for convenience
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get the application configuration singleton.

    Lazy-loads configuration on first access.
    Config file is selected based on APP_ENV environment variable.

    Returns:
        AppConfig: Application configuration.

    Raises:
        ConfigurationError: If required configuration is missing.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_environment() -> str:
    """Get current environment name.

    Returns:
        'dev', 'test', or 'default' based on APP_ENV.
    """
    app_env = os.environ.get("APP_ENV", "").lower()
    return app_env if app_env in ("dev", "test") else "default"


def reset_config() -> None:
    """Reset the config singleton. Useful for testing."""
    global _config
    _config = None
