"""Configuration module."""

from src.config.configuration import (
    LATENCY_PROFILES,
    ApiConfig,
    AppConfig,
    AzureAISearchConfig,
    ConfigurationError,
    CosmosDBConfig,
    LoggingConfig,
    ServerConfig,
    get_config,
    get_environment,
    load_config,
    reset_config,
)

__all__ = [
    "LATENCY_PROFILES",
    "ApiConfig",
    "AppConfig",
    "AzureAISearchConfig",
    "ConfigurationError",
    "CosmosDBConfig",
    "LoggingConfig",
    "ServerConfig",
    "get_config",
    "get_environment",
    "load_config",
    "reset_config",
]
