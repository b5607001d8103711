"""Configuration management for Social Genius.

Provides utilities for loading configuration and configuring models:
- load_app_config(): Load app.yaml config file with defaults
- get_model(): Get configured LangChain chat model

Loading priority: framework DEFAULTS < app.yaml < .env < process environment
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml
from dotenv import load_dotenv
from langchain_core.language_models import BaseChatModel

logger = logging.getLogger(__name__)


# Framework defaults (zero-config local dev)
DEFAULTS = {
    "APP_NAME": "social-genius",
    "MODEL_PROVIDER": "google_vertexai",
    "MODEL_NAME": "gemini-2.5-flash",
    "MODEL_TEMPERATURE": "0.7",
    "MODEL_MAX_TOKENS": "8192",
    "PORT": "8080",
    "LOG_LEVEL": "INFO",
    "ENVIRONMENT": "development",
    "GOOGLE_CLOUD_LOCATION": "us-central1",
}


# Mapping from YAML paths to environment variable names
CONFIG_MAPPING = {
    "app.name": "APP_NAME",
    "app.environment": "ENVIRONMENT",
    "model.provider": "MODEL_PROVIDER",
    "model.name": "MODEL_NAME",
    "model.temperature": "MODEL_TEMPERATURE",
    "model.max_tokens": "MODEL_MAX_TOKENS",
    "server.port": "PORT",
    "server.log_level": "LOG_LEVEL",
    "gcp.project_id": "GOOGLE_CLOUD_PROJECT",
    "gcp.location": "GOOGLE_CLOUD_LOCATION",
}

SUPPORTED_MODEL_PROVIDERS = ("google_vertexai", "openai", "anthropic")


class ConfigError(Exception):
    """Configuration error with actionable message."""
    pass


def _flatten_yaml_to_env(yaml_dict: Dict[str, Any]) -> Dict[str, str]:
    """Flatten nested YAML dict to flat env var dict using CONFIG_MAPPING.

    Example:
        >>> _flatten_yaml_to_env({"model": {"name": "gemini-2.5-pro"}, "server": {"port": 9000}})
        {'MODEL_NAME': 'gemini-2.5-pro', 'PORT': '9000'}
    """
    result = {}

    for yaml_path, env_var in CONFIG_MAPPING.items():
        value: Any = yaml_dict
        for part in yaml_path.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                value = None
                break

        if value is not None:
            result[env_var] = str(value)

    return result


def _validate_config(config: Dict[str, str]) -> None:
    """Validate model configuration and give actionable errors.

    Raises:
        ConfigError: If an unsupported provider or a malformed number is configured
    """
    model_provider = config.get("MODEL_PROVIDER", DEFAULTS["MODEL_PROVIDER"])
    if model_provider not in SUPPORTED_MODEL_PROVIDERS:
        supported = ", ".join(SUPPORTED_MODEL_PROVIDERS)
        raise ConfigError(
            f"model.provider is set to '{model_provider}' which is not supported.\n"
            f"Currently supported providers: {supported}"
        )

    for key, cast in (("MODEL_TEMPERATURE", float), ("MODEL_MAX_TOKENS", int), ("PORT", int)):
        raw = config.get(key)
        if raw is None or raw == "":
            continue
        try:
            cast(raw)
        except ValueError as e:
            raise ConfigError(f"{key} must be a number, got '{raw}'") from e


# Track if config has been loaded to avoid duplicate work
_config_loaded = False


def load_app_config(config_path: str | None = None) -> Dict[str, str]:
    """Load application configuration from app.yaml with framework defaults.

    1. Loads .env (python-dotenv) from the app.yaml directory without
       overriding the process environment
    2. Looks for app.yaml in the current directory (or explicit path)
    3. Sets YAML values as os.environ entries that are not already set
    4. Applies DEFAULTS for anything still unset
    5. Validates the resulting configuration

    This function can be called multiple times safely - it will only load once
    unless an explicit path is given.

    Args:
        config_path: Optional explicit path to app.yaml

    Returns:
        Dictionary of effective config values (env var name -> value)

    Raises:
        ConfigError: If the YAML cannot be parsed or validation fails
    """
    global _config_loaded

    if _config_loaded and not config_path:
        return _current_config()

    yaml_path = Path(config_path) if config_path else Path("app.yaml")

    load_dotenv(yaml_path.parent / ".env")

    if yaml_path.exists():
        try:
            with open(yaml_path) as f:
                yaml_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse {yaml_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read {yaml_path}: {e}") from e

        if yaml_dict:
            for key, value in _flatten_yaml_to_env(yaml_dict).items():
                if key not in os.environ:
                    os.environ[key] = value
                    logger.debug(f"Set from {yaml_path.name}: {key}={value}")
            logger.info(f"Loaded config from {yaml_path.absolute()}")
        else:
            logger.warning(f"{yaml_path} is empty, using defaults only")
    else:
        logger.info(f"No app.yaml found at {yaml_path.absolute()}, using defaults and env vars only")

    for key, default_value in DEFAULTS.items():
        if key not in os.environ:
            os.environ[key] = default_value
            logger.debug(f"Applied default: {key}={default_value}")

    config = _current_config()
    _validate_config(config)

    _config_loaded = True
    return config


def _current_config() -> Dict[str, str]:
    keys = list(DEFAULTS) + [k for k in CONFIG_MAPPING.values() if k not in DEFAULTS]
    return {k: os.environ[k] for k in keys if k in os.environ}


def get_model(
    provider: str | None = None,
    model_name: str | None = None,
    temperature: float | None = None,
    max_tokens: int | None = None,
) -> BaseChatModel:
    """Get configured chat model from environment or explicit parameters.

    Supported providers:
    - google_vertexai: Google Vertex AI (Gemini models)
    - openai: OpenAI (GPT models)
    - anthropic: Anthropic (Claude models)

    Args:
        provider: Model provider override (default: MODEL_PROVIDER env var)
        model_name: Model name override (default: MODEL_NAME env var)
        temperature: Temperature override (default: MODEL_TEMPERATURE env var)
        max_tokens: Max tokens override (default: MODEL_MAX_TOKENS env var)

    Returns:
        Configured BaseChatModel instance

    Raises:
        ConfigError: If an unsupported model provider is specified
        ImportError: If the provider package is not installed
    """
    provider = provider or os.getenv("MODEL_PROVIDER", DEFAULTS["MODEL_PROVIDER"])
    model_name = model_name or os.getenv("MODEL_NAME", DEFAULTS["MODEL_NAME"])
    temperature = temperature if temperature is not None else float(
        os.getenv("MODEL_TEMPERATURE", DEFAULTS["MODEL_TEMPERATURE"])
    )
    max_tokens = max_tokens if max_tokens is not None else int(
        os.getenv("MODEL_MAX_TOKENS", DEFAULTS["MODEL_MAX_TOKENS"])
    )

    logger.info(
        f"Initializing model: provider={provider}, "
        f"model={model_name}, temp={temperature}, max_tokens={max_tokens}"
    )

    if provider == "google_vertexai":
        from langchain_google_vertexai import ChatVertexAI

        return ChatVertexAI(
            model_name=model_name,
            temperature=temperature,
            max_output_tokens=max_tokens,
            project=os.getenv("GOOGLE_CLOUD_PROJECT"),
            location=os.getenv("GOOGLE_CLOUD_LOCATION", DEFAULTS["GOOGLE_CLOUD_LOCATION"]),
        )

    if provider in ("openai", "anthropic"):
        from langchain.chat_models import init_chat_model

        return init_chat_model(
            f"{provider}:{model_name}",
            temperature=temperature,
            max_tokens=max_tokens,
        )

    raise ConfigError(
        f"Unsupported model provider: {provider}. "
        f"Supported providers: {', '.join(SUPPORTED_MODEL_PROVIDERS)}"
    )
