# src/ragdesk/config.py
"""Configuration loading utilities for ragdesk.

This module provides configuration loading for the CLI and for applications
embedding ragdesk. It handles:
- Finding and loading ragdesk.yaml config files
- Loading .env files for API keys
- Building Settings objects from multiple sources
- Creating KnowledgeBase instances from configuration
"""

from __future__ import annotations

import importlib
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

from pydantic import ValidationError

if TYPE_CHECKING:
    from ragdesk.knowledge_base import KnowledgeBase
    from ragdesk.settings import Settings

try:
    import yaml  # type: ignore[import-untyped]

    YAML_AVAILABLE = True
except ImportError:
    YAML_AVAILABLE = False

logger = logging.getLogger(__name__)

CONFIG_FILES = ["ragdesk.yaml", "ragdesk.yml", ".ragdeskrc"]
ENV_FILE = ".env"

# Used when MISTRAL_API_KEY is set and no model is configured
DEFAULT_EMBEDDING_MODEL = "mistral/mistral-embed"


@dataclass
class ConfigError:
    """Error during configuration loading."""

    message: str
    suggestion: str | None = None


def load_env_file(env_path: str | Path = ENV_FILE) -> None:
    """Load environment variables from a .env file if it exists.

    Variables already present in the environment are left alone.

    Args:
        env_path: Path to .env file (default: .env in current directory)
    """
    path = Path(env_path)
    if not path.exists():
        return

    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip().strip("\"'")
            if key not in os.environ:
                os.environ[key] = value


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find a configuration file in start_dir or its parents.

    Args:
        start_dir: Directory to start searching from (default: cwd)
    """
    current = start_dir or Path.cwd()
    for _ in range(10):  # Limit search depth
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


VALID_ROOT_KEYS = {
    "provider",
    "embedding_model",
    "expected_dimension",
    # Custom provider
    "embedder",
    "embedder_kwargs",
    "settings",
}

VALID_SETTINGS_KEYS = {
    "chunk_size",
    "chunk_overlap_sentences",
    "overlap",  # alias
    "min_chunk_length",
    "sentence_segmenter",
    "default_k",
    "top_k",  # alias
    "min_relevance",
    "relative_relevance",
    "context_separator",
    "embedding_dimension",
    "embedding_timeout",
    "num_retries",
}

# YAML key -> Settings field
_SETTINGS_KEY_MAPPINGS = {
    "chunk_size": "chunk_size",
    "chunk_overlap_sentences": "chunk_overlap_sentences",
    "overlap": "chunk_overlap_sentences",
    "min_chunk_length": "min_chunk_length",
    "sentence_segmenter": "sentence_segmenter",
    "default_k": "default_k",
    "top_k": "default_k",
    "min_relevance": "min_relevance",
    "relative_relevance": "relative_relevance",
    "context_separator": "context_separator",
    "embedding_dimension": "embedding_dimension",
    "embedding_timeout": "embedding_timeout",
    "num_retries": "num_retries",
}


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Validate config and return warnings about unknown keys.

    Args:
        config: The loaded configuration dictionary
        config_path: Path to config file (for error messages)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    unknown_root = set(config.keys()) - VALID_ROOT_KEYS
    if unknown_root:
        path_str = str(config_path) if config_path else "config"
        warnings.append(f"Unknown config keys in {path_str}: {', '.join(sorted(unknown_root))}")

    settings = config.get("settings", {})
    if isinstance(settings, dict):
        unknown_settings = set(settings.keys()) - VALID_SETTINGS_KEYS
        if unknown_settings:
            warnings.append(f"Unknown settings keys: {', '.join(sorted(unknown_settings))}")

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found or PyYAML is missing)
    """
    config_path = Path(config_path) if config_path is not None else find_config_file()

    if config_path is None:
        return {}

    if not YAML_AVAILABLE:
        logger.warning("Ignoring %s: PyYAML is not installed", config_path)
        return {}

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    for warning in validate_config(config, config_path):
        logger.warning(warning)

    return cast(dict[str, Any], config)


def _safe_int(value: str | None) -> int | None:
    """Parse int from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _safe_float(value: str | None) -> float | None:
    """Parse float from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def get_settings_from_env() -> dict[str, Any]:
    """Read behavioral settings from RAGDESK_* environment variables.

    Only explicitly set, parseable values are returned, so YAML settings
    apply unless an environment variable overrides them.
    """
    result: dict[str, Any] = {}

    int_settings = {
        "RAGDESK_CHUNK_SIZE": "chunk_size",
        "RAGDESK_CHUNK_OVERLAP_SENTENCES": "chunk_overlap_sentences",
        "RAGDESK_MIN_CHUNK_LENGTH": "min_chunk_length",
        "RAGDESK_DEFAULT_K": "default_k",
        "RAGDESK_NUM_RETRIES": "num_retries",
    }
    for env_key, settings_key in int_settings.items():
        if (val := _safe_int(os.environ.get(env_key))) is not None:
            result[settings_key] = val

    float_settings = {
        "RAGDESK_MIN_RELEVANCE": "min_relevance",
        "RAGDESK_RELATIVE_RELEVANCE": "relative_relevance",
        "RAGDESK_EMBEDDING_TIMEOUT": "embedding_timeout",
    }
    for env_key, settings_key in float_settings.items():
        if (fval := _safe_float(os.environ.get(env_key))) is not None:
            result[settings_key] = fval

    if os.environ.get("RAGDESK_SENTENCE_SEGMENTER"):
        result["sentence_segmenter"] = os.environ["RAGDESK_SENTENCE_SEGMENTER"].lower()

    return result


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract settings from the 'settings:' section of a YAML config."""
    yaml_settings = config.get("settings", {}) or {}
    return {
        settings_key: yaml_settings[yaml_key]
        for yaml_key, settings_key in _SETTINGS_KEY_MAPPINGS.items()
        if yaml_key in yaml_settings
    }


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Build a Settings object from YAML config and env vars.

    Precedence (highest to lowest):
    1. Environment variables
    2. YAML settings: section
    3. Settings class defaults

    Raises:
        pydantic.ValidationError: If a merged value is out of range
    """
    from ragdesk.settings import Settings

    config = config or {}
    yaml_settings = get_settings_from_yaml(config)
    env_settings = env_settings if env_settings is not None else get_settings_from_env()

    return Settings(**{**yaml_settings, **env_settings})


def describe_validation_error(error: ValidationError) -> str:
    """Summarize a settings error, e.g. "chunk_size: Input should be greater than 0"."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in error.errors()
    )


def import_class(class_path: str) -> type[Any]:
    """Import a class from a dotted path like 'my_package.module.ClassName'."""
    module_path, class_name = class_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    return cast(type[Any], getattr(module, class_name))


@dataclass
class RagdeskConfig:
    """Configuration for creating a KnowledgeBase."""

    provider: str
    settings: Settings
    embedding_model: str | None = None
    embedding_api_key: str | None = None
    expected_dimension: int | None = None
    # Custom provider fields
    embedder_class: str | None = None
    embedder_kwargs: dict[str, Any] = field(default_factory=dict)


def get_knowledge_base_config(
    config_path: str | Path | None = None,
) -> RagdeskConfig | ConfigError:
    """Resolve the configuration for a KnowledgeBase without creating it.

    The provider comes from the config file. Without one, the LiteLLM
    provider is used when an embedding model can be determined
    (RAGDESK_EMBEDDING_MODEL, the config file, or MISTRAL_API_KEY implying
    mistral/mistral-embed); otherwise the local hash provider is used.

    Args:
        config_path: Override config file path

    Returns:
        RagdeskConfig, or ConfigError if the configuration is invalid
    """
    config = load_config(config_path)
    try:
        settings = build_settings(config, get_settings_from_env())
    except ValidationError as e:
        return ConfigError(
            message=f"Invalid settings: {describe_validation_error(e)}",
            suggestion="Check the settings: section of ragdesk.yaml and RAGDESK_* variables",
        )

    embedding_model = os.environ.get("RAGDESK_EMBEDDING_MODEL") or config.get("embedding_model")
    api_key = os.environ.get("RAGDESK_EMBEDDING_API_KEY")
    if not embedding_model and os.environ.get("MISTRAL_API_KEY"):
        embedding_model = DEFAULT_EMBEDDING_MODEL

    provider = config.get("provider") or ("litellm" if embedding_model else "local")

    if provider == "litellm":
        if not embedding_model:
            return ConfigError(
                message="LiteLLM provider requires an embedding_model.",
                suggestion="Set embedding_model in ragdesk.yaml, RAGDESK_EMBEDDING_MODEL "
                "or MISTRAL_API_KEY",
            )
        return RagdeskConfig(
            provider=provider,
            settings=settings,
            embedding_model=embedding_model,
            embedding_api_key=api_key,
            expected_dimension=config.get("expected_dimension"),
        )

    if provider == "local":
        return RagdeskConfig(provider=provider, settings=settings)

    if provider == "custom":
        embedder_class = config.get("embedder")
        if not embedder_class:
            return ConfigError(
                message="Custom provider requires an embedder.",
                suggestion="Add embedder to ragdesk.yaml as a dotted class path",
            )
        return RagdeskConfig(
            provider=provider,
            settings=settings,
            embedder_class=embedder_class,
            embedder_kwargs=config.get("embedder_kwargs") or {},
        )

    return ConfigError(
        message=f"Unknown provider '{provider}'",
        suggestion="Supported providers: litellm, local, custom",
    )


def create_knowledge_base(config: RagdeskConfig) -> KnowledgeBase:
    """Create a KnowledgeBase from configuration.

    Raises:
        ImportError: If a custom embedder class cannot be imported
        ValueError: If the configuration is incomplete
    """
    from ragdesk.configuration import LiteLLMProvider, LocalProvider
    from ragdesk.knowledge_base import KnowledgeBase

    if config.provider == "litellm":
        if not config.embedding_model:
            raise ValueError("LiteLLM provider requires embedding_model")
        return KnowledgeBase(
            provider=LiteLLMProvider(
                embedding=config.embedding_model,
                api_key=config.embedding_api_key,
                expected_dimension=config.expected_dimension,
            ),
            settings=config.settings,
        )

    if config.provider == "local":
        return KnowledgeBase(provider=LocalProvider(), settings=config.settings)

    if config.provider == "custom":
        if not config.embedder_class:
            raise ValueError("Custom provider requires embedder class path")

        embedder = import_class(config.embedder_class)(**config.embedder_kwargs)

        @dataclass(frozen=True)
        class _CustomProvider:
            """Inline provider wrapping a user-supplied embedder."""

            _embedder: Any

            def build_embedder(self, settings: Settings) -> Any:
                return self._embedder

        return KnowledgeBase(provider=_CustomProvider(_embedder=embedder), settings=config.settings)

    raise ValueError(f"Unknown provider: {config.provider}")


def get_knowledge_base(config_path: str | Path | None = None) -> KnowledgeBase | ConfigError:
    """Create a KnowledgeBase based on configuration.

    Convenience wrapper around get_knowledge_base_config and create_knowledge_base.
    """
    config = get_knowledge_base_config(config_path)
    if isinstance(config, ConfigError):
        return config
    return create_knowledge_base(config)
