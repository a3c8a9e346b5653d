"""Loader for model definitions from YAML configuration."""

from pathlib import Path
from typing import Any, List, Optional

import yaml

from doc_summarizer.core.errors import ConfigurationError
from doc_summarizer.util.paths import get_config_dir

from .modelspec import ModelSpec, PricingProfile


def get_models_config_path() -> Path:
    return get_config_dir() / "models.yaml"


def _parse_pricing(entry: dict[str, Any]) -> PricingProfile:
    pricing = entry.get("pricing") or {}
    if not isinstance(pricing, dict):
        raise ConfigurationError(f"Model {entry.get('id', '<unknown>')} pricing must be a mapping, got {pricing!r}")
    return PricingProfile(
        input_price=float(pricing.get("input", 0.0)),
        output_price=float(pricing.get("output", 0.0)),
        cached_input_price=float(pricing.get("cached_input", 0.0)),
    )


def parse_model_entry(entry: dict[str, Any]) -> ModelSpec:
    """Build a ModelSpec from one catalog entry, raising ConfigurationError if it is malformed."""
    if not isinstance(entry, dict):
        raise ConfigurationError(f"Model catalog entry must be a mapping, got {entry!r}")

    try:
        return ModelSpec(
            id=entry["id"],
            name=entry.get("name", entry["id"]),
            context_window=int(entry["context_window"]),
            tokens_per_word=float(entry["tokens_per_word"]),
            bytes_per_token=float(entry["bytes_per_token"]),
            bytes_per_character=float(entry["bytes_per_character"]),
            description=entry.get("description", ""),
            pricing=_parse_pricing(entry),
            platform_id=entry.get("platform_id", "openai"),
        )
    except KeyError as e:
        model_id = entry.get("id", "<unknown>")
        raise ConfigurationError(f"Model {model_id} is missing required field {e.args[0]}") from None
    except (TypeError, ValueError) as e:
        model_id = entry.get("id", "<unknown>")
        raise ConfigurationError(f"Model {model_id} has an invalid field: {e}") from None


def load_models_from_yaml(config_path: Optional[Path] = None) -> List[ModelSpec]:
    """Load all model definitions from models.yaml."""
    config_path = config_path or get_models_config_path()

    if not config_path.exists():
        raise FileNotFoundError(f"Models config not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigurationError(f"Models config must be a mapping with a 'models' list: {config_path}")

    entries = data.get("models") or []
    if not isinstance(entries, list):
        raise ConfigurationError(f"'models' must be a list in {config_path}")

    return [parse_model_entry(entry) for entry in entries]
