from pathlib import Path
from typing import Optional

from doc_summarizer.platforms.platform_registry import PlatformRegistry
from doc_summarizer.platforms.openai_platform import OpenAIPlatform

from doc_summarizer.core.models.registry import ModelRegistry
from doc_summarizer.core.models.model_loader import load_models_from_yaml

_bootstrapped = False


def bootstrap_platform_registry():
    PlatformRegistry.register(OpenAIPlatform())


def bootstrap_model_registry(models_path: Optional[Path] = None):
    for model in load_models_from_yaml(models_path):
        ModelRegistry.register(model)


def bootstrap_all(models_path: Optional[Path] = None):
    global _bootstrapped
    if _bootstrapped:
        return
    bootstrap_platform_registry()
    bootstrap_model_registry(models_path)
    _bootstrapped = True
