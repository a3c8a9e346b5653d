import pytest

from doc_summarizer.core import bootstrap
from doc_summarizer.core.models.modelspec import ModelSpec, PricingProfile
from doc_summarizer.core.models.registry import ModelRegistry
from doc_summarizer.core.prompts.prompt_loader import PromptLoader
from doc_summarizer.logging import LoggerRegistry
from doc_summarizer.platforms.platform_registry import PlatformRegistry


@pytest.fixture(autouse=True)
def reset_registries():
    """Registries are process-wide; give every test a clean slate."""
    ModelRegistry.clear()
    PlatformRegistry.clear()
    LoggerRegistry.reset()
    PromptLoader._cache = {}
    bootstrap._bootstrapped = False
    yield
    ModelRegistry.clear()
    PlatformRegistry.clear()
    LoggerRegistry.reset()
    bootstrap._bootstrapped = False


@pytest.fixture
def model_spec():
    return ModelSpec(
        id="test-model",
        name="Test Model",
        context_window=1000,
        tokens_per_word=1.3,
        bytes_per_token=4.0,
        bytes_per_character=1.0,
        description="Model used by the test suite",
        pricing=PricingProfile(input_price=5.0, output_price=10.0, cached_input_price=2.5),
    )


MODELS_YAML = """\
models:
  - id: test-model
    name: Test Model
    platform_id: openai
    context_window: 1000
    tokens_per_word: 1.3
    bytes_per_token: 4
    bytes_per_character: 1
    description: Model used by the test suite
    pricing:
      input: 5
      output: 10
      cached_input: 2.5
"""


@pytest.fixture
def models_yaml(tmp_path):
    path = tmp_path / "models.yaml"
    path.write_text(MODELS_YAML, encoding="utf-8")
    return path
