from dataclasses import dataclass, field

from doc_summarizer.core.errors import ConfigurationError


@dataclass(frozen=True)
class PricingProfile:
    # USD per 1M tokens
    input_price: float = 0.0
    output_price: float = 0.0
    cached_input_price: float = 0.0

    def __post_init__(self):
        for name in ("input_price", "output_price", "cached_input_price"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"Pricing field {name} must be non-negative, got {getattr(self, name)}")


@dataclass(frozen=True)
class ModelSpec:
    id: str                     # e.g. "o3-mini"
    name: str                   # display name, e.g. "OpenAI o3-mini"
    context_window: int         # tokens

    # Estimation ratios
    tokens_per_word: float = 1.3
    bytes_per_token: float = 4.0
    bytes_per_character: float = 1.0

    description: str = ""
    pricing: PricingProfile = field(default_factory=PricingProfile)
    platform_id: str = "openai"

    def __post_init__(self):
        if self.context_window <= 0:
            raise ConfigurationError(
                f"Model {self.id} has a non-positive context window: {self.context_window}"
            )
        for name in ("tokens_per_word", "bytes_per_token", "bytes_per_character"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"Model {self.id} field {name} must be non-negative, got {getattr(self, name)}")
