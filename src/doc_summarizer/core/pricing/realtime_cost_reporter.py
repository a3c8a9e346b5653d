from doc_summarizer.core.models.modelspec import ModelSpec
from doc_summarizer.reporting.formatting import format_price

from .token_pricing_policy import TokenPricingPolicy


class RealtimeCostReporter:
    """Formats cost strings for log lines around a single API call."""

    def __init__(self, model: ModelSpec):
        self.model = model
        self.pricing_policy = TokenPricingPolicy(model.pricing)

    def estimate_cost(self, input_tokens: int) -> str:
        return format_price(self.pricing_policy.estimate_cost(input_tokens).total_cost)

    def actual_cost(self, input_tokens: int, output_tokens: int) -> str:
        return format_price(self.pricing_policy.actual_cost(input_tokens, output_tokens).total_cost)
