from doc_summarizer.core.errors import require_non_negative
from doc_summarizer.core.models.modelspec import PricingProfile

from .cost_breakdown import CostBreakdown, CostMode
from .pricing_policy import PricingPolicy

TOKENS_PER_PRICE_UNIT = 1_000_000


def _price(tokens: int, price_per_1m: float) -> float:
    return (tokens / TOKENS_PER_PRICE_UNIT) * price_per_1m


def estimate_cost(tokens: int, pricing: PricingProfile) -> CostBreakdown:
    """Price a token count against every rate of the profile.

    Used before the call, when only the input is known: ``total_cost`` is the
    input cost alone.
    """
    require_non_negative(tokens, "tokens")
    input_cost = _price(tokens, pricing.input_price)
    return CostBreakdown(
        input_cost=input_cost,
        output_cost=_price(tokens, pricing.output_price),
        cached_input_cost=_price(tokens, pricing.cached_input_price),
        total_cost=input_cost,
        mode=CostMode.INPUT_ONLY,
    )


def actual_cost(input_tokens: int, output_tokens: int, pricing: PricingProfile) -> CostBreakdown:
    """Cost of a completed call: input plus output, no cached input."""
    require_non_negative(input_tokens, "input_tokens")
    require_non_negative(output_tokens, "output_tokens")
    input_cost = _price(input_tokens, pricing.input_price)
    output_cost = _price(output_tokens, pricing.output_price)
    return CostBreakdown(
        input_cost=input_cost,
        output_cost=output_cost,
        cached_input_cost=0.0,
        total_cost=input_cost + output_cost,
        mode=CostMode.INPUT_OUTPUT,
    )


class TokenPricingPolicy(PricingPolicy):
    def __init__(self, pricing: PricingProfile):
        self.pricing = pricing

    def estimate_cost(self, tokens: int) -> CostBreakdown:
        return estimate_cost(tokens, self.pricing)

    def actual_cost(self, input_tokens: int, output_tokens: int) -> CostBreakdown:
        return actual_cost(input_tokens, output_tokens, self.pricing)
