# Reference class

from .cost_breakdown import CostBreakdown


class PricingPolicy:
    def estimate_cost(self, tokens: int) -> CostBreakdown:
        ...

    def actual_cost(self, input_tokens: int, output_tokens: int) -> CostBreakdown:
        ...
