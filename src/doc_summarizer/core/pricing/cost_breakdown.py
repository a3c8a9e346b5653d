from dataclasses import dataclass
from enum import Enum


class CostMode(str, Enum):
    INPUT_ONLY = "input_only"        # pre-call estimate: total is the input cost
    INPUT_OUTPUT = "input_output"    # post-call accounting: total is input + output


@dataclass(frozen=True)
class CostBreakdown:
    # USD
    input_cost: float
    output_cost: float
    cached_input_cost: float
    total_cost: float
    mode: CostMode = CostMode.INPUT_ONLY
