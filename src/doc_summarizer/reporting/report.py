"""Console report sections for document analysis and cost.

Each builder returns a list of lines; ``print_lines`` writes them to stdout.
Section order and headers follow the long-standing report layout, so only
append new lines at the end of a section.
"""

from enum import Enum
from pathlib import Path
from typing import List

from doc_summarizer.core.analysis.text_analyzer import TextStatistics, compression_ratio
from doc_summarizer.core.models.modelspec import ModelSpec
from doc_summarizer.core.pricing.cost_breakdown import CostBreakdown, CostMode

from .formatting import format_bytes, format_number, format_percentage, format_price, format_ratio

HEADER_RULE = "=" * 50

EXCEEDS_CONTEXT_THRESHOLD = 100.0
NEAR_LIMIT_THRESHOLD = 80.0


class Recommendation(Enum):
    EXCEEDS_CONTEXT = "⚠️  Warning: Content exceeds context window! Consider chunking the content."
    NEAR_LIMIT = "⚠️  Warning: Content is close to context window limit!"
    FITS = "✅ Content fits well within context window."

    @property
    def message(self) -> str:
        return self.value


def recommendation_for(context_utilization: float) -> Recommendation:
    if context_utilization > EXCEEDS_CONTEXT_THRESHOLD:
        return Recommendation.EXCEEDS_CONTEXT
    if context_utilization > NEAR_LIMIT_THRESHOLD:
        return Recommendation.NEAR_LIMIT
    return Recommendation.FITS


def analysis_report_lines(stats: TextStatistics, model: ModelSpec, title: str = "Analysis") -> List[str]:
    return [
        "",
        f"{title} for {model.name}:",
        HEADER_RULE,
        f"Model Description: {model.description}",
        f"Context Window: {format_number(model.context_window)} tokens",
        "",
        "Text Statistics:",
        f"- Words: {format_number(stats.words)}",
        f"- Characters: {format_number(stats.characters)}",
        f"- Lines: {format_number(stats.lines)}",
        f"- Estimated Pages: {stats.estimated_pages}",
        "",
        "Token Analysis:",
        f"- Estimation Strategy: {stats.token_strategy.value}",
        f"- Estimated Tokens: {format_number(stats.estimated_tokens)}",
        f"- Context Window Utilization: {format_percentage(stats.context_utilization)}",
        "",
        "Size Analysis:",
        f"- Character Size: {format_bytes(stats.character_size)}",
        f"- Token Size: {format_bytes(stats.token_size)}",
        f"- Total Size: {format_bytes(stats.total_size)}",
        "",
        "Recommendations:",
        recommendation_for(stats.context_utilization).message,
    ]


def cost_report_lines(cost: CostBreakdown) -> List[str]:
    if cost.mode is CostMode.INPUT_ONLY:
        return [
            "",
            "Cost Estimate (input tokens only):",
            f"- Input Cost: {format_price(cost.input_cost)}",
            f"- Output Cost (same tokens at output rate): {format_price(cost.output_cost)}",
            f"- Cached Input Cost: {format_price(cost.cached_input_cost)}",
            f"- Estimated Total: {format_price(cost.total_cost)}",
        ]
    return [
        "",
        "Actual Cost (input + output tokens):",
        f"- Input Cost: {format_price(cost.input_cost)}",
        f"- Output Cost: {format_price(cost.output_cost)}",
        f"- Cached Input Cost: {format_price(cost.cached_input_cost)}",
        f"- Total Cost: {format_price(cost.total_cost)}",
    ]


def summary_report_lines(source: TextStatistics, summary: TextStatistics, output_tokens: int, output_path: Path) -> List[str]:
    return [
        "",
        "Summary:",
        f"- Saved To: {output_path}",
        f"- Input Tokens: {format_number(source.estimated_tokens)}",
        f"- Output Tokens: {format_number(output_tokens)}",
        f"- Compression Ratio: {format_ratio(compression_ratio(source, summary))}",
    ]


def print_lines(lines: List[str]) -> None:
    for line in lines:
        print(line)
