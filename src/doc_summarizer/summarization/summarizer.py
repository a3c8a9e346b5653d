import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from doc_summarizer.core.analysis.text_analyzer import TextStatistics, analyze_text
from doc_summarizer.core.analysis.token_estimator import TokenStrategy, count_output_tokens
from doc_summarizer.core.models.modelspec import ModelSpec
from doc_summarizer.core.pricing.cost_breakdown import CostBreakdown
from doc_summarizer.core.pricing.realtime_cost_reporter import RealtimeCostReporter
from doc_summarizer.core.pricing.token_pricing_policy import TokenPricingPolicy
from doc_summarizer.core.prompts.prompt_loader import get_prompt
from doc_summarizer.logging import get_logger
from doc_summarizer.platforms.chat_completion_platform import ChatCompletionPlatform
from doc_summarizer.reporting.report import (
    analysis_report_lines,
    cost_report_lines,
    print_lines,
    summary_report_lines,
)

NO_SUMMARY_PLACEHOLDER = "No summary generated."


@dataclass(frozen=True)
class SummaryResult:
    summary: str
    source_stats: TextStatistics
    summary_stats: TextStatistics
    estimated_cost: CostBreakdown
    actual_cost: CostBreakdown
    output_tokens: int


def read_document(path: Path) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def write_document(path: Path, text: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


class DocumentSummarizer:
    """Summarizes one document with a chat-completion model, reporting size and cost around the call."""

    def __init__(
        self,
        model: ModelSpec,
        platform: ChatCompletionPlatform,
        token_strategy: TokenStrategy = TokenStrategy.WORD_RATIO,
        prompt_id: Optional[str] = None,
    ):
        self.model = model
        self.platform = platform
        self.token_strategy = token_strategy
        self.prompt_id = prompt_id
        self.pricing_policy = TokenPricingPolicy(model.pricing)

    def analyze(self, text: str) -> TextStatistics:
        return analyze_text(text, self.model, self.token_strategy)

    def build_prompt(self, content: str) -> str:
        prompt_spec = get_prompt(self.prompt_id)
        get_logger().debug(f"Using prompt {prompt_spec.id} v{prompt_spec.version}")
        return prompt_spec.build(content=content)

    def summarize(self, content: str, source_stats: Optional[TextStatistics] = None) -> SummaryResult:
        logger = get_logger()
        source_stats = source_stats or self.analyze(content)
        prompt = self.build_prompt(content)

        cost_reporter = RealtimeCostReporter(self.model)
        input_tokens = source_stats.estimated_tokens
        estimated_cost = self.pricing_policy.estimate_cost(input_tokens)

        logger.info(f"Making summarization API call to {self.model.id} (est. cost: {cost_reporter.estimate_cost(input_tokens)})...")
        logger.debug(f"Full prompt:\n{prompt}")

        start_time = time.time()
        response_text = self.platform.call_api(self.model.id, prompt)
        elapsed = time.time() - start_time

        generated = response_text or ""
        summary = generated or NO_SUMMARY_PLACEHOLDER
        if not generated:
            logger.warning("Model returned no content, writing placeholder summary")

        output_tokens = count_output_tokens(generated)
        actual_cost = self.pricing_policy.actual_cost(input_tokens, output_tokens)
        logger.info(f"Summarization call completed in {elapsed:.2f}s (cost: {cost_reporter.actual_cost(input_tokens, output_tokens)})")
        logger.debug(f"Full response:\n{summary}")

        return SummaryResult(
            summary=summary,
            source_stats=source_stats,
            summary_stats=self.analyze(generated),
            estimated_cost=estimated_cost,
            actual_cost=actual_cost,
            output_tokens=output_tokens,
        )

    def report_analysis(self, content: str) -> TextStatistics:
        """Analyze content and print the analysis and pre-call cost estimate."""
        stats = self.analyze(content)
        print_lines(analysis_report_lines(stats, self.model))
        print_lines(cost_report_lines(self.pricing_policy.estimate_cost(stats.estimated_tokens)))
        return stats

    def analyze_file(self, input_path: Path) -> TextStatistics:
        return self.report_analysis(read_document(input_path))

    def summarize_file(self, input_path: Path, output_path: Path) -> SummaryResult:
        """Summarize a document file into output_path, printing reports before and after the call."""
        logger = get_logger()
        content = read_document(input_path)

        source_stats = self.report_analysis(content)

        result = self.summarize(content, source_stats)

        write_document(output_path, result.summary)
        logger.info(f"Summary has been saved to {output_path}")

        print_lines(analysis_report_lines(result.summary_stats, self.model, title="Summary Analysis"))
        print_lines(cost_report_lines(result.actual_cost))
        print_lines(summary_report_lines(result.source_stats, result.summary_stats, result.output_tokens, output_path))
        return result
