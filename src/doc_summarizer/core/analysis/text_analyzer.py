import math
import re
from dataclasses import dataclass

from doc_summarizer.core.models.modelspec import ModelSpec

from .token_estimator import TokenStrategy, tokens_from_characters, tokens_from_words

WORDS_PER_PAGE = 500  # A4 page

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class TextStatistics:
    words: int
    characters: int
    lines: int
    estimated_tokens: int
    character_size: float       # synthetic bytes, not a real byte count
    token_size: float
    total_size: float
    context_utilization: float  # percent, may exceed 100
    estimated_pages: int
    token_strategy: TokenStrategy = TokenStrategy.WORD_RATIO

    @property
    def exceeds_context(self) -> bool:
        return self.context_utilization > 100


def count_words(text: str) -> int:
    """Count whitespace-separated pieces of the stripped text.

    Empty and all-whitespace text count as one word, matching the naive split
    used by earlier reports.
    """
    return len(_WHITESPACE.split(text.strip()))


def count_lines(text: str) -> int:
    return len(text.split("\n"))


def analyze_text(text: str, model: ModelSpec, strategy: TokenStrategy = TokenStrategy.WORD_RATIO) -> TextStatistics:
    words = count_words(text)
    characters = len(text)
    lines = count_lines(text)

    if strategy is TokenStrategy.CHARACTER_RATIO:
        estimated_tokens = tokens_from_characters(characters)
    else:
        estimated_tokens = tokens_from_words(words, model)

    character_size = characters * model.bytes_per_character
    token_size = estimated_tokens * model.bytes_per_token

    return TextStatistics(
        words=words,
        characters=characters,
        lines=lines,
        estimated_tokens=estimated_tokens,
        character_size=character_size,
        token_size=token_size,
        total_size=character_size + token_size,
        context_utilization=(estimated_tokens / model.context_window) * 100,
        estimated_pages=math.ceil(words / WORDS_PER_PAGE),
        token_strategy=strategy,
    )


def estimate_tokens(text: str, model: ModelSpec, strategy: TokenStrategy = TokenStrategy.WORD_RATIO) -> int:
    """Token estimate alone, computed exactly as analyze_text would."""
    if strategy is TokenStrategy.CHARACTER_RATIO:
        return tokens_from_characters(len(text))
    return tokens_from_words(count_words(text), model)


def compression_ratio(source: TextStatistics, summary: TextStatistics) -> float | None:
    """Characters of the source per character of the summary, None for an empty summary."""
    if summary.characters == 0:
        return None
    return source.characters / summary.characters
