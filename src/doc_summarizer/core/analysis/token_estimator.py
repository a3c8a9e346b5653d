"""Statistical token estimation.

No tokenizer is involved: counts are approximations derived either from the
word count and the model's tokens-per-word ratio, or from a fixed
characters-per-token heuristic. Pick one strategy per run; the two are not
numerically interchangeable.
"""

import math
from enum import Enum

from doc_summarizer.core.errors import ConfigurationError
from doc_summarizer.core.models.modelspec import ModelSpec

CHARACTERS_PER_TOKEN = 4


class TokenStrategy(str, Enum):
    WORD_RATIO = "word_ratio"
    CHARACTER_RATIO = "character_ratio"

    @classmethod
    def from_name(cls, name: str) -> "TokenStrategy":
        try:
            return cls(name)
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise ConfigurationError(f"Unknown token strategy '{name}' (expected one of: {choices})") from None


def tokens_from_words(words: int, model: ModelSpec) -> int:
    return math.ceil(words * model.tokens_per_word)


def tokens_from_characters(characters: int) -> int:
    return math.ceil(characters / CHARACTERS_PER_TOKEN)


def count_output_tokens(text: str) -> int:
    """Token count of generated text, always by the characters-per-token heuristic."""
    return tokens_from_characters(len(text))

