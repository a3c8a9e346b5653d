from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from doc_summarizer.core.analysis.token_estimator import TokenStrategy


@dataclass(frozen=True)
class RunConfig:
    model_id: str = "o3-mini"
    input_path: Path = Path("content.txt")
    output_path: Path = Path("result.md")
    token_strategy: TokenStrategy = TokenStrategy.WORD_RATIO
    models_path: Optional[Path] = None
    prompt_id: Optional[str] = None

    def with_overrides(self, **overrides) -> "RunConfig":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
