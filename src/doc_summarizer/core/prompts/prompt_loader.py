"""Central loader for versioned prompt templates."""

import json
from pathlib import Path
from typing import Dict, Any

PROMPTS_DIR = Path(__file__).parent.parent.parent / "prompts"

DEFAULT_PROMPT_ID = "summary_v1"


class PromptSpec:
    """Holds prompt specification and template."""

    def __init__(self, spec: Dict[str, Any], template: str):
        self.spec = spec
        self.template = template
        self.id = spec.get("id", "unknown")
        self.version = spec.get("version", "0.0")

    def build(self, **kwargs) -> str:
        return self.template.format(**kwargs)


class PromptLoader:
    """Loads prompt specs and templates from disk."""

    _cache: Dict[str, PromptSpec] = {}

    @classmethod
    def load(cls, prompt_id: str) -> PromptSpec:
        if prompt_id in cls._cache:
            return cls._cache[prompt_id]

        spec_path = PROMPTS_DIR / f"{prompt_id}.json"
        template_path = PROMPTS_DIR / f"{prompt_id}.template.txt"

        with open(spec_path, "r", encoding="utf-8") as f:
            spec = json.load(f)

        with open(template_path, "r", encoding="utf-8") as f:
            template = f.read()

        prompt_spec = PromptSpec(spec, template)
        cls._cache[prompt_id] = prompt_spec
        return prompt_spec


def get_prompt(prompt_id: str = None) -> PromptSpec:
    """Get a summarization prompt by id, falling back to the default."""
    return PromptLoader.load(prompt_id or DEFAULT_PROMPT_ID)
