# platforms/openai_platform.py
import os
from typing import Optional

from openai import OpenAI

from .chat_completion_platform import ChatCompletionPlatform


class OpenAIPlatform(ChatCompletionPlatform):
    id = "openai"
    name = "OpenAI"

    def __init__(self, api_key: str = None):
        self.api_key = api_key or os.environ.get("OPENAI_API_KEY")
        self.client = None
        if self.api_key:
            self.client = OpenAI(api_key=self.api_key)

    def call_api(self, model: str, prompt: str, **kwargs) -> Optional[str]:
        """
        Call OpenAI ChatCompletion API with the prompt as one user message.
        kwargs: optional OpenAI parameters (temperature, max_tokens, etc.)
        """
        if not self.client:
            raise RuntimeError("OpenAI client not initialized - OPENAI_API_KEY missing")
        messages = [{"role": "user", "content": prompt}]

        response = self.client.chat.completions.create(
            model=model,
            messages=messages,
            **kwargs
        )
        return response.choices[0].message.content

