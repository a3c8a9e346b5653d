# platforms/chat_completion_platform.py
from abc import ABC, abstractmethod
from typing import Optional


class ChatCompletionPlatform(ABC):
    """
    Abstract base class for chat-completion style APIs.
    """
    id: str
    name: str

    @abstractmethod
    def call_api(self, model: str, prompt: str, **kwargs) -> Optional[str]:
        """
        Sends the prompt as a single user message and returns the response text.
        Returns None when the platform produced no content.
        kwargs: optional platform-specific parameters
        """
