from doc_summarizer.core.errors import ConfigurationError

from .chat_completion_platform import ChatCompletionPlatform


class PlatformRegistry:
    _platforms: dict[str, ChatCompletionPlatform] = {}

    @classmethod
    def register(cls, platform: ChatCompletionPlatform):
        cls._platforms[platform.id] = platform

    @classmethod
    def get(cls, platform_id: str) -> ChatCompletionPlatform:
        try:
            return cls._platforms[platform_id]
        except KeyError:
            raise ConfigurationError(f"No platform registered for id: {platform_id}") from None

    @classmethod
    def clear(cls):
        cls._platforms = {}
