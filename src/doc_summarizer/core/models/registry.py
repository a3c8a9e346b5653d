from doc_summarizer.core.errors import ConfigurationError
from doc_summarizer.core.models.modelspec import ModelSpec


class ModelRegistry:
    _models: dict[str, ModelSpec] = {}

    @classmethod
    def register(cls, model: ModelSpec):
        cls._models[model.id] = model

    @classmethod
    def get(cls, model_id: str) -> ModelSpec:
        try:
            return cls._models[model_id]
        except KeyError:
            raise ConfigurationError(f"Model {model_id} not found in model catalog") from None

    @classmethod
    def list(cls, platform_id=None) -> list[ModelSpec]:
        return [
            m for m in cls._models.values()
            if platform_id is None or m.platform_id == platform_id
        ]

    @classmethod
    def clear(cls):
        cls._models = {}
