import json
from pathlib import Path
from typing import Any, Optional

from doc_summarizer.core.analysis.token_estimator import TokenStrategy
from doc_summarizer.core.errors import ConfigurationError
from doc_summarizer.logging import get_logger
from doc_summarizer.util.paths import get_config_path

from .run_config import RunConfig


class ConfigManager:

    def __init__(self, config_path: Optional[Path] = None):
        self._config_path = config_path or get_config_path()
        self._config_data = None

    @property
    def config_path(self):
        return self._config_path

    def load_config_data(self) -> dict[str, Any]:
        if self._config_data is None:
            if not self._config_path.exists():
                get_logger().debug(f"No configuration file at {self._config_path}, using defaults")
                self._config_data = {}
            else:
                with open(self._config_path, 'r', encoding='utf-8') as f:
                    try:
                        self._config_data = json.load(f)
                    except json.JSONDecodeError as e:
                        raise ConfigurationError(f"Invalid JSON in {self._config_path}: {e}") from None

                if not isinstance(self._config_data, dict):
                    raise ConfigurationError(f"Configuration must be a JSON object: {self._config_path}")

        return self._config_data

    def get_run_config(self) -> RunConfig:
        data = self.load_config_data()
        defaults = RunConfig()

        models_path = data.get('models_path')
        try:
            return RunConfig(
                model_id=data.get('model_id', defaults.model_id),
                input_path=Path(data.get('input_path', defaults.input_path)),
                output_path=Path(data.get('output_path', defaults.output_path)),
                token_strategy=TokenStrategy.from_name(data.get('token_strategy', defaults.token_strategy.value)),
                models_path=Path(models_path) if models_path else None,
                prompt_id=data.get('prompt_id'),
            )
        except TypeError as e:
            raise ConfigurationError(f"Invalid value in {self._config_path}: {e}") from None
