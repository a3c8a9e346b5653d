from typing import Optional

from doc_summarizer.logging.log_level import LogLevel
from doc_summarizer.logging.logger import Logger
from doc_summarizer.logging.console_logger import ConsoleLogger


class LoggerRegistry:
    """Global registry for the active logger instance."""

    _instance: Optional[Logger] = None

    @classmethod
    def get(cls) -> Logger:
        """Get the current logger, creating a default ConsoleLogger if none set."""
        if cls._instance is None:
            cls._instance = ConsoleLogger(level=LogLevel.INFO)
        return cls._instance

    @classmethod
    def set(cls, logger: Logger) -> None:
        cls._instance = logger

    @classmethod
    def reset(cls) -> None:
        """Reset to no logger (next get() will create default)."""
        cls._instance = None

    @classmethod
    def configure(cls, level: LogLevel = LogLevel.INFO, use_colors: Optional[bool] = None) -> Logger:
        """Install a ConsoleLogger at the given level, colored only on a terminal by default."""
        logger = ConsoleLogger(level=level)
        if use_colors is None:
            use_colors = logger.stream.isatty()
        logger.use_colors = use_colors
        cls.set(logger)
        return logger


def get_logger() -> Logger:
    """Convenience function to get the current logger."""
    return LoggerRegistry.get()
