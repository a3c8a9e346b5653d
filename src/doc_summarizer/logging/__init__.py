from doc_summarizer.logging.log_level import LogLevel
from doc_summarizer.logging.logger import Logger
from doc_summarizer.logging.console_logger import ConsoleLogger
from doc_summarizer.logging.logger_registry import LoggerRegistry, get_logger

__all__ = [
    "LogLevel",
    "Logger",
    "ConsoleLogger",
    "LoggerRegistry",
    "get_logger",
]
