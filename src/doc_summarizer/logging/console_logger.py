import sys
from datetime import datetime
from typing import Any, Optional, TextIO

from doc_summarizer.logging.log_level import LogLevel
from doc_summarizer.logging.logger import Logger


class ConsoleLogger(Logger):
    """Logger that writes to stderr with optional timestamps and level prefixes.

    Log output stays on stderr so the analysis report printed on stdout can be
    piped or redirected on its own.
    """

    LEVEL_COLORS = {
        LogLevel.ERROR: "\033[91m",    # Red
        LogLevel.WARNING: "\033[93m",  # Yellow
        LogLevel.INFO: "\033[0m",      # Default
        LogLevel.TRACE: "\033[96m",    # Cyan
        LogLevel.DEBUG: "\033[90m",    # Gray
    }
    RESET = "\033[0m"

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        show_timestamp: bool = False,
        show_level: bool = True,
        use_colors: bool = True,
        stream: Optional[TextIO] = None
    ):
        super().__init__(level)
        self.show_timestamp = show_timestamp
        self.show_level = show_level
        self.use_colors = use_colors
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved at write time so a redirected sys.stderr is honored
        return self._stream if self._stream is not None else sys.stderr

    def format_message(self, level: LogLevel, message: str) -> str:
        parts = []

        if self.show_timestamp:
            parts.append(datetime.now().strftime("[%H:%M:%S]"))

        if self.show_level:
            parts.append(f"[{level.name}]")

        parts.append(message)
        return " ".join(parts)

    def _write(self, level: LogLevel, message: str, **kwargs: Any) -> None:
        output = self.format_message(level, message)

        if self.use_colors:
            color = self.LEVEL_COLORS.get(level, self.RESET)
            output = f"{color}{output}{self.RESET}"

        print(output, file=self.stream)
