import io

from doc_summarizer.logging import ConsoleLogger, LoggerRegistry, LogLevel, get_logger


def test_messages_below_level_are_dropped():
    stream = io.StringIO()
    logger = ConsoleLogger(level=LogLevel.WARNING, use_colors=False, stream=stream)

    logger.info("hidden")
    logger.warning("careful")
    logger.error("broken")

    assert stream.getvalue().splitlines() == ["[WARNING] careful", "[ERROR] broken"]


def test_colors_wrap_the_message():
    stream = io.StringIO()
    logger = ConsoleLogger(level=LogLevel.DEBUG, stream=stream)

    logger.debug("details")

    assert stream.getvalue() == f"{ConsoleLogger.LEVEL_COLORS[LogLevel.DEBUG]}[DEBUG] details{ConsoleLogger.RESET}\n"


def test_registry_configure_installs_console_logger():
    logger = LoggerRegistry.configure(level=LogLevel.DEBUG, use_colors=False)

    assert get_logger() is logger
    assert logger.should_log(LogLevel.DEBUG)
