"""Command-line entry point: analyze a document or summarize it with a model.

    python -m doc_summarizer.main analyze --input book.txt --model o3-mini
    python -m doc_summarizer.main summarize --input content.txt --output result.md
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from openai import OpenAIError

from doc_summarizer.configuration.config_manager import ConfigManager
from doc_summarizer.configuration.run_config import RunConfig
from doc_summarizer.core.analysis.token_estimator import TokenStrategy
from doc_summarizer.core.bootstrap import bootstrap_all
from doc_summarizer.core.errors import ConfigurationError, InvalidArgumentError
from doc_summarizer.core.models.registry import ModelRegistry
from doc_summarizer.logging import LoggerRegistry, LogLevel, get_logger
from doc_summarizer.platforms.platform_registry import PlatformRegistry
from doc_summarizer.summarization.summarizer import DocumentSummarizer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doc_summarizer",
        description="Estimate document size, context usage and cost for an LLM, and summarize it.",
    )
    parser.add_argument("command", choices=["analyze", "summarize"])
    parser.add_argument("--config", type=Path, help="Path to config.json (default: data/config/config.json)")
    parser.add_argument("--model", dest="model_id", help="Model id from the model catalog")
    parser.add_argument("--input", dest="input_path", type=Path, help="Document to analyze or summarize")
    parser.add_argument("--output", dest="output_path", type=Path, help="Where to write the summary")
    parser.add_argument(
        "--strategy",
        dest="token_strategy",
        choices=[s.value for s in TokenStrategy],
        help="Token estimation strategy",
    )
    parser.add_argument("--models", dest="models_path", type=Path, help="Path to models.yaml")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log prompts and responses")
    return parser


def resolve_run_config(args: argparse.Namespace) -> RunConfig:
    config = ConfigManager(args.config).get_run_config()
    token_strategy = TokenStrategy.from_name(args.token_strategy) if args.token_strategy else None
    return config.with_overrides(
        model_id=args.model_id,
        input_path=args.input_path,
        output_path=args.output_path,
        token_strategy=token_strategy,
        models_path=args.models_path,
    )


def run(args: argparse.Namespace) -> None:
    config = resolve_run_config(args)
    bootstrap_all(config.models_path)

    model = ModelRegistry.get(config.model_id)
    platform = PlatformRegistry.get(model.platform_id)
    summarizer = DocumentSummarizer(model, platform, config.token_strategy, config.prompt_id)

    if args.command == "analyze":
        summarizer.analyze_file(config.input_path)
    else:
        summarizer.summarize_file(config.input_path, config.output_path)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    LoggerRegistry.configure(level=LogLevel.DEBUG if args.verbose else LogLevel.INFO)
    logger = get_logger()

    try:
        run(args)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except InvalidArgumentError as e:
        logger.error(f"Invalid argument: {e}")
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1
    except (OpenAIError, RuntimeError) as e:
        logger.error(f"Summarization call failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
