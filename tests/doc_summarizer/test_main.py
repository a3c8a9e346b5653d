#!/usr/bin/env python3
"""
End-to-end tests for the command-line entry point (no network).
"""
from doc_summarizer.main import build_parser, main, resolve_run_config
from doc_summarizer.core.analysis.token_estimator import TokenStrategy
from doc_summarizer.core.errors import InvalidArgumentError


def test_analyze_command_prints_report(models_yaml, tmp_path, capsys):
    input_path = tmp_path / "book.txt"
    input_path.write_text("hello world", encoding="utf-8")

    exit_code = main([
        "analyze",
        "--config", str(tmp_path / "config.json"),
        "--models", str(models_yaml),
        "--model", "test-model",
        "--input", str(input_path),
    ])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Analysis for Test Model:" in out
    assert "- Estimated Tokens: 3" in out
    assert "Content fits well within context window." in out


def test_unknown_model_exits_with_failure(models_yaml, tmp_path, capsys):
    input_path = tmp_path / "book.txt"
    input_path.write_text("hello world", encoding="utf-8")

    exit_code = main([
        "analyze",
        "--config", str(tmp_path / "config.json"),
        "--models", str(models_yaml),
        "--model", "no-such-model",
        "--input", str(input_path),
    ])

    assert exit_code == 1
    captured = capsys.readouterr()
    assert "Analysis for" not in captured.out
    assert "no-such-model" in captured.err


def test_missing_input_exits_with_failure(models_yaml, tmp_path):
    exit_code = main([
        "analyze",
        "--config", str(tmp_path / "config.json"),
        "--models", str(models_yaml),
        "--model", "test-model",
        "--input", str(tmp_path / "missing.txt"),
    ])

    assert exit_code == 1


def test_cli_overrides_config(tmp_path):
    args = build_parser().parse_args([
        "summarize",
        "--config", str(tmp_path / "config.json"),
        "--strategy", "character_ratio",
        "--output", "out.md",
    ])

    config = resolve_run_config(args)

    assert config.token_strategy is TokenStrategy.CHARACTER_RATIO
    assert str(config.output_path) == "out.md"
    assert config.model_id == "o3-mini"


def test_summarize_without_api_key_exits_after_pre_call_report(models_yaml, tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    input_path = tmp_path / "content.txt"
    output_path = tmp_path / "result.md"
    input_path.write_text("hello world", encoding="utf-8")

    exit_code = main([
        "summarize",
        "--config", str(tmp_path / "config.json"),
        "--models", str(models_yaml),
        "--model", "test-model",
        "--input", str(input_path),
        "--output", str(output_path),
    ])

    assert exit_code == 1
    captured = capsys.readouterr()
    assert "Analysis for Test Model:" in captured.out
    assert "Cost Estimate (input tokens only):" in captured.out
    assert "OPENAI_API_KEY" in captured.err
    assert not output_path.exists()


def test_invalid_argument_has_its_own_message(tmp_path, capsys, monkeypatch):
    def fail(args):
        raise InvalidArgumentError("tokens must be non-negative, got -1")

    monkeypatch.setattr("doc_summarizer.main.run", fail)

    exit_code = main(["analyze", "--config", str(tmp_path / "config.json")])

    assert exit_code == 1
    err = capsys.readouterr().err
    assert "Invalid argument: tokens must be non-negative" in err
    assert "Configuration error" not in err
