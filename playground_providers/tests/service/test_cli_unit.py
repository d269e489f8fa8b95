"""playground-cli: parser and handlers."""

from __future__ import annotations

import argparse
import json

import pytest

from playground_providers.registry import ApiService
from playground_providers.service.cli import main
from playground_providers.service.cli.cli_actions import handle_generate, handle_models, handle_test
from playground_providers.service.cli.cli_parser import build_parser


def test_parser_defaults():
    args = build_parser().parse_args(["generate", "--input", "hi"])
    assert (args.provider, args.model, args.input_format) == ("Demo", "demo-model", "text")
    assert args.max_tokens is None and args.temperature is None and args.json is False


def test_parser_requires_subcommand():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
    with pytest.raises(SystemExit):
        build_parser().parse_args(["generate", "--input", "x", "--format", "yaml"])


def test_generate_demo_prints_content(fast_demo, capsys):
    assert main(["generate", "--input", "hello", "--format", "code"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Code Analysis Results:")


def test_generate_json_output(fast_demo, capsys):
    args = build_parser().parse_args(["generate", "--input", "hi", "--json", "--max-tokens", "5"])
    assert handle_generate(args, ApiService()) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["metadata"]["model"] == "demo-model"
    assert "error" not in payload


def test_generate_error_goes_to_stderr(capsys):
    args = build_parser().parse_args(["generate", "--provider", "Anthropic", "--model", "claude-2.1", "--input", "hi"])
    assert handle_generate(args, ApiService()) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip().splitlines()[-1] == "Anthropic API error: Anthropic API key is not configured"


def test_models_static_catalog(capsys):
    args = build_parser().parse_args(["models", "--provider", "perplexity"])
    assert handle_models(args, ApiService({"perplexity": "pk"})) == 0
    models = json.loads(capsys.readouterr().out)
    assert models[0]["id"] == "sonar-small-online"


def test_models_unconfigured(capsys):
    args = build_parser().parse_args(["models", "--provider", "deepseek"])
    assert handle_models(args, ApiService()) == 1
    err = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert err == {"error": "DeepSeek API key is not configured", "kind": "configuration"}


def test_connection_probe_exit_codes(recorder, json_reply, capsys):
    ok = ApiService({"anthropic": "ak"}, transport=recorder(json_reply({"id": "msg"})).transport)
    args = build_parser().parse_args(["test", "--provider", "anthropic"])
    assert handle_test(args, ok) == 0
    assert json.loads(capsys.readouterr().out) == {"provider": "anthropic", "ok": True}
    bad = ApiService({"anthropic": "ak"}, transport=recorder(json_reply({"error": "nope"}, 500)).transport)
    assert handle_test(args, bad) == 1


@pytest.mark.parametrize("argv", [["models", "--provider", "news"], ["models", "--provider", "weather"], ["test", "--provider", "weather"]])
def test_parser_rejects_providers_without_the_operation(argv, capsys):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_provider_choice_is_case_insensitive():
    assert build_parser().parse_args(["models", "--provider", "OpenAI"]).provider == "openai"


def test_handlers_refuse_unsupported_providers(capsys):
    assert handle_models(argparse.Namespace(provider="news"), ApiService({"news": "nk"})) == 1
    err = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert err["kind"] == "unknown_provider"
    assert handle_test(argparse.Namespace(provider="weather"), ApiService()) == 1
    assert "not supported" in capsys.readouterr().err
