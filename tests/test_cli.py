"""Tests for the ``python -m xorshift_mwc cli`` command."""

import json

import pytest

from xorshift_mwc.__main__ import MODES, generate, main
from xorshift_mwc.config import DEFAULT_PARAMS
from xorshift_mwc.core.bulk import generate_samples
from xorshift_mwc.errors import InvalidArgument


def test_cli_prints_json(capsys):
    code = main(["cli", "--seed", "42", "--length", "5"])
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["seed"] == 42
    assert payload["mode"] == "bulk"
    assert payload["params"] == DEFAULT_PARAMS.as_dict()
    assert payload["samples"] == generate_samples(5, 42)


@pytest.mark.parametrize("mode", MODES)
def test_modes_agree(mode, capsys):
    main(["cli", "--seed", "7", "--length", "20", "--mode", mode])
    payload = json.loads(capsys.readouterr().out)
    assert payload["samples"] == generate_samples(20, 7)


def test_cli_writes_output_file(tmp_path, capsys):
    out = tmp_path / "runs" / "samples.json"
    code = main(["cli", "--seed", "1", "--length", "3", "--output", str(out)])
    assert code == 0
    assert capsys.readouterr().out == ""
    payload = json.loads(out.read_text())
    assert payload["samples"] == generate_samples(3, 1)


def test_cli_rejects_bad_params():
    assert main(["cli", "--seed", "1", "--a", "5", "--c", "9"]) == 2


def test_cli_rejects_negative_length():
    assert main(["cli", "--length", "-1", "--mode", "step"]) == 2


@pytest.mark.parametrize("mode", MODES)
def test_generate_negative_length(mode):
    with pytest.raises(InvalidArgument):
        generate(mode, -1, 1, *DEFAULT_PARAMS.as_dict().values())


class _RecordingRun:
    """Stands in for ``uvicorn.run`` and remembers its arguments."""

    def __init__(self):
        self.calls = []

    def __call__(self, app, **kwargs):
        self.calls.append((app, kwargs))


@pytest.fixture
def uvicorn_run(monkeypatch):
    recorder = _RecordingRun()
    monkeypatch.setattr("uvicorn.run", recorder)
    return recorder


def test_no_subcommand_serves_with_defaults(uvicorn_run):
    from fastapi import FastAPI

    assert main([]) == 0
    assert len(uvicorn_run.calls) == 1
    app, kwargs = uvicorn_run.calls[0]
    assert isinstance(app, FastAPI)
    assert kwargs == {"host": "127.0.0.1", "port": 8000, "log_level": "info"}


def test_serve_passes_config(uvicorn_run):
    code = main(["serve", "--host", "0.0.0.0", "--port", "9123", "--log-level", "DEBUG"])
    assert code == 0
    _, kwargs = uvicorn_run.calls[0]
    assert kwargs == {"host": "0.0.0.0", "port": 9123, "log_level": "debug"}


def test_serve_rejects_oversized_master_seed(uvicorn_run):
    assert main(["serve", "--master-seed", str(1 << 63)]) == 2
    assert uvicorn_run.calls == []
