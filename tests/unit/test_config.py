import sys

import pytest

from timedtask import Spec, config


def test_missing_config_is_empty():
    assert config.load_config() == {}
    assert config.default_stream_name() == "stdout"


def test_config_loads_stream(isolated_config):
    isolated_config.write_text("stream: stderr\n")
    assert config.load_config() == {"stream": "stderr"}
    assert config.default_stream_name() == "stderr"


def test_config_rejects_unknown_stream(isolated_config):
    isolated_config.write_text("stream: purple\n")
    with pytest.raises(ValueError):
        config.load_config()


def test_config_rejects_non_mapping(isolated_config):
    isolated_config.write_text("- stdout\n- stderr\n")
    with pytest.raises(ValueError):
        config.load_config()


def test_env_overrides_file(isolated_config, monkeypatch):
    isolated_config.write_text("stream: stderr\n")
    monkeypatch.setenv("TIMEDTASK_STREAM", "STDOUT")
    assert config.default_stream_name() == "stdout"


def test_env_rejects_unknown_stream(monkeypatch):
    monkeypatch.setenv("TIMEDTASK_STREAM", "printer")
    with pytest.raises(ValueError):
        config.default_stream_name()


def test_config_file_respects_env_var(monkeypatch, tmp_path):
    monkeypatch.setenv("TIMEDTASK_CONFIG", str(tmp_path / "custom.yaml"))
    assert config.config_file() == tmp_path / "custom.yaml"


def test_default_output_is_live_stdout(capsys):
    assert config.default_output() is sys.stdout
    Spec("Build").run_simple(lambda: None)
    captured = capsys.readouterr()
    assert captured.out == "Build... done. (0s)\n"
    assert captured.err == ""


def test_default_output_stderr(capsys, monkeypatch):
    monkeypatch.setenv("TIMEDTASK_STREAM", "stderr")
    Spec("Build").run_simple(lambda: None)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Build... done. (0s)\n"


def test_file_stream_is_normalized(isolated_config):
    isolated_config.write_text("stream: ' STDERR '\n")
    assert config.load_config() == {"stream": "stderr"}
    assert config.default_stream_name() == "stderr"
