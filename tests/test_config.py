import json
import os
import tempfile

import pytest

from strongpass.config import DEFAULTS, check_length, default_options, load_config, save_config
from strongpass.errors import InvalidLengthError

def test_missing_file_gives_defaults():
    with tempfile.TemporaryDirectory() as td:
        cfg = load_config(os.path.join(td, "nope.json"))
        assert cfg == DEFAULTS

def test_save_and_load_merges_defaults():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "sub", "config.json")
        save_config({"default_length": 24, "include_symbols": False}, path)
        cfg = load_config(path)
        assert cfg["default_length"] == 24
        assert cfg["max_length"] == 64
        assert default_options(cfg).use_symbols is False

def test_malformed_file_gives_defaults():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "config.json")
        with open(path, "w", encoding="utf-8") as f:
            f.write("{not json")
        assert load_config(path) == DEFAULTS
        with open(path, "w", encoding="utf-8") as f:
            json.dump([1, 2], f)
        assert load_config(path) == DEFAULTS

def test_env_override(monkeypatch):
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "env.json")
        save_config({"min_length": 10}, path)
        monkeypatch.setenv("STRONGPASS_CONFIG", path)
        assert load_config()["min_length"] == 10

@pytest.mark.parametrize("length", [8, 16, 64])
def test_check_length_accepts_range(length):
    assert check_length(length, DEFAULTS) == length

@pytest.mark.parametrize("length", [7, 65, 0, "16", None, True])
def test_check_length_rejects(length):
    with pytest.raises(InvalidLengthError):
        check_length(length, DEFAULTS)

@pytest.mark.parametrize("bad", [
    {"min_length": None},
    {"min_length": "abc"},
    {"max_length": 64.5},
    {"include_symbols": "false"},
    {"min_length": 70},
    {"min_length": 0},
])
def test_wrongly_typed_values_fall_back_to_defaults(bad):
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "config.json")
        save_config(bad, path)
        cfg = load_config(path)
        assert cfg == DEFAULTS
        assert check_length(16, cfg) == 16

def test_valid_values_kept_alongside_bad_ones():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "config.json")
        save_config({"min_length": None, "max_length": 32}, path)
        cfg = load_config(path)
        assert cfg["min_length"] == DEFAULTS["min_length"]
        assert cfg["max_length"] == 32
