"""Inline file flags and their effect on the config."""

import pytest

from crimson.config import Config
from crimson.runtime.file_flags import parse_file_flags, coerce_flag


def test_key_value_flags():
	flags = parse_file_flags("// @crimson: debug=true; level=2, name='x'\nvoid main() { }")
	assert flags == {"debug": True, "level": 2, "name": "x"}


def test_json_flags():
	assert parse_file_flags('// @crimson: {"debug": false, "ratio": 0.5}') == {"debug": False, "ratio": 0.5}


def test_malformed_json_is_ignored():
	assert parse_file_flags("// @crimson: {debug: yes") == {}


def test_flags_after_scan_window_are_ignored():
	source = "\n" * 30 + "// @crimson: debug=true"
	assert parse_file_flags(source) == {}


def test_marker_must_start_the_directive():
	assert parse_file_flags('crym("@crimson: debug=true");') == {}


def test_config_applies_debug_flag():
	cfg = Config()
	cfg.reset()
	cfg.apply_flags({"debug": True, "unknown": 1})
	assert cfg.enable_debug_logs is True
	assert cfg.should_log("debug") is True


def test_config_reads_environment():
	cfg = Config()
	cfg.reset()
	cfg.load_environment({"CRIMSON_DEBUG": "1"})
	assert cfg.enable_debug_logs is True

	quiet = Config()
	quiet.reset()
	quiet.load_environment({})
	assert quiet.should_log("debug") is False
	assert quiet.should_log("error") is True


def test_later_directive_overrides_earlier_key():
	source = "// @crimson: debug=true\n# @crimson: debug=off\n"
	assert parse_file_flags(source) == {"debug": False}


@pytest.mark.parametrize("raw, expected", [
	("yes", True),
	("OFF", False),
	("7", 7),
	("2.5", 2.5),
	('"quoted"', "quoted"),
	("plain", "plain"),
	("", ""),
])
def test_coerce_flag(raw, expected):
	assert coerce_flag(raw) == expected


def test_scoped_flags_are_restored():
	cfg = Config()
	cfg.reset()
	with cfg.scoped({"debug": True}):
		assert cfg.should_log("debug") is True
	assert cfg.enable_debug_logs is False
	assert cfg.should_log("debug") is False


def test_scoped_flags_restored_on_error():
	cfg = Config()
	cfg.reset()
	with pytest.raises(RuntimeError):
		with cfg.scoped({"debug": True}):
			raise RuntimeError("boom")
	assert cfg.enable_debug_logs is False


def test_locked_config_ignores_scoped_flags():
	cfg = Config()
	cfg.reset()
	cfg.enable_debug()
	cfg.locked = True
	with cfg.scoped({"debug": False}):
		assert cfg.enable_debug_logs is True
	assert cfg.enable_debug_logs is True
