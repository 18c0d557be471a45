import pytest

from mnx.codec import decode, dumps, encode, loads
from mnx.config import DEFAULT_MAX_INPUT_BYTES, Settings, get_settings
from mnx.errors import InputTooLargeError, SchemaError


def test_defaults():
    s = Settings(_env_file=None)
    assert s.strict_keys is False
    assert s.omit_absent is False
    assert s.max_input_bytes == DEFAULT_MAX_INPUT_BYTES
    assert s.json_indent is None


def test_env_names(monkeypatch):
    monkeypatch.setenv("MNX_STRICT_KEYS", "true")
    monkeypatch.setenv("MNX_OMIT_ABSENT", "1")
    monkeypatch.setenv("MNX_MAX_INPUT_BYTES", "2048")
    monkeypatch.setenv("MNX_JSON_INDENT", "4")

    s = Settings(_env_file=None)
    assert s.strict_keys is True
    assert s.omit_absent is True
    assert s.max_input_bytes == 2048
    assert s.json_indent == 4


def test_sanity_clamps():
    # a non-positive bound falls back to the default
    s = Settings(MNX_MAX_INPUT_BYTES=0, _env_file=None)
    assert s.max_input_bytes == DEFAULT_MAX_INPUT_BYTES

    s = Settings(MNX_MAX_INPUT_BYTES=-5, _env_file=None)
    assert s.max_input_bytes == DEFAULT_MAX_INPUT_BYTES

    # negative indent means compact output
    s = Settings(MNX_JSON_INDENT=-1, _env_file=None)
    assert s.json_indent is None


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_strict_keys_from_env(monkeypatch, minimal_doc):
    minimal_doc["vendor"] = True
    assert decode(minimal_doc).mnx.version == 1

    monkeypatch.setenv("MNX_STRICT_KEYS", "true")
    get_settings.cache_clear()

    with pytest.raises(SchemaError):
        decode(minimal_doc)
    # per-call argument wins over the setting
    assert decode(minimal_doc, strict_keys=False).mnx.version == 1


def test_omit_absent_from_env(monkeypatch, minimal_doc):
    monkeypatch.setenv("MNX_OMIT_ABSENT", "true")
    get_settings.cache_clear()

    model = decode(minimal_doc)
    assert "layouts" not in encode(model)
    assert encode(model, omit_absent=False)["layouts"] is None


def test_size_bound_and_indent_from_env(monkeypatch, minimal_doc):
    monkeypatch.setenv("MNX_MAX_INPUT_BYTES", "16")
    monkeypatch.setenv("MNX_JSON_INDENT", "2")
    get_settings.cache_clear()

    text = '{"mnx": {"version": 1}, "global": {"measures": []}, "parts": []}'
    with pytest.raises(InputTooLargeError):
        loads(text)
    model = loads(text, max_input_bytes=1024)

    assert dumps(model).startswith('{\n  "global"')
