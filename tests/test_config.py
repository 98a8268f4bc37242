from __future__ import annotations

import pytest

from wsdecode.config import DecoderSettings, load_settings


def test_defaults() -> None:
    s = DecoderSettings()
    assert (s.label_blank, s.label_tab, s.output_format) == (".", "-", "text")


def test_load_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WSDECODE_LABEL_BLANK", "0")
    monkeypatch.setenv("WSDECODE_LABEL_TAB", "1")
    monkeypatch.setenv("WSDECODE_FORMAT", " JSON ")
    s = load_settings()
    assert (s.label_blank, s.label_tab, s.output_format) == ("0", "1", "json")


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"label_blank": ""}, "single printable"),
        ({"label_tab": "ab"}, "single printable"),
        ({"label_tab": " "}, "single printable"),
        ({"label_blank": "x", "label_tab": "x"}, "must differ"),
        ({"output_format": "yaml"}, "output_format"),
    ],
)
def test_invalid_settings(kwargs: dict[str, str], message: str) -> None:
    with pytest.raises(ValueError, match=message):
        DecoderSettings(**kwargs)
