import pytest

from section_splitter.config import Settings, get_settings, parse_size


def test_defaults():
    settings = get_settings()
    assert settings == Settings()
    assert settings.max_line_thickness == 8
    assert settings.diff_threshold == 50.0
    assert [s.size for s in settings.sections] == [(168, 40), (168, 100), (168, 26)]
    assert [s.filename for s in settings.sections] == [
        "section-top.png", "section-middle.png", "section-bottom.png",
    ]


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SPLITTER_MAX_LINE_THICKNESS", "4")
    monkeypatch.setenv("SPLITTER_DIFF_THRESHOLD", "12.5")
    monkeypatch.setenv("SPLITTER_MIDDLE_SIZE", "200x90")
    monkeypatch.setenv("SPLITTER_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.max_line_thickness == 4
    assert settings.diff_threshold == 12.5
    assert settings.middle.size == (200, 90)
    assert settings.middle.filename == "section-middle.png"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("name,value", [
    ("SPLITTER_MAX_LINE_THICKNESS", "0"),
    ("SPLITTER_MAX_LINE_THICKNESS", "eight"),
    ("SPLITTER_DIFF_THRESHOLD", "high"),
    ("SPLITTER_TOP_SIZE", "168"),
    ("SPLITTER_LOAD_TIMEOUT", "-1"),
])
def test_bad_values_raise(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(RuntimeError):
        get_settings()


def test_parse_size():
    assert parse_size("168X40") == (168, 40)
    with pytest.raises(RuntimeError):
        parse_size("0x40")
