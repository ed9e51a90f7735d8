import pytest

from markdown_engine.render import Dialect
from markdown_engine.runtime import telemetry
from markdown_engine.settings import EditorSettings


def test_defaults() -> None:
    settings = EditorSettings()

    assert settings.dialect is Dialect.COMMON
    assert not settings.align_tables
    assert (settings.bold_marker, settings.italic_marker) == ("**", "_")


def test_dialect_accepts_name() -> None:
    assert EditorSettings(dialect="github").dialect is Dialect.GITHUB  # type: ignore[arg-type]


def test_empty_markers_rejected() -> None:
    with pytest.raises(ValueError):
        EditorSettings(bold_marker="")
    with pytest.raises(ValueError):
        EditorSettings(italic_marker="")


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MARKDOWN_ENGINE_DIALECT", "GitHub")
    monkeypatch.setenv("MARKDOWN_ENGINE_ALIGN_TABLES", "yes")
    monkeypatch.setenv("MARKDOWN_ENGINE_BOLD_MARKER", "__")

    settings = EditorSettings.from_env()

    assert settings.dialect is Dialect.GITHUB
    assert settings.align_tables
    assert settings.bold_marker == "__"
    assert settings.italic_marker == "_"


def test_env_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MARKDOWN_ENGINE_SOME_FLAG", "off")

    assert telemetry.env_flag("SOME_FLAG", True) is False
    assert telemetry.env_flag("MISSING_FLAG", True) is True


def test_span_reraises_errors() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("test::failure", component=True) as handle:
            handle.add_metadata("attempt", 1)
            raise RuntimeError("boom")


def test_unknown_preset_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_preset_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MARKDOWN_ENGINE_LOG_PRESET", "development")
    telemetry.configure()

    logger = telemetry.get_logger("markdown_engine.settings")

    assert telemetry.get_logger("markdown_engine.settings") is logger
    monkeypatch.delenv("MARKDOWN_ENGINE_LOG_PRESET")
    telemetry.configure()
    assert telemetry.get_logger("markdown_engine.settings") is not logger
