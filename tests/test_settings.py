from __future__ import annotations

import pytest
from pydantic import ValidationError

import gamelog
import gamelog.main as main
from gamelog import (
    ChannelSet,
    EditorLogger,
    GameLogSettings,
    LogLevel,
    NullEditorLogger,
    create_editor_logger,
    create_logger,
    release_loguru_logger,
)

MODULE_SHORT = __name__.rsplit('.', 1)[-1]


class Minimap:

    def __init__(self):
        gamelog.info("minimap ready")


@pytest.fixture
def defaults(monkeypatch: pytest.MonkeyPatch, clean_env: pytest.MonkeyPatch) -> ChannelSet:
    """Install process-default loggers writing to memory channels."""
    monkeypatch.setattr(main, '_logger', None)
    monkeypatch.setattr(main, '_editor_logger', None)
    monkeypatch.setattr(main, '_loguru_logger', None)
    channels = ChannelSet.memory()
    gamelog.init_logger(GameLogSettings(), channels=channels)
    return channels


def test_development_defaults(clean_env: pytest.MonkeyPatch) -> None:
    settings = GameLogSettings()
    assert settings.level is LogLevel.ALL
    assert settings.build_mode == 'development'
    assert settings.editor_default is True
    assert settings.colors_default is True
    assert settings.annotate is True


def test_production_defaults(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv('GAMELOG_BUILD_MODE', 'prod')
    settings = GameLogSettings()
    assert settings.is_production
    assert settings.editor_default is False
    assert settings.colors_default is False


def test_environment_overrides(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv('GAMELOG_LEVEL', 'warning')
    clean_env.setenv('GAMELOG_BUILD_MODE', 'production')
    clean_env.setenv('GAMELOG_EDITOR_ENABLED', 'true')
    clean_env.setenv('GAMELOG_COLORS', '{"game.Hud": "#ff0000"}')
    clean_env.setenv('GAMELOG_MAX_STACK_DEPTH', '8')
    settings = GameLogSettings()
    assert settings.level is LogLevel.WARNING
    assert settings.editor_default is True
    assert settings.colors == {'game.Hud': '#ff0000'}
    assert settings.max_stack_depth == 8


def test_invalid_settings_are_rejected(clean_env: pytest.MonkeyPatch) -> None:
    with pytest.raises(ValidationError):
        GameLogSettings(level='always')
    with pytest.raises(ValidationError):
        GameLogSettings(build_mode='staging')
    with pytest.raises(ValidationError):
        GameLogSettings(max_stack_depth=0)


def test_create_logger_applies_settings(clean_env: pytest.MonkeyPatch) -> None:
    channels = ChannelSet.memory()
    settings = GameLogSettings(level='error', colors={'game.Hud': '#00ff00'}, max_stack_depth=4)
    glog = create_logger(settings, channels=channels)
    assert glog.level is LogLevel.ERROR
    assert glog.colored is True
    assert glog.resolver.max_depth == 4
    assert glog.colors.lookup('game.Hud') == '00FF00'

    glog.bind('game.Hud').error("hud offline")
    assert channels.error.lines == ["<fg #00FF00>[Hud]</> hud offline"]


def test_production_logger_skips_colors(clean_env: pytest.MonkeyPatch) -> None:
    channels = ChannelSet.memory()
    settings = GameLogSettings(build_mode='production', colors={'game.Hud': '#00ff00'})
    glog = create_logger(settings, channels=channels)
    glog.bind('game.Hud').info("plain")
    assert channels.info.lines == ["[Hud] plain"]


def test_stripped_editor_is_null(clean_env: pytest.MonkeyPatch) -> None:
    stripped = create_editor_logger(GameLogSettings(strip_editor=True))
    assert isinstance(stripped, NullEditorLogger)
    assert GameLogSettings(strip_editor=True, editor_enabled=True).editor_default is False
    editor = create_editor_logger(GameLogSettings(), channels=ChannelSet.memory())
    assert isinstance(editor, EditorLogger)


def test_module_level_functions_use_defaults(defaults: ChannelSet) -> None:
    gamelog.info("hello")
    gamelog.set_log_level('warning')
    assert gamelog.get_log_level() is LogLevel.WARNING
    gamelog.info(lambda: pytest.fail("filtered supplier was evaluated"))
    gamelog.warning("careful")
    gamelog.error("broken")
    gamelog.log(LogLevel.EXCEPTION, "fatal")
    gamelog.set_log_level(LogLevel.NONE)
    gamelog.always("forced")

    assert defaults.info.lines == [f"[{MODULE_SHORT}] hello", f"[{MODULE_SHORT}] forced"]
    assert defaults.warning.lines == [f"[{MODULE_SHORT}] careful"]
    assert defaults.error.lines == [f"[{MODULE_SHORT}] broken", f"[{MODULE_SHORT}] fatal"]


def test_module_level_calls_resolve_callers(defaults: ChannelSet) -> None:
    Minimap()
    assert defaults.info.lines == ["[Minimap] minimap ready"]


def test_module_level_exception(defaults: ChannelSet) -> None:
    try:
        1 / 0
    except ZeroDivisionError as e:
        gamelog.exception(e)
    assert defaults.error.lines[0].endswith("ZeroDivisionError: division by zero")


def test_module_level_editor_functions(defaults: ChannelSet) -> None:
    gamelog.editor_log("editor info")
    gamelog.set_editor_enabled(False)
    gamelog.editor_warning("hidden")
    gamelog.set_editor_enabled(True)
    gamelog.editor_error("editor error")

    assert defaults.info.lines == ["editor info"]
    assert defaults.warning.lines == []
    assert defaults.error.lines == ["editor error"]
    assert gamelog.get_config() is gamelog.get_logger().config
    assert gamelog.get_editor_logger().config is gamelog.get_config()


@pytest.fixture
def uninitialised(monkeypatch: pytest.MonkeyPatch, clean_env: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Drop the process-default loggers and release any created during the test."""
    monkeypatch.setattr(main, '_logger', None)
    monkeypatch.setattr(main, '_editor_logger', None)
    monkeypatch.setattr(main, '_loguru_logger', None)
    yield clean_env
    if main._loguru_logger is not None:
        release_loguru_logger(main._loguru_logger)


def test_invalid_environment_falls_back_to_defaults(uninitialised: pytest.MonkeyPatch, capfd: pytest.CaptureFixture) -> None:
    uninitialised.setenv('GAMELOG_LEVEL', 'verbose')
    gamelog.info("hello")
    gamelog.editor_log("editor hello")
    assert gamelog.get_log_level() is LogLevel.ALL
    assert "invalid settings, using defaults" in capfd.readouterr().err

    with pytest.raises(ValidationError):
        gamelog.init_logger(GameLogSettings())


def test_reinit_releases_previous_default_sink(uninitialised: pytest.MonkeyPatch) -> None:
    gamelog.init_logger(GameLogSettings())
    first = main._loguru_logger
    assert first is not None
    assert len(first._core.handlers) == 1

    gamelog.init_logger(GameLogSettings())
    assert main._loguru_logger is not first
    assert first._core.handlers == {}

    gamelog.init_logger(GameLogSettings(), channels=ChannelSet.memory())
    assert main._loguru_logger is None
