import os
import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / 'src'
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from gamelog import ChannelSet, ColorMapping, EditorLogger, GameLogger, LoggerConfig  # noqa: E402


@pytest.fixture
def config() -> LoggerConfig:
    return LoggerConfig()


@pytest.fixture
def channels() -> ChannelSet:
    return ChannelSet.memory()


@pytest.fixture
def colors() -> ColorMapping:
    return ColorMapping()


@pytest.fixture
def glog(config: LoggerConfig, channels: ChannelSet, colors: ColorMapping) -> GameLogger:
    return GameLogger(config=config, channels=channels, colors=colors)


@pytest.fixture
def editor(config: LoggerConfig, channels: ChannelSet) -> EditorLogger:
    return EditorLogger(config=config, channels=channels)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in list(os.environ):
        if name.upper().startswith('GAMELOG_'):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch
