from __future__ import annotations

import pytest

from gamelog import LoggerConfig, LogLevel, should_log

ORDERED = [
    LogLevel.ALL,
    LogLevel.INFORMATION,
    LogLevel.WARNING,
    LogLevel.ERROR,
    LogLevel.EXCEPTION,
    LogLevel.NONE,
]


def test_ordered_levels_are_totally_ordered() -> None:
    assert ORDERED == sorted(ORDERED)
    assert LogLevel.WARNING >= LogLevel.WARNING
    assert LogLevel.ERROR > LogLevel.INFORMATION
    assert LogLevel.ALL <= LogLevel.NONE


def test_always_is_outside_the_order() -> None:
    with pytest.raises(TypeError):
        _ = LogLevel.ALWAYS >= LogLevel.ALL
    with pytest.raises(TypeError):
        _ = LogLevel.NONE < LogLevel.ALWAYS
    assert LogLevel.ALWAYS == LogLevel.ALWAYS


@pytest.mark.parametrize('threshold', ORDERED)
def test_always_passes_every_threshold(threshold: LogLevel) -> None:
    assert should_log(LogLevel.ALWAYS, threshold) is True


@pytest.mark.parametrize('threshold', ORDERED)
@pytest.mark.parametrize('level', ORDERED)
def test_should_log_matches_threshold_rule(level: LogLevel, threshold: LogLevel) -> None:
    expected = threshold is not LogLevel.NONE and level.value >= threshold.value
    assert should_log(level, threshold) is expected


@pytest.mark.parametrize('value, expected', [
    ('warning', LogLevel.WARNING),
    ('WARN', LogLevel.WARNING),
    (' info ', LogLevel.INFORMATION),
    ('off', LogLevel.NONE),
    ('3', LogLevel.ERROR),
    (4, LogLevel.EXCEPTION),
    (LogLevel.ALL, LogLevel.ALL),
])
def test_parse_accepts_names_aliases_and_values(value, expected: LogLevel) -> None:
    assert LogLevel.parse(value) is expected


@pytest.mark.parametrize('value', ['verbose', 42, True, None, 1.5])
def test_parse_rejects_unknown_values(value) -> None:
    with pytest.raises(ValueError):
        LogLevel.parse(value)


def test_config_defaults_to_most_permissive_level() -> None:
    config = LoggerConfig()
    assert config.level is LogLevel.ALL
    assert config.editor_enabled is True


def test_config_rejects_always_as_filter() -> None:
    config = LoggerConfig()
    with pytest.raises(ValueError):
        config.level = LogLevel.ALWAYS
    config.level = 'error'
    assert config.level is LogLevel.ERROR
