import json

import pytest
from pydantic import ValidationError

from unilog.log_config import LogConfig, build_sink
from unilog.log_exceptions import UnknownLevelError
from unilog.log_severity import LogSeverity
from unilog.log_sinks import ConsoleSink, HostLoggingSink
from unilog.logger_registry import LoggerRegistry


def test_from_dict_and_apply() -> None:
    cfg = LogConfig.from_dict({
        "default_level": "Info",
        "escalate_on_error": True,
        "format": "{1}: {2}",
        "levels": {"net": "Debug"},
    })
    registry = cfg.apply(LoggerRegistry())

    net = registry.get_logger("net")
    assert net.threshold == LogSeverity.DEBUG
    assert net.escalate_on_error is True
    assert net.format == "{1}: {2}"
    assert registry.get_logger("other").threshold == LogSeverity.INFO


def test_apply_configures_the_given_registry(fresh_registry) -> None:
    mine = LoggerRegistry()
    assert len(mine) == 0

    assert LogConfig(default_level="Debug").apply(mine) is mine
    assert mine.defaults.threshold == LogSeverity.DEBUG
    assert fresh_registry.defaults.threshold == LogSeverity.WARN


def test_apply_defaults_to_process_registry(fresh_registry) -> None:
    assert LogConfig(levels={"net": "Debug"}).apply() is fresh_registry
    assert fresh_registry.get_logger("net").threshold == LogSeverity.DEBUG


def test_failed_strict_apply_leaves_registry_untouched() -> None:
    registry = LoggerRegistry()
    existing = registry.get_logger("x")
    sink_factory = registry.defaults.sink_factory

    cfg = LogConfig(
        default_level="Debug",
        escalate_on_error=True,
        format="{2}",
        levels={"x": "Loud"},
        strict=True,
    )
    with pytest.raises(UnknownLevelError):
        cfg.apply(registry)

    assert registry.defaults.threshold == LogSeverity.WARN
    assert registry.defaults.escalate_on_error is False
    assert registry.defaults.format is None
    assert registry.defaults.sink_factory is sink_factory
    assert existing.threshold == LogSeverity.WARN
    assert registry.names() == ["x"]


def test_strict_config_rejects_unknown_default_level() -> None:
    registry = LoggerRegistry()
    with pytest.raises(UnknownLevelError):
        LogConfig(default_level="Loud", strict=True).apply(registry)
    assert registry.defaults.threshold == LogSeverity.WARN


def test_unknown_default_level_falls_back_to_warn() -> None:
    registry = LogConfig(default_level="Loud").apply(LoggerRegistry())
    assert registry.defaults.threshold == LogSeverity.WARN


def test_from_dict_converts_types() -> None:
    cfg = LogConfig.from_dict({"escalate_on_error": "false", "strict": "yes"})
    assert cfg.escalate_on_error is False
    assert cfg.strict is True

    logger = cfg.apply(LoggerRegistry()).get_logger("net")
    assert logger.escalate_on_error is False


@pytest.mark.parametrize(
    "data",
    [
        {"levels": ["net", "Debug"]},
        {"escalate_on_error": "sometimes"},
        {"sink": "syslog"},
        {"default_lvl": "Info"},
    ],
)
def test_from_dict_rejects_invalid(data) -> None:
    with pytest.raises(ValidationError):
        LogConfig.from_dict(data)


def test_from_file(tmp_path) -> None:
    path = tmp_path / "logging.json"
    path.write_text(json.dumps({"sink": "host", "levels": {"ui": "Off"}}), encoding="utf-8")
    cfg = LogConfig.from_file(path)
    assert cfg.sink == "host"
    assert cfg.levels == {"ui": "Off"}


def test_from_file_requires_object(tmp_path) -> None:
    path = tmp_path / "logging.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        LogConfig.from_file(path)


def test_environment_overrides_defaults(monkeypatch) -> None:
    monkeypatch.setenv("UNILOG_DEFAULT_LEVEL", "Error")
    monkeypatch.setenv("UNILOG_ESCALATE_ON_ERROR", "1")
    monkeypatch.setenv("UNILOG_SINK", "host")
    monkeypatch.setenv("UNILOG_FORMAT", "<{0}> {2}")
    monkeypatch.setenv("UNILOG_LEVELS", '{"net": "Debug"}')

    cfg = LogConfig()
    assert cfg.default_level == "Error"
    assert cfg.escalate_on_error is True
    assert cfg.sink == "host"
    assert cfg.format == "<{0}> {2}"
    assert cfg.levels == {"net": "Debug"}


def test_explicit_values_beat_environment(monkeypatch) -> None:
    monkeypatch.setenv("UNILOG_DEFAULT_LEVEL", "Error")
    monkeypatch.setenv("UNILOG_SINK", "host")

    cfg = LogConfig.from_dict({"default_level": "Info"})
    assert cfg.default_level == "Info"
    assert cfg.sink == "host"


def test_environment_values_are_validated(monkeypatch) -> None:
    monkeypatch.setenv("UNILOG_ESCALATE_ON_ERROR", "sometimes")
    with pytest.raises(ValidationError):
        LogConfig()


def test_build_sink() -> None:
    assert isinstance(build_sink("console"), ConsoleSink)
    assert isinstance(build_sink("host"), HostLoggingSink)
    with pytest.raises(ValueError):
        build_sink("syslog")
