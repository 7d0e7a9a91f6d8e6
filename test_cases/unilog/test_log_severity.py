import pytest

from unilog.log_exceptions import UnknownLevelError
from unilog.log_severity import LEVEL_NAMES, LogSeverity, level_from_name, level_name, parse_level


def test_ranks_are_ordered() -> None:
    ranks = [s.value for s in LogSeverity]
    assert ranks == [10, 20, 30, 40, 50, 1000]


def test_display_names() -> None:
    assert [level_name(s) for s in LogSeverity] == ["Debug", "Verbose", "Info", "Warn", "Error", "Off"]


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        LEVEL_NAMES[LogSeverity.DEBUG] = "dbg"


def test_level_from_name_known() -> None:
    assert level_from_name("Verbose", LogSeverity.WARN) == LogSeverity.VERBOSE
    assert level_from_name("Off", LogSeverity.WARN) == LogSeverity.OFF


def test_level_from_name_unknown_falls_back() -> None:
    assert level_from_name("Nonexistent", LogSeverity.INFO) == LogSeverity.INFO
    # Matching is exact
    assert level_from_name("debug", LogSeverity.ERROR) == LogSeverity.ERROR


def test_parse_level_unknown_raises() -> None:
    with pytest.raises(UnknownLevelError) as excinfo:
        parse_level("Loud")
    assert excinfo.value.level_name == "Loud"
    assert isinstance(excinfo.value, ValueError)
