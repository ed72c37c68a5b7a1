"""Tests for ContextVar-based scan configuration.

Validates defaults, validation, context manager behavior, and thread
isolation of the config scanners and streams fall back to.
"""

from threading import Thread

import pytest

from glyphscan import (
    ScanConfig,
    Scanner,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from glyphscan.errors import ConfigurationError


class TestScanConfigDataclass:
    """Test ScanConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ScanConfig()
        assert config.end_marker == "\0"
        assert config.max_tokens is None

    def test_immutability(self) -> None:
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.end_marker = "$"  # type: ignore[misc]

    @pytest.mark.parametrize("end_marker", ["", "EOF"])
    def test_invalid_end_marker(self, end_marker: str) -> None:
        with pytest.raises(ConfigurationError):
            ScanConfig(end_marker=end_marker)

    @pytest.mark.parametrize("max_tokens", [-1, 2.5, "10"])
    def test_invalid_max_tokens(self, max_tokens: object) -> None:
        with pytest.raises(ConfigurationError):
            ScanConfig(max_tokens=max_tokens)  # type: ignore[arg-type]


class TestFromDict:
    """Test ScanConfig.from_dict() factory method."""

    def test_from_dict_basic(self) -> None:
        config = ScanConfig.from_dict({"end_marker": "$", "max_tokens": 10})
        assert config.end_marker == "$"
        assert config.max_tokens == 10

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ScanConfig.from_dict({"max_tokens": 1, "unknown_key": "ignored"})
        assert config.max_tokens == 1

    def test_from_dict_empty(self) -> None:
        assert ScanConfig.from_dict({}) == ScanConfig()

    def test_from_dict_validates(self) -> None:
        with pytest.raises(ConfigurationError):
            ScanConfig.from_dict({"end_marker": ""})


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_scan_config()

    def test_default_config(self) -> None:
        assert get_scan_config() == ScanConfig()

    def test_set_and_get(self) -> None:
        set_scan_config(ScanConfig(end_marker="$"))
        assert get_scan_config().end_marker == "$"

    def test_reset_restores_default(self) -> None:
        set_scan_config(ScanConfig(max_tokens=5))
        reset_scan_config()
        assert get_scan_config().max_tokens is None

    def test_scanner_reads_end_marker(self, undefined) -> None:
        set_scan_config(ScanConfig(end_marker="$"))
        scanner = Scanner("", default_transform=undefined)
        assert scanner.next_token() == ("Undefined", "$")

    def test_explicit_end_marker_wins(self, undefined) -> None:
        set_scan_config(ScanConfig(end_marker="$"))
        scanner = Scanner("", default_transform=undefined, end_marker="#")
        assert scanner.end_marker == "#"


class TestScanConfigContext:
    """Test scan_config_context context manager."""

    def test_context_sets_config(self) -> None:
        with scan_config_context(ScanConfig(end_marker="$")):
            assert get_scan_config().end_marker == "$"
        assert get_scan_config().end_marker == "\0"

    def test_nested_contexts(self) -> None:
        with scan_config_context(ScanConfig(end_marker="$")):
            with scan_config_context(ScanConfig(max_tokens=2)):
                assert get_scan_config().max_tokens == 2
                assert get_scan_config().end_marker == "\0"
            assert get_scan_config().end_marker == "$"
            assert get_scan_config().max_tokens is None

    def test_context_restores_on_exception(self) -> None:
        with pytest.raises(ValueError, match="test"):
            with scan_config_context(ScanConfig(end_marker="$")):
                raise ValueError("test")
        assert get_scan_config().end_marker == "\0"

    def test_config_read_at_construction(self, undefined) -> None:
        """A scanner keeps the end marker it was built with."""
        with scan_config_context(ScanConfig(end_marker="$")):
            scanner = Scanner("", default_transform=undefined)
        assert scanner.next_token() == ("Undefined", "$")


class TestThreadIsolation:
    """Test thread-local configuration isolation."""

    def test_thread_isolation(self, undefined) -> None:
        results: dict[int, tuple[str, str]] = {}

        def worker(thread_id: int, config: ScanConfig) -> None:
            set_scan_config(config)
            results[thread_id] = Scanner("", default_transform=undefined).next_token()

        configs = [ScanConfig(end_marker=m) for m in "$#@~"]
        threads = [Thread(target=worker, args=(i, c)) for i, c in enumerate(configs)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert [results[i] for i in range(4)] == [("Undefined", m) for m in "$#@~"]
        assert get_scan_config().end_marker == "\0"
