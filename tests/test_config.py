"""Tests for ContextVar-based scan configuration.

Validates defaults, validation, context manager behavior and thread
isolation, and that new scanners pick up the active config.
"""

from threading import Thread

import pytest

from analiser import (
    ConfigError,
    InvalidTabSizeError,
    LexicalError,
    ScanConfig,
    Scanner,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
    tokenize,
)


class TestScanConfigDataclass:
    """Test ScanConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ScanConfig()
        assert config.tab_size == 4
        assert config.strict is True
        assert config.track_comment_lines is False

    def test_immutability(self) -> None:
        """Config is frozen and cannot be modified."""
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.tab_size = 8  # type: ignore[misc]

    @pytest.mark.parametrize("bad", [0, -4, 2.5, "4", True])
    def test_invalid_tab_size(self, bad: object) -> None:
        with pytest.raises(InvalidTabSizeError):
            ScanConfig(tab_size=bad)  # type: ignore[arg-type]

    def test_invalid_strict(self) -> None:
        with pytest.raises(ConfigError):
            ScanConfig(strict="yes")  # type: ignore[arg-type]

    def test_invalid_track_comment_lines(self) -> None:
        with pytest.raises(ConfigError, match="track_comment_lines must be a bool"):
            ScanConfig(track_comment_lines=1)  # type: ignore[arg-type]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ScanConfig.from_dict({"tab_size": 2, "strict": False, "color": "red"})
        assert config == ScanConfig(tab_size=2, strict=False)

    def test_from_dict_empty(self) -> None:
        assert ScanConfig.from_dict({}) == ScanConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_scan_config()

    def test_default_config(self) -> None:
        assert get_scan_config() == ScanConfig()

    def test_set_and_get(self) -> None:
        set_scan_config(ScanConfig(tab_size=8))
        assert get_scan_config().tab_size == 8

    def test_reset_restores_default(self) -> None:
        set_scan_config(ScanConfig(tab_size=8))
        reset_scan_config()
        assert get_scan_config().tab_size == 4

    def test_scanner_reads_active_config(self) -> None:
        set_scan_config(ScanConfig(tab_size=2))
        tokens = tokenize("a\tb")
        assert tokens[1].col == 4

    def test_explicit_option_overrides_config(self) -> None:
        set_scan_config(ScanConfig(tab_size=2))
        assert Scanner("x", tab_size=3).tab_size == 3

    def test_lenient_config(self) -> None:
        set_scan_config(ScanConfig(strict=False))
        assert [t.lexeme for t in tokenize("a @ b")] == ["a", "b"]

    def test_explicit_strict_overrides_config(self) -> None:
        set_scan_config(ScanConfig(strict=False))
        with pytest.raises(LexicalError):
            tokenize("a @ b", strict=True)

    def test_comment_line_tracking_from_config(self) -> None:
        set_scan_config(ScanConfig(track_comment_lines=True))
        assert tokenize("/*\n*/x")[0].line == 2
        assert tokenize("/*\n*/x", track_comment_lines=False)[0].line == 1


class TestScanConfigContext:
    """Test scan_config_context context manager."""

    def test_context_sets_config(self) -> None:
        with scan_config_context(ScanConfig(tab_size=8)):
            assert get_scan_config().tab_size == 8
            assert Scanner("x").tab_size == 8
        assert get_scan_config().tab_size == 4

    def test_nested_contexts(self) -> None:
        with scan_config_context(ScanConfig(tab_size=8)):
            with scan_config_context(ScanConfig(strict=False)):
                assert get_scan_config() == ScanConfig(tab_size=4, strict=False)
            assert get_scan_config().tab_size == 8
        assert get_scan_config() == ScanConfig()

    def test_context_restores_on_exception(self) -> None:
        with pytest.raises(ValueError, match="test"):
            with scan_config_context(ScanConfig(tab_size=8)):
                raise ValueError("test")
        assert get_scan_config().tab_size == 4

    def test_scanner_keeps_config_from_construction(self) -> None:
        with scan_config_context(ScanConfig(tab_size=8)):
            scanner = Scanner("a\tb")
        scanner.next_token()
        assert scanner.next_token().col == 10


class TestThreadIsolation:
    """Test thread-local configuration isolation."""

    def test_thread_isolation(self) -> None:
        """Each thread sees its own config."""
        results: dict[int, int] = {}

        def worker(thread_id: int, tab_size: int) -> None:
            set_scan_config(ScanConfig(tab_size=tab_size))
            results[thread_id] = tokenize("x\n\ty")[1].col

        threads = [Thread(target=worker, args=(i, i + 1)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {0: 2, 1: 3, 2: 4, 3: 5}
        assert get_scan_config().tab_size == 4
