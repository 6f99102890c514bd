"""Tests for ContextVar-based scan configuration.

Validates thread isolation and context manager behavior.
"""

from threading import Thread

import pytest

from scanlet import (
    IllegalPolicy,
    ScanConfig,
    get_scan_config,
    lex,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)


@pytest.fixture(autouse=True)
def _reset_config():
    yield
    reset_scan_config()


class TestScanConfigDataclass:
    """Test ScanConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        assert ScanConfig().illegal_policy is IllegalPolicy.KEEP

    def test_immutability(self) -> None:
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.illegal_policy = IllegalPolicy.SKIP  # type: ignore[misc]


class TestFromDict:
    """ScanConfig.from_dict."""

    def test_string_policy(self) -> None:
        assert ScanConfig.from_dict({"illegal_policy": "raise"}).illegal_policy is IllegalPolicy.RAISE

    def test_enum_policy(self) -> None:
        config = ScanConfig.from_dict({"illegal_policy": IllegalPolicy.SKIP})
        assert config.illegal_policy is IllegalPolicy.SKIP

    def test_unknown_keys_ignored(self) -> None:
        assert ScanConfig.from_dict({"nope": 1}) == ScanConfig()

    def test_empty_dict(self) -> None:
        assert ScanConfig.from_dict({}) == ScanConfig()

    def test_invalid_policy(self) -> None:
        with pytest.raises(ValueError):
            ScanConfig.from_dict({"illegal_policy": "explode"})


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_default(self) -> None:
        assert get_scan_config() == ScanConfig()

    def test_set_and_reset(self) -> None:
        set_scan_config(ScanConfig(illegal_policy=IllegalPolicy.SKIP))
        assert get_scan_config().illegal_policy is IllegalPolicy.SKIP
        reset_scan_config()
        assert get_scan_config().illegal_policy is IllegalPolicy.KEEP


class TestContextManager:
    """Test scan_config_context."""

    def test_restores_previous(self) -> None:
        set_scan_config(ScanConfig(illegal_policy=IllegalPolicy.SKIP))
        with scan_config_context(ScanConfig(illegal_policy=IllegalPolicy.RAISE)):
            assert get_scan_config().illegal_policy is IllegalPolicy.RAISE
        assert get_scan_config().illegal_policy is IllegalPolicy.SKIP

    def test_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with scan_config_context(ScanConfig(illegal_policy=IllegalPolicy.RAISE)):
                raise RuntimeError("boom")
        assert get_scan_config().illegal_policy is IllegalPolicy.KEEP


class TestThreadIsolation:
    """Config set in one thread is invisible to others."""

    def test_threads_do_not_share_config(self) -> None:
        results: dict[str, int] = {}

        def skipping() -> None:
            set_scan_config(ScanConfig(illegal_policy=IllegalPolicy.SKIP))
            results["skip"] = len(lex("@@@"))

        def default() -> None:
            results["keep"] = len(lex("@@@"))

        threads = [Thread(target=skipping), Thread(target=default)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {"skip": 0, "keep": 3}
        assert get_scan_config().illegal_policy is IllegalPolicy.KEEP
