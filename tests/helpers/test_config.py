"""Tests for configuration and environment variable helpers."""

import os

import pytest

from typing import TYPE_CHECKING

from node_rewards.helpers.config import (
    get_api_endpoints,
    get_log_level,
    get_node_addresses,
    get_optional_env,
    get_required_env,
)
from node_rewards.helpers.constants import (
    CRYPTOCOMPARE_API_URL,
    STREAMR_API_URL,
    THEGRAPH_API_URL,
)


if TYPE_CHECKING:
    from collections.abc import Generator


ENV_KEYS = (
    "TEST_KEY",
    "NODE_ADDRESSES",
    "STREAMR_API_URL",
    "CRYPTOCOMPARE_API_URL",
    "THEGRAPH_API_URL",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env() -> "Generator[None]":
    """Clean environment variables before and after test."""
    saved_env = {key: os.environ.get(key) for key in ENV_KEYS}

    for key in saved_env:
        if key in os.environ:
            del os.environ[key]

    yield

    for key, value in saved_env.items():
        if value is not None:
            os.environ[key] = value
        elif key in os.environ:
            del os.environ[key]


@pytest.mark.usefixtures("clean_env")
class TestGetRequiredEnv:
    """Tests for get_required_env function."""

    def test_returns_env_value_when_set(self) -> None:
        """Test that get_required_env returns value when set."""
        os.environ["TEST_KEY"] = "test_value"
        assert get_required_env("TEST_KEY") == "test_value"

    def test_raises_when_not_set(self) -> None:
        """Test that get_required_env raises ValueError when not set."""
        with pytest.raises(
            ValueError, match="TEST_KEY environment variable is not set"
        ):
            get_required_env("TEST_KEY")

    def test_raises_when_empty_string(self) -> None:
        """Test that get_required_env raises ValueError when empty."""
        os.environ["TEST_KEY"] = ""
        with pytest.raises(
            ValueError, match="TEST_KEY environment variable is not set"
        ):
            get_required_env("TEST_KEY")


@pytest.mark.usefixtures("clean_env")
class TestGetOptionalEnv:
    """Tests for get_optional_env function."""

    def test_returns_value_when_set(self) -> None:
        """Test that the variable value wins over the default."""
        os.environ["TEST_KEY"] = "set"
        assert get_optional_env("TEST_KEY", "default") == "set"

    def test_returns_default_when_not_set(self) -> None:
        """Test that the default is returned for a missing variable."""
        assert get_optional_env("TEST_KEY", "default") == "default"

    def test_returns_none_without_default(self) -> None:
        """Test that None is returned when no default is given."""
        assert get_optional_env("TEST_KEY") is None


@pytest.mark.usefixtures("clean_env")
class TestGetNodeAddresses:
    """Tests for get_node_addresses function."""

    def test_explicit_addresses_win(self) -> None:
        """Test addresses passed in are used over the environment."""
        os.environ["NODE_ADDRESSES"] = "0xenv"
        assert get_node_addresses(["0xa", "0xb"]) == ["0xa", "0xb"]

    def test_reads_comma_separated_env(self) -> None:
        """Test NODE_ADDRESSES is split, stripped and keeps its order."""
        os.environ["NODE_ADDRESSES"] = " 0xc , 0xa,0xb "
        assert get_node_addresses() == ["0xc", "0xa", "0xb"]

    def test_skips_blank_entries(self) -> None:
        """Test empty items from stray commas are dropped."""
        os.environ["NODE_ADDRESSES"] = "0xa,,0xb,"
        assert get_node_addresses() == ["0xa", "0xb"]

    def test_raises_when_not_configured(self) -> None:
        """Test missing NODE_ADDRESSES raises ValueError."""
        with pytest.raises(ValueError, match="NODE_ADDRESSES"):
            get_node_addresses()

    def test_raises_when_only_blanks(self) -> None:
        """Test a list of blanks raises ValueError."""
        os.environ["NODE_ADDRESSES"] = " , ,"
        with pytest.raises(ValueError, match="At least one node address"):
            get_node_addresses()


@pytest.mark.usefixtures("clean_env")
class TestGetApiEndpoints:
    """Tests for get_api_endpoints function."""

    def test_defaults(self) -> None:
        """Test built-in endpoints are used without overrides."""
        endpoints = get_api_endpoints()

        assert endpoints.streamr == STREAMR_API_URL
        assert endpoints.cryptocompare == CRYPTOCOMPARE_API_URL
        assert endpoints.thegraph == THEGRAPH_API_URL

    def test_env_overrides_strip_trailing_slash(self) -> None:
        """Test overrides are read from the environment."""
        os.environ["STREAMR_API_URL"] = "http://localhost:3013/"
        os.environ["THEGRAPH_API_URL"] = "http://localhost:8000"

        endpoints = get_api_endpoints()

        assert endpoints.streamr == "http://localhost:3013"
        assert endpoints.thegraph == "http://localhost:8000"
        assert endpoints.cryptocompare == CRYPTOCOMPARE_API_URL


@pytest.mark.usefixtures("clean_env")
class TestGetLogLevel:
    """Tests for get_log_level function."""

    def test_explicit_level_is_uppercased(self) -> None:
        """Test a given level wins and is normalised."""
        os.environ["LOG_LEVEL"] = "ERROR"
        assert get_log_level("debug") == "DEBUG"

    def test_reads_env(self) -> None:
        """Test LOG_LEVEL is used when no level is given."""
        os.environ["LOG_LEVEL"] = "warning"
        assert get_log_level() == "WARNING"

    def test_defaults_to_info(self) -> None:
        """Test INFO is the default."""
        assert get_log_level() == "INFO"
