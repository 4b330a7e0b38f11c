"""Unit tests for custom exception classes."""

import pytest

from canwork_deployments.exceptions import (
    ChainMismatchError,
    DeploymentConfigError,
    InvalidMnemonicError,
    MissingEnvironmentError,
    NetworkNotFoundError,
    ProviderConnectionError,
    RPCResponseError,
)

ALL_EXCEPTIONS = [
    DeploymentConfigError,
    NetworkNotFoundError,
    MissingEnvironmentError,
    InvalidMnemonicError,
    ProviderConnectionError,
    RPCResponseError,
    ChainMismatchError,
]


class TestExceptionCatching:
    """Test that exceptions can be caught as their base types."""

    @pytest.mark.parametrize(
        "exc_class",
        [
            NetworkNotFoundError,
            MissingEnvironmentError,
            InvalidMnemonicError,
            RPCResponseError,
            ChainMismatchError,
        ],
    )
    def test_catch_as_value_error(self, exc_class):
        """Test that lookup and validation errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise exc_class("test")

    def test_catch_provider_connection_error_as_runtime_error(self):
        """Test that ProviderConnectionError can be caught as RuntimeError."""
        with pytest.raises(RuntimeError):
            raise ProviderConnectionError("test")

    def test_catch_all_as_deployment_config_error(self):
        """Test that all custom exceptions can be caught as DeploymentConfigError."""
        for exc_class in ALL_EXCEPTIONS:
            with pytest.raises(DeploymentConfigError):
                raise exc_class("test")


class TestExceptionCreation:
    """Test creating exceptions with various message types."""

    def test_exceptions_accept_string_messages(self):
        """Test that all exceptions accept string messages."""
        for exc_class in ALL_EXCEPTIONS:
            exc = exc_class("test message")
            assert str(exc) == "test message"
