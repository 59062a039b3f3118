"""Tests for authentication exceptions."""

import pytest

from coinbase_client.auth.exceptions import (
    AuthError,
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
    MissingAuthConfig,
    UnrecognizedAuthStrategy,
)


class TestMissingAuthConfig:
    """Test MissingAuthConfig exception."""

    def test_default_message(self):
        """Test that the default message is used."""
        with pytest.raises(MissingAuthConfig, match="Missing authentication"):
            raise MissingAuthConfig()

    def test_is_auth_error(self):
        """Test that MissingAuthConfig is an AuthError."""
        with pytest.raises(AuthError):
            raise MissingAuthConfig()


class TestUnrecognizedAuthStrategy:
    """Test UnrecognizedAuthStrategy exception."""

    def test_strategy_attribute(self):
        """Test that the offending config is kept."""
        try:
            raise UnrecognizedAuthStrategy("jwt")
        except UnrecognizedAuthStrategy as e:
            assert e.strategy == "jwt"
            assert str(e) == "Unrecognized auth strategy: str"

    def test_is_auth_error(self):
        """Test that UnrecognizedAuthStrategy is an AuthError."""
        assert issubclass(UnrecognizedAuthStrategy, AuthError)


class TestCredentialNotFoundError:
    """Test CredentialNotFoundError exception."""

    def test_is_credential_error(self):
        """Test that CredentialNotFoundError is a CredentialError and an AuthError."""
        with pytest.raises(CredentialError):
            raise CredentialNotFoundError("Test error")
        assert issubclass(CredentialError, AuthError)

    def test_env_var_name_attribute(self):
        """Test that env_var_name attribute is set."""
        try:
            raise CredentialNotFoundError("Test error", env_var_name="COINBASE_API_SECRET")
        except CredentialNotFoundError as e:
            assert e.env_var_name == "COINBASE_API_SECRET"
            assert str(e) == "Test error"

    def test_env_var_name_optional(self):
        """Test that env_var_name is optional."""
        try:
            raise CredentialNotFoundError("Test error")
        except CredentialNotFoundError as e:
            assert e.env_var_name is None


class TestCredentialFileError:
    """Test CredentialFileError exception."""

    def test_is_credential_error(self):
        """Test that CredentialFileError is a CredentialError."""
        with pytest.raises(CredentialError):
            raise CredentialFileError("File not found: /path/to/file")
