"""Credential resolution for the Coinbase client.

``CredentialResolver`` reads the ``COINBASE_*`` environment variables,
after python-dotenv has loaded a ``.env`` file into the environment, and
turns them into an ``AuthConfig``:

    ```python
    from coinbase_client.auth import CredentialResolver

    resolver = CredentialResolver(dotenv_path="/app/.env")
    auth = resolver.auth_config()
    ```

Environment variables:
    COINBASE_API_KEY, COINBASE_API_SECRET: API-key authentication.
        COINBASE_API_SECRET_FILE may point to a file holding the secret.
    COINBASE_CLIENT_ID, COINBASE_CLIENT_SECRET, COINBASE_REFRESH_TOKEN:
        OAuth authentication. COINBASE_ACCESS_TOKEN is optional; without it
        the first authenticated request refreshes the token.
    COINBASE_BASE_URL: API origin, defaults to https://api.coinbase.com.

Credential values are never logged; only the variable they came from is.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from coinbase_client.auth.exceptions import CredentialFileError, CredentialNotFoundError
from coinbase_client.auth.strategies import ApiKeyAuth, AuthConfig, OAuthAuth
from coinbase_client.transport.http import API_URL

logger = logging.getLogger(__name__)

API_KEY_ENV = "COINBASE_API_KEY"
API_SECRET_ENV = "COINBASE_API_SECRET"
API_SECRET_FILE_ENV = "COINBASE_API_SECRET_FILE"
CLIENT_ID_ENV = "COINBASE_CLIENT_ID"
CLIENT_SECRET_ENV = "COINBASE_CLIENT_SECRET"
REFRESH_TOKEN_ENV = "COINBASE_REFRESH_TOKEN"
ACCESS_TOKEN_ENV = "COINBASE_ACCESS_TOKEN"
BASE_URL_ENV = "COINBASE_BASE_URL"


class CredentialResolver:
    """Build client configuration from the environment.

    Args:
        dotenv_path: Path to a .env file. If None, python-dotenv searches
            parent directories.
        load_dotenv: Whether to load a .env file at all. Disable in tests.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_path = dotenv_path
        self._dotenv_loaded = False
        if load_dotenv:
            self._load_dotenv()

    def _load_dotenv(self) -> None:
        try:
            load_dotenv(dotenv_path=self._dotenv_path)
        except OSError as e:
            logger.warning(f"Failed to load .env file: {e}")
            return
        self._dotenv_loaded = True
        logger.debug("Loaded .env file for credential resolution")

    def resolve(self, env_var_name: str, *, default: str | None = None, required: bool = False) -> str | None:
        """Return the value of ``env_var_name``, or ``default`` when unset.

        Raises:
            CredentialNotFoundError: If ``required`` and the variable is unset.
        """
        value = os.environ.get(env_var_name)
        if value is not None:
            logger.debug(f"Resolved {env_var_name} from the environment: ***")
            return value

        if required:
            raise CredentialNotFoundError(
                f"Required credential not found (checked env var: {env_var_name})", env_var_name=env_var_name
            )
        return default

    def read_file(self, env_var_name: str) -> str | None:
        """Read a credential from the file named by ``env_var_name``.

        The path supports ``~`` and ``$VAR`` expansion; the content is
        stripped of surrounding whitespace. Returns None when the variable
        is unset.

        Raises:
            CredentialFileError: If the variable is set but the file cannot be read.
        """
        path_value = self.resolve(env_var_name)
        if path_value is None:
            return None

        path = Path(os.path.expanduser(os.path.expandvars(path_value)))
        try:
            content = path.read_text().strip()
        except FileNotFoundError:
            raise CredentialFileError(f"Credential file not found: {path} (from {env_var_name})") from None
        except OSError as e:
            raise CredentialFileError(f"Error reading credential file {path}: {e}") from e

        logger.debug(f"Resolved credential from file: {path} (***)")
        return content

    def base_url(self) -> str:
        return self.resolve(BASE_URL_ENV, default=API_URL)

    def api_key_auth(self) -> ApiKeyAuth | None:
        """API-key credentials, or None when ``COINBASE_API_KEY`` is unset.

        Raises:
            CredentialNotFoundError: If the key is set without a secret.
        """
        api_key = self.resolve(API_KEY_ENV)
        if api_key is None:
            return None

        api_secret = self.resolve(API_SECRET_ENV) or self.read_file(API_SECRET_FILE_ENV)
        if api_secret is None:
            raise CredentialNotFoundError(f"{API_KEY_ENV} is set but no API secret was found", env_var_name=API_SECRET_ENV)
        return ApiKeyAuth(api_key=api_key, api_secret=api_secret)

    def oauth_auth(self) -> OAuthAuth | None:
        """OAuth credentials, or None when ``COINBASE_CLIENT_ID`` is unset.

        Raises:
            CredentialNotFoundError: If the client secret or refresh token is missing.
        """
        client_id = self.resolve(CLIENT_ID_ENV)
        if client_id is None:
            return None

        return OAuthAuth(
            client_id=client_id,
            client_secret=self.resolve(CLIENT_SECRET_ENV, required=True),
            refresh_token=self.resolve(REFRESH_TOKEN_ENV, required=True),
            access_token=self.resolve(ACCESS_TOKEN_ENV),
        )

    def auth_config(self) -> AuthConfig | None:
        """Pick the configured strategy; API-key credentials win over OAuth.

        Returns None when neither is configured, which is enough for the
        unauthenticated data endpoints.
        """
        auth = self.api_key_auth()
        if auth is not None:
            logger.debug("Using API key authentication")
            return auth

        auth = self.oauth_auth()
        if auth is not None:
            logger.debug("Using OAuth authentication")
        return auth


def resolve_auth_config(resolver: CredentialResolver | None = None) -> AuthConfig | None:
    """Build an AuthConfig from ``COINBASE_*`` environment variables."""
    return (resolver or CredentialResolver()).auth_config()
