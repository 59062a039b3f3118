"""Custom exceptions for authentication and credential resolution.

Example:
    ```python
    from coinbase_client.auth.exceptions import MissingAuthConfig

    if auth is None:
        raise MissingAuthConfig()
    ```
"""


class AuthError(Exception):
    """Base exception for authentication configuration errors.

    All auth-specific exceptions inherit from this class, making it easy
    to catch any misconfiguration surfaced by the client.
    """

    pass


class MissingAuthConfig(AuthError):
    """Raised when an authenticated endpoint is called without an AuthConfig."""

    def __init__(self, message: str = "Missing authentication"):
        super().__init__(message)


class UnrecognizedAuthStrategy(AuthError):
    """Raised when the configured auth object is neither ApiKeyAuth nor OAuthAuth.

    Attributes:
        strategy: The offending configuration object.
    """

    def __init__(self, strategy: object):
        super().__init__(f"Unrecognized auth strategy: {type(strategy).__name__}")
        self.strategy = strategy


class CredentialError(AuthError):
    """Base exception for credential resolution errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).

    Example:
        ```python
        try:
            secret = resolver.resolve("COINBASE_API_SECRET", required=True)
        except CredentialNotFoundError as e:
            print(f"Missing credential: {e.env_var_name}")
        ```
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a credential file cannot be read."""

    pass
