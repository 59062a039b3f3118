"""HMAC request signing for API-key authentication."""

import hashlib
import hmac

ACCESS_KEY_HEADER = "CB-ACCESS-KEY"
ACCESS_SIGN_HEADER = "CB-ACCESS-SIGN"
ACCESS_TIMESTAMP_HEADER = "CB-ACCESS-TIMESTAMP"


def sign_request(secret: str, timestamp: str, method: str, path: str, body: str = "") -> str:
    """Return hex(HMAC-SHA256(secret, timestamp + method + path + body)).

    ``path`` includes the query string, ``body`` is the serialized JSON body
    (empty string when there is none).
    """
    payload = f"{timestamp}{method}{path}{body}"
    return hmac.new(secret.encode(), payload.encode(), hashlib.sha256).hexdigest()


def api_key_headers(api_key: str, signature: str, timestamp: str) -> dict[str, str]:
    return {
        ACCESS_KEY_HEADER: api_key,
        ACCESS_SIGN_HEADER: signature,
        ACCESS_TIMESTAMP_HEADER: timestamp,
    }
