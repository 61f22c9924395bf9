"""Helpers for reading provider HTTP responses."""

import httpx


def error_message(response: httpx.Response, provider_label: str) -> str:
    """
    Extracts the provider's own error text from a failed response.

    Falls back to a generic status message when the body carries none.
    """
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict):
            error = error.get("details") or error.get("reason")
        if isinstance(error, list):
            error = "; ".join(str(item) for item in error)
        if error:
            return str(error)
        message = payload.get("message")
        if message:
            return str(message)

    return f"{provider_label} returned HTTP {response.status_code}"


def timeout_kwargs(timeout: float | None) -> dict:
    """Per-call timeout override; None keeps the client's default."""
    return {} if timeout is None else {"timeout": timeout}
