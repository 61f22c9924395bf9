"""Custom exceptions for the Web3Voice gateway."""


class InputError(Exception):
    """Raised when the caller supplied invalid or missing data."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(Exception):
    """Raised when required configuration values are missing."""

    def __init__(self, missing: list[str], detail: str | None = None):
        self.missing = missing
        message = f"Missing required configuration: {', '.join(missing)}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class UpstreamError(Exception):
    """Raised when an external provider fails or returns an unexpected shape."""

    def __init__(self, provider: str, message: str, cause: Exception | None = None):
        self.provider = provider
        self.message = message
        self.cause = cause
        super().__init__(message)


class MintInProgressError(Exception):
    """Raised when a mint with the same idempotency key has not finished yet."""

    def __init__(self, idempotency_key: str):
        self.idempotency_key = idempotency_key
        super().__init__(
            f"Mint with idempotency key '{idempotency_key}' is already in progress"
        )


class CacheServiceError(Exception):
    """Raised when a cache operation fails."""

    def __init__(self, key: str, operation: str, cause: Exception | None = None):
        self.key = key
        self.operation = operation
        self.cause = cause
        super().__init__(f"Cache {operation} failed for key '{key}'")


class PipelineError(Exception):
    """Raised when a step of the upload-transcribe-mint pipeline fails."""

    def __init__(self, stage: str, cause: Exception, cid: str | None = None):
        self.stage = stage
        self.cause = cause
        self.cid = cid
        super().__init__(f"Pipeline failed at '{stage}' step: {cause}")
