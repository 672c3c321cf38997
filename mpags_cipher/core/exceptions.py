from typing import Any


class CipherError(Exception):
    """Base exception for all cipher errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CipherError):
    """Raised when input validation fails."""

    pass


class TextTooLongError(ValidationError):
    """Raised when input text exceeds maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class ConstructionError(CipherError):
    """Raised when a cipher cannot be constructed."""

    pass


class CipherNotFoundError(ConstructionError):
    """Raised when the requested cipher type is not registered."""

    def __init__(self, cipher_name: str):
        super().__init__(
            f"Cipher '{cipher_name}' not found",
            {"cipher_name": cipher_name},
        )


class InvalidKeyError(ConstructionError):
    """Raised when a key is not valid for the requested cipher."""

    def __init__(self, cipher_name: str, key: str, reason: str):
        super().__init__(
            f"Invalid key '{key}' for {cipher_name}: {reason}",
            {"cipher_name": cipher_name, "key": key, "reason": reason},
        )


class ProcessingError(CipherError):
    """Raised when concurrent cipher application fails."""

    def __init__(
        self,
        message: str,
        failures: dict[int, BaseException] | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.failures = failures or {}
        details = dict(details or {})
        if self.failures:
            details["failed_chunks"] = {
                index: repr(exc) for index, exc in sorted(self.failures.items())
            }
        super().__init__(message, details)


class WorkerTimeoutError(ProcessingError):
    """Raised when workers do not finish within the allowed time."""

    def __init__(self, pending: int, timeout: float):
        super().__init__(
            f"{pending} worker(s) still running after {timeout}s",
            details={"pending": pending, "timeout": timeout},
        )
