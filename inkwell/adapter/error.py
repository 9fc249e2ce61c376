"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class BackendError(AdapterError):
    """The hosted backend rejected a request or could not be reached.

    ``status_code`` is None for transport failures.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)

    @property
    def is_conflict(self) -> bool:
        return self.status_code == 409


class AuthProviderError(BackendError):
    """Sign-in, sign-out or credential update failed."""

    pass


class StorageError(BackendError):
    """Object upload failed."""

    pass
