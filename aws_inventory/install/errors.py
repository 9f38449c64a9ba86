"""Errors raised while provisioning aws-inventory."""

from contextlib import contextmanager
from typing import Iterator


class ProvisionError(Exception):
    """Base class for provisioning failures. All of them abort the phase."""


class PermissionDeniedError(ProvisionError):
    """A target location is not writable."""


class IOFailureError(ProvisionError):
    """A filesystem operation failed (disk full, invalid path, missing source)."""


class HomeDirectoryUnresolvableError(ProvisionError):
    """The invoking user's home directory cannot be determined."""


class SmokeTestError(ProvisionError):
    """The installed executable could not be run or exited non-zero."""


@contextmanager
def filesystem_errors() -> Iterator[None]:
    """Re-raise OSError as the matching ProvisionError, keeping the message."""
    try:
        yield
    except PermissionError as e:
        raise PermissionDeniedError(str(e)) from e
    except OSError as e:
        raise IOFailureError(str(e)) from e
