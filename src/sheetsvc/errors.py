"""
Exceptions raised by sheetsvc.

Failures coming out of the Google client stack or the network underneath it
are translated into RemoteServiceError; anything else raised during a call goes through as is.
"""
import logging
from functools import wraps

import google.auth.exceptions
import googleapiclient.errors
import httplib2

logger = logging.getLogger(__name__)

# failures of the remote call as surfaced by the client libraries and the transport
# (socket errors, timeouts and DNS failures are OSError)
REMOTE_ERRORS = (googleapiclient.errors.Error, google.auth.exceptions.GoogleAuthError,
                 httplib2.HttpLib2Error, OSError)


class SheetsError(Exception):
    """Base for all sheetsvc errors."""


class ConfigurationError(SheetsError, ValueError):
    """
    The client or session can't be set up from what was supplied,
    e.g. no service handle, an empty spreadsheet id or an unreadable
    credentials file.
    """


class RemoteServiceError(SheetsError):
    """
    A call against the Sheets service failed: network, authorization,
    quota or a range the service rejected.  The original client library
    exception is kept as cause (and __cause__).
    """

    def __init__(self, operation: str, cause: Exception) -> None:
        super().__init__(operation, cause)
        self.operation = operation
        self.cause = cause
        self.status = _status_of(cause)
        self.reason = _reason_of(cause)

    def __str__(self) -> str:
        msg = f"{self.operation} failed"
        if self.status is not None:
            msg += f" ({self.status})"
        if self.reason:
            msg += f": {self.reason}"
        return msg


def _status_of(err: Exception) -> int|None:
    resp = getattr(err, "resp", None)
    status = getattr(resp, "status", None)
    try:
        return int(status) if status is not None else None
    except (TypeError, ValueError):
        return None


def _reason_of(err: Exception) -> str:
    if isinstance(err, googleapiclient.errors.HttpError):
        return err.reason
    return str(err)


def remote_call(operation: str):
    """
    Decorator for methods that issue exactly one remote call.
    Client library failures are logged and re-raised as RemoteServiceError,
    chained to the original.  No retries.
    param: operation: label used in the error message and log line
    """
    def _inner_decorator(f):
        @wraps(f)
        def wrapped(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except REMOTE_ERRORS as e:
                logger.warning("%s failed: %s", operation, e)
                raise RemoteServiceError(operation, e) from e
        return wrapped
    return _inner_decorator
