"""
A thin wrapper around the Google Sheets values resource, scoped to a single
spreadsheet.  Reading, updating, appending and clearing cell values are each
a single call against an already authenticated service.

Python dataclasses are used for the request/response structs and most of the
logic is translating between those and the raw dicts the client wants.
Building the authenticated service itself lives in access and is injected
into the client rather than held as a module singleton.
"""
import logging

from .errors import SheetsError, ConfigurationError, RemoteServiceError
from .config import SheetsConfig
from .access import GWSAccess, connect_client
from .sheets import SpreadsheetClient, WriteOptions, ValueInputOption, InsertDataOption

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SheetsError",
    "ConfigurationError",
    "RemoteServiceError",
    "SheetsConfig",
    "GWSAccess",
    "connect_client",
    "SpreadsheetClient",
    "WriteOptions",
    "ValueInputOption",
    "InsertDataOption",
]
