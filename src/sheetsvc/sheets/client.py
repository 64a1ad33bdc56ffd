"""
SpreadsheetClient: read/update/append/clear against the values resource
of one spreadsheet.  Each operation is a single blocking call; errors from
the service propagate to the caller (see errors.remote_call).
"""
import logging
from collections.abc import Iterable, Sequence

from ..errors import ConfigurationError, remote_call
from .resources import (ValueRange, WriteOptions, UpdateValuesResponse,
                        AppendValuesResponse, ClearValuesResponse)

logger = logging.getLogger(__name__)

Row = Sequence[bool|str|int|float|None]
ValueGrid = list[list[bool|str|int|float|None]]


class SpreadsheetClient():
    """
    Wraps an authenticated Sheets v4 service and a spreadsheet id.
    The service is whatever googleapiclient.discovery.build("sheets", "v4", ...)
    returns (see access.GWSAccess) or anything shaped like it.
    Neither is changed after construction.

    update() and append() take one row and send it as a one row grid, the
    *_grid() variants take the whole grid for writing several rows in one call.
    """

    def __init__(self, service, spreadsheet_id: str,
                 options: WriteOptions|None = None) -> None:
        if service is None:
            raise ConfigurationError("An authenticated sheets service is required")
        if not spreadsheet_id or not str(spreadsheet_id).strip():
            raise ConfigurationError("A spreadsheet id is required")
        self._service = service
        self._spreadsheet_id = str(spreadsheet_id).strip()
        self._options = options if options is not None else WriteOptions()
        self._last_response = None

    def __str__(self) -> str:
        return self._spreadsheet_id

    def __repr__(self) -> str:
        return f"{self.__class__}:{str(self)}"

    @property
    def spreadsheet_id(self) -> str:
        return self._spreadsheet_id

    @property
    def service(self):
        return self._service

    @property
    def options(self) -> WriteOptions:
        return self._options

    @property
    def last_response(self) -> UpdateValuesResponse|AppendValuesResponse|ClearValuesResponse|None:
        """
        Parsed response of the most recent write or clear, None before any.
        """
        return self._last_response

    def _values(self):
        return self._service.spreadsheets().values()

    @remote_call("read")
    def read(self, range: str) -> ValueGrid:
        """
        Wrapper for the get() method on the values resource.
        See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/get
        Returns the rows the service reports for the range, an empty list if
        it reports none.  The range isn't checked locally.
        """
        logger.debug("read %s!%s", self._spreadsheet_id, range)
        response = self._values().get(spreadsheetId=self._spreadsheet_id,
                                      range=str(range)).execute()
        return ValueRange.from_response(response).values

    def update(self, range: str, row: Row) -> None:
        """
        Overwrite the cells at range with a single row of values.
        With the default options values are written verbatim, not
        evaluated as formulas.
        """
        self.update_grid(range, [_row(row)])

    @remote_call("update")
    def update_grid(self, range: str, grid: Iterable[Row]) -> None:
        """
        Wrapper for the update() method on the values resource.
        See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/update
        """
        body = _body(grid)
        logger.debug("update %s!%s rows=%d", self._spreadsheet_id, range, len(body["values"]))
        response = self._values().update(spreadsheetId=self._spreadsheet_id,
                                         range=str(range),
                                         valueInputOption=self._options.value_input.value,
                                         body=body).execute()
        self._last_response = UpdateValuesResponse.from_response(response)

    def append(self, range: str, row: Row) -> None:
        """
        Add a single row after the last row of the table found at range.
        The service picks the row; by default it inserts rather than
        overwriting whatever follows.
        """
        self.append_grid(range, [_row(row)])

    @remote_call("append")
    def append_grid(self, range: str, grid: Iterable[Row]) -> None:
        """
        Wrapper for the append() method on the values resource.
        See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/append
        """
        body = _body(grid)
        logger.debug("append %s!%s rows=%d", self._spreadsheet_id, range, len(body["values"]))
        response = self._values().append(spreadsheetId=self._spreadsheet_id,
                                         range=str(range),
                                         valueInputOption=self._options.value_input.value,
                                         insertDataOption=self._options.insert_data.value,
                                         body=body).execute()
        self._last_response = AppendValuesResponse.from_response(response)

    @remote_call("clear")
    def clear(self, range: str) -> None:
        """
        Wrapper for the clear() method on the values resource.
        See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/clear
        Only values are removed, formatting stays.
        """
        logger.debug("clear %s!%s", self._spreadsheet_id, range)
        response = self._values().clear(spreadsheetId=self._spreadsheet_id,
                                        range=str(range),
                                        body={}).execute()
        self._last_response = ClearValuesResponse.from_response(response)


def _row(row: Row) -> list:
    # a bare string would otherwise be split into one cell per character
    if isinstance(row, (str, bytes)) or not isinstance(row, Iterable):
        raise TypeError(f"row must be a sequence of cell values, not {type(row).__name__}")
    return list(row)


def _body(grid: Iterable[Row]) -> dict:
    if isinstance(grid, (str, bytes)) or not isinstance(grid, Iterable):
        raise TypeError(f"grid must be a sequence of rows, not {type(grid).__name__}")
    vr = ValueRange(values=[_row(r) for r in grid])
    if not vr:
        raise ValueError("Nothing to write, grid has no rows")
    return vr.trim()
