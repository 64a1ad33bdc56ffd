"""
Class implementations of the values resource request/response bodies.
As these are just logical groupings of data fields we use dataclasses
to implement.  dataclass.asdict() gives exactly the dict the request
client needs; for the inverse from_response() drops unknown keys.
Only what the values get/update/append/clear calls need is implemented.
"""
from dataclasses import dataclass, field, asdict
from enum import Enum

from ..resources import GoogleWorkSpaceResourceBase


class GoogleSheetsEnum(str, Enum):
    """
    An 'enum' in the sheets client is just a string so the members
    carry the wire value.  parse() translates and validates input,
    accepting a few shorthand aliases.
    """
    @classmethod
    def _aliases(cls) -> dict[str,str]:
        return {}

    @classmethod
    def parse(cls, option):
        if isinstance(option, cls):
            return option
        o = str(option).upper()
        o = cls._aliases().get(o, o)
        try:
            return cls(o)
        except ValueError:
            raise ValueError(f"Invalid {cls.__name__} value: {option}") from None

    def __str__(self) -> str:
        return self.value


class ValueInputOption(GoogleSheetsEnum):
    """https://developers.google.com/sheets/api/reference/rest/v4/ValueInputOption"""
    RAW = "RAW"
    USER_ENTERED = "USER_ENTERED"

    @classmethod
    def _aliases(cls) -> dict[str,str]:
        return {"USER": "USER_ENTERED"}


class InsertDataOption(GoogleSheetsEnum):
    """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/append#InsertDataOption"""
    OVERWRITE = "OVERWRITE"
    INSERT_ROWS = "INSERT_ROWS"

    @classmethod
    def _aliases(cls) -> dict[str,str]:
        return {"INSERT": "INSERT_ROWS"}


@dataclass(frozen=True)
class WriteOptions():
    """
    How written values are interpreted and how append places them.
    Defaults store values verbatim (no formula evaluation) and have
    append insert new rows rather than overwrite trailing ones.
    """
    value_input: ValueInputOption = field(default=ValueInputOption.RAW)
    insert_data: InsertDataOption = field(default=InsertDataOption.INSERT_ROWS)

    def __post_init__(self) -> None:
        # frozen, so normalize through object.__setattr__
        object.__setattr__(self, "value_input", ValueInputOption.parse(self.value_input))
        object.__setattr__(self, "insert_data", InsertDataOption.parse(self.insert_data))


@dataclass
class ValueRange(GoogleWorkSpaceResourceBase):
    """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values#resource:-valuerange"""
    range: str = field(default="")
    majorDimension: str = field(default="")
    values: list[list[bool|str|int|float|None]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.range = str(self.range) if self.range else ""
        self.values = [list(row) for row in self.values] if self.values else []

    def __bool__(self) -> bool:
        return bool(self.values)

    def __len__(self) -> int:
        """Number of rows."""
        return len(self.values)


@dataclass
class UpdateValuesResponse(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/UpdateValuesResponse
    """
    spreadsheetId: str = field(default="")
    updatedRange: str = field(default="")
    updatedRows: int = field(default=0)
    updatedColumns: int = field(default=0)
    updatedCells: int = field(default=0)
    updatedData: ValueRange|dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.updatedData = self.updatedData if isinstance(self.updatedData,ValueRange) else ValueRange.from_response(self.updatedData)

    def __bool__(self) -> bool:
        return bool(self.spreadsheetId) and bool(self.updatedRange)

    def to_base(self) -> dict:
        self.fixup()
        b = asdict(self)
        b['updatedData'] = self.updatedData.to_base()
        return b


@dataclass
class AppendValuesResponse(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/append#response-body
    tableRange is the range of the table the values were appended after.
    """
    spreadsheetId: str = field(default="")
    tableRange: str = field(default="")
    updates: UpdateValuesResponse|dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.updates = self.updates if isinstance(self.updates,UpdateValuesResponse) else UpdateValuesResponse.from_response(self.updates)

    def __bool__(self) -> bool:
        return bool(self.spreadsheetId) and bool(self.updates)

    def to_base(self) -> dict:
        self.fixup()
        b = asdict(self)
        b['updates'] = self.updates.to_base()
        return b


@dataclass
class ClearValuesResponse(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/clear#response-body
    """
    spreadsheetId: str = field(default="")
    clearedRange: str = field(default="")

    def __bool__(self) -> bool:
        return bool(self.spreadsheetId) and bool(self.clearedRange)
