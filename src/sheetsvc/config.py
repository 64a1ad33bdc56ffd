"""
Connection settings for a SpreadsheetClient.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigurationError

DEFAULT_APPLICATION_NAME = "sheetsvc"


@dataclass
class SheetsConfig():
    """
    What's needed to build an authenticated session and point a client at a spreadsheet.
    credentials_file can be a service account key or an authorized user file
    (the offline form carrying a refresh token).  If unset, application default
    credentials are used.
    Scopes are labels understood by GWSAccess.get_scope() or raw scope URLs.
    """
    credentials_file: Path|None = field(default=None)
    spreadsheet_id: str = field(default="")
    scopes: list[str] = field(default_factory=lambda: ["sheets"])
    application_name: str = field(default=DEFAULT_APPLICATION_NAME)

    def __post_init__(self) -> None:
        if self.credentials_file is not None and not isinstance(self.credentials_file, Path):
            self.credentials_file = Path(str(self.credentials_file))
        if isinstance(self.scopes, str):
            self.scopes = _split_scopes(self.scopes)
        self.spreadsheet_id = str(self.spreadsheet_id or "").strip()

    def __bool__(self) -> bool:
        """True if there is a spreadsheet to talk to."""
        return bool(self.spreadsheet_id)

    @property
    def config(self) -> dict:
        """
        All settings as a dict, for pushing into a json, toml, ini, etc, file.
        """
        return {
            'credentials': str(self.credentials_file) if self.credentials_file else None,
            'spreadsheet_id': self.spreadsheet_id,
            'scopes': list(self.scopes),
            'application_name': self.application_name,
        }

    @classmethod
    def from_dict(cls, config: dict) -> "SheetsConfig":
        """
        Build from a dict pulled out of a config file or equivalent.
        'secrets' is accepted as an alias of 'credentials'.
        """
        if not isinstance(config, dict):
            raise ConfigurationError(f"config must be a dict, not {type(config).__name__}")
        c = cls()
        v = config.get('credentials', config.get('secrets', None))
        if v:
            c.credentials_file = Path(v)
        v = config.get('spreadsheet_id', None)
        if v is not None:
            c.spreadsheet_id = str(v).strip()
        v = config.get('scopes', None)
        if v:
            c.scopes = _split_scopes(v) if isinstance(v, str) else [str(s) for s in v]
        v = config.get('application_name', None)
        if v:
            c.application_name = str(v)
        return c

    @classmethod
    def from_env(cls, environ: dict|None = None) -> "SheetsConfig":
        """
        GOOGLE_APPLICATION_CREDENTIALS, SHEETS_SPREADSHEET_ID, SHEETS_SCOPES (comma separated)
        and SHEETS_APPLICATION_NAME.
        """
        env = os.environ if environ is None else environ
        return cls.from_dict({
            'credentials': env.get("GOOGLE_APPLICATION_CREDENTIALS"),
            'spreadsheet_id': env.get("SHEETS_SPREADSHEET_ID"),
            'scopes': env.get("SHEETS_SCOPES"),
            'application_name': env.get("SHEETS_APPLICATION_NAME"),
        })


def _split_scopes(value: str) -> list[str]:
    return [s.strip() for s in value.split(",") if s.strip()]
