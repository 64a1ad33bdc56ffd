from collections.abc import Iterable
from pathlib import Path
import json
import logging

import google.auth
import google.auth.exceptions
import google.oauth2.credentials
import google.oauth2.service_account
import google_auth_httplib2
import httplib2
from googleapiclient.discovery import build, Resource
from googleapiclient.http import set_user_agent
import googleapiclient.discovery_cache as gws_discovery_cache

from .config import SheetsConfig
from .errors import ConfigurationError
from .sheets.client import SpreadsheetClient
from .sheets.resources import WriteOptions

logger = logging.getLogger(__name__)


class GWSAccess():
    """
    Builds authenticated access to Google Workspace services from a SheetsConfig.
    See https://developers.google.com/workspace/guides/create-credentials#choose_the_access_credential_that_is_right_for_you
    for an overview of what you'll need.  The credentials file is either a service account
    key or an authorized user file holding a refresh token (offline access), google-auth
    refreshes the access token from it as needed.  No interactive consent flow is run here;
    produce the authorized user file beforehand.  With no file, application default
    credentials are used (GOOGLE_APPLICATION_CREDENTIALS and the cloud default locations).

    Instances are meant to be created by the application and the resulting service
    handed to whatever needs it, there is no module level session.
    """

    __SCOPES = {
        "sheets": "https://www.googleapis.com/auth/spreadsheets",
        "sheets-ro": "https://www.googleapis.com/auth/spreadsheets.readonly",
        "drive-file": "https://www.googleapis.com/auth/drive.file",
        "drive": "https://www.googleapis.com/auth/drive",
        "drive-ro": "https://www.googleapis.com/auth/drive.readonly",
    }
    __SCOPE_URL_PREFIX = "https://www.googleapis.com/"

    def __init__(self, config: SheetsConfig|dict|None = None) -> None:
        self.__config = (config if isinstance(config, SheetsConfig) else
                         SheetsConfig.from_dict(config) if config is not None else
                         SheetsConfig())
        self.__discovery_cache = gws_discovery_cache.autodetect()
        self.__creds = None
        self.__services = {}

    def __bool__(self) -> bool:
        """True if credentials have been loaded"""
        return self.connected

    def __str__(self) -> str:
        if self.connected:
            return f"Connected:{str(self.scopes)}"
        return f"Disconnected:{str(self.scopes)}"

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{str(self)}"

    @classmethod
    def get_scope(cls, scope: str) -> str:
        """
        Get a scope based on simplified label.
        A raw URL will also be expected.
        """
        s = str(scope)
        sc = cls.__SCOPES.get(s, "")
        if not sc and s.startswith(cls.__SCOPE_URL_PREFIX):
            sc = s
        return sc

    @property
    def config(self) -> SheetsConfig:
        return self.__config

    @property
    def scopes(self) -> list[str]:
        """
        The scope URLs requested, unknown labels dropped.
        """
        value = self.__config.scopes
        values = [value] if isinstance(value, str) or not isinstance(value, Iterable) else value
        slist = []
        for v in values:
            s = self.get_scope(str(v))
            if s and s not in slist:
                slist.append(s)
        return slist

    @property
    def creds(self):
        """
        Loaded credentials or None
        """
        return self.__creds

    @property
    def connected(self) -> bool:
        return self.__creds is not None

    @property
    def services(self) -> dict[str,Resource]:
        """
        Services built so far.  Can be empty.
        """
        return self.__services

    def load_credentials(self):
        """
        Load credentials for the configured scopes.
        Raises ConfigurationError if there are no scopes, the file is missing
        or isn't a credential type we know.
        """
        scopes = self.scopes
        if not scopes:
            raise ConfigurationError(f"No usable scopes in {self.__config.scopes}")
        path = self.__config.credentials_file
        if path is None:
            try:
                creds, _ = google.auth.default(scopes=scopes)
            except google.auth.exceptions.DefaultCredentialsError as e:
                raise ConfigurationError(f"No credentials file given and no default credentials: {e}") from e
            return creds

        path = Path(path)
        if not (path.exists() and path.is_file()):
            raise ConfigurationError(f"Credentials file not found: {path}")
        try:
            with open(path, 'r', encoding='utf-8') as f:
                info = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Unreadable credentials file {path}: {e}") from e

        kind = info.get('type', '') if isinstance(info, dict) else ''
        if kind not in ('service_account', 'authorized_user'):
            raise ConfigurationError(f"Unsupported credentials type '{kind}' in {path}")
        try:
            if kind == 'service_account':
                creds = google.oauth2.service_account.Credentials.from_service_account_info(info, scopes=scopes)
            else:
                creds = google.oauth2.credentials.Credentials.from_authorized_user_info(info, scopes)
        except ValueError as e:
            raise ConfigurationError(f"Invalid credentials in {path}: {e}") from e
        logger.debug("loaded %s credentials from %s", kind, path)
        return creds

    def connect(self) -> bool:
        """
        Load the credentials and drop any services built with older ones.
        """
        self.__services = {}
        self.__creds = self.load_credentials()
        return self.connected

    def get_service(self, name: str, version: str) -> Resource:
        """
        Build the requested service if not already available, connecting if required.
        The HTTP transport is tagged with the application name as its user agent.
        """
        if not self.connected:
            self.connect()
        id = f'{name}:{version}'
        s = self.__services.get(id, None)
        if s is None:
            http = google_auth_httplib2.AuthorizedHttp(self.__creds, http=httplib2.Http())
            if self.__config.application_name:
                set_user_agent(http, self.__config.application_name)
            s = build(name, version, http=http, cache=self.__discovery_cache)
            self.__services[id] = s
            logger.debug("built %s service", id)
        return s

    def sheets_service(self) -> Resource:
        return self.get_service("sheets", "v4")


def connect_client(config: SheetsConfig|dict|None = None,
                   options: WriteOptions|None = None) -> SpreadsheetClient:
    """
    Convenience for the common case: build the sheets service from config
    (the environment if not given) and wrap it in a SpreadsheetClient for
    the configured spreadsheet.
    """
    c = (config if isinstance(config, SheetsConfig) else
         SheetsConfig.from_dict(config) if config is not None else
         SheetsConfig.from_env())
    if not c:
        raise ConfigurationError("A spreadsheet id is required")
    access = GWSAccess(c)
    return SpreadsheetClient(access.sheets_service(), c.spreadsheet_id, options)
