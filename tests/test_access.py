import json
from unittest.mock import MagicMock, patch

import google.auth.exceptions
import google.oauth2.credentials
import httplib2
import pytest

from sheetsvc import GWSAccess, SheetsConfig, ConfigurationError, SpreadsheetClient, connect_client

SHEETS_SCOPE = "https://www.googleapis.com/auth/spreadsheets"

def test_get_scope():
    assert(GWSAccess.get_scope("sheets") == SHEETS_SCOPE)
    assert(GWSAccess.get_scope("sheets-ro") == "https://www.googleapis.com/auth/spreadsheets.readonly")
    assert(GWSAccess.get_scope("https://www.googleapis.com/auth/drive.file") == "https://www.googleapis.com/auth/drive.file")
    assert(GWSAccess.get_scope("nope") == "")

def test_scopes_dedup_and_drop_unknown():
    a = GWSAccess(SheetsConfig(scopes=["sheets", "nope", SHEETS_SCOPE]))
    assert(a.scopes == [SHEETS_SCOPE])
    assert(not a)
    assert(str(a).startswith("Disconnected"))

def test_no_scopes():
    a = GWSAccess(SheetsConfig(scopes=["nope"]))
    with pytest.raises(ConfigurationError):
        a.connect()

def test_authorized_user_file(authorized_user_file):
    a = GWSAccess({'credentials': str(authorized_user_file)})
    assert(a.connect())
    assert(isinstance(a.creds, google.oauth2.credentials.Credentials))
    assert(a.creds.refresh_token == "refresh-token")
    assert(a.creds.scopes == [SHEETS_SCOPE])

def test_service_account_file(tmp_path):
    path = tmp_path / "sa.json"
    path.write_text(json.dumps({"type": "service_account", "client_email": "x@y.iam.gserviceaccount.com"}),
                    encoding="utf-8")
    fake = MagicMock()
    with patch("google.oauth2.service_account.Credentials.from_service_account_info",
               return_value=fake) as loader:
        a = GWSAccess(SheetsConfig(credentials_file=path))
        a.connect()
    assert(a.creds is fake)
    assert(loader.call_args.kwargs["scopes"] == [SHEETS_SCOPE])

def test_bad_credential_files(tmp_path):
    with pytest.raises(ConfigurationError):
        GWSAccess(SheetsConfig(credentials_file=tmp_path / "missing.json")).connect()

    garbage = tmp_path / "garbage.json"
    garbage.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        GWSAccess(SheetsConfig(credentials_file=garbage)).connect()

    # client secrets need an interactive flow, which isn't done here
    secrets = tmp_path / "client_secrets.json"
    secrets.write_text(json.dumps({"installed": {"client_id": "id"}}), encoding="utf-8")
    with pytest.raises(ConfigurationError):
        GWSAccess(SheetsConfig(credentials_file=secrets)).connect()

    incomplete = tmp_path / "incomplete.json"
    incomplete.write_text(json.dumps({"type": "authorized_user"}), encoding="utf-8")
    with pytest.raises(ConfigurationError):
        GWSAccess(SheetsConfig(credentials_file=incomplete)).connect()

def test_default_credentials():
    fake = MagicMock()
    with patch("google.auth.default", return_value=(fake, "project")) as default:
        a = GWSAccess()
        a.connect()
    assert(a.creds is fake)
    default.assert_called_once_with(scopes=[SHEETS_SCOPE])

    err = google.auth.exceptions.DefaultCredentialsError("none found")
    with patch("google.auth.default", side_effect=err):
        with pytest.raises(ConfigurationError):
            GWSAccess().connect()

def test_get_service_memoized(authorized_user_file):
    built = MagicMock()
    with patch("sheetsvc.access.build", return_value=built) as build:
        a = GWSAccess(SheetsConfig(credentials_file=authorized_user_file,
                                   application_name="SheetsViaPython"))
        s = a.sheets_service()
        assert(s is built)
        assert(a.get_service("sheets", "v4") is built)
    assert(build.call_count == 1)
    args, kwargs = build.call_args
    assert(args == ("sheets", "v4"))
    assert("credentials" not in kwargs)
    assert(kwargs["http"].credentials is a.creds)
    assert("sheets:v4" in a.services)

def _request_headers(authorized_user_file, application_name: str) -> dict:
    """
    Build the sheets service and send one request through its transport,
    returning the headers that reach httplib2.
    """
    with patch("sheetsvc.access.build", return_value=MagicMock()) as build:
        a = GWSAccess(SheetsConfig(credentials_file=authorized_user_file,
                                   application_name=application_name))
        a.sheets_service()
    # a current access token so no refresh is attempted
    a.creds.token = "access-token"
    http = build.call_args.kwargs["http"]
    ok = (httplib2.Response({"status": 200}), b"{}")
    with patch.object(httplib2.Http, "request", return_value=ok) as inner:
        http.request("https://sheets.googleapis.com/v4/spreadsheets/sheet-id/values/Sheet1", "GET")
    assert(inner.call_count == 1)
    return inner.call_args.kwargs["headers"]

def test_application_name_user_agent(authorized_user_file):
    headers = _request_headers(authorized_user_file, "SheetsViaPython")
    assert("SheetsViaPython" in headers["user-agent"])
    assert(headers["authorization"] == "Bearer access-token")

def test_no_application_name_leaves_user_agent(authorized_user_file):
    headers = _request_headers(authorized_user_file, "")
    assert("user-agent" not in headers)
    assert(headers["authorization"] == "Bearer access-token")

def test_connect_client(authorized_user_file):
    built = MagicMock()
    with patch("sheetsvc.access.build", return_value=built):
        c = connect_client({'credentials': str(authorized_user_file), 'spreadsheet_id': "sheet-id"})
    assert(isinstance(c, SpreadsheetClient))
    assert(c.service is built)
    assert(c.spreadsheet_id == "sheet-id")

def test_connect_client_needs_spreadsheet(monkeypatch, authorized_user_file):
    monkeypatch.setenv("GOOGLE_APPLICATION_CREDENTIALS", str(authorized_user_file))
    monkeypatch.delenv("SHEETS_SPREADSHEET_ID", raising=False)
    with pytest.raises(ConfigurationError):
        connect_client()
