import json
from unittest.mock import MagicMock

import httplib2
import pytest
from googleapiclient.errors import HttpError


def _http_error(status: int = 403, message: str = "The caller does not have permission") -> HttpError:
    resp = httplib2.Response({"status": status})
    content = json.dumps({"error": {"code": status, "message": message}}).encode("utf-8")
    return HttpError(resp, content)


@pytest.fixture()
def http_error():
    """Factory for HttpError as raised by execute() on a failed request."""
    return _http_error


@pytest.fixture()
def service() -> MagicMock:
    """
    Stand-in for a built sheets v4 service.  Every values() call returns the
    same mock so tests can inspect values.get/update/append/clear directly.
    """
    s = MagicMock()
    values = s.spreadsheets.return_value.values.return_value
    values.get.return_value.execute.return_value = {}
    values.update.return_value.execute.return_value = {}
    values.append.return_value.execute.return_value = {}
    values.clear.return_value.execute.return_value = {}
    return s


@pytest.fixture()
def values(service: MagicMock) -> MagicMock:
    return service.spreadsheets.return_value.values.return_value


@pytest.fixture()
def authorized_user_file(tmp_path):
    path = tmp_path / "authorized_user.json"
    path.write_text(json.dumps({
        "type": "authorized_user",
        "client_id": "client-id.apps.googleusercontent.com",
        "client_secret": "client-secret",
        "refresh_token": "refresh-token",
    }), encoding="utf-8")
    return path
