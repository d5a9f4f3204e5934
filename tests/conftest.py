"""Wspólne fixtures testów apiglot."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest
import requests

from data_model.config import ApiglotConfig
from data_model.project import ProjectInfo

_ENV_VARS = (
    "APIGLOT_PROJECT_ID",
    "APIGLOT_API_KEY",
    "APIGLOT_HOST",
    "APIGLOT_PAGES_DIR",
    "APIGLOT_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Testy nie mogą widzieć zmiennych APIGLOT_* z powłoki."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def make_response(
    status: int = 200,
    data=None,
    content_type: str = "application/json",
    reason: str = "OK",
) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    response.headers["Content-Type"] = content_type
    response.encoding = "utf-8"
    body = json.dumps(data) if content_type.startswith("application/json") else (data or "")
    response._content = body.encode("utf-8")
    return response


@pytest.fixture
def fake_session():
    """requests.Session z podmienioną metodą request."""
    session = MagicMock(spec=requests.Session)
    session.request.return_value = make_response(data={})
    return session


@pytest.fixture
def project_payload() -> dict:
    """Odpowiedź GET /projects/<id>/info."""
    return {
        "name": "Docs",
        "source_language": {"id": 1, "code": "en", "name": "English"},
        "target_languages": [
            {"id": 2, "code": "pt-BR", "name": "Portuguese (Brazil)"},
            {"id": 3, "code": "pl", "name": "Polish"},
        ],
    }


@pytest.fixture
def project_info(project_payload) -> ProjectInfo:
    return ProjectInfo.from_dict(project_payload)


@pytest.fixture
def config() -> ApiglotConfig:
    return ApiglotConfig(
        project_id="42",
        api_key="sk_test_123456",
        project_info=ProjectInfo.from_dict({
            "projectName": "Docs",
            "sourceLanguage": {"code": "en", "name": "English"},
            "namespaces": ["common", "home"],
        }),
    )
