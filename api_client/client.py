"""
api_client/client.py — klient HTTP dla API Apiglot.

Jedna implementacja GET/POST współdzielona przez wszystkie komendy.
URL budowany jak w przeglądarkowym `new URL(path, host)` (urljoin):
  urljoin("https://api.apiglot.com/v1", "/projects/1/info") → .../projects/1/info
  urljoin("https://api.apiglot.com/v1", "v1/1/en/common")   → .../v1/1/en/common
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urljoin

import requests

from data_model.config import DEFAULT_HOST, ApiglotConfig


class ApiError(RuntimeError):
    """Błąd wywołania API (status HTTP != 2xx lub błąd sieci)."""

    def __init__(self, status: int | None, message: str) -> None:
        super().__init__(message)
        self.status = status


def _error_detail(response: requests.Response) -> str:
    content_type = response.headers.get("Content-Type", "")
    if content_type.startswith("application/json"):
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
    return response.reason or ""


class ApiglotClient:
    def __init__(self, config: ApiglotConfig, session: requests.Session | None = None) -> None:
        self.config = config
        self.session = session or requests.Session()

    def url(self, relative_path: str) -> str:
        return urljoin(self.config.host or DEFAULT_HOST, relative_path)

    def _headers(self, bearer_token: str | None) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = bearer_token or self.config.api_key
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _request(
        self,
        method: str,
        relative_path: str,
        body: Any = None,
        bearer_token: str | None = None,
    ) -> Any:
        url = self.url(relative_path)
        try:
            response = self.session.request(
                method,
                url,
                headers=self._headers(bearer_token),
                json=body,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise ApiError(None, f"API request failed: {e}") from e

        if not response.ok:
            raise ApiError(
                response.status_code,
                f"API request failed with status {response.status_code}: {_error_detail(response)}",
            )
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(response.status_code, f"API returned invalid JSON: {e}") from e

    def get(self, relative_path: str, bearer_token: str | None = None) -> Any:
        return self._request("GET", relative_path, bearer_token=bearer_token)

    def post(self, relative_path: str, body: Any) -> Any:
        return self._request("POST", relative_path, body=body)
