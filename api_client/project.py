"""api_client/project.py — zapytania o projekt i przestrzenie nazw tłumaczeń."""

from __future__ import annotations

from typing import Any

from data_model.config import ApiglotConfig
from data_model.project import ProjectInfo

from .client import ApiglotClient


def get_project_info(client: ApiglotClient, config: ApiglotConfig) -> ProjectInfo:
    """GET /projects/<projectId>/info — języki projektu (z id) dla tłumaczeń."""
    data = client.get(f"/projects/{config.project_id}/info")
    return ProjectInfo.from_dict(data)


def get_project_info_from_remote(
    client: ApiglotClient,
    project_id: str | None = None,
    api_key: str | None = None,
) -> dict[str, Any]:
    """
    GET /v1/<projectId>/info — opis projektu zapisywany w apiglot.config.json.

    Brakujące project_id / api_key są brane z konfiguracji klienta.
    Zwraca surowy słownik (zapisywany bez zmian jako projectInfo).
    """
    pid = project_id or client.config.project_id
    key = api_key or client.config.api_key
    return client.get(f"/v1/{pid}/info", bearer_token=key)


def fetch_namespace(client: ApiglotClient, config: ApiglotConfig, namespace: str) -> dict[str, Any]:
    """Tłumaczenia przestrzeni nazw w języku źródłowym projektu."""
    info = config.project_info
    if info is None or info.source_language is None:
        raise ValueError("Brak projectInfo.sourceLanguage w konfiguracji — uruchom `apiglot init`.")
    return client.get(
        f"v1/{config.project_id}/{info.source_language.code}/{namespace}",
        bearer_token=config.api_key,
    )


def request_translation(client: ApiglotClient, config: ApiglotConfig, payload: dict[str, Any]) -> str:
    """POST /projects/<projectId>/translate — zwraca result.llm_output."""
    response = client.post(f"/projects/{config.project_id}/translate", payload)
    try:
        return response["result"]["llm_output"]
    except (KeyError, TypeError) as e:
        raise ValueError(f"Nieoczekiwana odpowiedź API tłumaczenia: {response!r}") from e
