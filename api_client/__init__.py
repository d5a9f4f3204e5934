"""
api_client — komunikacja z API Apiglot.

Publiczne API:
  ApiglotClient(config, session)                         .get / .post
  ApiError
  get_project_info(client, config)                       -> ProjectInfo
  get_project_info_from_remote(client, project_id, key)  -> dict
  fetch_namespace(client, config, namespace)             -> dict
  request_translation(client, config, payload)           -> str
"""

from .client import ApiError, ApiglotClient
from .project import (
    get_project_info,
    get_project_info_from_remote,
    fetch_namespace,
    request_translation,
)

__all__ = [
    "ApiError",
    "ApiglotClient",
    "get_project_info",
    "get_project_info_from_remote",
    "fetch_namespace",
    "request_translation",
]
