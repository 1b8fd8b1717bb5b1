"""
Cliente HTTP del Task Store Service.

Traduce cada operación del cliente a una llamada REST y devuelve entidades de
dominio. Cualquier fallo (transporte o status no 2xx) se lanza como
`TaskApiError`, para que quien llama decida qué hacer con él.
"""

import logging
from typing import Any

import httpx

from core.domain.models.task import Task

logger = logging.getLogger(__name__)


class TaskApiError(Exception):
    """Fallo de una llamada al Task Store Service."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TaskApiNotFoundError(TaskApiError):
    """El servicio respondió 404 para la tarea pedida."""


def _to_payload(task: Task) -> dict[str, Any]:
    payload: dict[str, Any] = {"title": task.title, "isDone": task.is_done}
    if task.id is not None:
        payload["id"] = task.id
    return payload


def _from_payload(data: dict[str, Any]) -> Task:
    return Task(id=data["id"], title=data.get("title", ""), is_done=data.get("isDone", False))


class TaskApiClient:
    """
    Args:
        base_url: URL base del servicio, ej: "http://localhost:8000/".
        http:     Cliente httpx ya construido (para tests con MockTransport).
    """

    def __init__(self, base_url: str | None = None, http: httpx.Client | None = None) -> None:
        if http is None:
            if base_url is None:
                raise ValueError("Se necesita base_url o un httpx.Client")
            http = httpx.Client(base_url=base_url)
        self._http = http

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"✗ {method} {url} falló: {e}")
            raise TaskApiError(f"{method} {url} falló: {e}") from e

        if response.status_code == httpx.codes.NOT_FOUND:
            raise TaskApiNotFoundError(f"{method} {url}: no encontrada", status_code=404)
        if response.is_error:
            logger.error(f"✗ {method} {url} respondió {response.status_code}")
            raise TaskApiError(
                f"{method} {url} respondió {response.status_code}",
                status_code=response.status_code,
            )
        return response

    def get_tasks(self) -> list[Task]:
        response = self._request("GET", "tasks")
        return [_from_payload(item) for item in response.json()]

    def add_task(self, task: Task) -> Task:
        response = self._request("POST", "tasks", json=_to_payload(task))
        return _from_payload(response.json())

    def update_task(self, task: Task) -> None:
        self._request("PUT", f"tasks/{task.id}", json=_to_payload(task))

    def delete_task(self, task_id: int) -> None:
        self._request("DELETE", f"tasks/{task_id}")

    def close(self) -> None:
        self._http.close()
