"""
Estado local de la lista de tareas del cliente.

Copia en memoria de lo que hay en el servidor, mutada solo a través de las
acciones `load`, `add`, `toggle` y `delete`. Cada acción hace una llamada al
servicio; si falla, el error queda en `last_error` y la lista local sigue las
reglas de cada acción (toggle no se revierte, delete borra igualmente).
"""

import logging
import threading

from core.domain.models.task import Task
from frontend_fastapi.services.task_api_client import TaskApiClient, TaskApiError

logger = logging.getLogger(__name__)


class TaskListState:
    def __init__(self, api: TaskApiClient) -> None:
        self._api = api
        self._tasks: list[Task] = []
        self._loaded = False
        # Una acción a la vez sobre la lista local
        self._lock = threading.Lock()
        self.last_error: str | None = None

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    @property
    def loaded(self) -> bool:
        return self._loaded

    def _find(self, task_id: int) -> Task | None:
        return next((t for t in self._tasks if t.id == task_id), None)

    def load(self) -> None:
        """Trae la lista completa del servidor. Solo la primera vez."""
        with self._lock:
            if self._loaded:
                return
            self.last_error = None
            try:
                self._tasks = self._api.get_tasks()
                self._loaded = True
                logger.info(f"📋 Cargadas {len(self._tasks)} tareas")
            except TaskApiError as e:
                self.last_error = f"No se pudieron cargar las tareas: {e}"
                logger.error(self.last_error)

    def add(self, title: str) -> Task | None:
        """
        Crea una tarea con `is_done=False` y la añade al final de la lista.

        Un título vacío (o solo espacios) se ignora sin error.

        Returns:
            La tarea creada, o None si no se creó.
        """
        with self._lock:
            self.last_error = None
            title = title.strip()
            if not title:
                return None
            try:
                created = self._api.add_task(Task(id=None, title=title, is_done=False))
            except TaskApiError as e:
                self.last_error = f"No se pudo crear la tarea: {e}"
                logger.error(self.last_error)
                return None
            self._tasks.append(created)
            return created

    def toggle(self, task_id: int) -> None:
        """Invierte `is_done` en local y envía la tarea completa. Sin rollback."""
        with self._lock:
            self.last_error = None
            task = self._find(task_id)
            if task is None:
                return
            task.is_done = not task.is_done
            try:
                self._api.update_task(task)
            except TaskApiError as e:
                self.last_error = f"No se pudo actualizar la tarea {task_id}: {e}"
                logger.error(self.last_error)

    def delete(self, task_id: int) -> None:
        """Pide el borrado y quita la tarea de la lista local pase lo que pase."""
        with self._lock:
            self.last_error = None
            try:
                self._api.delete_task(task_id)
            except TaskApiError as e:
                self.last_error = f"No se pudo eliminar la tarea {task_id}: {e}"
                logger.error(self.last_error)
            finally:
                self._tasks = [t for t in self._tasks if t.id != task_id]
