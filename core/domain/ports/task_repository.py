from abc import ABC, abstractmethod

from core.domain.models.task import Task


class TaskRepository(ABC):
    @abstractmethod
    def list(self) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def save(self, task: Task) -> Task:
        """Inserta la tarea si no tiene id (y se lo asigna); si lo tiene, la actualiza."""
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: int) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: int) -> None:
        raise NotImplementedError
