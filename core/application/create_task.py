import logging
from dataclasses import dataclass

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTaskCommand:
    title: str = ""
    is_done: bool = False


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTaskCommand) -> Task:
        # El id lo asigna el repositorio al insertar.
        task = self._repository.save(Task(id=None, title=cmd.title, is_done=cmd.is_done))
        logger.info(f"Tarea {task.id} creada")
        return task
