import logging
from dataclasses import dataclass

from core.domain.errors.task_errors import TaskNotFoundError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateTaskCommand:
    title: str = ""
    is_done: bool = False


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: int, cmd: UpdateTaskCommand) -> Task:
        """
        Reemplaza título y estado de una tarea existente. El id nunca cambia.

        Raises:
            TaskNotFoundError: si no existe ninguna tarea con ese id.
        """
        task = self._repository.get(task_id)
        if task is None:
            logger.warning(f"Update de tarea inexistente {task_id}")
            raise TaskNotFoundError(task_id)

        task.title = cmd.title
        task.is_done = cmd.is_done

        self._repository.save(task)
        logger.info(f"Tarea {task_id} actualizada (is_done={task.is_done})")
        return task
