import os

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository


def get_task_repository() -> TaskRepository:
    orm = os.getenv("ORM", "peewee").lower()

    if orm == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.task_repository import (
            SqlAlchemyTaskRepository,
        )

        return SqlAlchemyTaskRepository()
    # Default to Peewee
    from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository

    return PeeweeTaskRepository()


def init_storage() -> None:
    """Crea el esquema del backend configurado (se llama al arrancar el servicio)."""
    get_task_repository()


def get_create_task_use_case() -> CreateTaskUseCase:
    return CreateTaskUseCase(repository=get_task_repository())


def get_update_task_use_case() -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=get_task_repository())


def get_delete_task_use_case() -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=get_task_repository())


def get_list_tasks_use_case() -> ListTasksUseCase:
    return ListTasksUseCase(repository=get_task_repository())
