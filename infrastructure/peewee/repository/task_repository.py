from typing import List

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.session.db import db, init_db


def _to_domain(model: TaskModel) -> Task:
    return Task(id=model.id, title=model.title, is_done=model.is_done)


class PeeweeTaskRepository(TaskRepository):
    def __init__(self):
        # Sin migraciones: la tabla se crea al construir el repositorio.
        init_db()

    def save(self, task: Task) -> Task:
        with db.atomic():
            if task.id is None:
                created = TaskModel.create(title=task.title, is_done=task.is_done)
                task.id = created.id
            else:
                (
                    TaskModel.update(title=task.title, is_done=task.is_done)
                    .where(TaskModel.id == task.id)
                    .execute()
                )
        return task

    def get(self, task_id: int) -> Task | None:
        try:
            return _to_domain(TaskModel.get(TaskModel.id == task_id))
        except TaskModel.DoesNotExist:
            return None

    def list(self) -> List[Task]:
        return [_to_domain(t) for t in TaskModel.select().order_by(TaskModel.id)]

    def delete(self, task_id: int) -> None:
        TaskModel.delete().where(TaskModel.id == task_id).execute()
