from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.sqlalchemy.model.models import TaskModel
from infrastructure.sqlalchemy.session.db import get_session, init_db


def _to_domain(task_model: TaskModel) -> Task:
    return Task(id=task_model.id, title=task_model.title, is_done=task_model.is_done)


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self) -> None:
        init_db()

    def save(self, task: Task) -> Task:
        session = get_session()
        try:
            if task.id is None:
                task_model = TaskModel(title=task.title, is_done=task.is_done)
                session.add(task_model)
                session.commit()
                task.id = task_model.id
            else:
                task_model = session.get(TaskModel, task.id)
                if task_model is None:
                    return task
                task_model.title = task.title
                task_model.is_done = task.is_done
                session.commit()
            return task
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get(self, task_id: int) -> Task | None:
        session = get_session()
        try:
            task_model = session.get(TaskModel, task_id)
            if task_model is None:
                return None
            return _to_domain(task_model)
        finally:
            session.close()

    def list(self) -> list[Task]:
        session = get_session()
        try:
            task_models = session.query(TaskModel).order_by(TaskModel.id).all()
            return [_to_domain(task_model) for task_model in task_models]
        finally:
            session.close()

    def delete(self, task_id: int) -> None:
        session = get_session()
        try:
            task_model = session.get(TaskModel, task_id)
            if task_model is None:
                return
            session.delete(task_model)
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
