from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


class InMemoryTaskRepository(TaskRepository):
    def __init__(self) -> None:
        self._data: dict[int, Task] = {}
        self._next_id = 1

    def list(self) -> list[Task]:
        return [
            Task(id=t.id, title=t.title, is_done=t.is_done) for t in self._data.values()
        ]

    def save(self, task: Task) -> Task:
        if task.id is None:
            task.id = self._next_id
            self._next_id += 1
        self._data[task.id] = Task(id=task.id, title=task.title, is_done=task.is_done)
        return task

    def get(self, task_id: int) -> Task | None:
        stored = self._data.get(task_id)
        if stored is None:
            return None
        return Task(id=stored.id, title=stored.title, is_done=stored.is_done)

    def delete(self, task_id: int) -> None:
        self._data.pop(task_id, None)
