from pydantic import BaseModel, Field

from core.domain.models.task import Task


class TaskIn(BaseModel):
    """
    Cuerpo de POST/PUT. Un `id` presente en el cuerpo se acepta pero se ignora.
    """

    id: int | None = None
    title: str = ""
    is_done: bool = Field(default=False, alias="isDone")

    model_config = {"populate_by_name": True}


class TaskOut(BaseModel):
    """Representación JSON de una tarea: `{id, title, isDone}`."""

    id: int
    title: str
    is_done: bool = Field(alias="isDone")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_domain(cls, task: Task) -> "TaskOut":
        return cls(id=task.id, title=task.title, is_done=task.is_done)
