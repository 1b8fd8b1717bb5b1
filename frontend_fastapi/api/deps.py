import os

from dotenv import load_dotenv

from frontend_fastapi.services.task_api_client import TaskApiClient
from frontend_fastapi.state.task_list import TaskListState

load_dotenv()

_state: TaskListState | None = None


def get_api_base_url() -> str:
    return os.getenv("TASKS_API_URL", "http://localhost:8000/")


def task_list_state() -> TaskListState:
    """
    Estado de la lista de tareas del cliente (Singleton por proceso).
    """
    global _state
    if _state is None:
        _state = TaskListState(TaskApiClient(base_url=get_api_base_url()))
    return _state
