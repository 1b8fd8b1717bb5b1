from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from frontend_fastapi.api.deps import task_list_state
from frontend_fastapi.state.task_list import TaskListState

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "templates"))

router = APIRouter(tags=["pages"])


def _back_home() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", response_class=HTMLResponse, summary="Lista de tareas")
def index(request: Request, state: TaskListState = Depends(task_list_state)):
    state.load()
    return templates.TemplateResponse(
        request,
        "index.html",
        {"tasks": state.tasks, "error": state.last_error},
    )


@router.post("/add", summary="Añadir una tarea")
def add_task(
    title: str = Form(""),
    state: TaskListState = Depends(task_list_state),
) -> RedirectResponse:
    state.add(title)
    return _back_home()


@router.post("/tasks/{task_id}/toggle", summary="Marcar/desmarcar una tarea")
def toggle_task(
    task_id: int,
    state: TaskListState = Depends(task_list_state),
) -> RedirectResponse:
    state.toggle(task_id)
    return _back_home()


@router.post("/tasks/{task_id}/delete", summary="Eliminar una tarea")
def delete_task(
    task_id: int,
    state: TaskListState = Depends(task_list_state),
) -> RedirectResponse:
    state.delete(task_id)
    return _back_home()
