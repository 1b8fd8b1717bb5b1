from fastapi import APIRouter, Depends, Response, status

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    list_tasks_use_case,
    update_task_use_case,
)
from backend_fastapi.api.schemas.task import TaskIn, TaskOut
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.errors.task_errors import TaskNotFoundError

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get(
    "",
    response_model=list[TaskOut],
    summary="Listar todas las tareas",
)
def list_tasks(
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> list[TaskOut]:
    """
    Obtiene todas las tareas registradas, en orden de creación.
    """
    return [TaskOut.from_domain(task) for task in use_case.execute()]


@router.post(
    "",
    response_model=TaskOut,
    status_code=status.HTTP_201_CREATED,
    summary="Crear una nueva tarea",
)
def create_task(
    body: TaskIn,
    response: Response,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> TaskOut:
    """
    Crea una nueva tarea. El id lo asigna el servidor.

    - **title**: Título de la tarea (puede ser vacío).
    - **isDone**: Estado inicial (por defecto false).
    """
    task = use_case.execute(CreateTaskCommand(title=body.title, is_done=body.is_done))
    response.headers["Location"] = f"/tasks/{task.id}"
    return TaskOut.from_domain(task)


@router.put(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Reemplazar título y estado de una tarea",
)
def update_task(
    task_id: int,
    body: TaskIn,
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> Response:
    """
    Sobrescribe `title` e `isDone`. El id de la ruta manda sobre el del cuerpo.

    - **task_id**: id de la tarea a modificar.
    """
    try:
        use_case.execute(task_id, UpdateTaskCommand(title=body.title, is_done=body.is_done))
    except TaskNotFoundError:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Eliminar una tarea",
)
def delete_task(
    task_id: int,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> Response:
    """
    Elimina una tarea del sistema de forma permanente.

    - **task_id**: id de la tarea a eliminar.
    """
    try:
        use_case.execute(DeleteTaskCommand(id=task_id))
    except TaskNotFoundError:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
