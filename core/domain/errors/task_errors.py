class TaskNotFoundError(ValueError):
    """La tarea solicitada no existe en el repositorio."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Tarea con id {task_id} no encontrada")
        self.task_id = task_id
