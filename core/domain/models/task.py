from dataclasses import dataclass


@dataclass(slots=True)
class Task:
    id: int | None
    title: str = ""
    is_done: bool = False
