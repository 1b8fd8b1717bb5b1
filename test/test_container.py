from infrastructure.container import get_list_tasks_use_case, get_task_repository
from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository
from infrastructure.sqlalchemy.repository.task_repository import SqlAlchemyTaskRepository


def test_peewee_por_defecto(monkeypatch):
    monkeypatch.delenv("ORM", raising=False)

    assert isinstance(get_task_repository(), PeeweeTaskRepository)


def test_sqlalchemy_por_variable_de_entorno(monkeypatch):
    monkeypatch.setenv("ORM", "SQLAlchemy")

    assert isinstance(get_task_repository(), SqlAlchemyTaskRepository)


def test_use_case_recibe_repositorio(monkeypatch):
    monkeypatch.setenv("ORM", "sqlalchemy")

    use_case = get_list_tasks_use_case()

    assert isinstance(use_case._repository, SqlAlchemyTaskRepository)
