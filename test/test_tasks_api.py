"""
Tests del contrato HTTP del Task Store Service.
Las dependencias de los casos de uso se sustituyen por un repositorio en memoria.
"""

import pytest
from fastapi.testclient import TestClient

from backend_fastapi.api import deps
from backend_fastapi.main import app
from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from fakes import InMemoryTaskRepository


@pytest.fixture
def repo():
    return InMemoryTaskRepository()


@pytest.fixture
def client(repo):
    app.dependency_overrides[deps.create_task_use_case] = lambda: CreateTaskUseCase(repo)
    app.dependency_overrides[deps.list_tasks_use_case] = lambda: ListTasksUseCase(repo)
    app.dependency_overrides[deps.update_task_use_case] = lambda: UpdateTaskUseCase(repo)
    app.dependency_overrides[deps.delete_task_use_case] = lambda: DeleteTaskUseCase(repo)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_list_vacio(client):
    response = client.get("/tasks")

    assert response.status_code == 200
    assert response.json() == []


def test_create_devuelve_201_con_location(client):
    response = client.post("/tasks", json={"title": "Buy milk", "isDone": False})

    assert response.status_code == 201
    assert response.json() == {"id": 1, "title": "Buy milk", "isDone": False}
    assert response.headers["location"] == "/tasks/1"


def test_create_ignora_id_del_cuerpo(client):
    response = client.post("/tasks", json={"id": 99, "title": "x", "isDone": True})

    assert response.json()["id"] == 1
    assert client.get("/tasks").json() == [{"id": 1, "title": "x", "isDone": True}]


def test_create_con_valores_por_defecto(client):
    response = client.post("/tasks", json={})

    assert response.status_code == 201
    assert response.json() == {"id": 1, "title": "", "isDone": False}


def test_list_contiene_lo_creado_con_el_mismo_id(client):
    created = client.post("/tasks", json={"title": "a", "isDone": False}).json()

    listed = client.get("/tasks").json()

    assert created in listed


def test_dos_creates_dan_ids_distintos(client):
    first = client.post("/tasks", json={"title": "a"}).json()
    second = client.post("/tasks", json={"title": "b"}).json()

    assert first["id"] != second["id"]


def test_update_reemplaza_titulo_y_estado(client):
    client.post("/tasks", json={"title": "a", "isDone": False})

    response = client.put("/tasks/1", json={"id": 7, "title": "b", "isDone": True})

    assert response.status_code == 204
    assert response.content == b""
    assert client.get("/tasks").json() == [{"id": 1, "title": "b", "isDone": True}]


def test_update_inexistente_404_sin_cambios(client):
    client.post("/tasks", json={"title": "a"})
    before = client.get("/tasks").json()

    response = client.put("/tasks/42", json={"title": "x", "isDone": True})

    assert response.status_code == 404
    assert response.content == b""
    assert client.get("/tasks").json() == before


def test_delete_y_delete_repetido(client):
    client.post("/tasks", json={"title": "a"})

    first = client.delete("/tasks/1")
    second = client.delete("/tasks/1")

    assert first.status_code == 204
    assert client.get("/tasks").json() == []
    assert second.status_code == 404
    assert second.content == b""


def test_cuerpo_invalido_422(client):
    response = client.post("/tasks", json={"title": "a", "isDone": "quizás"})

    assert response.status_code == 422


def test_escenario_completo(client):
    created = client.post("/tasks", json={"title": "Buy milk", "isDone": False})
    assert created.status_code == 201
    assert created.json() == {"id": 1, "title": "Buy milk", "isDone": False}

    assert client.get("/tasks").json() == [{"id": 1, "title": "Buy milk", "isDone": False}]

    assert client.put("/tasks/1", json={"title": "Buy milk", "isDone": True}).status_code == 204
    assert client.get("/tasks").json()[0]["isDone"] is True

    assert client.delete("/tasks/1").status_code == 204
    assert client.get("/tasks").json() == []
