"""Smoke tests for the assembled application."""

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from backend.ponto.api import dependencies
from backend.ponto.config.loader import DEFAULT_CONFIG_ROOT
from backend.ponto.infra.logging import APP_LOGGER_NAME

pytestmark = [pytest.mark.api]

PROFILE = """\
environment: test
storage:
  backend: memory
  seed_employees:
    - id: emp-1
      name: Ana
      email: ana@ponto.local
      cpf: "1"
    - id: boss
      name: Chefe
      email: chefe@ponto.local
      cpf: "2"
      profile: ROLE_ADMIN
pagination:
  page_size: 2
logging:
  level: INFO
"""


def _clear_caches() -> None:
    dependencies.get_settings.cache_clear()
    dependencies._entry_service_singleton.cache_clear()
    dependencies._employee_service_singleton.cache_clear()


@pytest.fixture()
def app_factory(monkeypatch):
    monkeypatch.delenv("PONTO_PAGE_SIZE", raising=False)
    monkeypatch.delenv("PONTO_STORAGE_BACKEND", raising=False)
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    previous_level = app_logger.level

    from backend.ponto.main import create_app

    _clear_caches()

    def build(profile: str, config_dir) -> TestClient:
        monkeypatch.setenv("PONTO_CONFIG_PROFILE", profile)
        monkeypatch.setenv("PONTO_CONFIG_DIR", str(config_dir))
        return TestClient(create_app())

    yield build

    _clear_caches()
    app_logger.setLevel(previous_level)


@pytest.fixture()
def client(app_factory, tmp_path):
    (tmp_path / "test.yaml").write_text(PROFILE, encoding="utf-8")
    return app_factory("test", tmp_path)


def test_healthz_reports_loaded_settings(client):
    response = client.get("/api/healthz")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "environment": "test",
        "storageBackend": "memory",
        "pageSize": 2,
    }


def test_memory_backend_serves_entries_end_to_end(client):
    headers = {"X-User-Id": "emp-1"}
    admin = {"X-User-Id": "boss", "X-User-Profile": "ROLE_ADMIN"}

    first = client.post(
        "/api/lancamentos",
        json={
            "data": "2026-03-02T08:00:00",
            "tipo": "INICIO_TRABALHO",
            "funcionarioId": "emp-1",
        },
        headers=headers,
    )
    second = client.post(
        "/api/lancamentos",
        json={
            "data": "2026-03-02T12:00:00",
            "tipo": "INICIO_ALMOCO",
            "funcionarioId": "emp-1",
        },
        headers=headers,
    )
    entry_id = first.json()["data"]["id"]
    updated = client.put(
        f"/api/lancamentos/{entry_id}",
        json={
            "id": entry_id,
            "data": "2026-03-02T08:05:00",
            "tipo": "INICIO_TRABALHO",
            "funcionarioId": "emp-1",
        },
        headers=admin,
    )
    listed = client.get("/api/lancamentos/funcionario/emp-1", headers=headers)
    forbidden = client.delete(f"/api/lancamentos/{entry_id}", headers=headers)
    removed = client.delete(f"/api/lancamentos/{entry_id}", headers=admin)

    assert logging.getLogger(APP_LOGGER_NAME).level == logging.INFO
    assert first.status_code == 200
    assert second.status_code == 200
    assert updated.status_code == 200
    assert updated.json()["data"]["data"] == "2026-03-02T08:05:00"
    assert listed.json()["data"]["totalElements"] == 2
    assert listed.json()["data"]["size"] == 2
    assert forbidden.status_code == 403
    assert forbidden.json()["errors"] == ["Access denied: ROLE_ADMIN required"]
    assert removed.status_code == 200


def test_unknown_employee_is_still_rejected_on_memory_backend(client):
    response = client.post(
        "/api/lancamentos",
        json={
            "data": "2026-03-02T08:00:00",
            "tipo": "INICIO_TRABALHO",
            "funcionarioId": "x",
        },
        headers={"X-User-Id": "boss", "X-User-Profile": "ROLE_ADMIN"},
    )

    assert response.status_code == 400
    assert response.json()["errors"] == ["Employee not found."]


def test_shipped_test_profile_accepts_entries_for_seeded_employees(app_factory):
    client = app_factory("test", DEFAULT_CONFIG_ROOT)
    employee_id = "00000000-0000-0000-0000-0000000000e1"

    response = client.post(
        "/api/lancamentos",
        json={
            "data": "2026-03-02T08:00:00",
            "tipo": "INICIO_TRABALHO",
            "funcionarioId": employee_id,
        },
        headers={"X-User-Id": employee_id},
    )

    assert response.status_code == 200
    assert response.json()["data"]["funcionarioId"] == employee_id
