import pytest

from app.services import resource_service as resource_service_module
from app.services import vehicle_service as vehicle_service_module

PREFIX = "/api-recursos/v1"


def _resource_payload(**overrides) -> dict:
    data = {
        "nombre": "Botiquín",
        "cantidad": 10,
        "estado": "Disponible",
        "tipoRecurso": {"nombre": "Rescate"},
    }
    data.update(overrides)
    return data


def _vehicle_payload(**overrides) -> dict:
    data = {
        "marca": "Toyota",
        "modelo": "Hilux",
        "patente": "AB1234",
        "conductor": "Juan Pérez",
        "estado": "Operativo",
        "tipoVehiculo": {"nombre": "Camioneta"},
    }
    data.update(overrides)
    return data


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.parametrize("collection", [
    "recursos", "vehiculos", "tipos-recursos", "tipos-vehiculos", "solicitudes-recursos",
])
def test_empty_collections_return_204(client, collection):
    resp = client.get(f"{PREFIX}/{collection}")
    assert resp.status_code == 204
    assert resp.content == b""


@pytest.mark.parametrize("collection", [
    "recursos", "vehiculos", "tipos-recursos", "tipos-vehiculos", "solicitudes-recursos",
])
def test_unknown_id_returns_404(client, collection):
    assert client.get(f"{PREFIX}/{collection}/99999").status_code == 404
    assert client.put(f"{PREFIX}/{collection}/99999", json={}).status_code == 404
    resp = client.delete(f"{PREFIX}/{collection}/99999")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "NOT_FOUND"


def test_resource_crud_flow(client):
    resp = client.post(f"{PREFIX}/recursos", json=_resource_payload())
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Resource created successfully"
    resource_id = body["data"]["id"]
    assert body["data"]["tipoRecurso"]["id"] is not None

    resp = client.get(f"{PREFIX}/recursos")
    assert resp.status_code == 200
    assert [r["id"] for r in resp.json()["data"]] == [resource_id]

    resp = client.put(f"{PREFIX}/recursos/{resource_id}", json={"cantidad": 25})
    assert resp.status_code == 200
    assert resp.json()["data"]["cantidad"] == 25

    resp = client.delete(f"{PREFIX}/recursos/{resource_id}")
    assert resp.status_code == 200
    assert client.get(f"{PREFIX}/recursos/{resource_id}").status_code == 404


def test_resource_validation_is_400(client):
    resp = client.post(f"{PREFIX}/recursos", json=_resource_payload(cantidad=0))
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["error"]["code"] == "INVALID_ARGUMENT"
    assert body["error"]["field"] == "cantidad"


def test_malformed_payload_is_422(client):
    resp = client.post(f"{PREFIX}/recursos", json=_resource_payload(cantidad="muchos"))
    assert resp.status_code == 422
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"
    assert resp.json()["error"]["field"] == "cantidad"


def test_assign_type_to_missing_resource_is_404(client):
    type_id = client.post(f"{PREFIX}/tipos-recursos", json={"nombre": "Rescate"}).json()["data"]["id"]
    resp = client.post(f"{PREFIX}/recursos/99999/asignar-tipo-recurso/{type_id}")
    assert resp.status_code == 404
    assert resp.json()["message"] == "Resource not found"


def test_assign_type_to_resource(client):
    resource_id = client.post(f"{PREFIX}/recursos", json=_resource_payload()).json()["data"]["id"]
    type_id = client.post(f"{PREFIX}/tipos-recursos", json={"nombre": "Extinción"}).json()["data"]["id"]

    resp = client.post(f"{PREFIX}/recursos/{resource_id}/asignar-tipo-recurso/{type_id}")
    assert resp.status_code == 200
    assert resp.json()["data"]["tipoRecurso"]["id"] == type_id

    resp = client.post(f"{PREFIX}/recursos/{resource_id}/assign-tipo-recurso/{type_id}")
    assert resp.status_code == 200


def test_duplicate_plate_is_409(client):
    assert client.post(f"{PREFIX}/vehiculos", json=_vehicle_payload()).status_code == 201
    resp = client.post(f"{PREFIX}/vehiculos", json=_vehicle_payload())
    assert resp.status_code == 409
    assert resp.json()["error"]["code"] == "CONFLICT"
    assert client.get(f"{PREFIX}/vehiculos").json()["data"][0]["patente"] == "AB1234"


def test_duplicate_plate_rejected_by_storage_is_409(client, monkeypatch):
    assert client.post(f"{PREFIX}/vehiculos", json=_vehicle_payload()).status_code == 201
    monkeypatch.setattr(vehicle_service_module, "plate_exists", lambda *_args, **_kwargs: False)

    resp = client.post(f"{PREFIX}/vehiculos", json=_vehicle_payload(tipoVehiculo={"nombre": "Ambulancia"}))
    assert resp.status_code == 409
    assert resp.json()["error"]["code"] == "DUPLICATE_ENTRY"
    assert len(client.get(f"{PREFIX}/vehiculos").json()["data"]) == 1
    types = client.get(f"{PREFIX}/tipos-vehiculos").json()["data"]
    assert [t["nombre"] for t in types] == ["Camioneta"]


def test_vehicle_type_assignment(client):
    vehicle_id = client.post(f"{PREFIX}/vehiculos", json=_vehicle_payload()).json()["data"]["id"]
    type_id = client.post(f"{PREFIX}/tipos-vehiculos", json={"nombre": "Bomba"}).json()["data"]["id"]

    resp = client.post(f"{PREFIX}/vehiculos/{vehicle_id}/asignar-tipo-vehiculo/{type_id}")
    assert resp.status_code == 200
    assert resp.json()["data"]["tipoVehiculo"]["nombre"] == "Bomba"
    assert client.post(f"{PREFIX}/vehiculos/{vehicle_id}/asignar-tipo-vehiculo/999").status_code == 404


def test_category_in_use_cannot_be_deleted(client):
    resource = client.post(f"{PREFIX}/recursos", json=_resource_payload()).json()["data"]
    resp = client.delete(f"{PREFIX}/tipos-recursos/{resource['tipoRecurso']['id']}")
    assert resp.status_code == 409


def test_resource_request_flow(client, firefighter):
    resource_id = client.post(f"{PREFIX}/recursos", json=_resource_payload()).json()["data"]["id"]
    payload = {
        "titulo": "Reposición",
        "detalle": "Botiquines para la segunda compañía",
        "estado": "Pendiente",
        "bomberoId": firefighter.id,
        "recursoId": resource_id,
    }
    resp = client.post(f"{PREFIX}/solicitudes-recursos", json=payload)
    assert resp.status_code == 201
    request_id = resp.json()["data"]["id"]

    resp = client.put(f"{PREFIX}/solicitudes-recursos/{request_id}", json={"titulo": "x" * 51})
    assert resp.status_code == 400
    assert client.get(f"{PREFIX}/solicitudes-recursos/{request_id}").json()["data"]["titulo"] == "Reposición"

    resp = client.post(f"{PREFIX}/solicitudes-recursos/{request_id}/asignar-bombero/{firefighter.id}")
    assert resp.status_code == 200
    resp = client.post(f"{PREFIX}/solicitudes-recursos/{request_id}/asignar-recurso/999")
    assert resp.status_code == 404

    resp = client.delete(f"{PREFIX}/recursos/{resource_id}")
    assert resp.status_code == 409


def test_unexpected_error_is_500_without_details(session_factory, monkeypatch):
    from fastapi.testclient import TestClient
    from app.database import get_db
    from app.main import create_app

    def _boom(*_args, **_kwargs):
        raise RuntimeError("database exploded")

    monkeypatch.setattr(resource_service_module.resource_service, "find_all", _boom)
    application = create_app()

    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    application.dependency_overrides[get_db] = _get_db
    resp = TestClient(application, raise_server_exceptions=False).get(f"{PREFIX}/recursos")
    assert resp.status_code == 500
    assert "exploded" not in resp.text
    assert resp.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"
