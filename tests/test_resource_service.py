import pytest

from app.models.resource import Resource
from app.models.resource_request import ResourceRequest
from app.models.resource_type import ResourceType
from app.schemas.category import CategoryRef
from app.schemas.resource import ResourceCreateRequest, ResourceUpdateRequest
from app.services.resource_service import resource_service, validate_resource
from app.utils.exceptions import NotFoundException, InvalidArgumentException, ConflictException


def _body(**overrides) -> ResourceCreateRequest:
    data = {
        "nombre": "Botiquín",
        "cantidad": 10,
        "estado": "Disponible",
        "tipoRecurso": CategoryRef(nombre="Rescate"),
    }
    data.update(overrides)
    return ResourceCreateRequest(**data)


def test_save_creates_nested_type(db):
    saved = resource_service.save(db, _body())

    assert saved["id"] is not None
    assert saved["tipoRecurso"]["id"] is not None
    assert saved["tipoRecurso"]["nombre"] == "Rescate"
    assert db.query(ResourceType).count() == 1


def test_save_then_find_round_trip(db):
    saved = resource_service.save(db, _body())
    found = resource_service.find_by_id(db, saved["id"])
    assert found == saved
    assert {k: found[k] for k in ("nombre", "cantidad", "estado")} == {
        "nombre": "Botiquín", "cantidad": 10, "estado": "Disponible",
    }


def test_save_reuses_type_by_id(db, resource_type):
    resource_service.save(db, _body(tipoRecurso=CategoryRef(id=resource_type.id)))
    resource_service.save(db, _body(nombre="Hacha", tipoRecurso=CategoryRef(id=resource_type.id)))
    assert db.query(ResourceType).count() == 1


@pytest.mark.parametrize("overrides", [
    {"cantidad": 0},
    {"cantidad": -1},
    {"cantidad": 1000000000},
    {"cantidad": None},
    {"nombre": None},
    {"nombre": "x" * 51},
    {"estado": None},
    {"estado": "x" * 51},
    {"tipoRecurso": None},
    {"tipoRecurso": CategoryRef(nombre="x" * 51)},
])
def test_save_rejects_invalid_fields(db, overrides):
    with pytest.raises(InvalidArgumentException):
        resource_service.save(db, _body(**overrides))
    assert db.query(Resource).count() == 0
    # the nested type is rolled back with the resource
    assert db.query(ResourceType).count() == 0


@pytest.mark.parametrize("cantidad", [1, 999999999])
def test_save_accepts_quantity_bounds(db, cantidad):
    saved = resource_service.save(db, _body(cantidad=cantidad))
    assert saved["cantidad"] == cantidad


def test_save_with_unknown_type_id_is_not_found(db):
    with pytest.raises(NotFoundException):
        resource_service.save(db, _body(tipoRecurso=CategoryRef(id=77)))


def test_find_all_empty(db):
    assert resource_service.find_all(db) == []


def test_update_merges_only_given_fields(db, resource):
    updated = resource_service.update(db, resource.id, ResourceUpdateRequest(estado="En Proceso", cantidad=0))
    assert updated["estado"] == "En Proceso"
    assert updated["cantidad"] == 10
    assert updated["nombre"] == "Botiquín"


def test_update_replaces_type(db, resource):
    updated = resource_service.update(db, resource.id, ResourceUpdateRequest(tipoRecurso=CategoryRef(nombre="Extinción")))
    assert updated["tipoRecurso"]["nombre"] == "Extinción"


@pytest.mark.parametrize("body", [
    ResourceUpdateRequest(nombre="x" * 51),
    ResourceUpdateRequest(estado="x" * 51),
    ResourceUpdateRequest(cantidad=1234567890),
    ResourceUpdateRequest(cantidad=-5),
    ResourceUpdateRequest(nombre="  "),
])
def test_update_rejects_invalid_and_keeps_record(db, resource, body):
    with pytest.raises(InvalidArgumentException):
        resource_service.update(db, resource.id, body)

    stored = resource_service.find_by_id(db, resource.id)
    assert stored["nombre"] == "Botiquín"
    assert stored["cantidad"] == 10
    assert stored["estado"] == "Disponible"


def test_missing_id_raises_not_found(db):
    with pytest.raises(NotFoundException):
        resource_service.find_by_id(db, 99999)
    with pytest.raises(NotFoundException):
        resource_service.update(db, 99999, ResourceUpdateRequest(nombre="Hacha"))
    with pytest.raises(NotFoundException):
        resource_service.delete(db, 99999)


def test_delete(db, resource):
    resource_service.delete(db, resource.id)
    assert resource_service.find_all(db) == []


def test_delete_requested_resource_is_conflict(db, resource, firefighter):
    db.add(ResourceRequest(titulo="Reposición", detalle="Falta material", estado="Pendiente",
                           bombero=firefighter, recurso=resource))
    db.commit()
    with pytest.raises(ConflictException):
        resource_service.delete(db, resource.id)


def test_assign_resource_type(db, resource):
    other = ResourceType(nombre="Comunicaciones")
    db.add(other)
    db.commit()

    assigned = resource_service.assign_resource_type(db, resource.id, other.id)
    assert assigned["tipoRecurso"] == {"id": other.id, "nombre": "Comunicaciones"}


def test_assign_resource_type_missing_resource(db, resource_type):
    with pytest.raises(NotFoundException) as exc:
        resource_service.assign_resource_type(db, 99999, resource_type.id)
    assert exc.value.message == "Resource not found"


def test_assign_resource_type_missing_type(db, resource):
    with pytest.raises(NotFoundException) as exc:
        resource_service.assign_resource_type(db, resource.id, 99999)
    assert exc.value.message == "Resource type not found"


def test_validate_resource_prefixes_message():
    r = Resource(nombre="Hacha", cantidad=0, estado="Disponible", tipoRecurso=ResourceType(nombre="Rescate"))
    with pytest.raises(InvalidArgumentException) as exc:
        validate_resource(r)
    assert exc.value.message.startswith("Error validating resource:")
    assert exc.value.field == "cantidad"
