import logging
from sqlalchemy.orm import Session

from app.models.resource import Resource
from app.models.resource_request import ResourceRequest
from app.models.resource_type import ResourceType
from app.schemas.resource import ResourceOut, ResourceCreateRequest, ResourceUpdateRequest
from app.services.category_service import resource_type_service
from app.utils.exceptions import (
    AppException, NotFoundException, InvalidArgumentException, ConflictException,
)
from app.utils.validation import (
    FieldValidationError, require_text, require_positive_digits, check_length, check_digits,
)

logger = logging.getLogger(__name__)

TEXT_MAX_LENGTH = 50
QUANTITY_MAX_DIGITS = 9


def _serialize(r: Resource) -> dict:
    return ResourceOut.model_validate(r).model_dump()


def validate_resource(resource: Resource) -> None:
    """
    The single Resource invariant, shared with resource requests.

    cantidad > 0 with at most 9 digits; nombre and estado required, max 50
    characters; tipoRecurso required and itself a valid category.
    """
    try:
        require_positive_digits(resource.cantidad, "cantidad", "Quantity", QUANTITY_MAX_DIGITS)
        require_text(resource.nombre, "nombre", "Resource name", TEXT_MAX_LENGTH)
        require_text(resource.estado, "estado", "Resource status", TEXT_MAX_LENGTH)
        if resource.tipoRecurso is None:
            raise FieldValidationError("tipoRecurso", "Resource type is required")
        resource_type_service.validate(resource.tipoRecurso)
    except FieldValidationError as e:
        raise InvalidArgumentException(f"Error validating resource: {e}", field=e.field) from e
    except InvalidArgumentException as e:
        raise InvalidArgumentException(f"Error validating resource: {e.message}", field=e.field) from e


class ResourceService:

    def get(self, db: Session, resource_id: int) -> Resource:
        r = db.query(Resource).filter(Resource.id == resource_id).first()
        if not r:
            raise NotFoundException("Resource")
        return r

    def find_all(self, db: Session) -> list[dict]:
        return [_serialize(r) for r in db.query(Resource).order_by(Resource.id).all()]

    def find_by_id(self, db: Session, resource_id: int) -> dict:
        return _serialize(self.get(db, resource_id))

    def save(self, db: Session, data: ResourceCreateRequest) -> dict:
        try:
            tipo = resource_type_service.resolve(db, data.tipoRecurso)
            r = Resource(
                nombre=data.nombre,
                cantidad=data.cantidad,
                estado=data.estado,
                tipoRecurso=tipo,
            )
            validate_resource(r)
            db.add(r)
            db.flush()
        except AppException:
            db.rollback()
            raise
        db.commit()
        db.refresh(r)
        logger.info(f"Created resource id={r.id} nombre={r.nombre!r}")
        return _serialize(r)

    def update(self, db: Session, resource_id: int, data: ResourceUpdateRequest) -> dict:
        r = self.get(db, resource_id)
        try:
            self._apply_update(db, r, data)
            validate_resource(r)
        except AppException:
            # Discard the partial merge so the stored record stays as it was
            db.rollback()
            raise
        db.commit()
        db.refresh(r)
        logger.info(f"Updated resource id={r.id}")
        return _serialize(r)

    def _apply_update(self, db: Session, r: Resource, data: ResourceUpdateRequest) -> None:
        try:
            if data.tipoRecurso is not None:
                r.tipoRecurso = resource_type_service.resolve(db, data.tipoRecurso)
            if data.nombre is not None:
                r.nombre = check_length(data.nombre, "nombre", "Resource name", TEXT_MAX_LENGTH)
            if data.cantidad:
                r.cantidad = check_digits(data.cantidad, "cantidad", "Quantity", QUANTITY_MAX_DIGITS)
            if data.estado is not None:
                r.estado = check_length(data.estado, "estado", "Resource status", TEXT_MAX_LENGTH)
        except FieldValidationError as e:
            raise InvalidArgumentException(f"Error updating resource: {e}", field=e.field) from e

    def delete(self, db: Session, resource_id: int) -> None:
        r = self.get(db, resource_id)
        if db.query(ResourceRequest).filter(ResourceRequest.recursoId == resource_id).first():
            raise ConflictException("Resource is referenced by a resource request and cannot be deleted")
        db.delete(r)
        db.commit()
        logger.info(f"Deleted resource id={resource_id}")

    def assign_resource_type(self, db: Session, resource_id: int, type_id: int) -> dict:
        r = self.get(db, resource_id)
        tipo = db.query(ResourceType).filter(ResourceType.id == type_id).first()
        if not tipo:
            raise NotFoundException("Resource type")
        r.tipoRecurso = tipo
        db.commit()
        db.refresh(r)
        logger.info(f"Assigned resource type {type_id} to resource {resource_id}")
        return _serialize(r)


resource_service = ResourceService()
