import logging
from sqlalchemy.orm import Session

from app.models.firefighter import Firefighter
from app.models.resource import Resource
from app.models.resource_request import ResourceRequest
from app.schemas.resource_request import (
    ResourceRequestOut, ResourceRequestCreateRequest, ResourceRequestUpdateRequest,
)
from app.services.resource_service import validate_resource
from app.utils.exceptions import (
    AppException, NotFoundException, InvalidArgumentException, ConflictException,
)
from app.utils.validation import (
    FieldValidationError, require_text, require_positive_digits, check_length,
)

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 50
DETAIL_MAX_LENGTH = 400
STATUS_MAX_LENGTH = 50
NAME_MAX_LENGTH = 50
PHONE_MAX_DIGITS = 9


def _serialize(s: ResourceRequest) -> dict:
    return ResourceRequestOut.model_validate(s).model_dump()


def validate_firefighter(db: Session, firefighter: Firefighter) -> None:
    """
    Phone must be positive, at most 9 digits and not used by any other
    firefighter; first name and both surnames required, max 50 characters.
    """
    try:
        require_positive_digits(firefighter.telefono, "telefono", "Phone number", PHONE_MAX_DIGITS)
        require_text(firefighter.nombre, "nombre", "First name", NAME_MAX_LENGTH)
        require_text(firefighter.aPaterno, "aPaterno", "Paternal surname", NAME_MAX_LENGTH)
        require_text(firefighter.aMaterno, "aMaterno", "Maternal surname", NAME_MAX_LENGTH)
    except FieldValidationError as e:
        raise InvalidArgumentException(f"Error validating firefighter: {e}", field=e.field) from e

    q = db.query(Firefighter.id).filter(Firefighter.telefono == firefighter.telefono)
    if firefighter.id is not None:
        q = q.filter(Firefighter.id != firefighter.id)
    if q.first() is not None:
        raise ConflictException("Phone number already exists", field="telefono")


def _require_text_fields(request: ResourceRequest) -> None:
    require_text(request.titulo, "titulo", "Title", TITLE_MAX_LENGTH)
    require_text(request.detalle, "detalle", "Detail", DETAIL_MAX_LENGTH)
    require_text(request.estado, "estado", "Status", STATUS_MAX_LENGTH)


def validate_request(db: Session, request: ResourceRequest) -> None:
    try:
        _require_text_fields(request)
        if request.bombero is None:
            raise FieldValidationError("bomberoId", "Firefighter is required")
        if request.recurso is None:
            raise FieldValidationError("recursoId", "Resource is required")
    except FieldValidationError as e:
        raise InvalidArgumentException(f"Error validating resource request: {e}", field=e.field) from e

    validate_firefighter(db, request.bombero)
    validate_resource(request.recurso)


class ResourceRequestService:

    def get(self, db: Session, request_id: int) -> ResourceRequest:
        s = db.query(ResourceRequest).filter(ResourceRequest.id == request_id).first()
        if not s:
            raise NotFoundException("Resource request")
        return s

    def _get_firefighter(self, db: Session, firefighter_id: int) -> Firefighter:
        f = db.query(Firefighter).filter(Firefighter.id == firefighter_id).first()
        if not f:
            raise NotFoundException("Firefighter")
        return f

    def _get_resource(self, db: Session, resource_id: int) -> Resource:
        r = db.query(Resource).filter(Resource.id == resource_id).first()
        if not r:
            raise NotFoundException("Resource")
        return r

    def find_all(self, db: Session) -> list[dict]:
        items = db.query(ResourceRequest).order_by(ResourceRequest.id).all()
        return [_serialize(s) for s in items]

    def find_by_id(self, db: Session, request_id: int) -> dict:
        return _serialize(self.get(db, request_id))

    def save(self, db: Session, data: ResourceRequestCreateRequest) -> dict:
        try:
            s = ResourceRequest(
                titulo=data.titulo,
                detalle=data.detalle,
                estado=data.estado,
                bombero=self._get_firefighter(db, data.bomberoId) if data.bomberoId is not None else None,
                recurso=self._get_resource(db, data.recursoId) if data.recursoId is not None else None,
            )
            validate_request(db, s)
            db.add(s)
            db.flush()
        except AppException:
            db.rollback()
            raise
        db.commit()
        db.refresh(s)
        logger.info(f"Created resource request id={s.id} titulo={s.titulo!r}")
        return _serialize(s)

    def update(self, db: Session, request_id: int, data: ResourceRequestUpdateRequest) -> dict:
        s = self.get(db, request_id)
        try:
            self._apply_update(db, s, data)
            if data.bomberoId is not None:
                validate_firefighter(db, s.bombero)
            if data.recursoId is not None:
                validate_resource(s.recurso)
        except AppException:
            db.rollback()
            raise
        db.commit()
        db.refresh(s)
        logger.info(f"Updated resource request id={s.id}")
        return _serialize(s)

    def _apply_update(self, db: Session, s: ResourceRequest, data: ResourceRequestUpdateRequest) -> None:
        try:
            if data.titulo is not None:
                s.titulo = check_length(data.titulo, "titulo", "Title", TITLE_MAX_LENGTH)
            if data.detalle is not None:
                s.detalle = check_length(data.detalle, "detalle", "Detail", DETAIL_MAX_LENGTH)
            if data.estado is not None:
                s.estado = check_length(data.estado, "estado", "Status", STATUS_MAX_LENGTH)
            _require_text_fields(s)
        except FieldValidationError as e:
            raise InvalidArgumentException(f"Error updating resource request: {e}", field=e.field) from e

        if data.bomberoId is not None:
            s.bombero = self._get_firefighter(db, data.bomberoId)
        if data.recursoId is not None:
            s.recurso = self._get_resource(db, data.recursoId)

    def delete(self, db: Session, request_id: int) -> None:
        s = self.get(db, request_id)
        db.delete(s)
        db.commit()
        logger.info(f"Deleted resource request id={request_id}")

    # ─── Assignments ──────────────────────────────────────────────────────────
    def assign_resource(self, db: Session, request_id: int, resource_id: int) -> dict:
        s = self.get(db, request_id)
        s.recurso = self._get_resource(db, resource_id)
        db.commit()
        db.refresh(s)
        logger.info(f"Assigned resource {resource_id} to resource request {request_id}")
        return _serialize(s)

    def assign_firefighter(self, db: Session, request_id: int, firefighter_id: int) -> dict:
        s = self.get(db, request_id)
        s.bombero = self._get_firefighter(db, firefighter_id)
        db.commit()
        db.refresh(s)
        logger.info(f"Assigned firefighter {firefighter_id} to resource request {request_id}")
        return _serialize(s)


resource_request_service = ResourceRequestService()
