import logging
from sqlalchemy.orm import Session

from app.models.vehicle import Vehicle
from app.models.vehicle_type import VehicleType
from app.schemas.vehicle import VehicleOut, VehicleCreateRequest, VehicleUpdateRequest
from app.services.category_service import vehicle_type_service
from app.utils.exceptions import (
    AppException, NotFoundException, InvalidArgumentException, ConflictException,
)
from app.utils.validation import FieldValidationError, require_text, check_length

logger = logging.getLogger(__name__)

TEXT_MAX_LENGTH = 50
PLATE_MAX_LENGTH = 6

# (attribute, label, max length) for every free-text column on a vehicle
_TEXT_FIELDS = (
    ("marca",     "Brand",   TEXT_MAX_LENGTH),
    ("modelo",    "Model",   TEXT_MAX_LENGTH),
    ("patente",   "Plate",   PLATE_MAX_LENGTH),
    ("conductor", "Driver",  TEXT_MAX_LENGTH),
    ("estado",    "Status",  TEXT_MAX_LENGTH),
)


def _serialize(v: Vehicle) -> dict:
    return VehicleOut.model_validate(v).model_dump()


def plate_exists(db: Session, patente: str, exclude_id: int | None = None) -> bool:
    """
    Fast-path uniqueness check. The UNIQUE constraint on `vehiculo.patente`
    is what actually holds under concurrent writes.
    """
    q = db.query(Vehicle.id).filter(Vehicle.patente == patente)
    if exclude_id is not None:
        q = q.filter(Vehicle.id != exclude_id)
    return q.first() is not None


def validate_vehicle(vehicle: Vehicle) -> None:
    try:
        for attr, label, max_length in _TEXT_FIELDS:
            require_text(getattr(vehicle, attr), attr, label, max_length)
        if vehicle.tipoVehiculo is None:
            raise FieldValidationError("tipoVehiculo", "Vehicle type is required")
        vehicle_type_service.validate(vehicle.tipoVehiculo)
    except FieldValidationError as e:
        raise InvalidArgumentException(f"Error validating vehicle: {e}", field=e.field) from e
    except InvalidArgumentException as e:
        raise InvalidArgumentException(f"Error validating vehicle: {e.message}", field=e.field) from e


class VehicleService:

    def get(self, db: Session, vehicle_id: int) -> Vehicle:
        v = db.query(Vehicle).filter(Vehicle.id == vehicle_id).first()
        if not v:
            raise NotFoundException("Vehicle")
        return v

    def find_all(self, db: Session) -> list[dict]:
        return [_serialize(v) for v in db.query(Vehicle).order_by(Vehicle.id).all()]

    def find_by_id(self, db: Session, vehicle_id: int) -> dict:
        return _serialize(self.get(db, vehicle_id))

    def save(self, db: Session, data: VehicleCreateRequest) -> dict:
        if data.patente and plate_exists(db, data.patente):
            raise ConflictException("Plate already exists", field="patente")
        try:
            tipo = vehicle_type_service.resolve(db, data.tipoVehiculo)
            v = Vehicle(
                marca=data.marca,
                modelo=data.modelo,
                patente=data.patente,
                conductor=data.conductor,
                estado=data.estado,
                tipoVehiculo=tipo,
            )
            validate_vehicle(v)
            db.add(v)
            db.flush()
        except AppException:
            db.rollback()
            raise
        db.commit()
        db.refresh(v)
        logger.info(f"Created vehicle id={v.id} patente={v.patente}")
        return _serialize(v)

    def update(self, db: Session, vehicle_id: int, data: VehicleUpdateRequest) -> dict:
        v = self.get(db, vehicle_id)
        if data.patente and plate_exists(db, data.patente, exclude_id=vehicle_id):
            raise ConflictException("Plate already exists", field="patente")
        try:
            self._apply_update(db, v, data)
            validate_vehicle(v)
        except AppException:
            db.rollback()
            raise
        db.commit()
        db.refresh(v)
        logger.info(f"Updated vehicle id={v.id}")
        return _serialize(v)

    def _apply_update(self, db: Session, v: Vehicle, data: VehicleUpdateRequest) -> None:
        try:
            if data.tipoVehiculo is not None:
                v.tipoVehiculo = vehicle_type_service.resolve(db, data.tipoVehiculo)
            for attr, label, max_length in _TEXT_FIELDS:
                value = getattr(data, attr)
                if value is not None:
                    setattr(v, attr, check_length(value, attr, label, max_length))
        except FieldValidationError as e:
            raise InvalidArgumentException(f"Error updating vehicle: {e}", field=e.field) from e

    def delete(self, db: Session, vehicle_id: int) -> None:
        v = self.get(db, vehicle_id)
        db.delete(v)
        db.commit()
        logger.info(f"Deleted vehicle id={vehicle_id}")

    def assign_vehicle_type(self, db: Session, vehicle_id: int, type_id: int) -> dict:
        v = self.get(db, vehicle_id)
        tipo = db.query(VehicleType).filter(VehicleType.id == type_id).first()
        if not tipo:
            raise NotFoundException("Vehicle type")
        v.tipoVehiculo = tipo
        db.commit()
        db.refresh(v)
        logger.info(f"Assigned vehicle type {type_id} to vehicle {vehicle_id}")
        return _serialize(v)


vehicle_service = VehicleService()
