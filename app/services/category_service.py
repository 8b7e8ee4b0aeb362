import logging
from sqlalchemy.orm import Session

from app.database import Base
from app.models.resource import Resource
from app.models.resource_type import ResourceType
from app.models.vehicle import Vehicle
from app.models.vehicle_type import VehicleType
from app.schemas.category import (
    CategoryOut, CategoryCreateRequest, CategoryUpdateRequest, CategoryRef,
)
from app.utils.exceptions import NotFoundException, InvalidArgumentException, ConflictException
from app.utils.validation import FieldValidationError, require_text

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 50


def serialize_category(c) -> dict | None:
    if c is None:
        return None
    return CategoryOut.model_validate(c).model_dump()


class CategoryService:
    """
    CRUD for a named category table (resource types, vehicle types).

    `dependent_model` / `dependent_fk` name the table that points at the
    category, so a category still in use is never deleted out from under it.
    """

    def __init__(self, model: type[Base], label: str, dependent_model: type[Base], dependent_fk: str):
        self.model = model
        self.label = label
        self.dependent_model = dependent_model
        self.dependent_fk = dependent_fk

    # ─── Validation ───────────────────────────────────────────────────────────
    def validate(self, category) -> None:
        if category is None:
            raise InvalidArgumentException(f"{self.label} is required")
        self.validate_name(category.nombre)

    def validate_name(self, nombre: str | None) -> None:
        """Name must be present, non-blank and at most 50 characters."""
        try:
            require_text(nombre, "nombre", f"{self.label} name", NAME_MAX_LENGTH)
        except FieldValidationError as e:
            raise InvalidArgumentException(f"Error validating {self.label.lower()}: {e}", field=e.field) from e

    # ─── Queries ──────────────────────────────────────────────────────────────
    def get(self, db: Session, category_id: int):
        c = db.query(self.model).filter(self.model.id == category_id).first()
        if not c:
            raise NotFoundException(self.label)
        return c

    def find_all(self, db: Session) -> list[dict]:
        cats = db.query(self.model).order_by(self.model.id).all()
        return [serialize_category(c) for c in cats]

    def find_by_id(self, db: Session, category_id: int) -> dict:
        return serialize_category(self.get(db, category_id))

    # ─── Commands ─────────────────────────────────────────────────────────────
    def save(self, db: Session, data: CategoryCreateRequest) -> dict:
        self.validate_name(data.nombre)
        c = self.model(nombre=data.nombre)
        db.add(c)
        db.commit()
        db.refresh(c)
        logger.info(f"Created {self.label} id={c.id} nombre={c.nombre!r}")
        return serialize_category(c)

    def update(self, db: Session, category_id: int, data: CategoryUpdateRequest) -> dict:
        c = self.get(db, category_id)
        if data.nombre is not None:
            self.validate_name(data.nombre)
            c.nombre = data.nombre
        db.commit()
        db.refresh(c)
        logger.info(f"Updated {self.label} id={c.id}")
        return serialize_category(c)

    def delete(self, db: Session, category_id: int) -> None:
        c = self.get(db, category_id)
        fk = getattr(self.dependent_model, self.dependent_fk)
        if db.query(self.dependent_model).filter(fk == category_id).first():
            raise ConflictException(f"{self.label} is still assigned and cannot be deleted")
        db.delete(c)
        db.commit()
        logger.info(f"Deleted {self.label} id={category_id}")

    def resolve(self, db: Session, ref: CategoryRef | None):
        """
        Turn a nested category payload into a persistent row.
        An `id` reuses the existing category; otherwise a new one is created
        from `nombre`. Flushes but does not commit; the caller owns the transaction.
        """
        if ref is None:
            return None
        if ref.id is not None:
            return self.get(db, ref.id)
        self.validate_name(ref.nombre)
        c = self.model(nombre=ref.nombre)
        db.add(c)
        db.flush()
        logger.info(f"Created {self.label} id={c.id} nombre={c.nombre!r} from nested payload")
        return c


resource_type_service = CategoryService(ResourceType, "Resource type", Resource, "tipoRecursoId")
vehicle_type_service = CategoryService(VehicleType, "Vehicle type", Vehicle, "tipoVehiculoId")
