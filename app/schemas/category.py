from pydantic import BaseModel
from typing import Optional


class CategoryOut(BaseModel):
    id:     int
    nombre: str
    model_config = {"from_attributes": True}


# ─── Requests ─────────────────────────────────────────────────────────────────
# Fields are optional at the schema level; the service owns the rules so that
# a missing or oversized name is a 400, not a 422.
class CategoryCreateRequest(BaseModel):
    nombre: Optional[str] = None


class CategoryUpdateRequest(BaseModel):
    nombre: Optional[str] = None


class CategoryRef(BaseModel):
    """Nested category on a resource/vehicle: an existing `id`, or a new `nombre`."""
    id:     Optional[int] = None
    nombre: Optional[str] = None
