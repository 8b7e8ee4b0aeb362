from pydantic import BaseModel
from typing import Optional
from app.schemas.category import CategoryOut, CategoryRef


class ResourceOut(BaseModel):
    id:          int
    nombre:      str
    cantidad:    int
    estado:      str
    tipoRecurso: Optional[CategoryOut] = None
    model_config = {"from_attributes": True}


# ─── Requests ─────────────────────────────────────────────────────────────────
class ResourceCreateRequest(BaseModel):
    nombre:      Optional[str] = None
    cantidad:    Optional[int] = None
    estado:      Optional[str] = None
    tipoRecurso: Optional[CategoryRef] = None


class ResourceUpdateRequest(BaseModel):
    nombre:      Optional[str] = None
    cantidad:    Optional[int] = None   # 0 means "leave unchanged"
    estado:      Optional[str] = None
    tipoRecurso: Optional[CategoryRef] = None
