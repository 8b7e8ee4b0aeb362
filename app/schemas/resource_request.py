from pydantic import BaseModel
from typing import Optional


class FirefighterOut(BaseModel):
    id:       int
    nombre:   str
    aPaterno: str
    aMaterno: str
    telefono: int
    model_config = {"from_attributes": True}


class RequestedResourceOut(BaseModel):
    id:       int
    nombre:   str
    cantidad: int
    estado:   str
    model_config = {"from_attributes": True}


class ResourceRequestOut(BaseModel):
    id:      int
    titulo:  str
    detalle: str
    estado:  str
    bombero: Optional[FirefighterOut] = None
    recurso: Optional[RequestedResourceOut] = None
    model_config = {"from_attributes": True}


# ─── Requests ─────────────────────────────────────────────────────────────────
class ResourceRequestCreateRequest(BaseModel):
    titulo:    Optional[str] = None
    detalle:   Optional[str] = None
    estado:    Optional[str] = None
    bomberoId: Optional[int] = None
    recursoId: Optional[int] = None


class ResourceRequestUpdateRequest(BaseModel):
    titulo:    Optional[str] = None
    detalle:   Optional[str] = None
    estado:    Optional[str] = None
    bomberoId: Optional[int] = None
    recursoId: Optional[int] = None
