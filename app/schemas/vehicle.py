from pydantic import BaseModel, field_validator
from typing import Optional
from app.schemas.category import CategoryOut, CategoryRef


class VehicleOut(BaseModel):
    id:           int
    marca:        str
    modelo:       str
    patente:      str
    conductor:    str
    estado:       str
    tipoVehiculo: Optional[CategoryOut] = None
    model_config = {"from_attributes": True}


# ─── Requests ─────────────────────────────────────────────────────────────────
class VehicleCreateRequest(BaseModel):
    marca:        Optional[str] = None
    modelo:       Optional[str] = None
    patente:      Optional[str] = None
    conductor:    Optional[str] = None
    estado:       Optional[str] = None
    tipoVehiculo: Optional[CategoryRef] = None

    @field_validator("patente")
    @classmethod
    def normalize_plate(cls, v):
        return v.strip().upper() if v is not None else v


class VehicleUpdateRequest(BaseModel):
    marca:        Optional[str] = None
    modelo:       Optional[str] = None
    patente:      Optional[str] = None
    conductor:    Optional[str] = None
    estado:       Optional[str] = None
    tipoVehiculo: Optional[CategoryRef] = None

    @field_validator("patente")
    @classmethod
    def normalize_plate(cls, v):
        return v.strip().upper() if v is not None else v
