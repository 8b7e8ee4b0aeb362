from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.vehicle import VehicleCreateRequest, VehicleUpdateRequest
from app.schemas.common import success_response, ERROR_RESPONSES
from app.services.vehicle_service import vehicle_service

router = APIRouter(prefix="/vehiculos", responses=ERROR_RESPONSES)


@router.get("", summary="List vehicles")
def list_vehicles(db: Session = Depends(get_db)):
    data = vehicle_service.find_all(db)
    if not data:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return success_response("Vehicles retrieved", data)


@router.get("/{vehicle_id}", summary="Get vehicle by ID")
def get_vehicle(vehicle_id: int, db: Session = Depends(get_db)):
    return success_response("Vehicle retrieved", vehicle_service.find_by_id(db, vehicle_id))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create vehicle")
def create_vehicle(body: VehicleCreateRequest, db: Session = Depends(get_db)):
    data = vehicle_service.save(db, body)
    return success_response("Vehicle created successfully", data)


@router.put("/{vehicle_id}", summary="Update vehicle")
def update_vehicle(vehicle_id: int, body: VehicleUpdateRequest, db: Session = Depends(get_db)):
    data = vehicle_service.update(db, vehicle_id, body)
    return success_response("Vehicle updated successfully", data)


@router.delete("/{vehicle_id}", summary="Delete vehicle")
def delete_vehicle(vehicle_id: int, db: Session = Depends(get_db)):
    vehicle_service.delete(db, vehicle_id)
    return success_response("Vehicle deleted successfully", None)


# ─── Relationships ────────────────────────────────────────────────────────────
@router.post("/{vehicle_id}/asignar-tipo-vehiculo/{type_id}", summary="Assign vehicle type to vehicle")
@router.post("/{vehicle_id}/assign-tipo-vehiculo/{type_id}", include_in_schema=False)
def assign_vehicle_type(vehicle_id: int, type_id: int, db: Session = Depends(get_db)):
    data = vehicle_service.assign_vehicle_type(db, vehicle_id, type_id)
    return success_response("Vehicle type assigned to vehicle successfully", data)
