from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.category import CategoryCreateRequest, CategoryUpdateRequest
from app.schemas.common import success_response, ERROR_RESPONSES
from app.services.category_service import vehicle_type_service

router = APIRouter(prefix="/tipos-vehiculos", responses=ERROR_RESPONSES)


@router.get("", summary="List vehicle types")
def list_vehicle_types(db: Session = Depends(get_db)):
    data = vehicle_type_service.find_all(db)
    if not data:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return success_response("Vehicle types retrieved", data)


@router.get("/{type_id}", summary="Get vehicle type by ID")
def get_vehicle_type(type_id: int, db: Session = Depends(get_db)):
    return success_response("Vehicle type retrieved", vehicle_type_service.find_by_id(db, type_id))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create vehicle type")
def create_vehicle_type(body: CategoryCreateRequest, db: Session = Depends(get_db)):
    data = vehicle_type_service.save(db, body)
    return success_response("Vehicle type created successfully", data)


@router.put("/{type_id}", summary="Update vehicle type")
def update_vehicle_type(type_id: int, body: CategoryUpdateRequest, db: Session = Depends(get_db)):
    data = vehicle_type_service.update(db, type_id, body)
    return success_response("Vehicle type updated successfully", data)


@router.delete("/{type_id}", summary="Delete vehicle type")
def delete_vehicle_type(type_id: int, db: Session = Depends(get_db)):
    vehicle_type_service.delete(db, type_id)
    return success_response("Vehicle type deleted successfully", None)
