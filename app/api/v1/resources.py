from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.resource import ResourceCreateRequest, ResourceUpdateRequest
from app.schemas.common import success_response, ERROR_RESPONSES
from app.services.resource_service import resource_service

router = APIRouter(prefix="/recursos", responses=ERROR_RESPONSES)


@router.get("", summary="List resources")
def list_resources(db: Session = Depends(get_db)):
    data = resource_service.find_all(db)
    if not data:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return success_response("Resources retrieved", data)


@router.get("/{resource_id}", summary="Get resource by ID")
def get_resource(resource_id: int, db: Session = Depends(get_db)):
    return success_response("Resource retrieved", resource_service.find_by_id(db, resource_id))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create resource")
def create_resource(body: ResourceCreateRequest, db: Session = Depends(get_db)):
    data = resource_service.save(db, body)
    return success_response("Resource created successfully", data)


@router.put("/{resource_id}", summary="Update resource")
def update_resource(resource_id: int, body: ResourceUpdateRequest, db: Session = Depends(get_db)):
    data = resource_service.update(db, resource_id, body)
    return success_response("Resource updated successfully", data)


@router.delete("/{resource_id}", summary="Delete resource")
def delete_resource(resource_id: int, db: Session = Depends(get_db)):
    resource_service.delete(db, resource_id)
    return success_response("Resource deleted successfully", None)


# ─── Relationships ────────────────────────────────────────────────────────────
@router.post("/{resource_id}/asignar-tipo-recurso/{type_id}", summary="Assign resource type to resource")
@router.post("/{resource_id}/assign-tipo-recurso/{type_id}", include_in_schema=False)
def assign_resource_type(resource_id: int, type_id: int, db: Session = Depends(get_db)):
    data = resource_service.assign_resource_type(db, resource_id, type_id)
    return success_response("Resource type assigned to resource successfully", data)
