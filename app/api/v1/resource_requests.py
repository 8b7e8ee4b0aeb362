from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.resource_request import ResourceRequestCreateRequest, ResourceRequestUpdateRequest
from app.schemas.common import success_response, ERROR_RESPONSES
from app.services.resource_request_service import resource_request_service

router = APIRouter(prefix="/solicitudes-recursos", responses=ERROR_RESPONSES)


@router.get("", summary="List resource requests")
def list_requests(db: Session = Depends(get_db)):
    data = resource_request_service.find_all(db)
    if not data:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return success_response("Resource requests retrieved", data)


@router.get("/{request_id}", summary="Get resource request by ID")
def get_request(request_id: int, db: Session = Depends(get_db)):
    return success_response("Resource request retrieved", resource_request_service.find_by_id(db, request_id))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create resource request")
def create_request(body: ResourceRequestCreateRequest, db: Session = Depends(get_db)):
    data = resource_request_service.save(db, body)
    return success_response("Resource request created successfully", data)


@router.put("/{request_id}", summary="Update resource request")
def update_request(request_id: int, body: ResourceRequestUpdateRequest, db: Session = Depends(get_db)):
    data = resource_request_service.update(db, request_id, body)
    return success_response("Resource request updated successfully", data)


@router.delete("/{request_id}", summary="Delete resource request")
def delete_request(request_id: int, db: Session = Depends(get_db)):
    resource_request_service.delete(db, request_id)
    return success_response("Resource request deleted successfully", None)


# ─── Relationships ────────────────────────────────────────────────────────────
@router.post("/{request_id}/asignar-recurso/{resource_id}", summary="Assign resource to request")
@router.post("/{request_id}/assign-recurso/{resource_id}", include_in_schema=False)
def assign_resource(request_id: int, resource_id: int, db: Session = Depends(get_db)):
    data = resource_request_service.assign_resource(db, request_id, resource_id)
    return success_response("Resource assigned to resource request successfully", data)


@router.post("/{request_id}/asignar-bombero/{firefighter_id}", summary="Assign firefighter to request")
@router.post("/{request_id}/assign-bombero/{firefighter_id}", include_in_schema=False)
def assign_firefighter(request_id: int, firefighter_id: int, db: Session = Depends(get_db)):
    data = resource_request_service.assign_firefighter(db, request_id, firefighter_id)
    return success_response("Firefighter assigned to resource request successfully", data)
