from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.category import CategoryCreateRequest, CategoryUpdateRequest
from app.schemas.common import success_response, ERROR_RESPONSES
from app.services.category_service import resource_type_service

router = APIRouter(prefix="/tipos-recursos", responses=ERROR_RESPONSES)


@router.get("", summary="List resource types")
def list_resource_types(db: Session = Depends(get_db)):
    data = resource_type_service.find_all(db)
    if not data:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return success_response("Resource types retrieved", data)


@router.get("/{type_id}", summary="Get resource type by ID")
def get_resource_type(type_id: int, db: Session = Depends(get_db)):
    return success_response("Resource type retrieved", resource_type_service.find_by_id(db, type_id))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create resource type")
def create_resource_type(body: CategoryCreateRequest, db: Session = Depends(get_db)):
    data = resource_type_service.save(db, body)
    return success_response("Resource type created successfully", data)


@router.put("/{type_id}", summary="Update resource type")
def update_resource_type(type_id: int, body: CategoryUpdateRequest, db: Session = Depends(get_db)):
    data = resource_type_service.update(db, type_id, body)
    return success_response("Resource type updated successfully", data)


@router.delete("/{type_id}", summary="Delete resource type")
def delete_resource_type(type_id: int, db: Session = Depends(get_db)):
    resource_type_service.delete(db, type_id)
    return success_response("Resource type deleted successfully", None)
