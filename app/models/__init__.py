"""
Import all models here so that:
1. Alembic can auto-detect them when generating migrations
2. Relationships between models resolve correctly

Order matters: import parent tables before child tables.
"""

from app.models.resource_type import ResourceType
from app.models.vehicle_type import VehicleType
from app.models.firefighter import Firefighter
from app.models.resource import Resource
from app.models.vehicle import Vehicle
from app.models.resource_request import ResourceRequest

__all__ = [
    "ResourceType",
    "VehicleType",
    "Firefighter",
    "Resource",
    "Vehicle",
    "ResourceRequest",
]
