"""
Seed demo data through the public service layer.

    python -m app.seed [--resources 5] [--vehicles 5] [--requests 3]

Never runs on import or at application startup.
"""

import argparse
import logging
import random
import string

from sqlalchemy.orm import Session

from app.database import SessionLocal, create_tables
from app.models.firefighter import Firefighter
from app.schemas.category import CategoryCreateRequest, CategoryRef
from app.schemas.resource import ResourceCreateRequest
from app.schemas.resource_request import ResourceRequestCreateRequest
from app.schemas.vehicle import VehicleCreateRequest
from app.services.category_service import resource_type_service, vehicle_type_service
from app.services.resource_request_service import resource_request_service
from app.services.resource_service import resource_service
from app.services.vehicle_service import vehicle_service
from app.utils.exceptions import AppException

logger = logging.getLogger(__name__)

# Status is stored as free text on resources, vehicles and requests; these are
# the values seen in the field and only drive demo data.
KNOWN_STATUSES = ("Pendiente", "En Proceso", "Completada", "Rechazada")

RESOURCE_TYPES = ["Rescate", "Primeros Auxilios", "Materiales Peligrosos", "Extinción", "Comunicaciones"]
VEHICLE_TYPES = ["Bomba", "Escala", "Ambulancia"]
RESOURCE_NAMES = ["Botiquín", "Manguera", "Hacha", "Radio portátil", "Equipo autónomo", "Extintor", "Cuerda"]
BRANDS = {"Toyota": ["Hilux", "Land Cruiser"], "Mercedes-Benz": ["Atego", "Sprinter"], "Scania": ["P320", "P410"]}
FIRST_NAMES = ["Juan", "María", "Pedro", "Camila", "Diego", "Valentina"]
SURNAMES = ["Pérez", "González", "Muñoz", "Rojas", "Díaz", "Soto"]
REQUEST_TITLES = ["Reposición de equipo", "Material para rescate", "Apoyo en incendio forestal"]


def _random_plate(rng: random.Random) -> str:
    return "".join(rng.choices(string.ascii_uppercase, k=2)) + "".join(rng.choices(string.digits, k=4))


def seed_firefighters(db: Session, rng: random.Random, count: int = 3) -> list[Firefighter]:
    """Firefighters belong to another service; insert demo rows directly when none exist."""
    existing = db.query(Firefighter).all()
    if existing:
        return existing
    used_phones: set[int] = set()
    for _ in range(count):
        phone = rng.randint(900000000, 999999999)
        while phone in used_phones:
            phone = rng.randint(900000000, 999999999)
        used_phones.add(phone)
        db.add(Firefighter(
            nombre=rng.choice(FIRST_NAMES),
            aPaterno=rng.choice(SURNAMES),
            aMaterno=rng.choice(SURNAMES),
            telefono=phone,
        ))
    db.commit()
    return db.query(Firefighter).all()


def seed(db: Session, resources: int = 5, vehicles: int = 5, requests: int = 3, rng: random.Random | None = None) -> dict:
    rng = rng or random.Random()
    counts = {"resource_types": 0, "vehicle_types": 0, "resources": 0, "vehicles": 0, "requests": 0}

    resource_type_ids = []
    for name in RESOURCE_TYPES:
        resource_type_ids.append(resource_type_service.save(db, CategoryCreateRequest(nombre=name))["id"])
        counts["resource_types"] += 1

    vehicle_type_ids = []
    for name in VEHICLE_TYPES:
        vehicle_type_ids.append(vehicle_type_service.save(db, CategoryCreateRequest(nombre=name))["id"])
        counts["vehicle_types"] += 1

    resource_ids = []
    for _ in range(resources):
        body = ResourceCreateRequest(
            nombre=rng.choice(RESOURCE_NAMES),
            cantidad=rng.randint(1, 9999),
            estado=rng.choice(KNOWN_STATUSES),
            tipoRecurso=CategoryRef(id=rng.choice(resource_type_ids)),
        )
        try:
            resource_ids.append(resource_service.save(db, body)["id"])
            counts["resources"] += 1
        except AppException as e:
            logger.warning(f"Skipping resource: {e.message}")

    for _ in range(vehicles):
        marca = rng.choice(list(BRANDS))
        body = VehicleCreateRequest(
            marca=marca,
            modelo=rng.choice(BRANDS[marca]),
            patente=_random_plate(rng),
            conductor=f"{rng.choice(FIRST_NAMES)} {rng.choice(SURNAMES)}",
            estado=rng.choice(KNOWN_STATUSES),
            tipoVehiculo=CategoryRef(id=rng.choice(vehicle_type_ids)),
        )
        try:
            vehicle_service.save(db, body)
            counts["vehicles"] += 1
        except AppException as e:
            logger.warning(f"Skipping vehicle: {e.message}")

    firefighters = seed_firefighters(db, rng)
    if not resource_ids:
        logger.warning("No resources created, skipping resource requests")
        return counts

    for _ in range(requests):
        body = ResourceRequestCreateRequest(
            titulo=rng.choice(REQUEST_TITLES),
            detalle="Solicitud generada para datos de demostración.",
            estado=rng.choice(KNOWN_STATUSES),
            bomberoId=rng.choice(firefighters).id,
            recursoId=rng.choice(resource_ids),
        )
        try:
            resource_request_service.save(db, body)
            counts["requests"] += 1
        except AppException as e:
            logger.warning(f"Skipping resource request: {e.message}")

    return counts


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed demo data")
    parser.add_argument("--resources", type=int, default=5)
    parser.add_argument("--vehicles", type=int, default=5)
    parser.add_argument("--requests", type=int, default=3)
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    create_tables()
    with SessionLocal() as db:
        counts = seed(db, args.resources, args.vehicles, args.requests, random.Random(args.seed))
    logger.info(f"Seed complete: {counts}")


if __name__ == "__main__":
    main()
