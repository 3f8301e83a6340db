# equipment_service/main.py
import os
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from .db import dispose_engine, get_engine, get_session_factory
from .domain import EquipmentIdentity
from .errors import EquipmentMappingError
from .log import get_logger
from .models import Base
from .repository import EquipmentRepository
from .serialize import to_siren

# Config
CREATE_TABLES = os.environ.get("CREATE_TABLES", "0") == "1"

logger = get_logger(__name__)

app = FastAPI(title="equipment-service")

_repository = None

def get_repository() -> EquipmentRepository:
    global _repository
    if _repository is None:
        _repository = EquipmentRepository(get_session_factory())
    return _repository

def not_found(equipment_id: int) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={"message": f"Unable to find any equipment for ID {equipment_id}."},
    )

@app.on_event("startup")
async def startup():
    # Local development only; the schema is owned by the migration scripts
    if CREATE_TABLES:
        logger.info("Creating equipment tables if missing")
        Base.metadata.create_all(bind=get_engine())

@app.on_event("shutdown")
async def shutdown():
    global _repository
    _repository = None
    dispose_engine()

@app.get("/equipment/{equipment_id}")
async def api_get_equipment(equipment_id: int, repository: EquipmentRepository = Depends(get_repository)):
    """
    Equipment as a Siren entity.
    - 404 when there is no equipment row for the ID (or the ID is not positive)
    - 500 when the row exists but is neither a module nor an inverter
    """
    try:
        identity = EquipmentIdentity(equipment_id)
    except ValueError:
        return not_found(equipment_id)

    try:
        equipment = await repository.get_equipment(identity)
    except EquipmentMappingError:
        msg = f"Unable to map result for Equipment ID {equipment_id} to known type."
        logger.error(msg)
        return JSONResponse(status_code=500, content={"message": msg})
    except Exception:
        logger.exception("Unexpected error while reading equipment %s", equipment_id)
        return JSONResponse(
            status_code=500,
            content={"message": f"Unexpected error while reading equipment ID {equipment_id}."},
        )

    if equipment is None:
        return not_found(equipment_id)

    body = to_siren(equipment)
    logger.info("response -> %s", body)
    return body
