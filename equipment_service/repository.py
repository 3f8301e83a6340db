# equipment_service/repository.py
import asyncio
from concurrent.futures import Executor
from typing import Optional

from .decoder import decode, is_failure
from .domain import Equipment, EquipmentIdentity
from .errors import EquipmentMappingError
from .log import get_logger
from .models import EquipmentRecord, EquipmentTypeRecord, ManufacturerRecord

logger = get_logger(__name__)

# Column order must match decoder.RawEquipmentRow.
_RESULT_COLUMNS = (
    EquipmentRecord.id,
    EquipmentTypeRecord.name,
    EquipmentRecord.model,
    ManufacturerRecord.name,
    EquipmentRecord.description,
    EquipmentRecord.modified_date,
    EquipmentRecord.panel_kw_stc,
    EquipmentRecord.panel_kw_ptc,
    EquipmentRecord.panel_height_mm,
    EquipmentRecord.panel_width_mm,
    EquipmentRecord.panel_is_bipv_rated,
    EquipmentRecord.power_temp_coefficient,
    EquipmentRecord.normal_operating_cell_temperature,
    EquipmentRecord.rating,
    EquipmentRecord.inverter_efficiency,
    EquipmentRecord.inverter_output_voltage,
    EquipmentRecord.inverter_is_three_phase,
)

class EquipmentRepository:
    """
    Reads equipment from the equipment database.

    `session_factory` is a sessionmaker (or any callable returning a Session).
    The blocking query runs on `executor`; None means the running loop's
    default executor. Nothing is cached between calls.
    """

    def __init__(self, session_factory, executor: Optional[Executor] = None):
        self._session_factory = session_factory
        self._executor = executor

    async def get_equipment(self, identity: EquipmentIdentity) -> Optional[Equipment]:
        logger.info("Attempting to obtain equipment for %s", identity)
        loop = asyncio.get_running_loop()
        row = await loop.run_in_executor(self._executor, self._fetch_row, identity.value)
        if row is None:
            logger.info("No equipment found for %s", identity)
            return None

        result = decode(row)
        if is_failure(result):
            logger.error("Unable to map result for %s: %r", identity, result.raw)
            raise EquipmentMappingError(identity, result)
        return result

    def _fetch_row(self, equipment_id: int) -> Optional[tuple]:
        session = self._session_factory()
        try:
            # primary key lookup: more than one row raises MultipleResultsFound
            row = (
                session.query(*_RESULT_COLUMNS)
                .select_from(EquipmentRecord)
                .join(EquipmentTypeRecord, EquipmentRecord.equipment_type_id == EquipmentTypeRecord.id)
                .join(ManufacturerRecord, EquipmentRecord.manufacturer_id == ManufacturerRecord.id)
                .filter(EquipmentRecord.id == equipment_id)
                .one_or_none()
            )
        finally:
            session.close()
        return tuple(row) if row is not None else None
