from datetime import datetime

import pytest

from equipment_service.db import build_engine, build_session_factory
from equipment_service.models import Base, EquipmentRecord, EquipmentTypeRecord, ManufacturerRecord

T0 = datetime(2016, 3, 1, 12, 0, 0)

@pytest.fixture
def engine(tmp_path):
    eng = build_engine(f"sqlite:///{tmp_path / 'equipment.db'}", echo=False)
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()

@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)

@pytest.fixture
def seeded(session_factory):
    session = session_factory()
    try:
        session.add_all([
            EquipmentTypeRecord(id=1, name="module"),
            EquipmentTypeRecord(id=2, name="inverter"),
            EquipmentTypeRecord(id=3, name="battery"),
            ManufacturerRecord(id=10, name="Acme"),
            ManufacturerRecord(id=20, name="Beta"),
        ])
        session.flush()
        session.add_all([
            EquipmentRecord(
                id=1, equipment_type_id=1, manufacturer_id=10, model="X200",
                description=None, modified_date=T0,
                panel_kw_stc=0.2, panel_kw_ptc=0.18, panel_height_mm=1000.0, panel_width_mm=1600.0,
                panel_is_bipv_rated=True, power_temp_coefficient=-0.004,
                normal_operating_cell_temperature=45.0,
            ),
            # inverter with marker values in the module-only columns
            EquipmentRecord(
                id=2, equipment_type_id=2, manufacturer_id=20, model="INV5",
                description="string inverter", modified_date=T0,
                panel_is_bipv_rated=False, power_temp_coefficient=0.0,
                normal_operating_cell_temperature=0.0,
                rating=5.0, inverter_efficiency=0.97, inverter_output_voltage=240.0,
                inverter_is_three_phase=False,
            ),
            EquipmentRecord(
                id=3, equipment_type_id=3, manufacturer_id=10, model="B1",
                description=None, modified_date=T0,
            ),
        ])
        session.commit()
    finally:
        session.close()
    return session_factory
