# equipment_service/models.py
# Mappings of the equipment database tables. The schema is owned by the
# migration scripts; these mappings only describe what the service reads.
from sqlalchemy import Column, Integer, Float, DateTime, String, Boolean, ForeignKey, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()

class ManufacturerRecord(Base):
    __tablename__ = "manufacturer"
    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)

class EquipmentTypeRecord(Base):
    __tablename__ = "equipment_type"
    id = Column(Integer, primary_key=True)
    name = Column(String(64), nullable=False)   # discriminator: "module" / "inverter"

class EquipmentRecord(Base):
    __tablename__ = "equipment"
    id = Column(Integer, primary_key=True)
    equipment_type_id = Column(Integer, ForeignKey("equipment_type.id"), nullable=False)
    manufacturer_id = Column(Integer, ForeignKey("manufacturer.id"), nullable=False)
    model = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    modified_date = Column(DateTime, nullable=False)

    # module columns
    panel_kw_stc = Column(Float, nullable=True)
    panel_kw_ptc = Column(Float, nullable=True)
    panel_height_mm = Column(Float, nullable=True)
    panel_width_mm = Column(Float, nullable=True)
    panel_is_bipv_rated = Column(Boolean, nullable=True)
    power_temp_coefficient = Column(Float, nullable=True)
    normal_operating_cell_temperature = Column(Float, nullable=True)

    # inverter columns
    rating = Column(Float, nullable=True)
    inverter_efficiency = Column(Float, nullable=True)
    inverter_output_voltage = Column(Float, nullable=True)
    inverter_is_three_phase = Column(Boolean, nullable=True)
