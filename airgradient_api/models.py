from typing import Dict

from sqlalchemy import BigInteger, Column, DateTime, Double, Index, Integer, String
from sqlalchemy.dialects import mysql

from airgradient_api.database import Base
from airgradient_api.schemas import CHIP_ID_MAX_LENGTH

# MySQL DATETIME defaults to whole seconds
TIMESTAMP_TYPE = DateTime(timezone=True).with_variant(mysql.DATETIME(fsp=6), "mysql")


class SensorDatum(Base):
    __tablename__ = "SensorData"

    id = Column("Id", BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    chip_id = Column("ChipId", String(CHIP_ID_MAX_LENGTH), nullable=False)
    wifi = Column("Wifi", Integer, nullable=False)
    rco2 = Column("Rco2", Integer, nullable=False)
    pm02 = Column("Pm02", Integer, nullable=False)
    atmp = Column("Atmp", Double, nullable=False)
    rhum = Column("Rhum", Integer, nullable=False)
    # Rows written before the column existed have no timestamp
    timestamp = Column("Timestamp", TIMESTAMP_TYPE, nullable=True)

    __table_args__ = (
        Index("IX_SensorData_Timestamp", "Timestamp"),
        Index("IX_SensorData_CO2", "Rco2"),
    )

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "chip_id": self.chip_id,
            "wifi": self.wifi,
            "rco2": self.rco2,
            "pm02": self.pm02,
            "atmp": self.atmp,
            "rhum": self.rhum,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }
