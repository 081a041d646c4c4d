import enum
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.exc import (
    DataError,
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session

from airgradient_api import models, schemas
from airgradient_api.tracing import Span

logger = logging.getLogger(__name__)


class StoreError(enum.Enum):
    constraint = "constraint"
    connectivity = "connectivity"
    unknown = "unknown"


@dataclass(frozen=True)
class StoreResult:
    record: Optional[models.SensorDatum] = None
    error: Optional[StoreError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def classify_error(exc: Exception) -> StoreError:
    if isinstance(exc, (IntegrityError, DataError)):
        return StoreError.constraint
    if isinstance(exc, (OperationalError, InterfaceError, DisconnectionError, PoolTimeoutError)):
        return StoreError.connectivity
    return StoreError.unknown


# --- SENSOR DATA ---
def insert_measurement(db: Session, reading: schemas.Reading, span: Optional[Span] = None) -> StoreResult:
    """Append one row for a validated reading, stamped with the current UTC time.

    Database failures are rolled back and returned as a ``StoreResult``
    with the error kind set; they are not retried here.
    """
    db_span = span.child("SaveToDatabase") if span else Span("SaveToDatabase")
    db_span.set_tag("database.operation", "insert")
    db_span.set_tag("sensor.chipId", reading.chip_id)
    for name in ("wifi", "rco2", "pm02", "atmp", "rhum"):
        db_span.set_tag(f"sensor.{name}", getattr(reading, name))

    with db_span:
        new_data = models.SensorDatum(
            chip_id=reading.chip_id,
            wifi=reading.wifi,
            rco2=reading.rco2,
            pm02=reading.pm02,
            atmp=reading.atmp,
            rhum=reading.rhum,
            timestamp=datetime.now(timezone.utc),
        )
        try:
            db.add(new_data)
            db.commit()
            db.refresh(new_data)
        except Exception as exc:
            kind = classify_error(exc)
            try:
                db.rollback()
            except SQLAlchemyError:
                logger.warning("Rollback failed for chipId: %s", reading.chip_id, exc_info=True)
            db_span.set_status("error", kind.value)
            db_span.set_tag("error.type", type(exc).__name__)
            logger.exception("Database %s error while saving sensor data for chipId: %s", kind.value, reading.chip_id)
            return StoreResult(error=kind)

        logger.debug("Stored sensor data: %s", new_data.to_dict())
        db_span.set_tag("database.status", "success")
        db_span.set_status("ok")
        return StoreResult(record=new_data)


def get_sensor_history(db: Session, chip_id: str, limit: int = 50) -> List[models.SensorDatum]:
    return (
        db.query(models.SensorDatum)
        .filter(models.SensorDatum.chip_id == chip_id)
        .order_by(models.SensorDatum.timestamp.desc(), models.SensorDatum.id.desc())
        .limit(limit)
        .all()
    )
