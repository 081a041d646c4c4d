import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from .. import crud, schemas
from ..database import get_db
from ..tracing import Span
from ..validation import validate_reading

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/sensors", tags=["Sensor Data"])

SUCCESS_MESSAGE = "Sensor data received successfully."

STORE_ERROR_MESSAGES = {
    crud.StoreError.constraint: "Failed to save sensor data. Please try again later.",
    crud.StoreError.connectivity: "Database connection error. Please try again later.",
    crud.StoreError.unknown: "An unexpected error occurred. Please try again later.",
}


@router.post(
    "/airgradient:{chip_id:path}/measures",
    summary="Receive sensor data from AirGradient device",
    description=(
        "Accepts sensor measurements from an AirGradient device including WiFi signal strength, "
        "CO2 levels, PM2.5 particles, temperature, and humidity. The data is validated and stored "
        "in the database with a timestamp."
    ),
    operation_id="ReceiveSensorData",
    response_model=schemas.SensorDataAck,
    responses={
        400: {"model": schemas.ErrorResponse, "description": "Invalid input data or chipId validation failed"},
        500: {"model": schemas.ErrorResponse, "description": "Internal server error occurred while processing the data"},
    },
)
def receive_sensor_data(chip_id: str, payload: Any = Body(...), db: Session = Depends(get_db)):
    with Span("SensorController.ReceiveSensorData") as span:
        span.set_tag("sensor.chipId", chip_id)
        span.set_tag("sensor.hasData", payload is not None)

        result = validate_reading(chip_id, payload)

        if result.chip_id_errors:
            error = result.chip_id_errors[0]
            span.set_tag("validation.chipId", "invalid")
            span.set_status("error", error)
            logger.info("Rejected sensor data for chipId %r: %s", chip_id, error)
            return JSONResponse(status_code=400, content={"Error": error})

        if result.field_errors:
            span.set_tag("validation.modelState", "invalid")
            span.set_status("error", "Model validation failed")
            logger.info("Rejected sensor data for chipId %s: %s", chip_id, result.field_errors)
            return JSONResponse(
                status_code=400,
                content={"Error": "Validation failed", "Details": result.field_errors},
            )

        span.set_tag("validation.status", "passed")

        stored = crud.insert_measurement(db, result.reading, span=span)
        if not stored.ok:
            span.set_status("error", stored.error.value)
            span.set_tag("error.type", stored.error.value)
            return JSONResponse(status_code=500, content={"Error": STORE_ERROR_MESSAGES[stored.error]})

        span.set_tag("operation.status", "success")
        span.set_status("ok")
        logger.info("Successfully saved sensor data for chipId: %s", chip_id)
        return {"Message": SUCCESS_MESSAGE}
