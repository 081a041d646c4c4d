from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

CHIP_ID_MAX_LENGTH = 50

# field -> (min, max, message); all ranges are inclusive
FIELD_RANGES = {
    "wifi": (-100, 0, "WiFi signal strength must be between -100 and 0 dBm"),
    "rco2": (0, 50000, "CO2 reading must be between 0 and 50000 ppm"),
    "pm02": (0, 1000, "PM2.5 reading must be between 0 and 1000 µg/m³"),
    "atmp": (-40, 176, "Temperature must be between -40 and 176°F"),
    "rhum": (0, 100, "Humidity must be between 0 and 100%"),
}


class SensorDataModel(BaseModel):
    """Measurement body posted by an AirGradient device."""

    model_config = ConfigDict(frozen=True, strict=True)

    wifi: int = Field(ge=-100, le=0, description="WiFi signal strength (dBm)")
    rco2: int = Field(ge=0, le=50000, description="CO2 concentration (ppm)")
    pm02: int = Field(ge=0, le=1000, description="PM2.5 concentration (µg/m³)")
    atmp: float = Field(ge=-40, le=176, description="Temperature (°F)")
    rhum: int = Field(ge=0, le=100, description="Relative humidity (%)")


class Reading(SensorDataModel):
    chip_id: str = Field(min_length=1, max_length=CHIP_ID_MAX_LENGTH)


class SensorDataAck(BaseModel):
    Message: str


class ErrorResponse(BaseModel):
    Error: str
    Details: Optional[Dict[str, List[str]]] = None
