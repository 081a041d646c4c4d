VALID_PAYLOAD = {"wifi": -50, "rco2": 400, "pm02": 15, "atmp": 72.5, "rhum": 45}


def measures_url(chip_id: str) -> str:
    return f"/api/v1/sensors/airgradient:{chip_id}/measures"
