import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from airgradient_api import config
from airgradient_api.database import create_tables
from airgradient_api.routes import router
from airgradient_api.validation import format_errors

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=config.LOG_LEVEL
)
logger = logging.getLogger(__name__)

if config.DB_CREATE_TABLES:
    create_tables()

app = FastAPI(
    title="AirGradient API",
    version="v1",
    description=(
        "API for receiving and storing AirGradient sensor data including WiFi signal strength, "
        "CO2 levels, PM2.5 particles, temperature, and humidity measurements."
    ),
    contact={"name": "AirGradient API Support"},
)
app.add_middleware(CORSMiddleware, allow_origins=config.CORS_ORIGINS, allow_credentials=True, allow_methods=["*"], allow_headers=["*"], )


# Malformed or missing bodies get the same 400 shape as range violations
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = format_errors(exc)
    logger.info("Rejected request to %s: %s", request.url.path, details)
    return JSONResponse(status_code=400, content={"Error": "Validation failed", "Details": details})


app.include_router(router)


def main():
    import uvicorn

    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
