from fastapi import APIRouter

router = APIRouter(tags=["Health"])


@router.get("/health")
def healthcheck():
    return {"status": "healthy"}


@router.get("/alive")
def liveness():
    return {"status": "alive"}
