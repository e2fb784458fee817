from fastapi import APIRouter

router = APIRouter(tags=["Health"])


@router.get("/health")
@router.get("/api/v1/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/health/live")
@router.get("/api/v1/health/live")
def health_live() -> dict[str, str]:
    return {"status": "live"}


@router.get("/health/ready")
@router.get("/api/v1/health/ready")
def health_ready() -> dict[str, str]:
    return {"status": "ready"}
