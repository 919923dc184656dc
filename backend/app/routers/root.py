from fastapi import APIRouter

from app.core.config import settings

router = APIRouter(prefix="/api", tags=["Root"])

@router.get("/")
def root():
    return {"message": f"{settings.PROJECT_NAME} running", "docs": "/docs"}
