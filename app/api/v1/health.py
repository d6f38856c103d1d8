from fastapi import APIRouter, Depends

from app.ai.degrading import capability_usable
from app.core.state import AppState, get_app_state

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check(state: AppState = Depends(get_app_state)):
    return {"status": "healthy", "aiConfigured": capability_usable(state.capability)}
