from fastapi import APIRouter, Depends, Request

from app.core.rate_limit import rate_limit
from app.core.state import AppState, get_app_state
from app.schemas.recommend import (
    RateRequest,
    RateResponse,
    RecommendRequest,
    RecommendResponse,
    StatsResponse,
)
from app.services import recommend_service

router = APIRouter()


@router.post("/recommend", response_model=RecommendResponse, response_model_exclude_none=True)
@rate_limit()
async def recommend(
    request: Request,
    payload: RecommendRequest,
    state: AppState = Depends(get_app_state),
):
    _ = request
    return recommend_service.recommend(state, payload)


@router.post("/recommend/rate", response_model=RateResponse)
@rate_limit()
async def rate_item(
    request: Request,
    payload: RateRequest,
    state: AppState = Depends(get_app_state),
):
    _ = request
    return recommend_service.rate(state, payload)


@router.get("/recommend/stats", response_model=StatsResponse)
async def recommender_stats(state: AppState = Depends(get_app_state)):
    return recommend_service.stats(state)
