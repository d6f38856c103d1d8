from fastapi import APIRouter, Depends, Request

from app.core.rate_limit import rate_limit
from app.core.state import AppState, get_app_state
from app.schemas.resume import (
    AnalyzeRequest,
    AnalyzeResponse,
    OptimizeRequest,
    OptimizeResponse,
    TemplateRequest,
    TemplateResponse,
)
from app.services import resume_service

router = APIRouter()


@router.post("/optimize", response_model=OptimizeResponse)
@rate_limit("20/minute")
async def optimize_section(
    request: Request,
    payload: OptimizeRequest,
    state: AppState = Depends(get_app_state),
):
    _ = request
    return await resume_service.optimize(state, payload)


@router.post("/analyze", response_model=AnalyzeResponse)
@rate_limit()
async def analyze_resume(
    request: Request,
    payload: AnalyzeRequest,
    state: AppState = Depends(get_app_state),
):
    _ = request
    return resume_service.analyze(state, payload)


@router.post("/resume-template", response_model=TemplateResponse)
async def resume_template(payload: TemplateRequest):
    return resume_service.template(payload)
