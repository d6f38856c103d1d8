from fastapi import APIRouter, Depends, Request

from app.core.rate_limit import rate_limit
from app.core.state import AppState, get_app_state
from app.schemas.chat import AIChatRequest, AIChatResponse, ChatRequest, ChatResponse
from app.services.chat_service import assistant_chat, persona_chat

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
@rate_limit()
async def chat(
    request: Request,
    payload: ChatRequest,
    state: AppState = Depends(get_app_state),
):
    _ = request
    return await persona_chat(state, payload)


@router.post("/ai-chat", response_model=AIChatResponse)
@rate_limit()
async def ai_chat(
    request: Request,
    payload: AIChatRequest,
    state: AppState = Depends(get_app_state),
):
    _ = request
    return await assistant_chat(state, payload)
