import json
import logging

from fastapi import APIRouter, Depends, Request

from app.core.config import settings
from app.core.errors import ApiError
from app.core.rate_limit import rate_limit
from app.core.state import AppState, get_app_state
from app.integrations.email import send_contact_notice
from app.schemas.site import ContactRequest, ContactResponse, ViewCountResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/blog/{slug}/view", response_model=ViewCountResponse)
async def record_view(slug: str, state: AppState = Depends(get_app_state)):
    views = state.views.increment(slug)
    logger.info(json.dumps({"event": "blog_view", "slug": slug, "views": views}))
    return ViewCountResponse(views=views, slug=slug)


@router.get("/blog/{slug}/view", response_model=ViewCountResponse)
async def get_views(slug: str, state: AppState = Depends(get_app_state)):
    return ViewCountResponse(views=state.views.get(slug), slug=slug)


@router.post("/contact", response_model=ContactResponse)
@rate_limit("5/minute")
def contact(request: Request, payload: ContactRequest):
    _ = request
    name, email, message = payload.name.strip(), payload.email.strip(), payload.message.strip()
    if not name or not email or not message:
        raise ApiError("Name, email, and message are required")

    logger.info(
        json.dumps(
            {
                "event": "contact_submission",
                "subject": payload.subject or "No subject",
                "message_len": len(message),
            }
        )
    )
    email_sent = send_contact_notice(name, email, payload.subject, message)
    if not email_sent:
        logger.info("contact_email_not_sent fallback_address=%s", settings.contact_email)
    return ContactResponse(message="Thank you for your message! I'll get back to you soon.")
