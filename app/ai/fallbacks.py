from __future__ import annotations

import random

from app.ai.types import TaskRole
from app.core.config import DEFAULT_PERSONA_NAME, settings

GENERIC_CHAT_RESPONSES = (
    "I'm currently running in demo mode. To enable full AI capabilities, please configure a valid OpenAI API key.",
    "Thanks for your message! I'd love to chat, but I need an OpenAI API key to provide intelligent responses.",
    "I'm here to help! However, I'm currently in demonstration mode without access to AI services.",
    "Hello! I'm an AI assistant, but I'm currently running without my full capabilities. Please check the API configuration.",
)

RESUME_SUGGESTIONS: dict[str, tuple[str, ...]] = {
    "summary": (
        "Consider starting with a strong action verb",
        "Keep it concise - 2-3 sentences maximum",
        "Highlight your unique value proposition",
        "Include relevant keywords from the job description",
    ),
    "experience": (
        "Use the STAR method (Situation, Task, Action, Result)",
        "Quantify achievements with specific metrics",
        "Start each bullet point with a strong action verb",
        "Focus on impact and results, not just responsibilities",
    ),
    "skills": (
        "Organize skills by category (Technical, Soft Skills, etc.)",
        "Prioritize skills mentioned in the job description",
        "Include proficiency levels where appropriate",
        "Balance technical and soft skills",
    ),
    "education": (
        "Include relevant coursework if early in career",
        "List GPA if 3.5 or higher",
        "Include academic honors and awards",
        "Add relevant projects or research",
    ),
}

DEFAULT_RESUME_SUGGESTION = "Focus on clarity, relevance, and impact in your resume content."


def persona_chat_responses(name: str | None = None) -> tuple[str, ...]:
    who = (name or settings.persona_name or "").strip() or DEFAULT_PERSONA_NAME
    first = who.split()[0]
    return (
        "Thanks for your message! I'm currently in demo mode. In a full deployment, I'd use GPT "
        f"to provide intelligent responses about {first}'s experience and projects.",
        "That's a great question! With a proper OpenAI API key, I could give you detailed insights "
        f"about {first}'s background in CS, Math, and software engineering.",
        f"I appreciate your interest! This chatbot would normally use AI to discuss {first}'s "
        "internships at MITRE, Treevah, and other experiences.",
        f"Interesting point! In production, I'd leverage GPT to talk about {first}'s projects, "
        "skills, and academic achievements at UMass Amherst.",
    )


def fallback_pool(role: TaskRole, section: str | None = None) -> tuple[str, ...]:
    if role == "resume-suggestion":
        key = (section or "").strip().lower()
        return RESUME_SUGGESTIONS.get(key, (DEFAULT_RESUME_SUGGESTION,))
    if role == "persona":
        return persona_chat_responses()
    return GENERIC_CHAT_RESPONSES


def pick_fallback(role: TaskRole, section: str | None = None, rng: random.Random | None = None) -> str:
    pool = [text for text in fallback_pool(role, section) if text] or [DEFAULT_RESUME_SUGGESTION]
    return (rng or random).choice(pool)
