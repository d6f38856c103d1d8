from typing import Sequence

from app.ai.types import ChatMessage, TaskRole
from app.core.config import DEFAULT_PERSONA_NAME, settings

GENERIC_SYSTEM_PROMPT = (
    "You are a helpful AI assistant. You can discuss any topic and provide helpful, "
    "accurate, and engaging responses. Keep your responses conversational and informative."
)

RESUME_SYSTEM_PROMPT = "You are a professional resume optimization expert."


def persona_system_prompt(name: str | None = None) -> str:
    who = (name or settings.persona_name or "").strip() or DEFAULT_PERSONA_NAME
    return (
        f"You are an AI assistant representing {who}, a CS & Math student at UMass Amherst.\n\n"
        f"Key information about {who}:\n"
        "- CS & Math double major at UMass Amherst (2023-2027)\n"
        "- Software Engineering Intern with experience at MITRE Corporation, Treevah, SellServe, "
        "and Columbia University\n"
        "- Skills: Full-stack development, AI/ML, React, Next.js, Python, TypeScript\n"
        "- Projects: Campus Chirp, FoundU, AI-powered phishing detection, Dorm Buddy\n"
        "- Interests: Building scalable applications, cybersecurity, machine learning\n\n"
        f"Respond as if you're representing {who} professionally but conversationally. "
        "Keep responses concise and relevant."
    )


def system_prompt_for(role: TaskRole) -> str:
    if role == "persona":
        return persona_system_prompt()
    if role == "resume-suggestion":
        return RESUME_SYSTEM_PROMPT
    return GENERIC_SYSTEM_PROMPT


def build_resume_prompt(section: str, content: str, job_description: str | None = None) -> str:
    lines = [
        "You are an expert resume writer and ATS optimizer.",
        "",
        f"Section: {section}",
        f"Current Content: {content}",
    ]
    if job_description:
        lines.append(f"Job Description: {job_description}")
    lines.extend(
        [
            "",
            "Provide specific, actionable suggestions to improve this resume section for ATS "
            "systems and human readers.",
            "Focus on: keywords, action verbs, quantifiable achievements, and clarity.",
            "Keep response under 150 words.",
        ]
    )
    return "\n".join(lines)


def build_messages(
    role: TaskRole,
    prompt: str,
    history: Sequence[ChatMessage] | None = None,
    *,
    history_window: int = 10,
) -> list[ChatMessage]:
    kept: list[ChatMessage] = []
    for msg in history or ():
        if msg.role not in {"user", "assistant"}:
            continue
        content = (msg.content or "").strip()
        if not content:
            continue
        kept.append(ChatMessage(role=msg.role, content=content))
    if history_window <= 0:
        kept = []
    else:
        kept = kept[-history_window:]

    return [
        ChatMessage(role="system", content=system_prompt_for(role)),
        *kept,
        ChatMessage(role="user", content=prompt),
    ]
