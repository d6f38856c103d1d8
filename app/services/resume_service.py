from __future__ import annotations

import json
import logging

from app.ai.degrading import AITask, respond
from app.ai.prompts import build_resume_prompt
from app.core.config.scoring import get_scoring_number
from app.core.errors import ApiError
from app.core.hashing import short_hash
from app.core.state import AppState
from app.schemas.resume import (
    Analysis,
    AnalyzeRequest,
    AnalyzeResponse,
    OptimizeRequest,
    OptimizeResponse,
    ResumeTemplate,
    TemplateRequest,
    TemplateResponse,
)
from app.scoring.keywords import extract_keywords

logger = logging.getLogger("app.resume")

TEMPLATES: dict[str, ResumeTemplate] = {
    "software-engineer": ResumeTemplate(
        sections=["Summary", "Technical Skills", "Experience", "Projects", "Education"],
        tips="Focus on technical achievements and quantifiable impact",
    ),
    "data-scientist": ResumeTemplate(
        sections=["Summary", "Technical Skills", "Experience", "Research", "Education", "Publications"],
        tips="Highlight ML/AI projects and statistical analysis skills",
    ),
    "product-manager": ResumeTemplate(
        sections=["Summary", "Experience", "Skills", "Achievements", "Education"],
        tips="Emphasize cross-functional leadership and product metrics",
    ),
    "general": ResumeTemplate(
        sections=["Summary", "Experience", "Skills", "Education", "Achievements"],
        tips="Tailor content to match job requirements",
    ),
}


async def optimize(state: AppState, payload: OptimizeRequest) -> OptimizeResponse:
    section = payload.section.strip()
    content = payload.content.strip()
    if not section or not content:
        raise ApiError("Section and content are required")
    job_description = (payload.job_description or "").strip() or None

    result = await respond(
        AITask(
            role="resume-suggestion",
            prompt=build_resume_prompt(section, content, job_description),
            section=section,
        ),
        state.capability,
        rng=state.rng,
    )

    engine = state.engine()
    ats_score = engine.optimize_ats_score(content, job_description)
    logger.info(
        json.dumps(
            {
                "event": "resume_optimize",
                "section": section,
                "content_len": len(content),
                "content_hash": short_hash(content),
                "has_job_description": job_description is not None,
                "suggestion_kind": result.kind,
                "ats_score": ats_score,
            }
        )
    )
    return OptimizeResponse(
        suggestion=result.text,
        ats_score=ats_score,
        keywords=extract_keywords(content, int(get_scoring_number("resume.keywords.top_n", 10))),
        improvements=engine.optimize_improvements(ats_score),
    )


def analyze(state: AppState, payload: AnalyzeRequest) -> AnalyzeResponse:
    report = state.engine().analyze_text(payload.content)
    logger.info(
        json.dumps(
            {
                "event": "resume_analyze",
                "word_count": report.word_count,
                "ats_score": report.ats_score,
                "recommendations": len(report.recommendations),
            }
        )
    )
    return AnalyzeResponse(
        analysis=Analysis(
            word_count=report.word_count,
            bullet_points=report.bullet_points,
            action_verbs=report.action_verbs,
            numbers=report.numbers,
            ats_score=report.ats_score,
        ),
        recommendations=list(report.recommendations),
    )


def template(payload: TemplateRequest) -> TemplateResponse:
    key = (payload.template_type or "").strip().lower()
    return TemplateResponse(template=TEMPLATES.get(key, TEMPLATES["general"]))
