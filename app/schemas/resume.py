from __future__ import annotations

from pydantic import Field

from app.schemas.common import CamelModel


class OptimizeRequest(CamelModel):
    section: str = Field(default="", max_length=100)
    content: str = Field(default="", max_length=50000)
    job_description: str | None = Field(default=None, alias="jobDescription", max_length=50000)


class OptimizeResponse(CamelModel):
    success: bool = True
    suggestion: str
    ats_score: int = Field(alias="atsScore", ge=0, le=100)
    keywords: list[str]
    improvements: list[str]


class AnalyzeRequest(CamelModel):
    content: str = Field(default="", max_length=50000)


class Analysis(CamelModel):
    word_count: int = Field(alias="wordCount")
    bullet_points: int = Field(alias="bulletPoints")
    action_verbs: int = Field(alias="actionVerbs")
    numbers: int
    ats_score: int = Field(alias="atsScore", ge=0, le=100)


class AnalyzeResponse(CamelModel):
    success: bool = True
    analysis: Analysis
    recommendations: list[str]


class TemplateRequest(CamelModel):
    template_type: str = Field(default="general", alias="templateType", max_length=100)


class ResumeTemplate(CamelModel):
    sections: list[str]
    tips: str


class TemplateResponse(CamelModel):
    success: bool = True
    template: ResumeTemplate
