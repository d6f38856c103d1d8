from __future__ import annotations

from typing import Literal

from pydantic import Field

from app.schemas.common import CamelModel


class Preferences(CamelModel):
    min_year: int | None = Field(default=None, alias="minYear")
    min_rating: float | None = Field(default=None, alias="minRating", ge=0.0, le=10.0)
    query: str | None = Field(default=None, max_length=500)


class RecommendRequest(CamelModel):
    type: Literal["movie", "music"] | None = "movie"
    preferences: Preferences | None = None
    limit: int = Field(default=3, ge=1, le=10)


class Recommendation(CamelModel):
    id: int
    category: str
    title: str
    genre: str
    year: int
    rating: float | None = None
    artist: str | None = None
    score: int = Field(ge=0, le=100)
    justification: str


class RecommenderStats(CamelModel):
    accuracy: float
    training_size: int = Field(alias="trainingSize")
    model_type: str = Field(alias="modelType")
    total_users: int | None = Field(default=None, alias="totalUsers")
    total_items: int | None = Field(default=None, alias="totalItems")


class RecommendResponse(CamelModel):
    success: bool = True
    recommendations: list[Recommendation]
    stats: RecommenderStats


class RateRequest(CamelModel):
    item_id: int | None = Field(default=None, alias="itemId")
    rating: float | None = None
    user_id: str | None = Field(default=None, alias="userId", max_length=200)


class RateResponse(CamelModel):
    success: bool = True
    message: str


class StatsResponse(CamelModel):
    success: bool = True
    stats: RecommenderStats
