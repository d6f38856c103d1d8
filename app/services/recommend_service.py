from __future__ import annotations

import json
import logging

from app.core.errors import ApiError
from app.core.state import AppState
from app.schemas.recommend import (
    Preferences,
    RateRequest,
    RateResponse,
    Recommendation,
    RecommendRequest,
    RecommendResponse,
    RecommenderStats,
    StatsResponse,
)
from app.scoring.engine import EmptyCatalogError, PreferenceSpec, ScoredCandidate

logger = logging.getLogger("app.recommend")


def _to_recommendation(candidate: ScoredCandidate) -> Recommendation:
    item = candidate.item
    return Recommendation(
        id=item.id,
        category=item.category,
        title=item.title,
        genre=item.genre,
        year=item.year,
        rating=item.rating,
        artist=item.artist,
        score=candidate.score,
        justification=candidate.justification,
    )


def recommend(state: AppState, payload: RecommendRequest) -> RecommendResponse:
    category = payload.type or "movie"
    preferences = payload.preferences or Preferences()
    prefs = PreferenceSpec(
        min_year=preferences.min_year,
        min_rating=preferences.min_rating,
        query=(preferences.query or "").strip() or None,
    )
    engine = state.engine()
    try:
        ranked = engine.top_k(state.catalog.for_category(category), prefs, k=payload.limit)
    except EmptyCatalogError as exc:
        logger.error("recommend_empty_catalog type=%s", category)
        raise ApiError(str(exc)) from exc

    logger.info(
        json.dumps(
            {
                "event": "recommend_request",
                "type": category,
                "min_year": prefs.min_year,
                "min_rating": prefs.min_rating,
                "has_query": prefs.query is not None,
                "top_ids": [c.item.id for c in ranked],
            }
        )
    )
    return RecommendResponse(
        recommendations=[_to_recommendation(c) for c in ranked],
        stats=RecommenderStats(**engine.catalog_stats()),
    )


def rate(state: AppState, payload: RateRequest) -> RateResponse:
    if not payload.item_id or payload.rating is None:
        raise ApiError("itemId and rating are required")

    known = state.catalog.find(payload.item_id) is not None
    logger.info(
        json.dumps(
            {
                "event": "recommend_rating",
                "user_id": payload.user_id or "anonymous",
                "item_id": payload.item_id,
                "rating": payload.rating,
                "known_item": known,
            }
        )
    )
    return RateResponse(message="Rating recorded")


def stats(state: AppState) -> StatsResponse:
    engine = state.engine()
    return StatsResponse(stats=RecommenderStats(**engine.catalog_stats(total_items=len(state.catalog))))
