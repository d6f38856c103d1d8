from __future__ import annotations

import random
import re
from dataclasses import dataclass, field
from typing import Sequence

from app.core.config.scoring import get_scoring_number
from app.scoring.catalog import CandidateItem
from app.scoring.keywords import overlap_ratio

_BULLET_RE = re.compile(r"[•·▪▫◦‣⁃]")
_ACTION_VERB_RE = re.compile(
    r"\b(achieved|built|created|developed|enhanced|improved|led|managed|optimized|reduced|streamlined)\b",
    re.IGNORECASE,
)
_NUMBER_RE = re.compile(r"\d+")

MODEL_TYPE = "Collaborative Filtering + Content-Based Hybrid"

MSG_ADD_DETAIL = "Consider adding more detail to your resume"
MSG_BE_CONCISE = "Try to be more concise - aim for 1-2 pages"
MSG_ACTION_VERBS = "Use more action verbs to start your bullet points"
MSG_QUANTIFY = "Add quantifiable achievements and metrics"
MSG_OPTIMIZE_KEYWORDS = "Optimize keywords for ATS systems"
MSG_WELL_OPTIMIZED = "Your resume is well-optimized!"


class EmptyCatalogError(ValueError):
    pass


@dataclass(frozen=True)
class PreferenceSpec:
    min_year: int | None = None
    min_rating: float | None = None
    query: str | None = None


@dataclass(frozen=True)
class ScoredCandidate:
    item: CandidateItem
    score: int
    justification: str


@dataclass(frozen=True)
class AnalysisReport:
    word_count: int
    bullet_points: int
    action_verbs: int
    numbers: int
    ats_score: int
    recommendations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ScoringRules:
    base_min: float = 50.0
    base_max: float = 100.0
    min_year_bonus: float = 10.0
    min_rating_bonus: float = 15.0
    query_bonus: float = 20.0
    analysis_ats_min: float = 70.0
    analysis_ats_spread: float = 25.0
    min_words: int = 300
    max_words: int = 800
    min_action_verbs: int = 5
    min_numbers: int = 3
    min_ats: int = 80
    optimize_ats_base: float = 75.0
    optimize_ats_spread: float = 20.0
    jd_base: float = 60.0
    jd_overlap_weight: float = 35.0
    jd_jitter: float = 10.0
    jd_cap: float = 95.0
    keyword_threshold: int = 80

    @classmethod
    def from_config(cls) -> "ScoringRules":
        d = cls()
        return cls(
            base_min=get_scoring_number("recommendation.base_score.min", d.base_min),
            base_max=get_scoring_number("recommendation.base_score.max", d.base_max),
            min_year_bonus=get_scoring_number("recommendation.bonus.min_year", d.min_year_bonus),
            min_rating_bonus=get_scoring_number("recommendation.bonus.min_rating", d.min_rating_bonus),
            query_bonus=get_scoring_number("recommendation.bonus.query_overlap", d.query_bonus),
            analysis_ats_min=get_scoring_number("resume.analysis.ats_min", d.analysis_ats_min),
            analysis_ats_spread=get_scoring_number("resume.analysis.ats_spread", d.analysis_ats_spread),
            min_words=int(get_scoring_number("resume.analysis.min_words", d.min_words)),
            max_words=int(get_scoring_number("resume.analysis.max_words", d.max_words)),
            min_action_verbs=int(get_scoring_number("resume.analysis.min_action_verbs", d.min_action_verbs)),
            min_numbers=int(get_scoring_number("resume.analysis.min_numbers", d.min_numbers)),
            min_ats=int(get_scoring_number("resume.analysis.min_ats", d.min_ats)),
            optimize_ats_base=get_scoring_number("resume.optimize.ats_base", d.optimize_ats_base),
            optimize_ats_spread=get_scoring_number("resume.optimize.ats_spread", d.optimize_ats_spread),
            jd_base=get_scoring_number("resume.optimize.jd_base", d.jd_base),
            jd_overlap_weight=get_scoring_number("resume.optimize.jd_overlap_weight", d.jd_overlap_weight),
            jd_jitter=get_scoring_number("resume.optimize.jd_jitter", d.jd_jitter),
            jd_cap=get_scoring_number("resume.optimize.jd_cap", d.jd_cap),
            keyword_threshold=int(get_scoring_number("resume.optimize.keyword_threshold", d.keyword_threshold)),
        )


def _clamp_score(value: float) -> int:
    return int(round(min(100.0, max(0.0, value))))


class ScoringEngine:
    """Soft-confidence scoring for recommendations and resume text.

    Every score starts from a random prior and adds fixed bonuses, so results
    read as "likely matches" rather than model output. Pass a seeded
    ``random.Random`` to make runs reproducible.
    """

    def __init__(self, rng: random.Random | None = None, rules: ScoringRules | None = None):
        self._rng = rng or random.Random()
        self._rules = rules or ScoringRules.from_config()

    @property
    def rules(self) -> ScoringRules:
        return self._rules

    def score(
        self,
        candidates: Sequence[CandidateItem],
        prefs: PreferenceSpec | None = None,
    ) -> list[ScoredCandidate]:
        if not candidates:
            raise EmptyCatalogError("No candidates available for scoring.")
        prefs = prefs or PreferenceSpec()

        scored = []
        for item in candidates:
            raw = self._rng.uniform(self._rules.base_min, self._rules.base_max)
            score = _clamp_score(raw + self._constraint_bonus(item, prefs))
            scored.append(
                ScoredCandidate(
                    item=item,
                    score=score,
                    justification=self._justification(item.category, score),
                )
            )
        # stable: ties keep catalog order
        return sorted(scored, key=lambda candidate: -candidate.score)

    def top_k(
        self,
        candidates: Sequence[CandidateItem],
        prefs: PreferenceSpec | None = None,
        k: int = 3,
    ) -> list[ScoredCandidate]:
        return self.score(candidates, prefs)[: max(k, 0)]

    def _constraint_bonus(self, item: CandidateItem, prefs: PreferenceSpec) -> float:
        bonus = 0.0
        if prefs.min_year is not None and item.year >= prefs.min_year:
            bonus += self._rules.min_year_bonus
        if prefs.min_rating is not None and item.rating is not None and item.rating >= prefs.min_rating:
            bonus += self._rules.min_rating_bonus
        if prefs.query:
            bonus += self._rules.query_bonus * overlap_ratio(item.describe(), prefs.query)
        return bonus

    def _justification(self, category: str, score: int) -> str:
        reasons = [
            f"Based on your preferences ({score}% match)",
            "Highly rated by users with similar taste",
            f"Matches your {category} preferences",
            "Recommended based on ML analysis",
            "Popular in your preferred genre",
        ]
        return self._rng.choice(reasons)

    def catalog_stats(self, total_items: int | None = None) -> dict[str, object]:
        stats: dict[str, object] = {
            "accuracy": get_scoring_number("recommendation.stats.accuracy_min", 85)
            + self._rng.random() * get_scoring_number("recommendation.stats.accuracy_spread", 10),
            "trainingSize": int(get_scoring_number("recommendation.stats.training_size_min", 500))
            + self._rng.randrange(int(get_scoring_number("recommendation.stats.training_size_spread", 1000))),
            "modelType": MODEL_TYPE,
        }
        if total_items is not None:
            stats["totalUsers"] = 50 + self._rng.randrange(100)
            stats["totalItems"] = total_items
        return stats

    def analyze_text(self, content: str) -> AnalysisReport:
        text = content or ""
        word_count = len(text.split())
        bullet_points = len(_BULLET_RE.findall(text))
        action_verbs = len(_ACTION_VERB_RE.findall(text))
        numbers = len(_NUMBER_RE.findall(text))
        ats_score = _clamp_score(
            self._rules.analysis_ats_min + self._rng.random() * self._rules.analysis_ats_spread
        )
        return AnalysisReport(
            word_count=word_count,
            bullet_points=bullet_points,
            action_verbs=action_verbs,
            numbers=numbers,
            ats_score=ats_score,
            recommendations=self._recommendations(word_count, action_verbs, numbers, ats_score),
        )

    def _recommendations(self, word_count: int, action_verbs: int, numbers: int, ats_score: int) -> list[str]:
        rules = self._rules
        recs = []
        if word_count < rules.min_words:
            recs.append(MSG_ADD_DETAIL)
        elif word_count > rules.max_words:
            recs.append(MSG_BE_CONCISE)
        if action_verbs < rules.min_action_verbs:
            recs.append(MSG_ACTION_VERBS)
        if numbers < rules.min_numbers:
            recs.append(MSG_QUANTIFY)
        if ats_score < rules.min_ats:
            recs.append(MSG_OPTIMIZE_KEYWORDS)
        return recs or [MSG_WELL_OPTIMIZED]

    def optimize_ats_score(self, content: str, job_description: str | None = None) -> int:
        rules = self._rules
        if job_description:
            overlap = overlap_ratio(content, job_description)
            raw = rules.jd_base + overlap * rules.jd_overlap_weight + self._rng.random() * rules.jd_jitter
            return _clamp_score(min(rules.jd_cap, raw))
        return _clamp_score(rules.optimize_ats_base + self._rng.random() * rules.optimize_ats_spread)

    def optimize_improvements(self, ats_score: int) -> list[str]:
        return [
            "Add more relevant keywords" if ats_score < self._rules.keyword_threshold else "Keywords are well-optimized",
            "Consider adding quantifiable achievements",
            "Ensure consistent formatting",
        ]
