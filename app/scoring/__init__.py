from .catalog import CandidateItem, Catalog
from .engine import (
    AnalysisReport,
    EmptyCatalogError,
    PreferenceSpec,
    ScoredCandidate,
    ScoringEngine,
    ScoringRules,
)
from .keywords import extract_keywords, keyword_frequencies, overlap_ratio

__all__ = [
    "CandidateItem",
    "Catalog",
    "AnalysisReport",
    "EmptyCatalogError",
    "PreferenceSpec",
    "ScoredCandidate",
    "ScoringEngine",
    "ScoringRules",
    "extract_keywords",
    "keyword_frequencies",
    "overlap_ratio",
]
