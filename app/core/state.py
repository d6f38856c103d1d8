from __future__ import annotations

import random
from dataclasses import dataclass, field

from fastapi import Request

from app.ai.factory import get_ai_capability
from app.ai.types import AICapability
from app.core.view_counter import ViewCounter
from app.scoring.catalog import Catalog
from app.scoring.engine import ScoringEngine, ScoringRules


@dataclass
class AppState:
    catalog: Catalog = field(default_factory=Catalog)
    views: ViewCounter = field(default_factory=ViewCounter)
    capability: AICapability | None = None
    rng: random.Random = field(default_factory=random.Random)
    rules: ScoringRules = field(default_factory=ScoringRules.from_config)

    def engine(self) -> ScoringEngine:
        return ScoringEngine(rng=self.rng, rules=self.rules)


def build_app_state() -> AppState:
    return AppState(capability=get_ai_capability())


def get_app_state(request: Request) -> AppState:
    return request.app.state.portfolio
