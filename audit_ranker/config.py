"""Endpoints, environment settings, and ranking configuration."""

import os
from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

# --- APIs ---
PSI_API_URL = os.getenv(
    "PSI_API_URL", "https://www.googleapis.com/pagespeedonline/v5/runPagespeed"
)
PSI_API_KEY = os.getenv("PSI_API_KEY")
SCORECALC_URL = os.getenv(
    "SCORECALC_URL", "https://googlechrome.github.io/lighthouse/scorecalc/"
)

# --- HTTP ---
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "60"))

# --- Report defaults ---
DEFAULT_CATEGORY = "performance"
PSI_CATEGORIES = ["performance"]


# --- Ranking Configuration ---
class RankingConfig(BaseModel):
    """All classification, ranking and link-building parameters in one place."""

    # Ranker
    informative_tier: float = 100.0  # informative audits sort after every scored one
    default_guidance_level: int = 1

    # Rating thresholds
    pass_min_score: float = 0.9
    average_min_score: float = 0.5

    # Groups
    metrics_group: str = "metrics"

    # Scoring calculator
    legacy_metric_ids: list[str] = [
        "interactive",
        "first-cpu-idle",
        "first-meaningful-paint",
    ]
    two_decimal_metric_ids: list[str] = ["cumulative-layout-shift"]

    # Renderer hand-offs
    budget_audit_ids: list[str] = ["performance-budget", "timing-budget"]
    thumbnail_audit_id: str = "screenshot-thumbnails"


RANKING = RankingConfig()
