"""Bucket assignment, pass/fail checks, and ratings for performance audits."""

from __future__ import annotations

import math

from audit_ranker.config import RANKING, RankingConfig
from audit_ranker.errors import InvalidAuditDetails
from audit_ranker.models import AuditBucket, AuditRef, AuditResult, Rating, ScoreDisplayMode


def _is_savings_figure(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def classify(audit: AuditRef) -> AuditBucket:
    """Ungrouped audits are opportunities or diagnostics; grouped ones are excluded.

    An audit is a load opportunity when its details carry a numeric
    ``overallSavingsMs``.
    """
    if audit.group:
        return AuditBucket.EXCLUDED
    if _is_savings_figure(audit.result.overall_savings_ms):
        return AuditBucket.LOAD_OPPORTUNITY
    return AuditBucket.DIAGNOSTIC


def is_metric(audit: AuditRef, config: RankingConfig = RANKING) -> bool:
    return audit.group == config.metrics_group


def metric_audits(audits: list[AuditRef], config: RankingConfig = RANKING) -> list[AuditRef]:
    return [a for a in audits if is_metric(a, config)]


def show_as_passed(result: AuditResult, config: RankingConfig = RANKING) -> bool:
    mode = result.score_display_mode
    if mode in (ScoreDisplayMode.MANUAL, ScoreDisplayMode.NOT_APPLICABLE):
        return True
    if mode in (ScoreDisplayMode.ERROR, ScoreDisplayMode.INFORMATIVE):
        return False
    return (result.score or 0.0) >= config.pass_min_score


def calculate_rating(
    score: float | None, mode: ScoreDisplayMode, config: RankingConfig = RANKING
) -> Rating:
    if mode in (ScoreDisplayMode.MANUAL, ScoreDisplayMode.NOT_APPLICABLE):
        return Rating.PASS
    if mode == ScoreDisplayMode.ERROR:
        return Rating.ERROR
    if score is None:
        return Rating.FAIL
    if score >= config.pass_min_score:
        return Rating.PASS
    if score >= config.average_min_score:
        return Rating.AVERAGE
    return Rating.FAIL


def get_wasted_ms(audit: AuditRef) -> float:
    """Savings used to scale an opportunity's sparkline.

    Opportunities that errored carry no details; they get the smallest
    positive float so they stay last.
    """
    details = audit.result.details
    if not details:
        return math.ulp(0.0)
    savings = details.get("overallSavingsMs")
    if not _is_savings_figure(savings):
        raise InvalidAuditDetails(
            f"non-opportunity details passed for audit {audit.id!r}"
        )
    return float(savings)
