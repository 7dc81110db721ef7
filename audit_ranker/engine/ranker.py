"""Urgency ordering for failing opportunities and diagnostics."""

from __future__ import annotations

from functools import cmp_to_key

from audit_ranker.config import RANKING, RankingConfig
from audit_ranker.engine.impact import estimate_impact
from audit_ranker.models import AuditImpact, AuditRef, ScoreDisplayMode


def failure_tier(audit: AuditRef, config: RankingConfig = RANKING) -> float:
    """Informative audits sit below every scored audit; an unscored one counts as 0."""
    if audit.result.score_display_mode == ScoreDisplayMode.INFORMATIVE:
        return config.informative_tier
    return float(audit.result.score or 0.0)


def guidance_level(audit: AuditRef, config: RankingConfig = RANKING) -> int:
    return audit.result.guidance_level or config.default_guidance_level


def compare(
    a: AuditRef,
    b: AuditRef,
    a_impact: AuditImpact,
    b_impact: AuditImpact,
    config: RankingConfig = RANKING,
) -> float:
    """Negative when ``a`` is more urgent than ``b``."""
    tier_a = failure_tier(a, config)
    tier_b = failure_tier(b, config)
    if tier_a != tier_b:
        return tier_a - tier_b

    if a_impact.overall_impact != b_impact.overall_impact:
        return b_impact.overall_impact - a_impact.overall_impact

    if (
        a_impact.overall_impact == 0
        and b_impact.overall_impact == 0
        and a_impact.overall_linear_impact != b_impact.overall_linear_impact
    ):
        return b_impact.overall_linear_impact - a_impact.overall_linear_impact

    return guidance_level(b, config) - guidance_level(a, config)


def rank(
    audits: list[AuditRef],
    metric_audits: list[AuditRef],
    impacts: dict[str, AuditImpact] | None = None,
    config: RankingConfig = RANKING,
) -> list[AuditRef]:
    """Most urgent audits first. Full ties keep their input order.

    ``impacts`` may carry estimates already computed for this pass; missing
    entries are estimated here.
    """
    known = impacts or {}
    estimates = {
        a.id: known.get(a.id) or estimate_impact(a, metric_audits) for a in audits
    }

    def _cmp(a: AuditRef, b: AuditRef) -> float:
        return compare(a, b, estimates[a.id], estimates[b.id], config)

    return sorted(audits, key=cmp_to_key(_cmp))
