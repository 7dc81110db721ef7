"""Estimated score impact of fully realizing an audit's metric savings."""

from __future__ import annotations

import logging

from audit_ranker.engine.score_model import compute_score
from audit_ranker.models import AuditImpact, AuditRef, MetricImpact

logger = logging.getLogger(__name__)


def _find_metric(acronym: str, metric_audits: list[AuditRef]) -> AuditRef | None:
    return next((m for m in metric_audits if m.acronym == acronym), None)


def metric_impacts(audit: AuditRef, metric_audits: list[AuditRef]) -> list[MetricImpact]:
    """Per-metric breakdown for every metric the audit's savings can be scored against.

    Metrics missing a ref, a score, a non-zero value, or a scoring curve are
    skipped; there is not enough information to estimate them.
    """
    savings_by_metric = audit.result.metric_savings
    if not savings_by_metric:
        return []

    breakdown: list[MetricImpact] = []
    for acronym, savings in savings_by_metric.items():
        if savings is None:
            continue

        metric = _find_metric(acronym, metric_audits)
        if metric is None:
            logger.debug("%s: no metric audit for %s", audit.id, acronym)
            continue
        if metric.result.score is None:
            logger.debug("%s: metric %s is unscored", audit.id, acronym)
            continue

        value = metric.result.numeric_value
        if not value:
            logger.debug("%s: metric %s has no measured value", audit.id, acronym)
            continue

        scoring_options = metric.result.scoring_options
        if scoring_options is None:
            logger.debug("%s: metric %s has no scoring curve", audit.id, acronym)
            continue

        breakdown.append(
            MetricImpact(
                acronym=acronym,
                savings=savings,
                metric_value=value,
                current_score=metric.result.score,
                new_score=compute_score(scoring_options, value - savings),
                weight=metric.weight,
            )
        )
    return breakdown


def estimate_impact(audit: AuditRef, metric_audits: list[AuditRef]) -> AuditImpact:
    """Sum of weighted score deltas plus a proportional-savings fallback.

    Both totals are only meaningful relative to other audits.
    """
    if audit.result.metric_savings is None:
        return AuditImpact()

    overall_impact = 0.0
    overall_linear_impact = 0.0
    for m in metric_impacts(audit, metric_audits):
        overall_linear_impact += m.linear_impact
        overall_impact += m.weighted_impact

    return AuditImpact(
        overall_impact=overall_impact,
        overall_linear_impact=overall_linear_impact,
    )
