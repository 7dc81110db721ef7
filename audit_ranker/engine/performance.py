"""Orchestrator: classifies, scores and ranks a performance category."""

from __future__ import annotations

import logging

from audit_ranker.config import RANKING, RankingConfig
from audit_ranker.engine.calculator import scoring_calculator_href
from audit_ranker.engine.classifier import (
    classify,
    get_wasted_ms,
    is_metric,
    metric_audits,
    show_as_passed,
)
from audit_ranker.engine.filters import metric_filters
from audit_ranker.engine.impact import estimate_impact
from audit_ranker.engine.ranker import rank
from audit_ranker.models import AuditBucket, Category, PerformanceView, ReportMeta

logger = logging.getLogger(__name__)


class PerformanceRanker:
    """Turn a performance category into the lists a report renderer consumes."""

    def __init__(self, config: RankingConfig = RANKING) -> None:
        self.config = config

    def classifications(self, category: Category) -> dict[str, AuditBucket]:
        buckets: dict[str, AuditBucket] = {}
        for audit in category.audit_refs:
            if is_metric(audit, self.config):
                buckets[audit.id] = AuditBucket.METRIC
            else:
                buckets[audit.id] = classify(audit)
        return buckets

    def build(self, category: Category, meta: ReportMeta | None = None) -> PerformanceView:
        metrics = metric_audits(category.audit_refs, self.config)
        buckets = self.classifications(category)

        classified = [
            a for a in category.audit_refs
            if buckets[a.id] in (AuditBucket.LOAD_OPPORTUNITY, AuditBucket.DIAGNOSTIC)
        ]
        impacts = {a.id: estimate_impact(a, metrics) for a in classified}

        failing = [a for a in classified if not show_as_passed(a.result, self.config)]
        passed = [a for a in classified if show_as_passed(a.result, self.config)]
        ranked = rank(failing, metrics, impacts, self.config)

        opportunities = [
            a for a in failing if buckets[a.id] == AuditBucket.LOAD_OPPORTUNITY
        ]
        scale = max((get_wasted_ms(a) for a in opportunities), default=0.0)

        budget_ids = [
            a.id for a in category.audit_refs
            if a.id in self.config.budget_audit_ids and a.result.details
        ]
        thumbnail = next(
            (a for a in category.audit_refs if a.id == self.config.thumbnail_audit_id),
            None,
        )

        logger.debug(
            "%s: %d metrics, %d ranked, %d passed",
            category.id, len(metrics), len(ranked), len(passed),
        )

        return PerformanceView(
            category_id=category.id,
            metric_audits=metrics,
            classifications=buckets,
            impacts=impacts,
            ranked_audits=ranked,
            passed_audits=passed,
            metric_filters=metric_filters(metrics),
            opportunity_scale=scale,
            calculator_href=(
                scoring_calculator_href(category.audit_refs, meta, self.config)
                if metrics else None
            ),
            budget_audit_ids=budget_ids,
            thumbnail_audit=thumbnail,
        )
