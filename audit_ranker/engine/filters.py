"""Per-metric audit filters: which audits each metric choice reveals."""

from __future__ import annotations

from audit_ranker.models import AuditRef, MetricFilter

ALL_METRICS = "All"


def metric_filters(metric_audits: list[AuditRef]) -> list[MetricFilter]:
    """Filter choices, "All" first, for metrics that declare relevant audits.

    Returns an empty list when no metric can filter.
    """
    filterable = [m for m in metric_audits if m.relevant_audits is not None]
    if not filterable:
        return []
    choices = [MetricFilter(acronym=ALL_METRICS)]
    for m in filterable:
        choices.append(
            MetricFilter(
                acronym=m.acronym or m.id,
                title=m.result.title,
                relevant_audits=list(m.relevant_audits or []),
            )
        )
    return choices


def filter_audits(
    audits: list[AuditRef], choices: list[MetricFilter], acronym: str = ALL_METRICS
) -> list[AuditRef]:
    """Audits left visible when the ``acronym`` choice is selected."""
    if acronym == ALL_METRICS:
        return list(audits)
    choice = next((c for c in choices if c.acronym == acronym), None)
    if choice is None:
        raise KeyError(f"unknown metric filter: {acronym}")
    relevant = set(choice.relevant_audits or [])
    return [a for a in audits if a.id in relevant]
