"""Link to the interactive scoring calculator, prefilled with metric values."""

from __future__ import annotations

import math
from urllib.parse import urlencode

from audit_ranker.config import RANKING, SCORECALC_URL, RankingConfig
from audit_ranker.engine.classifier import metric_audits
from audit_ranker.models import AuditRef, ReportMeta


def _round_half_up(value: float, decimals: int = 0) -> float:
    factor = 10**decimals
    return math.floor(value * factor + 0.5) / factor


def _format_number(value: float) -> str:
    """Render like a JavaScript number: no trailing ``.0`` on integral values."""
    if value == int(value):
        return str(int(value))
    return repr(value)


def calculator_metrics(
    audits: list[AuditRef], config: RankingConfig = RANKING
) -> list[AuditRef]:
    """Metric-group audits plus the legacy metrics whenever they are present."""
    metrics = metric_audits(audits, config)
    seen = {m.id for m in metrics}
    for legacy_id in config.legacy_metric_ids:
        audit = next((a for a in audits if a.id == legacy_id), None)
        if audit is not None and audit.id not in seen:
            metrics.append(audit)
            seen.add(audit.id)
    return metrics


def metric_param_value(audit: AuditRef, config: RankingConfig = RANKING) -> str:
    value = audit.result.numeric_value
    if value is None or isinstance(value, bool) or not math.isfinite(value):
        return "null"
    if audit.id in config.two_decimal_metric_ids:
        return _format_number(_round_half_up(value, 2))
    return _format_number(_round_half_up(value))


def calculator_params(
    audits: list[AuditRef],
    meta: ReportMeta | None = None,
    config: RankingConfig = RANKING,
) -> list[tuple[str, str]]:
    params = [
        (m.acronym or m.id, metric_param_value(m, config))
        for m in calculator_metrics(audits, config)
    ]
    if meta is not None:
        params.append(("device", meta.form_factor or ""))
        params.append(("version", meta.lighthouse_version or ""))
    return params


def scoring_calculator_href(
    audits: list[AuditRef],
    meta: ReportMeta | None = None,
    config: RankingConfig = RANKING,
    base_url: str = SCORECALC_URL,
) -> str:
    """Calculator URL with the metric values carried in its fragment."""
    query = urlencode(calculator_params(audits, meta, config))
    return f"{base_url.split('#', 1)[0]}#{query}"
