"""End-to-end tests for one ranking pass over a performance category."""
import pytest

from audit_ranker.engine.performance import PerformanceRanker
from audit_ranker.loaders.report import category_from_lhr, meta_from_lhr
from audit_ranker.models import AuditBucket


@pytest.fixture
def view(lhr):
    return PerformanceRanker().build(category_from_lhr(lhr), meta_from_lhr(lhr))


def test_classifications(view):
    buckets = view.classifications
    assert buckets["largest-contentful-paint"] == AuditBucket.METRIC
    assert buckets["render-blocking-resources"] == AuditBucket.LOAD_OPPORTUNITY
    assert buckets["uses-http2"] == AuditBucket.LOAD_OPPORTUNITY
    assert buckets["dom-size"] == AuditBucket.DIAGNOSTIC
    assert buckets["third-party-summary"] == AuditBucket.DIAGNOSTIC
    assert buckets["interactive"] == AuditBucket.EXCLUDED
    assert buckets["performance-budget"] == AuditBucket.EXCLUDED


def test_ranked_audits(view):
    assert [a.id for a in view.ranked_audits] == [
        "render-blocking-resources",
        "unused-javascript",
        "bootup-time",
        "dom-size",
        "third-party-summary",
    ]


def test_impacts(view):
    rbr = view.impacts["render-blocking-resources"]
    assert rbr.overall_impact == pytest.approx(0.4 * 10 + 0.4 * 25, abs=1e-4)
    assert view.impacts["dom-size"].overall_impact == 0
    assert "largest-contentful-paint" not in view.impacts


def test_passed_audits_keep_input_order(view):
    assert [a.id for a in view.passed_audits] == ["uses-http2", "font-display"]


def test_renderer_handoffs(view):
    assert [m.acronym for m in view.metric_audits] == ["FCP", "LCP", "TBT", "CLS", "SI"]
    assert [f.acronym for f in view.metric_filters] == ["All", "LCP", "TBT"]
    assert view.opportunity_scale == 1500
    assert view.budget_audit_ids == ["performance-budget"]
    assert view.thumbnail_audit is not None
    assert view.calculator_href.endswith(
        "#FCP=3000&LCP=4000&TBT=600&CLS=0.12&SI=4000&interactive=5200"
        "&device=mobile&version=10.4.0"
    )


def test_no_metrics_means_no_calculator_link(lhr):
    refs = lhr["categories"]["performance"]["auditRefs"]
    lhr["categories"]["performance"]["auditRefs"] = [r for r in refs if r.get("group") != "metrics"]
    view = PerformanceRanker().build(category_from_lhr(lhr))
    assert view.calculator_href is None
    assert view.metric_filters == []


def test_malformed_opportunity_does_not_block_ranking(lhr):
    lhr["audits"]["unused-javascript"]["details"]["overallSavingsMs"] = "600"
    view = PerformanceRanker().build(category_from_lhr(lhr))

    assert view.classifications["unused-javascript"] == AuditBucket.DIAGNOSTIC
    assert view.ranked_audits[0].id == "render-blocking-resources"
    assert "unused-javascript" in [a.id for a in view.ranked_audits]
    assert view.opportunity_scale == 1500
