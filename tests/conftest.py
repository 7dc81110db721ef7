"""Shared fixtures: a small Lighthouse result and an AuditRef factory."""

from __future__ import annotations

import copy

import pytest

from audit_ranker.models import AuditRef


def make_ref(
    audit_id: str,
    score: float | None = 0.3,
    mode: str = "numeric",
    group: str | None = None,
    acronym: str | None = None,
    weight: float = 0.0,
    **result_fields,
) -> AuditRef:
    result = {
        "id": audit_id,
        "title": audit_id.replace("-", " ").title(),
        "score": score,
        "scoreDisplayMode": mode,
        **result_fields,
    }
    return AuditRef(result=result, group=group, acronym=acronym, weight=weight)


def make_metric(
    acronym: str,
    value: float | None,
    score: float | None,
    weight: float,
    p10: float | None = None,
    median: float | None = None,
    audit_id: str | None = None,
) -> AuditRef:
    fields = {"numericValue": value}
    if p10 is not None and median is not None:
        fields["scoringOptions"] = {"p10": p10, "median": median}
    return make_ref(
        audit_id or acronym.lower(),
        score=score,
        group="metrics",
        acronym=acronym,
        weight=weight,
        **fields,
    )


SAMPLE_LHR = {
    "lighthouseVersion": "10.4.0",
    "finalDisplayedUrl": "https://example.com/",
    "configSettings": {"formFactor": "mobile"},
    "audits": {
        "first-contentful-paint": {
            "id": "first-contentful-paint", "title": "First Contentful Paint",
            "score": 0.5, "scoreDisplayMode": "numeric", "numericValue": 3000,
            "displayValue": "3.0 s", "scoringOptions": {"p10": 1800, "median": 3000},
        },
        "largest-contentful-paint": {
            "id": "largest-contentful-paint", "title": "Largest Contentful Paint",
            "score": 0.5, "scoreDisplayMode": "numeric", "numericValue": 4000,
            "displayValue": "4.0 s", "scoringOptions": {"p10": 2500, "median": 4000},
        },
        "total-blocking-time": {
            "id": "total-blocking-time", "title": "Total Blocking Time",
            "score": 0.5, "scoreDisplayMode": "numeric", "numericValue": 600,
            "displayValue": "600 ms", "scoringOptions": {"p10": 200, "median": 600},
        },
        "cumulative-layout-shift": {
            "id": "cumulative-layout-shift", "title": "Cumulative Layout Shift",
            "score": 0.7, "scoreDisplayMode": "numeric", "numericValue": 0.1234,
            "displayValue": "0.123", "scoringOptions": {"p10": 0.1, "median": 0.25},
        },
        "speed-index": {
            "id": "speed-index", "title": "Speed Index",
            "score": 0.6, "scoreDisplayMode": "numeric", "numericValue": 4000,
        },
        "interactive": {
            "id": "interactive", "title": "Time to Interactive",
            "score": 0.4, "scoreDisplayMode": "numeric", "numericValue": 5200.4,
        },
        "render-blocking-resources": {
            "id": "render-blocking-resources", "title": "Eliminate render-blocking resources",
            "score": 0.3, "scoreDisplayMode": "metricSavings",
            "details": {"type": "opportunity", "overallSavingsMs": 1500, "items": []},
            "metricSavings": {"FCP": 1200, "LCP": 1500},
        },
        "unused-javascript": {
            "id": "unused-javascript", "title": "Reduce unused JavaScript",
            "score": 0.3, "scoreDisplayMode": "metricSavings",
            "details": {"type": "opportunity", "overallSavingsMs": 600, "items": []},
            "metricSavings": {"LCP": 300},
        },
        "dom-size": {
            "id": "dom-size", "title": "Avoid an excessive DOM size",
            "score": 0.3, "scoreDisplayMode": "numeric",
            "details": {"type": "table", "items": []},
        },
        "bootup-time": {
            "id": "bootup-time", "title": "Reduce JavaScript execution time",
            "score": 0.3, "scoreDisplayMode": "numeric", "guidanceLevel": 3,
            "metricSavings": {"TBT": 0},
        },
        "third-party-summary": {
            "id": "third-party-summary", "title": "Minimize third-party usage",
            "score": None, "scoreDisplayMode": "informative",
        },
        "uses-http2": {
            "id": "uses-http2", "title": "Use HTTP/2",
            "score": 1, "scoreDisplayMode": "numeric",
            "details": {"type": "opportunity", "overallSavingsMs": 0, "items": []},
        },
        "font-display": {
            "id": "font-display", "title": "Ensure text remains visible during webfont load",
            "score": None, "scoreDisplayMode": "notApplicable",
        },
        "performance-budget": {
            "id": "performance-budget", "title": "Performance budget",
            "score": None, "scoreDisplayMode": "informative",
            "details": {"type": "table", "items": []},
        },
        "screenshot-thumbnails": {
            "id": "screenshot-thumbnails", "title": "Screenshot Thumbnails",
            "score": None, "scoreDisplayMode": "informative",
            "details": {"type": "filmstrip", "items": []},
        },
    },
    "categories": {
        "performance": {
            "id": "performance",
            "title": "Performance",
            "score": 0.52,
            "auditRefs": [
                {"id": "first-contentful-paint", "weight": 10, "group": "metrics", "acronym": "FCP"},
                {
                    "id": "largest-contentful-paint", "weight": 25, "group": "metrics",
                    "acronym": "LCP",
                    "relevantAudits": ["render-blocking-resources", "unused-javascript"],
                },
                {
                    "id": "total-blocking-time", "weight": 30, "group": "metrics",
                    "acronym": "TBT", "relevantAudits": ["dom-size", "bootup-time"],
                },
                {"id": "cumulative-layout-shift", "weight": 25, "group": "metrics", "acronym": "CLS"},
                {"id": "speed-index", "weight": 10, "group": "metrics", "acronym": "SI"},
                {"id": "interactive", "weight": 0, "group": "hidden"},
                {"id": "render-blocking-resources", "weight": 0},
                {"id": "unused-javascript", "weight": 0},
                {"id": "dom-size", "weight": 0},
                {"id": "bootup-time", "weight": 0},
                {"id": "third-party-summary", "weight": 0},
                {"id": "uses-http2", "weight": 0},
                {"id": "font-display", "weight": 0},
                {"id": "performance-budget", "weight": 0, "group": "budgets"},
                {"id": "screenshot-thumbnails", "weight": 0, "group": "hidden"},
            ],
        },
    },
}


@pytest.fixture
def lhr() -> dict:
    return copy.deepcopy(SAMPLE_LHR)
