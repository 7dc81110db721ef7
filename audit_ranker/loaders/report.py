"""Lighthouse report loader: local JSON files and the PageSpeed Insights API."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import httpx
from pydantic import ValidationError

from audit_ranker.config import (
    DEFAULT_CATEGORY,
    HTTP_TIMEOUT,
    PSI_API_KEY,
    PSI_API_URL,
    PSI_CATEGORIES,
)
from audit_ranker.errors import ReportLoadError
from audit_ranker.models import AuditRef, Category, ReportMeta

logger = logging.getLogger(__name__)


def _unwrap(data: dict) -> dict:
    """PageSpeed responses nest the Lighthouse result one level down."""
    if "lighthouseResult" in data:
        return data["lighthouseResult"]
    return data


def category_from_lhr(lhr: dict, category_id: str = DEFAULT_CATEGORY) -> Category:
    """Join a category's audit refs with their audit results."""
    lhr = _unwrap(lhr)
    categories = lhr.get("categories") or {}
    if category_id not in categories:
        raise ReportLoadError(f"report has no {category_id!r} category")

    raw = categories[category_id]
    audits = lhr.get("audits") or {}

    refs: list[AuditRef] = []
    try:
        for ref in raw.get("auditRefs", []):
            result = audits.get(ref.get("id"))
            if result is None:
                logger.warning("audit ref %s has no result, skipping", ref.get("id"))
                continue
            refs.append(
                AuditRef(
                    result=result,
                    group=ref.get("group"),
                    acronym=ref.get("acronym"),
                    relevant_audits=ref.get("relevantAudits"),
                    weight=float(ref.get("weight", 0) or 0),
                )
            )

        return Category(
            id=raw.get("id", category_id),
            title=raw.get("title", ""),
            description=raw.get("description", "") or "",
            score=raw.get("score"),
            audit_refs=refs,
        )
    except (ValidationError, TypeError, ValueError) as e:
        raise ReportLoadError(f"malformed {category_id!r} category: {e}") from e


def meta_from_lhr(lhr: dict) -> ReportMeta:
    lhr = _unwrap(lhr)
    settings = lhr.get("configSettings") or {}
    return ReportMeta(
        form_factor=settings.get("formFactor"),
        lighthouse_version=lhr.get("lighthouseVersion"),
        final_url=lhr.get("finalDisplayedUrl") or lhr.get("finalUrl"),
    )


def load_report(path: str | Path) -> dict:
    """Read a Lighthouse result (or a saved PageSpeed response) from disk."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ReportLoadError(f"cannot read report {path}: {e}") from e

    if not isinstance(data, dict):
        raise ReportLoadError(f"report {path} is not a JSON object")
    return _unwrap(data)


def fetch_psi_report(
    url: str,
    strategy: str = "mobile",
    api_key: str | None = PSI_API_KEY,
    client: httpx.Client | None = None,
) -> dict:
    """Run PageSpeed Insights against ``url`` and return its Lighthouse result."""
    params: list[tuple[str, str]] = [("url", url), ("strategy", strategy)]
    params += [("category", c) for c in PSI_CATEGORIES]
    if api_key:
        params.append(("key", api_key))

    logger.info("Fetching PageSpeed report for %s (%s)", url, strategy)
    try:
        if client is None:
            resp = httpx.get(PSI_API_URL, params=params, timeout=HTTP_TIMEOUT)
        else:
            resp = client.get(PSI_API_URL, params=params)
        resp.raise_for_status()
        data = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        raise ReportLoadError(f"PageSpeed request for {url} failed: {e}") from e

    if not isinstance(data, dict) or "lighthouseResult" not in data:
        raise ReportLoadError(f"PageSpeed response for {url} has no lighthouseResult")
    return data["lighthouseResult"]
