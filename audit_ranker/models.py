"""Pydantic v2 models for audit results, category refs, and ranking output."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class ScoreDisplayMode(str, Enum):
    BINARY = "binary"
    NUMERIC = "numeric"
    INFORMATIVE = "informative"
    NOT_APPLICABLE = "notApplicable"
    ERROR = "error"
    METRIC_SAVINGS = "metricSavings"
    MANUAL = "manual"


class AuditBucket(str, Enum):
    METRIC = "metric"
    LOAD_OPPORTUNITY = "load-opportunity"
    DIAGNOSTIC = "diagnostic"
    EXCLUDED = "excluded"


class Rating(str, Enum):
    PASS = "pass"
    AVERAGE = "average"
    FAIL = "fail"
    ERROR = "error"


class _ReportModel(BaseModel):
    """Read-only model that accepts Lighthouse's camelCase keys."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class ScoringOptions(_ReportModel):
    p10: float  # target point, scores 0.9
    median: float  # control point, scores 0.5


class AuditResult(_ReportModel):
    id: str
    title: str = ""
    description: str = ""
    score: float | None = None
    score_display_mode: ScoreDisplayMode = Field(
        ScoreDisplayMode.NUMERIC, alias="scoreDisplayMode"
    )
    display_value: str | None = Field(None, alias="displayValue")
    error_message: str | None = Field(None, alias="errorMessage")
    details: dict[str, Any] | None = None
    guidance_level: int | None = Field(None, alias="guidanceLevel", ge=1)
    metric_savings: dict[str, float | None] | None = Field(None, alias="metricSavings")
    numeric_value: float | None = Field(None, alias="numericValue")
    numeric_unit: str | None = Field(None, alias="numericUnit")
    scoring_options: ScoringOptions | None = Field(None, alias="scoringOptions")

    @field_validator("score")
    @classmethod
    def _score_in_unit_range(cls, v: float | None) -> float | None:
        if v is not None and not 0.0 <= v <= 1.0:
            raise ValueError(f"score must be within [0, 1], got {v}")
        return v

    @field_validator("metric_savings")
    @classmethod
    def _savings_non_negative(
        cls, v: dict[str, float | None] | None
    ) -> dict[str, float | None] | None:
        if v:
            for acronym, savings in v.items():
                if savings is not None and savings < 0:
                    raise ValueError(f"metric savings for {acronym} must be >= 0")
        return v

    @property
    def overall_savings_ms(self) -> Any:
        """Raw ``overallSavingsMs`` from details, or None when undefined."""
        if not self.details:
            return None
        return self.details.get("overallSavingsMs")


class AuditRef(_ReportModel):
    result: AuditResult
    group: str | None = None
    acronym: str | None = None
    relevant_audits: list[str] | None = Field(None, alias="relevantAudits")
    weight: float = 0.0

    @property
    def id(self) -> str:
        return self.result.id


class Category(_ReportModel):
    id: str
    title: str = ""
    description: str = ""
    score: float | None = None
    audit_refs: list[AuditRef] = Field(default_factory=list, alias="auditRefs")


class ReportMeta(_ReportModel):
    form_factor: str | None = Field(None, alias="formFactor")
    lighthouse_version: str | None = Field(None, alias="lighthouseVersion")
    final_url: str | None = Field(None, alias="finalUrl")


class AuditImpact(BaseModel):
    overall_impact: float = 0.0
    overall_linear_impact: float = 0.0


class MetricImpact(BaseModel):
    """One metric's share of an audit's estimated impact."""

    acronym: str
    savings: float
    metric_value: float
    current_score: float
    new_score: float
    weight: float

    @computed_field  # type: ignore[prop-decorator]
    @property
    def weighted_impact(self) -> float:
        return (self.new_score - self.current_score) * self.weight

    @computed_field  # type: ignore[prop-decorator]
    @property
    def linear_impact(self) -> float:
        return self.savings / self.metric_value * self.weight


class MetricFilter(BaseModel):
    acronym: str
    title: str | None = None
    relevant_audits: list[str] | None = None  # None reveals every audit


class PerformanceView(BaseModel):
    """Everything a renderer needs from one ranking pass over a category."""

    category_id: str
    metric_audits: list[AuditRef]
    classifications: dict[str, AuditBucket]
    impacts: dict[str, AuditImpact]
    ranked_audits: list[AuditRef]
    passed_audits: list[AuditRef]
    metric_filters: list[MetricFilter]
    opportunity_scale: float
    calculator_href: str | None
    budget_audit_ids: list[str]
    thumbnail_audit: AuditRef | None = None
