"""Log-normal scoring curve that maps a measured metric value to [0, 1]."""

from __future__ import annotations

import math
import sys

from audit_ranker.errors import InvalidScoringInput
from audit_ranker.models import ScoringOptions

# Closest double to erfc^-1(1/5); places p10 at a score of 0.9.
INVERSE_ERFC_ONE_FIFTH = 0.9061938024368232

_BELOW_GOOD = math.nextafter(0.9, 0.0)
_BELOW_FAIR = math.nextafter(0.5, 0.0)


def _require_finite(name: str, value: float | None) -> float:
    if value is None or isinstance(value, bool):
        raise InvalidScoringInput(f"{name} is undefined")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidScoringInput(f"{name} is not a number: {value!r}") from exc
    if not math.isfinite(number):
        raise InvalidScoringInput(f"{name} must be finite, got {number}")
    return number


def compute_score(scoring_options: ScoringOptions | None, value: float | None) -> float:
    """Score ``value`` on the log-normal curve defined by ``scoring_options``.

    The median scores exactly 0.5 and p10 scores 0.9. The curve is
    non-increasing in ``value``; non-positive values score 1.
    """
    if scoring_options is None:
        raise InvalidScoringInput("scoring options are undefined")
    median = _require_finite("median", scoring_options.median)
    p10 = _require_finite("p10", scoring_options.p10)
    value = _require_finite("value", value)

    if median <= 0:
        raise InvalidScoringInput("median must be greater than zero")
    if p10 <= 0:
        raise InvalidScoringInput("p10 must be greater than zero")
    if p10 >= median:
        raise InvalidScoringInput("p10 must be less than the median")

    if value <= 0:
        return 1.0

    x_log_ratio = math.log(max(sys.float_info.min, value / median))
    p10_log_ratio = -math.log(max(sys.float_info.min, p10 / median))
    standardized_x = x_log_ratio * INVERSE_ERFC_ONE_FIFTH / p10_log_ratio
    complementary_percentile = math.erfc(standardized_x) / 2

    # Keep each band on its side of the p10 and median thresholds.
    if value <= p10:
        return max(0.9, min(1.0, complementary_percentile))
    if value <= median:
        return max(0.5, min(_BELOW_GOOD, complementary_percentile))
    return max(0.0, min(_BELOW_FAIR, complementary_percentile))
