"""Plain-text rendering of an NRI county risk record.

The line layout is consumed by scripts, so labels and order are fixed.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

from home_risk.models.risk import RiskAttributes

PREAMBLE = "Here's some risk information about your home:"


def _score(value: float | None) -> str:
    """Two-decimal score, rounded half-up from the value's shortest decimal form.

    A null score prints as 0.00.
    """
    if value is None:
        value = 0.0
    if not math.isfinite(value):
        return f"{value:.2f}"
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # room for every integer digit plus the two decimals
        ctx.prec = max(ctx.prec, exact.adjusted() + 3)
        return str(exact.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def format_risk_lines(attrs: RiskAttributes) -> list[str]:
    return [
        f"State: {attrs.state}",
        f"County: {attrs.county}",
        f"RiskScore: {_score(attrs.risk_score)}",
        f"RiskRating: {attrs.risk_rating}",
        f"DroughtRiskScore: {_score(attrs.drought_risk_score)}",
        f"DroughtRiskRating: {attrs.drought_risk_rating}",
        f"EarthquakeRiskScore: {_score(attrs.earthquake_risk_score)}",
        f"EarthquakeRiskRating: {attrs.earthquake_risk_rating}",
        f"TornadoRiskScore: {_score(attrs.tornado_risk_score)}",
        f"TornadoRiskRating: {attrs.tornado_risk_rating}",
    ]


def render_report(attrs: RiskAttributes) -> str:
    """Preamble plus the record block, ending in a blank line."""
    return "\n".join([PREAMBLE, *format_risk_lines(attrs), ""]) + "\n"
