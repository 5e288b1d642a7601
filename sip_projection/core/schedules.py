"""Per-year schedule lookups consulted by the monthly projection loop."""

from __future__ import annotations

from typing import FrozenSet, List

from sip_projection.models import PlanConfiguration, VariableReturnEntry

ALL_MONTHS: FrozenSet[int] = frozenset(range(1, 13))

LUMPSUM_MONTHS = {
    "never": frozenset(),
    "monthly": ALL_MONTHS,
    "quarterly": frozenset({1, 4, 7, 10}),
    "half-yearly": frozenset({1, 7}),
    "yearly": frozenset({1}),
}

WITHDRAWAL_MONTHS = {
    "monthly": ALL_MONTHS,
    "yearly": frozenset({12}),
}


def _sorted_entries(plan: PlanConfiguration) -> List[VariableReturnEntry]:
    return sorted(plan.variableReturns.entries, key=lambda entry: entry.yearEnd)


def resolve_annual_rate(year: int, plan: PlanConfiguration) -> float:
    """Annual return (percent) in force during ``year``.

    A variable-return entry covers every year up to and including its
    ``yearEnd``; past the last entry its rate keeps applying.
    """
    if not plan.variableReturns.enabled or not plan.variableReturns.entries:
        return plan.baseAnnualReturnPercent

    entries = _sorted_entries(plan)
    for entry in entries:
        if entry.yearEnd >= year:
            return entry.ratePercent
    return entries[-1].ratePercent


def resolve_monthly_rate(year: int, plan: PlanConfiguration) -> float:
    return resolve_annual_rate(year, plan) / 1200


def step_up(amount: float, plan: PlanConfiguration) -> float:
    """Apply one year-boundary of contribution step-up to ``amount``."""
    if not plan.stepUp.enabled:
        return amount
    if plan.stepUp.type == "percentage":
        return amount * (1 + plan.stepUp.value / 100)
    return amount + plan.stepUp.value


def resolve_monthly_contribution(year: int, plan: PlanConfiguration) -> float:
    """Monthly contribution for ``year``, stepped up once per completed year."""
    amount = plan.monthlyContribution
    for _ in range(2, year + 1):
        amount = step_up(amount, plan)
    return amount


def resolve_lumpsum_months(plan: PlanConfiguration) -> FrozenSet[int]:
    if not plan.lumpsum.enabled:
        return frozenset()
    return LUMPSUM_MONTHS[plan.lumpsum.frequency]


def resolve_withdrawal_months(year: int, plan: PlanConfiguration) -> FrozenSet[int]:
    withdrawal = plan.withdrawal
    if not withdrawal.enabled or year < withdrawal.startYear:
        return frozenset()
    return WITHDRAWAL_MONTHS[withdrawal.frequency]


def inflation_factor(plan: PlanConfiguration) -> float:
    """Growth factor applied to CPI (and indexed amounts) at each year boundary."""
    if not plan.inflation.enabled:
        return 1.0
    return 1 + plan.inflation.annualRatePercent / 100


def resolve_withdrawal_basis(corpus: float, current_fixed_amount: float, plan: PlanConfiguration) -> float:
    """Requested gross withdrawal before it is capped at the available corpus."""
    if plan.withdrawal.type == "percentage":
        return max(corpus, 0.0) * (plan.withdrawal.amount / 100)
    return current_fixed_amount
