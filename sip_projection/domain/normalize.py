from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from sip_projection.models import (
    ExpenseRatioConfig,
    InflationConfig,
    LumpsumConfig,
    PlanConfiguration,
    StepUpConfig,
    TaxConfig,
    VariableReturnEntry,
    VariableReturnsConfig,
    WithdrawalConfig,
)

logger = logging.getLogger(__name__)

MIN_ANNUAL_RETURN_PERCENT = -100.0
MAX_INVESTMENT_PERIOD_YEARS = 100


@dataclass
class NormalizationResult:
    plan: PlanConfiguration
    warnings: List[str] = field(default_factory=list)


def _at_least(value: float, floor: float, label: str, warnings: List[str]) -> float:
    if value < floor:
        warnings.append(f"{label} {value} below {floor:g}; using {floor:g}")
        return floor
    return value


def _between(value: float, low: float, high: float, label: str, warnings: List[str]) -> float:
    value = _at_least(value, low, label, warnings)
    if value > high:
        warnings.append(f"{label} {value} above {high:g}; using {high:g}")
        return high
    return value


def normalize_plan(plan: PlanConfiguration) -> NormalizationResult:
    """Clamp out-of-range numbers and zero out disabled features.

    The projection is an interactive what-if tool, so nonsense input yields a
    degenerate but well-defined plan instead of an error. Every adjustment is
    reported back as a warning.
    """
    warnings: List[str] = []
    updates: Dict[str, Any] = {
        "initialInvestment": _at_least(plan.initialInvestment, 0.0, "initialInvestment", warnings),
        "monthlyContribution": _at_least(plan.monthlyContribution, 0.0, "monthlyContribution", warnings),
        "investmentPeriodYears": int(
            _between(plan.investmentPeriodYears, 0, MAX_INVESTMENT_PERIOD_YEARS, "investmentPeriodYears", warnings)
        ),
        "baseAnnualReturnPercent": _at_least(
            plan.baseAnnualReturnPercent, MIN_ANNUAL_RETURN_PERCENT, "baseAnnualReturnPercent", warnings
        ),
    }

    step_up = plan.stepUp
    if step_up.enabled:
        updates["stepUp"] = step_up.model_copy(
            update={"value": _at_least(step_up.value, 0.0, "stepUp.value", warnings)}
        )
    else:
        updates["stepUp"] = StepUpConfig()

    lumpsum = plan.lumpsum
    if lumpsum.enabled and lumpsum.frequency != "never":
        updates["lumpsum"] = lumpsum.model_copy(
            update={"amount": _at_least(lumpsum.amount, 0.0, "lumpsum.amount", warnings)}
        )
    else:
        updates["lumpsum"] = LumpsumConfig()

    withdrawal = plan.withdrawal
    if withdrawal.enabled:
        if withdrawal.type == "percentage":
            amount = _between(withdrawal.amount, 0.0, 100.0, "withdrawal.amount", warnings)
        else:
            amount = _at_least(withdrawal.amount, 0.0, "withdrawal.amount", warnings)
        updates["withdrawal"] = withdrawal.model_copy(
            update={
                "amount": amount,
                "startYear": int(_at_least(withdrawal.startYear, 0, "withdrawal.startYear", warnings)),
                # only fixed amounts are indexed to inflation
                "inflationAdjusted": withdrawal.inflationAdjusted and withdrawal.type == "fixed",
            }
        )
    else:
        updates["withdrawal"] = WithdrawalConfig()

    inflation = plan.inflation
    if inflation.enabled:
        updates["inflation"] = inflation.model_copy(
            update={
                "annualRatePercent": _at_least(
                    inflation.annualRatePercent, 0.0, "inflation.annualRatePercent", warnings
                )
            }
        )
    else:
        updates["inflation"] = InflationConfig()

    variable = plan.variableReturns
    if variable.enabled and variable.entries:
        entries = [
            VariableReturnEntry(
                yearEnd=entry.yearEnd,
                ratePercent=_at_least(
                    entry.ratePercent,
                    MIN_ANNUAL_RETURN_PERCENT,
                    f"variableReturns yearEnd={entry.yearEnd} ratePercent",
                    warnings,
                ),
            )
            for entry in variable.entries
        ]
        updates["variableReturns"] = VariableReturnsConfig(enabled=True, entries=entries)
    else:
        updates["variableReturns"] = VariableReturnsConfig()

    tax = plan.tax
    if tax.enabled:
        updates["tax"] = tax.model_copy(
            update={"ratePercent": _between(tax.ratePercent, 0.0, 100.0, "tax.ratePercent", warnings)}
        )
    else:
        updates["tax"] = TaxConfig()

    expense = plan.expenseRatio
    if expense.enabled:
        updates["expenseRatio"] = expense.model_copy(
            update={
                "annualRatePercent": _at_least(
                    expense.annualRatePercent, 0.0, "expenseRatio.annualRatePercent", warnings
                )
            }
        )
    else:
        updates["expenseRatio"] = ExpenseRatioConfig()

    for message in warnings:
        logger.debug("plan normalized: %s", message)

    return NormalizationResult(plan=plan.model_copy(update=updates), warnings=warnings)
