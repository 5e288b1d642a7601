from __future__ import annotations

import logging
from typing import List, Optional

from sip_projection.core.metrics import BASE_CPI, compute_final_metrics, saturate
from sip_projection.core.schedules import (
    inflation_factor,
    resolve_lumpsum_months,
    resolve_monthly_contribution,
    resolve_monthly_rate,
    resolve_withdrawal_basis,
    resolve_withdrawal_months,
    step_up,
)
from sip_projection.domain.normalize import normalize_plan
from sip_projection.models import PlanConfiguration
from sip_projection.schemas.projection import DepletionPoint, MonthlyRecord, SimulationResult

logger = logging.getLogger(__name__)


class ProjectionState:
    """Mutable running totals for a single projection run."""

    def __init__(self, plan: PlanConfiguration) -> None:
        self.corpus = float(plan.initialInvestment)
        self.total_invested = float(plan.initialInvestment)
        self.monthly_contribution = resolve_monthly_contribution(1, plan)
        self.fixed_withdrawal = float(plan.withdrawal.amount)
        self.cpi = BASE_CPI
        self.total_withdrawn = 0.0
        self.total_tax = 0.0
        self.total_expenses = 0.0
        self.funded = self.corpus > 0
        self.depleted_at: Optional[DepletionPoint] = None

    def start_year(self, year: int, plan: PlanConfiguration) -> None:
        """Year-boundary updates: CPI, indexed withdrawal and contribution step-up."""
        if year <= 1:
            return
        factor = inflation_factor(plan)
        self.cpi = saturate(self.cpi * factor)
        if plan.withdrawal.inflationAdjusted:
            self.fixed_withdrawal = saturate(self.fixed_withdrawal * factor)
        self.monthly_contribution = saturate(step_up(self.monthly_contribution, plan))


def _withdraw(state: ProjectionState, plan: PlanConfiguration) -> tuple[float, float, float]:
    """Take this month's withdrawal; returns (gross, tax, shortfall)."""
    requested = resolve_withdrawal_basis(state.corpus, state.fixed_withdrawal, plan)
    gross = min(requested, max(state.corpus, 0.0))

    tax = 0.0
    if plan.tax.enabled and gross > 0 and state.corpus > 0:
        gain_fraction = max(0.0, state.corpus - state.total_invested) / state.corpus
        tax = gross * gain_fraction * (plan.tax.ratePercent / 100)
        tax = min(tax, gross, state.corpus - gross)

    state.corpus -= gross + tax
    state.total_withdrawn = saturate(state.total_withdrawn + gross)
    state.total_tax = saturate(state.total_tax + tax)
    return gross, tax, requested - gross


def simulate_months(plan: PlanConfiguration) -> tuple[List[MonthlyRecord], ProjectionState]:
    """Run the month-by-month ledger for an already-normalized plan.

    Order of operations inside every month:
      1) contribution, 2) lump sum, 3) growth on the post-contribution
      balance, 4) expense ratio, 5) withdrawal and tax on its gains,
      6) clamp the corpus at zero, 7) record.
    """
    state = ProjectionState(plan)
    lumpsum_months = resolve_lumpsum_months(plan)
    expense_rate = plan.expenseRatio.annualRatePercent / 1200 if plan.expenseRatio.enabled else 0.0

    records: List[MonthlyRecord] = []
    for year in range(1, plan.investmentPeriodYears + 1):
        state.start_year(year, plan)
        monthly_rate = resolve_monthly_rate(year, plan)
        withdrawal_months = resolve_withdrawal_months(year, plan)

        for month in range(1, 13):
            state.corpus = saturate(state.corpus + state.monthly_contribution)
            state.total_invested = saturate(state.total_invested + state.monthly_contribution)

            if month in lumpsum_months:
                state.corpus = saturate(state.corpus + plan.lumpsum.amount)
                state.total_invested = saturate(state.total_invested + plan.lumpsum.amount)

            # extreme but finite rates pin the corpus at the float ceiling
            growth = saturate(state.corpus * monthly_rate)
            state.corpus = saturate(state.corpus + growth)
            if state.corpus > 0:
                state.funded = True

            expense = 0.0
            if expense_rate and state.corpus > 0:
                expense = min(state.corpus * expense_rate, state.corpus)
                state.corpus -= expense
                state.total_expenses = saturate(state.total_expenses + expense)

            gross = tax = shortfall = 0.0
            if month in withdrawal_months:
                gross, tax, shortfall = _withdraw(state, plan)

            if state.corpus < 0:
                state.corpus = 0.0

            depleted = state.funded and state.corpus == 0
            if depleted and state.depleted_at is None:
                state.depleted_at = DepletionPoint(year=year, month=month)
                logger.warning(
                    "corpus depleted in year %d month %d; continuing at zero", year, month
                )

            price_level = state.cpi / BASE_CPI
            records.append(
                MonthlyRecord(
                    year=year,
                    month=month,
                    totalInvestment=state.total_invested,
                    corpus=state.corpus,
                    returns=state.corpus - state.total_invested,
                    monthlyGrowth=growth,
                    withdrawalThisMonth=gross,
                    taxPaidThisMonth=tax,
                    expenseDeductedThisMonth=expense,
                    inflationAdjustedCorpus=state.corpus / price_level,
                    purchasingPowerChange=(1 / price_level - 1) * 100,
                    currentCPI=state.cpi,
                    withdrawalShortfall=shortfall,
                    depleted=depleted,
                )
            )

    return records, state


def project(plan: PlanConfiguration) -> SimulationResult:
    """Project ``plan`` month by month and summarize the outcome.

    Pure function: nothing is kept between calls, so identical plans always
    produce identical results.
    """
    normalized = normalize_plan(plan)
    plan = normalized.plan
    logger.debug("projecting %d years", plan.investmentPeriodYears)

    records, state = simulate_months(plan)
    metrics = compute_final_metrics(
        records,
        years=plan.investmentPeriodYears,
        initial_investment=plan.initialInvestment,
        total_withdrawals=state.total_withdrawn,
        total_tax=state.total_tax,
        total_expenses=state.total_expenses,
        depleted_at=state.depleted_at,
    )
    return SimulationResult(
        projections=records,
        finalMetrics=metrics,
        initialInvestment=plan.initialInvestment,
        warnings=normalized.warnings,
    )
