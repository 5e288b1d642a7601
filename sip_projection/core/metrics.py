from __future__ import annotations

import math
import sys
from typing import Dict, Iterable, List, Optional, Sequence

from sip_projection.core.formulas import fisher_rate
from sip_projection.schemas.projection import (
    DepletionPoint,
    FinalMetrics,
    MonthlyRecord,
    YearlySummary,
)

BASE_CPI = 100.0
MAX_AMOUNT = sys.float_info.max


def saturate(value: float) -> float:
    """Pin ``value`` to the largest finite float instead of overflowing."""
    return max(-MAX_AMOUNT, min(value, MAX_AMOUNT))


def _total(values: Iterable[float]) -> float:
    return saturate(sum(values))


def compute_cagr(final_corpus: float, total_invested: float, years: int) -> Optional[float]:
    """Compound annual growth rate in percent, or None when it is undefined."""
    if total_invested <= 0 or final_corpus <= 0 or years <= 0:
        return None
    cagr = ((final_corpus / total_invested) ** (1 / years) - 1) * 100
    return cagr if math.isfinite(cagr) else None


def compute_real_rate(cagr: Optional[float], final_cpi: float, years: int) -> Optional[float]:
    """CAGR deflated by the average annual inflation implied by ``final_cpi``."""
    if cagr is None or years <= 0:
        return None
    avg_inflation = (final_cpi / BASE_CPI) ** (1 / years) - 1
    if 1 + avg_inflation == 0:
        return None
    return fisher_rate(cagr / 100, avg_inflation) * 100


def compute_final_metrics(
    records: Sequence[MonthlyRecord],
    years: int,
    initial_investment: float,
    total_withdrawals: float,
    total_tax: float,
    total_expenses: float,
    depleted_at: Optional[DepletionPoint] = None,
) -> FinalMetrics:
    """Summarize a ledger using its last record and the running totals."""
    if records:
        last = records[-1]
        final_corpus = last.corpus
        total_investment = last.totalInvestment
        final_adjusted = last.inflationAdjustedCorpus
        final_ppc = last.purchasingPowerChange
        final_cpi = last.currentCPI
    else:
        # nothing simulated; the plan ends where it starts
        final_corpus = total_investment = final_adjusted = float(initial_investment)
        final_ppc = 0.0
        final_cpi = BASE_CPI

    cagr = compute_cagr(final_corpus, total_investment, years)
    return FinalMetrics(
        finalCorpus=final_corpus,
        totalInvestment=total_investment,
        totalReturns=final_corpus - total_investment,
        finalInflationAdjustedCorpus=final_adjusted,
        finalPurchasingPowerChange=final_ppc,
        finalCPI=final_cpi,
        cagr=cagr,
        realRateOfReturn=compute_real_rate(cagr, final_cpi, years),
        totalWithdrawalsGross=total_withdrawals,
        totalTaxPaid=total_tax,
        totalExpensesPaid=total_expenses,
        depletedAt=depleted_at,
    )


def yearly_summaries(records: Sequence[MonthlyRecord], initial_investment: float = 0.0) -> List[YearlySummary]:
    """Collapse monthly records into one row per year.

    Year-end state comes from the highest month of each year; growth,
    withdrawals, tax and expenses are summed over the year.
    """
    by_year: Dict[int, List[MonthlyRecord]] = {}
    for record in records:
        by_year.setdefault(record.year, []).append(record)

    summaries: List[YearlySummary] = []
    opening = float(initial_investment)
    invested_before = float(initial_investment)
    for year in sorted(by_year):
        months = by_year[year]
        closing = max(months, key=lambda record: record.month)
        summaries.append(
            YearlySummary(
                year=year,
                openingCorpus=opening,
                investedDuringYear=closing.totalInvestment - invested_before,
                totalInvestment=closing.totalInvestment,
                growthDuringYear=_total(record.monthlyGrowth for record in months),
                withdrawalDuringYear=_total(record.withdrawalThisMonth for record in months),
                taxDuringYear=_total(record.taxPaidThisMonth for record in months),
                expenseDuringYear=_total(record.expenseDeductedThisMonth for record in months),
                closingCorpus=closing.corpus,
                closingCPI=closing.currentCPI,
                closingInflationAdjustedCorpus=closing.inflationAdjustedCorpus,
            )
        )
        opening = closing.corpus
        invested_before = closing.totalInvestment
    return summaries
