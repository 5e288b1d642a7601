from __future__ import annotations

from math import isclose

from sip_projection.core.metrics import compute_cagr, compute_real_rate, yearly_summaries
from sip_projection.core.projection import project


def test_cagr_of_single_deposit_matches_effective_annual_rate(make_plan):
    result = project(make_plan(initialInvestment=1000, monthlyContribution=0, investmentPeriodYears=2))

    assert isclose(result.finalMetrics.cagr, (1.01**12 - 1) * 100, rel_tol=1e-9)


def test_real_rate_deflates_cagr_by_average_inflation(make_plan):
    plan = make_plan(
        initialInvestment=1000,
        monthlyContribution=0,
        investmentPeriodYears=3,
        inflation={"enabled": True, "annualRatePercent": 6},
    )
    metrics = project(plan).finalMetrics

    assert isclose(metrics.finalCPI, 100 * 1.06**2)
    avg_inflation = (metrics.finalCPI / 100) ** (1 / 3) - 1
    expected = ((1 + metrics.cagr / 100) / (1 + avg_inflation) - 1) * 100
    assert isclose(metrics.realRateOfReturn, expected, rel_tol=1e-12)
    assert metrics.realRateOfReturn < metrics.cagr


def test_real_rate_equals_cagr_without_inflation(make_plan):
    metrics = project(make_plan()).finalMetrics
    assert isclose(metrics.realRateOfReturn, metrics.cagr, rel_tol=1e-12)


def test_cagr_undefined_without_investment(make_plan):
    metrics = project(make_plan(monthlyContribution=0)).finalMetrics

    assert metrics.totalInvestment == 0
    assert metrics.cagr is None
    assert metrics.realRateOfReturn is None


def test_cagr_undefined_when_corpus_exhausted(make_plan):
    plan = make_plan(
        initialInvestment=1000,
        monthlyContribution=0,
        investmentPeriodYears=1,
        baseAnnualReturnPercent=0,
        withdrawal={"enabled": True, "amount": 5000, "frequency": "yearly"},
    )
    metrics = project(plan).finalMetrics

    assert metrics.finalCorpus == 0
    assert metrics.cagr is None
    assert metrics.realRateOfReturn is None


def test_metric_helpers_guard_preconditions():
    assert compute_cagr(1000, 0, 5) is None
    assert compute_cagr(0, 1000, 5) is None
    assert compute_cagr(1000, 1000, 0) is None
    assert compute_cagr(1000, 1000, 5) == 0
    assert compute_real_rate(None, 120, 5) is None
    assert compute_real_rate(10.0, 0, 5) is None


def test_final_totals_match_ledger(make_plan):
    plan = make_plan(
        initialInvestment=50000,
        investmentPeriodYears=5,
        withdrawal={"enabled": True, "amount": 3000, "frequency": "monthly", "startYear": 3},
        tax={"enabled": True, "ratePercent": 10},
        expenseRatio={"enabled": True, "annualRatePercent": 1},
    )
    result = project(plan)
    metrics = result.finalMetrics
    records = result.projections

    assert isclose(metrics.totalWithdrawalsGross, sum(r.withdrawalThisMonth for r in records))
    assert isclose(metrics.totalTaxPaid, sum(r.taxPaidThisMonth for r in records))
    assert isclose(metrics.totalExpensesPaid, sum(r.expenseDeductedThisMonth for r in records))
    assert metrics.finalCorpus == records[-1].corpus
    assert metrics.totalReturns == records[-1].corpus - records[-1].totalInvestment
    assert metrics.depletedAt is None


def test_yearly_summaries_chain_opening_and_closing(make_plan):
    plan = make_plan(
        initialInvestment=20000,
        investmentPeriodYears=3,
        withdrawal={"enabled": True, "amount": 10000, "frequency": "yearly", "startYear": 2},
    )
    records = project(plan).projections
    summaries = yearly_summaries(records, initial_investment=20000)

    assert [summary.year for summary in summaries] == [1, 2, 3]
    assert summaries[0].openingCorpus == 20000
    assert summaries[0].investedDuringYear == 60000
    for previous, current in zip(summaries, summaries[1:]):
        assert current.openingCorpus == previous.closingCorpus
        assert current.investedDuringYear == 60000

    year_two = [record for record in records if record.year == 2]
    assert summaries[1].closingCorpus == year_two[-1].corpus
    assert isclose(summaries[1].growthDuringYear, sum(record.monthlyGrowth for record in year_two))
    assert summaries[0].withdrawalDuringYear == 0
    assert summaries[1].withdrawalDuringYear == 10000


def test_yearly_summaries_of_empty_ledger():
    assert yearly_summaries([]) == []
