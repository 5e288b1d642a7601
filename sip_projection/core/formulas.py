"""Closed-form reference formulas shown alongside the projection.

These are the textbook formulas users can check the projection against. The
monthly engine in ``projection.py`` does not call them.
"""

from __future__ import annotations

from sip_projection.schemas.formulas import SipEstimateRequest, SipEstimateResponse


def sip_future_value(monthly_contribution: float, monthly_rate: float, months: int) -> float:
    """Maturity of an annuity due: M = P * ((1 + i)^n - 1) / i * (1 + i)."""
    if months <= 0:
        return 0.0
    if monthly_rate == 0:
        return monthly_contribution * months
    growth = (1 + monthly_rate) ** months
    return monthly_contribution * (growth - 1) / monthly_rate * (1 + monthly_rate)


def lumpsum_future_value(principal: float, rate_per_period: float, periods: int) -> float:
    """A = P * (1 + r)^t"""
    return principal * (1 + rate_per_period) ** periods


def present_value(future_value: float, annual_inflation: float, years: int) -> float:
    """Today's value of ``future_value`` after ``years`` of inflation."""
    return future_value / (1 + annual_inflation) ** years


def fisher_rate(nominal_rate: float, inflation_rate: float) -> float:
    return (1 + nominal_rate) / (1 + inflation_rate) - 1


def estimate_sip(request: SipEstimateRequest) -> SipEstimateResponse:
    months = request.years * 12
    monthly_rate = request.annualReturnPercent / 1200
    maturity = sip_future_value(request.monthlyContribution, monthly_rate, months) + lumpsum_future_value(
        request.initialInvestment, monthly_rate, months
    )
    invested = request.initialInvestment + request.monthlyContribution * months
    inflation = request.inflationPercent / 100
    return SipEstimateResponse(
        maturityAmount=maturity,
        totalInvested=invested,
        estimatedReturns=maturity - invested,
        presentValue=present_value(maturity, inflation, request.years),
        realAnnualReturnPercent=fisher_rate(request.annualReturnPercent / 100, inflation) * 100,
    )
