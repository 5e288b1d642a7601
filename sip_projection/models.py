from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

StepUpType = Literal["percentage", "fixed"]
LumpsumFrequency = Literal["never", "monthly", "quarterly", "half-yearly", "yearly"]
WithdrawalFrequency = Literal["monthly", "yearly"]
WithdrawalType = Literal["fixed", "percentage"]


class _Frozen(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)


class StepUpConfig(_Frozen):
    """Annual increase of the monthly contribution, applied at each year boundary."""

    enabled: bool = False
    type: StepUpType = "percentage"
    value: float = 0.0


class LumpsumConfig(_Frozen):
    enabled: bool = False
    amount: float = 0.0
    frequency: LumpsumFrequency = "never"


class WithdrawalConfig(_Frozen):
    """Systematic withdrawal plan.

    ``amount`` is a currency amount for ``fixed`` withdrawals and a percent of
    the current corpus for ``percentage`` withdrawals.
    """

    enabled: bool = False
    amount: float = 0.0
    frequency: WithdrawalFrequency = "yearly"
    startYear: int = 0
    type: WithdrawalType = "fixed"
    inflationAdjusted: bool = False


class InflationConfig(_Frozen):
    enabled: bool = False
    annualRatePercent: float = 0.0


class VariableReturnEntry(_Frozen):
    # rate applies up to and including the end of this year
    yearEnd: int
    ratePercent: float


class VariableReturnsConfig(_Frozen):
    enabled: bool = False
    entries: List[VariableReturnEntry] = Field(default_factory=list)


class TaxConfig(_Frozen):
    enabled: bool = False
    ratePercent: float = 0.0


class ExpenseRatioConfig(_Frozen):
    enabled: bool = False
    annualRatePercent: float = 0.0


class PlanConfiguration(_Frozen):
    """Every declared parameter of one projection run."""

    initialInvestment: float = 0.0
    monthlyContribution: float = 0.0
    investmentPeriodYears: int = 0
    baseAnnualReturnPercent: float = 0.0

    stepUp: StepUpConfig = Field(default_factory=StepUpConfig)
    lumpsum: LumpsumConfig = Field(default_factory=LumpsumConfig)
    withdrawal: WithdrawalConfig = Field(default_factory=WithdrawalConfig)
    inflation: InflationConfig = Field(default_factory=InflationConfig)
    variableReturns: VariableReturnsConfig = Field(default_factory=VariableReturnsConfig)
    tax: TaxConfig = Field(default_factory=TaxConfig)
    expenseRatio: ExpenseRatioConfig = Field(default_factory=ExpenseRatioConfig)
