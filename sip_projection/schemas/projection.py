"""Data contracts produced by the projection engine."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MonthlyRecord(BaseModel):
    """State of the plan at the end of one simulated month."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(..., ge=1)
    month: int = Field(..., ge=1, le=12)
    totalInvestment: float
    corpus: float = Field(..., ge=0)
    returns: float
    monthlyGrowth: float
    withdrawalThisMonth: float = Field(..., ge=0)
    taxPaidThisMonth: float = Field(..., ge=0)
    expenseDeductedThisMonth: float = Field(..., ge=0)
    inflationAdjustedCorpus: float
    purchasingPowerChange: float = Field(..., description="Percent change in the value of one unit of money.")
    currentCPI: float
    withdrawalShortfall: float = Field(0.0, ge=0, description="Requested minus delivered gross withdrawal.")
    depleted: bool = False


class YearlySummary(BaseModel):
    """Year-end state plus the flows summed over the year."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int
    openingCorpus: float
    investedDuringYear: float
    totalInvestment: float
    growthDuringYear: float
    withdrawalDuringYear: float
    taxDuringYear: float
    expenseDuringYear: float
    closingCorpus: float
    closingCPI: float
    closingInflationAdjustedCorpus: float


class DepletionPoint(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int
    month: int


class FinalMetrics(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    finalCorpus: float
    totalInvestment: float
    totalReturns: float
    finalInflationAdjustedCorpus: float
    finalPurchasingPowerChange: float
    finalCPI: float
    cagr: Optional[float] = Field(None, description="Percent; None when undefined.")
    realRateOfReturn: Optional[float] = Field(None, description="Percent; None when undefined.")
    totalWithdrawalsGross: float
    totalTaxPaid: float
    totalExpensesPaid: float
    depletedAt: Optional[DepletionPoint] = None


class SimulationResult(BaseModel):
    """Full ledger and summary of one projection run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    projections: List[MonthlyRecord]
    finalMetrics: FinalMetrics
    initialInvestment: float = Field(0.0, ge=0, description="Starting corpus after normalization.")
    warnings: List[str] = Field(default_factory=list)


class ProjectionResponse(BaseModel):
    """Payload returned by the projection endpoint."""

    projections: List[MonthlyRecord] = Field(default_factory=list)
    yearly: List[YearlySummary]
    finalMetrics: FinalMetrics
    warnings: List[str] = Field(default_factory=list)
