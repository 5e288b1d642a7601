"""Data contracts for the closed-form SIP estimate."""

from pydantic import BaseModel, ConfigDict, Field


class SipEstimateRequest(BaseModel):
    """Inputs of the textbook SIP maturity formula."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    monthlyContribution: float = Field(..., ge=0, description="Amount invested at the start of every month.")
    annualReturnPercent: float = Field(..., ge=-100, le=100, description="Expected annual return, e.g. 12 for 12%.")
    years: int = Field(..., ge=0, le=100)
    initialInvestment: float = Field(0.0, ge=0, description="One-off amount invested at the start.")
    inflationPercent: float = Field(0.0, ge=0, le=100, description="Annual inflation used to discount the maturity.")


class SipEstimateResponse(BaseModel):
    maturityAmount: float
    totalInvested: float
    estimatedReturns: float
    presentValue: float = Field(..., description="Maturity amount in today's money.")
    realAnnualReturnPercent: float
