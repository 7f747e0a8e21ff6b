"""Pydantic models for the National Risk Index counties feature service."""

from pydantic import BaseModel, ConfigDict, Field


class RiskAttributes(BaseModel):
    # outFields=* returns every NRI column; only these are read.
    # Scores are null for hazards rated "Not Applicable" or "Insufficient Data".
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    state: str = Field(alias="STATE")
    county: str = Field(alias="COUNTY")
    risk_score: float | None = Field(alias="RISK_SCORE")
    risk_rating: str = Field(alias="RISK_RATNG")
    drought_risk_score: float | None = Field(alias="DRGT_RISKS")
    drought_risk_rating: str = Field(alias="DRGT_RISKR")
    earthquake_risk_score: float | None = Field(alias="ERQK_RISKS")
    earthquake_risk_rating: str = Field(alias="ERQK_RISKR")
    tornado_risk_score: float | None = Field(alias="TRND_RISKS")
    tornado_risk_rating: str = Field(alias="TRND_RISKR")


class RiskFeature(BaseModel):
    attributes: RiskAttributes


class RiskQueryResult(BaseModel):
    features: list[RiskFeature]
