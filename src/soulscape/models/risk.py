"""
Risk Assessment Models

Severity tiers and the result of self-harm phrase detection.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RiskSeverity(str, Enum):
    """Self-harm language severity tier"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskAssessment(BaseModel):
    """Result of scanning text for self-harm or suicidal phrases"""

    model_config = ConfigDict(frozen=True)

    found: bool = Field(default=False, description="Whether any risk phrase matched")
    severity: Optional[RiskSeverity] = Field(default=None, description="Highest matched tier")
    matches: List[str] = Field(default_factory=list, description="Matched phrases in scan order")

    @model_validator(mode="after")
    def validate_consistency(self) -> "RiskAssessment":
        """found, severity and matches must agree"""
        if self.found != bool(self.matches):
            raise ValueError("found must be True exactly when matches is non-empty")
        if self.found != (self.severity is not None):
            raise ValueError("severity must be set exactly when risk is found")
        return self
