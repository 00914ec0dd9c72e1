"""
Risk assessment contract shared by the JSON examples.

RISK_ASSESSMENT_SCHEMA is the literal JSON schema sent to OpenAI's
structured outputs mode. RiskAssessment mirrors it as a Pydantic model so a
parsed reply can be turned into a typed Python object.
"""

from typing import Literal

from pydantic import BaseModel, Field

RISK_ASSESSMENT_SCHEMA = {
    "type": "object",
    "properties": {
        "projectName": {
            "type": "string",
            "description": "Name of the construction project",
        },
        "riskLevel": {
            "type": "string",
            "enum": ["low", "medium", "high", "critical"],
            "description": "Overall risk level assessment",
        },
        "risks": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "category": {"type": "string"},
                    "description": {"type": "string"},
                    "severity": {"type": "number", "minimum": 1, "maximum": 10},
                    "mitigation": {"type": "string"},
                },
                "required": ["category", "description", "severity", "mitigation"],
                "additionalProperties": False,
            },
        },
        "estimatedDelay": {"type": "string"},
        "budgetImpact": {"type": "string"},
        "recommendations": {
            "type": "array",
            "items": {"type": "string"},
        },
    },
    "required": [
        "projectName",
        "riskLevel",
        "risks",
        "estimatedDelay",
        "budgetImpact",
        "recommendations",
    ],
    "additionalProperties": False,
}

RISK_PROJECT = (
    "Assess the risks for this project: Building a 3-story apartment complex in "
    "Tegucigalpa during rainy season. Budget: $500K. Timeline: 8 months. "
    "Soil tests show high clay content."
)


class Risk(BaseModel):
    category: str
    description: str
    severity: float = Field(ge=1, le=10)
    mitigation: str


class RiskAssessment(BaseModel):
    """Typed view of a risk assessment reply."""

    projectName: str
    riskLevel: Literal["low", "medium", "high", "critical"]
    risks: list[Risk]
    estimatedDelay: str
    budgetImpact: str
    recommendations: list[str]
