"""
AI suggestion schemas
"""

from pydantic import BaseModel


class AiSuggestion(BaseModel):
    """Three free-text assessments of an asset"""
    feasibility: str
    maintenance_prediction: str
    replacement_recommendation: str


class AiTextResponse(BaseModel):
    """Raw text answer from a single-question prompt"""
    asset_id: str
    result: str
