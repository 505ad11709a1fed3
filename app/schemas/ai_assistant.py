"""
Pydantic schemas for the AI business assistant endpoints.
"""

from typing import List, Literal

from pydantic import Field

from app.schemas.base import CamelModel


class AssistantMessage(CamelModel):
    message: str


class AssistantReply(CamelModel):
    response: str


class AdviceRequest(CamelModel):
    question: str = Field(..., min_length=1)


class ProductDescriptionRequest(CamelModel):
    product_name: str = Field(..., min_length=1)
    product_type: str = Field(..., min_length=1)
    key_features: List[str] = Field(default_factory=list)


class SupplierMatchRequest(CamelModel):
    business_type: str
    product_category: str
    requirements: str


class ChatTurn(CamelModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(CamelModel):
    conversation: List[ChatTurn] = Field(default_factory=list)
    message: str = Field(..., min_length=1)


# Parsed from the completion API reply, which uses snake_case keys.
class SupplierMatch(CamelModel):
    name: str
    match_score: float = Field(..., ge=0, le=100)
    potential_savings: float = Field(..., ge=0, le=100)
    description: str


class SupplierMatchResponse(CamelModel):
    matches: List[SupplierMatch] = Field(default_factory=list)
