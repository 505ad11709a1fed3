"""
AI business assistant endpoints.

``POST /ai-assistant`` is a development stub that echoes the question back
without calling any model. The other endpoints go through BusinessAssistant
and fall back to fixed replies when the completion API is unavailable.
"""

from fastapi import APIRouter, Depends

from app.schemas.ai_assistant import (
    AdviceRequest,
    AssistantMessage,
    AssistantReply,
    ChatRequest,
    ProductDescriptionRequest,
    SupplierMatchRequest,
    SupplierMatchResponse,
)
from app.services.ai_assistant import BusinessAssistant, get_assistant

router = APIRouter(prefix="/ai-assistant", tags=["AI Assistant"])


@router.post("", response_model=AssistantReply)
def ask_assistant(payload: AssistantMessage):
    """Canned reply used by the dashboard while the assistant is in development"""
    response = (
        f'Thank you for your question: "{payload.message}". As an AI assistant, '
        "I'd be happy to help with business advice, but I'm currently in development mode."
    )
    return AssistantReply(response=response)


@router.post("/advice", response_model=AssistantReply)
async def business_advice(
    payload: AdviceRequest,
    assistant: BusinessAssistant = Depends(get_assistant),
):
    return AssistantReply(response=await assistant.get_business_advice(payload.question))


@router.post("/product-description", response_model=AssistantReply)
async def product_description(
    payload: ProductDescriptionRequest,
    assistant: BusinessAssistant = Depends(get_assistant),
):
    description = await assistant.generate_product_description(
        payload.product_name, payload.product_type, payload.key_features
    )
    return AssistantReply(response=description)


@router.post("/supplier-matches", response_model=SupplierMatchResponse)
async def supplier_matches(
    payload: SupplierMatchRequest,
    assistant: BusinessAssistant = Depends(get_assistant),
):
    return await assistant.match_suppliers(
        payload.business_type, payload.product_category, payload.requirements
    )


@router.post("/chat", response_model=AssistantReply)
async def chat(
    payload: ChatRequest,
    assistant: BusinessAssistant = Depends(get_assistant),
):
    return AssistantReply(response=await assistant.chat(payload.conversation, payload.message))
