"""
AI business assistant client.

Thin wrapper around an OpenAI-compatible chat completions endpoint. Every
call sends a system prompt plus the user's text and returns plain text. Any
failure (no API key, timeout, HTTP error, unexpected payload) turns into a
fixed fallback reply instead of an error; there is no retry.
"""

import json
import logging
from typing import Dict, List, Optional

import httpx
from fastapi import Request
from pydantic import ValidationError

from app.core.config import Settings
from app.schemas.ai_assistant import ChatTurn, SupplierMatchResponse

logger = logging.getLogger(__name__)

ADVISOR_PROMPT = (
    "You are an expert business advisor specialized in helping women entrepreneurs in micro, "
    "small, and medium enterprises. Provide concise, practical advice focused on their business "
    "growth, market access, and supply chain integration."
)
COPYWRITER_PROMPT = (
    "You are a professional copywriter specializing in e-commerce product descriptions. Create "
    "compelling, SEO-friendly product descriptions that highlight unique selling points."
)
MATCHER_PROMPT = (
    "You are an AI-powered supplier matching system that helps women entrepreneurs find the best "
    "suppliers for their needs. Generate realistic supplier matches based on the business type, "
    "product category, and specific requirements."
)
CHAT_PROMPT = (
    "You are SheTrade AI Assistant, an AI business advisor for women entrepreneurs running micro, "
    "small, and medium enterprises. Provide helpful, concise advice to help them grow their "
    "business, access new markets, improve their supply chain, and navigate business challenges. "
    "Keep responses brief and actionable, under 150 words."
)

ADVICE_EMPTY = "I'm sorry, I couldn't generate advice at this moment. Please try again later."
ADVICE_FALLBACK = "I apologize, but I'm currently unable to provide advice. Please try again later."
DESCRIPTION_EMPTY = "Unable to generate a product description. Please try with more specific product details."
DESCRIPTION_FALLBACK = (
    "I apologize, but I'm currently unable to generate a product description. Please try again later."
)
CHAT_EMPTY = "I apologize, but I'm currently unable to respond. Please try again later."
CHAT_FALLBACK = "I apologize, but I'm currently experiencing technical difficulties. Please try again later."


class AssistantUnavailable(Exception):
    """The completion API could not produce an answer."""


class BusinessAssistant:
    """Client for the text-completion API used by the assistant endpoints."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://api.openai.com/v1",
        model: str = "gpt-4o",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.model = model
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "BusinessAssistant":
        return cls(
            api_key=settings.OPENAI_API_KEY,
            base_url=settings.OPENAI_BASE_URL,
            model=settings.OPENAI_MODEL,
            timeout=settings.AI_TIMEOUT_SECONDS,
        )

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    async def _complete(
        self,
        messages: List[Dict[str, str]],
        max_tokens: int,
        json_mode: bool = False,
    ) -> str:
        """
        Send one chat completion request.

        Returns:
            The reply text, possibly empty

        Raises:
            AssistantUnavailable: On a missing key or any transport/payload failure
        """
        if not self.enabled:
            raise AssistantUnavailable("OpenAI API key is missing")

        payload = {"model": self.model, "messages": messages, "max_tokens": max_tokens}
        if json_mode:
            payload["response_format"] = {"type": "json_object"}

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    "/chat/completions",
                    json=payload,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
                response.raise_for_status()
                data = response.json()
            return data["choices"][0]["message"]["content"] or ""
        except httpx.HTTPError as e:
            raise AssistantUnavailable(f"Completion request failed: {str(e)}") from e
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise AssistantUnavailable(f"Malformed completion response: {str(e)}") from e

    async def get_business_advice(self, question: str) -> str:
        messages = [
            {"role": "system", "content": ADVISOR_PROMPT},
            {"role": "user", "content": question},
        ]
        try:
            return await self._complete(messages, max_tokens=500) or ADVICE_EMPTY
        except AssistantUnavailable as e:
            logger.warning(f"Business advice unavailable: {str(e)}")
            return ADVICE_FALLBACK

    async def generate_product_description(
        self,
        product_name: str,
        product_type: str,
        key_features: List[str],
    ) -> str:
        prompt = (
            "Please write a concise product description for an e-commerce store for the following product:\n\n"
            f"Product Name: {product_name}\n"
            f"Product Type: {product_type}\n"
            f"Key Features: {', '.join(key_features)}\n\n"
            "The description should be between 50-100 words, highlight the unique selling points, "
            "and be SEO-friendly."
        )
        messages = [
            {"role": "system", "content": COPYWRITER_PROMPT},
            {"role": "user", "content": prompt},
        ]
        try:
            return await self._complete(messages, max_tokens=200) or DESCRIPTION_EMPTY
        except AssistantUnavailable as e:
            logger.warning(f"Product description unavailable: {str(e)}")
            return DESCRIPTION_FALLBACK

    async def match_suppliers(
        self,
        business_type: str,
        product_category: str,
        requirements: str,
    ) -> SupplierMatchResponse:
        """Ask for 3-5 supplier suggestions; an empty match list on any failure."""
        prompt = (
            "Find supplier matches for the following business:\n\n"
            f"Business Type: {business_type}\n"
            f"Product Category: {product_category}\n"
            f"Requirements: {requirements}\n\n"
            "Respond with a JSON object containing an array of 3-5 supplier matches with the following properties:\n"
            "- name: The supplier name\n"
            "- match_score: A number between 0-100 representing how well the supplier matches the requirements\n"
            "- potential_savings: A percentage (0-40) representing potential cost savings\n"
            "- description: A brief description of the supplier and why they're a good match"
        )
        messages = [
            {"role": "system", "content": MATCHER_PROMPT},
            {"role": "user", "content": prompt},
        ]
        try:
            content = await self._complete(messages, max_tokens=1000, json_mode=True)
            return SupplierMatchResponse.model_validate(json.loads(content or "{}"))
        except (AssistantUnavailable, ValueError, ValidationError) as e:
            logger.warning(f"Supplier matching unavailable: {str(e)}")
            return SupplierMatchResponse(matches=[])

    async def chat(self, conversation: List[ChatTurn], new_message: str) -> str:
        messages = [{"role": "system", "content": CHAT_PROMPT}]
        messages.extend({"role": turn.role, "content": turn.content} for turn in conversation)
        messages.append({"role": "user", "content": new_message})
        try:
            return await self._complete(messages, max_tokens=250) or CHAT_EMPTY
        except AssistantUnavailable as e:
            logger.warning(f"Assistant chat unavailable: {str(e)}")
            return CHAT_FALLBACK


def get_assistant(request: Request) -> BusinessAssistant:
    """Dependency returning the assistant client created at startup."""
    return request.app.state.assistant
