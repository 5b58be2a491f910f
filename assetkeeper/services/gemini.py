"""
Gemini text generation client
"""

import logging
from typing import List, Optional

import httpx
from pydantic import BaseModel, ValidationError

from assetkeeper.core.config import settings
from assetkeeper.core.errors import GeminiAPIError, EmptyResponseError

logger = logging.getLogger(__name__)


class Part(BaseModel):
    text: Optional[str] = None


class Content(BaseModel):
    parts: List[Part] = []


class Candidate(BaseModel):
    content: Optional[Content] = None


class GeminiResponse(BaseModel):
    """generateContent response; every level may be missing"""
    candidates: Optional[List[Candidate]] = None

    def first_text(self) -> Optional[str]:
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text or None


class GeminiClient:
    """Client for the Gemini generateContent endpoint"""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @property
    def url(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate(self, prompt: str) -> str:
        """Send one prompt and return the first candidate's text

        Raises GeminiAPIError on a non-success status and EmptyResponseError
        when no candidate text comes back or the body is malformed. Transport
        errors propagate as raised by httpx.
        """
        payload = {"contents": [{"parts": [{"text": prompt}]}]}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(
                self.url,
                params={"key": self.api_key},
                headers={"Content-Type": "application/json"},
                json=payload,
            )

        if not response.is_success:
            logger.error(f"Gemini API error: {response.status_code} - {response.text}")
            raise GeminiAPIError(response.status_code, response.text)

        try:
            text = GeminiResponse.model_validate(response.json()).first_text()
        except (ValueError, ValidationError) as e:
            logger.error(f"Gemini API returned a malformed body: {e}")
            raise EmptyResponseError()
        if not text:
            logger.error("Gemini API returned no candidates")
            raise EmptyResponseError()
        return text


def get_gemini_client() -> GeminiClient:
    """FastAPI dependency building a client from settings"""
    return GeminiClient(
        api_key=settings.GEMINI_API_KEY,
        model=settings.GEMINI_MODEL,
        base_url=settings.GEMINI_API_URL,
        timeout=settings.GEMINI_TIMEOUT,
    )
