"""Gemini generateContent client: the analysis request function."""
import asyncio
import logging
from typing import Any, Optional

import httpx

from idea_validator.config import get_settings
from idea_validator.errors import AnalysisRequestFailure
from idea_validator.models.analysis import AnalysisResult
from idea_validator.pipelines.result_normalizer import normalize_analysis

logger = logging.getLogger(__name__)

RETRYABLE_STATUS = {429, 500, 502, 503, 504}

ANALYSIS_PROMPT = """
Analyze the following product idea and provide a detailed evaluation.
Product Idea Abstract: "{idea}"

Provide the output in the following JSON format:
{{
  "score": {{
    "value": <A score out of 100>,
    "reasoning": "<A brief explanation for the score>"
  }},
  "key_developments": [
    "<Development step 1>",
    "<Development step 2>",
    "<Development step 3>"
  ],
  "deployment_steps": [
    "<Deployment step 1>",
    "<Deployment step 2>",
    "<Deployment step 3>"
  ],
  "roadmap": {{
    "q1": "<First quarter goals>",
    "q2": "<Second quarter goals>",
    "q3": "<Third quarter goals>",
    "q4": "<Fourth quarter goals>"
  }},
  "investor_pitch": "<A compelling investor pitch>"
}}
"""


def build_prompt(idea: str) -> str:
    return ANALYSIS_PROMPT.format(idea=idea)


def extract_text(body: Any) -> str:
    """Pull candidates[0].content.parts[0].text out of a response body."""
    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise AnalysisRequestFailure("No content was generated by the AI") from e
    if not isinstance(text, str):
        raise AnalysisRequestFailure("No content was generated by the AI")
    return text


class GeminiClient:
    """Async client for the Gemini generateContent endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        timeout: float = 60.0,
        max_retries: int = 2,
        retry_delay: float = 1.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate(self, prompt: str) -> str:
        """Send one prompt and return the raw generated text.

        Transport errors, 429 and 5xx responses are retried with linear
        backoff; any other non-2xx status fails immediately.
        """
        if not self.api_key:
            raise AnalysisRequestFailure("GEMINI_API_KEY is not set")

        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {"responseMimeType": "application/json"},
        }
        attempts = self.max_retries + 1

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            for attempt in range(1, attempts + 1):
                try:
                    response = await client.post(
                        self.url, params={"key": self.api_key}, json=payload
                    )
                except httpx.TransportError as e:
                    reason = f"transport error: {e}"
                else:
                    if response.is_success:
                        try:
                            body = response.json()
                        except ValueError as e:
                            raise AnalysisRequestFailure("AI API returned a non-JSON body") from e
                        return extract_text(body)
                    if response.status_code not in RETRYABLE_STATUS:
                        raise AnalysisRequestFailure(
                            f"AI API error! status: {response.status_code}"
                        )
                    reason = f"status {response.status_code}"

                if attempt == attempts:
                    raise AnalysisRequestFailure(
                        f"AI API failed after {attempts} attempts ({reason})"
                    )
                logger.warning(f"Gemini request attempt {attempt}/{attempts} failed: {reason}")
                await asyncio.sleep(self.retry_delay * attempt)

        # Loop always returns or raises
        raise AnalysisRequestFailure("AI API request was not attempted")

    async def analyze_idea(self, idea: str) -> AnalysisResult:
        """Prompt the model with an idea and normalize its answer."""
        raw = await self.generate(build_prompt(idea))
        return normalize_analysis(raw)


# Singleton instance
_gemini_client: Optional[GeminiClient] = None


def get_gemini_client() -> GeminiClient:
    """Get or create Gemini client singleton."""
    global _gemini_client
    if _gemini_client is None:
        settings = get_settings()
        _gemini_client = GeminiClient(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout=settings.gemini_timeout_seconds,
            max_retries=settings.gemini_max_retries,
            retry_delay=settings.gemini_retry_delay,
        )
    return _gemini_client
