"""
Base class for all AI answer providers
"""

from abc import ABC, abstractmethod
from typing import Any
import aiohttp
import structlog

from ..classifier import classify
from ..models import ProviderAnswer

logger = structlog.get_logger(__name__)

DUTCH_ASSISTANT_PROMPT = (
    "Je bent een behulpzame AI-assistent die vragen beantwoordt over Nederlandse "
    "bedrijven en diensten. Geef eerlijke, informatieve antwoorden."
)


class ProviderResponseError(Exception):
    """Raised when a provider answers with a non-success status"""

    def __init__(self, provider: str, status: int, body: str = ""):
        super().__init__(f"{provider} returned HTTP {status}")
        self.provider = provider
        self.status = status
        self.body = body


class BaseProvider(ABC):
    """Base class for all AI answer providers"""

    max_tokens: int = 300

    def __init__(self, config: Any, request_timeout: float = 30.0):
        self.config = config
        self.request_timeout = request_timeout
        self.logger = logger.bind(provider=self.provider_id)

    @property
    @abstractmethod
    def provider_id(self) -> str:
        """Return the identifier used in scan results"""
        pass

    @property
    def is_configured(self) -> bool:
        """Check if the provider has credentials"""
        return self.config.is_configured

    @abstractmethod
    def build_payload(self, question: str) -> dict:
        """Build the JSON request body for a question"""
        pass

    @abstractmethod
    def extract_answer(self, data: dict) -> str:
        """Pull the generated text out of a JSON response"""
        pass

    def _get_headers(self) -> dict:
        return bearer_headers(self.config.api_key)

    async def _request_answer(self, question: str) -> str:
        """Send one request and return the generated text"""
        timeout = aiohttp.ClientTimeout(total=self.request_timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.post(
                self.config.endpoint,
                headers=self._get_headers(),
                json=self.build_payload(question),
            ) as response:
                if response.status != 200:
                    error = await response.text()
                    raise ProviderResponseError(self.provider_id, response.status, error[:200])

                data = await response.json()
                return self.extract_answer(data)

    async def ask(self, question: str, business_name: str) -> ProviderAnswer:
        """
        Ask a question and classify the answer for the given business.

        Never raises: any failure yields an empty, unmentioned, neutral answer
        so that one provider outage does not fail the whole scan.
        """
        if not self.is_configured:
            self.logger.warning("provider_not_configured")
            return ProviderAnswer.empty()

        try:
            answer_text = await self._request_answer(question)
        except Exception as e:
            self.logger.error("provider_query_failed", question=question, error=str(e))
            return ProviderAnswer.empty()

        if not isinstance(answer_text, str):
            self.logger.error("provider_answer_malformed", question=question)
            return ProviderAnswer.empty()

        mentioned, sentiment = classify(answer_text, business_name)
        return ProviderAnswer(answer_text=answer_text, mentioned=mentioned, sentiment=sentiment)


def bearer_headers(api_key: str) -> dict:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }


def first_choice_content(data: dict) -> str:
    """Extract ``choices[0].message.content`` from a chat completion"""
    choices = data.get("choices") or [{}]
    return (choices[0].get("message") or {}).get("content") or ""
