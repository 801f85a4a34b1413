"""Shared fixtures: fake providers and fast scan settings."""

import pytest

from geoscan.classifier import classify
from geoscan.config import ScanSettings
from geoscan.models import ProviderAnswer


class FakeProvider:
    """Returns a fixed answer (or a per-question answer) without network access"""

    def __init__(self, answer="", answers=None):
        self.answer = answer
        self.answers = answers or {}
        self.calls = []

    async def ask(self, question, business_name):
        self.calls.append(question)
        text = self.answers.get(question, self.answer)
        mentioned, sentiment = classify(text, business_name)
        return ProviderAnswer(answer_text=text, mentioned=mentioned, sentiment=sentiment)


class FailingProvider:
    """Always raises, like an adapter that forgot to catch its errors"""

    def __init__(self):
        self.calls = 0

    async def ask(self, question, business_name):
        self.calls += 1
        raise ConnectionError("provider unreachable")


@pytest.fixture
def fast_settings():
    return ScanSettings(batch_size=3, batch_delay=0, request_timeout=5, answer_max_chars=500)


@pytest.fixture
def positive_provider():
    return FakeProvider("Bakkerij de Korrel is uitstekend en betrouwbaar")


@pytest.fixture
def silent_provider():
    return FakeProvider("")
