"""
Pytest configuration and fixtures for testing.

This module provides:
- Fake generation service and clipboards (no network, no terminal)
- Settings isolated from the developer's .env files
"""

from __future__ import annotations

import asyncio

import pytest

from core.config import AppSettings
from core.domain.errors import ClipboardError, TransportError
from core.domain.models import GenerationRequest, RawInputPair


class FakeGenerator:
    """In-memory `OrderGenerator` recording every request it receives."""

    def __init__(
        self,
        message: str = "1. Alice - Fried Rice",
        *,
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.message = message
        self.error = error
        self.gate = gate
        self.started = asyncio.Event()
        self.requests: list[GenerationRequest] = []

    async def generate(self, request: GenerationRequest) -> str:
        self.requests.append(request)
        self.started.set()
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.message


class FakeClipboard:
    def __init__(self) -> None:
        self.contents: str | None = None

    def write(self, text: str) -> None:
        self.contents = text


class FailingClipboard:
    def __init__(self, message: str = "Clipboard permission denied") -> None:
        self.message = message
        self.attempts = 0

    def write(self, text: str) -> None:
        self.attempts += 1
        raise ClipboardError(self.message)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, api_base_url="http://fast-order.test")


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def normal_pair() -> RawInputPair:
    return RawInputPair(list_menu="Fried Rice\nNoodles", current_orders="1. Alice: fried rice")


@pytest.fixture
def rate_limited() -> TransportError:
    return TransportError("rate limited", status_code=500)
