"""Shared pytest fixtures for food palace tests."""

from decimal import Decimal

import pytest
from loguru import logger

from food_palace import (
    Application,
    Catalog,
    MenuEntry,
    OrderPipeline,
    RestaurantService,
    Settings,
    Terminal,
)


class ScriptedTerminal(Terminal):
    """Terminal that answers prompts from a fixed script instead of stdin."""

    def __init__(self, answers=(), currency: str = "Rs."):
        super().__init__(currency)
        self.answers = list(answers)
        self.prompts: list[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture(autouse=True)
def detach_log_sinks():
    """Drop sinks added during a test so none outlive the captured streams."""
    yield
    logger.remove()


@pytest.fixture
def house_menu() -> list[MenuEntry]:
    """The three dishes the restaurant opens with."""
    return [
        MenuEntry(1, "Burger", Decimal("100.00")),
        MenuEntry(2, "Pizza", Decimal("500.00")),
        MenuEntry(3, "Pasta", Decimal("350.00")),
    ]


@pytest.fixture
def catalog(house_menu) -> Catalog:
    """Catalog loaded with the house menu."""
    catalog = Catalog()
    for entry in house_menu:
        catalog.add(entry)
    return catalog


@pytest.fixture
def pipeline() -> OrderPipeline:
    """Empty order pipeline."""
    return OrderPipeline()


@pytest.fixture
def service() -> RestaurantService:
    """Service seeded with the default menu."""
    service = RestaurantService()
    service.seed_default_menu()
    return service


@pytest.fixture
def settings() -> Settings:
    """Settings that keep test output quiet and seed the default menu."""
    return Settings(log_level="WARNING", log_file="", currency="Rs.", seed_menu=True)


@pytest.fixture
def scripted_terminal():
    """Build a terminal that replays the given answers."""

    def _make(*answers: str) -> ScriptedTerminal:
        return ScriptedTerminal(answers)

    return _make


@pytest.fixture
def make_app(settings):
    """Build an Application driven by a scripted terminal."""

    def _make(*answers: str) -> Application:
        return Application(settings=settings, terminal=ScriptedTerminal(answers))

    return _make
