"""Screen and tab state for the weather planner."""

from __future__ import annotations

import logging
from typing import Literal

from ..assistant.conversation import ConversationManager
from ..exceptions import AssistantError
from ..weather.models import DataSource, HistoricalDay, WeatherSnapshot
from ..weather.service import WeatherService

Screen = Literal["landing", "sign_in", "dashboard"]
Tab = Literal["current", "history"]

SEARCH_ERROR = "Could not fetch weather data. Please try again."
HISTORY_ERROR = "Could not fetch weather history."


class ViewController:
    """Drives landing -> sign-in -> dashboard and wires input to the services.

    Sign-in is a placeholder: it only moves to the dashboard. Searching
    replaces the snapshot and reseeds the assistant; the history tab loads
    lazily for the last searched city.
    """

    def __init__(
        self,
        weather: WeatherService,
        conversation: ConversationManager,
        logger: logging.Logger,
        *,
        default_city: str = "Honolulu",
    ) -> None:
        self.weather = weather
        self.conversation = conversation
        self.logger = logger
        self.screen: Screen = "landing"
        self.tab: Tab = "current"
        self.searched_city = default_city
        self.snapshot: WeatherSnapshot | None = None
        self.snapshot_source: DataSource | None = None
        self.history: list[HistoricalDay] | None = None
        self.history_city: str | None = None
        self.history_source: DataSource | None = None
        self.error: str | None = None
        self.is_loading = False

    def get_started(self) -> None:
        if self.screen == "landing":
            self.screen = "sign_in"

    def sign_in(self) -> None:
        """Enter the dashboard and load weather for the default city."""
        if self.screen != "sign_in":
            return
        self.screen = "dashboard"
        self.search(self.searched_city)

    def search(self, city: str) -> bool:
        """Fetch weather for ``city`` and reseed the assistant.

        Returns False when the city is blank or the fetch failed outright.
        """
        city = city.strip()
        if not city:
            return False
        self.is_loading = True
        self.error = None
        if self.tab == "current":
            self.snapshot = None
        try:
            result = self.weather.fetch_current(city)
            self.snapshot = result.snapshot
            self.snapshot_source = result.source
            self.searched_city = city
            self.conversation.seed(result.snapshot)
        except Exception:
            self.logger.exception("Weather search failed for %s", city)
            self.error = SEARCH_ERROR
            return False
        finally:
            self.is_loading = False
        if self.tab == "history":
            self.load_history()
        return True

    def select_tab(self, tab: Tab) -> None:
        self.tab = tab
        if tab == "history" and self.history_city != self.searched_city:
            self.load_history()

    def load_history(self) -> None:
        """Load the 14-day history for the last searched city."""
        self.is_loading = True
        self.error = None
        self.history = None
        try:
            result = self.weather.fetch_history_result(self.searched_city)
            self.history = result.days
            self.history_source = result.source
            self.history_city = self.searched_city
        except Exception:
            self.logger.exception("History load failed for %s", self.searched_city)
            self.error = HISTORY_ERROR
        finally:
            self.is_loading = False

    def ask(self, question: str) -> str | None:
        """Forward a follow-up question to the assistant.

        Blank questions, and questions asked before a snapshot has loaded,
        are ignored.
        """
        if not question.strip() or self.conversation.state != "ready":
            return None
        try:
            return self.conversation.ask(question)
        except AssistantError as exc:
            self.logger.warning("Question rejected: %s", exc)
            return None
