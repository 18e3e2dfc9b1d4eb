"""Conversation state for the weather assistant."""

from __future__ import annotations

import logging

from ..exceptions import AssistantError
from ..weather.models import WeatherSnapshot
from .gemini import ModelClient
from .models import ConversationState, ConversationTurn
from .prompts import build_initial_prompt


class ConversationManager:
    """Owns the ordered turn log for the snapshot currently on screen.

    The first turn is always the hidden seed prompt built from the snapshot.
    It is sent with every model call and left out of ``visible_turns``.
    Each seed bumps ``generation``; a reply that comes back for an older
    generation is dropped instead of being appended to the new conversation.
    """

    def __init__(self, model_client: ModelClient, logger: logging.Logger) -> None:
        self.model_client = model_client
        self.logger = logger
        self.snapshot: WeatherSnapshot | None = None
        self._turns: list[ConversationTurn] = []
        self._state: ConversationState = "empty"
        self._generation = 0

    @property
    def state(self) -> ConversationState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def turns(self) -> tuple[ConversationTurn, ...]:
        """Every turn, seed included, in the order sent to the model."""
        return tuple(self._turns)

    @property
    def visible_turns(self) -> tuple[ConversationTurn, ...]:
        """Turns shown to the user (everything after the seed prompt)."""
        return tuple(self._turns[1:])

    def reset(self) -> None:
        """Discard the conversation and invalidate any reply still in flight."""
        self._generation += 1
        self._turns = []
        self._state = "empty"
        self.snapshot = None

    def seed(self, snapshot: WeatherSnapshot) -> str | None:
        """Start a new conversation for ``snapshot`` and return the initial advice.

        Returns None when a newer seed superseded this one before the reply
        arrived.
        """
        self.reset()
        generation = self._generation
        self.snapshot = snapshot
        self._turns = [ConversationTurn(role="user", text=build_initial_prompt(snapshot))]
        self._state = "awaiting_initial_reply"
        self.logger.info("Seeding assistant conversation for %s", snapshot.city)

        reply = self.model_client.reply(self.turns)
        return self._accept_reply(generation, reply)

    def ask(self, question: str) -> str | None:
        """Append a follow-up question, send the whole conversation, return the reply."""
        if not question.strip():
            raise AssistantError("Question must not be empty.")
        if self._state != "ready":
            raise AssistantError(f"Cannot ask a question while conversation is {self._state}.")

        generation = self._generation
        self._turns.append(ConversationTurn(role="user", text=question))
        self._state = "awaiting_reply"

        reply = self.model_client.reply(self.turns)
        return self._accept_reply(generation, reply)

    def _accept_reply(self, generation: int, reply: str) -> str | None:
        if generation != self._generation:
            self.logger.info(
                "Dropping stale assistant reply (generation %d, current %d)",
                generation,
                self._generation,
            )
            return None
        self._turns.append(ConversationTurn(role="model", text=reply))
        self._state = "ready"
        return reply
