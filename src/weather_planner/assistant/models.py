"""Typed models for the assistant conversation."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

Role = Literal["user", "model"]
ConversationState = Literal["empty", "awaiting_initial_reply", "ready", "awaiting_reply"]


class ConversationTurn(BaseModel):
    """One message exchanged with the assistant."""

    model_config = ConfigDict(frozen=True)

    role: Role
    text: str
