"""Conversational day-planning assistant layered on weather snapshots."""

from .conversation import ConversationManager
from .gemini import GeminiClient, ModelClient
from .models import ConversationState, ConversationTurn, Role
from .prompts import (
    FALLBACK_REPLY,
    OFF_TOPIC_REFUSAL,
    SYSTEM_INSTRUCTION,
    build_initial_prompt,
)
from .rendering import InlineSpan, MessageBlock, parse_message

__all__ = [
    "FALLBACK_REPLY",
    "OFF_TOPIC_REFUSAL",
    "SYSTEM_INSTRUCTION",
    "ConversationManager",
    "ConversationState",
    "ConversationTurn",
    "GeminiClient",
    "InlineSpan",
    "MessageBlock",
    "ModelClient",
    "Role",
    "build_initial_prompt",
    "parse_message",
]
