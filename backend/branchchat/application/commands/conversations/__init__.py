"""Conversation commands."""

from .find_or_create_conversation import (
    FindOrCreateConversationCommand,
    FindOrCreateConversationHandler,
    FindOrCreateConversationResult,
)

__all__ = [
    "FindOrCreateConversationCommand",
    "FindOrCreateConversationHandler",
    "FindOrCreateConversationResult",
]
