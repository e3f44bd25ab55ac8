"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- conversation.py → ConversationDTO
- message.py → MessageDTO

Note: These are different from domain entities.
DTOs are for API input/output (camelCase on the wire), entities are for business logic.
"""

from branchchat.application.dto.conversation import ConversationDTO
from branchchat.application.dto.message import MessageDTO

__all__ = [
    "ConversationDTO",
    "MessageDTO",
]
