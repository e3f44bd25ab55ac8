"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (JSON files, SQL, etc.)

Infrastructure layer provides implementations.
"""

from branchchat.domain.ports.repositories.conversation_repository import ConversationRepository
from branchchat.domain.ports.repositories.message_repository import MessageRepository
from branchchat.domain.ports.repositories.user_repository import UserRepository

__all__ = [
    "ConversationRepository",
    "MessageRepository",
    "UserRepository",
]
