"""
DOMAIN LAYER - Users, two-party conversations and their message logs

This layer contains:
- Entities: Business objects with identity (User, Conversation, Message)
- Value Objects: Immutable types (UserId, Username, ConversationId, MessageId, VideoClip)
- Ports: Interfaces/abstractions that infrastructure implements
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Pydantic, etc.)
2. NO I/O operations (no file system, no HTTP)
3. Only depends on Python stdlib
"""
