"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS): register, login, find-or-create conversation,
               send message, upload video
- queries/   → Read operations (CQRS): list conversations, list messages, get video
- services/  → Client-side orchestration (video recorder state machine)
- dto/       → Data Transfer Objects
- common/    → Shared interfaces (Command, Query base classes)

Rules:
- Depends on Domain layer (and thin infrastructure services such as file storage)
- No HTTP/framework code here
- Coordinates entities, repositories, external services
"""
