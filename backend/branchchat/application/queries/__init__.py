"""
QUERIES - Read operations (CQRS)

- conversations/ → ListConversationsQuery
- messages/      → ListMessagesQuery
- videos/        → GetVideoQuery
"""
