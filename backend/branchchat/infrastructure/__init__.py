"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: JSON record stores and repository implementations
- storage/: File system operations for uploaded videos (VideoStorageService)
- security/: bcrypt password hashing and JWT session tokens
- http/: Client for the video upload boundary
"""
