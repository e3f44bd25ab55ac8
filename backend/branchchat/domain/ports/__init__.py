"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Subfolders:
- repositories/      → Entity persistence interfaces
- (root files)       → Other external capabilities:
    record_store.py     → durable ordered collection of JSON records
    password_hasher.py  → slow salted password hashing
    token_issuer.py     → session tokens handed out at login
    media_device.py     → camera/microphone capture used by the recorder
"""
