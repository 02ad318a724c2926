"""
DOMAIN LAYER - The Heart of the Application

This layer contains:
- Entities: Business objects with identity (User, Post, Message, Video, Course, Friendship)
- Value Objects: Immutable types (ConversationKey, Difficulty, FriendshipStatus, CallStatus)
- Ports: Interfaces that infrastructure implements
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no pydantic, dishka, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
