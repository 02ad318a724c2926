"""
APPLICATION LAYER - Registries & Orchestration

This layer contains:
- services/  → One registry per entity family (create, lookup, query, mutate)
- dto/       → Inbound record models (pydantic)
- mappers    → Record → entity construction, variant dispatch

Rules:
- Depends on Domain layer only
- No transport/framework code here
- Registries never bypass entity validation
"""
