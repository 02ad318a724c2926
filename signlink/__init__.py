"""SignLink core - domain model and in-memory service registries."""

__version__ = "0.1.0"
