"""Test fixtures for in-memory implementations."""

from .in_memory_storage import InMemoryKeyValueStore

__all__ = ["InMemoryKeyValueStore"]
