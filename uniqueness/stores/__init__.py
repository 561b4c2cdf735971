"""Storage backends for generated values."""

from .base import Store
from .memory import MemoryStore

__all__ = ["Store", "MemoryStore", "GLOBAL_STORE", "clear_global_store"]

# Shared by every unique()/unique_value() call that passes no store.
# Lives as long as the process; nothing resets it but clear_global_store().
GLOBAL_STORE = MemoryStore()


def clear_global_store() -> None:
    """Forget every value handed out through the shared store."""
    GLOBAL_STORE.clear()
