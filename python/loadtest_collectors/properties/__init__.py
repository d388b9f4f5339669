"""Property storage for collector settings."""
from .store import PropertyStore, DictPropertyStore

__all__ = ["PropertyStore", "DictPropertyStore"]
