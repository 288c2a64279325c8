from .person import PersonService, StorePersonService
from .store import InMemoryPersonStore, PersonStore, SqlPersonStore

__all__ = [
    "PersonService",
    "StorePersonService",
    "PersonStore",
    "InMemoryPersonStore",
    "SqlPersonStore",
]
