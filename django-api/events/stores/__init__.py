from events.stores.interfaces import EventStore, StoreError, UniqueViolation, UnitOfWork

__all__ = ["EventStore", "StoreError", "UniqueViolation", "UnitOfWork"]
