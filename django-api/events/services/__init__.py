from events.services.event_service import EventService, Operation

__all__ = ["EventService", "Operation"]
