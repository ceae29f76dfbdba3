from .entity_id import EntityId

__all__ = [
    "EntityId",
]
