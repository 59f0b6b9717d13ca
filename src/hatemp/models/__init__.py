from .states import ENTITY_STATE_LIST_ADAPTER, EntityState

__all__ = ["ENTITY_STATE_LIST_ADAPTER", "EntityState"]
