from .user_store import UserStore, to_uuid

__all__ = ["UserStore", "to_uuid"]
