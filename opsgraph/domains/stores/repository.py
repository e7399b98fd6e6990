"""
Store repository for database operations.
"""
from opsgraph.db.base_repository import BaseRepository
from opsgraph.db.mongodb import STORES, MongoDB


class StoreRepository(BaseRepository):
    """
    Repository for store data access.
    """

    entity_name = "Store"

    def __init__(self, mongodb: MongoDB):
        """Initialize with the store collection."""
        super().__init__(mongodb.get_collection(STORES))
