"""
Owner repository for database operations.
"""
from opsgraph.db.base_repository import BaseRepository
from opsgraph.db.mongodb import OWNERS, MongoDB


class OwnerRepository(BaseRepository):
    """
    Repository for owner data access.
    """

    entity_name = "Owner"

    def __init__(self, mongodb: MongoDB):
        """Initialize with the owner collection."""
        super().__init__(mongodb.get_collection(OWNERS))
