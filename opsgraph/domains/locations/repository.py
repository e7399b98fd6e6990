"""
Location repository for database operations.
"""
from opsgraph.db.base_repository import BaseRepository
from opsgraph.db.mongodb import LOCATIONS, MongoDB


class LocationRepository(BaseRepository):
    """
    Repository for location data access.
    """

    entity_name = "Location"

    def __init__(self, mongodb: MongoDB):
        """Initialize with the location collection."""
        super().__init__(mongodb.get_collection(LOCATIONS))
