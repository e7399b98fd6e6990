"""
Rank repository for database operations.
"""
from opsgraph.db.base_repository import BaseRepository
from opsgraph.db.mongodb import RANKS, MongoDB


class RankRepository(BaseRepository):
    """
    Repository for rank data access.
    """

    entity_name = "Rank"

    def __init__(self, mongodb: MongoDB):
        """Initialize with the rank collection."""
        super().__init__(mongodb.get_collection(RANKS))
