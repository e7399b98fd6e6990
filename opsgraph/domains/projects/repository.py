"""
Project repository for database operations.
"""
from opsgraph.db.base_repository import BaseRepository
from opsgraph.db.mongodb import PROJECTS, MongoDB


class ProjectRepository(BaseRepository):
    """
    Repository for project data access.
    """

    entity_name = "Project"

    def __init__(self, mongodb: MongoDB):
        """Initialize with the project collection."""
        super().__init__(mongodb.get_collection(PROJECTS))
