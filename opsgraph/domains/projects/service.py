"""
Project service for business logic.
"""
from typing import Any, Dict, List

from opsgraph.domains.projects.repository import ProjectRepository
from opsgraph.schemas.project import ProjectCreate
from opsgraph.utils.id_handler import IdHandler


class ProjectService:
    """
    Service for project-related business logic.
    """

    def __init__(self, project_repo: ProjectRepository):
        """
        Initialize with project repository.

        Args:
            project_repo: Project repository instance
        """
        self.project_repo = project_repo

    async def get_projects(self) -> List[Dict[str, Any]]:
        """Get all projects."""
        return await self.project_repo.find_all()

    async def get_project(self, project_id: str) -> Dict[str, Any]:
        """
        Get project by ID.

        Raises:
            InvalidIdentifier: If the ID is malformed
            NotFound: If no project has this ID
        """
        project = await self.project_repo.find_by_id(project_id)
        return IdHandler.raise_if_not_found(project, "Project", project_id)

    async def create_project(self, project_data: ProjectCreate) -> Dict[str, Any]:
        """
        Create a new project.

        Args:
            project_data: Project data

        Returns:
            Created project document
        """
        return await self.project_repo.create(project_data.model_dump(mode="json"))
