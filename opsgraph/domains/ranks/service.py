"""
Rank service for business logic.
"""
from typing import Any, Dict, List

from opsgraph.domains.ranks.repository import RankRepository
from opsgraph.schemas.rank import RankCreate
from opsgraph.utils.id_handler import IdHandler


class RankService:
    """
    Service for rank-related business logic.
    """

    def __init__(self, rank_repo: RankRepository):
        """
        Initialize with rank repository.

        Args:
            rank_repo: Rank repository instance
        """
        self.rank_repo = rank_repo

    async def get_ranks(self) -> List[Dict[str, Any]]:
        """
        Get all ranks.

        Returns:
            List of rank documents
        """
        return await self.rank_repo.find_all()

    async def get_rank(self, rank_id: str) -> Dict[str, Any]:
        """
        Get rank by ID.

        Args:
            rank_id: Rank ID

        Returns:
            Rank document

        Raises:
            NotFound: If no rank has this ID
        """
        rank = await self.rank_repo.find_by_id(rank_id)
        return IdHandler.raise_if_not_found(rank, "Rank", rank_id)

    async def create_rank(self, rank_data: RankCreate) -> Dict[str, Any]:
        """
        Create a new rank.

        Args:
            rank_data: Rank data

        Returns:
            Created rank document
        """
        return await self.rank_repo.create(rank_data.model_dump())
