"""
Owner service for business logic.
"""
from typing import Any, Dict, List

from opsgraph.domains.owners.repository import OwnerRepository
from opsgraph.schemas.owner import OwnerCreate
from opsgraph.utils.id_handler import IdHandler


class OwnerService:
    """
    Service for project owners.
    """

    def __init__(self, owner_repo: OwnerRepository):
        self.owner_repo = owner_repo

    async def get_owners(self) -> List[Dict[str, Any]]:
        return await self.owner_repo.find_all()

    async def get_owner(self, owner_id: str) -> Dict[str, Any]:
        owner = await self.owner_repo.find_by_id(owner_id)
        return IdHandler.raise_if_not_found(owner, "Owner", owner_id)

    async def create_owner(self, owner_data: OwnerCreate) -> Dict[str, Any]:
        return await self.owner_repo.create(owner_data.model_dump())
