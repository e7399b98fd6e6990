"""
Location service for business logic.
"""
from typing import Any, Dict, List

from opsgraph.domains.locations.repository import LocationRepository
from opsgraph.schemas.location import LocationCreate
from opsgraph.utils.id_handler import IdHandler


class LocationService:
    """
    Service for location-related business logic.
    """

    def __init__(self, location_repo: LocationRepository):
        self.location_repo = location_repo

    async def get_locations(self) -> List[Dict[str, Any]]:
        return await self.location_repo.find_all()

    async def get_location(self, location_id: str) -> Dict[str, Any]:
        location = await self.location_repo.find_by_id(location_id)
        return IdHandler.raise_if_not_found(location, "Location", location_id)

    async def create_location(self, location_data: LocationCreate) -> Dict[str, Any]:
        return await self.location_repo.create(location_data.model_dump())
