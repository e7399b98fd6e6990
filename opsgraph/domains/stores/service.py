"""
Store service for business logic.
"""
import logging
from typing import Any, Dict, List

from opsgraph.domains.references.validator import ReferenceValidator
from opsgraph.domains.stores.repository import StoreRepository
from opsgraph.schemas.store import StoreCreate
from opsgraph.utils.id_handler import IdHandler

logger = logging.getLogger(__name__)


class StoreService:
    """
    Service for store-related business logic.
    """

    def __init__(self, store_repo: StoreRepository, validator: ReferenceValidator):
        """
        Initialize with store repository and reference validator.

        Args:
            store_repo: Store repository instance
            validator: Validator used to resolve the location reference
        """
        self.store_repo = store_repo
        self.validator = validator

    async def get_stores(self) -> List[Dict[str, Any]]:
        """Get all stores."""
        return await self.store_repo.find_all()

    async def get_store(self, store_id: str) -> Dict[str, Any]:
        """
        Get store by ID.

        Raises:
            InvalidIdentifier: If the ID is malformed
            NotFound: If no store has this ID
        """
        store = await self.store_repo.find_by_id(store_id)
        return IdHandler.raise_if_not_found(store, "Store", store_id)

    async def create_store(self, store_data: StoreCreate) -> Dict[str, Any]:
        """
        Create a new store.

        The location id is kept only when it resolves to an existing
        location, otherwise the store is saved with an empty location_id.

        Args:
            store_data: Store data

        Returns:
            Created store document
        """
        location = None
        if store_data.location_id:
            location = await self.validator.validate_location(store_data.location_id)

        return await self.store_repo.create({
            "name": store_data.name,
            "location_id": location["_id"] if location else "",
        })
