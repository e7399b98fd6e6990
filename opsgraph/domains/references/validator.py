"""
Reference validation for ids pointing into other collections.
"""
import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from opsgraph.core.exceptions import InvalidIdentifier
from opsgraph.db.base_repository import BaseRepository
from opsgraph.domains.locations.repository import LocationRepository
from opsgraph.domains.ranks.repository import RankRepository
from opsgraph.domains.stores.repository import StoreRepository

logger = logging.getLogger(__name__)


class ReferenceStatus(str, Enum):
    """Outcome of resolving a single reference."""
    VALID = "valid"
    INVALID = "invalid"  # malformed id
    NOT_FOUND = "not_found"


class ReferenceValidator:
    """
    Resolves foreign ids against their target collections.

    Malformed and unknown ids both count as invalid for callers; the
    difference is only kept for logging. Persistence failures propagate.
    """

    def __init__(
        self,
        rank_repo: RankRepository,
        store_repo: StoreRepository,
        location_repo: LocationRepository
    ):
        self.rank_repo = rank_repo
        self.store_repo = store_repo
        self.location_repo = location_repo

    @staticmethod
    async def check_reference(
        repo: BaseRepository,
        candidate_id: Any
    ) -> Tuple[ReferenceStatus, Optional[Dict[str, Any]]]:
        """
        Look up a candidate id in the repository's collection.

        Args:
            repo: Repository of the referenced collection
            candidate_id: Id to resolve

        Returns:
            Tuple of (status, document or None)
        """
        try:
            document = await repo.find_by_id(candidate_id)
        except InvalidIdentifier:
            logger.warning(f"Malformed {repo.entity_name.lower()} reference '{candidate_id}'")
            return ReferenceStatus.INVALID, None

        if document is None:
            logger.warning(f"{repo.entity_name} reference '{candidate_id}' not found")
            return ReferenceStatus.NOT_FOUND, None

        return ReferenceStatus.VALID, document

    async def validate_rank(self, candidate_id: str) -> str:
        """
        Validate a rank reference.

        Args:
            candidate_id: Rank id to check

        Returns:
            The id unchanged if the rank exists, "" otherwise
        """
        status, _ = await self.check_reference(self.rank_repo, candidate_id)
        if status is ReferenceStatus.VALID:
            return candidate_id
        return ""

    async def validate_store_list(self, candidate_ids: List[str]) -> List[str]:
        """
        Keep the store ids that resolve to an existing store.

        Order is preserved and duplicates are not removed.

        Args:
            candidate_ids: Store ids to check

        Returns:
            Filtered list of store ids
        """
        valid_ids = []
        for store_id in candidate_ids:
            status, _ = await self.check_reference(self.store_repo, store_id)
            if status is ReferenceStatus.VALID:
                valid_ids.append(store_id)

        dropped = len(candidate_ids) - len(valid_ids)
        if dropped:
            logger.info(f"Dropped {dropped} of {len(candidate_ids)} store references")
        return valid_ids

    async def validate_location(self, candidate_id: str) -> Optional[Dict[str, Any]]:
        """
        Resolve a location reference.

        Args:
            candidate_id: Location id to check

        Returns:
            Location document or None
        """
        _, location = await self.check_reference(self.location_repo, candidate_id)
        return location
