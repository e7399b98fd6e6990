"""
Tests for rank, store and location reference validation
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import AutoReconnect

from opsgraph.core.exceptions import PersistenceFailure
from opsgraph.domains.references.validator import ReferenceStatus, ReferenceValidator


@pytest.fixture
def validator(services) -> ReferenceValidator:
    return services.employees.validator


async def test_validate_rank_keeps_existing_rank(validator, rank):
    assert await validator.validate_rank(rank["_id"]) == rank["_id"]


@pytest.mark.parametrize("candidate", ["R1", "", "zzzzzzzzzzzzzzzzzzzzzzzz"])
async def test_validate_rank_malformed_id_gives_empty_string(validator, candidate):
    assert await validator.validate_rank(candidate) == ""


async def test_validate_rank_unknown_id_gives_empty_string(validator, missing_id):
    assert await validator.validate_rank(missing_id) == ""


async def test_validate_store_list_filters_preserving_order_and_duplicates(
    validator, store, other_store, missing_id
):
    candidates = [other_store["_id"], "S2", store["_id"], missing_id, other_store["_id"]]

    assert await validator.validate_store_list(candidates) == [
        other_store["_id"],
        store["_id"],
        other_store["_id"],
    ]


async def test_validate_store_list_empty(validator):
    assert await validator.validate_store_list([]) == []


async def test_validate_location(validator, location, missing_id):
    assert await validator.validate_location(location["_id"]) == location
    assert await validator.validate_location(missing_id) is None
    assert await validator.validate_location("bad") is None


async def test_check_reference_distinguishes_invalid_from_not_found(validator, rank, missing_id):
    status, document = await ReferenceValidator.check_reference(validator.rank_repo, rank["_id"])
    assert status is ReferenceStatus.VALID
    assert document == rank

    status, document = await ReferenceValidator.check_reference(validator.rank_repo, "R-bad")
    assert status is ReferenceStatus.INVALID
    assert document is None

    status, document = await ReferenceValidator.check_reference(validator.rank_repo, missing_id)
    assert status is ReferenceStatus.NOT_FOUND
    assert document is None


async def test_persistence_failures_are_not_swallowed(validator, missing_id):
    collection = MagicMock()
    collection.find_one = AsyncMock(side_effect=AutoReconnect("gone"))
    validator.store_repo.collection = collection

    with pytest.raises(PersistenceFailure):
        await validator.validate_store_list([missing_id])
