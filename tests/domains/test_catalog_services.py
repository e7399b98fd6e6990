"""
Tests for store, location, rank, owner and project services
"""

import pytest
from pydantic import ValidationError

from opsgraph.core.exceptions import InvalidIdentifier, NotFound
from opsgraph.schemas.owner import OwnerCreate
from opsgraph.schemas.project import ProjectCreate, ProjectStatus
from opsgraph.schemas.rank import RankCreate
from opsgraph.schemas.store import StoreCreate


async def test_store_keeps_resolved_location(services, location):
    store = await services.stores.create_store(StoreCreate(name="Central", location_id=location["_id"]))

    assert store["location_id"] == location["_id"]
    assert await services.stores.get_store(store["_id"]) == store


@pytest.mark.parametrize("location_id", ["", "L1", "64b7f0c2a1b2c3d4e5f60718"])
async def test_store_with_unresolved_location(services, location_id):
    store = await services.stores.create_store(StoreCreate(name="Central", location_id=location_id))
    assert store["location_id"] == ""


async def test_get_all_stores(services, store, other_store):
    assert {s["_id"] for s in await services.stores.get_stores()} == {store["_id"], other_store["_id"]}


async def test_location_lookup(services, location, missing_id):
    assert await services.locations.get_location(location["_id"]) == location
    assert await services.locations.get_locations() == [location]
    with pytest.raises(NotFound):
        await services.locations.get_location(missing_id)


async def test_rank_lookup(services, rank, missing_id):
    assert rank["name"] == "Captain"
    assert await services.ranks.get_rank(rank["_id"]) == rank
    with pytest.raises(NotFound):
        await services.ranks.get_rank(missing_id)
    with pytest.raises(InvalidIdentifier):
        await services.ranks.get_rank("R1")


async def test_get_all_ranks_empty(services):
    assert await services.ranks.get_ranks() == []


def test_rank_name_must_not_be_blank():
    with pytest.raises(ValidationError):
        RankCreate(name="   ")


async def test_owner_and_project(services, missing_id):
    owner = await services.owners.create_owner(
        OwnerCreate(name="Ana Popescu", email="ana@example.com", phone="555-123-4567")
    )
    assert await services.owners.get_owner(owner["_id"]) == owner
    assert await services.owners.get_owners() == [owner]

    project = await services.projects.create_project(
        ProjectCreate(owner_id=owner["_id"], name="Rollout", status=ProjectStatus.IN_PROGRESS)
    )
    assert project["status"] == "InProgress"
    assert project["owner_id"] == owner["_id"]
    assert await services.projects.get_projects() == [project]

    with pytest.raises(NotFound):
        await services.projects.get_project(missing_id)


async def test_project_owner_is_not_validated(services):
    project = await services.projects.create_project(ProjectCreate(owner_id="nobody", name="Orphan"))

    assert project["owner_id"] == "nobody"
    assert project["status"] == "NotStarted"
