"""
Shared pytest fixtures and configuration for all tests.
"""

import pytest
from mongomock_motor import AsyncMongoMockClient

from opsgraph.db.mongodb import MongoDB
from opsgraph.dependencies.services import build_services
from opsgraph.schemas.location import LocationCreate
from opsgraph.schemas.rank import RankCreate
from opsgraph.schemas.store import StoreCreate


@pytest.fixture
def missing_id() -> str:
    """Well-formed ObjectId that is never inserted."""
    return "64b7f0c2a1b2c3d4e5f60718"


@pytest.fixture
def mongodb() -> MongoDB:
    """In-memory MongoDB connection manager."""
    return MongoDB("mongodb://localhost:27017", "praktikum_test", client=AsyncMongoMockClient())


@pytest.fixture
def services(mongodb):
    """Services wired against the in-memory database."""
    return build_services(mongodb)


@pytest.fixture
async def location(services):
    return await services.locations.create_location(LocationCreate(country="Romania", state="Cluj"))


@pytest.fixture
async def rank(services):
    return await services.ranks.create_rank(RankCreate(name="Captain", description="Shift lead"))


@pytest.fixture
async def other_rank(services):
    return await services.ranks.create_rank(RankCreate(name="Sergeant", description="Team lead"))


@pytest.fixture
async def store(services, location):
    return await services.stores.create_store(StoreCreate(name="Central", location_id=location["_id"]))


@pytest.fixture
async def other_store(services, location):
    return await services.stores.create_store(StoreCreate(name="North", location_id=location["_id"]))
