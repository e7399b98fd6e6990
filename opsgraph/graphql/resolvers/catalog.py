"""
Store, location and rank resolvers
"""

import strawberry

from opsgraph.schemas.location import LocationCreate
from opsgraph.schemas.rank import RankCreate
from opsgraph.schemas.store import StoreCreate

from ..context import get_services, to_schema
from ..inputs import CreateLocationInput, CreateRankInput, CreateStoreInput
from ..types.operations import Location, Rank, Store


async def resolve_store(info: strawberry.Info, store_id: str) -> Store:
    return Store.from_document(await get_services(info).stores.get_store(store_id))


async def resolve_all_stores(info: strawberry.Info) -> list[Store]:
    return [Store.from_document(doc) for doc in await get_services(info).stores.get_stores()]


async def create_store(info: strawberry.Info, input: CreateStoreInput) -> Store:
    data = to_schema(StoreCreate, input)
    return Store.from_document(await get_services(info).stores.create_store(data))


async def resolve_location(info: strawberry.Info, location_id: str) -> Location:
    return Location.from_document(await get_services(info).locations.get_location(location_id))


async def resolve_all_locations(info: strawberry.Info) -> list[Location]:
    return [Location.from_document(doc) for doc in await get_services(info).locations.get_locations()]


async def create_location(info: strawberry.Info, input: CreateLocationInput) -> Location:
    data = to_schema(LocationCreate, input)
    return Location.from_document(await get_services(info).locations.create_location(data))


async def resolve_rank(info: strawberry.Info, rank_id: str) -> Rank:
    return Rank.from_document(await get_services(info).ranks.get_rank(rank_id))


async def resolve_all_ranks(info: strawberry.Info) -> list[Rank]:
    return [Rank.from_document(doc) for doc in await get_services(info).ranks.get_ranks()]


async def create_rank(info: strawberry.Info, input: CreateRankInput) -> Rank:
    data = to_schema(RankCreate, input)
    return Rank.from_document(await get_services(info).ranks.create_rank(data))
