"""
Construction of the services used by the GraphQL resolvers.
"""
from dataclasses import dataclass

from opsgraph.db.mongodb import MongoDB
from opsgraph.domains.employees.repository import EmployeeRepository
from opsgraph.domains.employees.service import EmployeeService
from opsgraph.domains.locations.repository import LocationRepository
from opsgraph.domains.locations.service import LocationService
from opsgraph.domains.owners.repository import OwnerRepository
from opsgraph.domains.owners.service import OwnerService
from opsgraph.domains.projects.repository import ProjectRepository
from opsgraph.domains.projects.service import ProjectService
from opsgraph.domains.ranks.repository import RankRepository
from opsgraph.domains.ranks.service import RankService
from opsgraph.domains.references.validator import ReferenceValidator
from opsgraph.domains.stores.repository import StoreRepository
from opsgraph.domains.stores.service import StoreService


@dataclass
class ServiceRegistry:
    """Services sharing one database connection."""
    employees: EmployeeService
    stores: StoreService
    locations: LocationService
    ranks: RankService
    owners: OwnerService
    projects: ProjectService


def build_services(mongodb: MongoDB) -> ServiceRegistry:
    """
    Wire repositories and services against a database connection.

    Args:
        mongodb: Connection manager to read collections from

    Returns:
        ServiceRegistry instance
    """
    rank_repo = RankRepository(mongodb)
    store_repo = StoreRepository(mongodb)
    location_repo = LocationRepository(mongodb)
    validator = ReferenceValidator(rank_repo, store_repo, location_repo)

    return ServiceRegistry(
        employees=EmployeeService(EmployeeRepository(mongodb), validator),
        stores=StoreService(store_repo, validator),
        locations=LocationService(location_repo),
        ranks=RankService(rank_repo),
        owners=OwnerService(OwnerRepository(mongodb)),
        projects=ProjectService(ProjectRepository(mongodb)),
    )
