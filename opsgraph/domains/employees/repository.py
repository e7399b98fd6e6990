"""
Employee repository for database operations.
"""
from opsgraph.db.base_repository import BaseRepository
from opsgraph.db.mongodb import EMPLOYEES, MongoDB


class EmployeeRepository(BaseRepository):
    """
    Repository for employee data access.
    """

    entity_name = "Employee"

    def __init__(self, mongodb: MongoDB):
        """Initialize with the employee collection."""
        super().__init__(mongodb.get_collection(EMPLOYEES))
