"""
Employee service for business logic.
"""
import logging
from typing import Any, Dict, List

from opsgraph.core.exceptions import NotFound
from opsgraph.domains.employees.repository import EmployeeRepository
from opsgraph.domains.references.validator import ReferenceValidator
from opsgraph.schemas.employee import EmployeeCreate, EmployeeStatus, EmployeeUpdate
from opsgraph.utils.id_handler import IdHandler

logger = logging.getLogger(__name__)


class EmployeeService:
    """
    Service for employee-related business logic.
    """

    def __init__(self, employee_repo: EmployeeRepository, validator: ReferenceValidator):
        """
        Initialize with employee repository and reference validator.

        Args:
            employee_repo: Employee repository instance
            validator: Validator for rank and store references
        """
        self.employee_repo = employee_repo
        self.validator = validator

    async def get_employees(self) -> List[Dict[str, Any]]:
        """
        Get all employees.

        Returns:
            List of employee documents
        """
        return await self.employee_repo.find_all()

    async def get_employee(self, employee_id: str) -> Dict[str, Any]:
        """
        Get employee by ID.

        Args:
            employee_id: Employee ID

        Returns:
            Employee document

        Raises:
            InvalidIdentifier: If the ID is malformed
            NotFound: If no employee has this ID
        """
        employee = await self.employee_repo.find_by_id(employee_id)
        return IdHandler.raise_if_not_found(employee, "Employee", employee_id)

    async def create_employee(self, employee_data: EmployeeCreate) -> Dict[str, Any]:
        """
        Create a new employee.

        The rank is replaced by "" and unknown stores are dropped when the
        references do not resolve.

        Args:
            employee_data: Employee data

        Returns:
            Created employee document
        """
        validated_stores = await self.validator.validate_store_list(employee_data.stores or [])
        validated_rank = await self.validator.validate_rank(employee_data.rank_id)

        status = employee_data.status or EmployeeStatus.NONE

        created = await self.employee_repo.create({
            "first_name": employee_data.first_name,
            "last_name": employee_data.last_name,
            "status": status.value,
            "stores": validated_stores,
            "rank_id": validated_rank,
        })
        logger.info(f"Created employee {created['_id']}")
        return created

    async def update_employee(self, employee_data: EmployeeUpdate) -> Dict[str, Any]:
        """
        Update an existing employee.

        Names and rank keep their current value when omitted; an unknown
        rank override also keeps the current rank. Status and stores are
        reset to None and [] when omitted.

        Args:
            employee_data: Id of the employee plus the fields to override

        Returns:
            Employee document as stored after the update

        Raises:
            InvalidIdentifier: If the ID is malformed
            NotFound: If no employee has this ID
        """
        employee_id = employee_data.id
        existing = await self.get_employee(employee_id)

        current_rank = existing.get("rank_id", "")
        if employee_data.rank_id is None:
            rank_id = current_rank
        else:
            rank_id = await self.validator.validate_rank(employee_data.rank_id) or current_rank

        first_name = existing.get("first_name") if employee_data.first_name is None else employee_data.first_name
        last_name = existing.get("last_name") if employee_data.last_name is None else employee_data.last_name

        status = employee_data.status or EmployeeStatus.NONE

        if employee_data.stores is None:
            stores = []
        else:
            stores = await self.validator.validate_store_list(employee_data.stores)

        matched = await self.employee_repo.replace_fields(employee_id, {
            "first_name": first_name,
            "last_name": last_name,
            "status": status.value,
            "stores": stores,
            "rank_id": rank_id,
        })
        if not matched:
            raise NotFound("Employee", employee_id)

        return await self.get_employee(employee_id)

    async def delete_employee(self, employee_id: str) -> Dict[str, Any]:
        """
        Delete an employee.

        Args:
            employee_id: Employee ID

        Returns:
            The employee document as it was before deletion

        Raises:
            InvalidIdentifier: If the ID is malformed
            NotFound: If no employee has this ID
        """
        existing = await self.get_employee(employee_id)

        if not await self.employee_repo.delete(employee_id):
            raise NotFound("Employee", employee_id)

        logger.info(f"Deleted employee {employee_id}")
        return existing
