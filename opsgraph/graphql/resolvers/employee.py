"""
Employee resolvers
"""

import strawberry

from opsgraph.schemas.employee import EmployeeCreate, EmployeeUpdate

from ..context import get_services, to_schema
from ..inputs import CreateEmployeeInput, DeleteEmployeeInput, UpdateEmployeeInput
from ..types.operations import Employee


async def resolve_employee(info: strawberry.Info, employee_id: str) -> Employee:
    document = await get_services(info).employees.get_employee(employee_id)
    return Employee.from_document(document)


async def resolve_all_employees(info: strawberry.Info) -> list[Employee]:
    documents = await get_services(info).employees.get_employees()
    return [Employee.from_document(doc) for doc in documents]


async def create_employee(info: strawberry.Info, input: CreateEmployeeInput) -> Employee:
    data = to_schema(EmployeeCreate, input)
    document = await get_services(info).employees.create_employee(data)
    return Employee.from_document(document)


async def update_employee(info: strawberry.Info, input: UpdateEmployeeInput) -> Employee:
    data = to_schema(EmployeeUpdate, input)
    document = await get_services(info).employees.update_employee(data)
    return Employee.from_document(document)


async def delete_employee(info: strawberry.Info, input: DeleteEmployeeInput) -> Employee:
    """Delete an employee and return its last stored state."""
    document = await get_services(info).employees.delete_employee(input.id)
    return Employee.from_document(document)
