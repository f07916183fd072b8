from __future__ import annotations

from dataclasses import replace
from typing import Optional

import pytest

from src.store_presence.store_presence.core.enums import Role
from src.store_presence.store_presence.core.exceptions import NotFoundError, ValidationError
from src.store_presence.store_presence.employees.model import Employee
from src.store_presence.store_presence.employees.service import EmployeeService


class InMemoryEmployees:
    def __init__(self):
        self.employees: dict[int, Employee] = {}
        self.presence: dict[int, bool] = {}
        self._next_id = 1

    def list_all(self, *, team_id=None, active=None):
        items = [
            e
            for e in self.employees.values()
            if (team_id is None or e.team_id == team_id) and (active is None or e.active == active)
        ]
        return sorted(items, key=lambda e: e.name)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.employees.get(employee_id)

    def create(self, *, name, team_id, epi_cert, sst_cert, active, role) -> int:
        eid = self._next_id
        self._next_id += 1
        self.employees[eid] = Employee(
            employee_id=eid,
            name=name,
            team_id=team_id,
            epi_cert=epi_cert,
            sst_cert=sst_cert,
            active=active,
            role=role,
        )
        self.presence.setdefault(eid, False)
        return eid

    def update(self, *, employee_id, name, team_id, epi_cert, sst_cert, active, role) -> bool:
        if employee_id not in self.employees:
            return False
        self.employees[employee_id] = Employee(
            employee_id=employee_id,
            name=name,
            team_id=team_id,
            epi_cert=epi_cert,
            sst_cert=sst_cert,
            active=active,
            role=role,
        )
        return True

    def delete_by_id(self, employee_id: int) -> bool:
        self.presence.pop(employee_id, None)
        return self.employees.pop(employee_id, None) is not None

    def set_active(self, employee_id: int, *, active: bool) -> bool:
        if employee_id not in self.employees:
            return False
        self.employees[employee_id] = replace(self.employees[employee_id], active=active)
        return True


def test_create_employee_applies_defaults():
    repo = InMemoryEmployees()
    svc = EmployeeService(repo)

    emp = svc.create_employee(name="Alice Martin")

    assert emp.team_id is None
    assert (emp.epi_cert, emp.sst_cert, emp.active) == (False, False, True)
    assert emp.role == Role.EMPLOYEE
    assert repo.presence[emp.employee_id] is False


def test_create_employee_treats_falsy_team_id_as_no_team():
    svc = EmployeeService(InMemoryEmployees())

    assert svc.create_employee(name="Eva Kim", team_id="").team_id is None
    assert svc.create_employee(name="Eva Kim", team_id=0).team_id is None
    assert svc.create_employee(name="Eva Kim", team_id="3").team_id == 3


def test_create_employee_requires_name():
    svc = EmployeeService(InMemoryEmployees())

    with pytest.raises(ValidationError):
        svc.create_employee(name="")


def test_create_employee_rejects_unknown_role():
    svc = EmployeeService(InMemoryEmployees())

    with pytest.raises(ValidationError):
        svc.create_employee(name="Bruno Silva", role="manager")


def test_create_employee_rejects_non_numeric_team_id():
    svc = EmployeeService(InMemoryEmployees())

    with pytest.raises(ValidationError):
        svc.create_employee(name="Bruno Silva", team_id="sales")


def test_update_employee_is_full_replace():
    svc = EmployeeService(InMemoryEmployees())
    emp = svc.create_employee(name="Chloe", team_id=2, epi_cert=True, sst_cert=True, role="visitor")

    updated = svc.update_employee(employee_id=emp.employee_id, name="Chloe Dupont")

    assert updated.name == "Chloe Dupont"
    assert updated.team_id is None
    assert (updated.epi_cert, updated.sst_cert) == (False, False)
    assert updated.role == Role.EMPLOYEE


def test_update_missing_employee_raises_not_found():
    svc = EmployeeService(InMemoryEmployees())

    with pytest.raises(NotFoundError):
        svc.update_employee(employee_id=99, name="Nobody")


def test_delete_missing_employee_raises_not_found():
    svc = EmployeeService(InMemoryEmployees())

    with pytest.raises(NotFoundError):
        svc.delete_employee(employee_id=99)


def test_set_active_only_touches_active_flag():
    repo = InMemoryEmployees()
    svc = EmployeeService(repo)
    emp = svc.create_employee(name="David Rossi", team_id=4, epi_cert=True)
    repo.presence[emp.employee_id] = True

    assert svc.set_active(employee_id=emp.employee_id, active=False) is False

    stored = repo.get_by_id(emp.employee_id)
    assert stored.active is False
    assert stored.team_id == 4
    assert stored.epi_cert is True
    assert repo.presence[emp.employee_id] is True


def test_set_active_on_missing_employee_raises_not_found():
    svc = EmployeeService(InMemoryEmployees())

    with pytest.raises(NotFoundError):
        svc.set_active(employee_id=7, active=True)


@pytest.mark.parametrize("name", ["", None])
def test_update_missing_employee_is_not_found_before_name_check(name):
    svc = EmployeeService(InMemoryEmployees())

    with pytest.raises(NotFoundError):
        svc.update_employee(employee_id=99, name=name)
