from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body
from ..common.validators import optional_id
from ..container import Container
from .model import Employee


def employee_to_json(employee: Employee) -> dict:
    return {
        "id": employee.employee_id,
        "name": employee.name,
        "teamId": employee.team_id,
        "epiCert": employee.epi_cert,
        "sstCert": employee.sst_cert,
        "active": employee.active,
        "role": employee.role.value,
        "teamName": employee.team_name,
    }


def _employee_fields(payload: dict) -> dict:
    return {
        "name": payload.get("name"),
        "team_id": payload.get("teamId"),
        "epi_cert": bool(payload.get("epiCert", False)),
        "sst_cert": bool(payload.get("sstCert", False)),
        "active": bool(payload.get("active", True)),
        "role": payload.get("role") or "employee",
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        team_id = optional_id(request.args.get("teamId"), "teamId")
        active_s = request.args.get("active")
        active = None if active_s is None else active_s == "true"

        employees = container.employee_service.list_employees(team_id=team_id, active=active)
        return jsonify([employee_to_json(e) for e in employees])

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        payload = json_body()
        employee = container.employee_service.create_employee(**_employee_fields(payload))
        return jsonify(employee_to_json(employee)), 201

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: int):
        payload = json_body()
        employee = container.employee_service.update_employee(employee_id=employee_id, **_employee_fields(payload))
        return jsonify(employee_to_json(employee))

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: int):
        container.employee_service.delete_employee(employee_id=employee_id)
        return "", 204

    @app.route("/api/employees/<int:employee_id>/activate", methods=["PATCH"], endpoint="activate_employee")
    def activate_employee(employee_id: int):
        payload = json_body()
        active = container.employee_service.set_active(
            employee_id=employee_id,
            active=bool(payload.get("active", True)),
        )
        return jsonify({"id": employee_id, "active": active})
