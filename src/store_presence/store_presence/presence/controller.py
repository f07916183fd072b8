from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_timestamp
from ..common.http import json_body
from ..common.validators import optional_id
from ..container import Container
from .model import PresenceSummary, PresentEmployeeRow


def present_row_to_json(row: PresentEmployeeRow) -> dict:
    return {
        "id": row.employee_id,
        "name": row.name,
        "role": row.role.value,
        "teamId": row.team_id,
        "teamName": row.team_name,
        "isPresent": row.is_present,
        "updatedAt": format_timestamp(row.updated_at) if row.updated_at else None,
    }


def summary_to_json(summary: PresenceSummary) -> dict:
    return {
        "totalPresent": summary.total_present,
        "perTeam": [
            {"teamId": t.team_id, "teamName": t.team_name, "presentCount": t.present_count}
            for t in summary.per_team
        ],
        "epiPresent": summary.epi_present,
        "sstPresent": summary.sst_present,
        "visitorsPresent": summary.visitors_present,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/presence", methods=["GET"], endpoint="list_presence")
    def list_presence():
        team_id = optional_id(request.args.get("teamId"), "teamId")
        rows = container.presence_service.list_present(team_id=team_id)
        return jsonify([present_row_to_json(r) for r in rows])

    @app.route("/api/presence/<int:employee_id>", methods=["POST"], endpoint="set_presence")
    def set_presence(employee_id: int):
        payload = json_body()
        record = container.presence_service.set_presence(
            employee_id,
            is_present=bool(payload.get("isPresent", True)),
        )
        return jsonify({"employeeId": record.employee_id, "isPresent": record.is_present})

    @app.route("/api/summary", methods=["GET"], endpoint="summary")
    def summary():
        return jsonify(summary_to_json(container.presence_service.get_summary()))
