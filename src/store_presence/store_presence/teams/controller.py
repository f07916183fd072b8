from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from .model import Team


def team_to_json(team: Team) -> dict:
    return {"id": team.team_id, "name": team.name, "isActive": team.is_active}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/teams", methods=["GET"], endpoint="list_teams")
    def list_teams():
        return jsonify([team_to_json(t) for t in container.team_service.list_teams()])

    @app.route("/api/teams", methods=["POST"], endpoint="create_team")
    def create_team():
        payload = json_body()
        team = container.team_service.create_team(
            name=payload.get("name"),
            is_active=bool(payload.get("isActive", True)),
        )
        return jsonify(team_to_json(team)), 201

    @app.route("/api/teams/<int:team_id>", methods=["PUT"], endpoint="update_team")
    def update_team(team_id: int):
        payload = json_body()
        team = container.team_service.update_team(
            team_id=team_id,
            name=payload.get("name"),
            is_active=bool(payload.get("isActive", True)),
        )
        return jsonify(team_to_json(team))

    @app.route("/api/teams/<int:team_id>", methods=["DELETE"], endpoint="delete_team")
    def delete_team(team_id: int):
        container.team_service.delete_team(team_id=team_id)
        return "", 204
