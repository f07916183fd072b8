from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Team


class TeamRepository(Protocol):
    """Repository interface for Team.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def list_all(self) -> Sequence[Team]:
        raise NotImplementedError

    def get_by_id(self, team_id: int) -> Optional[Team]:
        raise NotImplementedError

    def create(self, *, name: str, is_active: bool) -> int:
        raise NotImplementedError

    def update(self, *, team_id: int, name: str, is_active: bool) -> bool:
        """Returns False when no row matched team_id."""

        raise NotImplementedError

    def delete_by_id(self, team_id: int) -> bool:
        raise NotImplementedError
