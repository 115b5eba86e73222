from __future__ import annotations

from typing import Any, Iterable, List

from playslike import errors

from .defaults import default_clubs
from .models import BagClub, BagSnapshot


class ClubBag:
    """In-memory club bag acting as the club-recommendation oracle."""

    def __init__(self, clubs: Iterable[BagClub] | None = None) -> None:
        self._clubs: List[BagClub] = (
            [club.model_copy() for club in clubs] if clubs is not None else default_clubs()
        )

    @property
    def clubs(self) -> List[BagClub]:
        return list(self._clubs)

    def snapshot(self) -> BagSnapshot:
        return BagSnapshot(clubs=[club.model_copy() for club in self._clubs])

    def update_club(self, club_key: str, **updates: Any) -> BagClub:
        for index, club in enumerate(self._clubs):
            if club.key == club_key:
                merged = BagClub.model_validate({**club.model_dump(), **updates})
                self._clubs[index] = merged
                return merged
        raise errors.invalid_club(club_key, {"message": "Club is not in the bag"})

    def enabled_clubs(self) -> List[BagClub]:
        """Enabled clubs, longest first."""
        enabled = [club for club in self._clubs if club.is_enabled]
        return sorted(enabled, key=lambda club: club.custom_distance, reverse=True)

    def recommended_club(self, yardage: float) -> BagClub | None:
        """Shortest enabled club that still covers *yardage*, else the longest."""
        enabled = self.enabled_clubs()
        if not enabled:
            return None
        best = enabled[0]
        for club in enabled:
            if club.custom_distance >= yardage:
                best = club
            else:
                break
        return best

    __call__ = recommended_club


__all__ = ["ClubBag"]
