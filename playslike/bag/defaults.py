from __future__ import annotations

from typing import List

from playslike.physics.clubs import CLUB_DATABASE

from .models import BagClub


def default_clubs() -> List[BagClub]:
    """One enabled entry per built-in club at its normal yardage."""
    return [
        BagClub(
            key=key,
            name=profile.name,
            is_enabled=True,
            custom_distance=profile.normal_yardage,
            sort_order=index,
        )
        for index, (key, profile) in enumerate(CLUB_DATABASE.items())
    ]


__all__ = ["default_clubs"]
