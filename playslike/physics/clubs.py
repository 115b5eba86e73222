"""Static aerodynamic parameters for the built-in clubs."""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from playslike import errors


@dataclass(frozen=True)
class ClubAerodynamicProfile:
    name: str
    normal_yardage: float
    ball_speed: float  # mph
    launch_angle: float  # degrees
    spin_rate: float  # rpm
    max_height: float  # apex, ft
    land_angle: float  # degrees
    spin_decay: float
    wind_sensitivity: float = 1.0


CLUB_DATABASE: Mapping[str, ClubAerodynamicProfile] = MappingProxyType(
    {
        "driver": ClubAerodynamicProfile("Driver", 300, 175.5, 11.0, 2575, 40, 39, 0.08),
        "3-wood": ClubAerodynamicProfile("3-Wood", 265, 160, 11.5, 3333, 38, 42, 0.09),
        "5-wood": ClubAerodynamicProfile("5-Wood", 245, 156, 10.7, 4622, 34, 37, 0.10),
        "4-iron": ClubAerodynamicProfile("4-Iron", 220, 135.4, 12.5, 4273, 33, 40, 0.105),
        "5-iron": ClubAerodynamicProfile("5-Iron", 210, 132.4, 13.6, 5004, 37, 42.6, 0.11),
        "6-iron": ClubAerodynamicProfile("6-Iron", 198, 130, 15.0, 6004, 36.0, 46, 0.115),
        "7-iron": ClubAerodynamicProfile("7-Iron", 185, 124, 16.8, 7024, 35.5, 48.2, 0.12),
        "8-iron": ClubAerodynamicProfile("8-Iron", 170, 116, 18.5, 7708, 35, 47.3, 0.13),
        "9-iron": ClubAerodynamicProfile("9-Iron", 153, 112, 19.6, 8893, 34, 49.6, 0.14),
        "pitching-wedge": ClubAerodynamicProfile("PW", 145, 107.5, 21.3, 9236, 34, 50.6, 0.15),
        "gap-wedge": ClubAerodynamicProfile("GW", 135, 95.8, 23.0, 10070, 33, 51.1, 0.155),
        "sand-wedge": ClubAerodynamicProfile("SW", 130, 89, 25.3, 10800, 33, 51.4, 0.16),
        "lob-wedge": ClubAerodynamicProfile("LW", 120, 77, 28.1, 12000, 33, 52, 0.165),
    }
)

_WEDGE_ALIASES = {
    "pw": "pitching-wedge",
    "p": "pitching-wedge",
    "pitching": "pitching-wedge",
    "gw": "gap-wedge",
    "aw": "gap-wedge",
    "uw": "gap-wedge",
    "gap": "gap-wedge",
    "approach-wedge": "gap-wedge",
    "sw": "sand-wedge",
    "sand": "sand-wedge",
    "lw": "lob-wedge",
    "lob": "lob-wedge",
    "d": "driver",
    "dr": "driver",
    "1w": "driver",
    "1-wood": "driver",
}

_NUMBERED = re.compile(r"^(\d)-?(i|iron|w|wood)$")


def normalize_club_name(name: str | None) -> str | None:
    """Map a display name or shorthand (``"7i"``, ``"PW"``) to a database key."""
    if not name:
        return None
    text = re.sub(r"[\s_]+", "-", name.strip().lower())
    text = re.sub(r"-+", "-", text)
    if text in CLUB_DATABASE:
        return text
    if text in _WEDGE_ALIASES:
        return _WEDGE_ALIASES[text]
    match = _NUMBERED.match(text)
    if match:
        number, kind = match.groups()
        key = f"{number}-{'iron' if kind.startswith('i') else 'wood'}"
        return key if key in CLUB_DATABASE else None
    return None


def club_exists(club_key: str) -> bool:
    return club_key in CLUB_DATABASE


def get_club_profile(club: str) -> ClubAerodynamicProfile:
    """Return the profile for *club*, raising an invalid-club error when unknown."""
    key = normalize_club_name(club) or (club or "").strip().lower()
    profile = CLUB_DATABASE.get(key)
    if profile is None:
        raise errors.invalid_club(club, {"club_key": key})
    return profile


__all__ = [
    "CLUB_DATABASE",
    "ClubAerodynamicProfile",
    "club_exists",
    "get_club_profile",
    "normalize_club_name",
]
