from .defaults import default_clubs
from .models import BagClub, BagSnapshot
from .service import ClubBag

__all__ = ["BagClub", "BagSnapshot", "ClubBag", "default_clubs"]
