"""
Player race presets.

Each race carries a fixed stat block. Races also have a preferred partner
race, looked up from a static pairing table.
"""

from __future__ import annotations

import enum
from typing import Optional


class PlayerRace(enum.Enum):
    """
    Playable races with their preset stats.

    Values are (display_name, max_hp, vitality, intelligence, strength, agility).
    """

    WARRIOR = ("Warrior", 150, 18, 6, 20, 10)
    NINJA = ("Ninja", 120, 12, 14, 15, 18)
    SHAMAN = ("Shaman", 110, 10, 20, 10, 12)
    DARK_MAGE = ("Dark Mage", 130, 15, 15, 18, 10)

    def __init__(
        self,
        display_name: str,
        max_hp: int,
        vitality: int,
        intelligence: int,
        strength: int,
        agility: int,
    ) -> None:
        self.display_name = display_name
        self.max_hp = max_hp
        self.vitality = vitality
        self.intelligence = intelligence
        self.strength = strength
        self.agility = agility

    @property
    def best_partner(self) -> Optional[PlayerRace]:
        """Race that pairs best with this one, or None if it has no partner."""
        return _BEST_PARTNERS.get(self)

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional[PlayerRace]:
        """
        Look up a race by display name, ignoring case.

        Example
        -------
        >>> PlayerRace.from_name("dark mage")
        <PlayerRace.DARK_MAGE: ('Dark Mage', 130, 15, 15, 18, 10)>
        >>> PlayerRace.from_name("Paladin") is None
        True
        """
        if name is None:
            return None
        wanted = name.casefold()
        for race in cls:
            if race.display_name.casefold() == wanted:
                return race
        return None


_BEST_PARTNERS = {
    PlayerRace.WARRIOR: PlayerRace.SHAMAN,
    PlayerRace.SHAMAN: PlayerRace.WARRIOR,
    PlayerRace.NINJA: PlayerRace.DARK_MAGE,
    PlayerRace.DARK_MAGE: PlayerRace.NINJA,
}
