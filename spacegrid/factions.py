"""Factions grouping players together."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable


@dataclass
class Faction:
    """A named faction with an ordered, duplicate-free list of members."""

    id: int
    name: str
    members: list[Hashable] = field(default_factory=list)

    def add_member(self, player_id: Hashable) -> None:
        if player_id not in self.members:
            self.members.append(player_id)

    def remove_member(self, player_id: Hashable) -> None:
        self.members = [m for m in self.members if m != player_id]