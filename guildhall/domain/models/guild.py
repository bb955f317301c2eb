"""
Guild Domain Model for Guildhall.

Purpose
-------
Aggregate root owning a fixed-capacity roster of Player references and the
running statistics derived from it.

Responsibilities
----------------
- Enforce the field rules for guild name, level, description and creation date
- Assign process-wide unique ids
- Maintain roster invariants: capacity, uniqueness, pet requirement
- Keep the running level sum consistent with the occupied slots
- Emit domain events for roster changes

Non-Responsibilities
--------------------
- Owning players (removal never destroys a Player)
- Publishing events (handled by GuildService)

Design Notes
------------
The roster is a list of ``max_members`` slots allocated once. Adding a member
takes the first free slot; removing one frees its slot for reuse. The list is
never resized, so capacity is a hard ceiling. Membership checks are linear
scans, which is fine for rosters of tens of members.

Usage Example
-------------
>>> guild = Guild("Iron Wolves", 3, "Northern raiders", date(2023, 4, 1), True, 10)
>>> guild.add_member(hero)
>>> guild.average_level
12.0
>>> [e.event_name for e in guild.get_pending_events()]
['guild.member_added']
"""

from __future__ import annotations

import threading
from datetime import date
from typing import ClassVar, List, Optional, Tuple

from guildhall.domain.constants import (
    GUILD_FIRST_ID,
    GUILD_MAX_DESCRIPTION_LENGTH,
    GUILD_MAX_LEVEL,
    GUILD_MAX_NAME_LENGTH,
    GUILD_MIN_NAME_LENGTH,
    MIN_LEVEL,
)
from guildhall.domain.exceptions import (
    DomainValidationError,
    GuildFullError,
    InvalidMaxMembersError,
    MemberAlreadyExistsError,
    MemberNoPetError,
    MemberNotFoundError,
    MemberNullError,
)
from guildhall.domain.models.base import (
    AggregateRoot,
    validate_length,
    validate_not_future,
    validate_positive,
    validate_range,
)
from guildhall.domain.models.player import Player


class Guild(AggregateRoot):
    """
    Guild aggregate root.

    Business Rules
    --------------
    - name: 5 to 25 characters (measured as given), not whitespace-only
    - level: 1 to 20
    - description: required, at most 100 characters (may be empty)
    - creation_date: required, not in the future
    - max_members: positive, fixed for the life of the guild
    - Only players with a pet can join
    - A player occupies at most one slot

    Domain Events
    -------------
    - guild.member_added: When a player takes a slot
    - guild.member_removed: When a player leaves a slot
    """

    INVALID_NAME = (
        "[ERROR] The name cannot be null, has less than the minimum number of "
        "characters, exceeds the maximum number of characters or contains only "
        "whitespaces."
    )
    INVALID_LEVEL = "[ERROR] The level must be between 1 and the predefined maximum."
    INVALID_DESCRIPTION = (
        "[ERROR] The description cannot be null and cannot exceed the predefined "
        "maximum number of characters."
    )
    INVALID_CREATION_DATE = "[ERROR] The creation date cannot be null or in the future."
    INVALID_MAX_MEMBERS = "[ERROR] The maximum number of members must be greater than 0."

    _next_id: ClassVar[int] = GUILD_FIRST_ID
    _id_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        name: str,
        level: int,
        description: str,
        creation_date: date,
        recruiting: bool,
        max_members: int,
    ) -> None:
        """
        Create a guild with an empty roster of ``max_members`` slots.

        The id is taken from the shared counter only once every argument has
        been validated, so a rejected guild never consumes an id.

        Raises
        ------
        DomainValidationError
            If name, level, description or creation_date is invalid
        InvalidMaxMembersError
            If max_members <= 0
        """
        name = validate_length(
            name, GUILD_MIN_NAME_LENGTH, GUILD_MAX_NAME_LENGTH, "name",
            message=self.INVALID_NAME, error_code="GUILD_INVALID_NAME", strip=False,
        )
        validate_range(
            level, MIN_LEVEL, GUILD_MAX_LEVEL, "level",
            message=self.INVALID_LEVEL, error_code="GUILD_INVALID_LEVEL",
        )
        if description is None or len(description) > GUILD_MAX_DESCRIPTION_LENGTH:
            raise DomainValidationError(
                self.INVALID_DESCRIPTION,
                field="description",
                error_code="GUILD_INVALID_DESCRIPTION",
                value=description,
            )
        creation_date = validate_not_future(
            creation_date, "creation_date",
            message=self.INVALID_CREATION_DATE, error_code="GUILD_INVALID_CREATION_DATE",
        )
        validate_positive(
            max_members, "max_members",
            message=self.INVALID_MAX_MEMBERS,
            error_code="GUILD_INVALID_MAX_MEMBERS",
            error_cls=InvalidMaxMembersError,
        )

        super().__init__(self._allocate_id())

        self._name = name
        self._level = level
        self._description = description
        self._creation_date = creation_date
        self._recruiting = bool(recruiting)
        self._max_members = max_members
        self._members: List[Optional[Player]] = [None] * max_members
        self._num_members = 0
        self._sum_levels = 0

    # ========================================================================
    # ID ALLOCATION
    # ========================================================================

    @classmethod
    def _allocate_id(cls) -> int:
        with Guild._id_lock:
            guild_id = Guild._next_id
            Guild._next_id += 1
        return guild_id

    @classmethod
    def peek_next_id(cls) -> int:
        """Id the next successfully constructed guild will receive."""
        with Guild._id_lock:
            return Guild._next_id

    # ========================================================================
    # PROPERTIES
    # ========================================================================

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> int:
        return self._level

    @property
    def description(self) -> str:
        return self._description

    @property
    def creation_date(self) -> date:
        return self._creation_date

    @property
    def is_recruiting(self) -> bool:
        return self._recruiting

    @property
    def max_members(self) -> int:
        return self._max_members

    @property
    def members(self) -> Tuple[Optional[Player], ...]:
        """Snapshot of every slot; free slots are None."""
        return tuple(self._members)

    @property
    def num_members(self) -> int:
        """Number of occupied slots, counted from the roster itself."""
        return sum(1 for member in self._members if member is not None)

    @property
    def average_level(self) -> float:
        """Mean member level; 0.0 for an empty guild."""
        count = self.num_members
        if count == 0:
            return 0.0
        return self._sum_levels / count

    @property
    def days_of_life(self) -> int:
        """Whole days elapsed since the guild was created."""
        return (date.today() - self._creation_date).days

    # ========================================================================
    # BUSINESS LOGIC - ROSTER
    # ========================================================================

    def contains_member(self, member: Player) -> bool:
        """
        Check whether *member* holds a slot.

        Raises
        ------
        MemberNullError
            If member is None
        MemberNoPetError
            If member has no pet
        """
        self._require_member_with_pet(member)
        return self._find_member(member) != -1

    def add_member(self, member: Player) -> None:
        """
        Put *member* in the first free slot.

        Raises
        ------
        MemberNullError
            If member is None
        MemberNoPetError
            If member has no pet
        GuildFullError
            If every slot is taken
        MemberAlreadyExistsError
            If member already holds a slot
        """
        self._require_member_with_pet(member)
        if self._num_members >= self._max_members:
            raise GuildFullError(self.id, self._max_members)
        if self._find_member(member) != -1:
            raise MemberAlreadyExistsError(self.id, member.name)

        slot = self._find_first_empty_slot()
        if slot == -1:
            raise GuildFullError(self.id, self._max_members)

        self._members[slot] = member
        self._num_members += 1
        self._sum_levels += member.level

        self.add_domain_event(
            "guild.member_added",
            {
                "guild_id": self.id,
                "member_id": member.id,
                "member_name": member.name,
                "slot": slot,
                "num_members": self._num_members,
            },
        )

    def remove_member(self, member: Player) -> None:
        """
        Free the slot held by *member*.

        Raises
        ------
        MemberNullError
            If member is None
        MemberNotFoundError
            If member holds no slot
        """
        if member is None:
            raise MemberNullError()

        slot = self._find_member(member)
        if slot == -1:
            raise MemberNotFoundError(self.id, member.name)

        self._sum_levels -= self._members[slot].level
        self._members[slot] = None
        self._num_members -= 1

        self.add_domain_event(
            "guild.member_removed",
            {
                "guild_id": self.id,
                "member_id": member.id,
                "member_name": member.name,
                "slot": slot,
                "num_members": self._num_members,
            },
        )

    # ========================================================================
    # HELPERS
    # ========================================================================

    @staticmethod
    def _require_member_with_pet(member: Optional[Player]) -> None:
        if member is None:
            raise MemberNullError()
        if member.pet is None:
            raise MemberNoPetError(member.name)

    def _find_member(self, member: Player) -> int:
        for index, existing in enumerate(self._members):
            if existing is not None and existing == member:
                return index
        return -1

    def _find_first_empty_slot(self) -> int:
        for index, existing in enumerate(self._members):
            if existing is None:
                return index
        return -1

    def __repr__(self) -> str:
        return (
            f"Guild(id={self.id}, name={self._name!r}, "
            f"members={self.num_members}/{self._max_members})"
        )
