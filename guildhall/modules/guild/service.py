"""
GuildService - orchestration for guild rosters
==============================================

Handles:
- Guild creation with a config-driven default capacity
- Lookup of guilds created during this process
- Enrolling and dismissing members
- Roster summaries for display

Every operation runs inside a LogContext carrying the guild id, player and
operation name. Domain events buffered by the Guild aggregate are drained
and published on the EventBus after each successful mutation. Domain
exceptions are logged and then re-raised unchanged.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from guildhall.core.logging.logger import LogContext
from guildhall.domain.exceptions import GuildhallDomainException, GuildNotFoundError
from guildhall.domain.models.guild import Guild
from guildhall.domain.models.player import Player
from guildhall.modules.shared.base_service import BaseService

if TYPE_CHECKING:
    from logging import Logger

    from guildhall.core.event.bus import EventBus


class GuildService(BaseService):
    """
    GuildService handles guild lifecycle and membership operations.

    Business Logic:
    - Roster rules (capacity, uniqueness, pet requirement) live in Guild
    - Guilds are indexed in memory by id
    - Every roster change is announced on the event bus
    """

    COMPONENT = "guild_service"

    def __init__(self, event_bus: EventBus, logger: Optional[Logger] = None):
        super().__init__(event_bus, logger)
        self._guilds: Dict[int, Guild] = {}

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def create_guild(
        self,
        name: str,
        level: int,
        description: str,
        creation_date: date,
        recruiting: bool = True,
        max_members: Optional[int] = None,
    ) -> Guild:
        """
        Create and register a guild.

        Args:
            name: Guild name
            level: Guild level
            description: Guild description (may be empty)
            creation_date: Founding date, not in the future
            recruiting: Whether the guild accepts new members
            max_members: Roster size; Config.DEFAULT_GUILD_MAX_MEMBERS when None

        Returns:
            The new Guild

        Raises:
            DomainValidationError: Any field is invalid
        """
        if max_members is None:
            max_members = self.get_config("DEFAULT_GUILD_MAX_MEMBERS", 50)

        with LogContext(component=self.COMPONENT, operation="create_guild"):
            try:
                guild = Guild(name, level, description, creation_date, recruiting, max_members)
            except GuildhallDomainException as exc:
                self.log_error("create_guild", exc, guild_name=name)
                raise

            self._guilds[guild.id] = guild
            self.log_operation(
                "create_guild",
                guild_id=guild.id,
                guild_name=guild.name,
                max_members=guild.max_members,
            )
            self.emit_event(
                "guild.created",
                {
                    "guild_id": guild.id,
                    "name": guild.name,
                    "level": guild.level,
                    "max_members": guild.max_members,
                },
            )
            return guild

    def get_guild(self, guild_id: int) -> Guild:
        """
        Look up a guild by id.

        Raises:
            GuildNotFoundError: No guild with that id was created here
        """
        guild = self._guilds.get(guild_id)
        if guild is None:
            raise GuildNotFoundError(guild_id)
        return guild

    def list_guilds(self) -> List[Guild]:
        """All registered guilds, in id order."""
        return [self._guilds[guild_id] for guild_id in sorted(self._guilds)]

    # -------------------------------------------------------------------------
    # Membership
    # -------------------------------------------------------------------------

    def enroll(self, guild_id: int, player: Player) -> Guild:
        """
        Add a player to a guild.

        Raises:
            GuildNotFoundError: Unknown guild
            MemberNullError: player is None
            MemberNoPetError: player has no pet
            GuildFullError: No free slot
            MemberAlreadyExistsError: player is already on the roster
        """
        return self._mutate_roster("enroll", guild_id, player, Guild.add_member)

    def dismiss(self, guild_id: int, player: Player) -> Guild:
        """
        Remove a player from a guild.

        Raises:
            GuildNotFoundError: Unknown guild
            MemberNullError: player is None
            MemberNotFoundError: player is not on the roster
        """
        return self._mutate_roster("dismiss", guild_id, player, Guild.remove_member)

    def roster_summary(self, guild_id: int) -> Dict[str, Any]:
        """
        Snapshot of a guild's roster statistics.

        Returns:
            Dict with id, name, num_members, max_members, average_level,
            recruiting and member names in slot order.
        """
        guild = self.get_guild(guild_id)
        return {
            "id": guild.id,
            "name": guild.name,
            "num_members": guild.num_members,
            "max_members": guild.max_members,
            "average_level": guild.average_level,
            "recruiting": guild.is_recruiting,
            "members": [member.name for member in guild.members if member is not None],
        }

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _mutate_roster(self, operation, guild_id, player, mutation) -> Guild:
        player_name = player.name if player is not None else None

        with LogContext(
            guild_id=guild_id,
            player=player_name,
            component=self.COMPONENT,
            operation=operation,
        ):
            try:
                guild = self.get_guild(guild_id)
                mutation(guild, player)
            except GuildhallDomainException as exc:
                self.log_error(operation, exc, guild_id=guild_id, player_name=player_name)
                raise

            published = self.publish_domain_events(guild)
            self.log_operation(
                operation,
                guild_id=guild_id,
                player_name=player_name,
                num_members=guild.num_members,
                events_published=published,
            )
            return guild
