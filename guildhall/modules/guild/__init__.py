"""
Guild module.

Exposes GuildService, which orchestrates Guild aggregates and publishes
their roster events.
"""

from guildhall.modules.guild.service import GuildService

__all__ = ["GuildService"]
