"""
EventRouter: wildcard event-name matching for the Guildhall EventBus.

Supported Patterns
------------------
- Exact:   "guild.member_added" → matches only "guild.member_added"
- Global:  "*" → matches any event
- Prefix:  "guild.*" → matches "guild.member_added", "guild.created", etc.
- Suffix:  "*.died" → matches "enemy.died"

Matching is case-sensitive. Repeated wildcards ("**") collapse to one.
"""

from __future__ import annotations


class EventRouter:
    """
    Stateless wildcard matcher.

    Examples
    --------
    >>> router = EventRouter()
    >>> router.matches("guild.member_added", "guild.*")
    True
    >>> router.matches("enemy.died", "guild.*")
    False
    """

    def matches(self, event_name: str, pattern: str) -> bool:
        if pattern == "*":
            return True

        if "*" not in pattern:
            return event_name == pattern

        while "**" in pattern:
            pattern = pattern.replace("**", "*")

        parts = pattern.split("*")

        if parts[0] and not event_name.startswith(parts[0]):
            return False
        if parts[-1] and not event_name.endswith(parts[-1]):
            return False
        if len(event_name) < len(parts[0]) + len(parts[-1]):
            return False

        # Middle pieces must appear in order between prefix and suffix
        idx = len(parts[0])
        end = len(event_name) - len(parts[-1])
        for mid in parts[1:-1]:
            if not mid:
                continue
            next_idx = event_name.find(mid, idx, end)
            if next_idx == -1:
                return False
            idx = next_idx + len(mid)

        return True
