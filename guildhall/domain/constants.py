"""
Guildhall Domain Constants

Purpose
-------
Business rule limits for every domain model: name lengths, level caps,
percentage ranges and map bounds.

IMPORTANT:
This module contains GAMEPLAY constants only. Runtime settings (log level,
environment, RNG seed) belong in guildhall.core.config.

Design Notes
------------
- Values are annotated with typing.Final to signal immutability
- Grouped by model
- No side effects at import time
"""

from __future__ import annotations

from typing import Final

# ============================================================================
# MAP
# ============================================================================

MIN_X: Final[int] = 0
MAX_X: Final[int] = 1024
MIN_Y: Final[int] = 0
MAX_Y: Final[int] = 512

# ============================================================================
# PET
# ============================================================================

PET_MIN_NAME_LENGTH: Final[int] = 3
PET_MAX_NAME_LENGTH: Final[int] = 20
PET_MAX_LEVEL: Final[int] = 60
PET_MAX_LOYALTY: Final[int] = 100
PET_MAX_STAMINA: Final[int] = 100

# ============================================================================
# PLAYER
# ============================================================================

PLAYER_MIN_NAME_LENGTH: Final[int] = 5
PLAYER_MAX_NAME_LENGTH: Final[int] = 50
PLAYER_MAX_LEVEL: Final[int] = 99
PLAYER_MAX_HONOR_TITLE_LENGTH: Final[int] = 30
PLAYER_MAX_PCT: Final[float] = 100.0
HONOR_TITLE_PATTERN: Final[str] = r"[a-zA-Z ]+"

# ============================================================================
# ENEMY
# ============================================================================

ENEMY_MIN_NAME_LENGTH: Final[int] = 1
ENEMY_MAX_NAME_LENGTH: Final[int] = 50
MAX_MOVE_DISTANCE: Final[float] = 10.0  # Longest single step an enemy may take

# ============================================================================
# GUILD
# ============================================================================

GUILD_MIN_NAME_LENGTH: Final[int] = 5
GUILD_MAX_NAME_LENGTH: Final[int] = 25
GUILD_MAX_LEVEL: Final[int] = 20
GUILD_MAX_DESCRIPTION_LENGTH: Final[int] = 100
GUILD_FIRST_ID: Final[int] = 1

# ============================================================================
# SHARED
# ============================================================================

MIN_LEVEL: Final[int] = 1

# Oldest undrained domain events are dropped beyond this many per entity
MAX_PENDING_EVENTS: Final[int] = 256
