"""
Guildhall: game domain models for players, pets, enemies and guilds.
"""

__version__ = "0.1.0"
