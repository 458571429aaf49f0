"""
Common shared models.

Shared enums used by API schemas and storage items.

Dependencies: None
System role: Shared model definitions
"""

from enum import Enum


class Difficulty(str, Enum):
    """Quest difficulty levels."""

    EASY = "Easy"
    NORMAL = "Normal"
    HARD = "Hard"
