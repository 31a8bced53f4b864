"""Data models for user profiles and character records."""
from deckview.models.character_record import CharacterRecord
from deckview.models.user_profile import UserProfile

__all__ = [
    "CharacterRecord",
    "UserProfile",
]
