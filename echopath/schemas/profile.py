"""
Profile schemas for EchoPath.

Models the data the login service hands back (child profile and
preferences). The network call itself lives outside this package; the
game only reads the animal preference from it to pick a theme.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Child(BaseModel):
    id: str
    short_id: str
    first_name: str
    last_name: str
    animal_preference: Optional[str] = None
    current_path: Optional[str] = None

    def preferred_theme(self, default: str = "Dog") -> str:
        """Animal preference, or the default when unset or blank."""
        if self.animal_preference and self.animal_preference.strip():
            return self.animal_preference.strip()
        return default


class Preferences(BaseModel):
    volume: int
    subtitles: bool
    speech_input_enabled: bool
    animation_intensity: str
    color_contrast: str
    music_enabled: bool
    voice_speed: str


class LoginResponse(BaseModel):
    child: Child
    preferences: Preferences
    message: str
    unit_name: Optional[str] = None
    lesson_name: Optional[str] = None

    def theme(self, default: str = "Dog") -> str:
        return self.child.preferred_theme(default)


class LoginRequest(BaseModel):
    short_id: str
    date_of_birth: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$")  # yyyy-MM-dd
