"""
Animator settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use TEXTMOTION_ prefix (e.g., TEXTMOTION_LETTER_WAIT=0.02).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.tokens import AnimationParams


class AnimatorSettings(BaseSettings):
    """
    Animation defaults, reveal timing and logging configuration.

    Environment variables use TEXTMOTION_ prefix.

    Examples:
        TEXTMOTION_CURR_AMPLITUDE=2.5
        TEXTMOTION_PAUSE_WAIT=0.8
        TEXTMOTION_TYPEWRITER_ENABLED=false
    """

    model_config = SettingsConfigDict(
        env_prefix="TEXTMOTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Animation defaults, applied to unset directive parameters
    curr_amplitude: float = Field(
        default=1.0,
        description="Default amplitude of the waveform added to each vertex",
    )

    curr_frequency_x: float = Field(
        default=1.0,
        description="Default waveform frequency on the x axis",
    )

    curr_frequency_y: float = Field(
        default=1.0,
        description="Default waveform frequency on the y axis",
    )

    prev_amplitude: float = Field(
        default=1.0,
        description="Default scale applied to the original vertex position",
    )

    prev_frequency_x: float = Field(
        default=0.0,
        description="Default phase offset per unit of original x position",
    )

    prev_frequency_y: float = Field(
        default=0.0,
        description="Default phase offset per unit of original y position",
    )

    # Typewriter configuration
    typewriter_enabled: bool = Field(
        default=True,
        description="Reveal characters progressively instead of all at once",
    )

    letter_wait: float = Field(
        default=0.05,
        ge=0.0,
        description="Seconds to wait after revealing an ordinary character",
    )

    pause_wait: float = Field(
        default=0.5,
        ge=0.0,
        description="Seconds to wait after revealing a pause character",
    )

    pause_char: str = Field(
        default=".",
        min_length=1,
        max_length=1,
        description="Punctuation that triggers a longer reveal pause",
    )

    # Logging configuration
    verbosity: int = Field(
        default=1,
        ge=0,
        description="Logging verbosity (0=silent, 1=diagnostics, 2=stages, 3=trace)",
    )

    @field_validator("pause_char")
    @classmethod
    def pauseChar_check(cls, value: str) -> str:
        if value in "<>":
            raise ValueError("pause_char cannot be a tag bracket")
        return value

    def defaults_get(self) -> AnimationParams:
        """
        Collect the six animation defaults as an AnimationParams value.

        Example:
            >>> AnimatorSettings(curr_amplitude=5).defaults_get().curr_amplitude
            5.0
        """
        return AnimationParams(
            curr_amplitude=self.curr_amplitude,
            curr_frequency_x=self.curr_frequency_x,
            curr_frequency_y=self.curr_frequency_y,
            prev_amplitude=self.prev_amplitude,
            prev_frequency_x=self.prev_frequency_x,
            prev_frequency_y=self.prev_frequency_y,
        )


# Singleton instance - import this in your code
appsettings = AnimatorSettings()
