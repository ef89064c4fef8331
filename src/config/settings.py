"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use MDAUTOGEN_ prefix (e.g., MDAUTOGEN_TRIM_TRAILING_BREAKS=true).

Settings can also be loaded from a .env file in the working directory.
"""

import re

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use MDAUTOGEN_ prefix.

    Examples:
        MDAUTOGEN_ENCODING=latin-1
        MDAUTOGEN_TRIM_TRAILING_BREAKS=true
        MDAUTOGEN_INFER_HEADERS=true
    """

    model_config = SettingsConfigDict(
        env_prefix="MDAUTOGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Marker configuration
    begin_marker: str = Field(
        default="<!-- BEGIN_MDAUTOGEN:",
        description="Text opening a begin-marker line; the directive follows it",
    )

    marker_close: str = Field(
        default=" -->",
        description="Text closing a begin-marker line",
    )

    end_marker: str = Field(
        default="<!-- END_MDAUTOGEN",
        description="Any line containing this text ends a generated region",
    )

    # Source file configuration
    encoding: str = Field(
        default="utf-8",
        description="Encoding used to read files referenced by directives",
    )

    # Rendering configuration
    trim_trailing_breaks: bool = Field(
        default=False,
        description="Drop trailing empty source lines so cells do not end in <br>",
    )

    infer_headers: bool = Field(
        default=False,
        description="Name blank table headers after the language Pygments detects for each file",
    )

    def beginPattern_make(self) -> "re.Pattern[str]":
        """
        Compile the full-line pattern recognising a begin marker.

        Group 1 captures the directive text between the marker tokens.

        Example:
            >>> settings = AppSettings()
            >>> settings.beginPattern_make().match("<!-- BEGIN_MDAUTOGEN: f() -->").group(1)
            ' f()'
        """
        return re.compile(
            rf"^{re.escape(self.begin_marker)}(.+){re.escape(self.marker_close)}$"
        )


# Singleton instance - import this in your code
appsettings = AppSettings()
