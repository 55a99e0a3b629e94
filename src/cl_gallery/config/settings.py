"""Application settings using pydantic-settings.

Settings can be overridden via environment variables with the
``CL_GALLERY_`` prefix.

Environment Variables:
    CL_GALLERY_DATA_DIR: Relative directory holding result images
    CL_GALLERY_LEGEND_FILE: Legend image file name inside the data directory
    CL_GALLERY_OUTPUT_DIR: Default output directory for the built site
    CL_GALLERY_PAGE_TITLE: Document title of the generated page
    CL_GALLERY_ERROR_MESSAGE: Message shown when initialization fails
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cl_gallery.config.defaults import (
    DEFAULT_DATA_DIR,
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_LEGEND_FILE,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PAGE_TITLE,
)

__all__ = ["GallerySettings", "get_settings"]


class GallerySettings(BaseSettings):
    """Settings for building the gallery.

    Attributes:
        data_dir: Relative directory holding result images.
        legend_file: Legend image file name inside data_dir.
        output_dir: Default output directory for the built site.
        page_title: Document title of the generated page.
        error_message: Message shown when initialization fails.

    """

    model_config = SettingsConfigDict(
        env_prefix="CL_GALLERY_",
        extra="ignore",
    )

    data_dir: str = Field(
        default=DEFAULT_DATA_DIR,
        min_length=1,
        description="Relative directory holding result images",
    )
    legend_file: str = Field(
        default=DEFAULT_LEGEND_FILE,
        min_length=1,
        description="Legend image file name inside the data directory",
    )
    output_dir: str = Field(
        default=DEFAULT_OUTPUT_DIR,
        description="Default output directory for the built site",
    )
    page_title: str = Field(
        default=DEFAULT_PAGE_TITLE,
        description="Document title of the generated page",
    )
    error_message: str = Field(
        default=DEFAULT_ERROR_MESSAGE,
        description="Message shown when initialization fails",
    )

    @property
    def legend_path(self) -> str:
        """Relative path of the shared legend image."""
        return f"{self.data_dir}/{self.legend_file}"


@lru_cache(maxsize=1)
def get_settings() -> GallerySettings:
    """Get the cached settings singleton.

    Returns:
        The GallerySettings instance with values from environment variables.

    """
    return GallerySettings()
