"""Base Pydantic schema for the project.

Provides a common base class for all Pydantic models in cl-gallery with
shared configuration and validation behavior.
"""

from pydantic import BaseModel, ConfigDict

__all__ = ["BaseSchema"]


class BaseSchema(BaseModel):
    """Base model for all Pydantic schemas.

    Models are frozen: the configuration is read-only once loaded. Text is
    stored exactly as configured.
    """

    model_config = ConfigDict(frozen=True)
