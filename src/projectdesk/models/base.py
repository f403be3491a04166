"""Base models for ProjectDesk."""

from pydantic import BaseModel, ConfigDict


class ProjectDeskBaseModel(BaseModel):
    """Base model for persisted and in-memory ProjectDesk entities."""

    model_config = ConfigDict(extra="forbid")
