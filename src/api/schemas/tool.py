"""Pydantic schemas for the tool manifest."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ToolManifestEntry(BaseModel):
    """One tool as advertised to an agent."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    input_schema: dict[str, Any] = Field(serialization_alias="inputSchema")
    output_schema: dict[str, Any] = Field(serialization_alias="outputSchema")
    route: str


class ToolManifest(BaseModel):
    tools: list[ToolManifestEntry]


class ToolCallRequest(BaseModel):
    input: dict[str, Any] = Field(default_factory=dict)
