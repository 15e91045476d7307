"""
Response models for the catalog tools.

The JSON schema of each model doubles as the MCP output schema of the
tool that returns it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ComponentFile(BaseModel):
    """A source file of a component, addressed by a canonical-name-prefixed path."""

    path: str = Field(description="Path such as 'Button/index.tsx'")
    content: str

    model_config = ConfigDict(frozen=True)


class ComponentCode(BaseModel):
    """All files of one component."""

    files: list[ComponentFile]

    model_config = ConfigDict(frozen=True)


class ComponentList(BaseModel):
    """
    The component catalog.

    Attributes:
        components: Canonical names in remote listing order
        child_components: Exported child symbols per component, same order
    """

    components: list[str]
    child_components: dict[str, list[str]]

    model_config = ConfigDict(frozen=True)


class ComponentUsage(BaseModel):
    """Usage documentation, optionally with the entry source for context."""

    usage: str = Field(description="Markdown/MDX usage, possibly with YAML frontmatter")
    code: str | None = Field(default=None, description="Entry file source")

    model_config = ConfigDict(frozen=True)
