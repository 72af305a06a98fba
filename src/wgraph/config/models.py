"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, wgraph.toml only contains overrides.
An empty (or missing) wgraph.toml is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- wgraph.toml sections ---


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    thread_safe: bool = False


class MenuConfig(BaseModel):
    """[menu] section."""

    model_config = {"frozen": True}

    title: str = "graph representation and application"


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    weight_precision: int = Field(default=6, ge=1, le=17)
