"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, zooctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class ZooSection(BaseModel):
    """[zoo] section."""

    model_config = {"frozen": True}

    name: str = "fantastico"


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    filename: str = "zooctl.db"
    echo: bool = False

