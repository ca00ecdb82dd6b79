"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, linkq.toml only contains overrides.
An empty (or missing) linkq.toml gives merge sort with an entropy-seeded RNG.
"""

from __future__ import annotations

from pydantic import BaseModel

from linkq.domain.sorting import SortAlgorithm

# --- linkq.toml sections ---


class SortConfig(BaseModel):
    """[sort] section."""

    model_config = {"frozen": True}

    algorithm: SortAlgorithm = SortAlgorithm.MERGE
    seed: int | None = None  # None: quicksort pivots come from OS entropy

