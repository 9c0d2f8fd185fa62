"""Backend adapter interface, registry and result envelope."""

from __future__ import annotations

from unitrain.model.base import BackendAdapter
from unitrain.model.registry import BackendRegistry
from unitrain.model.result import FittedModelRecord, wrap_result

__all__ = ["BackendAdapter", "BackendRegistry", "FittedModelRecord", "wrap_result"]
