"""Abstract base class for all backend adapters.

This module defines the contract every classification backend follows so the
training entry point can dispatch to any of them without knowing which one
it is talking to.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Mapping, Sequence

from unitrain.errors import MissingTuningValueError
from unitrain.model.options import OptionBuilder

if TYPE_CHECKING:
    from unitrain.data import NormalizedTrainingData

logger = logging.getLogger(__name__)


class BackendAdapter(ABC):
    """Abstract base class for backend adapters.

    Subclasses are registered with :class:`~unitrain.model.registry.BackendRegistry`
    and implement :meth:`fit`, which applies the backend's pre-fit policy and
    calls the external fitting routine.

    Attributes:
        method: Backend identifier (set by the registry).
        tuning_keys: Tuning values the backend requires.
        allowed_options: Extra option names the backend recognizes.
        drops_small_classes: Whether rows of singleton classes are removed
            before :meth:`fit` is called.

    Example:
        >>> from unitrain.model.registry import BackendRegistry
        >>> @BackendRegistry.register("dummy")
        ... class DummyBackend(BackendAdapter):
        ...     tuning_keys = ("k",)
        ...     def fit(self, data, tune_value, options, obs_levels):
        ...         return object(), dict(tune_value)
    """

    method: str = "base"
    tuning_keys: tuple[str, ...] = ()
    allowed_options: tuple[str, ...] = ()
    drops_small_classes: bool = False

    def check_tuning(self, tune_value: Mapping[str, Any] | None) -> dict[str, Any]:
        """Return a copy of ``tune_value`` after checking the required keys.

        Raises:
            MissingTuningValueError: If a required key is absent or ``None``.
        """
        tune_value = dict(tune_value or {})
        missing = [key for key in self.tuning_keys if tune_value.get(key) is None]
        if missing:
            raise MissingTuningValueError(self.method, missing)
        return tune_value

    def option_builder(self) -> OptionBuilder:
        """Start an :class:`OptionBuilder` restricted to this backend's allow-list."""
        return OptionBuilder(self.allowed_options, method=self.method)

    @abstractmethod
    def fit(
        self,
        data: NormalizedTrainingData,
        tune_value: dict[str, Any],
        options: Mapping[str, Any],
        obs_levels: Sequence[Any],
    ) -> tuple[Any, dict[str, Any]]:
        """Fit the backend on normalized data.

        Parameters:
            data: Numeric features and re-leveled labels.
            tune_value: Checked tuning values (a private copy, safe to modify).
            options: Caller extra options, unfiltered.
            obs_levels: Declared class universe.

        Returns:
            The opaque fit handle and the tuning values actually used.
        """
        ...

    def describe(self) -> str:
        """One-line summary used by ``unitrain methods``."""
        doc = (self.__class__.__doc__ or "").strip().split("\n")[0]
        return doc or self.__class__.__name__

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(method={self.method!r})"
