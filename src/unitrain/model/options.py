"""Layered construction of backend keyword arguments.

Each adapter collects its backend's keyword arguments from three sources and
:class:`OptionBuilder` merges them in one fixed order, lowest precedence first:

1. inferred defaults (``defaults``), e.g. a minimum leaf size guessed from
   the data size or a glmnet family guessed from the label levels;
2. caller extra options (``extras``), narrowed to the backend allow-list;
3. fixed policy values (``fixed``), e.g. the linear SVM kernel.

Tuning values that also appear among the extra options are reconciled with
:meth:`OptionBuilder.reconcile_tuning` before the build: the extra option
replaces the tuning value and is removed from the bag.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

logger = logging.getLogger(__name__)


class OptionBuilder:
    """Builder for the keyword arguments of one backend call.

    Parameters
    ----------
    allowed : Iterable[str]
        Option names the backend recognizes. Extra options outside this set
        are dropped without error.
    method : str
        Backend identifier, used in log messages.

    Examples
    --------
    >>> builder = OptionBuilder(["max_leaf_nodes"], method="rf")
    >>> builder.extras({"max_leaf_nodes": 8, "bogus": 1}).fixed(n_jobs=1).build()
    {'max_leaf_nodes': 8, 'n_jobs': 1}
    """

    def __init__(self, allowed: Iterable[str], method: str = "") -> None:
        self.allowed = tuple(allowed)
        self.method = method
        self._defaults: dict[str, Any] = {}
        self._extras: dict[str, Any] = {}
        self._fixed: dict[str, Any] = {}

    def extras(self, options: Mapping[str, Any] | None) -> OptionBuilder:
        """Keep only the allowed keys of the caller's extra options."""
        options = dict(options or {})
        dropped = sorted(str(key) for key in options if key not in self.allowed)
        if dropped:
            logger.debug("Ignoring options not recognized by %s: %s", self.method or "backend", dropped)
        self._extras.update({key: value for key, value in options.items() if key in self.allowed})
        return self

    def defaults(self, **values: Any) -> OptionBuilder:
        self._defaults.update(values)
        return self

    def fixed(self, **values: Any) -> OptionBuilder:
        self._fixed.update(values)
        return self

    def has(self, key: str) -> bool:
        """Return True if the caller supplied ``key`` (after filtering)."""
        return key in self._extras

    def reconcile_tuning(self, tune_value: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
        """Let extra options override tuning values of the same name.

        Parameters
        ----------
        tune_value : Mapping[str, Any]
            Tuning values of the request.
        keys : Iterable[str]
            Names that may appear in both the tuning values and the extra options.

        Returns
        -------
        dict[str, Any]
            A copy of ``tune_value`` with the overrides applied. The overriding
            keys are removed from the extra options.
        """
        effective = dict(tune_value)
        for key in keys:
            if key in self._extras:
                value = self._extras.pop(key)
                logger.info("Extra option %s=%r overrides tuning value %r", key, value, effective.get(key))
                effective[key] = value
        return effective

    def build(self) -> dict[str, Any]:
        return {**self._defaults, **self._extras, **self._fixed}

    def __repr__(self) -> str:
        return f"OptionBuilder(method={self.method!r}, allowed={list(self.allowed)!r})"
