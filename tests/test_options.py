"""Tests for OptionBuilder precedence and filtering."""

from __future__ import annotations

from unitrain.model.options import OptionBuilder


class TestOptionBuilder:
    def test_unknown_extras_dropped(self):
        built = OptionBuilder(["a", "b"]).extras({"a": 1, "zzz": 2}).build()
        assert built == {"a": 1}

    def test_none_extras(self):
        assert OptionBuilder(["a"]).extras(None).build() == {}

    def test_extras_override_defaults(self):
        built = OptionBuilder(["a"]).defaults(a=1, b=2).extras({"a": 10}).build()
        assert built == {"a": 10, "b": 2}

    def test_fixed_overrides_extras(self):
        built = OptionBuilder(["kernel"]).extras({"kernel": "rbf"}).fixed(kernel="linear").build()
        assert built == {"kernel": "linear"}

    def test_precedence_independent_of_call_order(self):
        builder = OptionBuilder(["a"])
        builder.fixed(a="fixed")
        builder.extras({"a": "extra"})
        builder.defaults(a="default")
        assert builder.build() == {"a": "fixed"}

    def test_has_reports_filtered_extras(self):
        builder = OptionBuilder(["a"]).extras({"a": 1, "b": 2})
        assert builder.has("a")
        assert not builder.has("b")

    def test_reconcile_tuning_moves_overrides(self):
        builder = OptionBuilder(["n_trees", "subsample"]).extras({"n_trees": 200, "subsample": 0.5})
        tune = {"n_trees": 100, "shrinkage": 0.1}
        effective = builder.reconcile_tuning(tune, ["n_trees", "shrinkage"])
        assert effective == {"n_trees": 200, "shrinkage": 0.1}
        assert tune == {"n_trees": 100, "shrinkage": 0.1}
        assert builder.build() == {"subsample": 0.5}

    def test_reconcile_without_overrides(self):
        builder = OptionBuilder(["n_trees"])
        assert builder.reconcile_tuning({"n_trees": 3}, ["n_trees"]) == {"n_trees": 3}
