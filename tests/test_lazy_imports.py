"""Tests for the lazy top-level API in circulate/__init__.py."""

import pytest

import circulate


class TestLazyImports:
    @pytest.mark.parametrize("name", circulate.__all__)
    def test_every_public_name_resolves(self, name: str) -> None:
        assert getattr(circulate, name) is not None

    def test_normalize_is_the_function(self) -> None:
        from circulate import normalize
        from circulate.normalizer import normalize as direct

        assert normalize is direct

    def test_decide_is_the_function(self) -> None:
        from circulate.routing.gate import decide

        assert circulate.decide is decide

    def test_unknown_name(self) -> None:
        with pytest.raises(AttributeError, match="has no attribute 'nope'"):
            circulate.nope  # noqa: B018
