"""
Tests for the slug resolver with an in-memory component lookup.
"""

from __future__ import annotations

import logging

import pytest

from calcverse.catalog import CalculatorStore
from calcverse.components.resolver import (
    ResolveOutcome,
    ResolveSlugInput,
    SlugResolver,
    run_resolve,
)
from calcverse.runtime import CalculatorWidget
from calcverse.site import SiteConfig

# --- In-Memory Lookup for Testing ---


class InMemoryComponents:
    """Identifier -> component map standing in for the generated barrel."""

    def __init__(self, components: dict[str, type[CalculatorWidget]]) -> None:
        self._components = components
        self.lookups: list[str] = []

    def get(self, identifier: str) -> type[CalculatorWidget] | None:
        self.lookups.append(identifier)
        return self._components.get(identifier)


class FakeMortgage(CalculatorWidget):
    calculator_id = "mortgage"


@pytest.fixture
def components() -> InMemoryComponents:
    return InMemoryComponents({"MortgageCalculatorComponent": FakeMortgage})


@pytest.fixture
def resolver(
    store: CalculatorStore, components: InMemoryComponents, site: SiteConfig
) -> SlugResolver:
    return SlugResolver(store=store, components=components, site=site)


class TestResolve:
    """Every outcome of one resolution."""

    @pytest.mark.parametrize("slug", [None, ""])
    def test_missing_slug(self, resolver: SlugResolver, slug: str | None) -> None:
        resolution = resolver.resolve(slug)
        assert resolution.outcome is ResolveOutcome.MISSING_SLUG
        assert not resolution.found

    def test_unknown_slug(
        self, resolver: SlugResolver, components: InMemoryComponents
    ) -> None:
        resolution = resolver.resolve("does-not-exist")
        assert resolution.outcome is ResolveOutcome.UNKNOWN_SLUG
        assert resolution.component is None
        assert components.lookups == []

    def test_lookup_is_exact(self, resolver: SlugResolver) -> None:
        assert resolver.resolve("Mortgage-Calculator").outcome is ResolveOutcome.UNKNOWN_SLUG

    def test_component_missing_logged(
        self, resolver: SlugResolver, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR):
            resolution = resolver.resolve("bmi-calculator")

        assert resolution.outcome is ResolveOutcome.COMPONENT_MISSING
        assert resolution.identifier == "BmiCalculatorComponent"
        assert resolution.calculator is not None
        assert not resolution.found
        assert "BmiCalculatorComponent" in caplog.text

    def test_resolved(self, resolver: SlugResolver, components: InMemoryComponents) -> None:
        resolution = resolver.resolve("mortgage-calculator")

        assert resolution.found
        assert resolution.component is FakeMortgage
        assert components.lookups == ["MortgageCalculatorComponent"]
        assert resolution.meta.title == "Mortgage Calculator - CalcVerse"
        assert resolution.meta.description == "Estimate your monthly mortgage payment."
        assert resolution.layout_props.title == "Mortgage Calculator"
        assert [r.slug for r in resolution.layout_props.related_calculators] == [
            "savings-calculator"
        ]

    def test_description_falls_back_when_no_meta_description(
        self, store: CalculatorStore, site: SiteConfig
    ) -> None:
        components = InMemoryComponents({"BmiCalculatorComponent": FakeMortgage})
        resolution = SlugResolver(store, components, site).resolve("bmi-calculator")
        assert resolution.meta.description == "Body mass index."


class TestRunResolve:
    """Component entry point."""

    def test_defaults_site_config(
        self, store: CalculatorStore, components: InMemoryComponents
    ) -> None:
        resolution = run_resolve(
            ResolveSlugInput(slug="mortgage-calculator"), store=store, components=components
        )
        assert resolution.found
        assert resolution.meta.canonical_url == (
            "https://calcverse.com/calculators/mortgage-calculator"
        )
