from __future__ import annotations

import copy
from pathlib import Path
from typing import Any
from uuid import uuid4

import pytest

from calcverse.catalog import CalculatorStore, parse_store
from calcverse.components.build import render_tree, write_tree
from calcverse.runtime import ComponentRegistry, load_registry
from calcverse.site import SiteConfig

SAMPLE_STORE: dict[str, Any] = {
    "metadata": {"total_calculators": 5, "version": "1.0.0"},
    "categories": {
        "financial": {"title": "Financial", "count": 2},
        "health": {"title": "Health", "count": 1},
        "math": {"title": "Math", "count": 1},
        "other": {"title": "Other", "count": 1},
    },
    "calculators": [
        {
            "id": "mortgage",
            "slug": "mortgage-calculator",
            "title": "Mortgage Calculator",
            "category": "financial",
            "description": "Monthly mortgage payment.",
            "metaDescription": "Estimate your monthly mortgage payment.",
            "seoKeywords": ["mortgage", "home loan"],
            "inputs": [
                {"id": "principal", "name": "Loan Amount", "type": "number", "unit": "$"},
                {"id": "rate", "name": "Rate", "type": "number", "unit": "%"},
                {
                    "id": "years",
                    "name": "Term",
                    "type": "select",
                    "options": [
                        {"value": 15, "label": "15 years"},
                        {"value": 30, "label": "30 years"},
                    ],
                },
            ],
            "outputs": [
                {"id": "monthly_payment", "name": "Monthly Payment", "format": "currency"},
            ],
            "formula": "M = P * r / (1 - (1 + r)^-n)",
            "calculateFunction": (
                "def calculate(inputs):\n"
                "    principal = inputs.get('principal', 0)\n"
                "    n = int(inputs.get('years', 30)) * 12\n"
                "    r = inputs.get('rate', 0) / 100 / 12\n"
                "    if r == 0:\n"
                "        return {'monthly_payment': principal / n}\n"
                "    return {'monthly_payment': principal * r / (1 - (1 + r) ** -n)}\n"
            ),
        },
        {
            "id": "savings",
            "slug": "savings-calculator",
            "title": "Savings Calculator",
            "category": "financial",
            "description": "Savings growth.",
            "inputs": [{"id": "deposit", "name": "Deposit", "type": "number"}],
            "outputs": [{"id": "balance", "name": "Balance", "format": "currency"}],
            "calculateFunction": (
                "def calculate(inputs):\n"
                "    return {'balance': inputs.get('deposit', 0) * 1.05}\n"
            ),
            "related": ["bmi", "no-such-calculator"],
        },
        {
            "id": "bmi",
            "slug": "bmi-calculator",
            "title": "BMI Calculator",
            "category": "health",
            "description": "Body mass index.",
            "inputs": [
                {"id": "weight", "name": "Weight", "type": "number", "unit": "kg"},
                {"id": "height", "name": "Height", "type": "number", "unit": "cm"},
            ],
            "outputs": [
                {"id": "bmi", "name": "BMI", "format": "decimal", "precision": 1},
                {"id": "category", "name": "Category", "format": "text"},
            ],
            "calculateFunction": (
                "def calculate(inputs):\n"
                "    height = inputs.get('height', 0) / 100\n"
                "    if height <= 0:\n"
                "        return {}\n"
                "    bmi = inputs.get('weight', 0) / height ** 2\n"
                "    return {'bmi': bmi, 'category': 'Normal' if bmi < 25 else 'Overweight'}\n"
            ),
        },
        {
            "id": "percentage",
            "slug": "percentage-calculator",
            "title": "Percentage Calculator",
            "category": "math",
            "inputs": [
                {"id": "percent", "name": "Percent", "type": "number"},
                {"id": "value", "name": "Value", "type": "number"},
            ],
            "outputs": [
                {"id": "result", "name": "Result"},
                {"id": "note", "name": "Note", "format": "text"},
            ],
            "calculateFunction": (
                "def calculate(inputs):\n"
                "    if not inputs.get('value'):\n"
                "        return {'note': 'Enter a value'}\n"
                "    return {'result': inputs['value'] * inputs.get('percent', 0) / 100}\n"
            ),
        },
        {
            "id": "4wd",
            "slug": "4-wheel-drive-calculator",
            "title": "4 Wheel Drive Calculator",
            "category": "other",
            "inputs": [
                {"id": "torque", "name": "Torque", "type": "number"},
                {"id": "ratio", "name": "Gear Ratio", "type": "number"},
            ],
            "outputs": [{"id": "wheel_torque", "name": "Wheel Torque"}],
            "calculateFunction": (
                "def calculate(inputs):\n"
                "    return {'wheel_torque': inputs.get('torque', 0) / inputs.get('ratio', 0)}\n"
            ),
        },
    ],
}


@pytest.fixture
def store_data() -> dict[str, Any]:
    """A fresh, mutable copy of the sample store document."""
    return copy.deepcopy(SAMPLE_STORE)


@pytest.fixture
def store(store_data: dict[str, Any]) -> CalculatorStore:
    return parse_store(store_data)


@pytest.fixture
def site() -> SiteConfig:
    return SiteConfig()


@pytest.fixture
def generated_package(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    store: CalculatorStore,
    site: SiteConfig,
) -> tuple[str, Path]:
    """
    Generate the sample store into tmp_path under a unique package name.

    Returns (package name, directory containing the package).
    """
    package = f"calcverse_site_{uuid4().hex[:12]}"
    write_tree(tmp_path / package, render_tree(store, site))
    monkeypatch.syspath_prepend(str(tmp_path))
    return package, tmp_path


@pytest.fixture
def registry(generated_package: tuple[str, Path]) -> ComponentRegistry:
    package, location = generated_package
    return load_registry(package, search_path=location)
