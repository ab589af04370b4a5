"""
Tests for CalculatorWidget state handling and rendering.
"""

from __future__ import annotations

import logging
from typing import Any

import pytest

from calcverse.runtime import (
    ERROR_KEY,
    ERROR_MESSAGE,
    CalculatorWidget,
    InputSpec,
    OutputSpec,
    SelectOption,
)


def _partial(inputs: dict[str, Any]) -> dict[str, Any]:
    if inputs.get("a", 0) > 10:
        return {"big": inputs["a"]}
    return {"small": inputs.get("a", 0), "extra": "shown"}


def _divide(inputs: dict[str, Any]) -> dict[str, Any]:
    return {"ratio": inputs.get("top", 0) / inputs.get("bottom", 0)}


class PartialWidget(CalculatorWidget):
    calculator_id = "partial"
    slug = "partial-calculator"
    title = "Partial"
    inputs = (InputSpec(id="a", name="A", type="number"),)
    outputs = (
        OutputSpec(id="big", name="Big"),
        OutputSpec(id="small", name="Small"),
        OutputSpec(id="extra", name="Extra", format="text"),
    )
    calculate = staticmethod(_partial)


class DivideWidget(CalculatorWidget):
    calculator_id = "divide"
    slug = "divide-calculator"
    title = "Divide <b>"
    description = "Top over bottom"
    formula = "top / bottom"
    inputs = (
        InputSpec(id="top", name="Top", type="number", required=True),
        InputSpec(id="bottom", name="Bottom", type="number", unit="x"),
        InputSpec(
            id="mode",
            name="Mode",
            type="select",
            options=(SelectOption(value=1, label="One"), SelectOption(value=2, label="Two")),
        ),
    )
    outputs = (OutputSpec(id="ratio", name="Ratio", format="decimal", precision=2),)
    calculate = staticmethod(_divide)


class NotAMappingWidget(CalculatorWidget):
    calculator_id = "broken"
    outputs = (OutputSpec(id="x", name="X"),)
    calculate = staticmethod(lambda inputs: 42)


def _margin_of_error(inputs: dict[str, Any]) -> dict[str, Any]:
    return {"error": inputs.get("z", 0) * 0.5}


class MarginOfErrorWidget(CalculatorWidget):
    calculator_id = "margin-of-error"
    inputs = (InputSpec(id="z", name="Z", type="number"),)
    outputs = (OutputSpec(id="error", name="Margin of Error", format="decimal"),)
    calculate = staticmethod(_margin_of_error)


class TestStateHandling:
    """Input changes and recompute."""

    def test_starts_empty(self) -> None:
        widget = DivideWidget()
        assert widget.values == {}
        assert widget.results == {}
        assert widget.error is None

    def test_input_change_recomputes(self) -> None:
        widget = DivideWidget()
        widget.handle_input_change("bottom", "4")
        results = widget.handle_input_change("top", "10")
        assert results == {"ratio": 2.5}
        assert widget.values == {"bottom": 4.0, "top": 10.0}

    def test_results_replaced_not_merged(self) -> None:
        widget = PartialWidget()
        widget.handle_input_change("a", "5")
        assert widget.formatted_results() == {"big": "", "small": "5", "extra": "shown"}

        widget.handle_input_change("a", "50")

        # Outputs absent from the latest result are cleared
        assert widget.results == {"big": 50.0}
        assert widget.formatted_results() == {"big": "50", "small": "", "extra": ""}

    def test_instances_do_not_share_state(self) -> None:
        first, second = DivideWidget(), DivideWidget()
        first.handle_input_change("top", "1")
        assert second.values == {}

    def test_apply_inputs_in_declared_order(self) -> None:
        widget = DivideWidget()
        results = widget.apply_inputs({"bottom": "2", "top": "9", "ignored": "x"})
        assert results == {"ratio": 4.5}
        assert list(widget.values) == ["top", "bottom"]


class TestErrorSubstitution:
    """A failing calculate() never raises out of the widget."""

    def test_exception_becomes_error_output(self, caplog: pytest.LogCaptureFixture) -> None:
        widget = DivideWidget()
        with caplog.at_level(logging.ERROR):
            results = widget.handle_input_change("top", "3")
        assert results == {ERROR_KEY: ERROR_MESSAGE}
        assert widget.error == "Calculation error"
        assert "divide" in caplog.text

    def test_recovers_after_error(self) -> None:
        widget = DivideWidget()
        widget.handle_input_change("top", "3")
        widget.handle_input_change("bottom", "3")
        assert widget.error is None
        assert widget.formatted_results() == {"ratio": "1.00"}

    def test_non_mapping_result(self) -> None:
        widget = NotAMappingWidget()
        assert widget.handle_input_change("x", 1) == {ERROR_KEY: ERROR_MESSAGE}
        assert widget.error == ERROR_MESSAGE

    def test_output_named_error_is_not_a_failure(self) -> None:
        widget = MarginOfErrorWidget()
        widget.handle_input_change("z", "5")

        assert widget.error is None
        assert widget.formatted_results() == {"error": "2.50"}
        assert "calc-error" not in widget.render()


class TestRender:
    """HTML output."""

    def test_renders_form_outputs_and_formula(self) -> None:
        widget = DivideWidget()
        widget.apply_inputs({"top": "5", "bottom": "2", "mode": "2"})
        html = widget.render()

        assert 'data-calculator="divide"' in html
        assert 'name="top"' in html and 'value="5"' in html
        assert "Bottom (x)" in html
        assert '<option value="2" selected>Two</option>' in html
        assert ">2.50</output>" in html
        assert "top / bottom" in html
        assert "calc-error" not in html

    def test_escapes_text(self) -> None:
        html = DivideWidget().render()
        assert "Divide &lt;b&gt;" in html

    def test_renders_error(self) -> None:
        widget = DivideWidget()
        widget.handle_input_change("top", "1")
        assert 'class="calc-error"' in widget.render()
