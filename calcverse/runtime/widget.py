"""
CalculatorWidget - base for every generated calculator component.

Generated component modules subclass this and only declare data: the
calculate fragment, inputs, outputs and formula text. State handling,
recompute and rendering live here.

Key behaviors:
- State is a mapping of input id -> current value, initially empty
- Every input change merges into the state and recomputes
- Results are replaced wholesale, so outputs omitted by a recompute disappear
- A raising calculate() becomes a single generic error output, never an exception
- Failure is tracked apart from the results, so an output may itself be named "error"
"""

from __future__ import annotations

import html
import logging
from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from calcverse.domain.entities import InputSpec, OutputSpec
from calcverse.runtime.formatting import coerce_input, format_output

logger = logging.getLogger(__name__)

ERROR_KEY = "error"
ERROR_MESSAGE = "Calculation error"


class CalculatorWidget:
    """Interactive calculator: inputs form, live results, formula display."""

    calculator_id: ClassVar[str] = ""
    slug: ClassVar[str] = ""
    title: ClassVar[str] = ""
    description: ClassVar[str] = ""
    inputs: ClassVar[tuple[InputSpec, ...]] = ()
    outputs: ClassVar[tuple[OutputSpec, ...]] = ()
    formula: ClassVar[str] = ""
    formula_explanation: ClassVar[str] = ""
    calculate: ClassVar[Callable[[dict[str, Any]], Mapping[str, Any]]]

    def __init__(self) -> None:
        self.values: dict[str, Any] = {}
        self.results: dict[str, Any] = {}
        self.failed = False

    # --- State ---

    def input_spec(self, input_id: str) -> InputSpec | None:
        for spec in self.inputs:
            if spec.id == input_id:
                return spec
        return None

    def handle_input_change(self, input_id: str, raw: Any) -> dict[str, Any]:
        """Merge one changed input into state and recompute all results."""
        spec = self.input_spec(input_id)
        value = coerce_input(spec, raw) if spec is not None else raw
        self.values = {**self.values, input_id: value}
        self.results = self._recompute()
        return self.results

    def apply_inputs(self, raw_inputs: Mapping[str, Any]) -> dict[str, Any]:
        """Replay submitted values in declared input order."""
        for spec in self.inputs:
            if spec.id in raw_inputs:
                self.handle_input_change(spec.id, raw_inputs[spec.id])
        return self.results

    def _recompute(self) -> dict[str, Any]:
        calculate = type(self).calculate
        try:
            results = calculate(dict(self.values))
        except Exception:
            logger.exception("Calculation error in %s", self.calculator_id)
            self.failed = True
            return {ERROR_KEY: ERROR_MESSAGE}

        if not isinstance(results, Mapping):
            logger.error(
                "calculate() for %s returned %s, expected a mapping",
                self.calculator_id,
                type(results).__name__,
            )
            self.failed = True
            return {ERROR_KEY: ERROR_MESSAGE}

        self.failed = False
        return dict(results)

    # --- Output ---

    @property
    def error(self) -> str | None:
        return ERROR_MESSAGE if self.failed else None

    def formatted_results(self) -> dict[str, str]:
        """Display string per declared output, in output order."""
        return {
            spec.id: format_output(self.results.get(spec.id), spec) for spec in self.outputs
        }

    def render(self) -> str:
        """Render the widget markup (form, results, formula)."""
        controls = "\n".join(self._render_control(spec) for spec in self.inputs)
        formatted = self.formatted_results()
        outputs = "\n".join(
            f'<div class="calc-output">'
            f'<label for="out-{_e(spec.id)}">{_e(spec.name)}</label>'
            f'<output id="out-{_e(spec.id)}" name="{_e(spec.id)}">'
            f"{_e(formatted[spec.id])}</output></div>"
            for spec in self.outputs
        )
        error = (
            f'<div class="calc-error" role="alert"><p>{_e(self.error)}</p></div>'
            if self.error
            else ""
        )

        return f"""<section class="calculator" data-calculator="{_e(self.calculator_id)}">
<header><h2>{_e(self.title)}</h2><p>{_e(self.description)}</p></header>
<form class="calc-inputs" method="get">
<h3>Inputs</h3>
{controls}
<button type="submit">Calculate</button>
</form>
<div class="calc-results">
<h3>Results</h3>
{outputs}
{error}
</div>
<div class="calc-formula">
<h4>Formula</h4>
<p class="formula">{_e(self.formula)}</p>
<p class="formula-explanation">{_e(self.formula_explanation)}</p>
</div>
</section>"""

    def _render_control(self, spec: InputSpec) -> str:
        label = _e(spec.name) + (f" ({_e(spec.unit)})" if spec.unit else "")
        required = " required" if spec.required else ""
        current = self.values.get(spec.id)

        if spec.type == "select":
            options = "".join(
                f'<option value="{_e(_attr_text(o.value))}"'
                f'{" selected" if current is not None and o.value == current else ""}>'
                f"{_e(o.label)}</option>"
                for o in spec.options
            )
            return (
                f'<div class="calc-field"><label for="{_e(spec.id)}">{label}</label>'
                f'<select id="{_e(spec.id)}" name="{_e(spec.id)}"{required}>'
                f'<option value="">Select {_e(spec.name)}</option>{options}</select></div>'
            )

        value = "" if current is None else _attr_text(current)
        return (
            f'<div class="calc-field"><label for="{_e(spec.id)}">{label}</label>'
            f'<input id="{_e(spec.id)}" name="{_e(spec.id)}" type="{spec.type}"'
            f' placeholder="{_e(spec.placeholder or "")}" value="{_e(value)}"{required} />'
            f"</div>"
        )


def _attr_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _e(text: str | None) -> str:
    return html.escape(text or "", quote=True)
