"""
Component Synthesizer - one self-contained component module per calculator.

The emitted module inlines the calculator's calculate() fragment and declares
a CalculatorWidget subclass named derive_identifier(slug, COMPONENT_SUFFIX).
Form handling, recompute, formatting and error substitution come from
CalculatorWidget; the module only carries calculator-specific data.

Key behaviors:
- Class and file name both come from the slug (the canonical key)
- Inputs and outputs are emitted in declared order
- Output is a pure function of the descriptor (byte-identical reruns)
"""

from __future__ import annotations

import textwrap

from calcverse.core.services.identifiers import component_identifier
from calcverse.core.services.source import (
    INDENT,
    SourceUnit,
    generated_header,
    model_call,
    py_literal,
)
from calcverse.domain.entities import CalculatorDescriptor, InputSpec, OutputSpec

COMPONENTS_DIR = "components"


def _input_source(spec: InputSpec) -> str:
    options = ""
    if spec.options:
        rendered = [model_call("SelectOption", o) for o in spec.options]
        options = "(" + ", ".join(rendered) + ("," if len(rendered) == 1 else "") + ")"
    return model_call("InputSpec", spec, nested={"options": options} if options else None)


def _output_source(spec: OutputSpec) -> str:
    return model_call("OutputSpec", spec)


def _tuple_block(name: str, items: list[str]) -> list[str]:
    if not items:
        return [f"{INDENT}{name} = ()"]
    lines = [f"{INDENT}{name} = ("]
    lines.extend(f"{INDENT * 2}{item}," for item in items)
    lines.append(f"{INDENT})")
    return lines


def synthesize(calculator: CalculatorDescriptor) -> SourceUnit:
    """Emit the component module for one calculator."""
    identifier = component_identifier(calculator.slug)
    fragment = textwrap.dedent(calculator.calculate_function).strip("\n")

    lines = generated_header(f"calculator '{calculator.id}'")
    lines.extend(
        [
            "from calcverse.runtime import CalculatorWidget, InputSpec, OutputSpec, SelectOption",
            "",
            "",
            fragment,
            "",
            "",
            f"class {identifier}(CalculatorWidget):",
            f"{INDENT}calculator_id = {py_literal(calculator.id)}",
            f"{INDENT}slug = {py_literal(calculator.slug)}",
            f"{INDENT}title = {py_literal(calculator.title)}",
            f"{INDENT}description = {py_literal(calculator.description)}",
            f"{INDENT}formula = {py_literal(calculator.formula)}",
            f"{INDENT}formula_explanation = {py_literal(calculator.formula_explanation)}",
        ]
    )
    lines.extend(_tuple_block("inputs", [_input_source(s) for s in calculator.inputs]))
    lines.extend(_tuple_block("outputs", [_output_source(s) for s in calculator.outputs]))
    lines.append(f"{INDENT}calculate = staticmethod(calculate)")
    lines.append("")

    return SourceUnit(
        identifier=identifier,
        path=f"{COMPONENTS_DIR}/{identifier}.py",
        source="\n".join(lines),
    )
