"""
CalculatorPage - base for generated page units, plus the shared page
rendering path used by both generated pages and the slug resolver.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from calcverse.core.ports.site import LayoutPort, LayoutProps, MetadataPort, PageMeta
from calcverse.runtime.widget import CalculatorWidget


def render_calculator_page(
    component: type[CalculatorWidget],
    meta: PageMeta,
    props: LayoutProps,
    *,
    metadata: MetadataPort,
    layout: LayoutPort,
    inputs: Mapping[str, Any] | None = None,
) -> str:
    """
    Render one calculator page.

    Sets page metadata exactly once, builds a fresh widget (it owns its own
    state), replays any submitted inputs and wraps it in the shared layout.
    """
    metadata.set_page_meta(meta)

    widget = component()
    if inputs:
        widget.apply_inputs(inputs)

    return layout.render_calculator_layout(props, widget.render())


class CalculatorPage:
    """Thin page wrapper: metadata + layout + one calculator component."""

    path: ClassVar[str] = ""
    component: ClassVar[type[CalculatorWidget]]
    meta: ClassVar[PageMeta]
    layout_props: ClassVar[LayoutProps]

    def render(
        self,
        metadata: MetadataPort,
        layout: LayoutPort,
        inputs: Mapping[str, Any] | None = None,
    ) -> str:
        return render_calculator_page(
            self.component,
            self.meta,
            self.layout_props,
            metadata=metadata,
            layout=layout,
            inputs=inputs,
        )
