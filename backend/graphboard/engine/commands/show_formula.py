"""show-formula: free-standing formula text at canvas coordinates."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphboard.engine import style
from graphboard.engine.animation import Channel, FadeIn
from graphboard.engine.registry import command
from graphboard.models.commands import ShowFormulaParams
from graphboard.surface.primitives import Text, fmt_number

if TYPE_CHECKING:
    from graphboard.engine.canvas import CanvasEngine


@command(
    name="show-formula",
    params=ShowFormulaParams,
    description=(
        "Display a mathematical formula on the canvas. Useful for showing graph "
        "theorems, algorithms, or complexity formulas."
    ),
)
async def show_formula(canvas: CanvasEngine, params: ShowFormulaParams) -> str:
    formula = Text(
        x=params.x,
        y=params.y,
        text=params.latex,
        font_size=style.FORMULA_SIZE,
        font_family=style.FORMULA_FONT,
        fill=style.FORMULA_FILL,
        background=style.FORMULA_BACKGROUND,
        padding=style.FORMULA_PADDING,
        opacity=0.0,
    )
    canvas.surface.add(formula)
    canvas.scheduler.enqueue(
        FadeIn(
            [formula],
            canvas.config.formula_fade_ms,
            channel=Channel.OVERLAY,
            is_live=canvas.on_surface(formula),
            description="formula",
        )
    )
    return f"Displayed formula: {params.latex} at ({fmt_number(params.x)}, {fmt_number(params.y)})"
