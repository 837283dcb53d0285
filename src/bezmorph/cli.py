from __future__ import annotations

import logging
import math
import pathlib
from typing import Callable, Dict

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from bezmorph._config import DisplaySettings, get_display_settings
from bezmorph._logging import setup_logging
from bezmorph.modeling import (
    Shape,
    equalize,
    find_best_offset,
    make_circle,
    make_ngon,
    make_point,
    make_rect,
    morph_frames,
    morph_shapes,
    ping_pong,
)
from bezmorph.modeling.morph import prepare_pair
from bezmorph.svg import render_svg, shape_to_path
from bezmorph.validation import MorphError

console = Console()
app = typer.Typer(help="Morph closed cubic Bezier shapes and inspect the results.")

ShapeFactory = Callable[[float], Shape]


def _pillow(size: float) -> Shape:
    return Shape(
        (
            make_point(0.15, 0.15, 135, 0.1, 315, 0.2, scale=size),
            make_point(0.85, 0.15, 225, 0.1, 45, 0.2, scale=size),
            make_point(0.85, 0.85, 315, 0.1, 135, 0.2, scale=size),
            make_point(0.15, 0.85, 45, 0.1, 225, 0.2, scale=size),
        )
    )


BUILTIN_SHAPES: Dict[str, ShapeFactory] = {
    "square": lambda size: make_rect(size=(0.5 * size, 0.5 * size), center=(0.5 * size, 0.5 * size)),
    "circle": lambda size: make_circle(radius=0.25 * size, center=(0.5 * size, 0.5 * size)),
    "triangle": lambda size: make_ngon(3, radius=0.3 * size, center=(0.5 * size, 0.5 * size), start_angle_deg=-90),
    "diamond": lambda size: make_ngon(4, radius=0.3 * size, center=(0.5 * size, 0.5 * size), start_angle_deg=-90),
    "hexagon": lambda size: make_ngon(6, radius=0.3 * size, center=(0.5 * size, 0.5 * size)),
    "pillow": _pillow,
}


def _builtin_shape(name: str, settings: DisplaySettings) -> Shape:
    factory = BUILTIN_SHAPES.get(name.strip().lower())
    if factory is None:
        choices = ", ".join(sorted(BUILTIN_SHAPES))
        raise typer.BadParameter(f"Unknown shape '{name}'. Choose one of: {choices}.")
    return factory(settings.canvas_size)


def _points_table(shape: Shape, title: str) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("in angle°", justify="right")
    table.add_column("in length", justify="right")
    table.add_column("out angle°", justify="right")
    table.add_column("out length", justify="right")
    for idx, point in enumerate(shape):
        table.add_row(
            str(idx),
            f"{point.x:.3f}",
            f"{point.y:.3f}",
            f"{math.degrees(point.handle_in.angle):.1f}",
            f"{point.handle_in.length:.3f}",
            f"{math.degrees(point.handle_out.angle):.1f}",
            f"{point.handle_out.length:.3f}",
        )
    return table


def _next_available_path(path: pathlib.Path) -> pathlib.Path:
    """Return a non-conflicting path by appending ' (n)' before the suffix."""

    if not path.exists():
        return path

    parent = path.parent
    stem = path.stem
    suffix = path.suffix
    n = 1
    while True:
        candidate = parent / f"{stem} ({n}){suffix}"
        if not candidate.exists():
            return candidate
        n += 1


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine decisions at debug level."),
) -> None:
    setup_logging(logging.DEBUG if verbose else logging.WARNING, console=console)


@app.command()
def shapes() -> None:
    """
    List the built-in shapes.
    """

    settings = get_display_settings()
    table = Table(title="Built-in shapes")
    table.add_column("name")
    table.add_column("points", justify="right")
    for name in sorted(BUILTIN_SHAPES):
        table.add_row(name, str(len(_builtin_shape(name, settings))))
    console.print(table)


@app.command("equalize")
def equalize_command(
    shape: str = typer.Argument(..., help="Built-in shape to subdivide."),
    count: int = typer.Option(..., "--count", "-n", min=3, help="Target number of points."),
) -> None:
    """
    Subdivide a shape until it has the requested number of points.
    """

    settings = get_display_settings()
    source = _builtin_shape(shape, settings)
    try:
        result = equalize(count, source)
    except MorphError as exc:
        raise typer.BadParameter(str(exc)) from exc
    console.print(_points_table(result, f"{shape} with {count} points"))


@app.command()
def offset(
    start: str = typer.Argument(..., help="Reference shape."),
    end: str = typer.Argument(..., help="Shape whose point order is rotated."),
) -> None:
    """
    Print the rotation offset that best matches END's points to START's.
    """

    settings = get_display_settings()
    a = _builtin_shape(start, settings)
    b = _builtin_shape(end, settings)
    count = max(len(a), len(b))
    try:
        best = find_best_offset(equalize(count, a), equalize(count, b))
    except MorphError as exc:
        raise typer.BadParameter(str(exc)) from exc
    console.print(f"[cyan]{count} points; best offset for {end} -> {start}: [bold]{best}[/bold][/cyan]")


@app.command()
def morph(
    start: str = typer.Argument(..., help="Shape at t=0."),
    end: str = typer.Argument(..., help="Shape at t=1."),
    t: float = typer.Option(0.5, "--t", min=0.0, max=1.0, help="Progress of the transition."),
    bounce: bool = typer.Option(
        False,
        "--ping-pong/--no-ping-pong",
        help="Treat --t as a wrapping progress that runs forward then back.",
    ),
    svg: bool = typer.Option(False, "--svg", help="Print SVG path data instead of a point table."),
) -> None:
    """
    Morph START into END and print the intermediate shape.
    """

    settings = get_display_settings()
    a = _builtin_shape(start, settings)
    b = _builtin_shape(end, settings)
    progress = ping_pong(t) if bounce else t
    try:
        result = morph_shapes(progress, a, b)
    except MorphError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if svg:
        console.print(shape_to_path(result), soft_wrap=True, highlight=False)
        return
    console.print(_points_table(result, f"{start} -> {end} at t={progress:.3f}"))


@app.command()
def export(
    start: str = typer.Argument(..., help="Shape at t=0."),
    end: str = typer.Argument(..., help="Shape at t=1."),
    output: pathlib.Path = typer.Option(
        pathlib.Path("morph.svg"),
        "--output",
        "-o",
        help="Path to the SVG file that will be produced.",
    ),
    frames: int = typer.Option(5, "--frames", min=2, help="Number of evenly spaced frames to draw."),
    handles: bool = typer.Option(False, "--handles/--no-handles", help="Draw control handles and points."),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing file."),
) -> None:
    """
    Write an SVG document showing the frames of a morph.
    """

    settings = get_display_settings()
    a = _builtin_shape(start, settings)
    b = _builtin_shape(end, settings)

    final_output = output
    if output.exists() and not overwrite:
        final_output = _next_available_path(output)
        console.print(f"[yellow]Output {output} exists; writing to {final_output} instead.[/yellow]")

    try:
        document = render_svg(morph_frames(a, b, frames), settings=settings, show_handles=handles)
    except MorphError as exc:
        raise typer.BadParameter(str(exc)) from exc

    final_output.parent.mkdir(parents=True, exist_ok=True)
    final_output.write_text(document)
    points = len(prepare_pair(a, b)[0])
    console.print(
        Panel(
            f"Wrote {frames} frames ({points} points each) to [green]{final_output}[/green].",
            title="Export complete",
            border_style="green",
        )
    )
