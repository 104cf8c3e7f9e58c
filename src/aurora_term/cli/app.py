"""Typer CLI application: builds one FormatRequest from flags and prints it."""

import sys
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from aurora_term import __version__
from aurora_term.convert.chunks import to_add_line, to_align, to_effect_set
from aurora_term.core.chunk import FormatRequest, Mode, TextChunk
from aurora_term.core.color import Color, darken, lighten, to_color
from aurora_term.core.constants import ESC, RESET
from aurora_term.core.effects import EffectSet, available_effects, effect_code
from aurora_term.core.palette import active_palette
from aurora_term.render.formatter import Formatter
from aurora_term.render.json_format import render_json

APP_NAME = "aurora-term"

HELP_TEXT = f"""\
[bold]{APP_NAME}[/] {__version__} - styled terminal text with ANSI codes

Prints the formatted string with raw escape codes, ready to capture in a
shell variable.

[bold]Usage:[/]
  {APP_NAME} --text TEXT [--color COLOR] [OPTIONS]
  {APP_NAME} --table --headers "A,B" --row "1,2" [OPTIONS]

[bold]Text:[/]
  -t, --text TEXT          Text to format (repeatable)
  -c, --color COLOR        Color name or #RRGGBB, paired with --text by position
  -a, --align ALIGN        left, right, center or justify
      --add-line WHERE     none, before, after or both

[bold]Effects:[/]
  --bold --dim --italic --underline --blink --reverse --hidden
  --strikethrough --link

[bold]Color manipulation:[/]
  --lighten N              Lighten every color N tones
  --darken N               Darken every color N tones
  --inverted               Render with reverse video

[bold]Table:[/]
  -T, --table              Table mode
  -H, --headers CSV        Header cells
  -r, --row CSV            Data row (repeatable)
  --header-color COLOR     Header color (default primary)
  --row-color COLOR        Row color (default secondary)
  --cell-color COLOR       Color of column N (repeatable)
  --header-effects CSV     Header effects
  --row-effects CSV        Row effects
  --cell-effects CSV       Effects of column N (repeatable)

[bold]Other:[/]
  --json JSON              Pretty-print a JSON document (--compact for one line)
  --escape                 Print ESC as \\e instead of the raw byte
  --list-colors            Show the palette
  --list-effects           Show the available effects
  -v, --version            Show the version
  -h, --help               Show this help
"""


def parse_csv(value: Optional[str]) -> list[str]:
    """Split a comma-separated list, dropping blank entries."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def adjust_color(
    color: Color,
    lighten_tones: int = 0,
    darken_tones: int = 0,
    inverted: bool = False,
) -> Color:
    """Apply the CLI's color manipulation flags to a color."""
    color = lighten(color, lighten_tones)
    color = darken(color, darken_tones)
    return color.with_inverted(True) if inverted else color


def build_text_request(
    texts: list[str],
    colors: list[str],
    effects: Optional[EffectSet],
    align: str = "left",
    add_line: str = "none",
    lighten_tones: int = 0,
    darken_tones: int = 0,
    inverted: bool = False,
) -> FormatRequest:
    """One chunk per text; colors pair up by position, defaulting to primary."""
    chunks = []
    for index, text in enumerate(texts):
        name = colors[index] if index < len(colors) else "primary"
        color = adjust_color(to_color(name), lighten_tones, darken_tones, inverted)
        chunks.append(TextChunk(text=text, color=color, effects=effects))
    return FormatRequest(
        chunks=chunks,
        align=to_align(align),
        manual_tabs=0,
        add_line=to_add_line(add_line),
    )


def build_table_request(
    headers: list[str],
    rows: list[list[str]],
    header_color: str = "primary",
    row_color: str = "secondary",
    cell_colors: Optional[list[str]] = None,
    header_effects: Optional[EffectSet] = None,
    row_effects: Optional[EffectSet] = None,
    cell_effects: Optional[list[EffectSet]] = None,
    align: str = "left",
    add_line: str = "none",
) -> FormatRequest:
    """
    Header row plus data rows.

    Per-column cell colors apply to data rows; per-column cell effects
    apply to every row, header included.
    """
    cell_colors = cell_colors or []
    cell_effects = cell_effects or []

    def column_effects(index: int, default: Optional[EffectSet]) -> Optional[EffectSet]:
        return cell_effects[index] if index < len(cell_effects) else default

    table: list[list[TextChunk]] = []
    if headers:
        header = to_color(header_color)
        table.append([
            TextChunk(text=text, color=header, effects=column_effects(i, header_effects))
            for i, text in enumerate(headers)
        ])
    for row in rows:
        table.append([
            TextChunk(
                text=text,
                color=to_color(cell_colors[i] if i < len(cell_colors) else row_color),
                effects=column_effects(i, row_effects),
            )
            for i, text in enumerate(row)
        ])

    return FormatRequest(
        chunks=table,
        align=to_align(align),
        manual_tabs=0,
        add_line=to_add_line(add_line),
        mode=Mode.TABLE,
    )


def escape_output(text: str) -> str:
    """Make escape codes visible by writing ESC as \\e."""
    return text.replace(ESC, "\\e")


def print_help(console: Console) -> None:
    console.print(HELP_TEXT)


def print_colors(console: Console) -> None:
    """Palette as a rich table with a swatch per color."""
    palette = active_palette()
    table = Table(title="Palette")
    table.add_column("Name", style="bold")
    table.add_column("Hex")
    table.add_column("Swatch")
    table.add_column("Inverted")
    for name, color in sorted(palette.items()):
        table.add_row(name, color.hex, f"[on {color.hex}]      [/]", "yes" if color.inverted else "")
    console.print(table)


def print_effects() -> None:
    """Every effect rendered in its own style."""
    for name in available_effects():
        sys.stdout.write(f"{effect_code(name)}{name}{RESET}\n")


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    app = typer.Typer(
        name=APP_NAME,
        help="Format text with colors, effects, alignment and tables.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console(highlight=False)

    @app.command(add_help_option=False)
    def render(
        text: Annotated[Optional[list[str]], typer.Option("--text", "-t", help="Text to format (repeatable)")] = None,
        color: Annotated[Optional[list[str]], typer.Option("--color", "-c", help="Color for the text at the same position")] = None,
        align: Annotated[str, typer.Option("--align", "-a", help="left, right, center or justify")] = "left",
        add_line: Annotated[str, typer.Option("--add-line", help="none, before, after or both")] = "none",
        bold: Annotated[bool, typer.Option("--bold")] = False,
        dim: Annotated[bool, typer.Option("--dim")] = False,
        italic: Annotated[bool, typer.Option("--italic")] = False,
        underline: Annotated[bool, typer.Option("--underline")] = False,
        blink: Annotated[bool, typer.Option("--blink")] = False,
        reverse: Annotated[bool, typer.Option("--reverse")] = False,
        hidden: Annotated[bool, typer.Option("--hidden")] = False,
        strikethrough: Annotated[bool, typer.Option("--strikethrough")] = False,
        link: Annotated[bool, typer.Option("--link")] = False,
        lighten_tones: Annotated[int, typer.Option("--lighten", help="Lighten N tones")] = 0,
        darken_tones: Annotated[int, typer.Option("--darken", help="Darken N tones")] = 0,
        inverted: Annotated[bool, typer.Option("--inverted", help="Reverse video")] = False,
        table: Annotated[bool, typer.Option("--table", "-T", help="Table mode")] = False,
        headers: Annotated[Optional[str], typer.Option("--headers", "-H", help="Comma-separated headers")] = None,
        row: Annotated[Optional[list[str]], typer.Option("--row", "-r", help="Comma-separated row (repeatable)")] = None,
        header_color: Annotated[str, typer.Option("--header-color")] = "primary",
        row_color: Annotated[str, typer.Option("--row-color")] = "secondary",
        cell_color: Annotated[Optional[list[str]], typer.Option("--cell-color")] = None,
        header_effects: Annotated[Optional[str], typer.Option("--header-effects")] = None,
        row_effects: Annotated[Optional[str], typer.Option("--row-effects")] = None,
        cell_effects: Annotated[Optional[list[str]], typer.Option("--cell-effects")] = None,
        json_payload: Annotated[Optional[str], typer.Option("--json", help="JSON document to pretty-print")] = None,
        compact: Annotated[bool, typer.Option("--compact", help="Compact JSON")] = False,
        escape: Annotated[bool, typer.Option("--escape", help="Print ESC as \\e")] = False,
        list_colors: Annotated[bool, typer.Option("--list-colors", help="Show the palette")] = False,
        list_effects: Annotated[bool, typer.Option("--list-effects", help="Show the effects")] = False,
        version: Annotated[bool, typer.Option("--version", "-v", help="Show the version")] = False,
        show_help: Annotated[bool, typer.Option("--help", "-h", help="Show help")] = False,
    ) -> None:
        """Format text with colors, effects, alignment and tables."""
        if version:
            sys.stdout.write(f"{APP_NAME} {__version__}\n")
            return
        if show_help:
            print_help(console)
            return
        if list_colors:
            print_colors(console)
            return
        if list_effects:
            print_effects()
            return

        if json_payload is not None:
            result = render_json(json_payload, compact=compact)
        elif table:
            result = Formatter().format(build_table_request(
                parse_csv(headers),
                [parse_csv(r) for r in row or []],
                header_color=header_color,
                row_color=row_color,
                cell_colors=cell_color,
                header_effects=to_effect_set(parse_csv(header_effects)),
                row_effects=to_effect_set(parse_csv(row_effects)),
                cell_effects=[to_effect_set(parse_csv(e)) for e in cell_effects or []],
                align=align,
                add_line=add_line,
            ))
        elif text:
            effects = EffectSet(
                bold=bold, dim=dim, italic=italic, underline=underline, blink=blink,
                reverse=reverse, hidden=hidden, strikethrough=strikethrough, link=link,
            )
            if not effects.active():
                effects = None
            result = Formatter().format(build_text_request(
                text,
                color or [],
                effects,
                align=align,
                add_line=add_line,
                lighten_tones=lighten_tones,
                darken_tones=darken_tones,
                inverted=inverted,
            ))
        else:
            print_help(console)
            return

        sys.stdout.write((escape_output(result) if escape else result) + "\n")

    return app
