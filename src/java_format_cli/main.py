import logging
from pathlib import Path

import typer
from java_format.options import SingleLineJavadocStyle, Style, builder

from .config import FormatOptionsConfig
from .converters import options_to_model

app = typer.Typer(help="java-format options - Resolve the options a java-format run would use")


@app.command()
def show(
    config_file: Path = typer.Option(Path(".java-format.toml"), help="Path to config file"),
    aosp: bool | None = typer.Option(
        None, "--aosp/--no-aosp", help="Use AOSP style (4-space indentation) or Google style"
    ),
    format_javadoc: bool | None = typer.Option(
        None, "--format-javadoc/--skip-javadoc-formatting", help="Reformat Javadoc comments"
    ),
    single_line_javadoc_style: SingleLineJavadocStyle | None = typer.Option(
        None, help="How to render Javadoc comments that fit on one line"
    ),
    space_inside_empty_block: bool | None = typer.Option(
        None,
        "--space-inside-empty-block/--no-space-inside-empty-block",
        help="Put a space inside empty blocks",
    ),
    json: bool = typer.Option(False, "--json", help="Print the options as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Show the resolved formatter options"""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    # Precedence: defaults < config file < flags
    options_builder = FormatOptionsConfig(config_file).apply_to_builder(builder())
    if aosp is not None:
        options_builder.style(Style.AOSP if aosp else Style.GOOGLE)
    if format_javadoc is not None:
        options_builder.format_javadoc(format_javadoc)
    if single_line_javadoc_style is not None:
        options_builder.single_line_javadoc_style(single_line_javadoc_style)
    if space_inside_empty_block is not None:
        options_builder.space_inside_empty_block(space_inside_empty_block)

    model = options_to_model(options_builder.build())

    if json:
        typer.echo(model.model_dump_json(indent=2))
        return

    for key, value in model.model_dump(mode="json").items():
        typer.echo(f"{key}: {value}")


@app.command()
def styles():
    """List the available styles"""
    for style in Style:
        typer.echo(f"{style.value}: indentation multiplier {style.indentation_multiplier()}")


if __name__ == "__main__":
    app()
