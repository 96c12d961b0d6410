import typer
from palred import file_utils, legend, pipeline
from palred.errors import ColorReducerError
from pathlib import Path
from typing import List, Optional

import sys # for the command line recorded in PNG metadata

import rich.traceback


def validate_output_paths(paths: List[Path], overwrite: bool = False) -> None:
    if overwrite:
        return
    clobbered_files_found = [str(p) for p in paths if p.exists()]
    if clobbered_files_found:
        typer.secho("Error: Files already exist:", fg=typer.colors.RED)
        for path_str in clobbered_files_found: typer.secho(f"  {path_str}", fg=typer.colors.RED)
        typer.secho("Use --yes (-y) to overwrite.", fg=typer.colors.YELLOW); raise typer.Exit(code=1)


def reduce_cli(
    input_path: Path = typer.Argument(
        ...,
        help="Input image file (e.g., main_menu.png).",
        metavar="INPUT_FILE",
        exists=True, file_okay=True, dir_okay=False, readable=True,
    ),
    palette_path: Path = typer.Argument(
        ...,
        help="Image whose distinct colors form the candidate palette (e.g., sms_palette.png).",
        metavar="PALETTE_FILE",
        exists=True, file_okay=True, dir_okay=False, readable=True,
    ),
    max_colors: int = typer.Argument(
        ...,
        help="Maximum number of colors kept in the output image.",
        metavar="MAXIMUM_COLOR_NUMBER",
        min=0,
    ),
    output_path: Path = typer.Argument(
        ...,
        help="Output PNG file (e.g., main_menu_16.png).",
        metavar="OUTPUT_FILE",
        dir_okay=False,
    ),
    legend_path: Optional[Path] = typer.Option(
        None, "--legend", help="Also write a swatch legend of the reduced palette to this PNG file.",
        dir_okay=False,
    ),
    swatch_size: int = typer.Option(40, "--swatch-size", min=10, help="Legend swatch size. Default: 40px."),
    font_path: Optional[Path] = typer.Option(
        None, "--font-path", help="Path to a .ttf font file for legend labels.",
        exists=True, file_okay=True, dir_okay=False, readable=True,
    ),
    font_size: int = typer.Option(14, "--font-size", min=1, help="Legend label font size. Default: 14."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Overwrite existing files."),
    no_metadata: bool = typer.Option(False, "--no-metadata", help="Do not embed run metadata in output PNGs."),
):
    """
    Takes an input image, a palette image and creates a new image with the palette's
    closest colors, using at most MAXIMUM_COLOR_NUMBER of them.

    Example: color-reducer main_menu.png sms_palette.png 16 main_menu_16.png
    """
    command_line_str = " ".join(sys.argv)

    expected_outputs = [output_path]
    if legend_path:
        expected_outputs.append(legend_path)
    validate_output_paths(expected_outputs, overwrite=yes)

    try:
        image, width, height = file_utils.decode_image(input_path)
        palette = file_utils.load_palette(palette_path)
        typer.echo(f"Created palette from {palette_path} file: {len(palette)} unique colors")

        result = pipeline.convert(image, palette, max_colors)
        typer.echo(f"Mapped {width}x{height} pixels onto {len(result.histogram)} palette colors, "
                   f"keeping {len(result.reduced_palette)}.")
        if not result.reduced_palette:
            typer.secho("Warning: reduced palette is empty, pixels were left unchanged.", fg=typer.colors.YELLOW)

        file_utils.encode_image(
            output_path, image, width, height,
            command_line_invocation=command_line_str,
            additional_metadata={
                "SourceImage": str(input_path),
                "PaletteImage": str(palette_path),
                "PaletteColors": str(len(palette)),
                "MaximumColors": str(max_colors),
                "ReducedColors": str(len(result.reduced_palette)),
            },
            embed_metadata=not no_metadata,
        )
        typer.echo(f"Saved {output_path} file")

        if legend_path:
            legend_image = legend.create_legend_image(
                result.reduced_palette,
                font_path=str(font_path) if font_path else None,
                font_size=font_size,
                swatch_size=swatch_size,
            )
            if legend_image:
                try:
                    legend_image.save(legend_path, "PNG")
                except OSError as e:
                    typer.secho(f"Error writing legend {legend_path}: {e}", fg=typer.colors.RED); raise typer.Exit(code=1)
                typer.echo(f"Palette legend saved to: {legend_path}")
            else:
                typer.secho("Warning: Palette legend not generated (empty palette).", fg=typer.colors.YELLOW)
    except ColorReducerError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED); raise typer.Exit(code=1)


def main():
    rich.traceback.install(show_locals=False, suppress=[typer]) # type: ignore
    typer.run(reduce_cli)


if __name__ == "__main__":
    main()
