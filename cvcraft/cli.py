"""
CVCraft CLI

Converts markdown resumes to Word documents or themed pages.

Commands:
    convert  - Convert a markdown resume to Word (.docx) or a themed page (.html)
    themes   - List discovered themes and their colors
    sections - Show the metadata and section sequence of a markdown resume
    init     - Write a sample resume template

Examples:\n

    cvcraft convert resume.md resume.docx                        # Word, default theme

    cvcraft convert resume.md resume.html -f html -t classic     # Themed page

    cvcraft convert resume.md out.docx --primary "#0f766e"       # Custom primary color

    cvcraft themes                                               # List themes
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from cvcraft.contexts.parsing import MarkdownParser
from cvcraft.contexts.rendering import convert_markdown_to_html, convert_markdown_to_word
from cvcraft.contexts.rendering.logger import setup_rendering_logger
from cvcraft.contexts.theming import InvalidColorError, ThemeCustomization, ThemeRegistry
from cvcraft.utils.settings import get_settings, logs_path

OUTPUT_FORMATS = ("html", "word", "docx")

SAMPLE_RESUME = """---
name: John Doe
email: john.doe@example.com
phone: (555) 123-4567
location: San Francisco, CA
---

# John Doe

## Experience

### Senior Software Engineer
**Tech Company** | 2020 - Present
- Developed scalable web applications using React and Node.js
- Led a team of 5 developers on multiple projects
- Improved application performance by 40%

### Software Engineer
**Previous Company** | 2018 - 2020
- Built REST APIs using Python and Django
- Collaborated with cross-functional teams
- Implemented automated testing procedures

## Education

### Bachelor of Science in Computer Science
**University of Technology** | 2014 - 2018
- Graduated Magna Cum Laude
- Relevant coursework: Data Structures, Algorithms, Software Engineering

## Skills

- **Programming Languages**: JavaScript, Python, TypeScript, Java
- **Frameworks**: React, Node.js, Django, Express
- **Tools**: Git, Docker, AWS, Jenkins
"""


app = typer.Typer(
    help="Convert markdown resumes to Word documents and themed pages",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _preview(text: str, width: int = 60) -> str:
    first_line = text.split("\n", 1)[0]
    if len(first_line) > width or "\n" in text:
        return first_line[:width].rstrip() + "..."
    return first_line


@app.command("convert")
def convert_command(
    input_path: Annotated[
        Path,
        typer.Argument(help="Input markdown file"),
    ],
    output_path: Annotated[
        Path,
        typer.Argument(help="Output file (.docx or .html)"),
    ],
    theme: Annotated[
        Optional[str],
        typer.Option("--theme", "-t", help="Theme to use for styling (default: themes.default)"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: html, word, docx"),
    ] = "word",
    primary: Annotated[
        Optional[str],
        typer.Option("--primary", help="Primary color override (hex)"),
    ] = None,
    secondary: Annotated[
        Optional[str],
        typer.Option("--secondary", help="Secondary color override (hex)"),
    ] = None,
    accent: Annotated[
        Optional[str],
        typer.Option("--accent", help="Accent color override (hex)"),
    ] = None,
    themes_dir: Annotated[
        Optional[Path],
        typer.Option("--themes-dir", help="Themes directory (default: themes.path)"),
    ] = None,
):
    """
    Convert a markdown resume to a Word document or a themed page.

    Color overrides only apply to customizable themes.

    Examples:\n

        $ cvcraft convert resume.md resume.docx                  # Word document

        $ cvcraft convert resume.md resume.html --format html    # Themed page
    """
    if not input_path.is_file():
        typer.secho(f"Error: Input file '{input_path}' does not exist", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        typer.secho(f"Error: Invalid output format '{output_format}'", fg=typer.colors.RED, err=True)
        typer.secho(f"Available formats: {', '.join(OUTPUT_FORMATS)}", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)
    if output_format == "docx":
        output_format = "word"

    try:
        customization = ThemeCustomization(
            primary_color=primary, secondary_color=secondary, accent_color=accent
        )
    except InvalidColorError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    theme = theme or get_settings().themes.default
    registry = ThemeRegistry(themes_dir)
    if not registry.has_theme(theme):
        typer.secho(f"Error: Theme '{theme}' not found", fg=typer.colors.RED, err=True)
        typer.secho(
            f"Available themes: {', '.join(registry.available_themes())}",
            fg=typer.colors.YELLOW,
            err=True,
        )
        raise typer.Exit(code=1)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    setup_rendering_logger(
        logs_path() / f"convert_{timestamp}",
        input_path=input_path,
        output_path=output_path,
        theme=theme,
        output_format=output_format,
        customization=customization,
    )

    typer.secho(f"\nConverting {input_path} to {output_path}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Theme: {theme}")
    typer.echo(f"Output format: {output_format.upper()}")
    typer.echo("")

    markdown_text = input_path.read_text(encoding="utf-8")
    convert = convert_markdown_to_word if output_format == "word" else convert_markdown_to_html
    result = convert(
        markdown_text,
        output_path,
        theme=theme,
        customization=customization,
        theme_registry=registry,
    )

    typer.echo("")
    if result.success:
        typer.secho(
            f"✓ Converted '{input_path}' to '{output_path}'", fg=typer.colors.GREEN, bold=True
        )
        if result.element_count is not None:
            typer.echo(f"  Elements: {result.element_count}")
        typer.echo(f"  Time: {result.time_s:.2f}s")
    else:
        typer.secho("✗ Conversion failed", fg=typer.colors.RED, bold=True)
        typer.secho(f"  - {result.error}", fg=typer.colors.RED)
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


@app.command("themes")
def themes_command(
    themes_dir: Annotated[
        Optional[Path],
        typer.Option("--themes-dir", help="Themes directory (default: themes.path)"),
    ] = None,
):
    """
    List discovered themes.

    Shows each theme's display name and, for customizable themes, its colors.
    """
    registry = ThemeRegistry(themes_dir)
    descriptors = registry.descriptors()

    typer.secho(f"\nAvailable themes ({len(descriptors)}):", fg=typer.colors.BLUE, bold=True)
    if not descriptors:
        typer.secho(f"  No themes found in {registry.themes_path}", fg=typer.colors.YELLOW)

    for descriptor in descriptors:
        typer.secho(f"  • {descriptor.name}", fg=typer.colors.GREEN, nl=False)
        typer.echo(f" ({descriptor.display_name})")
        if descriptor.customizable:
            colors = [
                f"{label}={value}"
                for label, value in (
                    ("primary", descriptor.primary_color),
                    ("secondary", descriptor.secondary_color),
                    ("accent", descriptor.accent_color),
                )
                if value
            ]
            typer.echo(f"      customizable: {', '.join(colors) or 'yes'}")
    typer.echo("")


@app.command("sections")
def sections_command(
    input_path: Annotated[
        Path,
        typer.Argument(help="Input markdown file"),
    ],
):
    """
    Show the metadata and section sequence of a markdown resume.

    Useful for checking how the parser splits a file before converting it.
    """
    if not input_path.is_file():
        typer.secho(f"Error: Input file '{input_path}' does not exist", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    parsed = MarkdownParser().parse(input_path.read_text(encoding="utf-8"))

    typer.secho("\nMetadata:", fg=typer.colors.BLUE, bold=True)
    if not parsed.metadata:
        typer.echo("  (none)")
    for key, value in parsed.metadata.items():
        typer.echo(f"  {key}: {value}")

    typer.secho(
        f"\nSections ({len(parsed.sections)}, {len(parsed.headers)} headers):",
        fg=typer.colors.BLUE,
        bold=True,
    )
    for index, section in enumerate(parsed.sections, start=1):
        label = section.kind.value
        if section.level is not None:
            label = f"{label} h{section.level}"
        if section.items is not None:
            label = f"{label}, {len(section.items)} items"
        preview = section.items[0] if section.items else section.content
        typer.echo(f"  {index:>3}. [{label}] {_preview(preview)}")
    typer.echo("")


@app.command("init")
def init_command(
    filename: Annotated[
        Path,
        typer.Argument(help="Output filename"),
    ] = Path("resume.md"),
):
    """
    Create a sample resume template.

    Refuses to overwrite an existing file.
    """
    if filename.exists():
        typer.secho(
            f"File '{filename}' already exists. Use a different name or remove the existing file.",
            fg=typer.colors.YELLOW,
        )
        raise typer.Exit(code=1)

    try:
        filename.write_text(SAMPLE_RESUME, encoding="utf-8")
    except OSError as e:
        typer.secho(f"Error creating template: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    cli_name = get_settings().app.cli_name
    typer.secho(f"✓ Created sample resume template: {filename}", fg=typer.colors.GREEN)
    typer.secho(
        f"Edit the file and then run: {cli_name} convert {filename} resume.docx",
        fg=typer.colors.BLUE,
    )


if __name__ == "__main__":
    app()
