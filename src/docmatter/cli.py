from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console

from docmatter import __version__, api
from docmatter.config import Settings, load_settings
from docmatter.engines import DEFAULT_ENGINES, available_engines
from docmatter.errors import EngineError
from docmatter.models.document import Directive, DocumentReport
from docmatter.output.console import render_console_report
from docmatter.output.json_export import export_json_report
from docmatter.parsing.directive import resolve_language
from docmatter.parsing.parser import ParsedDocument

app = typer.Typer(
    help="Extract, inspect and write front matter blocks in text documents.",
    no_args_is_help=True,
)
console = Console()
logger = logging.getLogger(__name__)


@app.callback(invoke_without_command=True)
def callback(
    version: bool = typer.Option(False, "--version", help="Show version and exit.", is_eager=True)
) -> None:
    if version:
        console.print(__version__)
        raise typer.Exit()


@app.command("parse")
def parse_command(
    path: Path = typer.Argument(..., help="Document to parse."),
    format: str = typer.Option("table", help="table|json"),
    excerpt: bool = typer.Option(False, "--excerpt", help="Extract an excerpt up to the separator."),
    excerpt_separator: str | None = typer.Option(None, help="Excerpt separator (env: DOCMATTER_EXCERPT_SEPARATOR)."),
    language: str | None = typer.Option(None, help="Default language (env: DOCMATTER_LANGUAGE)."),
    delimiters: str | None = typer.Option(None, help="Delimiter, or opening,closing (env: DOCMATTER_DELIMITERS)."),
    output: str | None = typer.Option(None, help="Optional output file path for json format."),
    no_color: bool = typer.Option(False, help="Disable color output."),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logs."),
) -> None:
    _configure_logging(verbose)
    settings = _settings(delimiters=delimiters, language=language, excerpt_separator=excerpt_separator)
    source = _read_source(path)

    document = api.parse(
        source,
        delimiters=settings.delimiters,
        language=settings.language,
        aliases=settings.aliases,
        excerpt=excerpt,
        excerpt_separator=settings.excerpt_separator,
    )
    logger.info("parsed %s: has_matter=%s language=%s", path, document.has_matter, document.language)
    report = _build_report(document)

    if format == "json":
        payload = export_json_report(report, source=path, output=output)
        if not output:
            console.out(payload)
    else:
        render_console_report(report, title=str(path), no_color=no_color)


@app.command("test")
def test_command(
    path: Path = typer.Argument(..., help="Document to check."),
    delimiters: str | None = typer.Option(None, help="Delimiter, or opening,closing (env: DOCMATTER_DELIMITERS)."),
) -> None:
    settings = _settings(delimiters=delimiters)
    has_matter = api.test(_read_source(path), delimiters=settings.delimiters)
    console.out("true" if has_matter else "false")
    if not has_matter:
        raise typer.Exit(code=1)


@app.command("language")
def language_command(
    path: Path = typer.Argument(..., help="Document to inspect."),
    delimiters: str | None = typer.Option(None, help="Delimiter, or opening,closing (env: DOCMATTER_DELIMITERS)."),
) -> None:
    settings = _settings(delimiters=delimiters)
    name = api.language(_read_source(path), delimiters=settings.delimiters)
    if name is None:
        raise typer.Exit(code=1)
    console.out(name)


@app.command("stringify")
def stringify_command(
    data: str = typer.Option("{}", help="Front matter data as a JSON object."),
    content_file: Path | None = typer.Option(None, help="File holding the document body."),
    language: str | None = typer.Option(None, help="Front matter language (env: DOCMATTER_LANGUAGE)."),
    excerpt: str | None = typer.Option(None, help="Excerpt written before the separator."),
    excerpt_separator: str | None = typer.Option(None, help="Excerpt separator (env: DOCMATTER_EXCERPT_SEPARATOR)."),
    delimiters: str | None = typer.Option(None, help="Delimiter, or opening,closing (env: DOCMATTER_DELIMITERS)."),
    output: str | None = typer.Option(None, help="Optional output file path."),
) -> None:
    settings = _settings(delimiters=delimiters, language=language, excerpt_separator=excerpt_separator)
    try:
        payload = json.loads(data)
    except json.JSONDecodeError as exc:
        console.print(f"Invalid --data: {exc}")
        raise typer.Exit(code=2) from exc
    if not isinstance(payload, dict):
        console.print("Invalid --data: expected a JSON object.")
        raise typer.Exit(code=2)

    content = _read_source(content_file) if content_file else None
    try:
        text = api.stringify(
            content,
            payload,
            delimiters=settings.delimiters,
            language=resolve_language(Directive(), settings.language, settings.aliases),
            excerpt=excerpt,
            excerpt_separator=settings.excerpt_separator,
        )
    except EngineError as exc:
        console.print(f"{exc}. Available: {', '.join(available_engines(DEFAULT_ENGINES))}")
        raise typer.Exit(code=2) from exc

    if output:
        Path(output).write_text(text, encoding="utf-8")
        return
    typer.echo(text, nl=False)


@app.command()
def engines() -> None:
    console.print("Available engines:")
    for language in available_engines(DEFAULT_ENGINES):
        engine = DEFAULT_ENGINES[language]
        console.print(f"- {language} ({engine.name}, {type(engine).__name__})")


def _configure_logging(verbose: bool) -> None:
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _settings(
    *,
    delimiters: str | None = None,
    language: str | None = None,
    excerpt_separator: str | None = None,
) -> Settings:
    try:
        return load_settings(delimiters=delimiters, language=language, excerpt_separator=excerpt_separator)
    except ValidationError as exc:
        console.print(f"Invalid settings: {exc.errors()[0]['msg']}")
        raise typer.Exit(code=2) from exc


def _read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        console.print(f"Unable to read {path}: {exc}")
        raise typer.Exit(code=2) from exc


def _build_report(document: ParsedDocument) -> DocumentReport:
    try:
        return document.to_report()
    except EngineError as exc:
        console.print(f"{exc}. Available: {', '.join(available_engines(document.engines))}")
        raise typer.Exit(code=2) from exc
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        console.print(f"Unable to decode {document.language} front matter: {exc}")
        raise typer.Exit(code=2) from exc
