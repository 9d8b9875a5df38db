from __future__ import annotations

import json
import logging

import typer

from convertme.config import get_settings, parse_log_level
from convertme.errors import ConvertMeError
from convertme.person import Person
from convertme.views import PersonView

app = typer.Typer(help="convertme: a person record and suggested names")


@app.callback()
def main(
    log_level: str | None = typer.Option(None, help="Log level (overrides CONVERTME_LOG_LEVEL)"),
) -> None:
    try:
        settings = get_settings()
        if log_level is not None:
            settings.log_level = parse_log_level(log_level, source="--log-level")
    except ConvertMeError as exc:
        typer.echo(exc.detail, err=True)
        raise typer.Exit(1)
    # basicConfig is a no-op once the root logger has handlers; set the level regardless.
    logging.basicConfig()
    logging.getLogger().setLevel(settings.log_level_value)


@app.command()
def names(
    as_json: bool = typer.Option(False, "--json", help="Print the names as a JSON array"),
) -> None:
    """Print the suggested names."""
    suggested = Person.get_suggested_names()
    if as_json:
        typer.echo(json.dumps(list(suggested)))
        return
    for name in suggested:
        typer.echo(name)


@app.command()
def show(
    name: str = typer.Argument(..., help="Person name"),
    age: int = typer.Argument(..., help="Person age"),
    birthday: bool = typer.Option(False, help="Celebrate a birthday before printing"),
    as_json: bool = typer.Option(False, "--json", help="Print the person as JSON"),
) -> None:
    """Build a person and print a greeting."""
    try:
        person = Person.validated(name, age, settings=get_settings())
    except ConvertMeError as exc:
        typer.echo(exc.detail, err=True)
        raise typer.Exit(1)

    if birthday:
        person = person.celebrate_birthday()

    if as_json:
        typer.echo(PersonView.from_person(person).model_dump_json())
        return
    typer.echo(person.greeting())
    typer.echo(f"Age: {person.age}")
