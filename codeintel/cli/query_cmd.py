# -*- coding: utf-8 -*-
"""CLI commands for looking up catalog entries by exact name."""
from __future__ import annotations

from typing import Optional

import click

from ..knowledge import ComponentKnowledgeBase, UtilityKnowledgeBase
from .utils import print_json


@click.group("query")
def query_group() -> None:
    """Look up components and utilities in the knowledge bases."""


@query_group.command("component")
@click.argument("name")
@click.option(
    "--file",
    "path",
    type=click.Path(dir_okay=False),
    default=None,
    help="components.json to read instead of the resolved one.",
)
def component_cmd(name: str, path: Optional[str]) -> None:
    """Show the component called NAME."""
    component = ComponentKnowledgeBase(path).get_by_name(name)
    if component is None:
        click.echo(click.style(f"Component not found: {name}", fg="yellow"))
        raise SystemExit(1)
    print_json(component.to_wire())


@query_group.command("utility")
@click.argument("name")
@click.option(
    "--file",
    "path",
    type=click.Path(dir_okay=False),
    default=None,
    help="utils.json to read instead of the resolved one.",
)
def utility_cmd(name: str, path: Optional[str]) -> None:
    """Show the utility called NAME."""
    utility = UtilityKnowledgeBase(path).get_by_name(name)
    if utility is None:
        click.echo(click.style(f"Utility not found: {name}", fg="yellow"))
        raise SystemExit(1)
    print_json(utility.to_wire())
