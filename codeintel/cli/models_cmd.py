# -*- coding: utf-8 -*-
"""CLI commands for inspecting the model configuration."""
from __future__ import annotations

import click

from ..exceptions import CodeIntelError
from ..providers import ConfigStore, ModelManager, ModelPurpose, mask_api_key
from .utils import print_json


def _manager(ctx: click.Context) -> ModelManager:
    store = ConfigStore(ctx.obj.get("config_path"))
    try:
        store.load()
    except CodeIntelError as exc:
        click.echo(click.style(f"Error: {exc}", fg="red"), err=True)
        raise SystemExit(1) from exc
    return ModelManager(store)


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


@click.group("models")
def models_group() -> None:
    """Inspect AI providers and model selection."""


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


@models_group.command("list")
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    """Show all providers, their models and the default model."""
    manager = _manager(ctx)
    summary = manager.get_config_summary()
    purposes = {m.model: m.purposes for m in manager.get_available_models()}

    click.echo(f"\nConfig: {manager.store.config_path}")
    click.echo(
        f"\n=== Providers ({summary.total_providers}, "
        f"{summary.total_models} models) ===",
    )
    for provider in summary.providers:
        click.echo(f"\n{'─' * 44}")
        click.echo(f"  {provider.name}")
        click.echo(f"{'─' * 44}")
        if not provider.models:
            click.echo("  (no models)")
        for name in provider.models:
            model = manager.get_model_info(name)
            key = mask_api_key(model.api_key) or "(not set)"
            click.echo(f"  {model.model:24s} {model.title}")
            click.echo(f"  {'':24s} base_url: {model.base_url}")
            click.echo(f"  {'':24s} api_key : {key}")
            click.echo(
                f"  {'':24s} purposes: {', '.join(purposes[name])}",
            )

    click.echo(f"\n{'═' * 44}")
    click.echo("  Default Model")
    click.echo(f"{'═' * 44}")
    try:
        click.echo(f"  {'default':16s}: {manager.get_default_model()}")
        for purpose in ModelPurpose:
            click.echo(
                f"  {purpose.value:16s}: "
                f"{manager.get_recommended_model(purpose)}",
            )
    except CodeIntelError as exc:
        click.echo(f"  {'default':16s}: ({exc})")
    click.echo()


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


@models_group.command("check")
@click.pass_context
def check_cmd(ctx: click.Context) -> None:
    """Validate the configuration; exit 1 when it has errors."""
    result = _manager(ctx).validate_config()
    print_json(result.model_dump(by_alias=True))
    if not result.is_valid:
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# recommend
# ---------------------------------------------------------------------------


@models_group.command("recommend")
@click.argument(
    "purpose",
    type=click.Choice([p.value for p in ModelPurpose], case_sensitive=False),
)
@click.pass_context
def recommend_cmd(ctx: click.Context, purpose: str) -> None:
    """Print the model recommended for PURPOSE."""
    manager = _manager(ctx)
    try:
        click.echo(manager.get_recommended_model(purpose.upper()))
    except CodeIntelError as exc:
        click.echo(click.style(f"Error: {exc}", fg="red"), err=True)
        raise SystemExit(1) from exc
