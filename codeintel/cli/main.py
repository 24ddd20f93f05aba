# -*- coding: utf-8 -*-
"""``codeintel`` command-line entry point."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from ..utils.logging import setup_logger
from .models_cmd import models_group
from .query_cmd import query_group

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="config.json to use instead of the env/default lookup.",
)
@click.option(
    "--log-level",
    type=click.Choice(
        ["debug", "info", "warning", "error"],
        case_sensitive=False,
    ),
    default=None,
    help="Log level (default: $CODEINTEL_LOG_LEVEL or info).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[str],
    log_level: Optional[str],
) -> None:
    """Component and utility suggestions backed by an LLM."""
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)
    setup_logger(log_level)
    if env_path.exists():
        logger.debug("Loaded environment variables from %s", env_path)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@cli.command("serve")
@click.pass_context
def serve_cmd(ctx: click.Context) -> None:
    """Run the MCP server over stdio."""
    from ..server import run_server
    from ..service import CodeIntelService

    run_server(CodeIntelService(config_path=ctx.obj.get("config_path")))


cli.add_command(models_group)
cli.add_command(query_group)
