"""
Swig Agent CLI.

Usage:
    swig-agent operations [--env ENV]
    swig-agent classify TEXT [--env ENV]
    swig-agent run TEXT [--operation NAME] [--env ENV]
"""

import asyncio
import json
import sys

import click

from swig_agent.application.operations import default_operations
from swig_agent.application.selection import is_operation_enabled, select_operations
from swig_agent.config.settings import load_config
from swig_agent.di.container import DIContainer
from swig_agent.domain.exceptions import ConfigurationError
from swig_agent.presentation.plugin import SwigAction
from swig_agent.presentation.schemas import Message


def _settings(env):
    return load_config(env=env)


@click.group()
def cli():
    """Swig Agent - Swig smart wallet operations from text."""


@cli.command()
@click.option("--env", "-e", default=None, help="Environment name")
def operations(env):
    """List operations and whether they are enabled."""
    settings = _settings(env)
    for operation in default_operations():
        state = "on " if is_operation_enabled(operation, settings) else "off"
        click.echo(f"[{state}] {operation.name:<34} {operation.description}")


@cli.command()
@click.argument("text")
@click.option("--env", "-e", default=None, help="Environment name")
def classify(text, env):
    """Show which enabled operations match TEXT."""
    settings = _settings(env)
    matched = [op.name for op in select_operations(settings) if op.matches(text)]
    if not matched:
        click.echo("No operation matches")
        sys.exit(1)
    for name in matched:
        click.echo(name)


@cli.command()
@click.argument("text")
@click.option("--operation", "-o", "operation_name", default=None, help="Operation name")
@click.option("--env", "-e", default=None, help="Environment name")
def run(text, operation_name, env):
    """Execute TEXT against the configured chain and print the reply."""
    settings = _settings(env)
    if not settings.SWIG_PROGRAM_ADAPTER:
        click.echo("SWIG_PROGRAM_ADAPTER is not configured", err=True)
        sys.exit(1)

    try:
        content = asyncio.run(_run(settings, text, operation_name))
    except (ConfigurationError, LookupError) as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    click.echo(json.dumps(content.model_dump(), indent=2, ensure_ascii=False))


async def _run(settings, text, operation_name):
    container = DIContainer(settings)
    try:
        # Full catalogue: the pipeline answers a disabled operation with its
        # feature-disabled reply
        actions = [
            SwigAction(operation, container.pipeline)
            for operation in default_operations()
        ]
        message = Message(text=text, source="cli")

        if operation_name:
            action = next(
                (a for a in actions if operation_name in (a.name, *a.similes)), None
            )
            if action is None:
                raise LookupError(f"Unknown operation: {operation_name}")
        else:
            matched = [a for a in actions if await a.validate(message)]
            if not matched:
                raise LookupError("No operation matches the text")
            action = matched[0]

        return await action.handler(message)
    finally:
        await container.shutdown()


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
