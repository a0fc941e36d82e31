"""Console entry point: serve the HTTP API or run a single Graph CLI command."""

import json
import sys

import click
import uvicorn
from dotenv import load_dotenv

from graphbridge.config.provider import EnvConfigProvider
from graphbridge.logging_config import configure_logging, get_logging_config
from graphbridge.modules.bridge.factory import BridgeFactory


@click.group()
def main():
    """Microsoft Graph CLI bridge."""
    load_dotenv()


@main.command()
@click.option("--host", "host", default=None, help="Bind address (defaults to API_HOST)")
@click.option("--port", "port", default=None, type=int, help="Bind port (defaults to API_PORT)")
def serve(host, port):
    """Serve the HTTP API."""
    from graphbridge.main import create_app

    provider = EnvConfigProvider()
    api_config = provider.get_api_config()

    uvicorn.run(
        create_app(config_provider=provider),
        host=host or api_config.host,
        port=port or api_config.port,
        log_config=get_logging_config(api_config.log_level),
    )


@main.command()
@click.argument("command")
def run(command: str):
    """Run one Graph CLI COMMAND, e.g. "users list", and print the response."""
    provider = EnvConfigProvider()
    configure_logging(provider.get_api_config().log_level)

    graph_command = BridgeFactory.build(provider)
    response = graph_command.run({"command": command})

    click.echo(json.dumps(response.model_dump(), indent=2))
    sys.exit(0 if response.succeeded else 1)


@main.command()
def locate():
    """Print the resolved Graph CLI path."""
    provider = EnvConfigProvider()
    configure_logging(provider.get_api_config().log_level)

    path = BridgeFactory.build(provider).bridge.executable_path()
    if path is None:
        click.echo("Microsoft Graph CLI executable not found", err=True)
        sys.exit(1)
    click.echo(path)


if __name__ == "__main__":
    main()
