import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from jaeger_sender.config import SenderConfiguration, SenderTarget
from jaeger_sender.console import main_console as console
from jaeger_sender.error_handlers import handle_cmd_exception

LOG = logging.getLogger(__name__)

CLI_MAIN_INTRODUCTION = (
    "Resolve and exercise the Jaeger span sender configured by the JAEGER_* "
    "environment variables."
)
CLI_DEBUG_HELP = "Enable debug logging."
CLI_ENDPOINT_HELP = "Collector endpoint, overrides JAEGER_ENDPOINT."
CLI_AGENT_HOST_HELP = "Agent host, overrides JAEGER_AGENT_HOST."
CLI_AGENT_PORT_HELP = "Agent port, overrides JAEGER_AGENT_PORT."
CLI_AUTH_TOKEN_HELP = "Bearer token, overrides JAEGER_AUTH_TOKEN."
CLI_AUTH_USERNAME_HELP = "Basic auth username, overrides JAEGER_USER."
CLI_AUTH_PASSWORD_HELP = "Basic auth password, overrides JAEGER_PASSWORD."
CLI_JSON_HELP = "Print the resolved sender as JSON."

cli = typer.Typer(
    name="jaeger-sender",
    help=CLI_MAIN_INTRODUCTION,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def configure_logger(debug: bool) -> None:
    level = logging.CRITICAL

    if debug:
        level = logging.DEBUG

    logging.basicConfig(format="%(asctime)s %(name)s => %(message)s", level=level)


@cli.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help=CLI_DEBUG_HELP),
):
    configure_logger(debug)


def build_configuration(
    endpoint: Optional[str] = None,
    agent_host: Optional[str] = None,
    agent_port: Optional[int] = None,
    auth_token: Optional[str] = None,
    auth_username: Optional[str] = None,
    auth_password: Optional[str] = None,
) -> SenderConfiguration:
    """
    Build the configuration from the environment, then apply the options that
    were given on the command line.
    """
    configuration = SenderConfiguration.from_env()

    if endpoint is not None:
        configuration.with_endpoint(endpoint)
    if agent_host is not None:
        configuration.with_agent_host(agent_host)
    if agent_port is not None:
        configuration.with_agent_port(agent_port)
    if auth_token is not None:
        configuration.with_auth_token(auth_token)
    if auth_username is not None:
        configuration.with_auth_username(auth_username)
    if auth_password is not None:
        configuration.with_auth_password(auth_password)

    return configuration


def render_target(target: SenderTarget) -> Table:
    table = Table(show_header=False, box=None)
    table.add_column(style="muted")
    table.add_column()

    for key, value in target.as_dict().items():
        table.add_row(key, "" if value is None else str(value))

    return table


@cli.command(name="resolve", help="Show which sender the configuration resolves to.")
@handle_cmd_exception
def resolve(
    endpoint: Optional[str] = typer.Option(None, "--endpoint", help=CLI_ENDPOINT_HELP),
    agent_host: Optional[str] = typer.Option(None, "--agent-host", help=CLI_AGENT_HOST_HELP),
    agent_port: Optional[int] = typer.Option(None, "--agent-port", help=CLI_AGENT_PORT_HELP),
    auth_token: Optional[str] = typer.Option(None, "--auth-token", help=CLI_AUTH_TOKEN_HELP),
    auth_username: Optional[str] = typer.Option(
        None, "--auth-username", help=CLI_AUTH_USERNAME_HELP
    ),
    auth_password: Optional[str] = typer.Option(
        None, "--auth-password", help=CLI_AUTH_PASSWORD_HELP
    ),
    as_json: bool = typer.Option(False, "--json", help=CLI_JSON_HELP),
):
    configuration = build_configuration(
        endpoint=endpoint,
        agent_host=agent_host,
        agent_port=agent_port,
        auth_token=auth_token,
        auth_username=auth_username,
        auth_password=auth_password,
    )
    target = configuration.resolve()

    if as_json:
        typer.echo(json.dumps(target.as_dict(), indent=2))
        return

    console.print(f"[transport]{target.transport.value}[/transport] sender")
    console.print(render_target(target))


@cli.command(name="send", help="Send an encoded span batch through the resolved sender.")
@handle_cmd_exception
def send(
    batch: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="File holding one encoded batch."
    ),
    endpoint: Optional[str] = typer.Option(None, "--endpoint", help=CLI_ENDPOINT_HELP),
    agent_host: Optional[str] = typer.Option(None, "--agent-host", help=CLI_AGENT_HOST_HELP),
    agent_port: Optional[int] = typer.Option(None, "--agent-port", help=CLI_AGENT_PORT_HELP),
    auth_token: Optional[str] = typer.Option(None, "--auth-token", help=CLI_AUTH_TOKEN_HELP),
    auth_username: Optional[str] = typer.Option(
        None, "--auth-username", help=CLI_AUTH_USERNAME_HELP
    ),
    auth_password: Optional[str] = typer.Option(
        None, "--auth-password", help=CLI_AUTH_PASSWORD_HELP
    ),
):
    configuration = build_configuration(
        endpoint=endpoint,
        agent_host=agent_host,
        agent_port=agent_port,
        auth_token=auth_token,
        auth_username=auth_username,
        auth_password=auth_password,
    )
    payload = batch.read_bytes()

    with configuration.get_sender() as sender:
        sender.send(payload)
        description = sender.as_dict()

    console.print(
        f"Sent {len(payload)} bytes via [transport]{description['sender']}[/transport] sender"
    )
