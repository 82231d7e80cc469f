"""
Setup commands for smith-hue.

Contains the click group class with typo suggestions, and the install and
setup commands that create and show the module config.
"""

import click
import requests

from core.config import InstallSettings, get_user_config_file, load_module_config, save_module_config
from core.errors import HueError, RegistrationError
from core.install import install
from models.utils import LINK_BUTTON_NOT_PRESSED, find_similar_strings


class SuggestingGroup(click.Group):
    """Group that suggests similar commands when a name is mistyped."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if 'No such command' not in str(e):
                raise
            cmd_name = args[0] if args else ''
            visible = [name for name in self.list_commands(ctx)
                       if not self.get_command(ctx, name).hidden]
            suggestions = find_similar_strings(cmd_name, visible)
            if not suggestions:
                raise

            error_msg = f"No such command '{cmd_name}'.\n\n"
            error_msg += click.style("Did you mean one of these?\n", fg='yellow')
            for suggestion in suggestions:
                error_msg += click.style(f"  • {suggestion}\n", fg='green')
            raise click.UsageError(error_msg, ctx)


class ClickOutput:
    """Output sink for install() that writes through click."""

    def write(self, message: str) -> None:
        click.echo()
        click.secho(message, fg='yellow', bold=True)
        click.echo()


@click.command()
@click.option('--wait', type=click.FloatRange(min=0), default=None,
              help='Seconds to wait for the link button (default: 10)')
@click.option('--device-type', default=None, help='Application name registered on the bridge')
def install_command(wait: float | None, device_type: str | None):
    """Discover the bridge and register a new API user.

    Press the link button on the bridge when asked.

    \b
    Examples:
      smith-hue install
      smith-hue install --wait 30
    """
    try:
        settings = InstallSettings.from_env()
        if wait is not None or device_type:
            settings = InstallSettings(
                device_type=device_type or settings.device_type,
                link_wait_seconds=wait if wait is not None else settings.link_wait_seconds,
            )

        click.echo("Discovering Hue bridge...")
        config = install(ClickOutput(), settings)

    except RegistrationError as e:
        click.secho(f"✗ {e}", fg='red')
        if e.error_type == LINK_BUTTON_NOT_PRESSED:
            click.echo("Press the link button sooner, or use --wait to allow more time.")
        raise SystemExit(1)
    except HueError as e:
        click.secho(f"✗ {e}", fg='red')
        raise SystemExit(1)
    except requests.exceptions.RequestException as e:
        click.echo(f"Bridge registration failed: {e}", err=True)
        raise SystemExit(1)
    except (ValueError, KeyError) as e:
        click.echo(f"Failed to parse bridge response: {e}", err=True)
        raise SystemExit(1)

    click.secho("✓ Successfully registered with the bridge!", fg='green', bold=True)

    if save_module_config(config):
        click.secho(f"✓ Configuration saved to {get_user_config_file()}", fg='green')
    else:
        click.secho("✗ Failed to save configuration", fg='red')
        click.echo(f"Bridge address: {config.address}")
        raise SystemExit(1)


@click.command()
def setup_command():
    """Show where the module config lives and whether it is set."""
    config_file = get_user_config_file()
    click.echo(f"Config file: {config_file}")

    config = load_module_config()
    if config:
        click.secho(f"✓ Bridge address: {config.address}", fg='green')
    else:
        click.secho("✗ No bridge configured. Run 'install' to set one up.", fg='yellow')
