"""
Control commands that run the registered actions.

Includes run (action name plus parameter) and say (free text).
"""

import click

from core.actions import match_action, run_action
from core.errors import HueError, UnknownActionError
from models.utils import get_module_config


def _load_config_or_exit():
    config = get_module_config()
    if not config:
        raise SystemExit(1)
    return config


@click.command()
@click.argument('action_name')
@click.argument('params', nargs=-1)
def run_command(action_name: str, params: tuple[str, ...]):
    """Run one action by name.

    \b
    Examples:
      smith-hue run "turn on the" "Desk lamp"
      smith-hue run dim Bedroom
      smith-hue run "turn off all lights"
    """
    config = _load_config_or_exit()

    try:
        reply = run_action(action_name, ' '.join(params), config)
    except UnknownActionError as e:
        click.secho(f"✗ {e}", fg='red')
        if e.suggestions:
            click.secho("Did you mean one of these?", fg='yellow')
            for suggestion in e.suggestions:
                click.secho(f"  • {suggestion}", fg='green')
        raise SystemExit(1)
    except HueError as e:
        click.secho(f"✗ {e}", fg='red')
        raise SystemExit(1)

    click.echo(reply)


@click.command()
@click.argument('utterance', nargs=-1, required=True)
def say_command(utterance: tuple[str, ...]):
    """Run the action matching a free-text command.

    \b
    Examples:
      smith-hue say turn on the desk lamp
      smith-hue say brighten kitchen
    """
    text = ' '.join(utterance)
    matched = match_action(text)
    if not matched:
        click.secho(f"✗ No action matches '{text}'", fg='red')
        click.echo("Use 'actions' to list what is available.")
        raise SystemExit(1)

    config = _load_config_or_exit()
    name, params = matched

    try:
        click.echo(run_action(name, params, config))
    except HueError as e:
        click.secho(f"✗ {e}", fg='red')
        raise SystemExit(1)
