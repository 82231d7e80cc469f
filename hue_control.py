#!/usr/bin/env python3
"""
smith-hue CLI
Turn Philips Hue lights on/off, dim and brighten them by name.
"""

import click

from commands.setup import SuggestingGroup, install_command, setup_command
from commands.inspection import discover_command, lights_command, actions_command
from commands.control import run_command, say_command


@click.group(
    cls=SuggestingGroup,
    context_settings={
        'help_option_names': ['-h', '--help'],
        'max_content_width': 999
    }
)
@click.version_option(version='0.1.0', prog_name='smith-hue')
def cli():
    """smith-hue - Control Philips Hue lights by name.

Run 'install' once and press the link button on your bridge when asked.
The bridge address is saved to ~/.smith_hue/config.json (override with SMITH_HUE_CONFIG)."""
    pass


# Register setup commands
cli.add_command(install_command, name='install')
cli.add_command(setup_command, name='setup')

# Register inspection commands
cli.add_command(discover_command, name='discover')
cli.add_command(lights_command, name='lights')
cli.add_command(actions_command, name='actions')

# Register control commands
cli.add_command(run_command, name='run')
cli.add_command(say_command, name='say')


if __name__ == '__main__':
    cli()
