"""
Inspection commands for viewing bridge and action information.

Includes discover, lights, and actions.
"""

import click
import requests

from core.actions import actions
from core.client import BridgeClient
from core.errors import HueError
from models.utils import get_client


@click.command()
def discover_command():
    """Show the Hue bridge found by the discovery service."""
    try:
        bridge = BridgeClient.discover()
    except HueError as e:
        click.secho(f"✗ {e}", fg='red')
        raise SystemExit(1)
    except requests.exceptions.RequestException as e:
        click.echo(f"Bridge discovery failed: {e}", err=True)
        raise SystemExit(1)
    except ValueError as e:
        click.echo(f"Failed to parse discovery response: {e}", err=True)
        raise SystemExit(1)

    ip = bridge.get('internalipaddress', 'Unknown')
    bridge_id = bridge.get('id', 'Unknown')
    click.secho(f"✓ Found bridge {bridge_id} at {ip}", fg='green')


@click.command()
def lights_command():
    """List all lights with their on/off state and brightness."""
    client = get_client()
    if not client:
        return

    with client:
        lights = client.get_lights()
    if not isinstance(lights, dict):
        click.secho("✗ Could not read lights from the bridge.", fg='red')
        raise SystemExit(1)
    if not lights:
        click.echo("No lights found.")
        return

    click.echo(f"\nLights ({len(lights)})")
    for light_id, light in lights.items():
        state = light.get('state', {})
        status = click.style('ON ', fg='green') if state.get('on') else click.style('OFF', fg='red')
        bri = state.get('bri')
        bri_text = f"  {bri}/254" if bri is not None else ''
        click.echo(f"  {light_id:>3}  [{status}] {light.get('name', 'Unknown')}{bri_text}")
    click.echo()


@click.command()
def actions_command():
    """List the registered command actions."""
    for name in actions:
        click.echo(f"  • {name}")
