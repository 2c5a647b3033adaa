"""feishu-media CLI — command line interface."""

import sys

import click

from feishu_media import __version__
from .shared import console


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="feishu-media")
@click.pass_context
def cli(ctx):
    """feishu-media — move images and files in and out of Feishu / Lark"""
    if ctx.invoked_subcommand is None:
        _show_help()


def _show_help():
    """Show all available commands grouped by category."""
    console.print(f"[bold]feishu-media v{__version__}[/bold]\n")

    groups = {
        "Setup": [
            ("status", "Show credentials, domain and tool status"),
        ],
        "Upload": [
            ("upload-image", "Upload a local image, print its image_key"),
            ("upload-file", "Upload a local file, print its file_key"),
        ],
        "Download": [
            ("download-image", "Download an image by image_key"),
            ("download-file", "Download a message attachment"),
        ],
        "Send": [
            ("send-image", "Send an uploaded image to a chat or user"),
            ("send-file", "Send an uploaded file to a chat or user"),
        ],
    }

    for category, commands in groups.items():
        console.print(f"  [bold cyan]{category}[/bold cyan]")
        for name, desc in commands:
            console.print(f"    [bold]feishu-media {name:16s}[/bold] {desc}")
        console.print()

    console.print("[dim]Run 'feishu-media <command> --help' for details on a specific command.[/dim]")


# Import all command modules (registers commands onto cli group)
from . import cmd_status  # noqa: E402, F401
from . import cmd_media  # noqa: E402, F401


@cli.command(name="help", hidden=True)
def help_cmd():
    """Show all available commands."""
    _show_help()


def main():
    """CLI entry point."""
    try:
        cli(standalone_mode=False)
    except click.UsageError as e:
        if e.ctx:
            click.echo(e.ctx.command.get_usage(e.ctx), err=True)
        click.echo("Try 'feishu-media help' for help.\n", err=True)
        click.echo(f"Error: {e.format_message()}", err=True)
        sys.exit(2)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.exceptions.Exit as e:
        sys.exit(e.code)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)
