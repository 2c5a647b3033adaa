"""Status command."""

from rich.table import Table

from . import cli
from .shared import console


@cli.command()
def status():
    """Show feishu-media configuration status."""
    from feishu_media import __version__
    from feishu_media.config import DOMAIN_BASE_URLS, load_settings

    settings = load_settings()
    credentials = settings.credentials()

    table = Table(title=f"feishu-media Status v{__version__}", show_header=False, padding=(0, 2))
    table.add_column("Key", style="bold")
    table.add_column("Value")

    table.add_row("Domain", f"{settings.domain} ({DOMAIN_BASE_URLS[settings.domain]})")
    if credentials is None:
        table.add_row("Credentials", "[yellow]needs app credentials[/yellow]")
    else:
        table.add_row("Credentials", f"[green]configured[/green] (app {credentials.app_id})")
    table.add_row("Media tools", "enabled" if settings.media_tools else "[dim]disabled[/dim]")
    timeout = f"{settings.http_timeout:g}s" if settings.http_timeout else "none"
    table.add_row("HTTP timeout", timeout)

    console.print(table)
