"""Shared utilities for feishu-media CLI commands."""

import base64
from typing import Optional

from rich.console import Console
from rich.markup import escape

console = Console()


def _decode_data_url(data_url: str) -> bytes:
    """Return the payload bytes of a ``data:<mime>;base64,<payload>`` URL."""
    _, _, payload = data_url.partition(";base64,")
    return base64.b64decode(payload)


def _print_envelope(envelope: dict, output: Optional[str] = None) -> bool:
    """Print a tool envelope; write downloaded bytes to ``output`` if given.

    Returns:
        True for a success envelope, False for an error envelope.
    """
    text = envelope["content"][0]["text"]
    if "error" in envelope:
        console.print(f"[red]{escape(text)}[/red]")
        return False

    console.print(text, markup=False, highlight=False)

    data_url = envelope.get("details", {}).get("dataUrl")
    if output and data_url:
        payload = _decode_data_url(data_url)
        with open(output, "wb") as f:
            f.write(payload)
        console.print(f"[green]✓ Saved {len(payload)} bytes to {output}[/green]")
    return True
