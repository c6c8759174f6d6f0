#!/usr/bin/env python
"""
Simple Process Example

Sends one prompt through every provider that has an API key configured
and prints the normalized result.

Usage:
    python examples/simple_process.py "Is this spam? 'You won a free cruise!'"

Requirements:
    - OPENAI_API_KEY, ANTHROPIC_API_KEY and/or GEMINI_API_KEY set (or in .env)
    - Installed with the examples extra: pip install -e ".[examples]"
"""

import asyncio
import json
import sys

from rich.console import Console
from rich.json import JSON
from rich.panel import Panel

from ai_adapter import AIAdapter, AIAdapterError
from ai_adapter.config import configure_logging

DEFAULT_PROMPT = (
    "Is this spam? 'Congratulations, you won a free cruise!' "
    'Reply with JSON: {"is_spam": bool, "confidence": number, "reason": string}'
)

console = Console()


async def main(prompt: str) -> int:
    """Run the prompt against each configured provider."""
    configure_logging()

    async with AIAdapter.from_env() as adapter:
        if not adapter.available_providers:
            console.print("[red]No provider API keys found in the environment.[/red]")
            return 1

        for name in adapter.available_providers:
            try:
                result = await adapter.process(prompt, {"provider": name})
            except AIAdapterError as e:
                console.print(Panel(str(e), title=name, border_style="red"))
                continue

            console.print(Panel(JSON(json.dumps(result)), title=name, border_style="green"))

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_PROMPT)))
