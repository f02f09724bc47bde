"""CLI entry point for dreamchat."""

import asyncio
import dataclasses
import logging

import click
import uvicorn

from dreamchat.config import Settings
from dreamchat.controller import ConversationController
from dreamchat.decoder import format_sentiment, is_positive
from dreamchat.models import Message
from dreamchat.relay import RelayClient, RelayError

QUIT_COMMANDS = {"/quit", "/exit"}


def render_message(message: Message) -> str:
    """Format a transcript entry for the terminal, metadata included."""
    if message.is_user:
        return click.style("You: ", fg="cyan", bold=True) + message.text

    lines = [click.style("AI: ", fg="magenta", bold=True) + message.text]

    badges = []
    if message.sentiment is not None:
        colour = "green" if is_positive(message.sentiment) else "red"
        badges.append(click.style(f"Sentiment: {format_sentiment(message.sentiment)}", fg=colour))
    for tag in message.tags or ():
        badges.append(click.style(f"#{tag}", fg="blue"))
    if badges:
        lines.append("  " + " ".join(badges))
    if message.summary:
        lines.append("  " + click.style(f"Summary: {message.summary}", italic=True))

    return "\n".join(lines)


async def run_chat(controller: ConversationController) -> None:
    """Read dreams from stdin until EOF or /quit."""
    while True:
        try:
            line = await asyncio.to_thread(
                click.prompt, "Describe your dream", default="", show_default=False
            )
        except click.Abort:
            break

        if line.strip() in QUIT_COMMANDS:
            break

        controller.update_draft(line)
        if not controller.pending_input.strip():
            continue

        click.echo(click.style("Analyzing...", dim=True))
        before = len(controller.transcript)
        await controller.send()

        for message in controller.transcript[before:]:
            if not message.is_user:
                click.echo(render_message(message))
        if controller.last_error:
            click.secho(controller.last_error, fg="red", err=True)


async def report_relay(relay: RelayClient, relay_url: str) -> None:
    try:
        info = await relay.health()
    except RelayError as e:
        click.secho(f"Relay not reachable at {relay_url}: {e}", fg="yellow", err=True)
        return
    click.echo(f"Connected to {relay_url} (model: {info.get('model')})")


@click.group()
@click.option("--verbose", is_flag=True, help="Log relay traffic.")
def main(verbose: bool):
    """Dream interpretation chat backed by a language model."""
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING)


@main.command()
@click.option("--port", default=8000, help="Port to serve on.")
@click.option("--host", default="127.0.0.1", help="Host to bind to.")
def serve(port: int, host: str):
    """Start the relay server."""
    click.echo(f"Starting dreamchat relay on http://{host}:{port}")
    uvicorn.run("dreamchat.app:app", host=host, port=port, reload=False)


@main.command()
@click.option("--relay-url", default=None, help="Relay base URL (defaults to DREAMCHAT_RELAY_URL).")
def chat(relay_url: str | None):
    """Chat with the dream interpreter in the terminal."""
    settings = Settings.from_env()
    if relay_url:
        settings = dataclasses.replace(settings, relay_url=relay_url)

    async def session():
        relay = RelayClient.from_settings(settings)
        try:
            await report_relay(relay, settings.relay_url)
            await run_chat(ConversationController(relay))
        finally:
            await relay.aclose()

    asyncio.run(session())
