"""Conversation state for one chat session.

The controller owns the transcript, the unsent draft, the in-flight flag and
the last error. It is driven from a single event loop: `send()` suspends only
while waiting on the relay, and a second `send()` during that wait is ignored.
"""

import itertools
import logging
from typing import Protocol

from dreamchat.decoder import decode
from dreamchat.models import Message

logger = logging.getLogger(__name__)

SEND_FAILED_MESSAGE = "Failed to get response from AI. Please try again."


class Relay(Protocol):
    async def complete(self, messages: list[dict]) -> str: ...


class ConversationController:
    """Turns drafts into relay requests and folds replies into the transcript."""

    def __init__(self, relay: Relay):
        self.relay = relay
        self._transcript: list[Message] = []
        self._ids = itertools.count(1)
        self.pending_input = ""
        self.request_in_flight = False
        self.last_error: str | None = None

    @property
    def transcript(self) -> tuple[Message, ...]:
        return tuple(self._transcript)

    def update_draft(self, text: str) -> None:
        self.pending_input = text

    def serialize_transcript(self) -> list[dict]:
        """Map every message, in order, to a role/content pair."""
        return [m.to_chat_message().model_dump() for m in self._transcript]

    def _append(self, message: Message) -> Message:
        self._transcript.append(message)
        return message

    async def send(self) -> Message | None:
        """Submit the draft and wait for the interpretation.

        Returns the assistant message, or None when nothing was sent or the
        relay call failed (see `last_error`).
        """
        text = self.pending_input.strip()
        if not text or self.request_in_flight:
            return None

        self._append(Message(id=next(self._ids), author="user", text=text))
        self.pending_input = ""
        self.last_error = None
        self.request_in_flight = True
        payload = self.serialize_transcript()

        try:
            raw = await self.relay.complete(payload)
            reply = decode(raw)
            message = Message(
                id=next(self._ids),
                author="assistant",
                text=reply.text,
                sentiment=reply.sentiment,
                tags=reply.tags,
                summary=reply.summary,
            )
        except Exception as e:
            logger.error("Relay call failed: %s", e)
            self.last_error = SEND_FAILED_MESSAGE
            return None
        else:
            return self._append(message)
        finally:
            self.request_in_flight = False
