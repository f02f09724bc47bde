"""Decoder for the bracketed metadata line that opens a dream interpretation.

The model is instructed to start every interpretation with a line like:
  [0.42, 'love, anxiety', 'a man is chasing you']

followed by the free-text reply. The triple carries a sentiment score, a
comma-separated tag list and a short summary. Quoted strings have no escaping;
each one is the shortest text that still lets the whole triple match, so a
stray quote only survives when it is not followed by `', '` or `']`.

Anything that does not match falls back to plain text, untouched.
"""

import re
from dataclasses import dataclass

METADATA_PATTERN = re.compile(r"^\[([0-9.]+),\s*'(.*?)',\s*'(.*?)'\]\s*([\s\S]*)")

POSITIVE_THRESHOLD = 0.5


@dataclass(frozen=True)
class DecodedReply:
    """Display text plus whatever metadata was found in front of it."""

    text: str
    sentiment: float | None = None
    tags: tuple[str, ...] | None = None
    summary: str | None = None

    @property
    def has_metadata(self) -> bool:
        return self.sentiment is not None


def decode(raw: str) -> DecodedReply:
    """Split a raw model reply into metadata and display text.

    Never raises: input that does not follow the convention is returned as-is
    with no metadata.
    """
    match = METADATA_PATTERN.match(raw)
    if not match:
        return DecodedReply(text=raw)

    score, tag_list, summary, body = match.groups()
    try:
        sentiment = float(score)
    except ValueError:
        # "1.2.3" satisfies the character class but is not a number
        return DecodedReply(text=raw)

    tags = tuple(tag.strip() for tag in tag_list.split(","))
    tags = tuple(tag for tag in tags if tag)

    return DecodedReply(
        text=body.strip(),
        sentiment=sentiment,
        tags=tags or None,
        summary=summary or None,
    )


def format_sentiment(sentiment: float) -> str:
    """Render a sentiment score with two decimals."""
    return f"{sentiment:.2f}"


def is_positive(sentiment: float) -> bool:
    return sentiment > POSITIVE_THRESHOLD
