from __future__ import annotations

import re

from creative_direction.framework.config import DEFAULT_MAX_PROMPT_TOKENS
from creative_direction.framework.types import PromptParts

PART_SEPARATOR = "; "

_WHITESPACE_RE = re.compile(r"\s+")
_SEMICOLONS_RE = re.compile(r";+")
_COMMAS_RE = re.compile(r",+")


def clean_prompt(text: str) -> str:
    text = _WHITESPACE_RE.sub(" ", text)
    text = _SEMICOLONS_RE.sub(";", text)
    text = _COMMAS_RE.sub(",", text)
    return text.strip()


def truncate_tokens(text: str, max_tokens: int = DEFAULT_MAX_PROMPT_TOKENS) -> str:
    """Plain prefix cut to `max_tokens` space-separated tokens; no sentence repair."""

    tokens = text.split(" ")
    if len(tokens) <= max_tokens:
        return text
    return " ".join(tokens[:max_tokens])


def assemble(
    identity: str = "",
    identity_lock: str = "",
    pose: str = "",
    composition: str = "",
    lighting: str = "",
    environment: str = "",
    wardrobe: str = "",
    mood_atmosphere: str = "",
    technical_suffix: str = "",
    *,
    max_tokens: int = DEFAULT_MAX_PROMPT_TOKENS,
) -> str:
    """
    Join the nine prompt parts in this exact order with "; ", skipping blank
    parts, then collapse repeated whitespace, ';' and ',' and cut to
    `max_tokens` tokens.

    The order and the cut point are what the image model was tuned on; do not
    reorder parts or trim semantically.
    """

    parts = (
        identity,
        identity_lock,
        pose,
        composition,
        lighting,
        environment,
        wardrobe,
        mood_atmosphere,
        technical_suffix,
    )
    joined = PART_SEPARATOR.join(part for part in parts if part and part.strip())
    return truncate_tokens(clean_prompt(joined), max_tokens)


def assemble_parts(parts: PromptParts, *, max_tokens: int = DEFAULT_MAX_PROMPT_TOKENS) -> str:
    return assemble(*parts.ordered(), max_tokens=max_tokens)
