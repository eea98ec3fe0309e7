from __future__ import annotations

from config.settings import Settings


SYSTEM_PROMPT = (
    "You are a helpful, friendly assistant chatting with a user in a terminal. "
    "Answer clearly and concisely. Prefer plain text over heavy markdown, since "
    "the reply is printed as-is to a console. If you are unsure about something, "
    "say so instead of guessing."
)


def resolve_system_prompt(settings: Settings) -> str:
    override = (settings.system_prompt or "").strip()
    return override or SYSTEM_PROMPT
