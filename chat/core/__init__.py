from chat.core.memory import ChatHistory, ChatTurn, to_lc_messages
from chat.core.prompt import SYSTEM_PROMPT, resolve_system_prompt

__all__ = [
    "ChatHistory",
    "ChatTurn",
    "SYSTEM_PROMPT",
    "resolve_system_prompt",
    "to_lc_messages",
]
