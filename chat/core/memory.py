"""In-process conversation history.

The transcript lives only as long as the process. Nothing is persisted and
nothing is truncated, so every request carries the whole conversation.
"""

from __future__ import annotations

from typing import List, Literal

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from pydantic import BaseModel, Field


class ChatTurn(BaseModel):
    role: Literal["user", "assistant"] = Field(..., description="'user' or 'assistant'")
    content: str


class ChatHistory:
    def __init__(self) -> None:
        self._turns: List[ChatTurn] = []

    def add_user(self, text: str) -> None:
        self._turns.append(ChatTurn(role="user", content=text))

    def add_assistant(self, text: str) -> None:
        self._turns.append(ChatTurn(role="assistant", content=text))

    @property
    def turns(self) -> List[ChatTurn]:
        return list(self._turns)

    def __len__(self) -> int:
        return len(self._turns)

    def to_messages(self, system_prompt: str) -> List[BaseMessage]:
        messages: List[BaseMessage] = [SystemMessage(content=system_prompt)]
        messages.extend(to_lc_messages([t.model_dump() for t in self._turns]))
        return messages


def to_lc_messages(history: List[dict]) -> List[BaseMessage]:
    messages: List[BaseMessage] = []
    for item in history or []:
        role = (item.get("role") or "").lower()
        content = item.get("content") or ""
        if not content:
            continue
        if role in ("user", "human"):
            messages.append(HumanMessage(content=content))
        elif role in ("assistant", "ai", "model"):
            messages.append(AIMessage(content=content))
        else:
            messages.append(HumanMessage(content=content))
    return messages
