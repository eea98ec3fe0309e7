from __future__ import annotations

import logging
from typing import Any, Iterator, List, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from chat.core.memory import ChatHistory
from chat.core.prompt import resolve_system_prompt
from config.settings import Settings, get_settings


logger = logging.getLogger("gemini_chat")


def build_llm(settings: Settings) -> ChatGoogleGenerativeAI:
    if not settings.api_key:
        raise RuntimeError(
            "API_KEY not set. Please configure it in environment or .env"
        )

    return ChatGoogleGenerativeAI(
        model=settings.gemini_model,
        google_api_key=settings.api_key,
        temperature=settings.temperature,
        top_p=settings.top_p,
    )


def chunk_text(chunk: Any) -> str:
    content = getattr(chunk, "content", chunk)
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts: List[str] = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and isinstance(part.get("text"), str):
                parts.append(part["text"])
        return "".join(parts)
    return str(content)


class ChatSession:
    """One conversation with the remote model.

    Requests are strictly sequential. The history is only updated once a
    reply has been streamed to completion.
    """

    def __init__(
        self,
        llm: BaseChatModel,
        system_prompt: str,
        history: Optional[ChatHistory] = None,
    ) -> None:
        self.llm = llm
        self.system_prompt = system_prompt
        self.history = history if history is not None else ChatHistory()

    def stream(self, text: str) -> Iterator[str]:
        messages = self.history.to_messages(self.system_prompt)
        # Sent as-is; to_lc_messages would drop an empty input.
        messages.append(HumanMessage(content=text))
        logger.info(
            "Sending request: input_len=%s history_turns=%s",
            len(text),
            len(self.history),
        )

        pieces: List[str] = []
        for chunk in self.llm.stream(messages):
            piece = chunk_text(chunk)
            if not piece:
                continue
            pieces.append(piece)
            yield piece

        reply = "".join(pieces)
        if not reply:
            # Blocked or empty reply; keep user/assistant turns paired.
            logger.warning("Model returned an empty reply; turn not recorded")
            return
        self.history.add_user(text)
        self.history.add_assistant(reply)
        logger.info("Model responded in %s chunks, %s chars", len(pieces), len(reply))

    def send(self, text: str) -> str:
        return "".join(self.stream(text))


def create_session(settings: Optional[Settings] = None) -> ChatSession:
    settings = settings or get_settings()
    logger.info(
        "Config: model=%s key_set=%s",
        settings.gemini_model,
        bool(settings.api_key),
    )
    llm = build_llm(settings)
    return ChatSession(llm=llm, system_prompt=resolve_system_prompt(settings))
