from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from chat.session import ChatSession, create_session
from config.settings import get_settings


logger = logging.getLogger("gemini_chat")

EXIT_COMMAND = "exit"
PROMPT = "You: "
REPLY_LABEL = "Gemini: "


def resolve_log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if isinstance(level, int):
        return level
    return logging.WARNING


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=resolve_log_level(level),
        format="[%(asctime)s] %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def run_chat(
    session: ChatSession,
    read_line: Optional[Callable[[str], str]] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Prompt, send and stream until the user types ``exit``.

    Returns the number of requests sent to the model.
    """
    if read_line is None:
        read_line = input
    if out is None:
        out = sys.stdout
    sent = 0
    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            out.write("\n")
            break

        if line.strip() == EXIT_COMMAND:
            break
        if not line.strip():
            # Not forwarded: the API rejects empty content.
            continue

        out.write(REPLY_LABEL)
        out.flush()
        for piece in session.stream(line):
            out.write(piece)
            out.flush()
        out.write("\n")
        out.flush()
        sent += 1

    logger.info("Chat ended after %s requests", sent)
    return sent


def main() -> int:
    try:
        settings = get_settings()
        configure_logging(settings.log_level)
        session = create_session(settings)
        run_chat(session)
    except KeyboardInterrupt:
        print()
        return 130
    except Exception as e:
        logger.exception("Chat failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
