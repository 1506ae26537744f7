"""Console front end for the NutriSnap chat client."""

import argparse
import logging
from typing import Callable, Optional

from nutrisnap.client.history import HistoryManager
from nutrisnap.client.relay import RelayClient
from nutrisnap.client.session import ChatSession
from nutrisnap.client.storage import JsonFileStore
from nutrisnap.config import settings

NEW_CHAT_COMMAND = "/new"
QUIT_COMMAND = "/quit"
THINKING_NOTICE = "NutriSnap is thinking..."


def _print_message(msg, output: Callable[[str], None]) -> None:
    prefix = "You" if msg.role == "user" else "NutriSnap"
    output(f"{prefix}: {msg.text}")


def run_chat(
    session: ChatSession,
    read: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> None:
    for msg in session.history.messages:
        _print_message(msg, output)

    while True:
        try:
            line = read("You: ")
        except (EOFError, KeyboardInterrupt):
            output("")
            break

        command = line.strip()
        if command == QUIT_COMMAND:
            break

        if command == NEW_CHAT_COMMAND:
            session.history.request_reset()
            try:
                answer = read("Clear current conversation history? [y/N] ").strip().lower()
            except (EOFError, KeyboardInterrupt):
                session.history.cancel_reset()
                output("")
                break
            if answer in {"y", "yes"}:
                session.history.confirm_reset()
                output("[Chat history cleared.]")
            else:
                session.history.cancel_reset()
            continue

        if command and not session.is_busy:
            output(THINKING_NOTICE)
        reply = session.send(line)
        if reply is not None:
            _print_message(reply, output)


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description="Chat with NutriSnap AI")
    parser.add_argument("--url", default=settings.relay_url, help="relay /api/chat URL")
    parser.add_argument("--history", default=str(settings.history_path), help="local storage file")
    parser.add_argument("--timeout", type=float, default=settings.client_timeout)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="[%(asctime)s] %(levelname)s - %(message)s")

    history = HistoryManager(JsonFileStore(args.history))
    history.load()
    session = ChatSession(history, RelayClient(args.url, timeout=args.timeout))

    print(f"NutriSnap AI ({args.url}). Type {NEW_CHAT_COMMAND} for a new chat, {QUIT_COMMAND} to exit.")
    run_chat(session)


if __name__ == "__main__":
    main()
