from __future__ import annotations

import argparse
import logging
from typing import NoReturn

import uvicorn

from .bridge import Bridge
from .config import get_settings
from .directory import add_person, load_directory, remove_person, save_directory
from .errors import BridgeError, ConfigurationError
from .log import configure_logging
from .main import create_app
from .relay import get_relay_client
from .twilio_client import get_sms_sender

logger = logging.getLogger("sms_bridge.cli")


def fatal(message: str) -> NoReturn:
    logger.critical(message)
    raise SystemExit(1)


def _require_file(path: str) -> str:
    if not path:
        fatal("Numbers file must be provided")
    return path


def serve(numbers_file: str, port: int) -> None:
    """Load the directory and run the webhook server until interrupted."""
    try:
        directory = load_directory(numbers_file)
        send_sms = get_sms_sender()
        relay = get_relay_client()
    except BridgeError as e:
        fatal(f"Could not start bridge: {e}")

    settings = get_settings()
    bridge = Bridge(
        directory=directory,
        relay=relay,
        send_sms=send_sms,
        agent_name=settings.agent_name,
    )
    logger.info(
        "Starting server on port %s (%d known numbers, conversation %s)",
        port,
        len(directory),
        bridge.conversation_id,
    )
    uvicorn.run(create_app(bridge), host="0.0.0.0", port=port, log_config=None)


def add(numbers_file: str, name: str, phone: str) -> None:
    try:
        directory = load_directory(numbers_file)
        add_person(directory, name=name, phone=phone)
        save_directory(numbers_file, directory)
    except BridgeError as e:
        fatal(f"Could not save number to file: {e}")
    logger.info("Added %s (%s) to %s", name, phone, numbers_file)


def remove(numbers_file: str, name: str) -> None:
    try:
        directory = load_directory(numbers_file)
        removed = remove_person(directory, name=name)
        save_directory(numbers_file, directory)
    except BridgeError as e:
        fatal(f"Could not save number to file: {e}")

    if removed:
        logger.info("Removed %s (%s) from %s", name, ", ".join(removed), numbers_file)
    else:
        logger.warning("No entry named %s in %s", name, numbers_file)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sms-bridge",
        description="Twilio HTTP bridge that relays SMS to a chat backend.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    file_help = "Path to the JSON numbers file (phone -> name)."

    p_serve = sub.add_parser("serve", help="Start the Twilio bridge server.")
    p_serve.add_argument("--file", required=True, help=file_help)
    p_serve.add_argument(
        "port",
        nargs="?",
        type=int,
        default=None,
        help="Port to listen on (default: SMS_BRIDGE_PORT or 6000).",
    )

    p_add = sub.add_parser("add", help="Add a person + phone number to the bridge.")
    p_add.add_argument("--file", required=True, help=file_help)
    p_add.add_argument("name")
    p_add.add_argument("phone")

    p_remove = sub.add_parser("remove", help="Remove a person from the bridge.")
    p_remove.add_argument("--file", required=True, help=file_help)
    p_remove.add_argument("name")

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    # SMS_BRIDGE_LOG_LEVEL is read directly so a bad setting can still be logged
    configure_logging()
    try:
        settings = get_settings()
    except ConfigurationError as e:
        fatal(str(e))

    numbers_file = _require_file(args.file)

    if args.command == "serve":
        port = args.port if args.port is not None else settings.port
        serve(numbers_file, port=port)
    elif args.command == "add":
        if not args.name or not args.phone:
            fatal("Name and phone number must be provided in that order")
        add(numbers_file, name=args.name, phone=args.phone)
    elif args.command == "remove":
        if not args.name:
            fatal("Name must be provided")
        remove(numbers_file, name=args.name)


if __name__ == "__main__":
    main()
