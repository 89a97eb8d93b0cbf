#!/usr/bin/env python3
"""
Main entry point for the Agentic Caller application.
Starts the FastAPI server, or submits and previews call requests from the
command line.

Usage:
    python main.py                       # serve the API
    python main.py call --recipient-name "Jamie Rivera" --recipient-number +15559876543 \
        --objective "Confirm tomorrow's 10 AM meeting"
    python main.py preview --recipient-name "Jamie Rivera" --recipient-number +15559876543 \
        --objective "Confirm tomorrow's 10 AM meeting"
"""

import argparse
import asyncio
import logging
import sys
import uvicorn
from dotenv import load_dotenv

# Load environment variables before settings are built
load_dotenv()

from agentic_caller.client import CallConsole, CallForm, CallServiceClient, CallStatus
from agentic_caller.config.settings import settings
from agentic_caller.core.exceptions import CallRequestValidationError
from agentic_caller.core.logging import setup_logging
from agentic_caller.models.schemas import validate_call_request
from agentic_caller.services.script_service import build_call_script

logger = logging.getLogger(__name__)


def _add_request_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--caller-name", default="Agentic Assistant", help="Agent identity (default: Agentic Assistant)")
    parser.add_argument("--caller-number", default="", help="Callback number read out in the script")
    parser.add_argument("--recipient-name", default="", help="Who to call")
    parser.add_argument(
        "--recipient-number",
        default="",
        help="Phone number to call (must be in E.164 format, e.g., +15551234567)",
    )
    parser.add_argument("--objective", default="", help="What the agent should say")
    parser.add_argument("--notes", default="", help="Additional context for the recipient")


def _form_values(args: argparse.Namespace) -> dict:
    return {
        "callerName": args.caller_name,
        "callerNumber": args.caller_number,
        "recipientName": args.recipient_name,
        "recipientNumber": args.recipient_number,
        "objective": args.objective,
        "notes": args.notes,
    }


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    server_options = argparse.ArgumentParser(add_help=False)
    server_options.add_argument(
        "--host",
        type=str,
        default=settings.host,
        help=f"Host to bind the server to (default: {settings.host})"
    )
    server_options.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to bind the server to (default: {settings.port})"
    )
    server_options.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development"
    )

    parser = argparse.ArgumentParser(description="Agentic Caller", parents=[server_options])
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("serve", parents=[server_options], help="Run the API server (default)")

    call = subparsers.add_parser("call", help="Submit a call request to a running server")
    _add_request_arguments(call)
    call.add_argument(
        "--server-url",
        default=settings.call_service_url,
        help=f"Base URL of the call service (default: {settings.call_service_url})",
    )

    preview = subparsers.add_parser("preview", help="Print the script a call request would speak")
    _add_request_arguments(preview)

    args = parser.parse_args(argv)
    if args.command is None:
        args.command = "serve"
    return args


def print_activity(console: CallConsole) -> None:
    """Print the activity feed, newest first."""
    log = console.log
    print(f"Total calls: {log.total_calls}  Success: {log.successful_calls}")
    for entry in log.entries:
        print(f"[{entry.status.value}] {entry.recipient_name} ({entry.recipient_number}) "
              f"{entry.created_at.astimezone():%Y-%m-%d %H:%M:%S}")
        print(f"  {entry.objective}")
        if entry.notes:
            print(f"  Notes: {entry.notes}")
        print(f"  {entry.response_message}")


async def submit_call(args: argparse.Namespace) -> int:
    """Submit one call request and wait for it to resolve."""
    console = CallConsole(CallServiceClient(args.server_url), form=CallForm(**_form_values(args)))
    task = console.submit()
    if task is None:
        for field, message in console.form.errors.items():
            print(f"{field}: {message}", file=sys.stderr)
        return 2

    await console.wait_all()
    print_activity(console)
    entry = task.result()
    return 0 if entry is not None and entry.status is CallStatus.SUCCESS else 1


def preview_script(args: argparse.Namespace) -> int:
    try:
        request = validate_call_request(_form_values(args))
    except CallRequestValidationError as e:
        print(f"{e.field}: {e.message}", file=sys.stderr)
        return 2
    print(build_call_script(request))
    return 0


def main(argv=None) -> int:
    """Main application entry point."""
    args = parse_args(argv)

    if args.command in ("call", "preview"):
        # Keep stdout for the command output
        setup_logging(level="WARNING", stream=sys.stderr)
    else:
        setup_logging()

    if args.command == "call":
        return asyncio.run(submit_call(args))
    if args.command == "preview":
        return preview_script(args)

    # Display legal compliance notice
    print(
        'Our recommendation is to always disclose the use of AI for outbound calls.\n'
        'Reminder: All of the rules of TCPA apply even if a call is made by AI.\n'
        'Check with your counsel for legal and compliance advice.\n'
    )

    # Start the server
    logger.info(f"Starting Agentic Caller server on {args.host}:{args.port}")
    uvicorn.run(
        "agentic_caller.core.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower()
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
