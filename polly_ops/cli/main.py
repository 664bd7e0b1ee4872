"""CLI entry point for polly-ops."""

import argparse
import json
import logging
import sys
from pathlib import Path

from polly_ops import __version__
from polly_ops.lib.config import get_polly_config
from polly_ops.lib.exceptions import ConfigError, ResponseDecodeError
from polly_ops.models import Action, OperationDescriptor, OperationResponse
from polly_ops.services.polly import (
    build_http_request,
    describe_voices,
    get_speech_synthesis_task,
    parse,
    start_speech_synthesis_task,
    synthesize_speech,
)


# Exit codes per CLI contract
EXIT_SUCCESS = 0
EXIT_USAGE_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_DECODE_ERROR = 3
EXIT_IO_ERROR = 4

# Optional synthesis options exposed as plain flags
_SYNTHESIS_FLAGS = ("engine", "language_code", "sample_rate", "text_type")
_TASK_FLAGS = ("output_s3_key_prefix", "sns_topic_arn")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="polly-ops",
        description="Build Amazon Polly request descriptors without sending them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  polly-ops voices
  polly-ops speech "hello world" --voice-id Takumi --sample-rate 16000
  polly-ops --http start-task "hello world" my-bucket --sns-topic-arn arn:aws:sns:...
  polly-ops parse describe_voices ./voices.json
        """,
    )

    parser.add_argument(
        "--http",
        action="store_true",
        help="Render the operation as an unsigned HTTP request instead of a descriptor",
    )

    parser.add_argument(
        "--endpoint",
        type=str,
        default=None,
        help="Endpoint used with --http (default: derived from AWS_REGION)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    subparsers.add_parser("voices", help="List available voices")

    speech = subparsers.add_parser("speech", help="Synthesize speech")
    speech.add_argument("text", help="Text or SSML to synthesize")
    _add_synthesis_arguments(speech)

    start_task = subparsers.add_parser("start-task", help="Start a synthesis task")
    start_task.add_argument("text", help="Text or SSML to synthesize")
    start_task.add_argument("bucket", help="S3 bucket receiving the output")
    _add_synthesis_arguments(start_task)
    start_task.add_argument("--output-s3-key-prefix", dest="output_s3_key_prefix")
    start_task.add_argument("--sns-topic-arn", dest="sns_topic_arn")

    get_task = subparsers.add_parser("get-task", help="Get a synthesis task")
    get_task.add_argument("task_id", help="Task identifier")

    parse_cmd = subparsers.add_parser("parse", help="Decode a saved response body")
    parse_cmd.add_argument("action", choices=[action.value for action in Action])
    parse_cmd.add_argument("body_file", help="File containing the raw response body")

    return parser


def _add_synthesis_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument("--output-format", dest="output_format", default=None)
    subparser.add_argument("--voice-id", dest="voice_id", default=None)
    subparser.add_argument("--engine", dest="engine")
    subparser.add_argument("--language-code", dest="language_code")
    subparser.add_argument(
        "--lexicon-name",
        dest="lexicon_names",
        action="append",
        help="Lexicon to apply (repeatable)",
    )
    subparser.add_argument("--sample-rate", dest="sample_rate")
    subparser.add_argument("--text-type", dest="text_type", choices=["text", "ssml"])


def _collect_options(args: argparse.Namespace, flags: tuple[str, ...]) -> dict:
    """Options the user actually passed, plus configured format/voice defaults."""
    config = get_polly_config()
    options = {
        "output_format": args.output_format or config.output_format,
        "voice_id": args.voice_id or config.voice_id,
    }
    for name in flags:
        value = getattr(args, name, None)
        if value is not None:
            options[name] = value
    if args.lexicon_names:
        options["lexicon_names"] = args.lexicon_names
    return options


def build_operation(args: argparse.Namespace) -> OperationDescriptor:
    """Build the descriptor selected by the parsed command."""
    if args.command == "voices":
        return describe_voices()

    if args.command == "speech":
        return synthesize_speech(args.text, _collect_options(args, _SYNTHESIS_FLAGS))

    if args.command == "start-task":
        return start_speech_synthesis_task(
            args.text,
            args.bucket,
            _collect_options(args, _SYNTHESIS_FLAGS + _TASK_FLAGS),
        )

    if args.command == "get-task":
        return get_speech_synthesis_task(args.task_id)

    raise ValueError(f"Unknown command: {args.command}")


def _render_http(operation: OperationDescriptor, endpoint: str | None) -> dict:
    """Describe the unsent HTTP request for display."""
    config = get_polly_config()
    if endpoint is None:
        config.validate_endpoint_config()

    request = build_http_request(operation, endpoint=endpoint or config.endpoint)
    rendered = {
        "method": request.method,
        "url": str(request.url),
        "headers": dict(request.headers),
    }
    if request.content:
        rendered["body"] = json.loads(request.content)
    return rendered


def run_parse(args: argparse.Namespace) -> int:
    """Run the response parser over a saved body file."""
    try:
        body = Path(args.body_file).read_bytes()
    except OSError as e:
        print(f"Error: Cannot read {args.body_file}: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    response = OperationResponse(body=body)

    try:
        parsed = parse(response, args.action)
    except ResponseDecodeError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_DECODE_ERROR

    if isinstance(parsed, OperationResponse):
        print(json.dumps({"action": args.action, "bytes": len(parsed.body)}, indent=2))
    else:
        print(json.dumps(parsed, indent=2))
    return EXIT_SUCCESS


def run(args: argparse.Namespace) -> int:
    """
    Run the selected command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    if args.command is None:
        print("Error: No command given", file=sys.stderr)
        return EXIT_USAGE_ERROR

    if args.command == "parse":
        return run_parse(args)

    operation = build_operation(args)

    if not args.http:
        print(json.dumps(operation.to_dict(), indent=2))
        return EXIT_SUCCESS

    try:
        rendered = _render_http(operation, args.endpoint)
    except ConfigError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    print(json.dumps(rendered, indent=2))
    return EXIT_SUCCESS


def configure_logging(verbose: bool) -> None:
    """Configure root logging from --verbose or POLLY_LOG_LEVEL."""
    level = "DEBUG" if verbose else get_polly_config().log_level.upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
