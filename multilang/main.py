import argparse
import asyncio
import json
import mimetypes
import sys
from dataclasses import asdict
from pathlib import Path

from multilang.config.settings import Settings
from multilang.logging.logger import Log
from multilang.processor.exceptions import ProcessorError
from multilang.processor.models import ProcessingRequest
from multilang.processor.processor import MultiLanguageProcessor, build_processor

EXIT_FAILURE = 1
EXIT_CLIENT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="multilang",
        description="Extract, translate and analyze text from document images.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, help_text in (
        ("extract-text", "Extract text and detect its language"),
        ("process", "Extract text and translate it to English"),
        ("analyze", "Extract, translate and summarize a document"),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument("file", type=Path, help="Path to the image file")
        sub.add_argument(
            "--mime-type",
            help="MIME type of the file (guessed from the extension by default)",
        )

    translate = subparsers.add_parser("translate", help="Translate text to English")
    translate.add_argument("text", help="Text to translate")
    translate.add_argument(
        "--language",
        help="Known source language code; skips language detection",
    )

    subparsers.add_parser("health", help="Probe the configured AI capabilities")
    return parser


def load_request(path: Path, mime_type: str | None = None) -> ProcessingRequest:
    """Read *path* into a ProcessingRequest, guessing the MIME type if not given."""
    if mime_type is None:
        mime_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    return ProcessingRequest.from_bytes(path.read_bytes(), mime_type, file_name=path.name)


async def run_command(processor: MultiLanguageProcessor, args: argparse.Namespace) -> dict:
    if args.command == "translate":
        result = await processor.translate_to_english(args.text, args.language)
    elif args.command == "health":
        result = await processor.health_check()
    else:
        request = load_request(args.file, args.mime_type)
        if args.command == "extract-text":
            result = await processor.extract_text(request)
        elif args.command == "process":
            result = await processor.process(request)
        else:
            result = await processor.analyze(request)
    return asdict(result)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build processor -> run one command."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    # stdout carries the JSON result only
    Log.configure(settings.log_level, stream=sys.stderr)

    try:
        processor = build_processor(settings)
        output = asyncio.run(run_command(processor, args))
    except ProcessorError as exc:
        print(json.dumps({"error": exc.kind, "details": str(exc)}))
        return EXIT_CLIENT_ERROR if exc.client_error else EXIT_FAILURE
    except (OSError, ValueError) as exc:
        print(json.dumps({"error": "processing_error", "details": str(exc)}))
        return EXIT_FAILURE

    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
