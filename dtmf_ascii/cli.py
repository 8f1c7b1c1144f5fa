from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dtmf_ascii import metrics as app_metrics
from dtmf_ascii.config import settings
from dtmf_ascii.container import get_encoder_service
from dtmf_ascii.errors import DTMFEncodeError, SinkWriteError
from dtmf_ascii.logging_utils import get_logger
from dtmf_ascii.models import EncodeResult
from dtmf_ascii.services import validate_request, write_wav


logger = get_logger(__name__)


EXAMPLES = """\
examples:
  dtmf-ascii "hello world" -p 500 -n 100 -o hello.wav
  dtmf-ascii "yo dude"
  dtmf-ascii "yo dude" -o - > yo.wav
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dtmf-ascii",
        description=(
            "Convert a string of ascii characters into a wav file of dtmf beeps."
        ),
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("text", nargs="?", default=None, help="Text to encode")
    parser.add_argument(
        "-n",
        "--note-length",
        type=int,
        default=settings.default_note_ms,
        metavar="MS",
        help="How long a beep is active [ms] (default: %(default)sms)",
    )
    parser.add_argument(
        "-p",
        "--pause-length",
        type=int,
        default=settings.default_pause_ms,
        metavar="MS",
        help="How long the pause between beeps is [ms] (default: %(default)sms)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=settings.default_output,
        metavar="FILE",
        help="Output file, '-' for stdout (default: '%(default)s')",
    )
    parser.add_argument(
        "-r",
        "--sample-rate",
        type=int,
        default=settings.default_sample_rate,
        metavar="HZ",
        help="Sample rate in Hz (default: %(default)s)",
    )
    parser.add_argument(
        "--print-header",
        action="store_true",
        help="Log the WAV header fields after encoding",
    )
    return parser


def _write_file(result: EncodeResult, out_path: Path) -> None:
    """Write the finished container, removing the file if the write fails.

    A file that cannot be opened is left untouched.
    """
    try:
        fp = out_path.open("wb")
    except OSError as exc:
        app_metrics.record_encode_failed()
        raise SinkWriteError(f"cannot open {out_path}: {exc}") from exc

    try:
        with fp:
            written = write_wav(result.wav, fp)
    except SinkWriteError:
        app_metrics.record_encode_failed()
        out_path.unlink(missing_ok=True)
        raise
    except OSError as exc:
        # close() flushes and may fail on its own
        app_metrics.record_encode_failed()
        out_path.unlink(missing_ok=True)
        raise SinkWriteError(f"cannot write {out_path}: {exc}") from exc
    app_metrics.record_bytes_written("file", written)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        request = validate_request(
            args.text,
            note_seconds=args.note_length / 1000.0,
            pause_seconds=args.pause_length / 1000.0,
            sample_rate=args.sample_rate,
        )
    except DTMFEncodeError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("    note length: %fs", request.note_seconds)
    logger.info("   pause length: %fs", request.pause_seconds)
    logger.info(" data to encode: %s", args.text)
    logger.info("amount of chars: %d", request.char_count)
    logger.info("amount of beeps: %d", request.nibble_count)
    logger.info("    output file: %s", args.output)

    service = get_encoder_service()
    try:
        if args.output == "-":
            result = service.encode_to_sink(request, sys.stdout.buffer)
        else:
            result = service.encode(request)
            _write_file(result, Path(args.output))
    except DTMFEncodeError as exc:
        logger.error("%s", exc)
        return 1

    if args.print_header:
        logger.info("WAV header:\n%s", result.header.describe())

    logger.info(
        "Wrote %s (%d bytes, %.3fs of audio)",
        args.output,
        len(result.wav),
        result.plan.duration_seconds,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
