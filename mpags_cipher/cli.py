"""Command-line interface: read text, apply a cipher in parallel, write the result."""

import logging
import sys
from argparse import ArgumentParser, ArgumentTypeError

from mpags_cipher import __version__
from mpags_cipher.core.config import get_settings
from mpags_cipher.core.exceptions import ConstructionError, ProcessingError
from mpags_cipher.core.logging import configure_logging
from mpags_cipher.models.schemas import CipherMode, CipherType
from mpags_cipher.services.engines.registry import CipherFactory
from mpags_cipher.services.pipeline.applier import ChunkedApplier
from mpags_cipher.services.preprocessing.sanitizer import TextSanitizer

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise ArgumentTypeError(f"invalid worker count: '{value}'") from None
    if number < 1:
        raise ArgumentTypeError(f"worker count must be at least 1, got {number}")
    return number


def cli_parser() -> ArgumentParser:
    arg_parser = ArgumentParser(
        prog="mpags-cipher",
        description="Encrypts/Decrypts input alphanumeric text using classical ciphers",
    )
    arg_parser.add_argument(
        "--version", action="version", version=__version__, help="Print version information"
    )
    arg_parser.add_argument(
        "-i",
        dest="input_file",
        metavar="FILE",
        help="Read text to be processed from FILE. Stdin will be used if not supplied",
    )
    arg_parser.add_argument(
        "-o",
        dest="output_file",
        metavar="FILE",
        help="Write processed text to FILE. Stdout will be used if not supplied",
    )
    arg_parser.add_argument(
        "-c",
        dest="cipher",
        metavar="CIPHER",
        default=CipherType.CAESAR.value,
        choices=[c.value for c in CipherType],
        help="Cipher to use: caesar, playfair, or vigenere (default: caesar)",
    )
    arg_parser.add_argument(
        "-k",
        dest="key",
        metavar="KEY",
        default="",
        help="Cipher KEY. A null key, i.e. no encryption, is used if not supplied",
    )
    arg_parser.add_argument(
        "-n",
        "--workers",
        type=_positive_int,
        metavar="N",
        help="Number of worker threads (default from settings)",
    )
    arg_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log chunking details to stderr"
    )

    mode_group = arg_parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--encrypt",
        dest="mode",
        action="store_const",
        const=CipherMode.ENCRYPT,
        help="Use the cipher to encrypt the input text (default behaviour)",
    )
    mode_group.add_argument(
        "--decrypt",
        dest="mode",
        action="store_const",
        const=CipherMode.DECRYPT,
        help="Use the cipher to decrypt the input text",
    )
    arg_parser.set_defaults(mode=CipherMode.ENCRYPT)
    return arg_parser


def _read_input(input_file: str | None) -> str | None:
    if not input_file:
        return sys.stdin.read()
    try:
        with open(input_file, "r", encoding="utf-8", errors="replace") as stream:
            return stream.read()
    except OSError as exc:
        logger.debug("Could not read %s: %s", input_file, exc)
        print(f"[error] failed to create istream on file '{input_file}'", file=sys.stderr)
        return None


def _write_output(output_file: str | None, text: str) -> bool:
    if not output_file:
        print(text)
        return True
    try:
        with open(output_file, "w", encoding="utf-8") as stream:
            stream.write(text + "\n")
    except OSError as exc:
        logger.debug("Could not write %s: %s", output_file, exc)
        print(f"[error] failed to create ostream on file '{output_file}'", file=sys.stderr)
        return False
    return True


def main(argv: list[str] | None = None) -> int:
    args = cli_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(logging.DEBUG if args.verbose else settings.log_level)

    raw_text = _read_input(args.input_file)
    if raw_text is None:
        return 1
    input_text = TextSanitizer().sanitize(raw_text)

    try:
        cipher = CipherFactory.create(args.cipher, args.key)
    except ConstructionError as exc:
        logger.debug("Cipher construction rejected: %s", exc.details)
        print(f"[error] problem constructing requested cipher: {exc.message}", file=sys.stderr)
        return 1

    applier = ChunkedApplier(workers=args.workers, timeout=settings.worker_timeout_seconds)
    try:
        output_text = applier.process(input_text, cipher, args.mode)
    except ProcessingError as exc:
        print(f"[error] problem processing text: {exc.message}", file=sys.stderr)
        return 1

    return 0 if _write_output(args.output_file, output_text) else 1


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
