"""
Winternitz one-time signature CLI entry point.

Generate key pairs and time signing and verification for several parameters.

Usage::

    python -m winternitz keygen -w 8
    python -m winternitz demo
    python -m winternitz demo -w 2 -w 4

Commands:
    keygen   Generate a key pair and print every private/public chain pair
    demo     Sign and verify a sample message per parameter, with timings

Options:
    -v, --verbose   Enable debug logging
    --no-color      Disable colored logging output
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import Sequence

from winternitz.constants import PROD_CONFIG
from winternitz.interface import WinternitzScheme
from winternitz.types import WotsError

DEMO_PARAMETERS: tuple[int, ...] = (4, 8, 16)
"""Parameters the demo runs when none are given."""

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    CYAN = "\x1b[38;5;51m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        timestamp = f"{self.CYAN}{self.formatTime(record, self.datefmt)}{self.RESET}"
        levelname = f"{color}{record.levelname:8}{self.RESET}"
        name = f"{self.BLUE}{record.name}{self.RESET}"
        return f"{timestamp} {levelname} {name}: {record.getMessage()}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure logging for the CLI with optional colors."""
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler()
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def run_keygen(w: int) -> None:
    """Generate one key pair and print each seed next to its chain endpoint."""
    scheme = WinternitzScheme.new(w)
    with scheme.private_key as private_key:
        for seed, endpoint in zip(private_key, scheme.public_key):
            print(f"Private key: {seed.hex()} Public key: {endpoint.hex()}")


def run_demo(parameters: Sequence[int]) -> None:
    """
    Sign and verify a sample message for each parameter and report timings.

    Ends with the size breakdown of a public key for the production preset.
    """
    print("Winternitz One-Time Signature Demo")
    print("=" * 48)
    print()

    for w in parameters:
        print(f"Testing with Winternitz parameter w = {w}")

        scheme = WinternitzScheme.new(w)
        message = f"Signing with w={w}".encode()

        start = time.perf_counter()
        signature = scheme.sign(message)
        sign_duration = time.perf_counter() - start

        start = time.perf_counter()
        is_valid = scheme.verify(message, signature)
        verify_duration = time.perf_counter() - start

        print(f"    Message: {message.decode()}")
        print(f"    Signing time: {sign_duration * 1000:.3f} ms")
        print(f"    Verification time: {verify_duration * 1000:.3f} ms")
        print(f"    Signature size: {len(signature)} components")
        print(f"    Signature valid: {is_valid}")
        print(f"    First signature component (hex): {signature[0][:8].hex()}")
        print()

    public_key = WinternitzScheme(PROD_CONFIG).public_key
    component_size = len(public_key[0])
    print("Public Key Information:")
    print(f"   Components: {len(public_key)}")
    print(f"   Each component size: {component_size} bytes")
    print(f"   Total public key size: {len(public_key) * component_size} bytes")
    print()
    print("Demo completed successfully!")


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="winternitz",
        description="Winternitz one-time signatures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    keygen = subparsers.add_parser("keygen", help="Generate and print a key pair")
    keygen.add_argument(
        "-w",
        type=int,
        default=PROD_CONFIG.W,
        help=f"Winternitz parameter (default: {PROD_CONFIG.W})",
    )

    demo = subparsers.add_parser("demo", help="Time signing and verification")
    demo.add_argument(
        "-w",
        type=int,
        action="append",
        dest="parameters",
        help="Winternitz parameter, can be repeated (default: 4, 8, 16)",
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    try:
        if args.command == "keygen":
            run_keygen(args.w)
        else:
            run_demo(args.parameters or DEMO_PARAMETERS)
    except WotsError as exc:
        logger.error("%s", exc.message)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
