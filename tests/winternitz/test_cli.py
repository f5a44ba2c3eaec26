"""Tests for the command line entry point."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from winternitz.__main__ import ColoredFormatter, main
from winternitz.hash_chain import hash_chain


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """`main` installs a handler on the root logger; drop it after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_keygen_prints_every_chain_pair(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--no-color", "keygen", "-w", "4"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 65

    for line in lines:
        private_part, public_part = line.split(" Public key: ")
        seed = bytes.fromhex(private_part.removeprefix("Private key: "))
        assert len(seed) == 32
        assert hash_chain(seed, 15).hex() == public_part


def test_keygen_defaults_to_byte_sized_digits(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--no-color", "keygen"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 33


def test_keygen_rejects_invalid_parameter(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR):
        assert main(["--no-color", "keygen", "-w", "0"]) == 1
    assert "Invalid Winternitz parameter 0" in caplog.text


def test_demo_reports_each_parameter(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--no-color", "demo", "-w", "2", "-w", "4"]) == 0

    out = capsys.readouterr().out
    assert "Testing with Winternitz parameter w = 2" in out
    assert "Testing with Winternitz parameter w = 4" in out
    assert "Signature size: 129 components" in out
    assert "Signature size: 65 components" in out
    assert out.count("Signature valid: True") == 2
    assert "Components: 33" in out
    assert "Each component size: 32 bytes" in out
    assert "Total public key size: 1056 bytes" in out
    assert out.rstrip().endswith("Demo completed successfully!")


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        main([])


def test_colored_formatter_includes_level_and_logger() -> None:
    record = logging.LogRecord(
        name="winternitz.interface",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="refused %s",
        args=("sign",),
        exc_info=None,
    )
    formatted = ColoredFormatter().format(record)
    assert "WARNING" in formatted
    assert "winternitz.interface" in formatted
    assert formatted.endswith("refused sign")
    assert ColoredFormatter.YELLOW in formatted
