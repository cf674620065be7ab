from __future__ import annotations

import logging

from ecgen import cli


def test_cli_verbose_and_quiet_switch_levels(caplog) -> None:
    # verbose enables debug
    with caplog.at_level(logging.DEBUG, logger="ecgen"):
        cli.main(["--verbose", "gray", "3", "--count"])
    assert any("Debug logging enabled" in r.message for r in caplog.records)
    assert any("BRGC session: n=3" in r.message for r in caplog.records)

    # quiet suppresses info
    caplog.clear()
    with caplog.at_level(logging.INFO, logger="ecgen"):
        cli.main(["--quiet", "gray", "3", "--count"])
    assert not any(r.levelno == logging.INFO for r in caplog.records)


def test_cli_truncation_warns(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="ecgen"):
        cli.main(["--quiet", "gray", "4", "--limit", "3"])
    assert any("Output truncated to 3 of 16 states" in r.message for r in caplog.records)
