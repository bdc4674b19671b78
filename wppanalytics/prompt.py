"""Interactive prompt for the access token."""

from __future__ import annotations

import getpass
import sys
from typing import TextIO

PROMPT = "Enter Facebook Access Token: "


def prompt_for_token(stdin: TextIO | None = None, stderr: TextIO | None = None) -> str:
    """Ask for the access token on ``stderr`` and read it from ``stdin``.

    Input is hidden when ``stdin`` is a terminal. Otherwise one line is read;
    reaching end of input before a newline raises EOFError.
    """
    stdin = sys.stdin if stdin is None else stdin
    stderr = sys.stderr if stderr is None else stderr

    if stdin.isatty():
        return getpass.getpass(PROMPT, stream=stderr).strip()

    stderr.write(PROMPT)
    stderr.flush()
    line = stdin.readline()
    if not line.endswith("\n"):
        raise EOFError("end of input while reading access token")
    return line.strip()