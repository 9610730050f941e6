"""Interactive console prompts: picking an option or a file from a list."""

from __future__ import annotations

import os
import sys


def _read_integer(prompt, stdin, stdout):
    """Prompts until the user enters a whole number, then returns it."""
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            raise EOFError("Input ended before a choice was made.")
        try:
            return int(line.strip())
        except ValueError:
            stdout.write("Illegal integer format. Try again.\n")


def make_selection_from(title, options, stdin=None, stdout=None):
    """Lists ``options`` under ``title`` and prompts until a valid index is chosen.

    Returns the index of the chosen option. Raises ValueError if there are
    no options and EOFError if input runs out.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    options = list(options)
    if not options:
        raise ValueError("Internal error: Requesting the user to pick an item from an empty list.")

    stdout.write(f"{title}\n")
    for index, option in enumerate(options):
        stdout.write(f"{index} {option}\n")

    while True:
        result = _read_integer("Your choice: ", stdin, stdout)
        if 0 <= result < len(options):
            return result
        stdout.write(f"Please enter a number between 0 and {len(options) - 1}\n")


def make_file_selection(suffix, directory="res/", stdin=None, stdout=None):
    """Asks the user to pick one of the files in ``directory`` ending in ``suffix``.

    Returns the chosen file's path, joined to the directory with a '/'.
    """
    listing_dir = directory if directory else "."
    options = [name for name in sorted(os.listdir(listing_dir)) if name.endswith(suffix)]

    effective = directory if directory else "."
    if not effective.endswith("/"):
        effective += "/"

    choice = make_selection_from(
        "Please choose a demo file from this list:", options, stdin, stdout
    )
    return effective + options[choice]