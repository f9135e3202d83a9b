"""Helper utilities for the Minecraft mod-pack updater."""
import sys
import time
from pathlib import Path
from typing import Callable, Union


MODS_FOLDER_NAME = "mods"


def format_file_size(bytes_size: float) -> str:
    """
    Format bytes to human-readable size.

    Args:
        bytes_size: Size in bytes

    Returns:
        Formatted string (e.g., '1.5 MB')
    """
    for unit in ['B', 'KB', 'MB', 'GB']:
        if bytes_size < 1024.0:
            return f"{bytes_size:.2f} {unit}"
        bytes_size /= 1024.0
    return f"{bytes_size:.2f} TB"


def is_mods_directory(path: Union[str, Path]) -> bool:
    """
    Check that a path names a launcher mods folder.

    Args:
        path: Candidate mods directory

    Returns:
        True if the last path component is 'mods' (any case)
    """
    return Path(path).name.lower() == MODS_FOLDER_NAME


def ask_yes_no(question: str, prompt: Callable[[str], str] = input) -> bool:
    """
    Ask a yes/no question on the terminal.

    Only answers starting with 'y' count as yes; end of input counts as no.
    """
    try:
        answer = prompt(question)
    except EOFError:
        return False
    return answer.strip().lower().startswith("y")


def ask_path(question: str, prompt: Callable[[str], str] = input) -> str:
    """Ask for a filesystem path, returning '' on end of input."""
    try:
        return prompt(question).strip()
    except EOFError:
        return ""


def countdown(
    seconds: int,
    sleep: Callable[[float], None] = time.sleep,
    stream=None,
) -> None:
    """Print a visible 'Exiting in N.N-1. ... 0' countdown, one step per second."""
    stream = stream or sys.stdout
    stream.write("Exiting in ")
    for remaining in range(seconds, 0, -1):
        stream.write(f"{remaining}.")
        stream.flush()
        sleep(1)
    stream.write("0\n")
    stream.flush()
