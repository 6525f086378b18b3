"""Helpers for GitHub Actions inputs and workflow commands."""
import os
import sys
from typing import Mapping, Optional


def _input_env_name(name: str) -> str:
    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(name: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Read an action input the way the runner exposes it.

    Args:
        name: Input name as declared in the action metadata
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        The stripped input value, or an empty string
    """
    if environ is None:
        environ = os.environ
    return (environ.get(_input_env_name(name)) or "").strip()


def get_boolean_input(name: str, environ: Optional[Mapping[str, str]] = None) -> bool:
    """Only the exact string "true" enables a flag."""
    return get_input(name, environ=environ) == "true"


def escape_data(message: str) -> str:
    """Escape a workflow command payload."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def info(message: str) -> None:
    print(message, file=sys.stdout, flush=True)


def set_failed(message: str) -> int:
    """Emit an error annotation and return the failing exit code."""
    print(f"::error::{escape_data(message)}", file=sys.stdout, flush=True)
    return 1
