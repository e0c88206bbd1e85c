"""Utility helpers shared across CLI commands."""

from __future__ import annotations

import json
from typing import Mapping

import typer


def emit_error(message: str, code: str, *, details: Mapping[str, object] | None = None) -> None:
    """Print a structured error payload to stderr."""

    payload: dict[str, object] = {"code": code, "message": message}
    if details:
        payload["details"] = dict(details)
    typer.echo(json.dumps(payload, ensure_ascii=False, default=str), err=True)
