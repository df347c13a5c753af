"""Bridge for invoking the Node-based pa11y runner.

The API is intentionally small: ``audit`` audits a single URL with a given
option set and returns the JSON-compatible dict produced by the Node script
(``{"documentTitle": ..., "pageUrl": ..., "issues": [...]}``).
"""
from __future__ import annotations

import asyncio
import pathlib
import shutil
from typing import Any, Dict

import orjson

from .errors import AuditError

_NODE_DIR = pathlib.Path(__file__).resolve().parent / "node_runner"
PA11Y_RUNNER = _NODE_DIR / "runner.js"


async def audit(url: str, options: Dict[str, Any]) -> Dict[str, Any]:
    if not PA11Y_RUNNER.exists():
        raise AuditError(url, f"Runner script not found: {PA11Y_RUNNER}")
    node = shutil.which("node")
    if node is None:
        raise AuditError(url, "node executable not found on PATH")
    proc = await asyncio.create_subprocess_exec(
        node,
        str(PA11Y_RUNNER),
        url,
        stdin=asyncio.subprocess.PIPE,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(_NODE_DIR),
    )
    stdout, stderr = await proc.communicate(orjson.dumps(options))
    if proc.returncode != 0:
        raise AuditError(url, f"Node runner failed: {stderr.decode('utf-8', errors='replace')}")
    try:
        data = orjson.loads(stdout)
    except orjson.JSONDecodeError as e:
        raise AuditError(url, f"Failed reading JSON output: {e}") from e
    if not isinstance(data, dict):
        raise AuditError(url, "Runner returned unexpected payload")
    return data
