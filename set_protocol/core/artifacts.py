"""
Artifact loader - reads Truffle build output (``build/contracts/<Name>.json``).

ABIs are shipped as Python constants; artifacts are only needed for the
deployment bytecode and for per-network deployed addresses.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from set_protocol.core.config import get_artifacts_dir
from set_protocol.core.constants.base import NULL_BYTECODE, ZERO_ADDRESS


def _resolve_artifacts_dir(artifacts_dir: str | Path | None) -> Path:
    if artifacts_dir is not None:
        return Path(artifacts_dir).expanduser()
    configured = get_artifacts_dir()
    if configured is None:
        raise FileNotFoundError(
            "No artifacts directory configured. Set artifacts_dir in config.json "
            "or SET_PROTOCOL_ARTIFACTS_DIR."
        )
    return configured


@lru_cache(maxsize=32)
def _read_artifact(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_artifact(
    contract_name: str, artifacts_dir: str | Path | None = None
) -> dict[str, Any]:
    """
    Load the Truffle artifact for a contract.

    Raises:
        FileNotFoundError: If the artifact file does not exist
    """
    path = _resolve_artifacts_dir(artifacts_dir) / f"{contract_name}.json"
    if not path.exists():
        raise FileNotFoundError(f"Artifact not found: {path}")
    return _read_artifact(path.resolve())


def load_bytecode(contract_name: str, artifacts_dir: str | Path | None = None) -> str:
    artifact = load_artifact(contract_name, artifacts_dir)
    bytecode = artifact.get("bytecode") or ""
    if isinstance(bytecode, dict):
        bytecode = bytecode.get("object") or ""
    bytecode = str(bytecode)
    if bytecode and not bytecode.startswith("0x"):
        bytecode = "0x" + bytecode
    if not bytecode or bytecode == NULL_BYTECODE:
        raise ValueError(f"No bytecode in artifact for {contract_name}")
    return bytecode


def load_network_address(
    contract_name: str, network_id: str, artifacts_dir: str | Path | None = None
) -> str | None:
    networks = load_artifact(contract_name, artifacts_dir).get("networks") or {}
    entry = networks.get(str(network_id)) or {}
    address = entry.get("address")
    if not address or address == ZERO_ADDRESS:
        return None
    return str(address)
