import json
import os
from pathlib import Path
from typing import Any

from loguru import logger

from set_protocol.core.constants.base import (
    DEFAULT_GAS_LIMIT,
    DEFAULT_GAS_PRICE,
    DEFAULT_RPC_URL,
)
from set_protocol.core.types import SetProtocolConfig, TxData

_CONFIG_ENV_KEYS = ("SET_PROTOCOL_CONFIG_PATH", "SET_PROTOCOL_CONFIG")
_DEFAULT_CONFIG_FILENAME = "config.json"
_RPC_URL_ENV_KEY = "SET_PROTOCOL_RPC_URL"
_ARTIFACTS_DIR_ENV_KEY = "SET_PROTOCOL_ARTIFACTS_DIR"


def _find_project_root(start: Path) -> Path | None:
    cur = start.resolve()
    for parent in [cur, *cur.parents]:
        if (parent / "pyproject.toml").exists():
            return parent
    return None


def _project_root() -> Path | None:
    return _find_project_root(Path.cwd()) or _find_project_root(Path(__file__).parent)


def resolve_config_path(path: str | Path | None = None) -> Path:
    if path is not None:
        return Path(path).expanduser()

    env_path = next(
        (os.getenv(k, "").strip() for k in _CONFIG_ENV_KEYS if os.getenv(k)), ""
    )
    if env_path:
        p = Path(env_path).expanduser()
        if p.is_absolute():
            return p
        root = _project_root()
        return (root / p) if root else p

    root = _project_root()
    return (root / _DEFAULT_CONFIG_FILENAME) if root else Path(_DEFAULT_CONFIG_FILENAME)


def load_config_json(
    path: str | Path | None = None, *, require_exists: bool = False
) -> dict[str, Any]:
    cfg_path = resolve_config_path(path)
    if not cfg_path.exists():
        if require_exists:
            raise FileNotFoundError(f"Config file not found: {cfg_path}")
        return {}
    try:
        return json.loads(cfg_path.read_text())
    except json.JSONDecodeError as exc:
        if require_exists:
            raise ValueError(f"Invalid JSON in config file {cfg_path}: {exc}") from exc
        logger.warning(f"Ignoring unreadable config file {cfg_path}: {exc}")
        return {}


CONFIG: dict[str, Any] = load_config_json()


def set_config(config: dict[str, Any]) -> None:
    """Replace the global CONFIG dict in-place.

    This allows code that imported CONFIG at module import time to see updates.
    """
    CONFIG.clear()
    CONFIG.update(config)


def load_config(
    path: str | Path | None = None, *, require_exists: bool = False
) -> None:
    """Load config from disk into the global CONFIG dict."""
    set_config(load_config_json(path, require_exists=require_exists))


def get_rpc_url() -> str:
    network = CONFIG.get("network", {})
    rpc_url = network.get("rpc_url")
    if rpc_url:
        return str(rpc_url).strip()
    return os.environ.get(_RPC_URL_ENV_KEY, DEFAULT_RPC_URL)


def is_poa_network() -> bool:
    return bool(CONFIG.get("network", {}).get("poa", False))


def get_contract_addresses() -> dict[str, str]:
    addresses = CONFIG.get("addresses", {})
    return {str(k): str(v) for k, v in addresses.items() if v}


def get_tx_defaults() -> TxData:
    raw = CONFIG.get("tx_defaults", {})
    defaults = TxData(gas=DEFAULT_GAS_LIMIT, gas_price=DEFAULT_GAS_PRICE).merge(raw)
    # An explicit null gas means "estimate per transaction".
    if "gas" in raw and raw["gas"] is None:
        defaults = defaults.model_copy(update={"gas": None})
    return defaults


def get_artifacts_dir() -> Path | None:
    value = CONFIG.get("artifacts_dir") or os.environ.get(_ARTIFACTS_DIR_ENV_KEY)
    if not value:
        return None
    p = Path(str(value)).expanduser()
    if p.is_absolute():
        return p
    root = _project_root()
    return (root / p) if root else p


def get_protocol_config() -> SetProtocolConfig:
    addresses = get_contract_addresses()
    missing = [
        key
        for key in ("core", "transfer_proxy", "vault")
        if not addresses.get(key)
    ]
    if missing:
        raise ValueError(
            f"Missing Set Protocol addresses in config: {', '.join(missing)}. "
            f"Set addresses.<name> in {resolve_config_path()}."
        )
    return SetProtocolConfig(
        core_address=addresses["core"],
        transfer_proxy_address=addresses["transfer_proxy"],
        vault_address=addresses["vault"],
        set_token_factory_address=addresses.get("set_token_factory"),
        tx_defaults=get_tx_defaults(),
    )
