from __future__ import annotations

import copy
import json
from pathlib import Path

import pytest

import set_protocol.core.config as config
from set_protocol.core.constants.base import (
    DEFAULT_GAS_LIMIT,
    DEFAULT_GAS_PRICE,
    DEFAULT_RPC_URL,
)

RANDOM_USER_0 = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
RANDOM_USER_1 = "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359"
RANDOM_USER_2 = "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB"


@pytest.fixture
def restore_global_config() -> None:
    original = copy.deepcopy(config.CONFIG)
    yield
    config.set_config(original)


def test_resolve_config_path_defaults_to_repo_root(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("SET_PROTOCOL_CONFIG_PATH", raising=False)
    monkeypatch.delenv("SET_PROTOCOL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)

    repo_root = Path(config.__file__).resolve().parents[2]
    assert config.resolve_config_path() == repo_root / "config.json"


def test_resolve_config_path_env_absolute(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    target = tmp_path / "custom.json"
    monkeypatch.setenv("SET_PROTOCOL_CONFIG_PATH", str(target))
    assert config.resolve_config_path() == target


def test_load_config_json_missing_file(tmp_path: Path) -> None:
    assert config.load_config_json(tmp_path / "nope.json") == {}
    with pytest.raises(FileNotFoundError):
        config.load_config_json(tmp_path / "nope.json", require_exists=True)


def test_load_config_json_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json")

    assert config.load_config_json(path) == {}
    with pytest.raises(ValueError, match="Invalid JSON"):
        config.load_config_json(path, require_exists=True)


def test_load_config_replaces_global_in_place(
    restore_global_config: None, tmp_path: Path
) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"network": {"rpc_url": "http://node:8545"}}))
    cfg = config.CONFIG

    config.load_config(path, require_exists=True)

    assert cfg is config.CONFIG
    assert config.get_rpc_url() == "http://node:8545"


def test_get_rpc_url_precedence(
    restore_global_config: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("SET_PROTOCOL_RPC_URL", raising=False)
    config.set_config({})
    assert config.get_rpc_url() == DEFAULT_RPC_URL

    monkeypatch.setenv("SET_PROTOCOL_RPC_URL", "http://env:8545")
    assert config.get_rpc_url() == "http://env:8545"

    config.set_config({"network": {"rpc_url": " http://cfg:8545 "}})
    assert config.get_rpc_url() == "http://cfg:8545"


def test_get_tx_defaults_merges_over_builtin(restore_global_config: None) -> None:
    config.set_config({"tx_defaults": {"from": RANDOM_USER_0.lower(), "gasPrice": 7}})

    defaults = config.get_tx_defaults()

    assert defaults.from_address == RANDOM_USER_0
    assert defaults.gas == DEFAULT_GAS_LIMIT
    assert defaults.gas_price == 7
    assert DEFAULT_GAS_PRICE != 7


def test_get_tx_defaults_null_gas_leaves_gas_unset(
    restore_global_config: None,
) -> None:
    config.set_config({"tx_defaults": {"gas": None}})

    defaults = config.get_tx_defaults()

    assert defaults.gas is None
    assert defaults.gas_price == DEFAULT_GAS_PRICE


def test_get_protocol_config_reports_missing_addresses(
    restore_global_config: None,
) -> None:
    config.set_config({"addresses": {"core": RANDOM_USER_0}})
    with pytest.raises(ValueError, match="transfer_proxy, vault"):
        config.get_protocol_config()


def test_get_protocol_config(restore_global_config: None) -> None:
    config.set_config(
        {
            "addresses": {
                "core": RANDOM_USER_0.lower(),
                "transfer_proxy": RANDOM_USER_1,
                "vault": RANDOM_USER_2,
            },
            "tx_defaults": {"from": RANDOM_USER_0},
        }
    )

    protocol = config.get_protocol_config()

    assert protocol.core_address == RANDOM_USER_0
    assert protocol.vault_address == RANDOM_USER_2
    assert protocol.set_token_factory_address is None
    assert protocol.tx_defaults.from_address == RANDOM_USER_0


def test_get_artifacts_dir_relative_to_repo_root(
    restore_global_config: None, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("SET_PROTOCOL_ARTIFACTS_DIR", raising=False)
    monkeypatch.chdir(tmp_path)
    config.set_config({})
    assert config.get_artifacts_dir() is None

    config.set_config({"artifacts_dir": "build/contracts"})
    repo_root = Path(config.__file__).resolve().parents[2]
    assert config.get_artifacts_dir() == repo_root / "build/contracts"
