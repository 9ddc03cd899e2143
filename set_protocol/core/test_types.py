from set_protocol.core.types import SetProtocolConfig, TxData

RANDOM_USER_0 = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
RANDOM_USER_1 = "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359"


def test_tx_data_accepts_web3_keys():
    tx = TxData.model_validate({"from": RANDOM_USER_0.lower(), "gasPrice": 5})
    assert tx.from_address == RANDOM_USER_0
    assert tx.gas_price == 5


def test_merge_layers_set_fields_only():
    defaults = TxData(from_address=RANDOM_USER_0, gas=100, gas_price=1)
    merged = defaults.merge({"from": RANDOM_USER_1, "gas": None})

    assert merged.from_address == RANDOM_USER_1
    assert merged.gas == 100
    assert merged.gas_price == 1
    # original untouched
    assert defaults.from_address == RANDOM_USER_0


def test_merge_with_nothing_returns_self():
    defaults = TxData(gas=100)
    assert defaults.merge(None) is defaults
    assert defaults.merge({}) is defaults


def test_to_params_uses_web3_keys():
    tx = TxData(from_address=RANDOM_USER_0, gas=21000, gas_price=2)
    assert tx.to_params() == {"from": RANDOM_USER_0, "gas": 21000, "gasPrice": 2}


def test_to_call_params_only_carries_sender():
    assert TxData(gas=1).to_call_params() == {}
    assert TxData(from_address=RANDOM_USER_0, gas=1).to_call_params() == {
        "from": RANDOM_USER_0
    }


def test_protocol_config_checksums_addresses():
    config = SetProtocolConfig(
        core_address=RANDOM_USER_0.lower(),
        transfer_proxy_address=RANDOM_USER_1.lower(),
        vault_address=RANDOM_USER_0.lower(),
    )
    assert config.core_address == RANDOM_USER_0
    assert config.transfer_proxy_address == RANDOM_USER_1
    assert config.set_token_factory_address is None
    assert config.tx_defaults == TxData()
