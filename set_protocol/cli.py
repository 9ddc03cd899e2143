from __future__ import annotations

import asyncio
import json
import sys
from collections.abc import Awaitable, Callable
from typing import Any

import click
from loguru import logger

from set_protocol.client import SetProtocol
from set_protocol.core.config import get_rpc_url, load_config
from set_protocol.core.contracts import ContractNotFoundError
from set_protocol.core.utils.web3 import web3_from_config


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, default=str))


def _run(ctx: click.Context, fn: Callable[[SetProtocol], Awaitable[Any]]) -> None:
    rpc_url: str = ctx.obj["rpc_url"]

    async def _main() -> Any:
        async with web3_from_config(rpc_url) as web3:
            return await fn(SetProtocol.from_config(web3))

    try:
        result = asyncio.run(_main())
    except (ContractNotFoundError, ValueError) as exc:
        _echo_json({"ok": False, "error": str(exc)})
        ctx.exit(1)
    _echo_json({"ok": True, "result": result})


@click.group(name="set-protocol", help="Interact with deployed Set Protocol contracts.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to config.json (defaults to SET_PROTOCOL_CONFIG_PATH or ./config.json).",
)
@click.option("--rpc-url", envvar="SET_PROTOCOL_RPC_URL", default=None)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
@click.pass_context
def main(
    ctx: click.Context, config_path: str | None, rpc_url: str | None, log_level: str
) -> None:
    logger.remove()
    logger.add(sys.stderr, level=str(log_level).upper())

    load_config(config_path, require_exists=config_path is not None)

    ctx.ensure_object(dict)
    ctx.obj["rpc_url"] = rpc_url or get_rpc_url()


@main.command(name="natural-unit", help="Show the natural unit of a Set.")
@click.argument("set_address")
@click.pass_context
def natural_unit_cmd(ctx: click.Context, set_address: str) -> None:
    _run(ctx, lambda sp: sp.set_token.get_natural_unit(set_address))


@main.command(name="components", help="Show the components and units of a Set.")
@click.argument("set_address")
@click.pass_context
def components_cmd(ctx: click.Context, set_address: str) -> None:
    async def _components(sp: SetProtocol) -> dict[str, Any]:
        components = await sp.set_token.get_components(set_address)
        units = await sp.set_token.get_units(set_address)
        natural_unit = await sp.set_token.get_natural_unit(set_address)
        return {
            "natural_unit": natural_unit,
            "components": [
                {"address": c, "unit": u} for c, u in zip(components, units, strict=True)
            ],
        }

    _run(ctx, _components)


@main.command(name="vault-balance", help="Show a token balance held in the vault.")
@click.argument("token_address")
@click.argument("owner_address")
@click.pass_context
def vault_balance_cmd(ctx: click.Context, token_address: str, owner_address: str) -> None:
    _run(ctx, lambda sp: sp.vault.get_balance_in_vault(token_address, owner_address))


@main.command(name="authorized", help="List authorized addresses of a contract.")
@click.argument("contract_address")
@click.pass_context
def authorized_cmd(ctx: click.Context, contract_address: str) -> None:
    _run(ctx, lambda sp: sp.authorizable.get_authorized_addresses(contract_address))


@main.command(name="whitelist", help="List valid addresses of a whitelist.")
@click.argument("whitelist_address")
@click.pass_context
def whitelist_cmd(ctx: click.Context, whitelist_address: str) -> None:
    _run(ctx, lambda sp: sp.whitelist.valid_addresses(whitelist_address))


@main.command(name="issue", help="Issue QUANTITY (base units) of a Set.")
@click.argument("set_address")
@click.argument("quantity")
@click.option("--from", "user_address", required=True, help="Issuing account.")
@click.pass_context
def issue_cmd(ctx: click.Context, set_address: str, quantity: str, user_address: str) -> None:
    _run(ctx, lambda sp: sp.set_token.issue_set(set_address, quantity, user_address))


@main.command(name="redeem", help="Redeem QUANTITY (base units) of a Set.")
@click.argument("set_address")
@click.argument("quantity")
@click.option("--from", "user_address", required=True, help="Redeeming account.")
@click.pass_context
def redeem_cmd(ctx: click.Context, set_address: str, quantity: str, user_address: str) -> None:
    _run(ctx, lambda sp: sp.set_token.redeem_set(set_address, quantity, user_address))


if __name__ == "__main__":
    main()
