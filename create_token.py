# create_token.py (Twisted Soul launcher)

import sys

from errors import ConfigurationError, InfrastructureError, ValidationError
from issuance import FAILED, OK, issue
from ledger import SolanaLedger
from settings import Settings, configure_logging
from token_manifest import load_manifest, validate
from wallet import load_keypair


def fail(message):
    print(message, file=sys.stderr)
    sys.exit(1)


def print_summary(result):
    print("\n=== Twisted Soul Launch Complete ===")
    print(f"Network: {result.network}")
    print(f"Token:   {result.name} ({result.symbol})")
    print(f"Supply:  {result.supply} (raw units: {result.raw_supply})")
    print(f"Mint:    {result.mint_address}")
    print(f"ATA:     {result.token_account}")
    print(f"Mint TX: {result.mint_signature}")
    if result.renounce.status == OK:
        print(f"Renounce TX: {result.renounce.signature}")
    elif result.renounce.status == FAILED:
        print(f"Renounce FAILED: {result.renounce.reason}")
    else:
        print("Renounce: not requested")


def main(settings=None, ledger_factory=SolanaLedger):
    try:
        settings = settings or Settings.from_env()
        network = settings.network_context()
    except ConfigurationError as e:
        fail(f"Error: {e}")

    configure_logging(settings.log_level)

    try:
        signer = load_keypair(settings.wallet_path)
    except (OSError, ValueError) as e:
        fail(str(e))
    print(f"👑 Using creator wallet: {signer.pubkey()}")

    try:
        config = validate(load_manifest(settings.manifest_path))
    except FileNotFoundError:
        fail(f"{settings.manifest_path} missing.")
    except ValidationError as e:
        fail(f"Error: {e}")

    print(f"🚀 Launching {config.name} ({config.symbol}) on {network.name}...")
    ledger = ledger_factory(network, timeout=settings.rpc_timeout)

    try:
        result = issue(ledger, signer, config, network, decimals=settings.decimals)
    except ValidationError as e:
        fail(f"Error: {e}")
    except InfrastructureError as e:
        if e.partial:
            print(f"⚠️  Mint {e.mint_address} was created but the launch did not finish.", file=sys.stderr)
        fail(f"Error: {e}")

    print_summary(result)
    return result


if __name__ == "__main__":
    main()
