# issuance.py
"""Drives one token launch: connect, fund, create mint, token account, mint, renounce.

Each step needs what the previous one produced, so they run strictly in
order. Nothing is retried and nothing is deduplicated: calling issue()
twice with the same config creates two unrelated tokens, and a failure
after the mint exists leaves that mint on chain.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from solders.keypair import Keypair

from errors import ErrorKind, InfrastructureError
from funding import ensure_funded
from ledger import LedgerClient
from network import NetworkContext
from token_manifest import BindingSet, TokenConfig
from token_supply import DEFAULT_DECIMALS, check_mintable, to_raw_units

logger = logging.getLogger(__name__)

SKIPPED = "skipped"
OK = "ok"
FAILED = "failed"


@dataclass(frozen=True)
class RenounceOutcome:
    status: str
    signature: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def skipped(cls) -> "RenounceOutcome":
        return cls(SKIPPED)

    @classmethod
    def ok(cls, signature: str) -> "RenounceOutcome":
        return cls(OK, signature=signature)

    @classmethod
    def failed(cls, reason: str) -> "RenounceOutcome":
        return cls(FAILED, reason=reason)


@dataclass(frozen=True)
class IssuanceResult:
    network: str
    name: str
    symbol: str
    supply: str
    decimals: int
    raw_supply: int
    mint_address: str
    token_account: str
    mint_signature: str
    renounce: RenounceOutcome = field(default_factory=RenounceOutcome.skipped)
    bindings: BindingSet = field(default_factory=BindingSet)

    @property
    def renounce_signature(self) -> Optional[str]:
        return self.renounce.signature

    @property
    def renounce_error(self) -> Optional[str]:
        return self.renounce.reason

    def to_dict(self) -> dict:
        return {
            "network": self.network,
            "name": self.name,
            "symbol": self.symbol,
            "supply": self.supply,
            "decimals": self.decimals,
            # as a string so JSON clients keep every digit
            "rawSupply": str(self.raw_supply),
            "mintAddress": self.mint_address,
            "tokenAccount": self.token_account,
            "mintSignature": self.mint_signature,
            "renounceSignature": self.renounce_signature,
            "renounceError": self.renounce_error,
            "bindings": self.bindings.to_dict(),
        }


def _renounce(ledger: LedgerClient, mint, signer: Keypair) -> RenounceOutcome:
    logger.info("RenounceMint: TRUE - attempting to remove mint authority...")
    try:
        sig = ledger.revoke_mint_authority(mint, signer)
    except Exception as e:
        logger.warning(f"RenounceMint: FAILED to renounce authority: {e}")
        return RenounceOutcome.failed(str(e) or e.__class__.__name__)
    logger.info(f"Mint authority renounced. TX: {sig}")
    return RenounceOutcome.ok(sig)


def issue(ledger: LedgerClient, signer: Keypair, config: TokenConfig, network: NetworkContext,
          decimals: int = DEFAULT_DECIMALS) -> IssuanceResult:
    raw_supply = check_mintable(to_raw_units(config.supply, decimals))

    logger.info(f"Token: {config.name} ({config.symbol})")
    logger.info(f"Supply: {config.supply}")
    logger.info(f"Bindings: {config.bindings.to_dict()}")
    logger.info(f"Converted supply (raw units): {raw_supply}")

    # Step 1: connect
    try:
        ledger.connect()
    except Exception as e:
        raise InfrastructureError(f"Could not connect to {network.name}: {e}", ErrorKind.CONNECTION) from e

    owner = signer.pubkey()
    logger.info(f"Wallet: {owner}")

    # Step 2: make sure the payer can cover rent and fees
    ensure_funded(ledger, owner, network)

    # Step 3: create the mint, signer is payer and mint authority, no freeze authority
    logger.info("Creating SPL mint...")
    try:
        mint = ledger.create_mint(signer, decimals)
    except Exception as e:
        raise InfrastructureError(f"Mint creation failed: {e}", ErrorKind.MINT_CREATION_FAILED) from e
    logger.info(f"Mint Address: {mint}")

    # Step 4: the signer's associated token account for the new mint
    logger.info("Creating associated token account...")
    try:
        token_account = ledger.get_or_create_holding_account(mint, signer)
    except Exception as e:
        raise InfrastructureError(
            f"Token account creation failed for mint {mint}: {e}",
            ErrorKind.ACCOUNT_CREATION_FAILED,
            mint_address=str(mint),
        ) from e
    logger.info(f"Token Account: {token_account}")

    # Step 5: mint the whole supply
    logger.info(f"Minting {config.supply} tokens to wallet...")
    try:
        mint_sig = ledger.mint_to(mint, token_account, signer, raw_supply)
    except Exception as e:
        raise InfrastructureError(
            f"Minting supply failed for mint {mint}: {e}",
            ErrorKind.MINT_FAILED,
            mint_address=str(mint),
            token_account=str(token_account),
        ) from e
    logger.info(f"Minted. TX: {mint_sig}")

    # Step 6: optional, never fatal
    if config.bindings.renounce_mint:
        renounce = _renounce(ledger, mint, signer)
    else:
        logger.info("RenounceMint: FALSE - mint authority NOT removed.")
        renounce = RenounceOutcome.skipped()

    for line in config.bindings.advisories():
        logger.info(line)

    return IssuanceResult(
        network=network.name,
        name=config.name,
        symbol=config.symbol,
        supply=config.supply,
        decimals=decimals,
        raw_supply=raw_supply,
        mint_address=str(mint),
        token_account=str(token_account),
        mint_signature=mint_sig,
        renounce=renounce,
        bindings=config.bindings,
    )
