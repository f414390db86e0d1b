# funding.py

import logging

from solders.pubkey import Pubkey

from errors import ErrorKind, InfrastructureError
from ledger import LedgerClient
from network import NetworkContext

logger = logging.getLogger(__name__)

LAMPORTS_PER_SOL = 1_000_000_000
MIN_BALANCE_LAMPORTS = LAMPORTS_PER_SOL // 2
AIRDROP_LAMPORTS = LAMPORTS_PER_SOL


def ensure_funded(ledger: LedgerClient, owner: Pubkey, network: NetworkContext) -> int:
    """Top up a low devnet balance with a 1 SOL airdrop.

    Off devnet this only reports the balance. Returns the balance seen
    before any airdrop.
    """
    if not network.allows_airdrop:
        try:
            balance = ledger.get_balance(owner)
        except Exception as e:
            logger.warning(f"Network {network.name}. No airdrop. Could not read balance: {e}")
            return 0
        logger.info(f"Network {network.name}. No airdrop. Balance: {balance / LAMPORTS_PER_SOL:.4f} SOL")
        return balance

    try:
        balance = ledger.get_balance(owner)
        if balance >= MIN_BALANCE_LAMPORTS:
            logger.info(f"Wallet balance OK: {balance / LAMPORTS_PER_SOL:.3f} SOL")
            return balance

        logger.info("Requesting devnet airdrop...")
        sig = ledger.request_airdrop(owner, AIRDROP_LAMPORTS)
    except Exception as e:
        raise InfrastructureError(f"Devnet airdrop failed: {e}", ErrorKind.FUNDING_FAILED) from e

    logger.info(f"Devnet airdrop complete. TX: {sig}")
    return balance
