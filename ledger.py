# ledger.py
"""The ledger operations a launch needs, and their solana-py implementation."""

import logging
from typing import Dict, Optional, Protocol

from solana.rpc.api import Client
from solana.rpc.commitment import Confirmed
from solana.rpc.types import TxOpts
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from spl.token.client import Token
from spl.token.constants import TOKEN_PROGRAM_ID
from spl.token.instructions import AuthorityType, get_associated_token_address

from network import NetworkContext

logger = logging.getLogger(__name__)


class LedgerClient(Protocol):
    def connect(self) -> None: ...

    def get_balance(self, owner: Pubkey) -> int: ...

    def request_airdrop(self, owner: Pubkey, lamports: int) -> str: ...

    def create_mint(self, payer: Keypair, decimals: int) -> Pubkey: ...

    def get_or_create_holding_account(self, mint: Pubkey, owner: Keypair) -> Pubkey: ...

    def mint_to(self, mint: Pubkey, dest: Pubkey, authority: Keypair, amount: int) -> str: ...

    def revoke_mint_authority(self, mint: Pubkey, authority: Keypair) -> str: ...


class SolanaLedger:
    """LedgerClient over a solana-py RPC client and the SPL Token client.

    Every send waits for "confirmed" before returning.
    """

    def __init__(self, network: NetworkContext, timeout: int = 30):
        self.network = network
        self.timeout = timeout
        self._client: Optional[Client] = None
        self._tokens: Dict[Pubkey, Token] = {}

    @property
    def client(self) -> Client:
        if self._client is None:
            raise RuntimeError("SolanaLedger.connect() has not been called")
        return self._client

    def _confirmed_opts(self) -> TxOpts:
        return TxOpts(skip_confirmation=False, preflight_commitment=Confirmed)

    def _token(self, mint: Pubkey, payer: Keypair) -> Token:
        token = self._tokens.get(mint)
        if token is None:
            token = Token(self.client, mint, TOKEN_PROGRAM_ID, payer)
            self._tokens[mint] = token
        return token

    def connect(self) -> None:
        client = Client(self.network.rpc_url, commitment=Confirmed, timeout=self.timeout)
        if not client.is_connected():
            raise ConnectionError(f"RPC endpoint for {self.network.name} is not reachable")
        self._client = client
        logger.info(f"Connected to {self.network.name}")

    def get_balance(self, owner: Pubkey) -> int:
        return self.client.get_balance(owner, commitment=Confirmed).value

    def request_airdrop(self, owner: Pubkey, lamports: int) -> str:
        sig = self.client.request_airdrop(owner, lamports).value
        self.client.confirm_transaction(sig, commitment=Confirmed)
        return str(sig)

    def create_mint(self, payer: Keypair, decimals: int) -> Pubkey:
        token = Token.create_mint(
            conn=self.client,
            payer=payer,
            mint_authority=payer.pubkey(),
            decimals=decimals,
            program_id=TOKEN_PROGRAM_ID,
            freeze_authority=None,
            skip_confirmation=False,
        )
        self._tokens[token.pubkey] = token
        return token.pubkey

    def get_or_create_holding_account(self, mint: Pubkey, owner: Keypair) -> Pubkey:
        ata = get_associated_token_address(owner.pubkey(), mint)
        info = self.client.get_account_info(ata, commitment=Confirmed)
        if info.value is not None:
            logger.debug(f"Associated token account {ata} already exists")
            return ata
        return self._token(mint, owner).create_associated_token_account(
            owner=owner.pubkey(),
            skip_confirmation=False,
        )

    def mint_to(self, mint: Pubkey, dest: Pubkey, authority: Keypair, amount: int) -> str:
        resp = self._token(mint, authority).mint_to(
            dest=dest,
            mint_authority=authority,
            amount=amount,
            opts=self._confirmed_opts(),
        )
        return str(resp.value)

    def revoke_mint_authority(self, mint: Pubkey, authority: Keypair) -> str:
        resp = self._token(mint, authority).set_authority(
            account=mint,
            current_authority=authority,
            authority_type=AuthorityType.MINT_TOKENS,
            new_authority=None,
            opts=self._confirmed_opts(),
        )
        return str(resp.value)
