import pytest
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from network import NetworkContext


class FakeLedger:
    """In-memory LedgerClient. `fail_on` names the methods that should raise."""

    def __init__(self, balance=2_000_000_000, fail_on=()):
        self.balance = balance
        self.fail_on = set(fail_on)
        self.calls = []
        self.mint = Pubkey.new_unique()
        self.token_account = Pubkey.new_unique()
        self.minted = None

    def _call(self, name, *args):
        self.calls.append(name)
        if name in self.fail_on:
            raise RuntimeError(f"{name} exploded")

    def connect(self):
        self._call("connect")

    def get_balance(self, owner):
        self._call("get_balance", owner)
        return self.balance

    def request_airdrop(self, owner, lamports):
        self._call("request_airdrop", owner, lamports)
        self.balance += lamports
        return "airdrop-sig"

    def create_mint(self, payer, decimals):
        self._call("create_mint", payer, decimals)
        return self.mint

    def get_or_create_holding_account(self, mint, owner):
        self._call("get_or_create_holding_account", mint, owner)
        return self.token_account

    def mint_to(self, mint, dest, authority, amount):
        self._call("mint_to", mint, dest, authority, amount)
        self.minted = amount
        return "mint-sig"

    def revoke_mint_authority(self, mint, authority):
        self._call("revoke_mint_authority", mint, authority)
        return "renounce-sig"


@pytest.fixture
def signer():
    return Keypair()


@pytest.fixture
def devnet():
    return NetworkContext.resolve("devnet")


@pytest.fixture
def mainnet():
    return NetworkContext.resolve("mainnet-beta")


@pytest.fixture
def ledger():
    return FakeLedger()
