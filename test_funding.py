import pytest

from conftest import FakeLedger
from errors import ErrorKind, InfrastructureError
from funding import AIRDROP_LAMPORTS, MIN_BALANCE_LAMPORTS, ensure_funded
from network import NetworkContext


def test_devnet_funded_wallet_skips_airdrop(signer, devnet):
    ledger = FakeLedger(balance=MIN_BALANCE_LAMPORTS)
    assert ensure_funded(ledger, signer.pubkey(), devnet) == MIN_BALANCE_LAMPORTS
    assert ledger.calls == ["get_balance"]


def test_devnet_low_balance_requests_one_sol(signer, devnet):
    ledger = FakeLedger(balance=MIN_BALANCE_LAMPORTS - 1)
    ensure_funded(ledger, signer.pubkey(), devnet)
    assert ledger.calls == ["get_balance", "request_airdrop"]
    assert ledger.balance == MIN_BALANCE_LAMPORTS - 1 + AIRDROP_LAMPORTS


def test_devnet_airdrop_failure_is_fatal(signer, devnet):
    ledger = FakeLedger(balance=0, fail_on={"request_airdrop"})
    with pytest.raises(InfrastructureError) as exc:
        ensure_funded(ledger, signer.pubkey(), devnet)
    assert exc.value.kind == ErrorKind.FUNDING_FAILED
    assert ledger.calls == ["get_balance", "request_airdrop"]


def test_mainnet_never_airdrops(signer, mainnet):
    ledger = FakeLedger(balance=0)
    assert ensure_funded(ledger, signer.pubkey(), mainnet) == 0
    assert "request_airdrop" not in ledger.calls


def test_devnet_name_with_custom_rpc_never_airdrops(signer):
    network = NetworkContext.resolve("devnet", "https://api.mainnet-beta.solana.com")
    ledger = FakeLedger(balance=0)
    ensure_funded(ledger, signer.pubkey(), network)
    assert ledger.calls == ["get_balance"]


def test_mainnet_balance_failure_is_only_reported(signer, mainnet):
    ledger = FakeLedger(fail_on={"get_balance"})
    assert ensure_funded(ledger, signer.pubkey(), mainnet) == 0
