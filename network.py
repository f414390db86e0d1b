# network.py

from dataclasses import dataclass
from typing import Optional

from errors import ConfigurationError

DEVNET = "devnet"
TESTNET = "testnet"
MAINNET = "mainnet-beta"

CLUSTER_URLS = {
    DEVNET: "https://api.devnet.solana.com",
    TESTNET: "https://api.testnet.solana.com",
    MAINNET: "https://api.mainnet-beta.solana.com",
}


@dataclass(frozen=True)
class NetworkContext:
    """Which cluster a launch talks to. Passed around instead of read from env."""
    name: str
    rpc_url: str

    @property
    def allows_airdrop(self) -> bool:
        # Only the public devnet endpoint; a custom RPC_URL may point anywhere
        return self.name == DEVNET and self.rpc_url == CLUSTER_URLS[DEVNET]

    @classmethod
    def resolve(cls, name: str = DEVNET, rpc_url: Optional[str] = None) -> "NetworkContext":
        name = (name or DEVNET).strip()
        if rpc_url:
            return cls(name=name, rpc_url=rpc_url)
        if name not in CLUSTER_URLS:
            raise ConfigurationError(
                f"Unknown network '{name}'. Use one of {', '.join(CLUSTER_URLS)} or set RPC_URL."
            )
        return cls(name=name, rpc_url=CLUSTER_URLS[name])
