# settings.py

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from errors import ConfigurationError
from network import DEVNET, NetworkContext
from token_supply import DEFAULT_DECIMALS

# --- Load Secret Environment Variables ---
load_dotenv()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _get_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    network: str = DEVNET
    rpc_url: Optional[str] = None
    rpc_timeout: int = 30
    port: int = 8080
    wallet_path: str = "wallet.json"
    manifest_path: str = "manifest.json"
    secret_key: Optional[str] = None
    decimals: int = DEFAULT_DECIMALS
    behind_proxy: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        decimals = _get_int("TOKEN_DECIMALS", DEFAULT_DECIMALS)
        if decimals < 0:
            raise ConfigurationError("TOKEN_DECIMALS must not be negative")
        rpc_url = os.getenv("RPC_URL") or None
        network = os.getenv("TSOUL_NETWORK") or None
        if rpc_url and network is None:
            raise ConfigurationError("RPC_URL is set but TSOUL_NETWORK is not. Name the network it points at.")
        return cls(
            network=network or DEVNET,
            rpc_url=rpc_url,
            rpc_timeout=_get_int("RPC_TIMEOUT", 30),
            port=_get_int("PORT", 8080),
            wallet_path=os.getenv("WALLET_PATH", "wallet.json"),
            manifest_path=os.getenv("MANIFEST_PATH", "manifest.json"),
            secret_key=os.getenv("SECRET_KEY") or None,
            decimals=decimals,
            behind_proxy=_get_bool("BEHIND_PROXY"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def network_context(self) -> NetworkContext:
        return NetworkContext.resolve(self.network, self.rpc_url)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
