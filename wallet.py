# wallet.py
"""Signer identity: a JSON array of secret key bytes on disk, or a base58 string."""

import json
import os

import base58
from solders.keypair import Keypair


def load_keypair(path) -> Keypair:
    if not os.path.exists(path):
        raise FileNotFoundError(f"{path} missing. Run generate_wallet.py first.")
    with open(path, "r", encoding="utf-8") as fh:
        try:
            data = json.load(fh)
        except ValueError as exc:
            raise ValueError(f"{path} is not a valid key file: {exc}") from exc
    if (not isinstance(data, list) or len(data) != 64
            or not all(isinstance(b, int) and not isinstance(b, bool) and 0 <= b <= 255 for b in data)):
        raise ValueError(f"{path} must hold a JSON array of 64 secret key bytes.")
    return Keypair.from_bytes(bytes(data))


def keypair_from_base58(secret_key_string: str) -> Keypair:
    return Keypair.from_bytes(base58.b58decode(secret_key_string.strip()))


def save_keypair(path, keypair: Keypair) -> None:
    # O_EXCL: never clobber an existing key
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as fh:
        json.dump(list(bytes(keypair)), fh)
