# token_manifest.py

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, List

from errors import ErrorKind, ValidationError
from token_supply import to_raw_units

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "symbol", "supply")

# wire name -> attribute name
BINDING_NAMES = {
    "renounceMint": "renounce_mint",
    "lockLiquidity": "lock_liquidity",
    "noGodWallet": "no_god_wallet",
    "openSource": "open_source",
}


@dataclass(frozen=True)
class BindingSet:
    renounce_mint: bool = False
    lock_liquidity: bool = False
    no_god_wallet: bool = False
    open_source: bool = False

    def to_dict(self) -> Dict[str, bool]:
        return {wire: getattr(self, attr) for wire, attr in BINDING_NAMES.items()}

    def advisories(self) -> List[str]:
        """Log lines for the bindings this launcher only records."""
        return [
            "LockLiquidity: TRUE (LP lock to be enforced in DEX layer)."
            if self.lock_liquidity else "LockLiquidity: FALSE (LP can be pulled).",
            "NoGodWallet: TRUE (future logic avoids god wallets)."
            if self.no_god_wallet else "NoGodWallet: FALSE (admin wallet allowed).",
            "OpenSource: TRUE (code transparency expected)."
            if self.open_source else "OpenSource: FALSE (closed-source, trust hit).",
        ]


@dataclass(frozen=True)
class TokenConfig:
    name: str
    symbol: str
    supply: str
    bindings: BindingSet = field(default_factory=BindingSet)


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _parse_bindings(raw) -> BindingSet:
    if raw is None:
        return BindingSet()
    if not isinstance(raw, dict):
        raise ValidationError("bindings must be an object.", ErrorKind.INVALID_BINDINGS)

    values = {}
    for key, value in raw.items():
        attr = BINDING_NAMES.get(key)
        if attr is None:
            logger.debug(f"Ignoring unknown binding: {key}")
            continue
        if not isinstance(value, bool):
            raise ValidationError(f"bindings.{key} must be true or false.", ErrorKind.INVALID_BINDINGS)
        values[attr] = value
    return BindingSet(**values)


def validate(raw_config) -> TokenConfig:
    """Turn a manifest / request body into a TokenConfig.

    Raises ValidationError. Nothing here talks to the network.
    """
    if not isinstance(raw_config, dict):
        raw_config = {}
    token = raw_config.get("token")
    if not isinstance(token, dict):
        token = {}

    missing = [f"token.{name}" for name in REQUIRED_FIELDS if _is_blank(token.get(name))]
    if missing:
        raise ValidationError(
            f"Missing required fields: {', '.join(missing)}",
            ErrorKind.MISSING_FIELDS,
            missing_fields=missing,
        )

    for name in ("name", "symbol"):
        if not isinstance(token[name], str):
            raise ValidationError(f"token.{name} must be a string.", ErrorKind.INVALID_FIELD)

    supply = token["supply"]
    # Same precondition the converter enforces; decimals don't matter here
    to_raw_units(supply, 0)

    return TokenConfig(
        name=token["name"].strip(),
        symbol=token["symbol"].strip(),
        supply=supply,
        bindings=_parse_bindings(raw_config.get("bindings")),
    )


def load_manifest(path) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as fh:
            return json.load(fh)
    except FileNotFoundError:
        raise
    except (ValueError, OSError) as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise ValidationError(f"{path} is not a readable JSON manifest: {exc}", ErrorKind.MALFORMED_MANIFEST) from exc
