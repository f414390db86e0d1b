import json

import pytest

from errors import ErrorKind, ValidationError
from token_manifest import BindingSet, TokenConfig, load_manifest, validate


def test_empty_config_names_all_missing_fields():
    with pytest.raises(ValidationError) as exc:
        validate({})
    assert exc.value.kind == ErrorKind.MISSING_FIELDS
    assert exc.value.missing_fields == ["token.name", "token.symbol", "token.supply"]
    assert str(exc.value) == "Missing required fields: token.name, token.symbol, token.supply"


@pytest.mark.parametrize("raw", [None, [], "token", {"token": "SOUL"}])
def test_non_mapping_input_is_missing_everything(raw):
    with pytest.raises(ValidationError) as exc:
        validate(raw)
    assert exc.value.missing_fields == ["token.name", "token.symbol", "token.supply"]


def test_only_missing_fields_are_named():
    with pytest.raises(ValidationError) as exc:
        validate({"token": {"name": "Soul", "symbol": "  ", "supply": "10"}})
    assert str(exc.value) == "Missing required fields: token.symbol"


def test_minimal_manifest_defaults_bindings():
    config = validate({"token": {"name": "Soul", "symbol": "SOUL", "supply": "1000"}})
    assert config == TokenConfig(name="Soul", symbol="SOUL", supply="1000", bindings=BindingSet())
    assert config.bindings.to_dict() == {
        "renounceMint": False,
        "lockLiquidity": False,
        "noGodWallet": False,
        "openSource": False,
    }


def test_bindings_are_parsed():
    config = validate({
        "token": {"name": " Soul ", "symbol": "SOUL", "supply": "1000"},
        "bindings": {"renounceMint": True, "openSource": True, "somethingElse": True},
    })
    assert config.name == "Soul"
    assert config.bindings == BindingSet(renounce_mint=True, open_source=True)


def test_malformed_supply_uses_converter_error():
    with pytest.raises(ValidationError) as exc:
        validate({"token": {"name": "Soul", "symbol": "SOUL", "supply": "12.5"}})
    assert exc.value.kind == ErrorKind.MALFORMED_SUPPLY


def test_numeric_supply_is_not_coerced():
    with pytest.raises(ValidationError) as exc:
        validate({"token": {"name": "Soul", "symbol": "SOUL", "supply": 1000}})
    assert exc.value.kind == ErrorKind.MALFORMED_SUPPLY


@pytest.mark.parametrize("bindings", [["renounceMint"], {"renounceMint": "yes"}])
def test_invalid_bindings(bindings):
    with pytest.raises(ValidationError) as exc:
        validate({"token": {"name": "Soul", "symbol": "SOUL", "supply": "1"}, "bindings": bindings})
    assert exc.value.kind == ErrorKind.INVALID_BINDINGS


def test_advisories_follow_flags():
    lines = BindingSet(lock_liquidity=True).advisories()
    assert lines[0].startswith("LockLiquidity: TRUE")
    assert lines[1].startswith("NoGodWallet: FALSE")
    assert lines[2].startswith("OpenSource: FALSE")


def test_load_manifest(tmp_path):
    path = tmp_path / "manifest.json"
    path.write_text(json.dumps({"token": {"name": "Soul", "symbol": "SOUL", "supply": "1"}}))
    assert load_manifest(path)["token"]["symbol"] == "SOUL"


def test_load_manifest_bad_json(tmp_path):
    path = tmp_path / "manifest.json"
    path.write_text("{not json")
    with pytest.raises(ValidationError) as exc:
        load_manifest(path)
    assert exc.value.kind == ErrorKind.MALFORMED_MANIFEST


def test_load_manifest_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_manifest(tmp_path / "nope.json")


@pytest.mark.parametrize("field, value", [("name", {}), ("name", False), ("symbol", 42), ("symbol", ["SOUL"])])
def test_non_string_name_or_symbol_rejected(field, value):
    token = {"name": "Soul", "symbol": "SOUL", "supply": "1000", field: value}
    with pytest.raises(ValidationError) as exc:
        validate({"token": token})
    assert exc.value.kind == ErrorKind.INVALID_FIELD
    assert str(exc.value) == f"token.{field} must be a string."


def test_load_manifest_not_utf8(tmp_path):
    path = tmp_path / "manifest.json"
    path.write_bytes(b"\xff\xfe\x00")
    with pytest.raises(ValidationError) as exc:
        load_manifest(path)
    assert exc.value.kind == ErrorKind.MALFORMED_MANIFEST
