import hashlib
import logging

from .cbor import (
    MAJOR_ARRAY,
    MAJOR_MAP,
    array_items,
    check_single_item,
    from_hex,
    load_bytes,
    load_uint,
    major_type,
    map_items,
)
from .exceptions import DecodeError
from .models import (
    DecodedDatum,
    DecodedInput,
    DecodedRedeemer,
    DecodedTransaction,
    DecodedWitnessSet,
    ExUnits,
)
from .plutus import plutus_to_json

LOGGER = logging.getLogger(__name__)

# transaction body keys
BODY_INPUTS = 0
BODY_OUTPUTS = 1
BODY_FEE = 2
BODY_TTL = 3
BODY_VALIDITY_START = 8
BODY_SCRIPT_DATA_HASH = 11
BODY_REQUIRED_SIGNERS = 14

# witness set keys
WITNESS_VKEYS = 0
WITNESS_NATIVE_SCRIPTS = 1
WITNESS_BOOTSTRAP = 2
WITNESS_PLUTUS_V1 = 3
WITNESS_PLUTUS_DATA = 4
WITNESS_REDEEMERS = 5
WITNESS_PLUTUS_V2 = 6
WITNESS_PLUTUS_V3 = 7

# script key -> language prefix used when hashing
PLUTUS_SCRIPT_LANGUAGES = (
    (WITNESS_PLUTUS_V1, 1),
    (WITNESS_PLUTUS_V2, 2),
    (WITNESS_PLUTUS_V3, 3),
)

REDEEMER_TAGS = {
    0: "Spend",
    1: "Mint",
    2: "Cert",
    3: "Reward",
    4: "Vote",
    5: "Propose",
}

SCRIPT_HASH_SIZE = 28


def _keyed(raw, what):
    fields = {}
    for key_raw, value_raw in map_items(raw):
        fields[load_uint(key_raw, f"{what} key")] = value_raw
    return fields


def _optional_count(fields, key):
    if key not in fields:
        return None
    return len(array_items(fields[key])) or None


def _decode_input(raw):
    parts = array_items(raw)
    if len(parts) != 2:
        raise DecodeError(f"Transaction input must have 2 fields, got {len(parts)}")
    return DecodedInput(
        tx_hash=load_bytes(parts[0], "input transaction id").hex(),
        index=load_uint(parts[1], "input index"),
    )


def _decode_redeemer(tag_raw, index_raw, data_raw, ex_units_raw):
    tag = load_uint(tag_raw, "redeemer tag")
    if tag not in REDEEMER_TAGS:
        raise DecodeError(f"Unknown redeemer tag {tag}")
    ex_units = array_items(ex_units_raw)
    if len(ex_units) != 2:
        raise DecodeError("Redeemer execution units must be [mem, steps]")
    return DecodedRedeemer(
        tag=REDEEMER_TAGS[tag],
        index=str(load_uint(index_raw, "redeemer index")),
        data_hex=data_raw.hex(),
        data_json=plutus_to_json(data_raw),
        ex_units=ExUnits(
            mem=str(load_uint(ex_units[0], "execution memory")),
            steps=str(load_uint(ex_units[1], "execution steps")),
        ),
    )


def _decode_redeemers(raw):
    """Both the legacy array layout and the keyed map layout."""
    redeemers = []
    kind = major_type(raw)
    if kind == MAJOR_MAP:
        for key_raw, value_raw in map_items(raw):
            key = array_items(key_raw)
            value = array_items(value_raw)
            if len(key) != 2 or len(value) != 2:
                raise DecodeError("Redeemer map entry must be [tag, index] => [data, ex_units]")
            redeemers.append(_decode_redeemer(key[0], key[1], value[0], value[1]))
    elif kind == MAJOR_ARRAY:
        for item in array_items(raw):
            parts = array_items(item)
            if len(parts) != 4:
                raise DecodeError(f"Redeemer must have 4 fields, got {len(parts)}")
            redeemers.append(_decode_redeemer(*parts))
    else:
        raise DecodeError(f"Redeemers must be an array or a map, found CBOR major type {kind}")
    return redeemers


def plutus_script_hash(script, language):
    return hashlib.blake2b(
        bytes([language]) + script, digest_size=SCRIPT_HASH_SIZE
    ).hexdigest()


def _witness_set_from_raw(raw):
    fields = _keyed(raw, "witness set")

    plutus_data = [
        DecodedDatum(index=i, hex=item.hex(), json_value=plutus_to_json(item))
        for i, item in enumerate(array_items(fields[WITNESS_PLUTUS_DATA]))
    ] if WITNESS_PLUTUS_DATA in fields else []

    redeemers = (
        _decode_redeemers(fields[WITNESS_REDEEMERS])
        if WITNESS_REDEEMERS in fields else []
    )

    script_hashes = []
    for key, language in PLUTUS_SCRIPT_LANGUAGES:
        if key not in fields:
            continue
        for item in array_items(fields[key]):
            script_hashes.append(
                plutus_script_hash(load_bytes(item, "plutus script"), language)
            )

    return DecodedWitnessSet(
        plutus_data=plutus_data or None,
        redeemers=redeemers or None,
        plutus_script_hashes=script_hashes or None,
        native_script_count=_optional_count(fields, WITNESS_NATIVE_SCRIPTS),
        vkey_count=_optional_count(fields, WITNESS_VKEYS),
        bootstrap_count=_optional_count(fields, WITNESS_BOOTSTRAP),
    )


def _optional_str(fields, key, what):
    if key not in fields:
        return None
    return str(load_uint(fields[key], what))


def decode_witness_set(witness_hex):
    """
    Decode a witness set from hex.

    Raises DecodeError on malformed input.
    """
    raw = check_single_item(from_hex(witness_hex))
    witness_set = _witness_set_from_raw(raw)
    LOGGER.debug(
        f"Decoded witness set: {len(witness_set.plutus_data or ())} datums, "
        f"{len(witness_set.redeemers or ())} redeemers"
    )
    return witness_set


def decode_transaction(tx_hex):
    """
    Decode a full transaction from hex.

    The transaction is ``[body, witness_set, is_valid, auxiliary_data]``
    (pre-Alonzo transactions have no ``is_valid``). Input order is kept as
    encoded. Raises DecodeError on malformed input.
    """
    raw = check_single_item(from_hex(tx_hex))
    parts = array_items(raw)
    if len(parts) not in (3, 4):
        raise DecodeError(f"Transaction must have 3 or 4 parts, got {len(parts)}")
    body = _keyed(parts[0], "transaction body")

    for key in (BODY_INPUTS, BODY_OUTPUTS, BODY_FEE):
        if key not in body:
            raise DecodeError(f"Transaction body is missing required key {key}")

    inputs = [_decode_input(item) for item in array_items(body[BODY_INPUTS])]

    script_data_hash = None
    if BODY_SCRIPT_DATA_HASH in body:
        script_data_hash = load_bytes(body[BODY_SCRIPT_DATA_HASH], "script data hash").hex()

    required_signers = []
    if BODY_REQUIRED_SIGNERS in body:
        required_signers = [
            load_bytes(item, "required signer").hex()
            for item in array_items(body[BODY_REQUIRED_SIGNERS])
        ]

    tx = DecodedTransaction(
        script_data_hash=script_data_hash,
        input_count=len(inputs),
        output_count=len(array_items(body[BODY_OUTPUTS])),
        fee=str(load_uint(body[BODY_FEE], "fee")),
        ttl=_optional_str(body, BODY_TTL, "ttl"),
        validity_start=_optional_str(body, BODY_VALIDITY_START, "validity start"),
        required_signers=required_signers,
        witness_set=_witness_set_from_raw(parts[1]),
        inputs=inputs,
    )
    LOGGER.debug(
        f"Decoded transaction: {tx.input_count} inputs, {tx.output_count} outputs, "
        f"fee {tx.fee}"
    )
    return tx


def decode_plutus_data(datum_hex):
    """Decode plutus data (datum or redeemer payload) from hex to detailed-schema JSON."""
    return plutus_to_json(check_single_item(from_hex(datum_hex)))
