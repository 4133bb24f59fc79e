"""Plutus data rendered in the detailed JSON schema.

    {"constructor": 0, "fields": [...]}
    {"map": [{"k": ..., "v": ...}]}
    {"list": [...]}
    {"int": 42}
    {"bytes": "deadbeef"}
"""
from .cbor import (
    MAJOR_ARRAY,
    MAJOR_BYTES,
    MAJOR_MAP,
    MAJOR_NEGINT,
    MAJOR_TAG,
    MAJOR_UINT,
    array_items,
    load_bytes,
    load_uint,
    loads,
    map_items,
    read_head,
)
from .exceptions import DecodeError
from .settings import settings

# compact constructor tags: 121..127 -> 0..6, 1280..1400 -> 7..127
COMPACT_TAG_BASE = 121
COMPACT_TAG_LAST = 127
EXTENDED_TAG_BASE = 1280
EXTENDED_TAG_LAST = 1400
GENERAL_CONSTR_TAG = 102
BIGNUM_TAGS = (2, 3)


def plutus_to_json(raw, depth=0):
    if depth > settings.decode_max_depth:
        raise DecodeError(
            f"Plutus data nesting deeper than {settings.decode_max_depth} levels"
        )
    major, arg, pos = read_head(raw, 0)

    if major in (MAJOR_UINT, MAJOR_NEGINT):
        return {"int": loads(raw)}
    if major == MAJOR_BYTES:
        return {"bytes": load_bytes(raw, "plutus bytes").hex()}
    if major == MAJOR_ARRAY:
        return {"list": [plutus_to_json(item, depth + 1) for item in array_items(raw)]}
    if major == MAJOR_MAP:
        return {
            "map": [
                {"k": plutus_to_json(k, depth + 1), "v": plutus_to_json(v, depth + 1)}
                for k, v in map_items(raw)
            ]
        }
    if major == MAJOR_TAG:
        return _tagged_to_json(arg, raw, raw[pos:], depth)

    raise DecodeError(f"CBOR major type {major} is not valid Plutus data")


def _tagged_to_json(tag, raw, content, depth):
    if COMPACT_TAG_BASE <= tag <= COMPACT_TAG_LAST:
        return _constr(tag - COMPACT_TAG_BASE, content, depth)
    if EXTENDED_TAG_BASE <= tag <= EXTENDED_TAG_LAST:
        return _constr(tag - EXTENDED_TAG_BASE + 7, content, depth)
    if tag == GENERAL_CONSTR_TAG:
        parts = array_items(content)
        if len(parts) != 2:
            raise DecodeError("General constructor must be [alternative, fields]")
        return _constr(load_uint(parts[0], "constructor alternative"), parts[1], depth)
    if tag in BIGNUM_TAGS:
        value = loads(raw)
        if not isinstance(value, int):
            raise DecodeError(f"Malformed big integer: {value!r}")
        return {"int": value}
    raise DecodeError(f"CBOR tag {tag} is not valid Plutus data")


def _constr(alternative, fields_raw, depth):
    return {
        "constructor": alternative,
        "fields": [plutus_to_json(f, depth + 1) for f in array_items(fields_raw)],
    }
