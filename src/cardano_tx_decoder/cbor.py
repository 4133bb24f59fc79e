"""
CBOR framing helpers.

cbor2 decodes values but forgets where they came from, and it turns tag 258
sets into unordered Python sets. The ledger cares about both exact bytes
(datums, redeemer payloads) and order (inputs), so containers are walked
here by byte span and only leaves are handed to cbor2.
"""
import logging

import cbor2
from hexbytes import HexBytes

from .exceptions import DecodeError
from .settings import settings

LOGGER = logging.getLogger(__name__)

MAJOR_UINT = 0
MAJOR_NEGINT = 1
MAJOR_BYTES = 2
MAJOR_TEXT = 3
MAJOR_ARRAY = 4
MAJOR_MAP = 5
MAJOR_TAG = 6
MAJOR_SIMPLE = 7

BREAK = 0xFF
SET_TAG = 258


def from_hex(text):
    """Parse hex text (optional 0x prefix, surrounding whitespace) to bytes."""
    if not isinstance(text, str):
        raise DecodeError(f"Expected a hex string, got {type(text).__name__}")
    try:
        data = bytes(HexBytes(text.strip()))
    except ValueError as e:
        raise DecodeError(f"Invalid hex input: {e}") from e
    LOGGER.debug(f"Parsed {len(data)} bytes of hex input")
    return data


def read_head(data, pos):
    """
    Read one CBOR initial byte plus its argument.

    Returns (major, argument, next_pos). The argument is None for
    indefinite-length strings and containers, and for the break marker.
    """
    if pos >= len(data):
        raise DecodeError("Unexpected end of CBOR data")
    initial = data[pos]
    major = initial >> 5
    info = initial & 0x1F
    pos += 1

    if info < 24:
        return major, info, pos
    if info <= 27:
        size = 1 << (info - 24)
        if pos + size > len(data):
            raise DecodeError("Unexpected end of CBOR data")
        return major, int.from_bytes(data[pos:pos + size], "big"), pos + size
    if info == 31 and major in (MAJOR_BYTES, MAJOR_TEXT, MAJOR_ARRAY, MAJOR_MAP, MAJOR_SIMPLE):
        return major, None, pos
    raise DecodeError(f"Malformed CBOR initial byte 0x{initial:02x} at offset {pos - 1}")


def skip_item(data, pos, depth=0):
    """Return the offset just past the CBOR item starting at pos."""
    if depth > settings.decode_max_depth:
        raise DecodeError(
            f"CBOR nesting deeper than {settings.decode_max_depth} levels"
        )
    start = pos
    major, arg, pos = read_head(data, pos)

    if major in (MAJOR_UINT, MAJOR_NEGINT):
        return pos

    if major in (MAJOR_BYTES, MAJOR_TEXT):
        if arg is None:
            while not _at_break(data, pos):
                chunk_major, _, _ = read_head(data, pos)
                if chunk_major != major:
                    raise DecodeError(f"Bad chunk in indefinite string at offset {pos}")
                pos = skip_item(data, pos, depth + 1)
            return pos + 1
        if pos + arg > len(data):
            raise DecodeError("Unexpected end of CBOR data")
        return pos + arg

    if major in (MAJOR_ARRAY, MAJOR_MAP):
        per_entry = 2 if major == MAJOR_MAP else 1
        if arg is None:
            while not _at_break(data, pos):
                for _ in range(per_entry):
                    pos = skip_item(data, pos, depth + 1)
            return pos + 1
        for _ in range(arg * per_entry):
            pos = skip_item(data, pos, depth + 1)
        return pos

    if major == MAJOR_TAG:
        return skip_item(data, pos, depth + 1)

    # simple values and floats carry their payload in the head
    if arg is None:
        raise DecodeError(f"Unexpected break marker at offset {start}")
    return pos


def _at_break(data, pos):
    if pos >= len(data):
        raise DecodeError("Unexpected end of CBOR data")
    return data[pos] == BREAK


def check_single_item(data):
    """Ensure data holds exactly one complete CBOR item."""
    end = skip_item(data, 0)
    if end != len(data):
        raise DecodeError(f"{len(data) - end} trailing bytes after CBOR item")
    return data


def major_type(raw):
    return read_head(raw, 0)[0]


def untag(raw):
    """Split a tagged item into (tag, raw content). Untagged items give (None, raw)."""
    major, arg, pos = read_head(raw, 0)
    if major != MAJOR_TAG:
        return None, raw
    return arg, raw[pos:]


def _container(raw, expected, what):
    major, arg, pos = read_head(raw, 0)
    if major != expected:
        raise DecodeError(f"Expected {what}, found CBOR major type {major}")
    items = []
    per_entry = 2 if expected == MAJOR_MAP else 1
    remaining = None if arg is None else arg * per_entry
    while remaining is None or remaining > 0:
        if remaining is None and _at_break(raw, pos):
            break
        end = skip_item(raw, pos, 1)
        items.append(raw[pos:end])
        pos = end
        if remaining is not None:
            remaining -= 1
    return items


def array_items(raw):
    """Raw spans of the elements of an array, or of a tag 258 set, in encoded order."""
    tag, content = untag(raw)
    if tag is not None and tag != SET_TAG:
        raise DecodeError(f"Expected array or set, found tag {tag}")
    return _container(content, MAJOR_ARRAY, "array")


def map_items(raw):
    """Raw (key, value) span pairs of a map, in encoded order."""
    spans = _container(raw, MAJOR_MAP, "map")
    return list(zip(spans[0::2], spans[1::2]))


def loads(raw):
    """Decode one leaf item with cbor2."""
    try:
        return cbor2.loads(raw)
    except (cbor2.CBORDecodeError, ValueError) as e:
        raise DecodeError(f"Invalid CBOR value: {e}") from e


def load_uint(raw, what):
    value = loads(raw)
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise DecodeError(f"Expected unsigned integer for {what}, got {value!r}")
    return value


def load_bytes(raw, what):
    value = loads(raw)
    if not isinstance(value, bytes):
        raise DecodeError(f"Expected byte string for {what}, got {type(value).__name__}")
    return value
