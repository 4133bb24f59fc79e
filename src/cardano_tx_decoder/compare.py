import logging
from typing import Callable, List, Sequence

from .diff import find_json_differences
from .models import (
    ComparisonResult,
    DecodedDatum,
    DecodedInput,
    DecodedRedeemer,
    DecodedTransaction,
    DecodedWitnessSet,
)

LOGGER = logging.getLogger(__name__)

HEX_PREVIEW_LENGTH = 80


def preview(hex_value: str) -> str:
    """First 80 characters followed by an ellipsis, whatever the length."""
    return f"{hex_value[:HEX_PREVIEW_LENGTH]}..."


def compare_counted(
    category: str,
    items1: Sequence,
    items2: Sequence,
    compare_item: Callable[[int, object, object], List[str]],
) -> List[str]:
    """
    Positional comparison of two same-category sequences.

    Lengths are compared first; when they differ a single count message is
    returned and no element is looked at.
    """
    if len(items1) != len(items2):
        return [f"{category} count differs: {len(items1)} vs {len(items2)}"]

    diffs = []
    for i, (item1, item2) in enumerate(zip(items1, items2)):
        diffs += compare_item(i, item1, item2)
    return diffs


def _compare_datum(i: int, datum1: DecodedDatum, datum2: DecodedDatum) -> List[str]:
    if datum1.hex == datum2.hex:
        return []
    return [
        f"Plutus data at index {i} differs",
        f"  TX1: {preview(datum1.hex)}",
        f"  TX2: {preview(datum2.hex)}",
    ] + find_json_differences(datum1.json_value, datum2.json_value, indent="  ")


def _compare_redeemer(i: int, redeemer1: DecodedRedeemer, redeemer2: DecodedRedeemer) -> List[str]:
    diffs = []
    if redeemer1.tag != redeemer2.tag:
        diffs.append(f"Redeemer {i} tag differs: {redeemer1.tag} vs {redeemer2.tag}")
    if redeemer1.index != redeemer2.index:
        diffs.append(f"Redeemer {i} index differs: {redeemer1.index} vs {redeemer2.index}")
    if redeemer1.data_hex != redeemer2.data_hex:
        diffs += [
            f"Redeemer {i} data differs",
            f"  TX1: {preview(redeemer1.data_hex)}",
            f"  TX2: {preview(redeemer2.data_hex)}",
        ]
    units1 = redeemer1.ex_units
    units2 = redeemer2.ex_units
    if (units1.mem, units1.steps) != (units2.mem, units2.steps):
        diffs.append(
            f"Redeemer {i} exUnits differs: "
            f"({units1.mem}, {units1.steps}) vs ({units2.mem}, {units2.steps})"
        )
    return diffs


def _compare_script_hash(i: int, hash1: str, hash2: str) -> List[str]:
    if hash1 == hash2:
        return []
    return [
        f"Plutus script hash at index {i} differs",
        f"  TX1: {hash1}",
        f"  TX2: {hash2}",
    ]


def _compare_input(i: int, input1: DecodedInput, input2: DecodedInput) -> List[str]:
    if (input1.tx_hash, input1.index) == (input2.tx_hash, input2.index):
        return []
    return [
        f"Input at position {i} differs (affects redeemer indices!)",
        f"  TX1: {input1.outref}",
        f"  TX2: {input2.outref}",
    ]


def compare_plutus_data(datums1: Sequence[DecodedDatum], datums2: Sequence[DecodedDatum]) -> List[str]:
    return compare_counted("Plutus data", datums1, datums2, _compare_datum)


def compare_redeemers(redeemers1: Sequence[DecodedRedeemer], redeemers2: Sequence[DecodedRedeemer]) -> List[str]:
    return compare_counted("Redeemer", redeemers1, redeemers2, _compare_redeemer)


def compare_script_hashes(hashes1: Sequence[str], hashes2: Sequence[str]) -> List[str]:
    return compare_counted("Plutus script", hashes1, hashes2, _compare_script_hash)


def compare_inputs(inputs1: Sequence[DecodedInput], inputs2: Sequence[DecodedInput]) -> List[str]:
    return compare_counted("Input", inputs1, inputs2, _compare_input)


def compare_witness_sets(ws1: DecodedWitnessSet, ws2: DecodedWitnessSet) -> List[str]:
    """
    Compare two witness sets: datums, then redeemers, then script hashes.

    Absent collections count as empty.
    """
    return (
        compare_plutus_data(ws1.plutus_data or (), ws2.plutus_data or ())
        + compare_redeemers(ws1.redeemers or (), ws2.redeemers or ())
        + compare_script_hashes(ws1.plutus_script_hashes or (), ws2.plutus_script_hashes or ())
    )


def compare_transactions(tx1: DecodedTransaction, tx2: DecodedTransaction) -> ComparisonResult:
    input_differences = compare_inputs(tx1.inputs, tx2.inputs)
    result = ComparisonResult(
        script_data_hash_match=tx1.script_data_hash == tx2.script_data_hash,
        input_order_match=not input_differences,
        witness_set_differences=compare_witness_sets(tx1.witness_set, tx2.witness_set),
        input_differences=input_differences,
    )
    LOGGER.debug(
        f"Compared transactions: script data hash match={result.script_data_hash_match}, "
        f"{len(result.input_differences)} input and "
        f"{len(result.witness_set_differences)} witness set difference lines"
    )
    return result
