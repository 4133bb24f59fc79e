"""Human readable rendering of decoded records, one string per output line."""

BANNER_WIDTH = 80
DATUM_PREVIEW_LENGTH = 60


def _or_none(value):
    return "none" if value is None else value


def format_witness_set(ws):
    lines = []
    if ws.plutus_data:
        lines.append(f"  Plutus Data ({len(ws.plutus_data)} datums):")
        for i, datum in enumerate(ws.plutus_data):
            lines.append(f"    [{i}] {datum.hex[:DATUM_PREVIEW_LENGTH]}...")

    if ws.redeemers:
        lines.append(f"  Redeemers ({len(ws.redeemers)}):")
        for i, r in enumerate(ws.redeemers):
            lines.append(
                f"    [{i}] {r.tag} index={r.index} "
                f"exUnits=({r.ex_units.mem}, {r.ex_units.steps})"
            )

    if ws.plutus_script_hashes:
        lines.append(f"  Plutus Scripts ({len(ws.plutus_script_hashes)}):")
        for i, script_hash in enumerate(ws.plutus_script_hashes):
            lines.append(f"    [{i}] {script_hash}")

    if ws.vkey_count:
        lines.append(f"  VKey Witnesses: {ws.vkey_count}")
    if ws.native_script_count:
        lines.append(f"  Native Scripts: {ws.native_script_count}")
    if ws.bootstrap_count:
        lines.append(f"  Bootstrap Witnesses: {ws.bootstrap_count}")
    return lines


def format_transaction(tx, label=None):
    lines = []
    if label:
        lines += ["", f"--- {label} ---", ""]

    signers = ", ".join(tx.required_signers) if tx.required_signers else "none"
    lines += [
        f"Script Data Hash: {_or_none(tx.script_data_hash)}",
        f"Inputs: {tx.input_count}",
        f"Outputs: {tx.output_count}",
        f"Fee: {tx.fee} lovelace",
        f"TTL: {_or_none(tx.ttl)}",
        f"Validity Start: {_or_none(tx.validity_start)}",
        f"Required Signers: {signers}",
        "",
        "Inputs (ordered):",
    ]
    lines += [f"  [{i}] {tx_input.outref}" for i, tx_input in enumerate(tx.inputs)]
    lines += ["", "Witness Set:"]
    lines += format_witness_set(tx.witness_set)
    return lines


def format_comparison(tx1, tx2, result):
    """Banner, both transactions, then one ✅/❌ line per compared concern."""
    lines = [
        "",
        "=" * BANNER_WIDTH,
        "TRANSACTION COMPARISON",
        "=" * BANNER_WIDTH,
    ]
    lines += format_transaction(tx1, "TRANSACTION 1")
    lines += format_transaction(tx2, "TRANSACTION 2")
    lines += ["", "--- DIFFERENCES ---", ""]

    if result.script_data_hash_match:
        lines.append("✅ Script Data Hash matches")
    else:
        lines += [
            "❌ Script Data Hash DIFFERS",
            f"   TX1: {_or_none(tx1.script_data_hash)}",
            f"   TX2: {_or_none(tx2.script_data_hash)}",
        ]

    if result.input_order_match:
        lines.append("✅ Input ordering matches")
    else:
        lines.append("❌ Input ordering differs:")
        lines += [f"   {d}" for d in result.input_differences]

    if not result.witness_set_differences:
        lines.append("✅ Witness sets match")
    else:
        lines.append("❌ Witness set differences:")
        lines += [f"   {d}" for d in result.witness_set_differences]
    return lines
