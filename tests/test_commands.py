import json

from cbor2 import CBORTag, dumps
from click.testing import CliRunner

from cardano_tx_decoder.commands import main, read_hex_input
from cardano_tx_decoder.settings import settings


def invoke(*args, **kwargs):
    return CliRunner().invoke(main, list(args), **kwargs)


def test_read_hex_input(tmp_path):
    path = tmp_path / "tx.hex"
    path.write_text("  abcd\n")
    assert read_hex_input(str(path)) == "abcd"
    assert read_hex_input(" abcd ") == "abcd"


def test_decode_text(sample_tx_hex):
    result = invoke("decode", sample_tx_hex)
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert "Script Data Hash: 5e4edebba50f3bf7be0d7ff7e07619b63d4edea30be0de8f641e5561206ef921" in lines
    assert "Fee: 223825 lovelace" in lines
    assert "  [0] 08c49c049c49a665cbb83644b22662af7125a8ecd365a616b82388a1a7bb5510#0" in lines
    assert "  Plutus Data (2 datums):" in lines
    assert "Required Signers: none" in lines


def test_decode_json_from_file(sample_tx_hex, tmp_path):
    path = tmp_path / "tx.hex"
    path.write_text(sample_tx_hex + "\n")
    result = invoke("decode", str(path), "--json")
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["fee"] == "223825"
    assert data["inputCount"] == 2
    assert data["validityStart"] == "176858803"
    assert len(data["witnessSet"]["plutusData"]) == 2
    assert "redeemers" not in data["witnessSet"]


def test_decode_from_stdin(sample_tx_hex):
    result = invoke("decode", "-", "--json", input=sample_tx_hex)
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["outputCount"] == 3


def test_decode_invalid_hex():
    result = invoke("decode", "invalid")
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_decode_witness():
    raw = dumps({5: [[1, 0, CBORTag(121, []), [10, 20]]]}).hex()
    result = invoke("decode-witness", raw)
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "  Redeemers (1):",
        "    [0] Mint index=0 exUnits=(10, 20)",
    ]

    result = invoke("decode-witness", raw, "--json")
    redeemer = json.loads(result.output)["redeemers"][0]
    assert redeemer["dataHex"] == "d87980"
    assert redeemer["exUnits"] == {"mem": "10", "steps": "20"}


def test_decode_datum(sample_datum_hex):
    result = invoke("decode-datum", sample_datum_hex)
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["constructor"] == 0


def test_compare_identical(sample_tx_hex):
    result = invoke("compare", sample_tx_hex, sample_tx_hex)
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert "TRANSACTION COMPARISON" in lines
    assert "--- TRANSACTION 1 ---" in lines
    assert "--- TRANSACTION 2 ---" in lines
    assert lines[-3:] == [
        "✅ Script Data Hash matches",
        "✅ Input ordering matches",
        "✅ Witness sets match",
    ]


def test_compare_differences_json():
    tx1 = dumps([{0: [[b"\x01" * 32, 0]], 1: [], 2: 10, 11: b"\xaa" * 32}, {}, True, None]).hex()
    tx2 = dumps([{0: [[b"\x01" * 32, 1]], 1: [], 2: 10}, {4: [1]}, True, None]).hex()

    result = invoke("compare", tx1, tx2, "--json")
    assert result.exit_code == 0, result.output
    comparison = json.loads(result.output)["comparison"]
    assert comparison == {
        "scriptDataHashMatch": False,
        "inputOrderMatch": False,
        "witnessSetDifferences": ["Plutus data count differs: 0 vs 1"],
        "inputDifferences": [
            "Input at position 0 differs (affects redeemer indices!)",
            f"  TX1: {'01' * 32}#0",
            f"  TX2: {'01' * 32}#1",
        ],
    }

    result = invoke("compare", tx1, tx2)
    lines = result.output.splitlines()
    assert "❌ Script Data Hash DIFFERS" in lines
    assert "   TX2: none" in lines
    assert "   Plutus data count differs: 0 vs 1" in lines


def test_compare_witness():
    ws1 = dumps({6: [b"\x01"]}).hex()
    ws2 = dumps({6: [b"\x02"]}).hex()
    result = invoke("compare-witness", ws1, ws2)
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["differences"][0] == "Plutus script hash at index 0 differs"
    assert len(data["ws1"]["plutusScriptHashes"]) == 1


def test_compare_needs_two_arguments(sample_tx_hex):
    result = invoke("compare", sample_tx_hex)
    assert result.exit_code == 2


def test_decode_binary_file(tmp_path):
    path = tmp_path / "tx.bin"
    path.write_bytes(b"\x84\xa7\xff\xfe\x00")
    result = invoke("decode", str(path))
    assert result.exit_code == 1
    assert "Error: Cannot read" in result.output


def test_compare_witness_too_deep(monkeypatch):
    monkeypatch.setattr(settings, "diff_max_depth", 2)
    ws1 = dumps({4: [[[1]]]}).hex()
    ws2 = dumps({4: [[[2]]]}).hex()
    result = invoke("compare-witness", ws1, ws2)
    assert result.exit_code == 1
    assert "Error: Maximum depth 2 exceeded at list[0]" in result.output
