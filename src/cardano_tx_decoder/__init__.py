from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("cardano-tx-decoder")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "unknown"
finally:
    del version, PackageNotFoundError

from .compare import compare_transactions, compare_witness_sets
from .decoder import decode_plutus_data, decode_transaction, decode_witness_set
from .diff import find_json_differences
from .exceptions import DecodeError, MaxDepthExceeded, TxDecoderError
from .models import (
    ComparisonResult,
    DecodedDatum,
    DecodedInput,
    DecodedRedeemer,
    DecodedTransaction,
    DecodedWitnessSet,
    ExUnits,
)

__all__ = [
    "__version__",
    "compare_transactions",
    "compare_witness_sets",
    "decode_plutus_data",
    "decode_transaction",
    "decode_witness_set",
    "find_json_differences",
    "DecodeError",
    "MaxDepthExceeded",
    "TxDecoderError",
    "ComparisonResult",
    "DecodedDatum",
    "DecodedInput",
    "DecodedRedeemer",
    "DecodedTransaction",
    "DecodedWitnessSet",
    "ExUnits",
]
