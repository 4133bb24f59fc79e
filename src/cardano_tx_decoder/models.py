from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    """Read-only view produced by the decoder.

    Attributes are snake_case in Python and camelCase once dumped
    with ``by_alias=True``.
    """

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    def to_json(self):
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class DecodedInput(Record):
    tx_hash: str
    index: int = Field(ge=0)

    @property
    def outref(self):
        return f"{self.tx_hash}#{self.index}"


class ExUnits(Record):
    mem: str
    steps: str


class DecodedDatum(Record):
    index: int
    hex: str
    json_value: Any = Field(None, alias="json")


class DecodedRedeemer(Record):
    tag: str
    # decimal string, indices and budgets can exceed 53 bits
    index: str
    data_hex: str
    data_json: Any = None
    ex_units: ExUnits


class DecodedWitnessSet(Record):
    """
    Witness set summary.

    Collections are ``None`` when the witness set has none of them, and
    counters are ``None`` when zero. An absent collection compares equal
    to an empty one.
    """

    plutus_data: Optional[Tuple[DecodedDatum, ...]] = None
    redeemers: Optional[Tuple[DecodedRedeemer, ...]] = None
    plutus_script_hashes: Optional[Tuple[str, ...]] = None
    native_script_count: Optional[int] = None
    vkey_count: Optional[int] = None
    bootstrap_count: Optional[int] = None


class DecodedTransaction(Record):
    script_data_hash: Optional[str] = None
    input_count: int
    output_count: int
    fee: str
    ttl: Optional[str] = None
    validity_start: Optional[str] = None
    required_signers: Tuple[str, ...] = ()
    witness_set: DecodedWitnessSet = DecodedWitnessSet()
    inputs: Tuple[DecodedInput, ...] = ()

    @model_validator(mode="after")
    def check_input_count(self):
        if len(self.inputs) != self.input_count:
            raise ValueError(
                f"input_count is {self.input_count} but {len(self.inputs)} inputs were given"
            )
        return self

    def to_json(self):
        # keep the null markers, the text and JSON renderings show them
        return self.model_dump(mode="json", by_alias=True, exclude={"witness_set"}) | {
            "witnessSet": self.witness_set.to_json()
        }


class ComparisonResult(Record):
    script_data_hash_match: bool
    input_order_match: bool
    witness_set_differences: Tuple[str, ...] = ()
    input_differences: Tuple[str, ...] = ()

    @property
    def matches(self):
        return (
            self.script_data_hash_match
            and self.input_order_match
            and not self.witness_set_differences
        )
