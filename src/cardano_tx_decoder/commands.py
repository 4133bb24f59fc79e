# -*- coding: utf-8 -*-
"""
Console entry points. Installed as ``cardano-tx-decoder`` and ``ctd``:

    ctd decode ./tx.hex
    ctd compare ./tx1.hex ./tx2.hex
    ctd decode ./tx.hex --json | jq '.witnessSet.plutusData'

Every hex argument may also be a path to a file holding the hex, or ``-``
to read it from stdin. Files bypass shell argument length limits for
large transactions.
"""

import json
import logging
import os
import sys

import click

from cardano_tx_decoder import __version__
from .compare import compare_transactions, compare_witness_sets
from .decoder import decode_plutus_data, decode_transaction, decode_witness_set
from .display import format_comparison, format_transaction, format_witness_set
from .exceptions import TxDecoderError
from .settings import settings

__author__ = "cardano-tx-decoder maintainers"
__copyright__ = "cardano-tx-decoder maintainers"
__license__ = "mit"

LOGGER = logging.getLogger(__name__)


def setup_logging(verbose):
    """Setup basic logging

    Args:
      verbose (int): number of -v flags, 0 shows warnings only
    """
    loglevel = [logging.WARNING, logging.INFO, logging.DEBUG][min(verbose, 2)]
    logformat = "[%(asctime)s] %(levelname)s:%(name)s:%(message)s"
    # stderr keeps --json output on stdout parseable
    logging.basicConfig(level=loglevel, stream=sys.stderr,
                        format=logformat, datefmt="%Y-%m-%d %H:%M:%S")


def read_hex_input(value):
    """Hex from a file path, from stdin for "-", or the argument itself."""
    if value == "-":
        LOGGER.debug("Reading hex from stdin")
        return click.get_text_stream("stdin").read().strip()
    if os.path.isfile(value):
        LOGGER.debug(f"Reading hex from file {value}")
        with open(value, "r", encoding="utf-8") as f:
            return f.read().strip()
    return value.strip()


def echo_lines(lines):
    for line in lines:
        click.echo(line)


def echo_json(data):
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _decoding(func, value):
    try:
        return func(read_hex_input(value))
    except TxDecoderError as e:
        raise click.ClickException(str(e)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Cannot read {value}: {e}") from e


json_option = click.option("--json", "as_json", is_flag=True,
                           help="Output as JSON (default: pretty print)")


@click.group()
@click.option('-v', '--verbose', count=True)
@click.version_option(version=__version__)
def main(verbose):
    """
    Decode and compare Cardano transactions to debug witness set differences.
    """
    setup_logging(verbose)
    LOGGER.debug(f"Starting {settings.app_name}")


@main.command()
@click.argument("tx")
@json_option
def decode(tx, as_json):
    """Decode a single transaction."""
    decoded = _decoding(decode_transaction, tx)
    if as_json:
        echo_json(decoded.to_json())
    else:
        echo_lines(format_transaction(decoded))


@main.command("decode-witness")
@click.argument("witness_set")
@json_option
def decode_witness(witness_set, as_json):
    """Decode a witness set."""
    decoded = _decoding(decode_witness_set, witness_set)
    if as_json:
        echo_json(decoded.to_json())
    else:
        echo_lines(format_witness_set(decoded))


@main.command("decode-datum")
@click.argument("datum")
def decode_datum(datum):
    """Decode plutus data (datum/redeemer) to JSON."""
    echo_json(_decoding(decode_plutus_data, datum))


@main.command()
@click.argument("tx1")
@click.argument("tx2")
@json_option
def compare(tx1, tx2, as_json):
    """Compare two transactions."""
    decoded1 = _decoding(decode_transaction, tx1)
    decoded2 = _decoding(decode_transaction, tx2)
    try:
        result = compare_transactions(decoded1, decoded2)
    except TxDecoderError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        echo_json({
            "tx1": decoded1.to_json(),
            "tx2": decoded2.to_json(),
            "comparison": result.to_json(),
        })
    else:
        echo_lines(format_comparison(decoded1, decoded2, result))


@main.command("compare-witness")
@click.argument("ws1")
@click.argument("ws2")
def compare_witness(ws1, ws2):
    """Compare two witness sets."""
    decoded1 = _decoding(decode_witness_set, ws1)
    decoded2 = _decoding(decode_witness_set, ws2)
    try:
        differences = compare_witness_sets(decoded1, decoded2)
    except TxDecoderError as e:
        raise click.ClickException(str(e)) from e
    echo_json({
        "ws1": decoded1.to_json(),
        "ws2": decoded2.to_json(),
        "differences": differences,
    })


def run():
    """Entry point for console_scripts
    """
    main(sys.argv[1:])


if __name__ == "__main__":
    run()
