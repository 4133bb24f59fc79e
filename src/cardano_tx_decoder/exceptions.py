# longest path tail kept in error messages
PATH_PREVIEW_LENGTH = 60


class TxDecoderError(Exception):
    """Base class for errors raised by cardano_tx_decoder."""


class DecodeError(TxDecoderError):
    """Raised when hex input is not a well-formed CBOR record of the
    expected shape."""


class MaxDepthExceeded(TxDecoderError):
    """
    Raised when a decoded value nests deeper than the configured ceiling.

    Attributes
    ----------
    path : str
        Full path at which the ceiling was crossed. The message only
        shows its tail.
    max_depth : int
    """

    def __init__(self, path, max_depth):
        self.path = path
        self.max_depth = max_depth
        super().__init__(
            f"Maximum depth {max_depth} exceeded at {_short_path(path)}"
        )


def _short_path(path):
    if not path:
        return "root"
    if len(path) <= PATH_PREVIEW_LENGTH:
        return path
    return "..." + path[-PATH_PREVIEW_LENGTH:]
