"""Loading and size checks for source texts."""
import logging

import config
from errors import InputTooLargeError

logger = logging.getLogger(__name__)


def decode_source(data):
    """
    Decode raw file content to text.
    Invalid UTF-8 sequences are dropped, str input is returned unchanged.
    """
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode('utf-8', errors='ignore')
    return data


def input_size(data):
    """Size of a text in bytes (UTF-8 encoded for str input)."""
    if isinstance(data, (bytes, bytearray)):
        return len(data)
    return len(data.encode('utf-8', errors='ignore'))


def check_input_size(data, max_bytes=None):
    """
    Raise InputTooLargeError if data is larger than max_bytes.

    Args:
        data (str or bytes): Source text
        max_bytes (int, optional): Limit, defaults to config.MAX_INPUT_BYTES
    """
    if max_bytes is None:
        max_bytes = config.MAX_INPUT_BYTES
    size = input_size(data)
    if size > max_bytes:
        raise InputTooLargeError('bytes', max_bytes, size)
    return size


def read_source_file(path, max_bytes=None):
    """
    Read a whole source file.

    Reads at most one byte past the limit so oversized files are rejected
    without loading them completely.

    Args:
        path (str): Path to the source file
        max_bytes (int, optional): Limit, defaults to config.MAX_INPUT_BYTES

    Returns:
        str: Decoded file content

    Raises:
        OSError: If the file cannot be opened or read
        InputTooLargeError: If the file is larger than max_bytes
    """
    if max_bytes is None:
        max_bytes = config.MAX_INPUT_BYTES

    with open(path, 'rb') as f:
        data = f.read(max_bytes + 1)

    if len(data) > max_bytes:
        raise InputTooLargeError('bytes', max_bytes, len(data))

    logger.debug("Read %d bytes from %s", len(data), path)
    return decode_source(data)
