"""Settings for the plagiarism checker.

Limits can be overridden through environment variables, read once at import.
"""
import logging
import os

logger = logging.getLogger(__name__)


def _int_from_env(name, default):
    """
    Read a positive integer from the environment.

    Args:
        name (str): Environment variable name
        default (int): Value used when the variable is unset or invalid

    Returns:
        int: The configured value
    """
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive, using %d", name, raw, default)
        return default
    return value


# Largest input accepted per text, in bytes
MAX_INPUT_BYTES = _int_from_env("PLAGCHECK_MAX_INPUT_BYTES", 100000)

# Largest token sequence per text; bounds the O(m*n) DP metrics
MAX_TOKENS = _int_from_env("PLAGCHECK_MAX_TOKENS", 10000)

# Longest identifier/keyword accepted by the tokenizer
MAX_LEXEME_LENGTH = _int_from_env("PLAGCHECK_MAX_LEXEME_LENGTH", 255)

NGRAM_SIZE = 3

# Must sum to 1.0
WEIGHTS = {
    'token_seq': 0.30,
    'structure': 0.25,
    'ngram': 0.20,
    'frequency': 0.15,
    'edit_distance': 0.10,
}

# (lower bound, label), checked top down
THRESHOLDS = [
    (0.85, 'high'),
    (0.70, 'moderate'),
    (0.50, 'low'),
]
DEFAULT_LABEL = 'minimal'
