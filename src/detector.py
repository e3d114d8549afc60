"""
Similarity metrics between two tokenized source texts.

Token Sequence Similarity (LCS), Structure Similarity, N-gram Similarity,
Token Frequency Similarity and Edit Distance Similarity, combined by
scoring.build_result into one weighted verdict.
"""
import logging
import math
from collections import Counter

import Levenshtein
from tqdm import tqdm

import config
from preprocessor import check_input_size, decode_source
from scoring import build_result
from structure import extract_structure
from tokenizer import TokenKind, tokenize

logger = logging.getLogger(__name__)

FREQUENCY_KINDS = (TokenKind.KEYWORD, TokenKind.OPERATOR)


def lcs_length(seq1, seq2):
    """
    Calculate Longest Common Subsequence length using dynamic programming.

    Only two rows of the table are kept, sized by the shorter sequence.

    Args:
        seq1, seq2: Sequences of comparable items (tokens or structure symbols)

    Returns:
        Length of the longest common subsequence
    """
    if not seq1 or not seq2:
        return 0

    if len(seq2) > len(seq1):
        seq1, seq2 = seq2, seq1
    n = len(seq2)

    prev = [0] * (n + 1)
    for item in seq1:
        curr = [0] * (n + 1)
        for j in range(1, n + 1):
            if item == seq2[j-1]:
                curr[j] = prev[j-1] + 1
            else:
                curr[j] = max(prev[j], curr[j-1])
        prev = curr

    return prev[n]


def _dice_ratio(seq1, seq2):
    if not seq1 or not seq2:
        return 0.0
    return (2.0 * lcs_length(seq1, seq2)) / (len(seq1) + len(seq2))


def calculate_token_sequence_similarity(tokens1, tokens2):
    """
    Calculate similarity based on Longest Common Subsequence ratio.

    Similarity = 2 * LCS_length / (len(seq1) + len(seq2))

    Tokens match only when both kind and lexeme are equal.
    Returns 0.0 if either sequence is empty.
    """
    return _dice_ratio(tokens1, tokens2)


def calculate_structure_similarity(structure1, structure2):
    """
    LCS ratio over structure sequences (see structure.extract_structure).
    Returns 0.0 if either sequence is empty.
    """
    return _dice_ratio(structure1, structure2)


def calculate_edit_distance_similarity(tokens1, tokens2):
    """
    Calculates similarity based on token-level Levenshtein distance.
    Similarity = 1 - distance / max(len(tokens1), len(tokens2))

    Two empty sequences are identical (1.0); exactly one empty scores 0.0.
    """
    if not tokens1 and not tokens2:
        return 1.0
    if not tokens1 or not tokens2:
        return 0.0

    distance = Levenshtein.distance(list(tokens1), list(tokens2))
    return 1.0 - distance / max(len(tokens1), len(tokens2))


def generate_ngrams(tokens, n=config.NGRAM_SIZE):
    """
    Slide a window of n tokens over the sequence.

    Returns:
        list: One tuple of lexemes per window, duplicates included
    """
    lexemes = [token.lexeme for token in tokens]
    return [tuple(lexemes[i:i + n]) for i in range(len(lexemes) - n + 1)]


def calculate_ngram_similarity(tokens1, tokens2, n=config.NGRAM_SIZE):
    """
    Jaccard similarity of the lexeme n-gram sets.

    Similarity = |A & B| / |A | B|

    Returns 0.0 if either sequence has fewer than n tokens.
    """
    if len(tokens1) < n or len(tokens2) < n:
        return 0.0

    set1 = set(generate_ngrams(tokens1, n))
    set2 = set(generate_ngrams(tokens2, n))
    intersection = len(set1 & set2)
    union = len(set1) + len(set2) - intersection
    return intersection / union if union > 0 else 0.0


def build_frequency_map(tokens):
    """Count keyword and operator lexemes. Identifiers and literals are ignored."""
    return Counter(token.lexeme for token in tokens if token.kind in FREQUENCY_KINDS)


def calculate_frequency_similarity(tokens1, tokens2):
    """
    Cosine similarity between keyword/operator frequency vectors.
    Returns 0.0 if either text has no keywords or operators.
    """
    freq1 = build_frequency_map(tokens1)
    freq2 = build_frequency_map(tokens2)
    if not freq1 or not freq2:
        return 0.0

    dot_product = sum(count * freq2[lexeme] for lexeme, count in freq1.items() if lexeme in freq2)
    magnitude1 = math.sqrt(sum(count * count for count in freq1.values()))
    magnitude2 = math.sqrt(sum(count * count for count in freq2.values()))
    # Clamp rounding overshoot on identical maps
    return min(dot_product / (magnitude1 * magnitude2), 1.0)


def calculate_combined_similarity(tokens1, tokens2, show_progress=False):
    """
    Returns a dictionary of similarity scores.

    Args:
        tokens1, tokens2: Token sequences from tokenizer.tokenize
        show_progress (bool): Display a tqdm bar while the metrics run

    Returns:
        dict: token_seq, structure, ngram, frequency and edit_distance scores
    """
    structure1 = extract_structure(tokens1)
    structure2 = extract_structure(tokens2)

    metrics = [
        ('token_seq', lambda: calculate_token_sequence_similarity(tokens1, tokens2)),
        ('structure', lambda: calculate_structure_similarity(structure1, structure2)),
        ('ngram', lambda: calculate_ngram_similarity(tokens1, tokens2)),
        ('frequency', lambda: calculate_frequency_similarity(tokens1, tokens2)),
        ('edit_distance', lambda: calculate_edit_distance_similarity(tokens1, tokens2)),
    ]

    scores = {}
    for name, metric in tqdm(metrics, desc="Computing metrics", unit="metric", disable=not show_progress):
        scores[name] = metric()
        logger.debug("%s similarity: %.4f", name, scores[name])
    return scores


def compare(text1, text2, max_bytes=None, show_progress=False):
    """
    Compare two source texts and classify their similarity.

    Args:
        text1, text2 (str or bytes): Complete source texts
        max_bytes (int, optional): Per-text size limit, defaults to config.MAX_INPUT_BYTES
        show_progress (bool): Display a tqdm bar while the metrics run

    Returns:
        ComparisonResult

    Raises:
        InputTooLargeError: If a text exceeds the byte, token or lexeme limit
    """
    if max_bytes is None:
        max_bytes = config.MAX_INPUT_BYTES

    check_input_size(text1, max_bytes)
    check_input_size(text2, max_bytes)

    tokens1 = tokenize(decode_source(text1))
    tokens2 = tokenize(decode_source(text2))
    logger.info("Comparing %d tokens against %d tokens", len(tokens1), len(tokens2))

    scores = calculate_combined_similarity(tokens1, tokens2, show_progress=show_progress)
    result = build_result(scores)
    logger.info("Overall score %.4f (%s)", result.overall, result.label)
    return result
