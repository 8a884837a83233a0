from collections.abc import Mapping

import numpy as np


def median_element(weights):
    """Identifies the element that holds the middle of the total weight,
    i.e. the weighted median.

    Parameters
    ----------
    weights : np.array
        Non-negative weights, in order
    """
    cumulative = np.cumsum(weights)
    return int(np.searchsorted(cumulative, cumulative[-1] / 2))


def recursive_median(weights):
    """Yields indices for recursive median splits of weights.

    Parameters
    ----------
    weights : np.array
        Non-negative weights, in order

    Notes
    -----
    First the weighted median of the whole array, then the weighted
    medians of the parts left and right of it, and so forth.
    Every index is yielded exactly once.
    """
    if len(weights) <= 2:
        yield from range(len(weights))
        return

    pivot = median_element(weights)
    yield pivot

    yield from recursive_median(weights[:pivot])
    for idx in recursive_median(weights[pivot + 1:]):
        yield pivot + 1 + idx


def median_split_vocabulary(frequencies):
    """Returns insertion order for a well-shaped ternary search tree.

    Parameters
    ----------
    frequencies : Mapping or iterable of sequences
        Words to be inserted, mapped to their frequencies.
        A plain iterable of words weights all words equally.

    Returns
    -------
    Generator
        Yield each word once.

    Notes
    -----
    Inserting the weighted median word first and then recursing into
    the words sorting before and after it keeps left and right chains
    short, with frequent words closer to the root. The tree is not
    rebalanced afterwards, later insertions go wherever they fall.
    """
    if not isinstance(frequencies, Mapping):
        frequencies = dict.fromkeys(frequencies, 1)

    words = sorted(frequencies.keys())
    if not words:
        return

    weights = np.array([frequencies[word] for word in words], dtype=float)
    total = weights.sum()
    if total <= 0:
        msg = f"Total frequency must be positive, got {total}!"
        raise ValueError(msg)

    for idx in recursive_median(weights / total):
        yield words[idx]
