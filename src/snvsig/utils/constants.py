"""Constants used throughout snvsig."""

from matplotlib.colors import hsv_to_rgb, to_hex

BASE_CHANGES = ['C>A', 'C>G', 'C>T', 'T>A', 'T>C', 'T>G']

BASES = ["A", "C", "G", "T"]

# 16 flanking contexts in palette order, grouped by 5' base
CONTEXTS = [f"{b5}-{b3}" for b5 in BASES for b3 in BASES]

# One hue per 5' base, saturation ramp over the 3' base
CONTEXT_HUES = [0.0, 0.3, 0.6, 0.9]
CONTEXT_SATURATIONS = [0.1, 0.2, 0.5, 1.0]
CONTEXT_VALUE = 0.8

CONTEXT_COLORS = {
    context: to_hex(tuple(hsv_to_rgb((CONTEXT_HUES[i // 4], CONTEXT_SATURATIONS[i % 4], CONTEXT_VALUE))))
    for i, context in enumerate(CONTEXTS)
}

DEFAULT_TITLE = 'Signature'
Y_LABEL = 'Probability'
BAR_WIDTH = 0.75
Y_FLOOR = 0.2


def get_canonical_96_order():
    """
    Generate the canonical 96 mutation types used in COSMIC signatures.

    Returns 96 labels in the format X[Y>Z]W where Y is the reference
    pyrimidine (C or T), Z the alternate base and X, W the 5' and 3'
    flanking bases.

    Returns
    -------
    list of str
        List of 96 mutation types in canonical order

    Examples
    --------
    >>> labels = get_canonical_96_order()
    >>> len(labels)
    96
    >>> labels[0]
    'A[C>A]A'
    """
    return [f"{b5}[{change}]{b3}" for change in BASE_CHANGES for b5 in BASES for b3 in BASES]
