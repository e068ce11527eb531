"""Rescale signature tables."""

import pandas as pd

from ..pp.table import SignatureTable, to_entries


def to_proportions(
    signature_table: SignatureTable,
    type_key: str = "mutation_type",
    proportion_key: str = "proportion"
) -> pd.DataFrame:
    """
    Rescale a signature table so its proportions sum to 1.

    Useful for raw mutation counts, or for exposures from an external
    fitting step that do not sum exactly to 1. Charts are drawn from the
    values as given, so call this first when a probability scale is wanted.

    Parameters
    ----------
    signature_table : pd.DataFrame, pd.Series, mapping or iterable
        Table in any form accepted by :func:`snvsig.pp.to_entries`
    type_key : str, default 'mutation_type'
        Column/field holding the mutation type label
    proportion_key : str, default 'proportion'
        Column/field holding the value to rescale

    Returns
    -------
    pd.DataFrame
        Columns 'mutation_type' and 'proportion', rows in input order

    Examples
    --------
    >>> import snvsig as ss
    >>> counts = {'T[C>T]G': 30, 'A[C>T]G': 10}
    >>> ss.tl.to_proportions(counts)['proportion'].tolist()
    [0.75, 0.25]

    Notes
    -----
    A table whose values are all zero is returned unchanged rather than
    filled with NaN.
    """
    entries = to_entries(signature_table, type_key=type_key, proportion_key=proportion_key)
    normalized_df = pd.DataFrame(entries, columns=["mutation_type", "proportion"])

    total = normalized_df["proportion"].sum()
    if total > 0:
        normalized_df["proportion"] = normalized_df["proportion"] / total

    return normalized_df
