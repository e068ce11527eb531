"""Read caller tables into validated signature entries."""

import math
import numbers
import warnings
from collections import Counter
from collections.abc import Iterable, Mapping
from typing import List, NamedTuple, Union

import pandas as pd

from ..utils.constants import get_canonical_96_order
from ..utils.context import InputFormatError, parse_mutation_type, mutation_type_from_spectrum_label


class SignatureEntry(NamedTuple):
    """One row of a signature table."""

    mutation_type: str
    proportion: float


SignatureTable = Union[pd.DataFrame, pd.Series, Mapping, Iterable]


def to_entries(
    signature_table: SignatureTable,
    type_key: str = "mutation_type",
    proportion_key: str = "proportion"
) -> List[SignatureEntry]:
    """
    Convert a signature table into an ordered list of validated entries.

    Parameters
    ----------
    signature_table : pd.DataFrame, pd.Series, mapping or iterable
        - DataFrame with a mutation type column and a proportion column
        - Series indexed by mutation type
        - Mapping of mutation type to proportion
        - Iterable of row mappings or (mutation_type, proportion) pairs
    type_key : str, default 'mutation_type'
        Column/field holding the X[Y>Z]W label
    proportion_key : str, default 'proportion'
        Column/field holding the proportion

    Returns
    -------
    list of SignatureEntry
        Entries in input order

    Raises
    ------
    InputFormatError
        If any label is malformed or any proportion is negative, non-finite
        or not a number.

    Examples
    --------
    >>> import snvsig as ss
    >>> ss.pp.to_entries({'A[C>A]A': 0.5, 'A[C>A]C': 0.5})
    [SignatureEntry(mutation_type='A[C>A]A', proportion=0.5), SignatureEntry(mutation_type='A[C>A]C', proportion=0.5)]

    Notes
    -----
    Duplicated mutation types are kept (with a warning). Proportions are
    never renormalised or coerced; missing values are rejected rather than
    treated as zero.
    """
    entries = [
        SignatureEntry(_check_mutation_type(mutation_type), _check_proportion(mutation_type, proportion))
        for mutation_type, proportion in _iter_rows(signature_table, type_key, proportion_key)
    ]

    duplicates = [label for label, count in Counter(e.mutation_type for e in entries).items() if count > 1]
    if duplicates:
        warnings.warn(
            f"Found {len(duplicates)} duplicated mutation types in signature table "
            f"(e.g. {duplicates[0]}). All occurrences are kept.",
            UserWarning,
            stacklevel=2,
        )

    return entries


def complete_catalog(
    signature_table: SignatureTable,
    fill_value: float = 0.0,
    type_key: str = "mutation_type",
    proportion_key: str = "proportion"
) -> pd.DataFrame:
    """
    Join a sparse catalog against the full 96 mutation type template.

    Parameters
    ----------
    signature_table : pd.DataFrame, pd.Series, mapping or iterable
        Observed catalog, in any form accepted by :func:`to_entries`
    fill_value : float, default 0.0
        Proportion assigned to mutation types absent from the catalog
    type_key, proportion_key : str
        Field names, see :func:`to_entries`

    Returns
    -------
    pd.DataFrame
        96 rows in canonical order with columns 'mutation_type' and 'proportion'

    Examples
    --------
    >>> import snvsig as ss
    >>> catalog = ss.pp.complete_catalog({'T[C>T]G': 12, 'A[C>T]G': 3})
    >>> catalog.shape
    (96, 2)

    Notes
    -----
    Duplicated mutation types are summed.
    """
    fill_value = _check_proportion("<fill_value>", fill_value)
    entries = to_entries(signature_table, type_key=type_key, proportion_key=proportion_key)

    observed = {}
    for entry in entries:
        observed[entry.mutation_type] = observed.get(entry.mutation_type, 0.0) + entry.proportion

    canonical = get_canonical_96_order()
    return pd.DataFrame({
        "mutation_type": canonical,
        "proportion": [observed.get(label, fill_value) for label in canonical],
    })


def from_spectrum(spectrum: pd.Series) -> pd.DataFrame:
    """
    Convert a 96-context spectrum keyed by XYZ>XWZ labels into a signature table.

    Parameters
    ----------
    spectrum : pd.Series
        Values indexed by spectrum labels such as 'ACA>AAA'

    Returns
    -------
    pd.DataFrame
        Columns 'mutation_type' (X[Y>Z]W labels) and 'proportion', in input order

    Examples
    --------
    >>> import pandas as pd
    >>> import snvsig as ss
    >>> ss.pp.from_spectrum(pd.Series({'ACA>AAA': 0.1})).iloc[0].tolist()
    ['A[C>A]A', 0.1]
    """
    if not isinstance(spectrum, pd.Series):
        raise TypeError(f"spectrum must be pd.Series, got {type(spectrum)}")

    mutation_types = [mutation_type_from_spectrum_label(label) for label in spectrum.index]
    proportions = [_check_proportion(label, value) for label, value in zip(mutation_types, spectrum.tolist())]
    return pd.DataFrame({"mutation_type": mutation_types, "proportion": proportions})


def _iter_rows(signature_table, type_key, proportion_key):
    """Yield (mutation_type, proportion) pairs from any supported table form."""
    if isinstance(signature_table, pd.DataFrame):
        missing = [key for key in (type_key, proportion_key) if key not in signature_table.columns]
        if missing:
            raise ValueError(
                f"Signature table is missing columns {missing}. "
                f"Available columns: {list(signature_table.columns)}"
            )
        duplicated = [key for key in (type_key, proportion_key) if (signature_table.columns == key).sum() > 1]
        if duplicated:
            raise ValueError(f"Signature table has duplicated columns {duplicated}")
        yield from zip(signature_table[type_key].tolist(), signature_table[proportion_key].tolist())
    elif isinstance(signature_table, pd.Series):
        yield from zip(signature_table.index.tolist(), signature_table.tolist())
    elif isinstance(signature_table, Mapping):
        yield from signature_table.items()
    elif isinstance(signature_table, Iterable) and not isinstance(signature_table, (str, bytes)):
        for row in signature_table:
            if isinstance(row, Mapping):
                try:
                    yield row[type_key], row[proportion_key]
                except KeyError as e:
                    raise InputFormatError(f"Signature table row {row!r} is missing field {e}") from None
            elif isinstance(row, (tuple, list)) and len(row) == 2:
                yield row[0], row[1]
            else:
                raise InputFormatError(
                    f"Signature table row {row!r} must be a mapping or a (mutation_type, proportion) pair"
                )
    else:
        raise TypeError(
            f"signature_table must be a pd.DataFrame, pd.Series, mapping or iterable of rows, "
            f"got {type(signature_table)}"
        )


def _check_mutation_type(mutation_type):
    parse_mutation_type(mutation_type)
    return mutation_type


def _check_proportion(mutation_type, proportion):
    if isinstance(proportion, bool) or not isinstance(proportion, numbers.Real):
        raise InputFormatError(f"Proportion for {mutation_type!r} must be a number, got {proportion!r}")
    proportion = float(proportion)
    if not math.isfinite(proportion):
        raise InputFormatError(f"Proportion for {mutation_type!r} must be finite, got {proportion}")
    if proportion < 0:
        raise InputFormatError(f"Proportion for {mutation_type!r} must be non-negative, got {proportion}")
    return proportion
