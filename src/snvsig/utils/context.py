"""Mutation type label utilities."""

from typing import Tuple

from Bio.Seq import Seq

from .constants import BASES, BASE_CHANGES, CONTEXT_COLORS


class InputFormatError(ValueError):
    """Raised when a signature table entry is malformed."""


def reverse_complement(seq: str) -> str:
    """
    Return the reverse complement of a DNA sequence.

    Parameters
    ----------
    seq : str
        DNA sequence

    Returns
    -------
    str
        Reverse complement of input sequence

    Examples
    --------
    >>> reverse_complement('ATG')
    'CAT'
    """
    return str(Seq(seq).reverse_complement())


def parse_mutation_type(mutation_type: str) -> Tuple[str, str]:
    """
    Split a mutation type label into its flanking context and base change.

    Parameters
    ----------
    mutation_type : str
        Label of the form X[Y>Z]W, e.g. 'A[C>T]G'

    Returns
    -------
    tuple of (str, str)
        (context, base_change), e.g. ('A-G', 'C>T')

    Raises
    ------
    InputFormatError
        If the label does not follow the X[Y>Z]W grammar or names a base
        change outside the six pyrimidine-centred classes.

    Examples
    --------
    >>> parse_mutation_type('A[C>T]G')
    ('A-G', 'C>T')
    """
    if not isinstance(mutation_type, str):
        raise InputFormatError(f"Mutation type must be a string, got {type(mutation_type).__name__}: {mutation_type!r}")

    flank_5, sep, rest = mutation_type.partition("[")
    if not sep:
        raise InputFormatError(f"Invalid mutation type {mutation_type!r}: missing '['")
    change, sep, flank_3 = rest.partition("]")
    if not sep:
        raise InputFormatError(f"Invalid mutation type {mutation_type!r}: missing ']'")

    if len(flank_5) != 1 or flank_5 not in BASES:
        raise InputFormatError(f"Invalid mutation type {mutation_type!r}: 5' flank must be one of {BASES}")
    if len(flank_3) != 1 or flank_3 not in BASES:
        raise InputFormatError(f"Invalid mutation type {mutation_type!r}: 3' flank must be one of {BASES}")

    ref_base, sep, alt_base = change.partition(">")
    if not sep:
        raise InputFormatError(f"Invalid mutation type {mutation_type!r}: missing '>' in base change")
    base_change = f"{ref_base}>{alt_base}"
    if base_change not in BASE_CHANGES:
        raise InputFormatError(
            f"Invalid mutation type {mutation_type!r}: base change must be one of {', '.join(BASE_CHANGES)}"
        )

    return f"{flank_5}-{flank_3}", base_change


def context_color(context: str) -> str:
    """Return the palette colour for a flanking context such as 'A-T'."""
    try:
        return CONTEXT_COLORS[context]
    except KeyError:
        raise InputFormatError(f"Unknown flanking context {context!r}") from None


def mutation_type_from_trinuc(ref_trinuc: str, alt_base: str) -> str:
    """
    Build a pyrimidine-based mutation type label from a trinucleotide substitution.

    If the central base is a purine (A/G), reverse complements both the
    trinucleotide and alt so the label always reports a C or T reference.

    Parameters
    ----------
    ref_trinuc : str
        Reference trinucleotide context (e.g., 'TCG')
    alt_base : str
        Alternate allele base (e.g., 'T')

    Returns
    -------
    str
        Mutation type label (e.g., 'T[C>T]G')

    Examples
    --------
    >>> mutation_type_from_trinuc('TCG', 'T')
    'T[C>T]G'
    >>> mutation_type_from_trinuc('AGT', 'C')  # G is purine, gets flipped to C
    'A[C>G]T'
    """
    ref_trinuc = ref_trinuc.upper()
    alt_base = alt_base.upper()
    if len(ref_trinuc) != 3 or any(b not in BASES for b in ref_trinuc):
        raise InputFormatError(f"Invalid reference trinucleotide: {ref_trinuc!r}")
    if len(alt_base) != 1 or alt_base not in BASES or alt_base == ref_trinuc[1]:
        raise InputFormatError(f"Invalid alternate base {alt_base!r} for trinucleotide {ref_trinuc!r}")

    if ref_trinuc[1] in "AG":
        ref_trinuc = reverse_complement(ref_trinuc)
        alt_base = reverse_complement(alt_base)
    return f"{ref_trinuc[0]}[{ref_trinuc[1]}>{alt_base}]{ref_trinuc[2]}"


def mutation_type_from_spectrum_label(label: str) -> str:
    """
    Convert a spectrum key in XYZ>XWZ form to an X[Y>W]Z mutation type.

    Examples
    --------
    >>> mutation_type_from_spectrum_label('ACA>AAA')
    'A[C>A]A'
    """
    if not isinstance(label, str) or len(label) != 7 or label[3] != ">":
        raise InputFormatError(f"Invalid spectrum label: {label!r}")
    if label[0] != label[4] or label[2] != label[6]:
        raise InputFormatError(f"Invalid spectrum label {label!r}: flanking bases differ between ref and alt")

    mutation_type = f"{label[0]}[{label[1]}>{label[5]}]{label[2]}"
    parse_mutation_type(mutation_type)
    return mutation_type
