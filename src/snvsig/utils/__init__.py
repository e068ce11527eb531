"""Utility functions and constants for snvsig."""

from .constants import (
    BASE_CHANGES,
    BASES,
    CONTEXTS,
    CONTEXT_COLORS,
    get_canonical_96_order
)

from .context import (
    InputFormatError,
    reverse_complement,
    parse_mutation_type,
    context_color,
    mutation_type_from_trinuc,
    mutation_type_from_spectrum_label
)

__all__ = [
    'BASE_CHANGES',
    'BASES',
    'CONTEXTS',
    'CONTEXT_COLORS',
    'get_canonical_96_order',
    'InputFormatError',
    'reverse_complement',
    'parse_mutation_type',
    'context_color',
    'mutation_type_from_trinuc',
    'mutation_type_from_spectrum_label'
]
