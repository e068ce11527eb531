"""Preprocessing functions for snvsig."""

from .table import SignatureEntry, to_entries, complete_catalog, from_spectrum

__all__ = [
    'SignatureEntry',
    'to_entries',
    'complete_catalog',
    'from_spectrum'
]
