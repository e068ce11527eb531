"""Plotting functions for snvsig."""

from .signature import signature, render_chart, context_legend

__all__ = [
    'signature',
    'render_chart',
    'context_legend'
]
