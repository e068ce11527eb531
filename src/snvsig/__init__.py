"""
snvsig: Mutation signature charts

A scanpy-style API for turning 96-channel single base substitution
signatures into faceted bar charts.

The API is organized into three modules:
- pp: Preprocessing (reading and completing signature tables)
- tl: Tools (chart specifications, proportion scaling)
- pl: Plotting (matplotlib rendering)

Data structure:
- A signature table has a 'mutation_type' field (labels like 'A[C>T]G')
  and a 'proportion' field (finite, non-negative numbers)

Example usage:
    import pandas as pd
    import snvsig as ss

    # Preprocessing
    table = ss.pp.complete_catalog(pd.read_csv('signature.tsv', sep='\\t'))

    # Tools
    chart = ss.tl.build_chart(table, title='SBS1')

    # Plotting
    ss.pl.render_chart(chart, outpath='SBS1.png')
    ss.pl.context_legend(outpath='legend.png')
"""

from importlib.metadata import version

from . import pl, pp, tl, utils
from .utils.context import InputFormatError

__all__ = ["pl", "pp", "tl", "utils", "InputFormatError"]

__version__ = version("snvsig")
