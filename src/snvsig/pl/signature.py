"""Plot mutation signature charts."""

import matplotlib.pyplot as plt
import matplotlib.patches as patches
import numpy as np
from matplotlib.figure import Figure
from typing import Optional, Tuple

from ..pp.table import SignatureTable
from ..tl.chart import ChartSpec, build_chart
from ..utils.constants import BASES, CONTEXTS, CONTEXT_COLORS, DEFAULT_TITLE


def signature(
    signature_table: SignatureTable,
    title: str = DEFAULT_TITLE,
    outpath: Optional[str] = None,
    figsize: Tuple[float, float] = (12, 4),
    dpi: int = 300,
    verbose: bool = False,
    type_key: str = "mutation_type",
    proportion_key: str = "proportion"
) -> Figure:
    """
    Plot a 96-channel mutation signature as a faceted bar chart.

    Shorthand for :func:`snvsig.tl.build_chart` followed by :func:`render_chart`.

    Parameters
    ----------
    signature_table : pd.DataFrame, pd.Series, mapping or iterable
        Table with mutation types (X[Y>Z]W) and proportions
    title : str, default 'Signature'
        Plot title
    outpath : str, optional
        Path to save figure. The figure is closed after saving.
    figsize : tuple, default (12, 4)
        Figure size
    dpi : int, default 300
        DPI for saved figure
    verbose : bool, default False
        Print the output path after saving
    type_key, proportion_key : str
        Column/field names of the table

    Returns
    -------
    matplotlib.figure.Figure

    Examples
    --------
    >>> import pandas as pd
    >>> import snvsig as ss
    >>> table = pd.read_csv('SBS1.tsv', sep='\\t')
    >>> ss.pl.signature(table, title='SBS1', outpath='figures/SBS1.png')
    >>>
    >>> # Rescale raw counts before plotting
    >>> ss.pl.signature(ss.tl.to_proportions(counts), title='Sample 1')
    """
    chart = build_chart(signature_table, title=title, type_key=type_key, proportion_key=proportion_key)
    return render_chart(chart, outpath=outpath, figsize=figsize, dpi=dpi, verbose=verbose)


def render_chart(
    chart: ChartSpec,
    outpath: Optional[str] = None,
    figsize: Tuple[float, float] = (12, 4),
    dpi: int = 300,
    verbose: bool = False
) -> Figure:
    """
    Draw a chart specification with matplotlib.

    One subplot per panel, sharing the y axis. Decorations are drawn only
    where the chart's ``show_*`` flags allow them.

    Parameters
    ----------
    chart : ChartSpec
        Output of :func:`snvsig.tl.build_chart`
    outpath : str, optional
        Path to save figure. The figure is closed after saving.
    figsize : tuple, default (12, 4)
        Figure size
    dpi : int, default 300
        DPI for saved figure
    verbose : bool, default False
        Print the output path after saving

    Returns
    -------
    matplotlib.figure.Figure
    """
    n_panels = max(len(chart.panels), 1)
    fig, axes = plt.subplots(1, n_panels, figsize=figsize, sharey=True, squeeze=False)
    axes = axes[0]
    if chart.title:
        fig.suptitle(chart.title, fontsize=16, fontweight='bold')

    y_min, y_max = chart.y_range

    for col, panel in enumerate(chart.panels):
        ax = axes[col]

        n_slots = max((bar.x for bar in panel.bars), default=-1) + 1
        for bar in panel.bars:
            bottom = 0.0
            for segment in bar.segments or (bar.height,):
                ax.bar(bar.x, segment, width=bar.width, bottom=bottom, color=bar.color, edgecolor='none')
                bottom += segment

        # Facet strip
        strip_box = dict(facecolor='#D9D9D9', edgecolor='none') if chart.show_strip_background else None
        ax.set_title(panel.base_change, fontsize=12, bbox=strip_box)

        # Style
        ax.set_xlim(-0.5, max(n_slots, 1) - 0.5)
        ax.set_ylim(y_min, y_max)

        x_pos = np.arange(n_slots)
        slot_labels = {bar.x: bar.context for bar in panel.bars}
        ax.set_xticks(x_pos)
        ax.set_xticklabels([slot_labels[x] for x in x_pos], rotation=90, fontsize=7)
        ax.tick_params(axis='x', bottom=chart.show_x_ticks, labelbottom=chart.show_x_text)
        ax.spines['top'].set_visible(False)
        ax.spines['right'].set_visible(False)

    if not chart.panels:
        axes[0].set_ylim(y_min, y_max)
        axes[0].set_xticks([])

    # Y-label only on first subplot
    axes[0].set_ylabel(chart.y_label, fontsize=12)

    if chart.show_x_title:
        fig.supxlabel("Context")

    if chart.show_legend:
        handles = [patches.Patch(color=color, label=context) for context, color in chart.palette.items()]
        fig.legend(handles=handles, loc='center right', fontsize=7, frameon=False)

    fig.tight_layout()

    if outpath:
        _save(fig, outpath, dpi, verbose)

    return fig


def context_legend(
    outpath: Optional[str] = None,
    figsize: Tuple[float, float] = (3, 3),
    dpi: int = 300,
    verbose: bool = False
) -> Figure:
    """
    Plot the flanking context colour key shown next to signature charts.

    Swatches form a 4x4 grid: rows are the 5' base, columns the 3' base.

    Parameters
    ----------
    outpath : str, optional
        Path to save figure. The figure is closed after saving.
    figsize : tuple, default (3, 3)
        Figure size
    dpi : int, default 300
        DPI for saved figure
    verbose : bool, default False
        Print the output path after saving

    Returns
    -------
    matplotlib.figure.Figure
    """
    fig, ax = plt.subplots(figsize=figsize)

    for i, context in enumerate(CONTEXTS):
        row, col = divmod(i, len(BASES))
        y = len(BASES) - 1 - row
        rect = patches.Rectangle(
            (col + 0.05, y + 0.05), 0.9, 0.9,
            linewidth=0, edgecolor='none', facecolor=CONTEXT_COLORS[context]
        )
        ax.add_patch(rect)
        ax.text(col + 0.5, y + 0.5, context, ha='center', va='center', fontsize=8)

    ax.set_xlim(0, len(BASES))
    ax.set_ylim(0, len(BASES))
    ax.set_xticks(np.arange(len(BASES)) + 0.5)
    ax.set_xticklabels(BASES)
    ax.set_yticks(np.arange(len(BASES)) + 0.5)
    ax.set_yticklabels(BASES[::-1])
    ax.set_xlabel("3' base")
    ax.set_ylabel("5' base")
    ax.tick_params(length=0)
    for spine in ax.spines.values():
        spine.set_visible(False)
    ax.set_aspect('equal')

    fig.tight_layout()

    if outpath:
        _save(fig, outpath, dpi, verbose)

    return fig


def _save(fig: Figure, outpath: str, dpi: int, verbose: bool) -> None:
    fig.savefig(outpath, dpi=dpi, bbox_inches='tight')
    plt.close(fig)
    if verbose:
        print(f"Saved: {outpath}")
