"""Build faceted bar chart specifications from signature tables."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from ..pp.table import SignatureTable, to_entries
from ..utils.constants import (
    BAR_WIDTH,
    BASE_CHANGES,
    CONTEXTS,
    CONTEXT_COLORS,
    DEFAULT_TITLE,
    Y_FLOOR,
    Y_LABEL,
)
from ..utils.context import context_color, parse_mutation_type


@dataclass(frozen=True)
class ChartBar:
    """A single bar within a panel."""

    context: str
    """Flanking context, e.g. 'A-T'."""

    mutation_type: str
    """Source label, e.g. 'A[C>A]T'."""

    x: int
    """Slot index within the panel."""

    height: float
    width: float
    color: str

    segments: tuple[float, ...] = ()
    """Proportions stacked within the bar, one per table row with this mutation type."""


@dataclass(frozen=True)
class ChartPanel:
    """Bars sharing one base change class."""

    base_change: str
    bars: tuple[ChartBar, ...]


@dataclass(frozen=True)
class ChartSpec:
    """
    Renderer-independent description of a signature bar chart.

    Panels are facets keyed by base change; every bar is coloured by its
    flanking context using ``palette``. The ``show_*`` flags list which
    decorations a renderer should draw.
    """

    title: str
    panels: tuple[ChartPanel, ...]
    y_range: tuple[float, float]
    y_label: str = Y_LABEL
    bar_width: float = BAR_WIDTH
    palette: Mapping[str, str] = field(default_factory=lambda: MappingProxyType(dict(CONTEXT_COLORS)), compare=False)
    show_x_text: bool = False
    show_x_ticks: bool = False
    show_x_title: bool = False
    show_strip_background: bool = False
    show_legend: bool = False

    @property
    def base_changes(self) -> list[str]:
        return [panel.base_change for panel in self.panels]

    @property
    def n_bars(self) -> int:
        return sum(len(panel.bars) for panel in self.panels)


def build_chart(
    signature_table: SignatureTable,
    title: str = DEFAULT_TITLE,
    type_key: str = "mutation_type",
    proportion_key: str = "proportion"
) -> ChartSpec:
    """
    Build a bar chart specification for a 96-channel mutation signature.

    Each mutation type X[Y>Z]W is split into a flanking context ('X-W') and
    a base change ('Y>Z'). Bars are grouped into one panel per base change
    and coloured by context.

    Parameters
    ----------
    signature_table : pd.DataFrame, pd.Series, mapping or iterable
        Signature table with mutation types and proportions, in any form
        accepted by :func:`snvsig.pp.to_entries`. May be sparse.
    title : str, default 'Signature'
        Chart title
    type_key : str, default 'mutation_type'
        Column/field holding the mutation type label
    proportion_key : str, default 'proportion'
        Column/field holding the proportion

    Returns
    -------
    ChartSpec
        Immutable chart description. Render it with :func:`snvsig.pl.render_chart`.

    Raises
    ------
    InputFormatError
        If any mutation type is malformed or any proportion is negative,
        infinite or NaN. No partial chart is produced.

    Examples
    --------
    >>> import snvsig as ss
    >>> table = {label: 1 / 96 for label in ss.utils.get_canonical_96_order()}
    >>> chart = ss.tl.build_chart(table, title='Flat')
    >>> chart.base_changes
    ['C>A', 'C>G', 'C>T', 'T>A', 'T>C', 'T>G']
    >>> chart.y_range
    (0.0, 0.2)

    Notes
    -----
    - The y axis never shrinks below ``Y_FLOOR`` (0.2), so charts of
      different signatures stay comparable.
    - Proportions are drawn as given; they are not required to sum to 1.
      Use :func:`snvsig.tl.to_proportions` first to rescale.
    - Panels follow the canonical base change order and only include base
      changes present in the table. Bars within a panel follow the palette's
      context order. Duplicated mutation types share one bar: each row
      becomes a stacked segment and the bar height is their sum. The y axis
      still follows the largest single proportion, so such a bar may be
      clipped.
    """
    entries = to_entries(signature_table, type_key=type_key, proportion_key=proportion_key)

    # Group by base change
    grouped = {}
    for entry in entries:
        context, base_change = parse_mutation_type(entry.mutation_type)
        grouped.setdefault(base_change, []).append((context, entry))

    panels = []
    for base_change in BASE_CHANGES:
        if base_change not in grouped:
            continue

        # One bar per distinct context
        by_context = {}
        for context, entry in grouped[base_change]:
            by_context.setdefault(context, []).append(entry)

        bars = tuple(
            ChartBar(
                context=context,
                mutation_type=by_context[context][0].mutation_type,
                x=x,
                height=sum(entry.proportion for entry in by_context[context]),
                width=BAR_WIDTH,
                color=context_color(context),
                segments=tuple(entry.proportion for entry in by_context[context]),
            )
            for x, context in enumerate(sorted(by_context, key=CONTEXTS.index))
        )
        panels.append(ChartPanel(base_change=base_change, bars=bars))

    y_max = max([Y_FLOOR] + [entry.proportion for entry in entries])

    return ChartSpec(
        title=title,
        panels=tuple(panels),
        y_range=(0.0, y_max),
    )
