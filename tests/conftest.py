import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import pytest

from snvsig.utils import get_canonical_96_order


@pytest.fixture
def flat_table():
    """All 96 mutation types at 1/96."""
    labels = get_canonical_96_order()
    return pd.DataFrame({"mutation_type": labels, "proportion": [1 / 96] * len(labels)})


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
