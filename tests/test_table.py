import math

import numpy as np
import pandas as pd
import pytest

from snvsig import InputFormatError
from snvsig.pp import SignatureEntry, complete_catalog, from_spectrum, to_entries
from snvsig.utils import get_canonical_96_order


def test_to_entries_from_dataframe(flat_table):
    entries = to_entries(flat_table)
    assert len(entries) == 96
    assert entries[0] == SignatureEntry("A[C>A]A", 1 / 96)
    assert [e.mutation_type for e in entries] == get_canonical_96_order()


def test_to_entries_from_other_forms():
    expected = [SignatureEntry("A[C>A]A", 0.25), SignatureEntry("T[T>G]T", 0.75)]
    assert to_entries({"A[C>A]A": 0.25, "T[T>G]T": 0.75}) == expected
    assert to_entries(pd.Series({"A[C>A]A": 0.25, "T[T>G]T": 0.75})) == expected
    assert to_entries([("A[C>A]A", 0.25), ("T[T>G]T", 0.75)]) == expected
    assert to_entries([
        {"mutation_type": "A[C>A]A", "proportion": 0.25},
        {"mutation_type": "T[T>G]T", "proportion": 0.75},
    ]) == expected


def test_to_entries_custom_columns():
    df = pd.DataFrame({"MutationType": ["A[C>A]A"], "SBS1": [0.1]})
    assert to_entries(df, type_key="MutationType", proportion_key="SBS1") == [SignatureEntry("A[C>A]A", 0.1)]


def test_to_entries_accepts_numpy_and_int_values():
    entries = to_entries({"A[C>A]A": np.float32(0.5), "A[C>A]C": np.int64(3), "A[C>A]G": 0})
    assert [e.proportion for e in entries] == [0.5, 3.0, 0.0]
    assert all(isinstance(e.proportion, float) for e in entries)


def test_to_entries_missing_column():
    df = pd.DataFrame({"mutation_type": ["A[C>A]A"], "weight": [0.1]})
    with pytest.raises(ValueError, match="missing columns"):
        to_entries(df)


def test_to_entries_unsupported_type():
    with pytest.raises(TypeError):
        to_entries(42)
    with pytest.raises(TypeError):
        to_entries("A[C>A]A")


@pytest.mark.parametrize("value", [-0.1, math.inf, -math.inf, math.nan, None, "0.1", True])
def test_to_entries_rejects_bad_proportion(value):
    with pytest.raises(InputFormatError):
        to_entries({"A[C>A]A": value})


def test_to_entries_rejects_nan_in_dataframe():
    df = pd.DataFrame({"mutation_type": ["A[C>A]A", "A[C>A]C"], "proportion": [0.1, np.nan]})
    with pytest.raises(InputFormatError, match="finite"):
        to_entries(df)


def test_to_entries_rejects_bad_label():
    with pytest.raises(InputFormatError, match="XY"):
        to_entries({"A[C>A]A": 0.1, "XY[C>A]T": 0.2})


@pytest.mark.parametrize("row", [("A[C>A]A",), ("A[C>A]A", 0.1, 0.2), "A[C>A]A", {"mutation_type": "A[C>A]A"}])
def test_to_entries_rejects_bad_rows(row):
    with pytest.raises(InputFormatError):
        to_entries([row])


def test_to_entries_warns_on_duplicates():
    with pytest.warns(UserWarning, match="duplicated"):
        entries = to_entries([("A[C>A]A", 0.1), ("A[C>A]A", 0.2)])
    assert len(entries) == 2


def test_complete_catalog_fills_missing():
    catalog = complete_catalog({"T[C>T]G": 12, "A[C>T]G": 3})
    assert list(catalog.columns) == ["mutation_type", "proportion"]
    assert catalog["mutation_type"].tolist() == get_canonical_96_order()
    assert catalog["proportion"].sum() == 15
    assert catalog.set_index("mutation_type").loc["T[C>T]G", "proportion"] == 12
    assert (catalog["proportion"] == 0).sum() == 94


def test_complete_catalog_fill_value():
    catalog = complete_catalog({}, fill_value=0.5)
    assert (catalog["proportion"] == 0.5).all()
    with pytest.raises(InputFormatError):
        complete_catalog({}, fill_value=-1)


def test_complete_catalog_sums_duplicates():
    with pytest.warns(UserWarning):
        catalog = complete_catalog([("A[C>A]A", 0.1), ("A[C>A]A", 0.2)])
    assert catalog.loc[0, "proportion"] == pytest.approx(0.3)


def test_from_spectrum():
    spectrum = pd.Series({"ACA>AAA": 4.0, "TTG>TGG": 1.0})
    table = from_spectrum(spectrum)
    assert table["mutation_type"].tolist() == ["A[C>A]A", "T[T>G]G"]
    assert table["proportion"].tolist() == [4.0, 1.0]


def test_from_spectrum_rejects():
    with pytest.raises(TypeError):
        from_spectrum({"ACA>AAA": 1.0})
    with pytest.raises(InputFormatError):
        from_spectrum(pd.Series({"ACA>AAA": -1.0}))


def test_to_entries_rejects_duplicated_columns():
    df = pd.DataFrame([["A[C>A]A", 0.1, 0.2]], columns=["mutation_type", "proportion", "proportion"])
    with pytest.raises(ValueError, match="duplicated columns"):
        to_entries(df)
