from collections import Counter

import pytest
from matplotlib.colors import rgb_to_hsv, to_rgb

from snvsig import InputFormatError
from snvsig.utils import (
    BASE_CHANGES,
    CONTEXTS,
    CONTEXT_COLORS,
    context_color,
    get_canonical_96_order,
    mutation_type_from_spectrum_label,
    mutation_type_from_trinuc,
    parse_mutation_type,
    reverse_complement,
)


def test_canonical_order():
    labels = get_canonical_96_order()
    assert len(labels) == 96
    assert len(set(labels)) == 96
    assert labels[0] == "A[C>A]A"
    assert labels[-1] == "T[T>G]T"


def test_parse_mutation_type():
    assert parse_mutation_type("A[C>T]G") == ("A-G", "C>T")
    assert parse_mutation_type("T[T>A]C") == ("T-C", "T>A")


def test_all_labels_parse_to_distinct_pairs():
    parsed = [parse_mutation_type(label) for label in get_canonical_96_order()]
    assert len(set(parsed)) == 96
    assert {base_change for _, base_change in parsed} == set(BASE_CHANGES)
    assert {context for context, _ in parsed} == set(CONTEXTS)


def test_grouping_sizes():
    parsed = [parse_mutation_type(label) for label in get_canonical_96_order()]
    by_change = Counter(base_change for _, base_change in parsed)
    by_context = Counter(context for context, _ in parsed)
    assert len(by_change) == 6
    assert set(by_change.values()) == {16}
    assert len(by_context) == 16
    assert set(by_context.values()) == {6}


@pytest.mark.parametrize(
    "label",
    [
        "XY[C>A]T",
        "C[CA]T",
        "C[C>A]",
        "[C>A]T",
        "C[C>A]TT",
        "CC>A]T",
        "C[C>AT",
        "N[C>A]T",
        "A[G>A]T",
        "A[C>C]T",
        "a[c>a]t",
        "",
    ],
)
def test_parse_rejects_malformed(label):
    with pytest.raises(InputFormatError):
        parse_mutation_type(label)


def test_parse_rejects_non_string():
    with pytest.raises(InputFormatError):
        parse_mutation_type(None)


def test_input_format_error_is_value_error():
    with pytest.raises(ValueError):
        parse_mutation_type("C[CA]T")


def test_palette_blocks():
    assert list(CONTEXT_COLORS) == CONTEXTS
    hsv = {context: rgb_to_hsv(to_rgb(color)) for context, color in CONTEXT_COLORS.items()}

    for i in range(4):
        block = CONTEXTS[i * 4:(i + 1) * 4]
        saturations = [hsv[context][1] for context in block]
        assert saturations == sorted(saturations)
        assert len(set(saturations)) == 4
        for context in block:
            assert hsv[context][2] == pytest.approx(0.8, abs=0.01)

    # Fully saturated swatches carry the block hue
    hues = [hsv[CONTEXTS[i * 4 + 3]][0] for i in range(4)]
    assert hues == pytest.approx([0.0, 0.3, 0.6, 0.9], abs=0.01)


def test_context_color():
    assert context_color("A-T") == CONTEXT_COLORS["A-T"]
    with pytest.raises(InputFormatError):
        context_color("AT")


def test_reverse_complement():
    assert reverse_complement("ATG") == "CAT"


def test_mutation_type_from_trinuc():
    assert mutation_type_from_trinuc("TCG", "T") == "T[C>T]G"
    assert mutation_type_from_trinuc("AGT", "C") == "A[C>G]T"
    assert mutation_type_from_trinuc("tca", "g") == "T[C>G]A"


@pytest.mark.parametrize("trinuc,alt", [("TC", "T"), ("TNG", "T"), ("TCG", "C"), ("TCG", "TT")])
def test_mutation_type_from_trinuc_rejects(trinuc, alt):
    with pytest.raises(InputFormatError):
        mutation_type_from_trinuc(trinuc, alt)


def test_mutation_type_from_spectrum_label():
    assert mutation_type_from_spectrum_label("ACA>AAA") == "A[C>A]A"
    assert mutation_type_from_spectrum_label("TTG>TGG") == "T[T>G]G"


@pytest.mark.parametrize("label", ["ACA>CAA", "ACAAAA", "AGA>AAA", "ACA>AAAA"])
def test_mutation_type_from_spectrum_label_rejects(label):
    with pytest.raises(InputFormatError):
        mutation_type_from_spectrum_label(label)
