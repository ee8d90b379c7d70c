import pytest

from homeowner_matching.normalize import (
    ABBREVIATIONS,
    DIRECTIONAL_ABBREVIATIONS,
    STREET_TYPE_ABBREVIATIONS,
    clean_address_text,
    normalize_address,
)


def test_normalize_lowercases_and_folds_street_type():
    assert normalize_address("123 MAIN STREET") == "123 main st"


def test_normalize_trims_and_collapses_whitespace():
    assert normalize_address("  123 Main St  ") == "123 main st"
    assert normalize_address("123    Main \t  St") == "123 main st"


def test_normalize_strips_punctuation():
    assert normalize_address("123, Main St.") == "123 main st"
    assert normalize_address("123 Main St #5") == "123 main st 5"


def test_normalize_separates_unit_number_from_preceding_token():
    assert normalize_address("123 Main St#5") == "123 main st 5"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("123 Main Street", "123 main st"),
        ("123 Main Avenue", "123 main ave"),
        ("123 Main Road", "123 main rd"),
        ("123 Main Drive", "123 main dr"),
        ("123 Main Court", "123 main ct"),
        ("123 Main Lane", "123 main ln"),
        ("123 Main Boulevard", "123 main blvd"),
        ("9 Harbor Circle", "9 harbor cir"),
        ("9 Harbor Place", "9 harbor pl"),
    ],
)
def test_normalize_street_types(raw, expected):
    assert normalize_address(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("123 North Main St", "123 n main st"),
        ("123 South Main St", "123 s main st"),
        ("123 East Main St", "123 e main st"),
        ("123 West Main St", "123 w main st"),
        ("123 Northeast Main St", "123 ne main st"),
        ("123 Southwest Main St", "123 sw main st"),
    ],
)
def test_normalize_directionals(raw, expected):
    assert normalize_address(raw) == expected


def test_normalize_only_matches_whole_words():
    assert normalize_address("4 Westminster Northway") == "4 westminster northway"
    assert normalize_address("10 Eastwood Streetcar Lane") == "10 eastwood streetcar ln"


def test_trailing_punctuation_does_not_block_abbreviation():
    assert normalize_address("Main Street, Springfield") == "main st springfield"
    assert normalize_address("77 Sunset Boulevard.") == "77 sunset blvd"


def test_normalize_unit_designators():
    assert normalize_address("9 Elm Road Suite 200") == "9 elm rd ste 200"


def test_normalize_complex_transcribed_address():
    assert normalize_address("  123, North Main Street, Apt. #5  ") == "123 n main st apt 5"


@pytest.mark.parametrize("raw", ["", None])
def test_normalize_empty_input(raw):
    assert normalize_address(raw) == ""
    assert clean_address_text(raw) == ""


@pytest.mark.parametrize(
    "raw",
    [
        "123 Main Street",
        "  123, North Main Street, Apt. #5  ",
        "4500 SOUTHWEST Parkway Suite 12",
        "1 st",
        "n. e. 5th ave.",
        "",
        "#",
    ],
)
def test_normalize_is_idempotent(raw):
    once = normalize_address(raw)
    assert normalize_address(once) == once


def test_abbreviations_are_not_table_keys():
    assert not set(ABBREVIATIONS.values()) & set(ABBREVIATIONS)
    assert STREET_TYPE_ABBREVIATIONS["street"] == "st"
    assert DIRECTIONAL_ABBREVIATIONS["northwest"] == "nw"
