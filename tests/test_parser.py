from homeowner_matching.parser import extract_street_name, extract_street_number


def test_extract_street_number():
    assert extract_street_number("123 Main St") == "123"
    assert extract_street_number("456 Oak Ave") == "456"
    assert extract_street_number("12B Elm St") == "12"


def test_extract_street_number_missing():
    assert extract_street_number("Main Street") is None
    assert extract_street_number("") is None
    assert extract_street_number(None) is None


def test_extract_street_number_does_not_trim_raw_text():
    assert extract_street_number("  12 Elm St") is None


def test_extract_street_name_drops_number():
    name = extract_street_name("123 Main St")
    assert "123" not in name
    assert name == "main st"


def test_extract_street_name_is_normalized():
    assert extract_street_name("123 North Main Street, Apt. #5") == "n main st apt 5"
    assert extract_street_name("Main Street") == "main st"


def test_extract_street_name_empty():
    assert extract_street_name("") == ""
    assert extract_street_name("123") == ""
