import pytest

from contactbook.errors import IdentifierConflict, InvalidContact, InvalidIdentifier
from contactbook.models import Contact
from contactbook.validation import check_identifier_match, validate_contact, validate_identifier


@pytest.mark.parametrize("contact_id", ["c1", "alice.smith", "Имя", "a b", "con-1"])
def test_valid_identifiers_pass(contact_id: str) -> None:
    validate_identifier(contact_id)


@pytest.mark.parametrize(
    "contact_id",
    ["", ".", "..", ".hidden", "../etc", "a/b", "a\\b", "a:b", "a\x00b", "CON", "nul", "Lpt1", "x" * 201],
)
def test_unsafe_identifiers_are_rejected(contact_id: str) -> None:
    with pytest.raises(InvalidIdentifier):
        validate_identifier(contact_id)


def test_matching_identifiers_pass() -> None:
    check_identifier_match("a", Contact(id="a"))


def test_mismatched_identifiers_conflict() -> None:
    with pytest.raises(IdentifierConflict) as exc_info:
        check_identifier_match("a", Contact(id="b"))

    assert exc_info.value.target_id == "a"
    assert exc_info.value.body_id == "b"


@pytest.mark.parametrize("field", ["name", "email", "phone"])
def test_line_breaks_in_fields_are_rejected(field: str) -> None:
    contact = Contact(id="c1", **{field: "one\ntwo"})

    with pytest.raises(InvalidContact):
        validate_contact(contact)


def test_validate_contact_checks_identifier() -> None:
    with pytest.raises(InvalidIdentifier):
        validate_contact(Contact(id="../c1", name="Alice"))
