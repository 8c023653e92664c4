import pytest

from contactbook import vcard
from contactbook.errors import EmptyInput, MissingIdentifier
from contactbook.models import Contact


def test_encode_emits_fields_in_fixed_order() -> None:
    contact = Contact(id="c1", name="Alice", email="a@x.com", phone="555")

    assert vcard.encode(contact) == (
        "BEGIN:VCARD\n"
        "VERSION:3.0\n"
        "ID:c1\n"
        "FN:Alice\n"
        "EMAIL:a@x.com\n"
        "TEL:555\n"
        "END:VCARD\n"
    )


def test_encode_is_deterministic() -> None:
    first = vcard.encode(Contact(id="c1", name="Alice"))
    second = vcard.encode(Contact(id="c1", name="Alice"))

    assert first == second


def test_encode_omits_id_line_when_id_is_empty() -> None:
    text = vcard.encode(Contact(id="", name="Alice"))

    assert "ID:" not in text
    assert "FN:Alice\n" in text


@pytest.mark.parametrize(
    "contact",
    [
        Contact(id="c1", name="Alice", email="a@x.com", phone="555"),
        Contact(id="bob", name="", email="", phone=""),
        Contact(id="x-2", name="Имя Фамилия", email="a:b@x.com", phone="+7 (900) 1"),
    ],
)
def test_decode_inverts_encode(contact: Contact) -> None:
    assert vcard.decode(vcard.encode(contact), contact.id) == contact


def test_decode_without_external_id_uses_embedded_id() -> None:
    contact = Contact(id="c1", name="Alice")

    assert vcard.decode(vcard.encode(contact)) == contact


def test_decode_is_order_independent_and_ignores_unknown_lines() -> None:
    text = "TEL:555\nNOTE:hello\nFN:Alice\nX-CUSTOM:1\nEMAIL:a@x.com\n"

    contact = vcard.decode(text, "c1")

    assert contact == Contact(id="c1", name="Alice", email="a@x.com", phone="555")


def test_decode_external_id_takes_precedence() -> None:
    text = "ID:embedded\nFN:Alice\n"

    assert vcard.decode(text, "from-file").id == "from-file"


def test_decode_keeps_everything_after_prefix() -> None:
    contact = vcard.decode("FN: Alice: the first \r\nEMAIL:\n", "c1")

    assert contact.name == " Alice: the first "
    assert contact.email == ""


def test_decode_defaults_missing_fields_to_empty() -> None:
    contact = vcard.decode("FN:Alice\n", "c1")

    assert contact.email == ""
    assert contact.phone == ""


def test_decode_last_repeated_key_wins() -> None:
    assert vcard.decode("FN:First\nFN:Second\n", "c1").name == "Second"


def test_decode_empty_text_fails_as_empty_input() -> None:
    with pytest.raises(EmptyInput):
        vcard.decode("")


def test_decode_markers_only_fails_as_empty_input_even_with_external_id() -> None:
    with pytest.raises(EmptyInput):
        vcard.decode("BEGIN:VCARD\nVERSION:3.0\nEND:VCARD\n", "c1")


def test_decode_name_only_without_id_fails_as_missing_identifier() -> None:
    with pytest.raises(MissingIdentifier):
        vcard.decode("FN:Alice")


def test_decode_empty_embedded_id_fails_as_missing_identifier() -> None:
    with pytest.raises(MissingIdentifier):
        vcard.decode("ID:\nFN:Alice\n")


def test_encode_many_concatenates_cards() -> None:
    contacts = [Contact(id="a", name="A"), Contact(id="b", name="B")]

    text = vcard.encode_many(contacts)

    assert text == vcard.encode(contacts[0]) + vcard.encode(contacts[1])
    assert text.count("BEGIN:VCARD") == 2
