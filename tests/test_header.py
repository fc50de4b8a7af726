from mimetic.fieldvalue import StringFieldValue
from mimetic.rfc822.address import Address
from mimetic.rfc822.addresslist import AddressList
from mimetic.rfc822.field import Field
from mimetic.rfc822.header import Rfc822Header
from mimetic.rfc822.mailbox import Mailbox
from mimetic.rfc822.mailboxlist import MailboxList


def test_empty_header_has_no_field():
    header = Rfc822Header()
    assert not header.has_field("Subject")
    assert len(header) == 0


def test_field_creates_missing_field_once():
    header = Rfc822Header()
    created = header.field("X-Test")
    assert created.name == "x-test"
    assert created.value == ""
    assert header.field("X-TEST") is created
    assert len(header) == 1


def test_subject_round_trip_and_case_insensitive_lookup():
    header = Rfc822Header()
    header.subject = "Hello world"
    assert header.subject == "Hello world"
    assert header.has_field("SUBJECT")
    assert len(header) == 1


def test_set_field_replaces_only_first_match():
    header = Rfc822Header()
    header.append(Field("X-A", "one"))
    header.append(Field("X-A", "two"))
    header.set_field("x-a", "three")
    assert [f.value for f in header] == ["two", "three"]


def test_set_field_stores_a_copy():
    header = Rfc822Header()
    mailbox = Mailbox("a@example.com")
    header.sender = mailbox
    mailbox.domain = "other.example.com"
    assert header.sender.domain == "example.com"
    assert header.sender.mailbox == "a"


def test_typed_value_is_kept_between_accesses():
    header = Rfc822Header()
    header.to = "a@example.com"
    header.to.append(Address("b@example.com"))
    assert str(header.to) == "a@example.com, b@example.com"
    assert len(header.to) == 2


def test_get_field_appends_missing_value_that_stays_live():
    header = Rfc822Header()
    value = header.get_field("Cc", AddressList)
    value.append(Address("x@example.com"))
    assert str(header.cc) == "x@example.com"
    assert len(header) == 1


def test_reply_to_and_bcc():
    header = Rfc822Header()
    header.reply_to = "r@example.com"
    header.bcc = AddressList("b@example.com, c@example.com")
    assert str(header.reply_to) == "r@example.com"
    assert len(header.bcc) == 2
    assert [f.name for f in header] == ["Reply-To", "BCC"]


def test_message_id_set_and_get():
    header = Rfc822Header()
    header.message_id = "<id@example.com>"
    assert str(header.message_id) == "<id@example.com>"


def test_missing_message_id_is_generated():
    header = Rfc822Header()
    generated = str(header.message_id)
    assert "@" in generated
    assert str(header.message_id) == generated


def test_get_field_converts_string_value():
    header = Rfc822Header()
    header.set_field("Sender", StringFieldValue("s@example.com"))
    sender = header.get_field("Sender", Mailbox)
    assert isinstance(sender, Mailbox)
    assert sender.domain == "example.com"