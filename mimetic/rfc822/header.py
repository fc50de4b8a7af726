"""The RFC 822 header: an ordered list of fields with typed accessors."""

from __future__ import annotations

from typing import Optional, Type, TypeVar, Union

from mimetic.fieldvalue import FieldValue, StringFieldValue
from mimetic.rfc822.addresslist import AddressList
from mimetic.rfc822.field import Field
from mimetic.rfc822.mailbox import Mailbox
from mimetic.rfc822.mailboxlist import MailboxList
from mimetic.rfc822.messageid import MessageId

__all__ = ["Rfc822Header"]

V = TypeVar("V", bound=FieldValue)


class Rfc822Header(list):
    """A list of ``Field`` objects; field names are matched ignoring case.

    The typed accessors (``to``, ``from_``, ...) return the live value
    stored in the header, converting raw text into the structured type on
    first access and adding an empty field when none exists.
    """

    def _find_index(self, name: str) -> Optional[int]:
        return next((i for i, f in enumerate(self) if f.name == name), None)

    def _find(self, name: str) -> Optional[Field]:
        index = self._find_index(name)
        return None if index is None else self[index]

    def has_field(self, name: str) -> bool:
        """Return True if a field called ``name`` exists."""
        return self._find(name) is not None

    def field(self, name: str) -> Field:
        """Return the first field called ``name``, appending an empty one if missing."""
        found = self._find(name)
        if found is None:
            found = Field(name, StringFieldValue())
            self.append(found)
        return found

    def get_field(self, name: str, kind: Type[V]) -> V:
        """Return the value of field ``name`` as a ``kind`` instance."""
        found = self._find(name)
        if found is None:
            value = kind()
            self.append(Field(name, value))
            return value
        value = found.field_value
        if value is None:
            value = kind()
        elif not value.type_checked or not isinstance(value, kind):
            value = kind(str(value))
        found.field_value = value
        return value

    def set_field(self, name: str, value: Union[FieldValue, str]) -> None:
        """Replace the first field called ``name`` with a copy of ``value``."""
        if isinstance(value, str):
            value = StringFieldValue(value)
        index = self._find_index(name)
        if index is not None:
            del self[index]
        self.append(Field(name, value.clone()))

    def _set_typed(self, name: str, kind: type, value: Union[FieldValue, str]) -> None:
        if isinstance(value, str):
            value = kind(value)
        self.set_field(name, value)

    @property
    def sender(self) -> Mailbox:
        """The ``Sender`` mailbox."""
        return self.get_field("Sender", Mailbox)

    @sender.setter
    def sender(self, value: Union[Mailbox, str]) -> None:
        self._set_typed("Sender", Mailbox, value)

    @property
    def from_(self) -> MailboxList:
        """The ``From`` mailbox list."""
        return self.get_field("From", MailboxList)

    @from_.setter
    def from_(self, value: Union[MailboxList, str]) -> None:
        self._set_typed("From", MailboxList, value)

    @property
    def to(self) -> AddressList:
        """The ``To`` address list."""
        return self.get_field("To", AddressList)

    @to.setter
    def to(self, value: Union[AddressList, str]) -> None:
        self._set_typed("To", AddressList, value)

    @property
    def subject(self) -> str:
        """The ``Subject`` text."""
        return str(self.get_field("Subject", StringFieldValue))

    @subject.setter
    def subject(self, value: str) -> None:
        self.set_field("Subject", StringFieldValue(value))

    @property
    def reply_to(self) -> AddressList:
        """The ``Reply-To`` address list."""
        return self.get_field("Reply-To", AddressList)

    @reply_to.setter
    def reply_to(self, value: Union[AddressList, str]) -> None:
        self._set_typed("Reply-To", AddressList, value)

    @property
    def cc(self) -> AddressList:
        """The ``CC`` address list."""
        return self.get_field("CC", AddressList)

    @cc.setter
    def cc(self, value: Union[AddressList, str]) -> None:
        self._set_typed("CC", AddressList, value)

    @property
    def bcc(self) -> AddressList:
        """The ``BCC`` address list."""
        return self.get_field("BCC", AddressList)

    @bcc.setter
    def bcc(self, value: Union[AddressList, str]) -> None:
        self._set_typed("BCC", AddressList, value)

    @property
    def message_id(self) -> MessageId:
        """The ``Message-ID``; a new unique one is made when the field is missing."""
        return self.get_field("Message-ID", MessageId)

    @message_id.setter
    def message_id(self, value: Union[MessageId, str]) -> None:
        self._set_typed("Message-ID", MessageId, value)