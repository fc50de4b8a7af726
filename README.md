# mimetic

A library for reading and building the values carried by RFC 822 header
fields, together with small string, file and directory helpers.

## Install

    pip install .

To run the tests, install the `test` extra and run pytest:

    pip install ".[test]"
    pytest

## Header values

All value classes derive from `mimetic.fieldvalue.FieldValue`. Each has a
`set(text)` method that parses text, and each returns header text through
`str()`.

- `mimetic.rfc822.mailbox.Mailbox`: one address such as
  `"Jane Doe <jane@example.com>"`. Its attributes `mailbox`, `domain`, `label`
  and `sourceroute` hold the raw parts. `canonical_mailbox()`,
  `canonical_domain()`, `canonical_sourceroute()` and `canonical_label()`
  return the same parts with comments removed. Two mailboxes are equal when
  the local part matches exactly and the domain and route match regardless of
  case.
- `mimetic.rfc822.group.Group`: a list of mailboxes with a `name`, parsed from
  text such as `"friends: a@example.com, b@example.com;"`.
- `mimetic.rfc822.address.Address`: holds either a `mailbox` or a `group`.
  `is_group()` tells which one it is.
- `mimetic.rfc822.addresslist.AddressList` and
  `mimetic.rfc822.mailboxlist.MailboxList`: lists separated by commas. Commas
  inside double quotes do not split entries, and in an address list neither
  do commas inside a group.
- `mimetic.rfc822.date_time.DateTime`: parses dates such as
  `"Wed, 23 Nov 2005 10:20:30 GMT"`. Without text the date is
  1 Jan 1970 00:00:00 UTC. `day_of_week()`, `month()` and `zone()` return
  `DayOfWeek`, `Month` and `Zone` objects. When the text gives no day of the
  week, it is worked out from the date.
- `mimetic.rfc822.messageid.MessageId`: with no value, builds an id from the
  time, the process id, a sequence number and the host name.
- `mimetic.fieldvalue.StringFieldValue`: plain unstructured text.
- `mimetic.version.Version` and `mimetic.mimeversion.MimeVersion`: versions
  of the form `maj.min[.build]`. Each ordering operator is true when any one
  component satisfies it.

## Fields, headers and messages

- `mimetic.rfc822.field.Field`: a name and a value. The name is an
  `IString`, so comparisons with it ignore case. `Field.from_line("Name: text")`
  parses a header line. `format(fold)` folds long values at blanks that are
  outside quotes.
- `mimetic.rfc822.header.Rfc822Header`: a list of fields. It provides
  `has_field`, `field`, `get_field(name, kind)` and `set_field`. Its typed
  properties are `sender`, `from_`, `to`, `subject`, `reply_to`, `cc`, `bcc`
  and `message_id`. They return the live value, convert raw text to the
  structured type on first access, and add the field when it is missing.
- `mimetic.rfc822.message.Message`: a `header` and a string `body`.
  `str(message)` writes each field as `name: value`, one directly after
  another, then CRLF and the body.

## Helpers

- `mimetic.strutils`: `IString`, `canonical`, `dquoted`, `parenthed`,
  `remove_dquote`, `remove_external_blanks`.
- `mimetic.utils`: `extract_filename`, `int2str`, `str2int`, `int2hex`,
  `string_is_blank`, and `find_bm`, a Boyer-Moore search that returns an
  index or -1.
- `mimetic.circular_buffer.CircularBuffer`: a ring buffer of fixed size.
- `mimetic.host`: `gethostname()` and `getpid()`.
- `mimetic.files.fileop`: `remove`, `move`, `exists`, `size`, `ctime`,
  `atime`, `mtime`.
- `mimetic.files.file`: `File`, a read-only file that yields its bytes when
  iterated, and `MappedFile`, a memory-mapped read-only file. Both work as
  context managers.
- `mimetic.files.directory`: `Directory`, which yields `DirEntry` items with
  an `EntryType`, and the static methods `Directory.create` and
  `Directory.remove`.

## Example

    from mimetic.rfc822.mailbox import Mailbox
    from mimetic.rfc822.addresslist import AddressList
    from mimetic.rfc822.date_time import DateTime
    from mimetic.rfc822.header import Rfc822Header

    mbx = Mailbox("Jane Doe <jane@example.com>")
    print(mbx.canonical_mailbox(), mbx.canonical_domain())

    for address in AddressList("a@example.com, team: b@example.com;"):
        print(address.is_group(), address)

    print(DateTime("Wed, 23 Nov 2005 10:20:30 GMT"))

    header = Rfc822Header()
    header.subject = "hello"
    header.to = "a@example.com, b@example.com"
    print(len(header.to), header.subject)

## What it does not do

The package deals only with header values and plain RFC 822 messages. It does
not parse a whole message from raw text into a header and body. It does not
handle MIME bodies, multipart entities, attachments or content transfer
encodings, and it does not send or receive mail. It provides no command-line
program.