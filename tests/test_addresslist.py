from mimetic.rfc822.addresslist import AddressList


def test_simple_list():
    lst = AddressList("a@example.com,b@example.com")
    assert len(lst) == 2
    assert lst[0].mailbox.mailbox == "a"
    assert lst[0].mailbox.domain == "example.com"
    assert lst[1].mailbox.mailbox == "b"


def test_group_and_mailbox():
    lst = AddressList("friends: a@example.com, b@example.com;, c@example.com")
    assert len(lst) == 2
    assert lst[0].is_group()
    assert lst[0].group.name == "friends"
    assert len(lst[0].group) == 2
    assert not lst[1].is_group()
    assert lst[1].mailbox.domain == "example.com"


def test_comma_inside_quotes_does_not_split():
    lst = AddressList('"Doe, John" <j@example.com>')
    assert len(lst) == 1
    assert lst[0].mailbox.mailbox == "j"


def test_escaped_quote_keeps_quoted_string_open():
    lst = AddressList('"a\\"b, c" <x@example.com>')
    assert len(lst) == 1
    assert lst[0].mailbox.mailbox == "x"


def test_blank_text_gives_empty_list():
    assert len(AddressList("")) == 0
    assert len(AddressList("   ")) == 0


def test_trailing_blank_item_ignored():
    lst = AddressList("a@example.com, ")
    assert len(lst) == 1


def test_str_joins_with_comma_space():
    lst = AddressList("a@example.com,b@example.com")
    assert str(lst) == "a@example.com, b@example.com"


def test_set_replaces_contents():
    lst = AddressList("a@example.com,b@example.com")
    lst.set("c@example.com")
    assert len(lst) == 1
    assert lst[0].mailbox.mailbox == "c"


def test_clone_is_independent():
    lst = AddressList("a@example.com")
    copy = lst.clone()
    copy.set("b@example.com,c@example.com")
    assert len(lst) == 1
    assert len(copy) == 2