from mimetic.rfc822.group import Group
from mimetic.rfc822.mailbox import Mailbox


def test_parse_group():
    grp = Group("friends: a@example.com, b@example.com;")
    assert grp.name == "friends"
    assert len(grp) == 2
    assert grp[0].mailbox == "a"
    assert grp[1].mailbox == "b"
    assert grp[1].domain == "example.com"


def test_members_are_mailboxes():
    grp = Group("friends: a@example.com, b@example.com;")
    assert list(grp) == [Mailbox("a@example.com"), Mailbox("b@example.com")]


def test_round_trip_through_str():
    grp = Group("friends: a@example.com, Bee <b@example.com>;")
    again = Group(str(grp))
    assert again == grp
    assert again.name == grp.name
    assert again[1].label == "Bee"


def test_missing_terminator():
    grp = Group("team: a@example.com, b@example.com")
    assert len(grp) == 2
    assert grp[1].mailbox == "b"
    assert grp[1].domain == "example.com"


def test_separator_inside_quotes_and_angles():
    grp = Group('g: "Doe, J" <j@example.com>, k@example.com;')
    assert len(grp) == 2
    assert grp[0].label == '"Doe, J"'
    assert grp[0].mailbox == "j"
    assert grp[1].mailbox == "k"


def test_colon_inside_quotes_is_not_name_separator():
    grp = Group('"a:b" list: c@example.com;')
    assert grp.name == '"a:b" list'
    assert len(grp) == 1


def test_without_colon_is_empty():
    grp = Group("nothing here")
    assert len(grp) == 0
    assert grp.name == ""


def test_text_after_terminator_ignored():
    grp = Group("g: a@example.com; b@example.com")
    assert len(grp) == 1
    assert grp[0].mailbox == "a"


def test_canonical_name_drops_comment():
    grp = Group("my (the) list: a@example.com;")
    assert grp.name == "my (the) list"
    assert "(" not in grp.canonical_name()
    assert grp.canonical_name().startswith("my")
    assert grp.canonical_name().endswith("list")


def test_set_replaces_members():
    grp = Group("one: a@example.com, b@example.com;")
    grp.set("two: c@example.com;")
    assert grp.name == "two"
    assert len(grp) == 1
    assert grp[0].mailbox == "c"


def test_clone_is_independent():
    grp = Group("friends: a@example.com;")
    copy = grp.clone()
    copy.append(Mailbox("b@example.com"))
    assert len(grp) == 1
    assert len(copy) == 2
    assert copy.name == "friends"