from mimetic.fieldvalue import FieldValue
from mimetic.mimeversion import MimeVersion
from mimetic.version import Version


def test_from_text():
    mv = MimeVersion("1.0")
    assert str(mv) == "1.0"
    assert (mv.maj, mv.min) == (1, 0)


def test_from_numbers_equals_text():
    assert MimeVersion(1, 0) == MimeVersion("1.0")


def test_default():
    assert str(MimeVersion()) == "0.0"


def test_label_and_field_value():
    mv = MimeVersion("1.0")
    assert MimeVersion.LABEL == "Mime-Version"
    assert isinstance(mv, FieldValue) and mv.type_checked is True


def test_set():
    mv = MimeVersion()
    mv.set("2.5")
    assert str(mv) == "2.5"


def test_clone_independent():
    mv = MimeVersion("1.0")
    other = mv.clone()
    other.set("3.1")
    assert str(mv) == "1.0"
    assert str(other) == "3.1"


def test_compares_with_version():
    assert MimeVersion("1.2") == Version(1, 2)
    assert MimeVersion("1.2") < Version(1, 3)