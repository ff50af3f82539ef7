from core.models import SourceFile
from core.enums import NoticeKind
from stages import AdmissionFilter


def test_admits_supported_non_empty_files():
    files = [
        SourceFile.from_bytes("a.csv", b"x;y\n1;2"),
        SourceFile.from_bytes("b.XLSX", b"PK"),
        SourceFile.from_bytes("c.xls", b"\xd0\xcf"),
    ]

    result = AdmissionFilter().screen(files)

    assert [f.name for f in result.admitted] == ["a.csv", "b.XLSX", "c.xls"]
    assert result.discarded == []


def test_discards_unsupported_extension_and_zero_bytes():
    files = [
        SourceFile.from_bytes("notes.txt", b"hello"),
        SourceFile.from_bytes("empty.csv", b""),
        SourceFile.from_bytes("ok.csv", b"a\n1"),
    ]

    result = AdmissionFilter().screen(files)

    assert [f.name for f in result.admitted] == ["ok.csv"]
    assert [n.file_name for n in result.discarded] == ["notes.txt", "empty.csv"]
    assert all(n.kind == NoticeKind.DISCARDED for n in result.discarded)
    assert "not a supported type" in result.discarded[0].reason
    assert "0 bytes" in result.discarded[1].reason


def test_admission_uses_declared_size_without_reading_content():
    # Content is never inspected, only name and size
    source = SourceFile(name="broken.csv", size=10, content=b"")

    result = AdmissionFilter().screen([source])

    assert result.admitted == [source]
