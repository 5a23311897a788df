# tests/test_reader.py

import io

import pytest
from Bio import SeqIO

from conftest import FailingRaw
from fastb_align.errors import BadlyFormedFastaError, EndOfStream, TruncatedHeaderError
from fastb_align.reader import Reader, open_fasta


@pytest.fixture(params=["bytesio", "buffered"])
def make_reader(request):
    """Readers over a stream without peek() and over a buffered one with it."""
    def _make(data: bytes) -> Reader:
        stream = io.BytesIO(data)
        if request.param == "buffered":
            stream = io.BufferedReader(stream)
        return Reader(stream)
    return _make


def test_reads_one_record_per_call(make_reader, two_records):
    reader = make_reader(two_records)

    first = reader.read()
    assert first.id == "s1"
    assert first.description == "s1 desc"
    assert bytes(first.seq) == b"ACGT"
    assert not first.encoded

    second = reader.read()
    assert second.id == "s2"
    assert second.description == "s2"
    assert bytes(second.seq) == b"AC-N"

    with pytest.raises(EndOfStream):
        reader.read()


def test_end_of_stream_is_an_eoferror(make_reader):
    with pytest.raises(EOFError):
        make_reader(b"").read()


def test_iteration_stops_at_end(make_reader, two_records):
    assert [r.id for r in make_reader(two_records)] == ["s1", "s2"]


def test_dos_line_endings(make_reader):
    record = make_reader(b">a first\r\nAC\r\nGT\r\n").read()
    assert record.id == "a"
    assert record.description == "a first"
    assert bytes(record.seq) == b"ACGT"


def test_multiline_sequence_with_blank_lines(make_reader):
    reader = make_reader(b">a\nAC\n\nGT\n\n>b\nTT\n")
    assert bytes(reader.read().seq) == b"ACGT"
    assert bytes(reader.read().seq) == b"TT"


def test_last_line_without_newline(make_reader):
    reader = make_reader(b">a\nAC\nGT")
    assert bytes(reader.read().seq) == b"ACGT"
    with pytest.raises(EndOfStream):
        reader.read()


def test_header_without_sequence(make_reader):
    reader = make_reader(b">a\n>b\nAC\n")
    first = reader.read()
    assert first.id == "a"
    assert bytes(first.seq) == b""
    assert reader.read().id == "b"


def test_description_keeps_tabs_and_extra_tokens(make_reader):
    record = make_reader(b">id1\tsome  free text\nA\n").read()
    assert record.id == "id1"
    assert record.description == "id1\tsome  free text"


def test_missing_marker_is_badly_formed(make_reader):
    with pytest.raises(BadlyFormedFastaError):
        make_reader(b"ACGT\n>a\nAC\n").read()


def test_leading_blank_line_is_badly_formed(make_reader):
    with pytest.raises(BadlyFormedFastaError):
        make_reader(b"\n>a\nAC\n").read()


@pytest.mark.parametrize("header", [b">\n", b">   \n", b">\r\n"])
def test_empty_header_is_badly_formed(make_reader, header):
    with pytest.raises(BadlyFormedFastaError):
        make_reader(header + b"ACGT\n").read()


def test_stream_ending_inside_header(make_reader):
    reader = make_reader(b">a\nAC\n>b")
    assert reader.read().id == "a"
    with pytest.raises(TruncatedHeaderError):
        reader.read()


def test_truncated_header_is_not_end_of_stream(make_reader):
    with pytest.raises(BadlyFormedFastaError) as exc:
        make_reader(b">only").read()
    assert not isinstance(exc.value, EOFError)


def test_text_stream_is_read_through_its_buffer(two_records):
    reader = Reader(io.TextIOWrapper(io.BytesIO(two_records), encoding="ascii"))
    assert [r.id for r in reader] == ["s1", "s2"]


def test_in_memory_text_stream_is_rejected():
    with pytest.raises(TypeError):
        Reader(io.StringIO(">a\nAC\n"))


def test_io_errors_propagate():
    class Broken(io.RawIOBase):
        def readable(self):
            return True

        def readinto(self, b):
            raise OSError("disk on fire")

    with pytest.raises(OSError, match="disk on fire"):
        Reader(io.BufferedReader(Broken())).read()


@pytest.mark.parametrize("name", ["aln.fasta", "aln.fasta.gz"])
def test_open_fasta_plain_and_gzip(write_fasta, two_records, name):
    path = write_fasta(two_records, name)
    with open_fasta(path) as fh:
        assert [bytes(r.seq) for r in Reader(fh)] == [b"ACGT", b"AC-N"]


def test_agrees_with_biopython(make_reader):
    text = ">seq1 Homo sapiens chr1\nACGTN\nNNAC\n>seq2  spaced   out\nRYKM\nBDHV\n>seq3\n--??\nacgt\n"
    ours = list(make_reader(text.encode()))
    theirs = list(SeqIO.parse(io.StringIO(text), "fasta"))
    assert [r.id for r in ours] == [r.id for r in theirs]
    assert [r.description for r in ours] == [r.description for r in theirs]
    assert [r.sequence() for r in ours] == [str(r.seq) for r in theirs]


def test_read_error_while_peeking_sequence_body():
    reader = Reader(io.BufferedReader(FailingRaw(b">a\nAC\n")))
    with pytest.raises(OSError, match="device not ready"):
        reader.read()


def test_read_error_after_earlier_records():
    reader = Reader(io.BufferedReader(FailingRaw(b">a\nAC\n>b\nGT\n")))
    assert reader.read().id == "a"
    with pytest.raises(OSError):
        reader.read()
