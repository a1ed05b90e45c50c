import json
import os
import stat

import pytest

from extractor.errors import EmptyInputError, RowLengthError, SchemaMismatch
from extractor.scanner import Entry
from extractor.schema import AFFECT, BALANCE, COMBINED, row_pattern, schema_for_width
from formatters.json_fmt import to_json_file, to_records
from formatters.md_fmt import to_markdown, to_markdown_file
from formatters.tsv_fmt import to_delimited, to_tsv_file

ELEVEN = Entry("Testland", list(range(1, 12)))


def test_schema_for_width():
    assert schema_for_width(8) is AFFECT
    assert schema_for_width(3) is BALANCE
    assert schema_for_width(11) is COMBINED
    assert COMBINED.columns == AFFECT.columns + BALANCE.columns
    assert COMBINED.headers[3] == "WELL-RESTED"
    with pytest.raises(SchemaMismatch) as exc:
        schema_for_width(5, "Oddland")
    assert exc.value.actual == 5
    assert exc.value.expected == (3, 8, 11)
    assert "Oddland" in str(exc.value)


def test_row_pattern_requires_positive_width():
    assert row_pattern(1).search("x 4").start() == 2
    with pytest.raises(ValueError):
        row_pattern(0)


def test_record_for_eight_values():
    records = to_records([Entry("Testland", [1, 2, 3, 4, 5, 6, 7, 8])])
    assert list(records[0].keys()) == [
        "country", "cantril", "enjoy", "smile", "well_rested", "pain", "sadness", "worry", "anger",
    ]
    assert list(records[0].values()) == ["Testland", 1, 2, 3, 4, 5, 6, 7, 8]


def test_record_for_three_and_eleven_values():
    three, eleven = to_records([Entry("A", [7, 8, 9]), ELEVEN])
    assert three == {"country": "A", "positive": 7, "negative": 8, "final": 9}
    assert list(eleven)[1:] == list(COMBINED.columns)
    assert eleven["final"] == 11


def test_record_unknown_width_fails():
    with pytest.raises(SchemaMismatch):
        to_records([Entry("A", [1, 2])])


def test_json_file_is_pretty_printed(tmp_path):
    out = tmp_path / "nested" / "data.json"
    to_json_file(str(out), to_records([Entry(" Trinidad and Tobago", [1, 2, 3])]))
    text = out.read_text(encoding="utf-8")
    assert text.startswith("[\n  {\n    \"country\": \" Trinidad and Tobago\",")
    assert json.loads(text) == [{"country": " Trinidad and Tobago", "positive": 1, "negative": 2, "final": 3}]
    assert [p.name for p in out.parent.iterdir()] == ["data.json"]


def test_delimited_eleven_columns_exact():
    assert to_delimited([ELEVEN]) == (
        "COUNTRY\tCANTRIL\tENJOY\tSMILE\tWELL-RESTED\tPAIN\tSADNESS\tWORRY\tANGER\tPOSITIVE\tNEGATIVE\tFINAL\n"
        "Testland\t1\t2\t3\t4\t5\t6\t7\t8\t9\t10\t11\n"
    )


def test_delimited_three_columns_in_input_order():
    text = to_delimited([Entry("B", [1, 2, 3]), Entry("A", [-4, 5, 6])])
    assert text == "COUNTRY\tPOSITIVE\tNEGATIVE\tFINAL\nB\t1\t2\t3\nA\t-4\t5\t6\n"


def test_delimited_empty_input():
    with pytest.raises(EmptyInputError):
        to_delimited([])


def test_delimited_unknown_first_width():
    with pytest.raises(SchemaMismatch) as exc:
        to_delimited([Entry("A", [1, 2, 3, 4])])
    assert exc.value.actual == 4


def test_delimited_row_length_mismatch_reports_row():
    with pytest.raises(RowLengthError) as exc:
        to_delimited([Entry("A", [1, 2, 3]), Entry("B", [1, 2, 3, 4, 5, 6, 7, 8])])
    assert exc.value.index == 1
    assert exc.value.country == "B"
    assert (exc.value.expected, exc.value.actual) == (3, 8)


def test_tsv_file_roundtrip_text(tmp_path):
    out = tmp_path / "data.tsv"
    to_tsv_file(str(out), [Entry("A", [1, 2, 3])])
    assert out.read_text(encoding="utf-8") == "COUNTRY\tPOSITIVE\tNEGATIVE\tFINAL\nA\t1\t2\t3\n"


def test_tsv_file_not_written_on_error(tmp_path):
    out = tmp_path / "data.tsv"
    out.write_text("previous", encoding="utf-8")
    with pytest.raises(EmptyInputError):
        to_tsv_file(str(out), [])
    assert out.read_text(encoding="utf-8") == "previous"
    assert [p.name for p in tmp_path.iterdir()] == ["data.tsv"]


def test_markdown_preview(tmp_path):
    md = to_markdown([ELEVEN], title="Wellbeing")
    lines = md.splitlines()
    assert lines[0] == "# Wellbeing"
    assert "COUNTRY" in lines[2] and "WELL-RESTED" in lines[2]
    assert lines[3].startswith("|-")
    assert "Testland" in lines[4]

    out = tmp_path / "preview.md"
    to_markdown_file(str(out), [ELEVEN])
    assert out.read_text(encoding="utf-8").startswith("| COUNTRY")


def test_markdown_validates_like_delimited():
    with pytest.raises(EmptyInputError):
        to_markdown([])


def test_delimited_does_not_quote_country_names():
    text = to_delimited([Entry('Cote d"Ivoire', [1, 2, 3]), Entry(" Trinidad and Tobago", [4, 5, 6])])
    assert text.splitlines()[1:] == ['Cote d"Ivoire\t1\t2\t3', " Trinidad and Tobago\t4\t5\t6"]


def test_written_files_follow_umask(tmp_path):
    mask = os.umask(0o022)
    try:
        out = tmp_path / "data.json"
        to_json_file(str(out), to_records([Entry("A", [1, 2, 3])]))
        assert stat.S_IMODE(out.stat().st_mode) == 0o644
    finally:
        os.umask(mask)
