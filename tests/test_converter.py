import io

import pytest

from converter import ConversionError, Style, Yaml2Json


def test_compact_conversion():
    assert Yaml2Json(Style.COMPACT).document_to_string("{a: 1}") == '{"a":1}'


def test_pretty_conversion():
    converter = Yaml2Json(Style.PRETTY)

    assert converter.document_to_string("a: [1, 2]") == '{\n  "a": [\n    1,\n    2\n  ]\n}'


def test_style_from_pretty_flag():
    assert Style.from_pretty(True) is Style.PRETTY
    assert Style.from_pretty(False) is Style.COMPACT


def test_scalar_keys_follow_json_rules():
    converter = Yaml2Json()

    assert converter.document_to_string("1: one\ntrue: yes\n~: none") == (
        '{"1":"one","true":"yes","null":"none"}'
    )


def test_dates_and_sets_are_converted():
    converter = Yaml2Json()

    assert converter.document_to_string("when: 2024-01-02") == '{"when":"2024-01-02"}'
    assert converter.document_to_string("!!set {a: null}") == '{"a":null}'


def test_anchors_and_merge_keys_resolve():
    converter = Yaml2Json()
    doc = "base: &b {x: 1}\nchild:\n  <<: *b\n  y: 2\n"

    assert converter.document_to_string(doc) == '{"base":{"x":1},"child":{"x":1,"y":2}}'


def test_non_ascii_is_written_as_utf8():
    sink = io.BytesIO()

    Yaml2Json().document_to_writer("name: café", sink)

    assert sink.getvalue() == '{"name":"café"}'.encode("utf-8")


def test_empty_explicit_document_is_null():
    assert Yaml2Json().document_to_string("---\n") == "null"


@pytest.mark.parametrize(
    "document",
    [
        "a: [1, 2",
        "value: .nan",
        "data: !!binary aGVsbG8=",
        "? [1, 2]\n: value\n",
        "!!python/object:os.system {}",
    ],
)
def test_unconvertible_documents_raise(document):
    with pytest.raises(ConversionError):
        Yaml2Json().document_to_string(document)


def test_failed_document_writes_nothing():
    sink = io.BytesIO()

    with pytest.raises(ConversionError):
        Yaml2Json().document_to_writer("a: [1", sink)

    assert sink.getvalue() == b""


def test_plain_scalars_follow_yaml_1_2_core_schema():
    converter = Yaml2Json()
    doc = "on: yes\nmode: 0777\nperm: 0o17\nmask: 0xff\nflag: True\nday: 2024-01-02\n"

    assert converter.document_to_string(doc) == (
        '{"on":"yes","mode":777,"perm":15,"mask":255,"flag":true,"day":"2024-01-02"}'
    )


def test_explicit_timestamp_is_iso_formatted():
    converter = Yaml2Json()

    assert converter.document_to_string("at: !!timestamp 2024-01-02 10:00:00") == (
        '{"at":"2024-01-02T10:00:00"}'
    )


def test_colliding_keys_are_rejected():
    with pytest.raises(ConversionError, match="duplicate key '1'"):
        Yaml2Json().document_to_string('1: a\n"1": b\n')


def test_set_members_are_sorted():
    converter = Yaml2Json()

    assert converter.document_to_string("!!set {c: null, a: null, b: null}") == (
        '{"a":null,"b":null,"c":null}'
    )
