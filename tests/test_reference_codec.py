import json

import pytest

from build_ref_tool.core.reference_codec import decode_reference, encode_reference
from build_ref_tool.models.reference import BuildReference


def test_decode_lower_case_commit_only():
    ref = decode_reference('{"commit":"abc"}')

    assert ref.commit == "abc"
    assert ref.tag is None
    assert ref.formats is None


@pytest.mark.parametrize("raw", [
    '{"Commit":"abc","Tag":"v1"}',
    '{"commit":"abc","tag":"v1"}',
    '{"Commit":"abc","tag":"v1"}',
])
def test_decode_matches_either_capitalization(raw):
    ref = decode_reference(raw)

    assert (ref.commit, ref.tag) == ("abc", "v1")


def test_decode_lower_case_key_wins_over_capitalized():
    ref = decode_reference('{"commit":"low","Commit":"up"}')

    assert ref.commit == "low"


def test_decode_null_lower_case_falls_back_to_capitalized():
    ref = decode_reference('{"commit":null,"Commit":"up"}')

    assert ref.commit == "up"


def test_decode_legacy_two_tokens():
    ref = decode_reference("abc123 v1")

    assert ref.commit == "abc123"
    assert ref.tag == "v1"
    assert ref.formats is None


def test_decode_legacy_commit_only_with_newline():
    ref = decode_reference("abc123\n")

    assert ref.commit == "abc123"
    assert ref.tag is None


def test_decode_empty_is_unset():
    ref = decode_reference("")

    assert ref.is_empty
    assert ref.formats is None


def test_decode_single_format_becomes_list():
    ref = decode_reference('{"Commit":"abc","Format":"lambda"}')

    assert ref.formats == ["lambda"]


def test_decode_formats_list_preferred_over_format():
    ref = decode_reference('{"Commit":"abc","format":"lambda","Formats":["docker","swagger"]}')

    assert ref.formats == ["docker", "swagger"]


def test_decode_preserves_empty_formats():
    ref = decode_reference('{"Commit":"abc","Formats":[]}')

    assert ref.formats == []


def test_decode_malformed_json_is_lenient():
    ref = decode_reference('{"Commit": "abc"')

    assert ref.is_empty
    assert ref.formats is None


def test_encode_canonical_form():
    raw = encode_reference(BuildReference(commit="C1", tag="v2", formats=["lambda", "Swagger"]))

    assert json.loads(raw) == {"Commit": "c1", "Tag": "v2", "Formats": ["lambda", "swagger"]}
    assert list(json.loads(raw)) == ["Commit", "Tag", "Formats"]


def test_encode_omits_unset_tag_and_defaults_formats():
    raw = encode_reference(BuildReference(commit="c1"))

    assert json.loads(raw) == {"Commit": "c1", "Formats": ["docker"]}


def test_encode_requires_commit():
    with pytest.raises(ValueError):
        encode_reference(BuildReference(tag="v1"))


def test_encode_then_decode_keeps_fields():
    original = BuildReference(commit="abc", tag="v1", formats=["docker", "lambda"])

    decoded = decode_reference(encode_reference(original))

    assert decoded == original
