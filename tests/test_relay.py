import base64

import pytest

from gqlcore.relay import marshal_id, unmarshal_kind, unmarshal_spec


@pytest.mark.parametrize(
    "kind, spec",
    [
        ("Human", "1000"),
        ("Droid", 2001),
        ("Ship", {"id": 3, "tags": ["a", "b"]}),
        ("Thing", None),
        ("Text", "<&> ünï"),
    ],
)
def test_round_trip(kind, spec):
    id_ = marshal_id(kind, spec)
    assert unmarshal_kind(id_) == kind
    assert unmarshal_spec(id_) == spec


def test_id_is_url_safe():
    id_ = marshal_id("Kind", "?>?>?>~~~")
    assert "+" not in id_ and "/" not in id_
    assert unmarshal_spec(id_) == "?>?>?>~~~"


def test_html_characters_are_escaped():
    raw = base64.urlsafe_b64decode(marshal_id("K", "<"))
    assert raw == b'K:"\\u003c"'


def test_invalid_base64_gives_empty_kind():
    assert unmarshal_kind("not base64!!") == ""


def test_missing_colon():
    id_ = base64.urlsafe_b64encode(b"nocolon").decode()
    assert unmarshal_kind(id_) == ""
    with pytest.raises(ValueError, match="invalid graphql.ID"):
        unmarshal_spec(id_)


def test_invalid_base64_spec_raises():
    with pytest.raises(ValueError):
        unmarshal_spec("@@@@")


def test_invalid_json_spec_raises():
    id_ = base64.urlsafe_b64encode(b"Kind:{broken").decode()
    assert unmarshal_kind(id_) == "Kind"
    with pytest.raises(ValueError):
        unmarshal_spec(id_)


def test_unserialisable_spec_raises():
    with pytest.raises(ValueError, match="relay.MarshalID"):
        marshal_id("Kind", object())