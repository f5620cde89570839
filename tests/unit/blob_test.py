import pytest

from doclite.core.blob import Blob


def test_new_blob_carries_bytes_and_no_digest() -> None:
    blob = Blob("text/plain", b"hello")

    assert blob.get_content_type() == "text/plain"
    assert blob.get_bytes() == b"hello"
    assert blob.get_length() == 5
    assert blob.get_digest() is None


def test_blob_accepts_bytearray_and_copies_it() -> None:
    raw = bytearray(b"abc")
    blob = Blob("application/octet-stream", raw)
    raw[0] = ord("z")

    assert blob.get_bytes() == b"abc"


def test_metadata_blob_has_no_bytes() -> None:
    blob = Blob.from_metadata("image/png", 2048, "sha1-abc=")

    assert blob.get_bytes() is None
    assert blob.get_length() == 2048
    assert blob.get_digest() == "sha1-abc="


def test_to_dictionary_lists_byte_values() -> None:
    assert Blob("text/plain", b"hi").to_dictionary() == {"contentType": "text/plain", "data": [104, 105]}


def test_from_dictionary_restores_bytes() -> None:
    blob = Blob.from_dictionary({"contentType": "text/plain", "data": [104, 105]})

    assert blob.get_bytes() == b"hi"
    assert blob.get_content_type() == "text/plain"


def test_from_json_parses_content_type_and_bytes() -> None:
    blob = Blob.from_json('{"contentType": "image/gif", "bytes": [71, 73, 70]}')

    assert blob.get_content_type() == "image/gif"
    assert blob.get_bytes() == b"GIF"


@pytest.mark.parametrize(
    "payload",
    [
        "not json",
        "[1, 2, 3]",
        '{"bytes": [1]}',
        '{"contentType": "", "bytes": [1]}',
        '{"contentType": "text/plain"}',
        '{"contentType": "text/plain", "bytes": "abc"}',
        '{"contentType": "text/plain", "bytes": [300]}',
    ],
)
def test_from_json_rejects_malformed_input(payload: str) -> None:
    with pytest.raises(ValueError, match="Failed to parse Blob JSON"):
        Blob.from_json(payload)
