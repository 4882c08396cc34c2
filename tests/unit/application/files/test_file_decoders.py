from file_store.app.application.files.decoders import decode_storage_names, decode_upload_options
from file_store.app.domain.common.result import Err, Ok


def test_missing_options_default_to_private():
    assert decode_upload_options(None) == Ok(decode_upload_options("{}").value)
    assert decode_upload_options(None).value.is_private is True
    assert decode_upload_options("  ").value.is_private is True


def test_only_explicit_false_makes_files_public():
    assert decode_upload_options('{"isPrivate": false}').value.is_private is False
    assert decode_upload_options('{"is_private": false}').value.is_private is False
    assert decode_upload_options('{"isPrivate": true}').value.is_private is True
    assert decode_upload_options('{"isPrivate": "false"}').value.is_private is True
    assert decode_upload_options('{"isPrivate": 0}').value.is_private is True


def test_malformed_options_are_an_error():
    assert isinstance(decode_upload_options("not json"), Err)
    assert isinstance(decode_upload_options("[1, 2]"), Err)


def test_storage_names_must_be_a_list_of_strings():
    assert decode_storage_names(["a", "b"]) == Ok(["a", "b"])
    assert isinstance(decode_storage_names("a"), Err)
    assert isinstance(decode_storage_names([1, 2]), Err)
    assert isinstance(decode_storage_names({"names": ["a"]}), Err)
    assert isinstance(decode_storage_names(None), Err)
