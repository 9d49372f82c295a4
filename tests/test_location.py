import pytest

from shipyard.deploy.errors import LocationParseError, UnrecoverableError
from shipyard.deploy.location import (
    EXPANDED,
    SUGGESTED,
    LocalPath,
    OutputPaths,
    RemoteURI,
    expanded_output_path,
    parse_location,
    resolve,
    suggested_output_path,
)


def test_local_paths():
    assert suggested_output_path("./output") == "output/suggested"
    assert expanded_output_path("./output") == "output/expanded"
    assert suggested_output_path("/tmp/out/") == "/tmp/out/suggested"
    assert suggested_output_path("/tmp//out/./a") == "/tmp/out/a/suggested"


def test_empty_root_is_relative():
    assert suggested_output_path("") == "suggested"


def test_uri_keeps_scheme_and_authority():
    assert suggested_output_path("gs://my-bucket/out") == "gs://my-bucket/out/suggested"
    assert expanded_output_path("gs://my-bucket/out/") == "gs://my-bucket/out/expanded"
    assert (
        resolve("https://host:8080/a//b/./c?x=1#frag", SUGGESTED)
        == "https://host:8080/a/b/c/suggested?x=1#frag"
    )


def test_uri_without_path_gets_absolute_path():
    assert suggested_output_path("gs://my-bucket") == "gs://my-bucket/suggested"


def test_file_uri_with_empty_authority():
    assert expanded_output_path("file:///tmp/out") == "file:///tmp/out/expanded"


@pytest.mark.parametrize(
    "root",
    ["./output", "/abs/out", "out", "gs://bucket", "gs://bucket/a/b", "s3://b/x?y=z"],
)
def test_suggested_and_expanded_never_collide(root):
    suggested = suggested_output_path(root)
    expanded = expanded_output_path(root)
    assert suggested != expanded
    # Same root, same answer
    assert suggested == suggested_output_path(root)
    assert expanded == expanded_output_path(root)


def test_parse_location_types():
    assert parse_location("./out") == LocalPath("./out")
    uri = parse_location("gs://bucket/path?q=1")
    assert isinstance(uri, RemoteURI)
    assert uri.scheme == "gs"
    assert uri.netloc == "bucket"
    assert uri.path == "/path"
    assert uri.query == "q=1"


def test_append_segment_does_not_mutate():
    uri = parse_location("gs://bucket/path")
    appended = uri.append_segment(EXPANDED)
    assert str(uri) == "gs://bucket/path"
    assert str(appended) == "gs://bucket/path/expanded"


@pytest.mark.parametrize(
    "root",
    [
        "gs://bucket/\x00out",
        "out\nput",
        ":no-scheme",
        "1gs://bucket/out",
        "://bucket/out",
        "gs://bucket/%zz",
        "http://[::1/out",
        "http://host:port/out",
    ],
)
def test_invalid_roots_are_unrecoverable(root):
    with pytest.raises(LocationParseError) as exc:
        suggested_output_path(root)
    assert isinstance(exc.value, UnrecoverableError)
    assert exc.value.root == root


def test_output_paths_from_root():
    paths = OutputPaths.from_root("gs://bucket/out")
    assert paths.root == "gs://bucket/out"
    assert paths.suggested == "gs://bucket/out/suggested"
    assert paths.expanded == "gs://bucket/out/expanded"


def test_empty_authority_and_path_stays_empty():
    out = resolve("file://", SUGGESTED)
    assert out == "file:///suggested"
    assert parse_location(out).netloc == ""
    assert expanded_output_path("s3://") == "s3:///expanded"


def test_non_scheme_prefix_is_a_local_path():
    assert parse_location("./a://b") == LocalPath("./a://b")
    assert suggested_output_path("./a://b") == "a:/b/suggested"


def test_scheme_case_is_kept():
    assert suggested_output_path("GS://Bucket/out") == "GS://Bucket/out/suggested"
