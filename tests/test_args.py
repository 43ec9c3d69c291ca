import argparse
from datetime import datetime, timezone

import pytest

from relkit.args import (
    add_org_arg,
    add_org_project_args,
    add_projects_arg,
    add_version_arg,
    get_timestamp,
    validate_id,
    validate_int,
    validate_org,
    validate_project,
    validate_timestamp,
    validate_uuid,
    validate_version,
)


def test_validate_org_accepts_slug():
    assert validate_org("my-org") == "my-org"


@pytest.mark.parametrize("value", ["a/b", ".", "..", "My Org"])
def test_validate_org_rejects(value):
    with pytest.raises(argparse.ArgumentTypeError, match="Use the URL slug and not the name"):
        validate_org(value)


def test_validate_project_accepts_slug():
    assert validate_project("backend") == "backend"


@pytest.mark.parametrize("value", ["a/b", ".", "..", "a b", "a\nb", "a\tb", "a\rb"])
def test_validate_project_rejects(value):
    with pytest.raises(argparse.ArgumentTypeError, match="Invalid value for project"):
        validate_project(value)


def test_validate_version_accepts():
    assert validate_version("1.0.0+build") == "1.0.0+build"


@pytest.mark.parametrize("value", [" 1.0", "1.0 ", "1.0\n"])
def test_validate_version_rejects_surrounding_space(value):
    with pytest.raises(argparse.ArgumentTypeError, match="leading or trailing spaces"):
        validate_version(value)


@pytest.mark.parametrize("value", ["", ".", "..", "a/b", "a\tb", "a\x0bb", "a\x0cb"])
def test_validate_version_rejects_characters(value):
    with pytest.raises(argparse.ArgumentTypeError, match="Slashes and certain whitespace"):
        validate_version(value)


@pytest.mark.parametrize("value", ["0", "-12", "+7", "9223372036854775807"])
def test_validate_int_accepts(value):
    assert validate_int(value) == value


@pytest.mark.parametrize("value", ["", "1.5", " 1", "1_000", "abc", "9223372036854775808", "-"])
def test_validate_int_rejects(value):
    with pytest.raises(argparse.ArgumentTypeError, match="integer required"):
        validate_int(value)


def test_validate_uuid():
    value = "dfb8e43a-f242-3d73-a453-aeb6a777ef75"
    assert validate_uuid(value) == value
    with pytest.raises(argparse.ArgumentTypeError, match="Invalid UUID."):
        validate_uuid("not-a-uuid")


@pytest.mark.parametrize(
    "value",
    [
        "dfb8e43a-f242-3d73-a453-aeb6a777ef75",
        "dfb8e43a-f242-3d73-a453-aeb6a777ef75-a",
        "DFB8E43AF2423D73A453AEB6A777EF75a",
    ],
)
def test_validate_id_accepts(value):
    assert validate_id(value) == value


@pytest.mark.parametrize("value", ["", "not-an-id", "dfb8e43a-f242"])
def test_validate_id_rejects(value):
    with pytest.raises(argparse.ArgumentTypeError, match="Invalid ID."):
        validate_id(value)


def test_get_timestamp_epoch():
    assert get_timestamp("0") == datetime(1970, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("seconds", [1, 1600000000, 2000000000])
def test_get_timestamp_unix_round_trip(seconds):
    assert get_timestamp(str(seconds)).timestamp() == seconds


def test_get_timestamp_rfc3339():
    assert get_timestamp("2021-01-02T03:04:05Z") == datetime(2021, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_get_timestamp_rfc3339_offset_is_converted():
    result = get_timestamp("2021-01-02T03:04:05+02:00")
    assert result == datetime(2021, 1, 2, 1, 4, 5, tzinfo=timezone.utc)
    assert result.utcoffset().total_seconds() == 0


def test_get_timestamp_rfc2822():
    result = get_timestamp("Sat, 02 Jan 2021 03:04:05 +0000")
    assert result == datetime(2021, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", ["yesterday", "2021-01-02T03:04:05", ""])
def test_get_timestamp_rejects(value):
    with pytest.raises(ValueError, match="Unix timestamp or ISO 8601 date expected"):
        get_timestamp(value)


def test_validate_timestamp():
    assert validate_timestamp("0") == "0"
    with pytest.raises(argparse.ArgumentTypeError, match="Not in valid format"):
        validate_timestamp("nope")


def test_org_project_parser():
    parser = add_org_project_args(argparse.ArgumentParser())
    ns = parser.parse_args(["--org", "acme", "-p", "web"])
    assert (ns.org, ns.project) == ("acme", "web")


def test_org_parser_rejects_invalid():
    parser = add_org_arg(argparse.ArgumentParser())
    with pytest.raises(SystemExit):
        parser.parse_args(["--org", "Acme Inc"])


def test_projects_parser_collects_multiple():
    parser = add_projects_arg(argparse.ArgumentParser())
    assert parser.parse_args(["-p", "a", "--project", "b"]).projects == ["a", "b"]
    assert parser.parse_args([]).projects is None


def test_version_parser():
    parser = add_version_arg(argparse.ArgumentParser())
    assert parser.parse_args(["1.2.3"]).version == "1.2.3"
    with pytest.raises(SystemExit):
        parser.parse_args([])
    with pytest.raises(SystemExit):
        parser.parse_args(["a/b"])