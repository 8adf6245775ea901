# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""Canonical forms of the request fields that take part in an S3 HMAC-SHA1
signature."""

from collections.abc import Mapping
from urllib.parse import parse_qsl

from .exceptions import InvalidResourceException, MissingFieldException

AMZ_HEADER_PREFIX: str = "x-amz"

# Query parameters that change the meaning of a request and must be signed.
SUB_RESOURCES: frozenset[str] = frozenset(
    (
        "acl",
        "location",
        "logging",
        "notification",
        "partNumber",
        "policy",
        "requestPayment",
        "torrent",
        "uploadId",
        "uploads",
        "versionId",
        "versioning",
        "versions",
        "website",
        "response-content-type",
        "response-content-language",
        "response-expires",
        "response-cache-control",
        "response-content-disposition",
        "response-content-encoding",
    )
)


def canonicalize_headers(headers: Mapping[str, str]) -> str:
    """Build the canonical ``x-amz`` header block.

    Header names are lower-cased and sorted, and each header is rendered as
    ``name:value`` with surrounding whitespace removed. Headers without the
    ``x-amz`` prefix are ignored. When two names only differ by case, the value
    of the name that sorts last wins.

    :param headers: Mapping of header names to values.
    :returns: Newline separated header lines, or the empty string when no header
        qualifies.
    """
    canonical: dict[str, str] = {}
    for name in sorted(headers):
        lower_name = name.strip().lower()
        if not lower_name.startswith(AMZ_HEADER_PREFIX):
            continue
        canonical[lower_name] = headers[name].strip()
    return "\n".join(f"{name}:{canonical[name]}" for name in sorted(canonical))


def canonicalize_resource(resource: str) -> str:
    """Reduce a request path and query string to its signed form.

    Only sub-resources are kept from the query string. They are sorted by name
    and rendered as ``name`` when blank or ``name=value`` otherwise. Values are
    not percent-encoded.

    :param resource: The path of the request, optionally followed by ``?query``.
    :raises MissingFieldException: If ``resource`` is empty or not a string.
    :raises InvalidResourceException: If ``resource`` cannot be split into a path
        and a query string.
    """
    path, query = _split_resource(resource)
    sub_resources: dict[str, list[str]] = {}
    for name, value in parse_qsl(query, keep_blank_values=True):
        if name in SUB_RESOURCES:
            sub_resources.setdefault(name, []).append(value)

    if not sub_resources:
        return path

    entries = (
        _format_sub_resource(name, ",".join(sub_resources[name]))
        for name in sorted(sub_resources)
    )
    return f"{path}?{'&'.join(entries)}"


def _format_sub_resource(name: str, value: str) -> str:
    if value == "":
        return name
    return f"{name}={value}"


def _split_resource(resource: str) -> tuple[str, str]:
    if not isinstance(resource, str) or not resource:
        raise MissingFieldException("resource")
    if not resource.startswith("/"):
        raise InvalidResourceException(resource, "the path must begin with '/'")
    if "#" in resource:
        raise InvalidResourceException(resource, "fragments are not sent to S3")
    if "\n" in resource or "\r" in resource:
        raise InvalidResourceException(resource, "line breaks are not allowed")

    path, _, query = resource.partition("?")
    return path, query
