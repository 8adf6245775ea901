# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""Minimal HTTP request model accepted by :meth:`SigV2Signer.sign`.

Only the pieces of a request that take part in an S3 HMAC-SHA1 signature are
modelled here. Transport is left to the caller.
"""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import AsyncIterable, Iterable, Iterator
from copy import deepcopy
from dataclasses import dataclass
from urllib.parse import urlunparse


class Field:
    """A named header with one or more values.

    Field names are case insensitive. The supplied casing is preserved for
    transmission.
    """

    def __init__(self, *, name: str, values: Iterable[str] | None = None):
        self.name = name
        self.values: list[str] = list(values) if values is not None else []

    def add(self, value: str) -> None:
        """Append a value to a field."""
        self.values.append(value)

    def as_string(self, delimiter: str = ",") -> str:
        """Get the values joined by ``delimiter``.

        S3 expects repeated headers to be folded into one comma separated value
        without spaces before signing.
        """
        return delimiter.join(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return False
        return self.name == other.name and self.values == other.values

    def __repr__(self) -> str:
        return f"Field(name={self.name!r}, values={self.values!r})"


class Fields:
    """Collection of header fields keyed by their lower-cased name."""

    def __init__(self, initial: Iterable[Field] | None = None):
        self.entries: OrderedDict[str, Field] = OrderedDict()
        for fld in initial or ():
            name = self._normalize_field_name(fld.name)
            if name in self.entries:
                raise ValueError(
                    "Field names of the initial list of fields must be unique. "
                    f"{fld.name} appears more than once."
                )
            self.entries[name] = fld

    def set_field(self, field: Field) -> None:
        """Set or replace the entry for ``field.name``."""
        self.entries[self._normalize_field_name(field.name)] = field

    def get(self, key: str, default: Field | None = None) -> Field | None:
        return self[key] if key in self else default

    def as_mapping(self) -> dict[str, str]:
        """Get a ``name -> value`` mapping with repeated values folded."""
        return {fld.name: fld.as_string() for fld in self}

    def __getitem__(self, name: str) -> Field:
        return self.entries[self._normalize_field_name(name)]

    def __delitem__(self, name: str) -> None:
        del self.entries[self._normalize_field_name(name)]

    def _normalize_field_name(self, name: str) -> str:
        return name.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fields):
            return False
        return self.entries == other.entries

    def __iter__(self) -> Iterator[Field]:
        yield from self.entries.values()

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: str) -> bool:
        return self._normalize_field_name(key) in self.entries

    def __repr__(self) -> str:
        return f"Fields({self.entries})"


@dataclass(kw_only=True, frozen=True)
class URI:
    """Target location of an :py:class:`AWSRequest`."""

    scheme: str = "https"
    """For example ``http`` or ``https``."""

    host: str
    """The hostname, for example ``s3.amazonaws.com``."""

    port: int | None = None
    """An explicit port number."""

    path: str | None = None
    """Path component of the URI."""

    query: str | None = None
    """Query component of the URI as string."""

    @property
    def netloc(self) -> str:
        if self.port is None:
            return self.host
        return f"{self.host}:{self.port}"

    @property
    def resource(self) -> str:
        """The path and query string as they appear on the request line."""
        path = self.path or "/"
        if self.query:
            return f"{path}?{self.query}"
        return path

    def build(self) -> str:
        """Construct URI string representation."""
        return urlunparse(
            (self.scheme, self.netloc, self.path or "", "", self.query or "", "")
        )


class AWSRequest:
    def __init__(
        self,
        *,
        destination: URI,
        method: str,
        body: AsyncIterable[bytes] | Iterable[bytes] | None,
        fields: Fields,
    ):
        self.destination = destination
        self.method = method
        self.body = body
        self.fields = fields

    def __deepcopy__(self, memo: dict[int, AWSRequest] | None = None) -> AWSRequest:
        if memo is None:
            memo = {}

        if id(self) in memo:
            return memo[id(self)]

        # the destination is immutable and the body may be a one-shot iterator
        new_instance = self.__class__(
            destination=self.destination,
            body=self.body,
            method=self.method,
            fields=deepcopy(self.fields, memo),
        )
        memo[id(self)] = new_instance
        return new_instance
