# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

_EMPTY_HEADERS: Mapping[str, str] = MappingProxyType({})


@dataclass(kw_only=True, frozen=True)
class SigningRequest:
    """The metadata of a single outgoing request that takes part in its signature.

    Absent values are represented by the empty string since the string to sign
    reserves a position for every field.
    """

    date: str
    """The date exactly as sent to the service, for example
    ``Tue, 27 Mar 2007 19:36:42 +0000``. For presigned URLs this is the expiry
    timestamp in epoch seconds."""

    resource: str
    """The request path with its optional query string, for example
    ``/bucket/key?acl``."""

    verb: str = ""
    """The HTTP method, for example ``GET`` or ``PUT``."""

    access_key: str = ""
    """Public identifier of the signing credentials."""

    secret_key: str = field(default="", repr=False)
    """Secret used to key the HMAC. Never logged or retained."""

    content_md5: str = ""
    """Base64 encoded MD5 digest of the payload."""

    content_type: str = ""
    """MIME type of the payload."""

    service_headers: Mapping[str, str] = field(default=_EMPTY_HEADERS)
    """Request headers. Only ``x-amz`` prefixed names are signed."""
