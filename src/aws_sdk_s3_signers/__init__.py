# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""AWS SDK S3 Signers computes the HMAC-SHA1 ``Authorization`` values and presigned
URL signatures used by S3 compatible object stores, for use with HTTP tools such as
AioHTTP, Requests, urllib3, etc."""

from __future__ import annotations

from ._http import AWSRequest, Field, Fields, URI
from ._identity import AWSCredentialIdentity
from ._request import SigningRequest
from .canonicalization import (
    AMZ_HEADER_PREFIX,
    SUB_RESOURCES,
    canonicalize_headers,
    canonicalize_resource,
)
from .exceptions import (
    InvalidResource,
    InvalidResourceException,
    MissingField,
    MissingFieldException,
)
from .signers import SigV2Signer, SigV2SigningProperties

__license__ = "Apache-2.0"
__version__ = "0.1.0"

__all__ = (
    "AMZ_HEADER_PREFIX",
    "SUB_RESOURCES",
    "URI",
    "AWSCredentialIdentity",
    "AWSRequest",
    "Field",
    "Fields",
    "InvalidResource",
    "InvalidResourceException",
    "MissingField",
    "MissingFieldException",
    "SigV2Signer",
    "SigV2SigningProperties",
    "SigningRequest",
    "canonicalize_headers",
    "canonicalize_resource",
)
