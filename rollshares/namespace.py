"""Namespaces: a version byte followed by a 32-byte ID."""

from __future__ import annotations

import secrets
from dataclasses import dataclass

from rollshares import appconsts

NAMESPACE_VERSION_SIZE = appconsts.NAMESPACE_VERSION_SIZE
NAMESPACE_ID_SIZE = appconsts.NAMESPACE_ID_SIZE
NAMESPACE_SIZE = appconsts.NAMESPACE_SIZE

NAMESPACE_VERSION_ZERO = 0
NAMESPACE_VERSION_MAX = 255

# Number of zero bytes prefixed to version-0 namespace IDs.
NAMESPACE_VERSION_ZERO_PREFIX_SIZE = 22

# Number of user-specified bytes in a version-0 namespace ID.
NAMESPACE_VERSION_ZERO_ID_SIZE = NAMESPACE_ID_SIZE - NAMESPACE_VERSION_ZERO_PREFIX_SIZE

NAMESPACE_VERSION_ZERO_PREFIX = bytes(NAMESPACE_VERSION_ZERO_PREFIX_SIZE)


class NamespaceError(ValueError):
    """Raised for an unsupported or invalid namespace."""


@dataclass(frozen=True)
class Namespace:
    """A validated namespace; construction fails for unsupported versions or IDs."""

    version: int
    id: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", bytes(self.id))
        if self.version not in (NAMESPACE_VERSION_ZERO, NAMESPACE_VERSION_MAX):
            raise NamespaceError(f"unsupported namespace version {self.version}")
        if len(self.id) != NAMESPACE_ID_SIZE:
            raise NamespaceError(
                f"unsupported namespace id length: id {list(self.id)} must be "
                f"{NAMESPACE_ID_SIZE} bytes but it was {len(self.id)} bytes"
            )
        if self.version == NAMESPACE_VERSION_ZERO and not self.id.startswith(
            NAMESPACE_VERSION_ZERO_PREFIX
        ):
            raise NamespaceError(
                f"unsupported namespace id with version {self.version}. ID "
                f"{list(self.id)} must start with "
                f"{len(NAMESPACE_VERSION_ZERO_PREFIX)} leading zeros"
            )

    @classmethod
    def from_bytes(cls, data: bytes) -> Namespace:
        """Parse a namespace from its serialized form."""
        if len(data) != NAMESPACE_SIZE:
            raise NamespaceError(
                f"invalid namespace length: {len(data)} must be {NAMESPACE_SIZE}"
            )
        return cls(data[0], bytes(data[1:]))

    @classmethod
    def v0(cls, id: bytes) -> Namespace:
        """Build a version-0 namespace from the user-specified part of its ID."""
        if len(id) != NAMESPACE_VERSION_ZERO_ID_SIZE:
            raise NamespaceError(
                f"invalid namespace id length: {len(id)} must be "
                f"{NAMESPACE_VERSION_ZERO_ID_SIZE}"
            )
        return cls(NAMESPACE_VERSION_ZERO, NAMESPACE_VERSION_ZERO_PREFIX + bytes(id))

    def to_bytes(self) -> bytes:
        """Return the version byte followed by the ID."""
        return bytes([self.version]) + self.id

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def validate_blob_namespace(self) -> None:
        """Raise NamespaceError if this namespace may not hold blobs."""
        if self.is_reserved():
            raise NamespaceError(
                f"invalid blob namespace: {list(self.to_bytes())} cannot use a reserved "
                f"namespace ID, want > {list(MAX_RESERVED_NAMESPACE.to_bytes())}"
            )
        if self.is_parity_shares():
            raise NamespaceError(
                f"invalid blob namespace: {list(self.to_bytes())} cannot use parity "
                "shares namespace ID"
            )
        if self.is_tail_padding():
            raise NamespaceError(
                f"invalid blob namespace: {list(self.to_bytes())} cannot use tail "
                "padding namespace ID"
            )

    def is_reserved(self) -> bool:
        return self.to_bytes() <= MAX_RESERVED_NAMESPACE.to_bytes()

    def is_parity_shares(self) -> bool:
        return self == PARITY_SHARES_NAMESPACE

    def is_tail_padding(self) -> bool:
        return self == TAIL_PADDING_NAMESPACE

    def is_reserved_padding(self) -> bool:
        return self == RESERVED_PADDING_NAMESPACE

    def is_tx(self) -> bool:
        return self == TX_NAMESPACE

    def is_pay_for_blob(self) -> bool:
        return self == PAY_FOR_BLOB_NAMESPACE


def _reserved(last: int) -> Namespace:
    return Namespace.v0(bytes(NAMESPACE_VERSION_ZERO_ID_SIZE - 1) + bytes([last]))


TX_NAMESPACE = _reserved(1)
INTERMEDIATE_STATE_ROOTS_NAMESPACE = _reserved(2)
PAY_FOR_BLOB_NAMESPACE = _reserved(4)
RESERVED_PADDING_NAMESPACE = _reserved(255)
MAX_RESERVED_NAMESPACE = _reserved(255)
TAIL_PADDING_NAMESPACE = Namespace(
    NAMESPACE_VERSION_MAX, b"\xff" * (NAMESPACE_ID_SIZE - 1) + b"\xfe"
)
PARITY_SHARES_NAMESPACE = Namespace(NAMESPACE_VERSION_MAX, b"\xff" * NAMESPACE_ID_SIZE)


def random_blob_namespace_id() -> bytes:
    """Return random bytes for the user-specified part of a version-0 ID."""
    return secrets.token_bytes(NAMESPACE_VERSION_ZERO_ID_SIZE)


def random_blob_namespace() -> Namespace:
    """Return a random version-0 namespace that is valid for blobs."""
    while True:
        namespace = Namespace.v0(random_blob_namespace_id())
        try:
            namespace.validate_blob_namespace()
        except NamespaceError:
            continue
        return namespace


def random_blob_namespaces(count: int) -> list[Namespace]:
    """Return ``count`` random blob namespaces."""
    return [random_blob_namespace() for _ in range(count)]


def random_version_zero_id() -> bytes:
    """Return a full random version-0 namespace ID, prefix included."""
    return NAMESPACE_VERSION_ZERO_PREFIX + secrets.token_bytes(
        NAMESPACE_VERSION_ZERO_ID_SIZE
    )


def random_namespace() -> Namespace:
    """Return a random version-0 namespace."""
    while True:
        try:
            return Namespace(NAMESPACE_VERSION_ZERO, random_version_zero_id())
        except NamespaceError:
            continue