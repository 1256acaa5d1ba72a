"""Protocol-wide constants for shares, namespaces and data squares."""

from datetime import timedelta

# Size of a namespace version in bytes.
NAMESPACE_VERSION_SIZE = 1

# Size of a namespace ID in bytes.
NAMESPACE_ID_SIZE = 32

# Size of a namespace (version + ID) in bytes.
NAMESPACE_SIZE = NAMESPACE_VERSION_SIZE + NAMESPACE_ID_SIZE

# Size of a share in bytes.
SHARE_SIZE = 512

# Bytes reserved for the info byte (share version and sequence start flag).
SHARE_INFO_BYTES = 1

# Bytes reserved for the sequence length in the first share of a sequence.
SEQUENCE_LEN_BYTES = 4

# The first share version format.
SHARE_VERSION_ZERO = 0

# The share version to use when unsure.
DEFAULT_SHARE_VERSION = SHARE_VERSION_ZERO

# Bytes reserved in a compact share for the location of its first unit.
COMPACT_SHARE_RESERVED_BYTES = 4

# Bytes usable for data in the first compact share of a sequence.
FIRST_COMPACT_SHARE_CONTENT_SIZE = (
    SHARE_SIZE
    - NAMESPACE_SIZE
    - SHARE_INFO_BYTES
    - SEQUENCE_LEN_BYTES
    - COMPACT_SHARE_RESERVED_BYTES
)

# Bytes usable for data in a continuation compact share.
CONTINUATION_COMPACT_SHARE_CONTENT_SIZE = (
    SHARE_SIZE - NAMESPACE_SIZE - SHARE_INFO_BYTES - COMPACT_SHARE_RESERVED_BYTES
)

# Bytes usable for data in the first sparse share of a sequence.
FIRST_SPARSE_SHARE_CONTENT_SIZE = (
    SHARE_SIZE - NAMESPACE_SIZE - SHARE_INFO_BYTES - SEQUENCE_LEN_BYTES
)

# Bytes usable for data in a continuation sparse share.
CONTINUATION_SPARSE_SHARE_CONTENT_SIZE = SHARE_SIZE - NAMESPACE_SIZE - SHARE_INFO_BYTES

# Maximum width of the unextended square (128 * 128 * 512 bytes = 8 MiB).
DEFAULT_MAX_SQUARE_SIZE = 128

# Maximum number of shares in the unextended data square.
MAX_SHARE_COUNT = DEFAULT_MAX_SQUARE_SIZE * DEFAULT_MAX_SQUARE_SIZE

# Smallest width of the unextended square.
DEFAULT_MIN_SQUARE_SIZE = 1

# Minimum number of shares in the unextended data square.
MIN_SHARE_COUNT = DEFAULT_MIN_SQUARE_SIZE * DEFAULT_MIN_SQUARE_SIZE

# Maximum value a share version can take.
MAX_SHARE_VERSION = 127

# Default gas cost per byte of blob included in a PayForBlobs transaction.
DEFAULT_GAS_PER_BLOB_BYTE = 8

# Maximum number of transactions a block producer includes in a block.
TRANSACTIONS_PER_BLOCK_LIMIT = 5090

# Share versions that are understood by the parser.
SUPPORTED_SHARE_VERSIONS = (SHARE_VERSION_ZERO,)

# Consensus timeouts.
TIMEOUT_PROPOSE = timedelta(seconds=10)
TIMEOUT_COMMIT = timedelta(seconds=10)