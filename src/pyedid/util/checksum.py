from typing import List

BLOCK_SIZE = 128
EXTENSION_COUNT_OFFSET = 0x7E


def block_checksum(block: bytes) -> int:
    return sum(block) & 0xFF


def is_block_valid(block: bytes) -> bool:
    """A block is valid when all of its bytes, checksum included, sum to 0 mod 256."""
    return len(block) == BLOCK_SIZE and block_checksum(block) == 0


def verify_checksums(data: bytes) -> List[bool]:
    """
    Check the base block and, when one is declared, the first extension block.

    Only complete 128-byte blocks are checked: the result has one entry per
    such block, in order.
    """
    results = []
    if len(data) < BLOCK_SIZE:
        return results

    results.append(is_block_valid(data[:BLOCK_SIZE]))
    if data[EXTENSION_COUNT_OFFSET] and len(data) >= 2 * BLOCK_SIZE:
        results.append(is_block_valid(data[BLOCK_SIZE:2 * BLOCK_SIZE]))
    return results
