"""Compacting a disk map of files and free space."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace

FREE_ID = -1


@dataclass
class Fragment:
    """A run of blocks: a file with its id, or free space."""

    id: int
    size: int
    is_file: bool = False


def checksum(file_ids: Iterable[int]) -> int:
    """Sum of block position times file id."""
    return sum(index * file_id for index, file_id in enumerate(file_ids))


def file_iter(fragments: Sequence[Fragment]) -> Iterator[int]:
    """Yield block file ids after moving blocks from the end into free space one by one."""
    frags = [replace(f) for f in fragments]
    left, right = 0, len(frags) - 1
    pending: deque[int] = deque()

    while left < len(frags):
        fragment = frags[left]

        if fragment.is_file:
            for _ in range(fragment.size):
                yield fragment.id
        else:
            while len(pending) < fragment.size and left < right:
                tail = frags[right]
                if tail.is_file:
                    pending.extend([tail.id] * tail.size)
                    tail.is_file = False
                    tail.id = FREE_ID
                right -= 1

            for _ in range(fragment.size):
                if not pending:
                    return
                yield pending.popleft()

        left += 1


def file_iter2(fragments: Sequence[Fragment]) -> int:
    """Move whole files, highest id first, into the leftmost hole that fits; return the checksum."""
    frags = [replace(f) for f in fragments]

    for file in reverse_files(frags):
        found = find_hole(frags, file)
        if found is None:
            continue
        hole_index, hole = found

        remaining = hole.size - file.size
        frags[hole_index] = replace(file)

        if remaining > 0:
            following = frags[hole_index + 1]
            if not following.is_file:
                following.size += remaining
            else:
                frags.insert(hole_index + 1, Fragment(FREE_ID, remaining))

        clear_file(frags, file.id)

    total = 0
    index = 0
    for frag in frags:
        if not frag.is_file:
            index += frag.size
            continue
        for _ in range(frag.size):
            total += index * frag.id
            index += 1
    return total


def clear_file(fragments: list[Fragment], file_id: int) -> None:
    """Turn the last fragment with file_id into free space, merged with free neighbours."""
    pivot = next((k for k in range(len(fragments) - 1, -1, -1) if fragments[k].id == file_id), None)
    if pivot is None:
        raise ValueError(f"no fragment with id {file_id}")

    size = fragments[pivot].size

    if pivot < len(fragments) - 1 and not fragments[pivot + 1].is_file:
        size += fragments[pivot + 1].size
        fragments[pivot + 1].size = 0

    if pivot > 0 and not fragments[pivot - 1].is_file:
        size += fragments[pivot - 1].size
        fragments[pivot - 1].size = 0

    fragments[pivot] = Fragment(FREE_ID, size)


def find_hole(fragments: Sequence[Fragment], src: Fragment) -> tuple[int, Fragment] | None:
    """Return the first free fragment before src large enough to hold it, with its index."""
    for index, frag in enumerate(fragments):
        if frag.is_file:
            if frag.id == src.id:
                break
            continue
        if frag.size >= src.size:
            return index, frag
    return None


def reverse_files(fragments: Sequence[Fragment]) -> list[Fragment]:
    """Copies of the file fragments, last first."""
    return [replace(f) for f in reversed(fragments) if f.is_file]