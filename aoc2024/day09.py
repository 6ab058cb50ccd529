"""Disk Fragmenter: compact a disk map and compute its checksum."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


def _digits(text: str) -> Iterable[tuple[bool, int]]:
    """(is_file, length) for each digit; parity follows the character index."""
    for index, char in enumerate(text):
        if char.isdigit() and char.isascii():
            yield index % 2 == 0, int(char)


def _checksum(blocks: Iterable[int | None]) -> int:
    return sum(pos * file_id for pos, file_id in enumerate(blocks) if file_id is not None)


def part1(text: str) -> int:
    """Checksum after moving file blocks one at a time into the leftmost gaps."""
    blocks: list[int | None] = []
    file_id = 0
    for is_file, length in _digits(text):
        blocks.extend([file_id if is_file else None] * length)
        if is_file:
            file_id += 1
    if not blocks:
        raise ValueError("disk map is empty")
    i, j = 0, len(blocks) - 1
    while i < j:
        if blocks[i] is not None:
            i += 1
        elif blocks[j] is None:
            j -= 1
        else:
            blocks[i], blocks[j] = blocks[j], blocks[i]
            i += 1
            j -= 1
    return _checksum(blocks)


@dataclass
class _Span:
    file_id: int | None
    size: int
    checked: bool = False

    @property
    def is_free(self) -> bool:
        return self.file_id is None


def _squash(spans: list[_Span]) -> None:
    """Merge neighbouring free spans."""
    merged: list[_Span] = []
    for span in spans:
        if merged and span.is_free and merged[-1].is_free:
            merged[-1].size += span.size
        else:
            merged.append(span)
    spans[:] = merged


def _reorder(spans: list[_Span]) -> bool:
    """One pass of whole-file moves; False when a pass must restart."""
    for i in reversed(range(len(spans))):
        span = spans[i]
        if span.checked or span.is_free:
            continue
        for j in range(i):
            gap = spans[j]
            if not gap.is_free:
                continue
            span.checked = True
            if gap.size == span.size:
                spans[i], spans[j] = spans[j], spans[i]
                break
            if gap.size > span.size:
                gap.size -= span.size
                spans[i] = _Span(None, span.size)
                spans.insert(j, span)
                _squash(spans)
                return False
    _squash(spans)
    return True


def part2(text: str) -> int:
    """Checksum after moving whole files into the leftmost gap that fits."""
    spans: list[_Span] = []
    file_id = 0
    for is_file, length in _digits(text):
        if is_file:
            spans.append(_Span(file_id, length))
            file_id += 1
        else:
            spans.append(_Span(None, length))
    if not spans:
        raise ValueError("disk map is empty")
    while not _reorder(spans):
        pass
    return _checksum(
        file_id for span in spans for file_id in [span.file_id] * span.size
    )