"""
Worker module for the Password Security Toolkit.

This module contains the hashing loop shared by the sequential search and the
worker processes of the parallel search.
"""

from typing import Optional

from .digest import new_hasher


def scan_range(target_digest: bytes, start: int, stop: int,
               template: bytes, prototype=None) -> Optional[int]:
    """Hash every candidate in [start, stop) in ascending order

    Args:
        target_digest: Raw digest bytes to look for
        start: First position to try
        stop: Position after the last one to try
        template: Bytes %-format rendering a position as a candidate
        prototype: Optional empty hash object to copy per candidate

    Returns:
        The first matching position, or None
    """
    if prototype is None:
        prototype = new_hasher()

    for position in range(start, stop):
        hasher = prototype.copy()
        hasher.update(template % position)
        if hasher.digest() == target_digest:
            return position

    return None


def search_slice(target_digest: bytes,
                 start: int,
                 stop: int,
                 template: bytes,
                 best,
                 tried,
                 cancel_event=None,
                 check_interval: int = 10000) -> None:
    """Worker process that scans one slice of the keyspace

    The slice is scanned in chunks. Before each chunk the worker checks the
    shared ``best`` position and stops once a match below the chunk is known,
    so every slice below the lowest match still runs to completion.

    Args:
        target_digest: Raw digest bytes to look for
        start: First position of the slice
        stop: Position after the slice
        template: Bytes %-format rendering a position as a candidate
        best: Shared multiprocessing.Value holding the lowest match so far
        tried: Shared multiprocessing.Value counting candidates hashed
        cancel_event: Optional multiprocessing.Event that stops the worker
        check_interval: Candidates per chunk
    """
    prototype = new_hasher()

    for chunk_start in range(start, stop, check_interval):
        if best.value < chunk_start:
            return
        if cancel_event is not None and cancel_event.is_set():
            return

        chunk_stop = min(chunk_start + check_interval, stop)
        match = scan_range(target_digest, chunk_start, chunk_stop, template, prototype)

        with tried.get_lock():
            tried.value += (chunk_stop - chunk_start) if match is None else (match - chunk_start + 1)

        if match is not None:
            with best.get_lock():
                if match < best.value:
                    best.value = match
            return
