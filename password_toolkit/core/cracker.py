"""
Brute-force matcher for the Password Security Toolkit.

This module provides the HashCracker class, which recovers a 6-digit numeric
password from its SHA-256 digest by trying every candidate in ascending order.
"""

import multiprocessing
import time
from typing import Any, Callable, Dict, List, Optional

from tqdm import tqdm

from .digest import is_digest_hex, new_hasher
from .keyspace import SIX_DIGIT_KEYSPACE, NumericCandidateGenerator
from .worker import scan_range, search_slice
from password_toolkit.utils.exceptions import SearchCancelledError, WorkerError
from password_toolkit.utils.logger import get_logger


def _format_speed(speed: float) -> str:
    if speed > 1_000_000:
        return f"{speed / 1_000_000:.2f}M/s"
    if speed > 1_000:
        return f"{speed / 1_000:.2f}K/s"
    return f"{speed:.2f}/s"


class HashCracker:
    """Exhaustive search of the 6-digit keyspace for a target digest"""

    def __init__(self, processes: Optional[int] = 1, check_interval: int = 10000,
                 show_progress: bool = False, logger=None):
        """Initialize the search settings

        Args:
            processes: Worker processes to use; 1 (or None) runs the sequential
                search, 0 uses CPU count - 1
            check_interval: Candidates hashed between cancellation and
                progress checks
            show_progress: Whether to display a tqdm progress bar
            logger: Optional logger instance
        """
        if processes == 0:
            processes = max(1, multiprocessing.cpu_count() - 1)
        if processes is not None and processes < 0:
            raise ValueError("processes must not be negative")
        if check_interval < 1:
            raise ValueError("check_interval must be at least 1")

        self.processes = processes or 1
        self.check_interval = check_interval
        self.show_progress = show_progress
        self.logger = logger or get_logger("cracker")

        self.keyspace: NumericCandidateGenerator = SIX_DIGIT_KEYSPACE
        self.active_processes: List[multiprocessing.Process] = []
        self.total_passwords_tried = 0
        self.start_time = 0.0

    def crack(self,
              target_hash: str,
              cancel_event=None,
              progress_callback: Optional[Callable[[Dict[str, Any]], None]] = None) -> Optional[str]:
        """Find the lowest 6-digit candidate whose digest equals target_hash

        Args:
            target_hash: 64-character lowercase hex digest. Anything else can
                never match and returns None without scanning.
            cancel_event: Optional event; once set the search stops. Must be a
                multiprocessing.Event when more than one process is used.
            progress_callback: Optional function called with progress data

        Returns:
            The matching candidate, or None if no candidate matches

        Raises:
            SearchCancelledError: If cancel_event was set during the search
            WorkerError: If a worker process died
        """
        self.total_passwords_tried = 0
        self.start_time = time.time()

        if not is_digest_hex(target_hash):
            self.logger.debug(f"Target {target_hash!r} is not a SHA-256 hex digest; nothing can match")
            return None

        target_digest = bytes.fromhex(target_hash)
        total_passwords = self.keyspace.get_total_count()
        self.logger.info(
            f"Searching {total_passwords:,} candidates for {target_hash[:8]}... "
            f"using {self.processes} process(es)"
        )

        if self.processes > 1:
            position = self._crack_parallel(target_digest, cancel_event, progress_callback)
        else:
            position = self._crack_sequential(target_digest, cancel_event, progress_callback)

        elapsed = time.time() - self.start_time
        if position is None:
            self.logger.info(
                f"No candidate matched after {self.total_passwords_tried:,} tries "
                f"in {elapsed:.2f} seconds"
            )
            return None

        password = self.keyspace.position_to_password(position)
        self.logger.info(f"PASSWORD FOUND: {password}")
        self.logger.info(f"Passwords tried: {self.total_passwords_tried:,} in {elapsed:.2f} seconds")
        return password

    def _crack_sequential(self, target_digest: bytes, cancel_event,
                          progress_callback) -> Optional[int]:
        """Reference search: one chunk at a time, in ascending order"""
        total_passwords = self.keyspace.get_total_count()
        template = self.keyspace.byte_template
        prototype = new_hasher()

        with tqdm(total=total_passwords, unit="pw", disable=not self.show_progress) as progress_bar:
            for chunk_start in range(0, total_passwords, self.check_interval):
                if cancel_event is not None and cancel_event.is_set():
                    raise SearchCancelledError(
                        f"Search cancelled after {self.total_passwords_tried:,} candidates"
                    )

                chunk_stop = min(chunk_start + self.check_interval, total_passwords)
                match = scan_range(target_digest, chunk_start, chunk_stop, template, prototype)

                done = (chunk_stop - chunk_start) if match is None else (match - chunk_start + 1)
                self.total_passwords_tried += done
                progress_bar.update(done)
                self._report_progress(progress_bar, total_passwords, progress_callback)

                if match is not None:
                    return match

        return None

    def _crack_parallel(self, target_digest: bytes, cancel_event,
                        progress_callback) -> Optional[int]:
        """Split the keyspace into one contiguous slice per worker process"""
        total_passwords = self.keyspace.get_total_count()
        template = self.keyspace.byte_template

        # total_passwords means "no match yet"
        best = multiprocessing.Value("q", total_passwords)
        tried = multiprocessing.Value("q", 0)

        slice_size = -(-total_passwords // self.processes)

        try:
            for worker_id, slice_start in enumerate(range(0, total_passwords, slice_size)):
                slice_stop = min(slice_start + slice_size, total_passwords)
                p = multiprocessing.Process(
                    target=search_slice,
                    args=(target_digest, slice_start, slice_stop, template, best, tried),
                    kwargs={"cancel_event": cancel_event, "check_interval": self.check_interval},
                    name=f"bruteforce-worker-{worker_id}",
                )
                p.start()
                self.active_processes.append(p)
                self.logger.debug(f"Worker-{worker_id}: scanning [{slice_start:,}, {slice_stop:,})")

            with tqdm(total=total_passwords, unit="pw", disable=not self.show_progress) as progress_bar:
                while any(p.is_alive() for p in self.active_processes):
                    self._sync_progress(progress_bar, tried, total_passwords, progress_callback)
                    # Short sleep to prevent CPU thrashing
                    time.sleep(0.01)

                for p in self.active_processes:
                    p.join()
                self._sync_progress(progress_bar, tried, total_passwords, progress_callback)

            failed = [p for p in self.active_processes if p.exitcode != 0]
            if failed:
                raise WorkerError(
                    f"{len(failed)} worker process(es) exited abnormally: "
                    + ", ".join(f"{p.name} (exit code {p.exitcode})" for p in failed)
                )
        finally:
            self._cleanup_processes()

        if cancel_event is not None and cancel_event.is_set():
            raise SearchCancelledError(
                f"Search cancelled after {self.total_passwords_tried:,} candidates"
            )

        if best.value < total_passwords:
            return best.value
        return None

    def _sync_progress(self, progress_bar, tried, total_passwords, progress_callback) -> None:
        """Copy the shared worker counter into the progress bar"""
        current = tried.value
        if current > self.total_passwords_tried:
            progress_bar.update(current - self.total_passwords_tried)
            self.total_passwords_tried = current
            self._report_progress(progress_bar, total_passwords, progress_callback)

    def _report_progress(self, progress_bar, total_passwords: int, progress_callback) -> None:
        """Update the progress bar description and call the progress callback"""
        elapsed = time.time() - self.start_time
        speed = self.total_passwords_tried / elapsed if elapsed > 0 else 0.0
        if self.show_progress:
            progress_bar.set_description(
                f"Tried: {self.total_passwords_tried:,} | Speed: {_format_speed(speed)}"
            )

        if progress_callback:
            progress_callback({
                "total_tried": self.total_passwords_tried,
                "total_passwords": total_passwords,
                "speed": speed,
                "elapsed": elapsed,
            })

    def _cleanup_processes(self) -> None:
        """Terminate and clean up any active worker processes"""
        for p in self.active_processes:
            if p.is_alive():
                p.terminate()
                p.join(timeout=1)
        self.active_processes = []


def brute_force_6digit(target_hash: str,
                       processes: Optional[int] = 1,
                       show_progress: bool = False,
                       cancel_event=None) -> Optional[str]:
    """Recover a 6-digit numeric password from its SHA-256 hex digest

    Returns:
        The lowest matching candidate (e.g. "004217"), or None
    """
    cracker = HashCracker(processes=processes, show_progress=show_progress)
    return cracker.crack(target_hash, cancel_event=cancel_event)
