"""Manifest scanner - find packages that ship a command."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Union

from command_not_found.config import EXECUTABLE_DIRECTORIES, FUZZY_MATCH_THRESHOLD, MANIFEST_SUFFIX
from command_not_found.errors import ManifestOpenError, TraversalStatError
from command_not_found.matching.similarity import similarity
from command_not_found.scanner.walk import EntryKind, WalkEntry, walk

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchRequest:
    """A command to look up and the filelist tree to search."""

    target_command: str
    root_path: str

    def __post_init__(self) -> None:
        if not self.target_command:
            raise ValueError("target_command must not be empty")
        if not self.root_path:
            raise ValueError("root_path must not be empty")


@dataclass(frozen=True)
class ExactMatch:
    """A package shipping a command with exactly the requested name."""

    package_name: str


@dataclass(frozen=True)
class FuzzyMatch:
    """A package shipping a command with a similar name."""

    package_name: str
    command_name: str
    score: float

    def describe(self) -> str:
        return f"Command '{self.command_name}' from package {self.package_name}"


MatchRecord = Union[ExactMatch, FuzzyMatch]


@dataclass
class ScanResult:
    """Matches collected in traversal order."""

    exact_matches: list[ExactMatch] = field(default_factory=list)
    fuzzy_matches: list[FuzzyMatch] = field(default_factory=list)

    @property
    def found(self) -> bool:
        """Check if any package was matched."""
        return bool(self.exact_matches or self.fuzzy_matches)

    @property
    def packages(self) -> list[str]:
        """Package names of the exact matches."""
        return [match.package_name for match in self.exact_matches]


def package_name(path: str) -> str:
    """Package name of a manifest: its file name up to the first dot."""
    return os.path.basename(path).split(".", 1)[0]


def command_name(path: bytes) -> bytes:
    """Final component of an installed path, ignoring trailing slashes."""
    stripped = path.rstrip(b"/")
    if not stripped:
        return b"/" if path else b""
    return stripped.rsplit(b"/", 1)[-1]


class ManifestScanner:
    """Scans filelist manifests for a single target command.

    The scanner owns the ScanResult it fills; records are appended in the
    order the walk visits manifests and lines appear in them. Nothing is
    deduplicated.
    """

    def __init__(self, target_command: str) -> None:
        """Initialize scanner.

        Args:
            target_command: Command name the user tried to run
        """
        if not target_command:
            raise ValueError("target_command must not be empty")

        self.target_command = target_command
        self.result = ScanResult()
        self.manifests_scanned = 0

        # Names are compared byte for byte
        self._target = os.fsencode(target_command)
        self._prefixes = tuple(os.fsencode(prefix) for prefix in EXECUTABLE_DIRECTORIES)

    def scan(self, root_path: str | os.PathLike[str]) -> ScanResult:
        """Walk ``root_path`` and collect matches from every manifest.

        Args:
            root_path: Root of the filelist tree

        Returns:
            The accumulated ScanResult

        Raises:
            TraversalStatError: An entry below the root could not be stat'ed
            ManifestOpenError: A manifest could not be opened or read
        """
        for entry in walk(root_path):
            self.consume(entry)

        logger.debug(
            f"Scanned {self.manifests_scanned} manifest(s): "
            f"{len(self.result.exact_matches)} exact, "
            f"{len(self.result.fuzzy_matches)} fuzzy"
        )
        return self.result

    def consume(self, entry: WalkEntry) -> None:
        """Process one entry produced by the walk."""
        if entry.kind is EntryKind.STAT_FAILED:
            if entry.depth == 0:
                # An inaccessible root is an empty tree
                logger.debug(f"Cannot stat search root {entry.path}: {entry.error}")
                return
            raise TraversalStatError.from_os_error(entry.path, entry.error) from entry.error

        if entry.kind is EntryKind.UNREADABLE_DIRECTORY:
            logger.warning(f"Skipping unreadable directory {entry.path}: {entry.error}")
            return

        if entry.kind not in (EntryKind.FILE, EntryKind.SYMLINK):
            return

        if entry.name.endswith(MANIFEST_SUFFIX):
            self.read_manifest(entry.path)

    def read_manifest(self, path: str) -> None:
        """Match every line of a manifest file against the target.

        Raises:
            ManifestOpenError: The file could not be opened or read
        """
        package = package_name(path)
        logger.debug(f"Reading manifest {path} (package {package})")

        try:
            with open(path, "rb") as manifest:
                for line in manifest:
                    self.match_line(package, line)
        except OSError as e:
            raise ManifestOpenError.from_os_error(path, e) from e

        self.manifests_scanned += 1

    def match_line(self, package: str, line: bytes) -> MatchRecord | None:
        """Match one manifest line and record the outcome.

        Only lines starting with an executable directory are considered.
        The prefix test is a plain string prefix, so ``/usr/local/binx/y``
        counts as well.

        Args:
            package: Package owning the manifest
            line: Raw line, possibly ending in a newline

        Returns:
            The recorded match, or None
        """
        for prefix in self._prefixes:
            if not line.startswith(prefix):
                continue

            if line.endswith(b"\n"):
                line = line[:-1]

            candidate = command_name(line)

            if candidate == self._target:
                record: MatchRecord = ExactMatch(package_name=package)
                self.result.exact_matches.append(record)
                logger.debug(f"Exact match in package {package}")
                return record

            score = similarity(candidate, self._target)
            if score > FUZZY_MATCH_THRESHOLD:
                record = FuzzyMatch(
                    package_name=package,
                    command_name=os.fsdecode(candidate),
                    score=score,
                )
                self.result.fuzzy_matches.append(record)
                logger.debug(f"Fuzzy match {record.command_name!r} in package {package} ({score:.3f})")
                return record

            # First matching prefix settles the line
            return None

        return None


def scan(root_path: str | os.PathLike[str], target_command: str) -> ScanResult:
    """Scan a filelist tree for packages providing ``target_command``."""
    return ManifestScanner(target_command).scan(root_path)


def scan_request(request: SearchRequest) -> ScanResult:
    """Run a scan for a validated SearchRequest."""
    return scan(request.root_path, request.target_command)
