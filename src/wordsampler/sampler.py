"""Word sampler: draws random words from all.txt or per-length <N>.txt files."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from importlib.resources import files
from pathlib import Path
from typing import Iterable, Union

from wordsampler.sampling import RandomProvider, sample_without_replacement, shuffle

logger = logging.getLogger(__name__)

ALL_WORDS = "all"

# SourceDiagnostic kinds
MISSING = "missing"
READ_ERROR = "read_error"

SourceId = Union[str, int]


class InvalidRequestError(ValueError):
    pass


def bundled_dict_dir() -> Path:
    """Directory of the word lists shipped with the package."""
    return Path(str(files("wordsampler").joinpath("dict")))


def _check_int(name: str, value, minimum: int) -> int:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRequestError(f"'{name}' must be an integer, got {value!r}.")
    if value < minimum:
        raise InvalidRequestError(f"'{name}' must be >= {minimum}, got {value}.")
    return value


@dataclass(frozen=True)
class SampleRequest:
    """How many words to draw and, optionally, which lengths to draw them from."""

    count: int
    lengths: tuple[int, ...] = ()

    def __post_init__(self):
        _check_int("count", self.count, 0)
        seen: dict[int, None] = {}
        for length in self.lengths or ():
            seen[_check_int("length", length, 1)] = None
        object.__setattr__(self, "lengths", tuple(seen))

    @classmethod
    def build(cls, count: int, lengths: Iterable[int] | None = None) -> SampleRequest:
        return cls(count=count, lengths=tuple(lengths or ()))


@dataclass(frozen=True)
class SourceDiagnostic:
    """Why a source contributed no words."""

    identifier: SourceId
    path: str
    kind: str  # MISSING or READ_ERROR
    message: str


@dataclass
class SampleResult:
    words: list[str] = field(default_factory=list)
    diagnostics: list[SourceDiagnostic] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.words)


def parse_words(text: str) -> list[str]:
    """Split on newlines, strip each line, drop blanks. File order is kept."""
    return [line.strip() for line in text.split("\n") if line.strip()]


class WordSampler:
    """Random word selection from a directory of word-list files.

    root: directory holding all.txt and <N>.txt files. Defaults to the
    bundled dictionary.
    rng: randomness provider (anything with randrange). Defaults to the
    system entropy source.
    """

    def __init__(self, root: Path | str | None = None, rng: RandomProvider | None = None):
        self._root = Path(root) if root is not None else bundled_dict_dir()
        self._rng = rng

    @property
    def root(self) -> Path:
        return self._root

    def source_path(self, identifier: SourceId) -> Path:
        if identifier == ALL_WORDS:
            return self._root / "all.txt"
        return self._root / f"{_check_int('length', identifier, 1)}.txt"

    def load_source(
        self,
        identifier: SourceId,
        diagnostics: list[SourceDiagnostic] | None = None,
    ) -> list[str]:
        """Load one source. Never raises for missing or unreadable files.

        A missing file or a failed existence check or read is logged,
        recorded in diagnostics (when given) and yields an empty list.
        """
        path = self.source_path(identifier)
        try:
            if not path.exists():
                message = f"Dictionary file not found: {path.name}"
                logger.warning(message)
                _record(diagnostics, identifier, path, MISSING, message)
                return []
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            message = f"Error reading dictionary file {path.name}: {e}"
            logger.warning(message)
            _record(diagnostics, identifier, path, READ_ERROR, message)
            return []
        words = parse_words(text)
        logger.debug("Loaded %d words from %s", len(words), path)
        return words

    def sample(self, request: SampleRequest) -> SampleResult:
        """Draw request.count words, returning them alongside source diagnostics."""
        result = SampleResult()
        if request.count == 0:
            return result

        if not request.lengths:
            pool = self.load_source(ALL_WORDS, result.diagnostics)
            result.words = sample_without_replacement(pool, request.count, self._rng)
            return result

        share = math.ceil(request.count / len(request.lengths))
        combined: list[str] = []
        for length in request.lengths:
            pool = self.load_source(length, result.diagnostics)
            combined.extend(sample_without_replacement(pool, share, self._rng))

        # Second shuffle so the trim does not favour earlier lengths
        result.words = shuffle(combined, self._rng)[:request.count]
        return result

    def get_words(self, count: int, lengths: Iterable[int] | None = None) -> list[str]:
        """Return up to count random words, optionally restricted to the given lengths."""
        return self.sample(SampleRequest.build(count, lengths)).words

    def available_lengths(self) -> list[int]:
        """Sorted lengths that have a <N>.txt file under the root."""
        if not self._root.is_dir():
            return []
        lengths = set()
        for f in self._root.glob("*.txt"):
            if f.stem.isdecimal() and int(f.stem) > 0:
                lengths.add(int(f.stem))
        return sorted(lengths)


def _record(diagnostics, identifier, path: Path, kind: str, message: str) -> None:
    if diagnostics is not None:
        diagnostics.append(SourceDiagnostic(identifier, str(path), kind, message))


def get_words(
    count: int,
    lengths: Iterable[int] | None = None,
    root: Path | str | None = None,
    rng: RandomProvider | None = None,
) -> list[str]:
    """Convenience wrapper around WordSampler(root, rng).get_words(count, lengths)."""
    return WordSampler(root=root, rng=rng).get_words(count, lengths)
