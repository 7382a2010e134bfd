"""
Log directives and the directive table.

A directive pairs an optional module-name prefix with a level ceiling.
The table keeps directives sorted by name length so that a scan from the
end visits the most specific names first and the global fallback
(``name=None``) last:

    most specific module rule wins; otherwise the global rule;
    otherwise disabled.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from .levels import LevelFilter


@dataclass(frozen=True)
class LogDirective:
    """A (module-prefix-or-None, level) pair.

    Attributes:
        name: Target prefix this directive applies to; None for the global fallback
        level: Most verbose level allowed for matching records
    """
    name: Optional[str]
    level: LevelFilter


def _name_length(directive: LogDirective) -> int:
    return len(directive.name) if directive.name is not None else 0


class DirectiveTable:
    """Immutable, length-sorted sequence of directives.

    Built once; read concurrently without locking. Duplicate names are
    kept. Among names of equal length the input order is preserved,
    so the directive given last is scanned first and wins.

    Usage::

        table = DirectiveTable([LogDirective(None, LevelFilter.INFO),
                                LogDirective('app.db', LevelFilter.DEBUG)])
        table.enabled(LevelFilter.DEBUG, 'app.db.pool')   # True
        table.enabled(LevelFilter.DEBUG, 'app.web')       # False
    """

    __slots__ = ('_directives',)

    def __init__(self, directives: Iterable[LogDirective] = ()):
        # sorted() is stable: equal lengths keep their parse order
        self._directives: Tuple[LogDirective, ...] = tuple(
            sorted(directives, key=_name_length))

    def enabled(self, level: LevelFilter, target: str) -> bool:
        """Return True if a record at ``level`` for ``target`` passes."""
        for directive in reversed(self._directives):
            if directive.name is None or target.startswith(directive.name):
                return level <= directive.level
        return False

    def max_level(self) -> LevelFilter:
        """Most verbose level any directive allows (OFF when empty)."""
        return max((d.level for d in self._directives), default=LevelFilter.OFF)

    @property
    def directives(self) -> Tuple[LogDirective, ...]:
        """The directives in scan-reversed (ascending length) order."""
        return self._directives

    def __iter__(self) -> Iterator[LogDirective]:
        return iter(self._directives)

    def __len__(self) -> int:
        return len(self._directives)

    def __eq__(self, other):
        if not isinstance(other, DirectiveTable):
            return NotImplemented
        return self._directives == other._directives

    def __hash__(self):
        return hash(self._directives)

    def __repr__(self):
        return f"DirectiveTable({list(self._directives)!r})"
