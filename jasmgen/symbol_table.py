"""Scoped symbol tables."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from .ast import AstNode, type_str

_WIDTH = 84
_HEADINGS = (
    ("Symbol Name", 30),
    ("Data Type", 15),
    ("isConst", 10),
    ("isArray", 10),
    ("isFunc", 10),
    ("isGlobal", 10),
    ("number", 10),
)


class DuplicateSymbolError(ValueError):
    """Raised when a name is declared twice in the same scope."""

    def __init__(self, name: str) -> None:
        super().__init__(f"symbol {name!r} is already declared in this scope")
        self.name = name


def _row(cells: tuple[object, ...]) -> str:
    """Lay out one table row, booleans shown as 1 or 0."""
    return "".join(
        str(int(cell) if isinstance(cell, bool) else cell).ljust(width)
        for cell, (_, width) in zip(cells, _HEADINGS)
    )


class SymbolTable:
    """One scope of identifiers, linked to its enclosing scope."""

    def __init__(self, is_global: bool = False, parent: SymbolTable | None = None) -> None:
        self.is_global = is_global
        self.parent = parent
        self.children: list[SymbolTable] = []
        self.counter = 0
        self._entries: dict[str, AstNode] = {}

    def new_child(self, is_global: bool = False) -> SymbolTable:
        """Create a nested scope under this one and return it."""
        child = SymbolTable(is_global, self)
        self.children.append(child)
        return child

    def lookup(self, name: str) -> AstNode | None:
        """Find a name in this scope or the nearest enclosing one."""
        scope: SymbolTable | None = self
        while scope is not None:
            entry = scope._entries.get(name)
            if entry is not None:
                return entry
            scope = scope.parent
        return None

    def insert(self, entry: AstNode) -> None:
        """Declare an entry in this scope.

        Plain local variables are given the next slot number.
        """
        if entry.name in self._entries:
            raise DuplicateSymbolError(entry.name)
        if not (entry.is_array or entry.is_const or entry.is_func or entry.is_global):
            entry.number = self.counter
            self.counter += 1
        self._entries[entry.name] = entry

    def __contains__(self, name: object) -> bool:
        """Whether the name is declared in this scope itself."""
        return name in self._entries

    def __iter__(self) -> Iterator[AstNode]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def format_table(self) -> str:
        """Render the scope's entries in declaration order as a table."""
        lines = [
            "",
            "=" * _WIDTH,
            _row(tuple(heading for heading, _ in _HEADINGS)),
            "-" * _WIDTH,
        ]
        lines.extend(
            _row(
                (
                    name,
                    type_str(info.data_type),
                    info.is_const,
                    info.is_array,
                    info.is_func,
                    info.is_global,
                    info.number,
                )
            )
            for name, info in self._entries.items()
        )
        lines.append("=" * _WIDTH)
        return "\n".join(lines) + "\n\n"

    def dump(self, file: TextIO | None = None) -> None:
        """Write the table to a stream, standard output by default."""
        (file if file is not None else sys.stdout).write(self.format_table())