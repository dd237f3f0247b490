"""Variable environments.

This module defines `Environment`, a mapping from variable names to runtime
values which supports nested scopes via an optional parent link. The API
provides `declare`, `lookup`, `assign` and existence checks used by the
interpreter.

Declaring a name always writes to the current scope: it shadows a binding of
the same name in an enclosing scope and overwrites a binding already made in
this scope. Assignment never declares; it updates the nearest scope that
already holds the name.
"""

from __future__ import annotations
from typing import Dict, Optional
from errors import UndefinedVariable
from values import Value


class Environment:
    def __init__(self, parent: Optional[Environment] = None):
        self.values: Dict[str, Value] = {}
        self.parent = parent

    def child(self) -> Environment:
        """Create a new scope enclosed by this one."""
        return Environment(parent=self)

    def declare(self, name: str, value: Value) -> None:
        """Bind a variable in the current scope."""
        self.values[name] = value

    def lookup(self, name: str) -> Value:
        """Look up a variable in the current and parent scopes."""
        if name in self.values:
            return self.values[name]
        elif self.parent:
            return self.parent.lookup(name)
        else:
            raise UndefinedVariable(name)

    def assign(self, name: str, value: Value) -> None:
        """Update an existing variable in the nearest scope that declares it."""
        if name in self.values:
            self.values[name] = value
        elif self.parent:
            self.parent.assign(name, value)
        else:
            raise UndefinedVariable(name)

    def exists_in_current_scope(self, name: str) -> bool:
        """Check if variable is declared in current scope only."""
        return name in self.values

    def exists(self, name: str) -> bool:
        """Check if variable is declared in any scope."""
        if name in self.values:
            return True
        elif self.parent:
            return self.parent.exists(name)
        return False

    def __repr__(self) -> str:
        return f"Environment({self.values!r}, parent={self.parent is not None})"
