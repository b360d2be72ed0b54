from dataclasses import dataclass

VOID_NAMES = frozenset({"void", "GLvoid"})


@dataclass(frozen=True)
class TypeDescriptor:
    """One occurrence of a native type in a parameter or return position.

    ``name`` is the base type without modifiers, ``pointer_depth`` the number of
    declared indirection levels and ``raw_declaration`` the C text the
    descriptor was derived from. The raw text is kept for diagnostics and
    fallback rendering only; nothing here parses it.
    """

    name: str
    pointer_depth: int = 0
    raw_declaration: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.pointer_depth, bool) or not isinstance(self.pointer_depth, int):
            raise ValueError(f"pointer_depth must be an int, got {type(self.pointer_depth).__name__}")
        if self.pointer_depth < 0:
            raise ValueError(f"pointer_depth must be >= 0, got {self.pointer_depth} for '{self.name}'")

    def __str__(self) -> str:
        return f"{self.name}{self.pointers()} [{self.raw_declaration}]"

    def pointers(self) -> str:
        return "*" * self.pointer_depth

    def is_void(self) -> bool:
        return self.name in VOID_NAMES and self.pointer_depth == 0

    def is_void_pointer(self) -> bool:
        return self.name in VOID_NAMES and self.pointer_depth > 0

    def c_type(self) -> str:
        """Return the C declaration verbatim."""
        return self.raw_declaration


@dataclass(frozen=True)
class Typedef:
    """A native type alias, passed through from the loader as documentation."""

    name: str
    raw_declaration: str = ""

    def c_type(self) -> str:
        return self.raw_declaration
