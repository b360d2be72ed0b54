"""Removal of GL API-family prefixes from function and constant names."""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Sequence

DEFAULT_FUNCTION_PREFIXES = ("glX", "wgl", "egl", "gl")
DEFAULT_CONSTANT_PREFIXES = ("GLX_", "WGL_", "EGL_", "GL_")


def starts_uppercase(rest: str) -> bool:
    return bool(rest) and rest[0].isupper()


def starts_non_digit(rest: str) -> bool:
    # Go identifiers cannot begin with a digit, so GL_2D keeps its prefix.
    return bool(rest) and not rest[0].isdigit()


@dataclass(frozen=True)
class PrefixRule:
    prefix: str
    guard: Callable[[str], bool]

    def __post_init__(self) -> None:
        if not isinstance(self.prefix, str) or not self.prefix:
            raise ValueError(f"Prefix must be a non-empty string, got {self.prefix!r}")


def _build_rules(
    function_prefixes: Iterable[str],
    constant_prefixes: Iterable[str],
) -> tuple[PrefixRule, ...]:
    rules = [PrefixRule(prefix, starts_uppercase) for prefix in function_prefixes]
    rules.extend(PrefixRule(prefix, starts_non_digit) for prefix in constant_prefixes)
    return tuple(rules)


class NameNormalizer:
    """Strip the first matching prefix when its guard accepts the remainder.

    Only one rule is tried per name: the first whose prefix is a literal match.
    A rejected guard leaves the name untouched rather than falling through to
    a shorter prefix, so ``gl0Test`` does not become ``0Test``.
    """

    def __init__(self, rules: Optional[Sequence[PrefixRule]] = None):
        if rules is None:
            rules = _build_rules(DEFAULT_FUNCTION_PREFIXES, DEFAULT_CONSTANT_PREFIXES)
        self.rules: tuple[PrefixRule, ...] = tuple(rules)

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "NameNormalizer":
        naming_cfg = config.get("naming", {}) if config else {}
        function_prefixes = naming_cfg.get("function_prefixes", DEFAULT_FUNCTION_PREFIXES)
        constant_prefixes = naming_cfg.get("constant_prefixes", DEFAULT_CONSTANT_PREFIXES)
        for key, value in (("function_prefixes", function_prefixes),
                           ("constant_prefixes", constant_prefixes)):
            if isinstance(value, str) or not isinstance(value, (list, tuple)):
                raise ValueError(f"naming.{key} must be a list of strings, got {value!r}")
        return cls(_build_rules(function_prefixes, constant_prefixes))

    def match(self, identifier: str) -> Optional[PrefixRule]:
        for rule in self.rules:
            if identifier.startswith(rule.prefix):
                return rule
        return None

    def trim_prefix(self, identifier: str) -> str:
        rule = self.match(identifier)
        if rule is None:
            return identifier
        rest = identifier[len(rule.prefix):]
        if not rule.guard(rest):
            return identifier
        return rest


_DEFAULT_NORMALIZER = NameNormalizer()


def trim_prefix(identifier: str) -> str:
    return _DEFAULT_NORMALIZER.trim_prefix(identifier)
