"""Function parameters and parameter lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Parameter:
    """A named, typed function parameter."""

    name: str
    type: str

    def __post_init__(self) -> None:
        if self.name is None or self.type is None:
            raise ValueError("parameter requires a name and a type")

    def __str__(self) -> str:
        return f"{self.type} {self.name}"


def parameter_list_to_string(params: Iterable[Parameter]) -> str:
    """Render parameters as 'type name, ...', or 'N/A' when there are none."""
    text = ", ".join(str(param) for param in params or ())
    return text or "N/A"


def format_parameters(params: Iterable[Parameter]) -> str:
    return "".join(
        f"Param: Name = {param.name}, Type = {param.type}\n" for param in params or ()
    )


def print_parameters(params: Iterable[Parameter]) -> None:
    print(format_parameters(params), end="")


def compare_parameters(declared: Sequence[Parameter], passed: Sequence[Parameter]) -> bool:
    """True when both lists have the same length and matching types."""
    declared = list(declared or ())
    passed = list(passed or ())
    if len(declared) != len(passed):
        return False
    return all(d.type == p.type for d, p in zip(declared, passed))