import sys
from typing import Protocol, runtime_checkable

from . import conf


@runtime_checkable
class Displayable(Protocol):
    def render(self) -> str: ...

    def display(self) -> None: ...


def write_line(text: str) -> None:
    sys.stdout.write(f"{text}{conf.line_break()}")
