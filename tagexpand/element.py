"""A single tag of an abbreviation and its rendering."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .attribute import AttributeGroup

_COUNT = re.compile(r"\+?[0-9]+")


def _parse_count(text: str) -> int:
    if not _COUNT.fullmatch(text):
        raise ValueError(f"invalid multiplier {text!r}")
    return int(text)


@dataclass
class Element:
    """A tag with nested children and optional pre-rendered group content."""

    value: str
    children: list[Element] = field(default_factory=list)
    before_end: str | None = None
    level: int = 0

    def render(self) -> str:
        """Render the element, its children and its repetitions."""
        indent = "\t" * self.level
        inner = ""
        if self.children:
            inner = "\n" + "\n".join(child.render() for child in self.children) + "\n"

        if self.before_end is not None:
            if self.before_end:
                inner = f"{inner}{self.before_end}\n{indent}"
        elif inner:
            inner += indent

        head, *rest = self.value.split("*")
        count = _parse_count(rest[0]) if rest else 1

        stripped = head.replace("/", "")
        attributes = AttributeGroup(stripped)
        end = len(head) - len(attributes) - (1 if "/" in head else 0)
        if not 0 <= end <= len(stripped):
            raise ValueError(f"malformed element {self.value!r}")
        tag = stripped[:end]

        if head.endswith("/") and not inner and not attributes.has_text():
            opening = attributes.render(True)
            rendered = f"{indent}<{tag}{'/>' if opening is None else opening}"
        else:
            opening = attributes.render(False)
            rendered = (
                f"{indent}<{tag}{'>' if opening is None else opening}{inner}</{tag}>"
            )
        return "\n".join([rendered] * count)