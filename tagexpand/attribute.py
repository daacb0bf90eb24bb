"""Attributes of an abbreviated element: classes, props and inner text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AttributeType(Enum):
    """Kind of attribute found in an element abbreviation."""

    CLASS = "class"
    PROPS = "props"
    TEXT = "text"


def _render_prop(prop: str) -> str:
    name, equals, value = prop.partition("=")
    if not equals:
        return f" {prop}"
    if "{" in value:
        return f" {name}={value}"
    return f' {name}="{value}"'


@dataclass(frozen=True)
class Attribute:
    """A single attribute section of an element abbreviation."""

    value: str
    kind: AttributeType

    def __len__(self) -> int:
        return len(self.value)

    def render(self) -> str:
        """Render the attribute as it appears inside the opening tag."""
        if self.kind is AttributeType.TEXT:
            return f">{self.value}"
        if self.kind is AttributeType.CLASS:
            classes = " ".join(self.value.split("."))
            return f' class="{classes}"'
        return "".join(_render_prop(prop) for prop in self.value.split(":"))


def _find_first_class(text: str) -> int:
    """Index of the first '.' that starts a class list, or 0 if there is none."""
    for index, char in enumerate(text):
        if char != ".":
            continue
        # A dot inside a braced prop value is not a class marker.
        if ":" in text[:index] and "}" in text[index + 1:]:
            continue
        if index == 0:
            raise ValueError(f"abbreviation {text!r} cannot start with '.'")
        if text[index - 1] == ".":
            continue
        if index + 2 > len(text):
            raise ValueError(f"abbreviation {text!r} cannot end with '.'")
        if text[index + 1] == ".":
            continue
        return index
    return 0


class AttributeGroup:
    """All attributes of one element, in order of appearance."""

    def __init__(self, text: str) -> None:
        first_class = _find_first_class(text)
        first_prop = max(text.find(":"), 0)
        first_text = max(text.find("<"), 0)

        order = sorted((first_class, first_prop, first_text))
        ends = order[1:] + [len(text)]
        self.attributes: list[Attribute] = []
        for start, end in zip(order, ends):
            if start == 0:
                continue
            if start == first_text:
                # Text runs to the end of the input, whatever it contains.
                self.attributes.append(Attribute(text[start + 1:], AttributeType.TEXT))
                break
            kind = AttributeType.CLASS if start == first_class else AttributeType.PROPS
            self.attributes.append(Attribute(text[start + 1:end], kind))

    def __len__(self) -> int:
        """Length of the attribute sections in the input, markers included."""
        return sum(1 + len(attribute) for attribute in self.attributes)

    def has_text(self) -> bool:
        """Whether the group holds inner text."""
        return any(a.kind is AttributeType.TEXT for a in self.attributes)

    def render(self, is_single: bool) -> str | None:
        """Render the attributes and close the opening tag, or None if empty."""
        if not self.attributes:
            return None
        result = "".join(attribute.render() for attribute in self.attributes)
        if ">" not in result:
            result += "/>" if is_single else ">"
        return result