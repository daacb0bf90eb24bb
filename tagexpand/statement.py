"""Splitting an abbreviation into groups, levels and siblings."""

from __future__ import annotations

from .element import Element


def split_siblings(text: str) -> list[str]:
    """Split one level of an abbreviation into sibling tags."""
    return text.split("+")


def _close_group(text: str, start: int) -> tuple[int, int]:
    """Find the ')' matching the '(' at start and the group's multiplier."""
    depth = 1
    for offset, char in enumerate(text[start + 1:], start + 1):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                multiplier = 1
                if "*" in text[offset + 1:]:
                    if offset + 3 > len(text):
                        raise ValueError(f"missing group multiplier in {text!r}")
                    digit = text[offset + 2]
                    if digit.isascii() and digit.isdigit():
                        multiplier = int(digit)
                return offset, multiplier
    raise ValueError(f"unclosed group in {text!r}")


class Statement:
    """An abbreviation, split at its first group into nested statements."""

    def __init__(self, text: str, multiplier: int | None = None, base_level: int = 0) -> None:
        self.multiplier = 1 if multiplier is None else multiplier
        self.base_level = base_level
        self.children: list[Statement] = []

        start = text.find("(")
        if start < 0:
            self.value = text
            return

        level = text[:start].count(">") + base_level
        end, group_multiplier = _close_group(text, start)
        self.children.append(Statement(text[start + 1:end], group_multiplier, level))

        if end + 3 > len(text):
            raise ValueError(f"group must be followed by more input in {text!r}")
        if text[end + 3:]:
            self.children.append(Statement(text[end + 2:], None, level))

        if start == 0:
            raise ValueError(f"abbreviation {text!r} cannot start with a group")
        self.value = text[:start - 1]

    def render(self) -> str:
        """Render the statement and its groups to markup."""
        levels = self.value.split(">")
        elements: list[Element] = []
        for depth, part in zip(range(len(levels) - 1, 0, -1), reversed(levels[1:])):
            level = depth + self.base_level
            *siblings, last = split_siblings(part)
            elements = [Element(tag, [], None, level) for tag in siblings] + [
                Element(last, elements, None, level)
            ]

        before_end = (
            "".join("\n" + child.render() for child in self.children)
            if self.children
            else None
        )

        *siblings, last = split_siblings(levels[0])
        head = Element(last, elements, before_end, self.base_level).render()
        others = "\n".join(
            Element(tag, [], None, self.base_level).render() for tag in siblings
        )
        if others:
            others += "\n"
        return "\n".join([others + head] * self.multiplier)