# tagexpand

tagexpand expands short abbreviations into indented HTML or JSX markup.
Child elements are indented with tabs.

## Installation

    pip install tagexpand

## Usage

```python
from tagexpand.expander import expand

print(expand("html>p+a"))
# <html>
# 	<p></p>
# 	<a></a>
# </html>
```

`expand` returns the markup as a string. If the abbreviation is malformed,
`expand` raises `ValueError`. Examples of malformed input are an unclosed
group, a group at the very start, or a multiplier that is not a number.

## Syntax

| Abbreviation            | Meaning                                     |
|-------------------------|---------------------------------------------|
| `a>b`                   | `b` is a child of `a`                       |
| `a+b`                   | `a` and `b` are siblings                    |
| `a>(b>c)+d`             | a group, closed before `d` continues        |
| `p*3`, `a>(div>p)*3`    | repeat an element or a group                |
| `Icon/`                 | self-closing tag, if it has no children     |
| `div.one.two`           | `class="one two"`                           |
| `Table:name=t:data={x}` | props; values in braces are not quoted      |
| `Table:{...props}`      | spread props                                |
| `div<Some text`         | text content of the element                 |

A group cannot start an abbreviation. It must come after a parent, as in
`html>(div>p)`. Something must also follow the group, either `+...` or a
multiplier. A group multiplier is read as a single digit.

More examples:

```python
expand("img:src={image}:alt=my own image/")
# '<img src={image} alt="my own image"/>'

expand("div.test:data={myData}<My test text is awesome")
# '<div class="test" data={myData}>My test text is awesome</div>'

expand("html>(div>p)*3")
# three <div><p></p></div> blocks inside <html>
```

## Building blocks

- `tagexpand.statement`: `Statement` splits an abbreviation at its first group.
  `Statement(text).render()` does the same job as `expand`. `split_siblings`
  splits one level at `+`.
- `tagexpand.element`: `Element` is one tag. It has children, optional
  pre-rendered group content and an indent level. `Element.render()` produces
  the markup.
- `tagexpand.attribute`: `AttributeGroup` parses the classes, props and text of
  one tag. `Attribute` is a single section of it, and `AttributeType` names its
  kind.

## What it does not do

tagexpand is a library only. It has no command-line tool and no editor
integration. It does not handle ids (`#id`), numbering (`$`) or climbing up a
level (`^`).

## Running the tests

    pip install -e ".[test]"
    pytest