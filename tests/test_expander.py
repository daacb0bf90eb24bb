import pytest

from tagexpand.expander import expand


@pytest.mark.parametrize(
    ("abbreviation", "expected"),
    [
        ("html", "<html></html>"),
        ("html>p", "<html>\n\t<p></p>\n</html>"),
        ("p+div", "<p></p>\n<div></div>"),
        ("html>p+a", "<html>\n\t<p></p>\n\t<a></a>\n</html>"),
        (
            "html>div>p+div>p",
            "<html>\n\t<div>\n\t\t<p></p>\n\t\t<div>\n\t\t\t<p></p>\n\t\t</div>\n\t</div>\n</html>",
        ),
        (
            "html>(div>p)+div>p",
            "<html>\n\t<div>\n\t\t<p></p>\n\t</div>\n\t<div>\n\t\t<p></p>\n\t</div>\n</html>",
        ),
        ("p*3", "<p></p>\n<p></p>\n<p></p>"),
        (
            "html>(div>p)*3",
            "<html>\n\t<div>\n\t\t<p></p>\n\t</div>\n\t<div>\n\t\t<p></p>\n\t</div>\n"
            "\t<div>\n\t\t<p></p>\n\t</div>\n</html>",
        ),
        ("html>Icon/", "<html>\n\t<Icon/>\n</html>"),
        ("html>Icon/>p", "<html>\n\t<Icon>\n\t\t<p></p>\n\t</Icon>\n</html>"),
        ("div.test.echo.bravo", '<div class="test echo bravo"></div>'),
        ("div.test.echo.bravo/", '<div class="test echo bravo"/>'),
        (
            "Table:header={title}:name=my-table",
            '<Table header={title} name="my-table"></Table>',
        ),
        ("Table:{...props}", "<Table {...props}></Table>"),
        (
            "img:src={image}:alt=my own image/",
            '<img src={image} alt="my own image"/>',
        ),
        ("div<My test text is awesome", "<div>My test text is awesome</div>"),
        (
            "div.test:data={myData}<My test text is awesome",
            '<div class="test" data={myData}>My test text is awesome</div>',
        ),
        (
            "div>(div.test>p<My text+Table:header={header})+footer<My footer",
            '<div>\n\t<div class="test">\n\t\t<p>My text</p>\n\t\t<Table header={header}></Table>\n'
            "\t</div>\n\t<footer>My footer</footer>\n</div>",
        ),
    ],
)
def test_expand(abbreviation, expected):
    assert expand(abbreviation) == expected


@pytest.mark.parametrize("abbreviation", ["p*x", "html>(div", ".a"])
def test_malformed_abbreviation_raises(abbreviation):
    with pytest.raises(ValueError):
        expand(abbreviation)