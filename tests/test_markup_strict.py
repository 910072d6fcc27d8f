import pytest

from minimarkup import MiniMarkup, ParsingError, TagNode, TextNode

WELL_FORMED = [
    "<red>RED<green>GREEN</green>RED<blue>BLUE</blue></red>",
    "plain text",
    "<bold><red>a</red><italic>b</italic></bold>",
    "<click:open_url:https://github.com><gold>x</gold></click>",
]


@pytest.mark.parametrize("message", WELL_FORMED)
def test_strict_matches_lenient(markup: MiniMarkup, strict_markup: MiniMarkup,
                                message: str):
    assert strict_markup.parse(message) == markup.parse(message)


def test_unclosed_tag(strict_markup: MiniMarkup):
    message = "<red>RED<green>GREEN</green>RED<blue>BLUE"
    with pytest.raises(ParsingError) as e:
        strict_markup.parse(message)
    assert str(e.value) == (
        "All tags must be explicitly closed while in strict mode. "
        "End of string found with open tags: red, blue\n"
        "\t<red>RED<green>GREEN</green>RED<blue>BLUE\n"
        "\t^~~~^                          ^~~~~^")


def test_implicit_close(strict_markup: MiniMarkup):
    message = "<red>RED<green>GREEN</red>NO COLOR<blue>BLUE</blue>"
    with pytest.raises(ParsingError) as e:
        strict_markup.parse(message)
    assert str(e.value) == (
        "Unclosed tag encountered; green is not closed, because red was "
        "closed first.\n"
        "\t<red>RED<green>GREEN</red>NO COLOR<blue>BLUE</blue>\n"
        "\t^~~~^   ^~~~~~^     ^~~~~^")


def test_implicit_close_nested(strict_markup: MiniMarkup):
    message = "<red>RED<green>GREEN<blue>BLUE<yellow>YELLOW</green>"
    with pytest.raises(ParsingError) as e:
        strict_markup.parse(message)
    assert str(e.value) == (
        "Unclosed tag encountered; yellow is not closed, because green was "
        "closed first.\n"
        "\t<red>RED<green>GREEN<blue>BLUE<yellow>YELLOW</green>\n"
        "\t        ^~~~~~^               ^~~~~~~^      ^~~~~~~^")


def test_implicit_close_three_levels(strict_markup: MiniMarkup):
    # the innermost open tag is the one named
    message = "<red><green><blue><yellow>x</red>"
    with pytest.raises(ParsingError) as e:
        strict_markup.parse(message)
    assert e.value.message == ("Unclosed tag encountered; yellow is not "
                               "closed, because red was closed first.")
    assert e.value.diagnostic.spans == ((0, 5), (18, 26), (27, 33))


def test_reset(strict_markup: MiniMarkup):
    message = "<red>RED<green>GREEN<reset>NO COLOR<blue>BLUE</blue>"
    with pytest.raises(ParsingError) as e:
        strict_markup.parse(message)
    assert str(e.value) == (
        "<reset> tags are not allowed when strict mode is enabled\n"
        "\t<red>RED<green>GREEN<reset>NO COLOR<blue>BLUE</blue>\n"
        "\t                    ^~~~~~^")


def test_strict_exception(strict_markup: MiniMarkup):
    message = ("<gray>Example: <click:suggest_command:/plot flag set coral-dry "
               "true><gold>/plot flag set coral-dry true<click></gold></gray>")
    with pytest.raises(ParsingError):
        strict_markup.parse(message)


def test_missing_close_of_hover(strict_markup: MiniMarkup):
    message = ("<hover:show_text:'<blue>Hello</blue>'<red>TEST</red></hover>"
               "<click:suggest_command:'/msg <user>'><user></click> <reset>: "
               "<hover:show_text:'<date>'><message></hover>")
    with pytest.raises(ParsingError):
        strict_markup.parse(message)


def test_column_accuracy(strict_markup: MiniMarkup):
    message = "日本語 <yellow>テキスト"
    with pytest.raises(ParsingError) as e:
        strict_markup.parse(message)
    start = message.index("<yellow>")
    assert e.value.diagnostic.spans == ((start, start + 8), )
    assert str(e.value).splitlines()[2] == "\t" + " " * start + "^~~~~~~^"


def test_strict_per_instance(registry):
    lenient = MiniMarkup(transformations=registry)
    strict = MiniMarkup(lenient.config, strict=True)
    assert strict.config.strict and not lenient.config.strict
    lenient.parse("<red>")
    with pytest.raises(ParsingError):
        strict.parse("<red>")


def test_stray_close(markup: MiniMarkup, strict_markup: MiniMarkup):
    message = "<red>x</blue></red>"
    with pytest.raises(ParsingError) as e:
        strict_markup.parse(message)
    assert str(e.value) == ("Closing tag blue does not match any open tag.\n"
                            "\t<red>x</blue></red>\n"
                            "\t      ^~~~~~^")
    # lenient mode keeps it as text
    red, = markup.parse(message).children
    assert isinstance(red, TagNode)
    assert red.children == [TextNode("x</blue>", 5, 13)]
