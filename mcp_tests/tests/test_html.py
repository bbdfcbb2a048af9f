import pytest

from core.html import decode_entities, extract_title, html_to_markdown


def test_scripts_and_styles_are_removed_with_content():
    html = "<p>keep</p><script>alert('x')</script><STYLE type='text/css'>p{}</STYLE>"
    assert html_to_markdown(html) == "keep"


def test_article_element_limits_output():
    html = "<nav>menu</nav><article class='post'><p>inside</p></article><footer>bye</footer>"
    assert html_to_markdown(html) == "inside"


def test_missing_article_uses_whole_document():
    assert html_to_markdown("<div>one</div><div>two</div>") == "onetwo"


def test_headings_of_any_level():
    out = html_to_markdown("<h1>Title</h1><h3 id='x'>Sub</h3>")
    assert out.splitlines() == ["# Title", "", "# Sub"]


def test_paragraphs_are_blank_line_separated():
    assert html_to_markdown("<p>a</p><p>b</p>") == "a\n\nb"


def test_inline_markup():
    html = "<p><strong>bold</strong> <b>b</b> <em>it</em> <i>i</i> <code>x = 1</code></p>"
    assert html_to_markdown(html) == "**bold** **b** *it* *i* `x = 1`"


def test_pre_becomes_fenced_block():
    html = "<pre><code class='lang-js'>const a = 1;</code></pre>"
    assert html_to_markdown(html) == "```\nconst a = 1;\n```"


def test_pre_and_paragraph_prefixes_do_not_collide():
    # <pre> must not be taken for <p>, nor <br>/<img> for <b>/<i>
    out = html_to_markdown("<p>line<br>next <img src='a.png'></p>")
    assert out == "linenext"


def test_anchor_with_href():
    html = '<p>see <a class="l" href="https://example.com/x">the docs</a></p>'
    assert html_to_markdown(html) == "see [the docs](https://example.com/x)"


def test_anchor_single_quoted_href():
    assert html_to_markdown("<a href='/rel'>rel</a>") == "[rel](/rel)"


def test_anchor_without_href_is_stripped():
    assert html_to_markdown("<a name='top'>top</a>") == "top"


def test_entities_are_decoded():
    assert html_to_markdown("<p>a&nbsp;&lt;b&gt; &quot;c&quot; &amp; d</p>") == 'a <b> "c" & d'


def test_amp_is_decoded_last():
    assert decode_entities("&amp;lt;") == "&lt;"


def test_blank_lines_collapse_to_two():
    assert html_to_markdown("a\n\n\n\n\nb") == "a\n\nb"


@pytest.mark.parametrize(
    "text",
    [
        "Plain text without markup.",
        "Line one\nLine two\n\nParagraph two",
        "Uses * and _ and `backticks` already",
        "if a < b and c > d then swap",
    ],
)
def test_plain_text_is_unchanged(text):
    assert html_to_markdown(text) == text


def test_plain_text_only_whitespace_is_normalized():
    assert html_to_markdown("  a\n\n\n\nb  ") == "a\n\nb"


@pytest.mark.parametrize(
    "html",
    [
        "<p>unclosed paragraph",
        "<article><p>no closing article",
        "<script>never closed",
        "<<<>>>",
        "<a href='x'>dangling",
        "<h2>bad</h3>",
        "",
    ],
)
def test_malformed_input_never_raises(html):
    assert isinstance(html_to_markdown(html), str)


def test_unclosed_tags_are_dropped():
    assert html_to_markdown("<article><p>no closing article") == "no closing article"


def test_none_is_treated_as_empty():
    assert html_to_markdown(None) == ""


def test_extract_title():
    assert extract_title("<html><head><title>My &amp; Post</title></head></html>") == "My & Post"
    assert extract_title("<p>no title</p>") is None
    assert extract_title("<title>  </title>") is None


def test_anchor_unquoted_href():
    assert html_to_markdown("<a href=https://x.y/z>link</a>") == "[link](https://x.y/z)"


def test_comments_and_doctype_are_stripped():
    html = "<!DOCTYPE html><!-- hidden\n<p>not shown</p> --><p>shown</p>"
    assert html_to_markdown(html) == "shown"
