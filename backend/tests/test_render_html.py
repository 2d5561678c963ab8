import pytest

from board_markup.markup import CodeBlock, Document, Paragraph, PostRef, render, render_html
from board_markup.markup.renderer import language_class

LINK_ATTRS = 'rel="nofollow noopener" target="_blank"'


@pytest.mark.parametrize(
    "body, expected",
    [
        (
            "# Noots general\nPost stacks, post research",
            "<h3>Noots general</h3><p>Post stacks, post research</p>",
        ),
        (
            ">I used the strongest, fastest-hitting form of meth there is, and wow, it ruined my life!",
            "<blockquote><p>I used the strongest, fastest-hitting form of meth there is, "
            "and wow, it ruined my life!</p></blockquote>",
        ),
        (
            "``` C\n/* c */\n```",
            '<pre class="blockcode"><code class="language-C">/* c */</code></pre>',
        ),
        ("I **did** not.", "<p>I <strong>did</strong> not.</p>"),
        (
            "Jazz is fun.\nhttps://example.com/watch",
            "<p>Jazz is fun.</p>"
            f'<p><a href="https://example.com/watch" {LINK_ATTRS}>https://example.com/watch</a></p>',
        ),
        (">>1729", '<p><a class="post-ref">1729</a></p>'),
    ],
)
def test_documented_examples(to_html, body, expected):
    assert to_html(body) == expected


def test_empty_body_is_empty_document(to_html):
    assert render("") == Document()
    assert len(render("  \n\n")) == 0
    assert to_html("") == ""


def test_plain_text_is_escaped(to_html):
    assert to_html("<script>alert(1)</script> & more") == (
        "<p>&lt;script&gt;alert(1)&lt;/script&gt; &amp; more</p>"
    )


def test_escaped_header_marker(to_html):
    assert to_html("\\#not a header") == "<p>#not a header</p>"


def test_escaped_quote_and_fence_markers(to_html):
    assert to_html("\\>not a quote") == "<p>&gt;not a quote</p>"
    assert to_html("\\```") == "<p>```</p>"


def test_unterminated_markers_degrade(to_html):
    assert to_html("*foo") == "<p>*foo</p>"
    assert to_html("~") == "<p>~</p>"
    assert to_html("`") == "<p>`</p>"


def test_spans(to_html):
    assert to_html("**supercomputer**") == "<p><strong>supercomputer</strong></p>"
    assert to_html("*harm*") == "<p><em>harm</em></p>"
    assert to_html("~ranting~") == '<p><span class="spoiler">ranting</span></p>'
    assert to_html("`<b>`") == "<p><code>&lt;b&gt;</code></p>"


def test_header_and_quote_carry_inline_markup(to_html):
    assert to_html("# A *big* thread") == "<h3>A <em>big</em> thread</h3>"
    assert to_html("> quoting >>12") == (
        '<blockquote><p>quoting <a class="post-ref">12</a></p></blockquote>'
    )


def test_quote_strips_leading_whitespace(to_html):
    expected = "<blockquote><p>When I was ten, I read fairy tales in secret.</p></blockquote>"
    assert to_html("> When I was ten, I read fairy tales in secret.") == expected
    assert to_html(">   When I was ten, I read fairy tales in secret.") == expected


def test_links_in_sentences(to_html):
    assert to_html("Here's a cool site: https://lainchan.org.") == (
        "<p>Here's a cool site: "
        f'<a href="https://lainchan.org" {LINK_ATTRS}>https://lainchan.org</a>.</p>'
    )
    assert to_html("What do you think of https://lainchan.org? I think it's pretty cool.") == (
        "<p>What do you think of "
        f'<a href="https://lainchan.org" {LINK_ATTRS}>https://lainchan.org</a>'
        "? I think it's pretty cool.</p>"
    )


def test_link_href_is_escaped(to_html):
    assert to_html("https://x.com/?a=1&b=2") == (
        f'<p><a href="https://x.com/?a=1&amp;b=2" {LINK_ATTRS}>https://x.com/?a=1&amp;b=2</a></p>'
    )
    assert to_html("https://x.com/it's") == (
        f"<p><a href=\"https://x.com/it%27s\" {LINK_ATTRS}>https://x.com/it's</a></p>"
    )
    assert to_html("https://example.com/café") == (
        f'<p><a href="https://example.com/caf%C3%A9" {LINK_ATTRS}>https://example.com/café</a></p>'
    )
    assert to_html("https://x.com/100%") == (
        f'<p><a href="https://x.com/100%25" {LINK_ATTRS}>https://x.com/100%</a></p>'
    )


def test_attribute_breakout_in_link(to_html):
    assert to_html('https://x.com/"onmouseover=alert(1)') == (
        f'<p><a href="https://x.com/" {LINK_ATTRS}>https://x.com/</a>"onmouseover=alert(1)</p>'
    )


def test_code_block_without_language(to_html):
    body = "```\nif(f(a)||f(b)\n      ||f(c)){\n      dostuff();\n}\n```"
    assert to_html(body) == (
        '<pre class="blockcode"><code>if(f(a)||f(b)\n      ||f(c)){\n      dostuff();\n}</code></pre>'
    )


def test_code_block_is_not_inline_parsed(to_html):
    body = "```\n**a** \\# <b> >>1 https://x.com\n```"
    assert to_html(body) == (
        '<pre class="blockcode"><code>**a** \\# &lt;b&gt; &gt;&gt;1 https://x.com</code></pre>'
    )


def test_unclosed_code_block(to_html):
    assert to_html("```py\nx = 1\n# still code") == (
        '<pre class="blockcode"><code class="language-py">x = 1\n# still code</code></pre>'
    )


def test_code_block_followed_by_text(to_html):
    assert to_html("```\ncode\n```\nafter") == (
        '<pre class="blockcode"><code>code</code></pre><p>after</p>'
    )


def test_fence_language_injection_is_dropped(to_html):
    body = '``` "><script>alert(1)</script>\ncode\n```'
    assert to_html(body) == '<pre class="blockcode"><code>code</code></pre>'


def test_fence_language_with_space_is_dropped(to_html):
    assert to_html("``` c onmouseover\nx\n```") == '<pre class="blockcode"><code>x</code></pre>'


@pytest.mark.parametrize(
    "language, expected",
    [
        ("C", "language-C"),
        ("c++", "language-c++"),
        ("objective-c", "language-objective-c"),
        ("c#", "language-c#"),
        (None, None),
        ("", None),
        ("a b", None),
        ('x"y', None),
        ("x" * 33, None),
    ],
)
def test_language_class(language, expected):
    assert language_class(language) == expected


def test_resolved_post_ref_gets_href():
    doc = Document((Paragraph((PostRef(5, uri="/b/1#p5"),)),))
    assert render_html(doc) == '<p><a class="post-ref" href="/b/1#p5">5</a></p>'


def test_code_block_node_escapes_raw_text():
    doc = Document((CodeBlock(raw_text="a < b && c", language="js"),))
    assert render_html(doc) == (
        '<pre class="blockcode"><code class="language-js">a &lt; b &amp;&amp; c</code></pre>'
    )


def test_each_line_is_one_block(to_html):
    body = "Anyone know any good guides?\nI'll take a look at OP's project."
    assert to_html(body) == "<p>Anyone know any good guides?</p><p>I'll take a look at OP's project.</p>"
    assert len(render("one\n\ntwo\n# three\n>four")) == 4


@pytest.mark.parametrize("char", ["\x00", "\x01", "\x08", "\x0b", "\x0c", "\x0e", "\x1f"])
def test_control_characters_become_replacement_char(to_html, char):
    assert to_html(f"a{char}b") == "<p>a\ufffdb</p>"
    assert to_html(f"```\na{char}b\n```") == '<pre class="blockcode"><code>a\ufffdb</code></pre>'
    assert to_html(f"`a{char}b`") == "<p><code>a\ufffdb</code></p>"


def test_tab_is_kept_in_text(to_html):
    assert to_html("a\tb") == "<p>a\tb</p>"
