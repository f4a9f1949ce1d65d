"""Excerpts — tests for trimming, stored-excerpt precedence and excerpt block filtering."""

from app.core.excerpt import (
    EXCERPT_MORE, get_excerpt, render_excerpt_source, strip_tags, trim_words,
)
from app.core.parse_blocks import parse_blocks
from app.core.render_blocks import BlockRenderer


def test_strip_tags_removes_markup_and_scripts():
    assert strip_tags("<p>Hi <b>there</b></p><script>x()</script>") == "Hi there"


def test_trim_words_keeps_short_text_whole():
    assert trim_words("<p>one   two\nthree</p>", 55) == "one two three"


def test_trim_words_appends_more_when_cut():
    assert trim_words("a b c d", 2) == "a b" + EXCERPT_MORE


def test_trim_words_exact_length_has_no_more():
    assert trim_words("a b", 2) == "a b"


def test_stored_excerpt_returned_verbatim():
    assert get_excerpt("<em>Kept</em>", "ignored body") == "<em>Kept</em>"


def test_auto_excerpt_from_content():
    assert get_excerpt("", "<p>Body text</p>") == "Body text"


def _source(doc):
    return render_excerpt_source(parse_blocks(doc), BlockRenderer())


def test_excerpt_source_skips_unlisted_blocks():
    doc = (
        "<!-- wp:acme/hero --><h1>Hero</h1><!-- /wp:acme/hero -->"
        "<!-- wp:paragraph --><p>Body</p><!-- /wp:paragraph -->"
    )
    assert _source(doc) == "<p>Body</p>"


def test_excerpt_source_keeps_freeform():
    assert _source("<p>Classic</p><!-- wp:image /-->") == "<p>Classic</p>"


def test_wrapper_contributes_allowed_inner_blocks_only():
    doc = (
        '<!-- wp:group --><div class="g">'
        "<!-- wp:paragraph --><p>In</p><!-- /wp:paragraph -->"
        "<!-- wp:image --><figure>img</figure><!-- /wp:image -->"
        "</div><!-- /wp:group -->"
    )
    assert _source(doc) == "<p>In</p>"


def test_nested_wrappers_are_walked():
    doc = (
        "<!-- wp:columns --><div><!-- wp:column --><div>"
        "<!-- wp:heading --><h2>Deep</h2><!-- /wp:heading -->"
        "</div><!-- /wp:column --></div><!-- /wp:columns -->"
    )
    assert _source(doc) == "<h2>Deep</h2>"


def test_block_with_allowed_inner_blocks_rendered_whole():
    doc = (
        "<!-- wp:quote --><blockquote>"
        "<!-- wp:paragraph --><p>Q</p><!-- /wp:paragraph -->"
        "</blockquote><!-- /wp:quote -->"
    )
    assert _source(doc) == "<blockquote><p>Q</p></blockquote>"


def test_block_with_disallowed_inner_block_skipped():
    doc = (
        "<!-- wp:quote --><blockquote>"
        "<!-- wp:image --><figure>img</figure><!-- /wp:image -->"
        "</blockquote><!-- /wp:quote -->"
    )
    assert _source(doc) == ""
