from __future__ import annotations

from floorwatch.parsing import reduce_markup


def test_pre_blocks_are_concatenated_in_order():
    markup = "<html><body><p>Header</p><pre>line one</pre><div><pre>line two</pre></div></body></html>"

    assert reduce_markup(markup) == "line one\nline two\n"


def test_pre_block_keeps_fixed_width_indentation():
    markup = "<pre>  Mr. WALBERG. I rise.\n  in support.</pre>"

    assert reduce_markup(markup) == "  Mr. WALBERG. I rise.\n  in support.\n"


def test_falls_back_to_body_text():
    markup = "<html><head><title>Title</title></head><body><p>Hello</p></body></html>"

    assert reduce_markup(markup) == "Hello"


def test_whitespace_only_pre_falls_back_to_document_text():
    assert reduce_markup("<pre>   </pre>plain words").strip() == "plain words"


def test_plain_text_passes_through():
    assert reduce_markup("  Mr. WALBERG. I rise.") == "  Mr. WALBERG. I rise."
