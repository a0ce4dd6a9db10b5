from data_designer_humanizer.tokenizer import (
    count_words,
    is_prose_block,
    map_blocks,
    segment_blocks,
    split_blocks,
    split_sentences,
    strip_tags,
)

ARTICLE = (
    "<h2>Getting started</h2><p>First paragraph. It has two sentences.</p>\n"
    "<ul><li>One</li><li>Two</li></ul>\n\n"
    "Plain prose block with no markup at all."
)


class TestSplitBlocks:
    def test_blank_lines_separate_blocks(self):
        assert split_blocks("A\n\nB\n\n\nC") == ["A", "B", "C"]

    def test_block_tags_separate_blocks(self):
        assert split_blocks("<h2>Title</h2><p>Body.</p>") == ["<h2>Title</h2>", "<p>Body.</p>"]

    def test_single_block(self):
        assert split_blocks("Just one paragraph.") == ["Just one paragraph."]

    def test_empty_text(self):
        assert split_blocks("") == [""]

    def test_segmentation_is_lossless(self):
        blocks, separators = segment_blocks(ARTICLE)
        assert len(separators) == len(blocks) - 1
        assert map_blocks(ARTICLE, lambda _i, block: block) == ARTICLE

    def test_map_blocks_passes_indexes(self):
        assert map_blocks("a\n\nb\n\nc", lambda i, block: f"{i}{block}") == "0a\n\n1b\n\n2c"


class TestSplitSentences:
    def test_keeps_tags_and_tail(self):
        sentences = split_sentences("<p>One two. Three four! Five?</p>")
        assert sentences.parts == ["<p>One two.", " Three four!", " Five?"]
        assert sentences.tail == "</p>"

    def test_is_lossless(self):
        block = "<p>Wait... what? It works! Done.</p>"
        assert split_sentences(block).join() == block

    def test_decimals_do_not_end_a_sentence(self):
        sentences = split_sentences("It costs 3.5 dollars. Done.")
        assert sentences.parts == ["It costs 3.5 dollars.", " Done."]

    def test_abbreviations_do_not_end_a_sentence(self):
        sentences = split_sentences("Use tools, e.g. hammers. Then rest.")
        assert sentences.parts == ["Use tools, e.g. hammers.", " Then rest."]

    def test_sentence_ending_in_no_is_split(self):
        sentences = split_sentences("I said no. Then we left. It was late.")
        assert sentences.parts == ["I said no.", " Then we left.", " It was late."]

    def test_numbered_no_is_not_split(self):
        sentences = split_sentences("See No. 5 for details. Done.")
        assert sentences.parts == ["See No. 5 for details.", " Done."]

    def test_unterminated_text_is_tail(self):
        sentences = split_sentences("no terminator here")
        assert sentences.parts == []
        assert sentences.tail == "no terminator here"
        assert len(sentences) == 0


class TestHelpers:
    def test_prose_detection(self):
        assert is_prose_block("<p>Text.</p>")
        assert is_prose_block("Plain text.")
        assert not is_prose_block("<h2>Heading</h2>")
        assert not is_prose_block("  <ul><li>Item</li></ul>")
        assert not is_prose_block("<TABLE><tr><td>x</td></tr></TABLE>")
        assert not is_prose_block("<nav>links</nav>")

    def test_strip_tags_and_count_words(self):
        html = "<p>Hello <strong>big</strong> world</p>"
        assert strip_tags(html).split() == ["Hello", "big", "world"]
        assert count_words(html) == 3
        assert count_words("") == 0
        assert count_words("<p></p>") == 0
