# test_escapes.py

from pinline.display.escapes import ESC, EscapeState, EscapeTracker


def feed_all(tracker, text):
    return [tracker.feed(char) for char in text]


class TestEscapeTracker:

    def setup_method(self):
        self.tracker = EscapeTracker()

    def test_plain_text_is_printable(self):
        assert feed_all(self.tracker, "hello\n") == [False] * 6
        assert self.tracker.state is EscapeState.NORMAL
        assert self.tracker.active_code == ""

    def test_sgr_sequence_is_non_printing(self):
        assert feed_all(self.tracker, "\x1b[31m") == [True] * 5
        assert self.tracker.state is EscapeState.NORMAL
        assert self.tracker.active_code == "\x1b[31m"

    def test_terminator_is_non_printing(self):
        feed_all(self.tracker, "\x1b[1")

        assert self.tracker.in_escape
        assert self.tracker.feed("m") is True
        assert not self.tracker.in_escape

    def test_text_after_sequence_is_printable(self):
        results = feed_all(self.tracker, "\x1b[1;32mok")

        assert results[-2:] == [False, False]
        assert self.tracker.active_code == "\x1b[1;32m"

    def test_new_sequence_replaces_active_code(self):
        feed_all(self.tracker, "\x1b[31mred\x1b[0m")

        assert self.tracker.active_code == "\x1b[0m"

    def test_escape_restarts_an_unfinished_sequence(self):
        feed_all(self.tracker, "\x1b[3")
        self.tracker.feed(ESC)

        assert self.tracker.active_code == ESC
        assert self.tracker.in_escape

    def test_sequence_without_m_stays_open(self):
        feed_all(self.tracker, "\x1b[2Kabc")

        assert self.tracker.in_escape
        assert self.tracker.active_code == "\x1b[2Kabc"
