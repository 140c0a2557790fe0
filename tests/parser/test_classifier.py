"""Tests for the Fountain line classifier."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from scriptmark.parser.classifier import (
    RULES,
    LineClassifier,
    LineContext,
    classify_line,
    match_action,
    match_character,
    match_dialogue,
    match_parenthetical,
    match_scene_heading,
    match_transition,
)
from scriptmark.parser.tokens import ClassifierState, Token, TokenType

T = TokenType


def kinds(tokens: list[Token]) -> list[TokenType]:
    return [token.type for token in tokens]


@pytest.fixture
def classifier():
    return LineClassifier()


class TestRules:
    """Test individual classification rules."""

    def test_rule_priority_order(self):
        assert [name for name, _ in RULES] == [
            "blank",
            "page_break",
            "scene_heading",
            "transition",
            "centered",
            "character",
            "parenthetical",
            "dialogue",
            "section",
            "synopsis",
            "note",
            "action",
        ]

    def test_forced_scene_heading(self):
        match = match_scene_heading(
            LineContext(".FLASHBACK", previous="Action."), ClassifierState()
        )
        assert match.token == Token(T.SCENE_HEADING, text="FLASHBACK")

    def test_forced_heading_keeps_extra_dots(self):
        match = match_scene_heading(LineContext("...and then"), ClassifierState())
        assert match.token == Token(T.SCENE_HEADING, text="..and then")

    def test_lone_dot_is_not_a_heading(self):
        assert match_scene_heading(LineContext("."), ClassifierState()) is None

    def test_scene_heading_ends_dialogue(self):
        state = ClassifierState(in_dialogue=True, last_character="JANE")
        match = match_scene_heading(LineContext(".EXT. ROOF"), state)
        assert match.state.in_dialogue is False
        assert match.state.last_character == "JANE"

    def test_forced_transition_strips_sigil(self):
        match = match_transition(LineContext(">  SMASH CUT"), ClassifierState())
        assert match.token == Token(T.TRANSITION, text="SMASH CUT")

    def test_transition_needs_blank_neighbours(self):
        ctx = LineContext("CUT TO:", previous="Action.", next="")
        assert match_transition(ctx, ClassifierState()) is None

    def test_character_enters_dialogue(self):
        match = match_character(LineContext("JANE", next="Hi."), ClassifierState())
        assert match.token == Token(T.CHARACTER, text="JANE")
        assert match.state == ClassifierState(in_dialogue=True, last_character="JANE")

    def test_character_rejects_transition_suffix(self):
        ctx = LineContext("SMASH TO:", next="More.")
        assert match_character(ctx, ClassifierState()) is None

    def test_parenthetical_needs_dialogue(self):
        ctx = LineContext("(beat)")
        assert match_parenthetical(ctx, ClassifierState()) is None
        match = match_parenthetical(ctx, ClassifierState(in_dialogue=True))
        assert match.token == Token(T.PARENTHETICAL, text="(beat)")

    def test_dialogue_is_trimmed(self):
        match = match_dialogue(
            LineContext("   Hello there.  "), ClassifierState(in_dialogue=True)
        )
        assert match.token == Token(T.DIALOGUE, text="Hello there.")

    def test_action_keeps_indentation(self):
        match = match_action(LineContext("    indented"), ClassifierState())
        assert match.token.text == "    indented"

    def test_action_strips_one_forcing_sigil(self):
        match = match_action(LineContext("!!LOUD"), ClassifierState())
        assert match.token.text == "!LOUD"

    def test_classify_line_falls_through_to_action(self):
        match = classify_line(LineContext("She waits."), ClassifierState())
        assert match.token == Token(T.ACTION, text="She waits.")


class TestSceneHeadings:
    """Test scene heading detection in context."""

    def test_keyword_after_blank_line(self, classifier):
        tokens = classifier.classify("INT. KITCHEN - DAY\n\nJohn enters.")
        assert kinds(tokens) == [T.SCENE_HEADING, T.BLANK, T.ACTION]
        assert tokens[0].text == "INT. KITCHEN - DAY"

    def test_keyword_after_text_is_action(self, classifier):
        tokens = classifier.classify("Some action.\nINT. KITCHEN - DAY")
        assert kinds(tokens) == [T.ACTION, T.ACTION]
        assert tokens[1].text == "INT. KITCHEN - DAY"

    def test_keyword_is_case_insensitive(self, classifier):
        tokens = classifier.classify("\next. garden - night")
        assert tokens[1] == Token(T.SCENE_HEADING, text="ext. garden - night")

    def test_dotted_line_after_text_is_forced_heading(self, classifier):
        tokens = classifier.classify("Action.\n...Silence.")
        assert tokens[1] == Token(T.SCENE_HEADING, text="..Silence.")

    def test_forced_action_overrides_keyword(self, classifier):
        assert classifier.classify("!INT. HOUSE") == [
            Token(T.ACTION, text="INT. HOUSE")
        ]


class TestCharacterAndDialogue:
    """Test character cues and the dialogue state machine."""

    def test_uppercase_cue_between_blank_and_text(self, classifier):
        tokens = classifier.classify("\nJOHN\nHello.")
        assert kinds(tokens) == [T.BLANK, T.CHARACTER, T.DIALOGUE]
        assert tokens[1].text == "JOHN"

    def test_cue_after_text_is_action(self, classifier):
        tokens = classifier.classify("She turns.\nJOHN\nHello.")
        assert kinds(tokens) == [T.ACTION, T.ACTION, T.ACTION]

    def test_cue_followed_by_blank_is_action(self, classifier):
        tokens = classifier.classify("JOHN\n\nHello.")
        assert tokens[0] == Token(T.ACTION, text="JOHN")

    def test_cue_at_end_of_document_is_action(self, classifier):
        assert classifier.classify("\nJOHN")[1] == Token(T.ACTION, text="JOHN")

    def test_uppercase_ratio_threshold(self, classifier):
        tokens = classifier.classify("\nMcCOY\nHi.")
        assert tokens[1] == Token(T.CHARACTER, text="McCOY")

    def test_mixed_case_name_is_action(self, classifier):
        assert kinds(classifier.classify("\nJohn\nHi.")) == [
            T.BLANK,
            T.ACTION,
            T.ACTION,
        ]

    def test_forced_cue_keeps_case(self, classifier):
        tokens = classifier.classify("@Dr. Smith\nHello.")
        assert tokens == [
            Token(T.CHARACTER, text="Dr. Smith"),
            Token(T.DIALOGUE, text="Hello."),
        ]

    def test_parenthetical_inside_dialogue(self, classifier):
        tokens = classifier.classify("@JANE\n(quietly)\nHi.")
        assert kinds(tokens) == [T.CHARACTER, T.PARENTHETICAL, T.DIALOGUE]

    def test_parenthetical_outside_dialogue_is_action(self, classifier):
        assert classifier.classify("(beat)") == [Token(T.ACTION, text="(beat)")]

    def test_blank_line_ends_dialogue(self, classifier):
        tokens = classifier.classify("@JANE\nHi.\n\nShe leaves.")
        assert kinds(tokens) == [T.CHARACTER, T.DIALOGUE, T.BLANK, T.ACTION]

    def test_every_line_of_a_speech_is_dialogue(self, classifier):
        tokens = classifier.classify("@JANE\nOne.\nTwo.\nThree.")
        assert kinds(tokens) == [T.CHARACTER] + [T.DIALOGUE] * 3

    def test_final_state_tracks_last_character(self, classifier):
        _, state = classifier.classify_lines(["", "@TOM", "Hey."])
        assert state == ClassifierState(in_dialogue=True, last_character="TOM")


class TestTransitionsAndCentered:
    """Test transitions and centered text."""

    def test_transition_between_blank_lines(self, classifier):
        tokens = classifier.classify("Action.\n\nCUT TO:\n\nINT. HALL - DAY")
        assert tokens[2] == Token(T.TRANSITION, text="CUT TO:")
        assert tokens[4] == Token(T.SCENE_HEADING, text="INT. HALL - DAY")

    @pytest.mark.parametrize("phrase", ["FADE OUT.", "FADE TO BLACK.", "fade to:"])
    def test_transition_phrases(self, classifier, phrase):
        assert classifier.classify(f"\n{phrase}\n")[1] == Token(
            T.TRANSITION, text=phrase
        )

    def test_transition_phrase_before_text_is_action(self, classifier):
        tokens = classifier.classify("\nCUT TO:\nMore.")
        assert tokens[1] == Token(T.ACTION, text="CUT TO:")

    def test_forced_transition(self, classifier):
        assert classifier.classify("> FADE IN") == [
            Token(T.TRANSITION, text="FADE IN")
        ]

    def test_centered_text(self, classifier):
        assert classifier.classify(">  THE END  <") == [
            Token(T.CENTERED, text="THE END")
        ]


class TestStructuralLines:
    """Test page breaks, sections, synopses and notes."""

    @pytest.mark.parametrize("marker", ["===", "=====", "  ===  "])
    def test_page_break(self, classifier, marker):
        assert classifier.classify(marker) == [Token.page_break()]

    def test_sections_record_level(self, classifier):
        tokens = classifier.classify("# Act One\n### Beat")
        assert tokens == [Token.section("Act One", 1), Token.section("Beat", 3)]

    def test_synopsis_dropped_by_default(self, classifier):
        assert classifier.classify("= A quiet start.") == []

    def test_synopsis_included_when_enabled(self):
        classifier = LineClassifier(include_synopsis=True)
        assert classifier.classify("= A quiet start.") == [
            Token(T.SYNOPSIS, text="A quiet start.")
        ]

    def test_note_dropped_by_default(self, classifier):
        tokens = classifier.classify("Action.\n[[check this]]\nMore.")
        assert tokens == [
            Token(T.ACTION, text="Action."),
            Token(T.ACTION, text="More."),
        ]

    def test_note_included_when_enabled(self):
        classifier = LineClassifier(include_notes=True)
        assert classifier.classify("[[check this]]") == [
            Token(T.NOTE, text="check this")
        ]

    def test_suppressed_types(self):
        assert LineClassifier().suppressed_types == {T.SYNOPSIS, T.NOTE}
        assert LineClassifier(True, True).suppressed_types == frozenset()


class TestDocumentClassification:
    """Test whole-document classification."""

    def test_title_page_becomes_one_token(self, classifier):
        tokens = classifier.classify("Title: Rain\nAuthor: Sam\n\nINT. HALL - DAY")
        assert tokens == [
            Token.title_page({"title": "Rain", "author": "Sam"}),
            Token(T.SCENE_HEADING, text="INT. HALL - DAY"),
        ]

    def test_windows_line_endings(self, classifier):
        assert classifier.classify("@JANE\r\nHi.") == [
            Token(T.CHARACTER, text="JANE"),
            Token(T.DIALOGUE, text="Hi."),
        ]

    def test_empty_document_is_one_blank(self, classifier):
        assert classifier.classify("") == [Token.blank()]

    def test_fresh_state_per_call(self, classifier):
        classifier.classify("@JANE\nStill talking")
        assert classifier.classify("She waits.") == [
            Token(T.ACTION, text="She waits.")
        ]

    @given(st.text(alphabet=st.sampled_from("aZ .@>!<=#()[]:\n\r\t-"), max_size=200))
    def test_every_line_yields_at_most_one_token(self, text):
        tokens = LineClassifier(include_synopsis=True, include_notes=True).classify(
            text
        )
        assert len(tokens) <= len(text.replace("\r\n", "\n").split("\n"))
        assert all(isinstance(token.type, TokenType) for token in tokens)
