"""Tests for token merging."""

from hypothesis import given
from hypothesis import strategies as st

from scriptmark.parser.merger import merge_tokens
from scriptmark.parser.tokens import Token, TokenType

T = TokenType

token_strategy = st.builds(
    Token,
    type=st.sampled_from(list(TokenType)),
    text=st.one_of(st.none(), st.text(max_size=10)),
)


class TestMergeTokens:
    """Test coalescing of multi-line elements."""

    def test_action_lines_join_with_newline(self):
        tokens = [Token(T.ACTION, text="One."), Token(T.ACTION, text="Two.")]
        assert merge_tokens(tokens) == [Token(T.ACTION, text="One.\nTwo.")]

    def test_dialogue_lines_join_with_space(self):
        tokens = [
            Token(T.CHARACTER, text="TOM"),
            Token(T.DIALOGUE, text="I know!"),
            Token(T.DIALOGUE, text="I'm sorry."),
        ]
        assert merge_tokens(tokens) == [
            Token(T.CHARACTER, text="TOM"),
            Token(T.DIALOGUE, text="I know! I'm sorry."),
        ]

    def test_parenthetical_splits_dialogue(self):
        tokens = [
            Token(T.DIALOGUE, text="Wait."),
            Token(T.PARENTHETICAL, text="(beat)"),
            Token(T.DIALOGUE, text="Go."),
        ]
        assert merge_tokens(tokens) == tokens

    def test_blanks_are_never_merged(self):
        tokens = [Token.blank(), Token.blank(), Token(T.ACTION, text="A")]
        assert merge_tokens(tokens) == tokens

    def test_other_kinds_pass_through(self):
        tokens = [
            Token(T.CHARACTER, text="JANE"),
            Token(T.CHARACTER, text="TOM"),
            Token(T.TRANSITION, text="CUT TO:"),
            Token(T.TRANSITION, text="FADE OUT."),
        ]
        assert merge_tokens(tokens) == tokens

    def test_input_is_not_mutated(self):
        first = Token(T.ACTION, text="One.")
        tokens = [first, Token(T.ACTION, text="Two.")]
        merge_tokens(tokens)
        assert first.text == "One."
        assert len(tokens) == 2

    def test_empty_sequence(self):
        assert merge_tokens([]) == []

    def test_accepts_iterators(self):
        tokens = iter([Token(T.ACTION, text="A"), Token(T.ACTION, text="B")])
        assert merge_tokens(tokens) == [Token(T.ACTION, text="A\nB")]

    @given(st.lists(token_strategy, max_size=30))
    def test_merging_is_idempotent(self, tokens):
        merged = merge_tokens(tokens)
        assert merge_tokens(merged) == merged

    @given(st.lists(token_strategy, max_size=30))
    def test_no_adjacent_mergeable_tokens_remain(self, tokens):
        merged = merge_tokens(tokens)
        for left, right in zip(merged, merged[1:]):
            if left.type in (T.ACTION, T.DIALOGUE):
                assert left.type != right.type
