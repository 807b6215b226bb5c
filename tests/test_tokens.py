"""Tests for the token model and token map."""

import dataclasses

import pytest

from errormsg.tokens import FIRST_GRAMMAR_TYPE, Position, Token, TokenMap, TokenType


class TestPosition:
    """Test Position value type."""

    def test_str(self) -> None:
        assert str(Position(line=7, column=11)) == "7:11"

    def test_is_immutable(self) -> None:
        position = Position(line=1, column=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            position.line = 2  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Position(3, 4) == Position(line=3, column=4)


class TestToken:
    """Test Token value type."""

    def test_is_immutable(self) -> None:
        token = Token(kind=5, literal="x", position=Position(1, 1))
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.literal = "y"  # type: ignore[misc]

    def test_sentinels_are_plain_integers(self) -> None:
        assert TokenType.INVALID == 0
        assert TokenType.EOF == 1
        assert FIRST_GRAMMAR_TYPE == 2


class TestTokenMap:
    """Test TokenMap lookups and ordering."""

    @pytest.fixture
    def token_map(self) -> TokenMap:
        return TokenMap([("VAR", "var"), ("IDENT", "identifier"), ("SEMI", ";")])

    def test_ids_follow_declaration_order(self, token_map: TokenMap) -> None:
        assert token_map.type_of("VAR") == 2
        assert token_map.type_of("IDENT") == 3
        assert token_map.type_of("SEMI") == 4

    def test_unknown_terminal_raises(self, token_map: TokenMap) -> None:
        with pytest.raises(KeyError):
            token_map.type_of("NOPE")

    def test_len_and_contains(self, token_map: TokenMap) -> None:
        assert len(token_map) == 3
        assert "IDENT" in token_map
        assert "NOPE" not in token_map

    def test_name_of(self, token_map: TokenMap) -> None:
        assert token_map.name_of(3) == "identifier"
        assert token_map.name_of(TokenType.INVALID) == "INVALID"
        assert token_map.name_of(TokenType.EOF) == "EOF"
        assert token_map.name_of(9001) == "#9001"

    def test_display_names_are_ordered_by_id(self, token_map: TokenMap) -> None:
        assert token_map.display_names({"SEMI", "VAR", "IDENT"}) == [
            "var",
            "identifier",
            ";",
        ]

    def test_display_names_append_unknown_sorted(self, token_map: TokenMap) -> None:
        assert token_map.display_names(["ZED", "SEMI", "ALPHA"]) == [
            ";",
            "ALPHA",
            "ZED",
        ]

    def test_display_names_empty(self, token_map: TokenMap) -> None:
        assert token_map.display_names([]) == []

    def test_token_string(self, token_map: TokenMap) -> None:
        token = Token(kind=3, literal="abcd", position=Position(1, 5))
        assert token_map.token_string(token) == "identifier(3,abcd)"
