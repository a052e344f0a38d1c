"""Bracket-aware splitting of geometry text"""
from typing import List

from pgwkb.core.exceptions import FormatError


class GeometryTokenizer:
    """
    Splits delimited text at top level only.

    Delimiters inside a balanced () or [] span are not split points.
    Stateless implementation using class methods.
    """

    _OPENERS = {"(": ")", "[": "]"}
    _CLOSERS = {")": "(", "]": "["}

    @classmethod
    def tokenize(cls, text: str, delimiter: str) -> List[str]:
        """
        Split text on a delimiter outside of brackets

        Args:
            text: Text to split
            delimiter: Single delimiter character

        Returns:
            Ordered list of tokens; a non-empty remainder after the last
            delimiter is always included

        Raises:
            FormatError: If brackets are unbalanced or mismatched
        """
        tokens: List[str] = []
        stack: List[str] = []
        consumed = 0
        for position, char in enumerate(text):
            if char in cls._OPENERS:
                stack.append(char)
            elif char in cls._CLOSERS:
                if not stack or stack[-1] != cls._CLOSERS[char]:
                    raise FormatError(f"Unmatched '{char}' at position {position} in '{text}'")
                stack.pop()
            if char == delimiter and not stack:
                tokens.append(text[consumed:position])
                consumed = position + 1
        if stack:
            raise FormatError(f"Unclosed '{stack[-1]}' in '{text}'")
        if consumed < len(text):
            tokens.append(text[consumed:])
        return tokens

    @classmethod
    def split(cls, text: str, separator: str) -> List[str]:
        """Plain split that keeps empty pieces and ignores brackets"""
        return text.split(separator)

    @classmethod
    def remove_brackets(cls, text: str) -> str:
        """Strip one leading '(' and one trailing ')' if present"""
        return cls.remove_leading_and_trailing(text, "(", ")")

    @classmethod
    def remove_leading_and_trailing(cls, text: str, leading: str, trailing: str) -> str:
        """
        Strip one occurrence of a leading and a trailing marker

        Args:
            text: Text to trim
            leading: Marker removed from the start if present
            trailing: Marker removed from the end if present

        Returns:
            Trimmed text
        """
        if len(text) <= 1:
            return text
        start = len(leading) if text.startswith(leading) else 0
        end = len(text) - len(trailing) if text.endswith(trailing) else len(text)
        if end < start:
            return ""
        return text[start:end]


def tokenize(text: str, delimiter: str) -> List[str]:
    return GeometryTokenizer.tokenize(text, delimiter)
