"""
Markup tokenizer.

A deliberately small tokenizer that splits markup into start-tag, end-tag,
text, and declaration/comment spans. It does not build a tree, decode
entities, or validate nesting; the helpers below only count depth of one tag
name at a time, which is all the structural converter needs.

Concatenating the raw text of every token reproduces the input exactly.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, FrozenSet, List, Optional, Sequence


class TokenKind(str, Enum):
    START_TAG = "start_tag"
    END_TAG = "end_tag"
    TEXT = "text"
    DECLARATION = "declaration"  # <!DOCTYPE ...> and <!-- comments -->


TOKEN_REGEX = re.compile(
    r"(?P<comment><!--.*?-->)"
    r"|(?P<declaration><![^>]*>)"
    r"|(?P<end></(?P<end_name>[A-Za-z][A-Za-z0-9-]*)\s*>)"
    r"|(?P<start><(?P<start_name>[A-Za-z][A-Za-z0-9-]*)"
    r"(?P<attrs>(?:\"[^\"]*\"|'[^']*'|[^'\">])*)>)",
    re.DOTALL,
)

CLASS_ATTR_REGEX = re.compile(
    r"(?:^|\s)class\s*=\s*(?:\"([^\"]*)\"|'([^']*)'|([^\s\"'>]+))", re.IGNORECASE
)


@dataclass(frozen=True)
class Token:
    """
    One span of markup.

    Attributes:
        kind: Span type
        raw: Exact source text of the span
        name: Lowercase tag name for tag tokens, None otherwise
        attrs: Raw attribute text of a start tag ("" otherwise)
    """

    kind: TokenKind
    raw: str
    name: Optional[str] = None
    attrs: str = ""

    @property
    def is_tag(self) -> bool:
        return self.kind in (TokenKind.START_TAG, TokenKind.END_TAG)

    @property
    def self_closing(self) -> bool:
        return self.kind == TokenKind.START_TAG and self.attrs.rstrip().endswith("/")

    @property
    def classes(self) -> FrozenSet[str]:
        """Class names from the class attribute of a start tag."""
        if self.kind != TokenKind.START_TAG:
            return frozenset()
        match = CLASS_ATTR_REGEX.search(self.attrs)
        if match is None:
            return frozenset()
        value = next(group for group in match.groups() if group is not None)
        return frozenset(value.split())

    def is_start(self, name: str) -> bool:
        return self.kind == TokenKind.START_TAG and self.name == name

    def is_end(self, name: str) -> bool:
        return self.kind == TokenKind.END_TAG and self.name == name


def tokenize(markup: str) -> List[Token]:
    """
    Split markup into tokens.

    Args:
        markup: Any markup string, well-formed or not

    Returns:
        Tokens in source order
    """
    tokens = []
    position = 0

    for match in TOKEN_REGEX.finditer(markup):
        if match.start() > position:
            tokens.append(Token(TokenKind.TEXT, markup[position : match.start()]))

        if match.group("comment") or match.group("declaration"):
            tokens.append(Token(TokenKind.DECLARATION, match.group(0)))
        elif match.group("end"):
            tokens.append(Token(TokenKind.END_TAG, match.group(0), match.group("end_name").lower()))
        else:
            tokens.append(
                Token(
                    TokenKind.START_TAG,
                    match.group(0),
                    match.group("start_name").lower(),
                    match.group("attrs"),
                )
            )
        position = match.end()

    if position < len(markup):
        tokens.append(Token(TokenKind.TEXT, markup[position:]))

    return tokens


def render(tokens: Sequence[Token]) -> str:
    """Reassemble tokens into markup."""
    return "".join(token.raw for token in tokens)


def text_content(tokens: Sequence[Token]) -> str:
    """Text of the tokens with every tag and declaration removed."""
    return "".join(token.raw for token in tokens if token.kind == TokenKind.TEXT)


def find_matching_end(tokens: Sequence[Token], start_index: int) -> Optional[int]:
    """
    Index of the end tag closing the start tag at start_index.

    Only tags with the same name affect the depth count.

    Returns:
        Index of the matching end tag, or None if it is never closed
    """
    name = tokens[start_index].name
    depth = 0
    for index in range(start_index, len(tokens)):
        token = tokens[index]
        if token.is_start(name) and not token.self_closing:
            depth += 1
        elif token.is_end(name):
            depth -= 1
            if depth == 0:
                return index
    return None


def remove_elements(tokens: Sequence[Token], predicate: Callable[[Token], bool]) -> List[Token]:
    """
    Drop every element whose start tag satisfies predicate, contents included.

    Elements that are never closed are left in place.
    """
    result = []
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token.kind == TokenKind.START_TAG and not token.self_closing and predicate(token):
            end_index = find_matching_end(tokens, index)
            if end_index is not None:
                index = end_index + 1
                continue
        result.append(token)
        index += 1
    return result


def element_inner(
    tokens: Sequence[Token], predicate: Callable[[Token], bool]
) -> Optional[List[Token]]:
    """
    Inner tokens of the first element whose start tag satisfies predicate.

    An element that is never closed extends to the end of the input.

    Returns:
        Tokens between the start and end tag, or None if no start tag matched
    """
    for index, token in enumerate(tokens):
        if token.kind == TokenKind.START_TAG and not token.self_closing and predicate(token):
            end_index = find_matching_end(tokens, index)
            if end_index is None:
                end_index = len(tokens)
            return list(tokens[index + 1 : end_index])
    return None


def first_element_text(tokens: Sequence[Token], name: str) -> Optional[str]:
    """
    Tag-stripped text between the first <name> start tag and the next </name>.

    Returns:
        Trimmed inner text, or None when the element is not opened and closed
        within tokens
    """
    for index, token in enumerate(tokens):
        if not token.is_start(name):
            continue
        for end_index in range(index + 1, len(tokens)):
            if tokens[end_index].is_end(name):
                return text_content(tokens[index + 1 : end_index]).strip()
        return None
    return None
