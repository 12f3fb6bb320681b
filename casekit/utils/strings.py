import logging
import re
from enum import Enum
from typing import Any, Callable, Dict, List, Union

from ..errors import InvalidInputType, NoValidWords

logger = logging.getLogger(__name__)

# ASCII only: accented and other non-ASCII letters count as separators.
WORD_SEPARATOR = re.compile(r"[^a-zA-Z0-9]+")


class CaseStyle(str, Enum):
    CAMEL = "camel"
    DOT = "dot"


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def tokenize(value: Any) -> List[str]:
    """Split ``value`` on runs of non-alphanumeric ASCII characters.

    Empty tokens from leading, trailing or adjacent separators are kept.
    """
    if not isinstance(value, str):
        raise InvalidInputType()
    return WORD_SEPARATOR.split(value)


def _camel_words(tokens: List[str]) -> List[str]:
    cased: List[str] = []
    seen_word = False
    for token in tokens:
        if seen_word:
            cased.append(_capitalize(token))
        else:
            cased.append(token.lower())
            seen_word = token != ""
    return cased


def _dot_words(tokens: List[str]) -> List[str]:
    return [token.lower() for token in tokens]


_STYLES: Dict[CaseStyle, Callable[[List[str]], str]] = {
    CaseStyle.CAMEL: lambda tokens: "".join(_camel_words(tokens)),
    CaseStyle.DOT: lambda tokens: ".".join(_dot_words(tokens)),
}


def convert(value: Any, style: Union[CaseStyle, str]) -> str:
    style = CaseStyle(style)
    tokens = tokenize(value)
    if not any(tokens):
        raise NoValidWords()
    logger.debug("converting %d tokens to %s case", len(tokens), style.value)
    return _STYLES[style](tokens)


def to_camel_case(value: Any) -> str:
    return convert(value, CaseStyle.CAMEL)


def to_dot_case(value: Any) -> str:
    return convert(value, CaseStyle.DOT)
