"""Print example conversions to standard output.

Usage: ``python -m casekit.demo [TEXT ...]``. Without arguments the built-in
examples are used. Failed conversions are logged and skipped.
"""
import logging
import sys
from typing import Any, Callable, Iterable, List, Optional, Sequence, TextIO, Tuple

from .errors import CaseConversionError
from .logging_config import setup_logging
from .utils.strings import to_camel_case, to_dot_case

logger = logging.getLogger(__name__)

Converter = Callable[[Any], str]

EXAMPLES: List[Tuple[str, Converter, Any]] = [
    ("camel", to_camel_case, "test function"),
    ("camel", to_camel_case, "CustomFunction"),
    ("camel", to_camel_case, "Hello-WORLD_example"),
    ("camel", to_camel_case, "  --lead-and--trail--  "),
    ("dot", to_dot_case, "test function"),
    ("dot", to_dot_case, "823"),
    ("dot", to_dot_case, ""),
]


def _examples_for(texts: Sequence[str]) -> Iterable[Tuple[str, Converter, Any]]:
    for text in texts:
        yield "camel", to_camel_case, text
        yield "dot", to_dot_case, text


def run(examples: Iterable[Tuple[str, Converter, Any]], out: TextIO) -> int:
    failures = 0
    for style, converter, value in examples:
        try:
            result = converter(value)
        except CaseConversionError as error:
            failures += 1
            logger.error("%s(%r) failed: %s", style, value, error.message)
            continue
        out.write(f"{style}({value!r}) -> {result}\n")
    return failures


def main(argv: Optional[Sequence[str]] = None, out: Optional[TextIO] = None) -> int:
    setup_logging()
    texts = list(sys.argv[1:] if argv is None else argv)
    examples = _examples_for(texts) if texts else EXAMPLES
    run(examples, out or sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
