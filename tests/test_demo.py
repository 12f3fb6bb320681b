import io
import logging
import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from casekit import demo  # noqa: E402


def test_demo_prints_builtin_examples(caplog):
    out = io.StringIO()
    with caplog.at_level(logging.ERROR, logger="casekit.demo"):
        assert demo.main([], out=out) == 0
    lines = out.getvalue().splitlines()
    assert "camel('test function') -> testFunction" in lines
    assert "dot('test function') -> test.function" in lines
    assert "dot('823') -> 823" in lines
    assert len(lines) == len(demo.EXAMPLES) - 1
    assert any("no valid words" in record.getMessage() for record in caplog.records)


def test_demo_converts_arguments():
    out = io.StringIO()
    demo.main(["Hello-WORLD_example"], out=out)
    assert out.getvalue().splitlines() == [
        "camel('Hello-WORLD_example') -> helloWorldExample",
        "dot('Hello-WORLD_example') -> hello.world.example",
    ]


def test_run_counts_failures_and_continues():
    out = io.StringIO()
    examples = [("camel", demo.to_camel_case, 42), ("dot", demo.to_dot_case, "a b")]
    assert demo.run(examples, out) == 1
    assert out.getvalue() == "dot('a b') -> a.b\n"
