import io
from pathlib import Path

import pytest
from wordler.engine import MalformedResultsRecord
from wordler.harness import (
    ResultsRecord, Solution, SolveStatus, format_result, load_results, parse_result,
    pretty_stats, summarize, write_results,
)


def test_parse_result_lines():
    assert parse_result("atlas, 3") == ResultsRecord("atlas", 3)
    assert parse_result("crane,2\n") == ResultsRecord("crane", 2)
    assert parse_result("geese,   10") == ResultsRecord("geese", 10)


@pytest.mark.parametrize("line", ["atlas 3", "atla, 3", "ATLAS, 3", "atlas, x", "atlas, ", "atlas, -1"])
def test_parse_result_rejects_bad_lines(line):
    with pytest.raises(MalformedResultsRecord):
        parse_result(line)


def test_write_then_load(tmp_path: Path):
    sols = [Solution("crane", 2), Solution("fjord", 6, SolveStatus.EXHAUSTED), Solution("geese", 4)]
    p = write_results(sols, tmp_path / "out" / "results.txt")
    assert Path(p).read_text(encoding="utf-8") == "crane, 2\ngeese, 4\n"
    write_results([Solution("level", 3)], p, append=True)
    recs = load_results(p)
    assert [format_result(r) for r in recs] == ["crane, 2", "geese, 4", "level, 3"]


def test_load_results_from_stream():
    recs = load_results(io.StringIO("crane, 2\n\ngeese, 4\n"))
    assert len(recs) == 2


def test_summarize():
    recs = [ResultsRecord("crane", 2), ResultsRecord("geese", 4),
            ResultsRecord("level", 3), ResultsRecord("those", 4), ResultsRecord("amaze", 2)]
    s = summarize(recs)
    assert s.count == 5
    assert s.min == ("crane", 2)
    assert s.max == ("geese", 4)
    assert s.mean == pytest.approx(3.0)
    assert s.histogram == [0, 0, 2, 1, 2]

    text = pretty_stats(s)
    assert "Number of results: 5" in text
    assert 'Min guesses: 2 for "crane"' in text
    assert 'Max guesses: 4 for e.g. "geese"' in text
    assert "Mean guesses: 3.00" in text
    assert text.splitlines()[-1] == "4, 2"
