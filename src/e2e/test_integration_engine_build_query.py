from pathlib import Path
import pytest
from bkfuzzy.engine import Engine
from bkfuzzy.errors import CorpusLoadError, EmptyCorpusError

def _seed(tmp: Path, text: str = "kitten sitting\nbitten mitten\n") -> str:
    p = tmp / "words.txt"
    p.write_text(text, encoding="utf-8")
    return str(p)

@pytest.mark.e2e
def test_build_from_file_and_query(tmp_path: Path):
    eng = Engine()
    try:
        eng.build(_seed(tmp_path))
        res = eng.query("kitten", 2)
        assert res.matches == ["kitten", "bitten", "mitten"]
        assert res.strategy == "index" and res.threshold == 2
        assert res.visited == 3
        assert res.elapsed_ms >= 0
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_brute_force_agrees_with_index(tmp_path: Path):
    eng = Engine()
    try:
        eng.build(_seed(tmp_path))
        idx = eng.query("sitten", 1)
        brute = eng.query("sitten", 1, strategy="brute")
        assert sorted(idx.matches) == sorted(brute.matches)
        assert brute.visited == 4
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_build_from_memory_and_stats():
    eng = Engine()
    eng.build(words=["a", "b", "c"])
    st = eng.stats()
    assert st["size"] == 3 and st["depth"] == 3
    assert st["source"] == "<memory>"
    assert eng.depth() == 3
    eng.shutdown()
    assert not eng.ready

@pytest.mark.e2e
def test_brute_only_build_skips_the_tree():
    eng = Engine()
    eng.build(words=["rose", "nose"], index=False)
    assert eng.query("rose", 0, strategy="brute").matches == ["rose"]
    with pytest.raises(RuntimeError):
        eng.query("rose", 0)
    with pytest.raises(RuntimeError):
        eng.dump_dot()

@pytest.mark.e2e
def test_query_before_build_fails():
    eng = Engine()
    with pytest.raises(RuntimeError):
        eng.query("x", 1)
    with pytest.raises(RuntimeError):
        eng.stats()

@pytest.mark.e2e
def test_build_argument_validation(tmp_path: Path):
    eng = Engine()
    with pytest.raises(ValueError):
        eng.build()
    with pytest.raises(ValueError):
        eng.build(_seed(tmp_path), words=["x"])
    eng.build(words=["x"])
    with pytest.raises(ValueError):
        eng.query("x", 1, strategy="fast")

@pytest.mark.e2e
@pytest.mark.parametrize("index", [True, False])
def test_empty_vocabulary_is_fatal(tmp_path: Path, index: bool):
    eng = Engine()
    with pytest.raises(EmptyCorpusError):
        eng.build(_seed(tmp_path, "\n\n"), index=index)
    assert not eng.ready

@pytest.mark.e2e
def test_unreadable_vocabulary_is_fatal(tmp_path: Path):
    eng = Engine()
    with pytest.raises(CorpusLoadError):
        eng.build(str(tmp_path / "missing.txt"))
    assert not eng.ready

@pytest.mark.e2e
def test_result_to_dict_shape():
    eng = Engine()
    eng.build(words=["rose", "nose", "note"])
    d = eng.query("nose", 1).to_dict()
    assert d == {"query": "nose", "threshold": 1, "mode": "index",
                 "matches": ["rose", "nose", "note"], "visited": 3}
