import pytest

from bktree.utils.config import QueryConfig, load_query_config


def test_defaults():
    assert load_query_config(None) == QueryConfig()


def test_top_level_keys(tmp_path):
    p = tmp_path / "q.yaml"
    p.write_text("metric: hamming\nradius: 1\n", encoding="utf-8")
    assert load_query_config(p) == QueryConfig(metric="hamming", radius=1, lowercase=False)


def test_query_section_and_empty_file(tmp_path):
    p = tmp_path / "q.yaml"
    p.write_text("query:\n  lowercase: true\n", encoding="utf-8")
    assert load_query_config(p) == QueryConfig(lowercase=True)
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert load_query_config(empty) == QueryConfig()


def test_non_mapping_rejected(tmp_path):
    p = tmp_path / "q.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_query_config(p)


def test_query_section_must_be_mapping(tmp_path):
    p = tmp_path / "q.yaml"
    p.write_text("query: [1, 2]\n", encoding="utf-8")
    with pytest.raises(ValueError, match="'query'"):
        load_query_config(p)


def test_bad_radius_rejected(tmp_path):
    p = tmp_path / "q.yaml"
    p.write_text("radius: [1]\n", encoding="utf-8")
    with pytest.raises(ValueError, match="radius"):
        load_query_config(p)
    p.write_text("radius: two\n", encoding="utf-8")
    with pytest.raises(ValueError, match="radius"):
        load_query_config(p)
