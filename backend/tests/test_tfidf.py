import math

import numpy as np
import pytest

from services.tfidf import inverse_document_frequency, project_vector, term_frequency


def test_term_frequency_normalized_by_length():
    tf = term_frequency(["a", "b", "a"])
    assert tf == pytest.approx({"a": 2 / 3, "b": 1 / 3})


def test_term_frequency_empty():
    assert term_frequency([]) == {}


def test_idf_smoothed_formula():
    idf = inverse_document_frequency([["python", "docker"], ["python"]])
    assert idf["python"] == pytest.approx(1.0)
    assert idf["docker"] == pytest.approx(math.log(3 / 2) + 1)


def test_idf_includes_candidate_only_terms():
    idf = inverse_document_frequency([["python"], ["painting"]])
    assert "painting" in idf
    assert idf["painting"] == pytest.approx(math.log(3 / 2) + 1)


def test_idf_counts_empty_document_in_corpus():
    idf = inverse_document_frequency([["python"], []])
    assert idf == pytest.approx({"python": math.log(3 / 2) + 1})


def test_idf_empty_corpus():
    assert inverse_document_frequency([[], []]) == {}


def test_project_vector_aligned_to_vocabulary():
    tf = {"python": 0.5, "docker": 0.25}
    idf = {"python": 1.0, "docker": 2.0, "aws": 3.0}
    vector = project_vector(tf, idf, ["docker", "aws", "python"])
    assert isinstance(vector, np.ndarray)
    assert vector.tolist() == pytest.approx([0.5, 0.0, 0.5])


def test_project_vector_missing_idf_is_zero():
    vector = project_vector({"rust": 1.0}, {}, ["rust"])
    assert vector.tolist() == [0.0]


def test_project_vector_empty_vocabulary():
    assert len(project_vector({"python": 1.0}, {"python": 1.0}, [])) == 0
