from resume_analyzer.core.text_metrics import calculate_keyword_density, calculate_readability_score


def test_keyword_density_counts_lowercased_words():
    items = calculate_keyword_density("Python python PYTHON sql SQL go is a")

    assert [(i.word, i.count) for i in items] == [("python", 3), ("sql", 2)]
    assert items[0].frequency == 3 / 5


def test_keyword_density_ties_keep_first_occurrence_order():
    items = calculate_keyword_density("docker redis docker redis kafka")

    assert [i.word for i in items] == ["docker", "redis", "kafka"]


def test_keyword_density_limit():
    text = " ".join(f"word{i}" for i in range(30))

    assert len(calculate_keyword_density(text)) == 20
    assert len(calculate_keyword_density(text, limit=5)) == 5


def test_keyword_density_empty():
    assert calculate_keyword_density("") == []
    assert calculate_keyword_density("a an to") == []


def test_readability_empty_text():
    assert calculate_readability_score("") == 0
    assert calculate_readability_score("   \n ") == 0


def test_readability_simple_text_scores_high():
    assert calculate_readability_score("The cat sat. The dog ran.") == 100


def test_readability_is_clamped():
    dense = "Internationalization operationalization institutionalization " * 20

    assert calculate_readability_score(dense) == 0


def test_readability_in_range():
    text = "Built data pipelines in Python. Led a team of five engineers. Reduced costs by a third."

    assert 0 <= calculate_readability_score(text) <= 100
