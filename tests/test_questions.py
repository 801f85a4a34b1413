"""Tests for question generation."""

from geoscan.questions import MAX_QUESTIONS, generate_questions


def test_first_questions_are_direct_brand_queries():
    questions = generate_questions("Bakkerij de Korrel", "Bakkerij", "Amsterdam", 5)

    assert questions == [
        "Is Bakkerij de Korrel een goede keuze voor Bakkerij in Amsterdam?",
        "Wat zijn de ervaringen met Bakkerij de Korrel?",
        "Hoe betrouwbaar is Bakkerij de Korrel?",
        "Is Bakkerij de Korrel aan te bevelen?",
        "Wat vinden klanten van Bakkerij de Korrel?",
    ]


def test_same_inputs_give_same_questions():
    first = generate_questions("Korrel", "Bakkerij", "Utrecht", 50)
    second = generate_questions("Korrel", "Bakkerij", "Utrecht", 50)
    assert first == second


def test_count_is_capped_at_pool_size():
    questions = generate_questions("Korrel", "Bakkerij", "Utrecht", 80)

    assert len(questions) == MAX_QUESTIONS == 50
    assert len(set(questions)) == 50


def test_smaller_count_is_a_prefix():
    full = generate_questions("Korrel", "Bakkerij", "Utrecht")
    assert generate_questions("Korrel", "Bakkerij", "Utrecht", 12) == full[:12]


def test_zero_or_negative_count_is_empty():
    assert generate_questions("Korrel", "Bakkerij", "Utrecht", 0) == []
    assert generate_questions("Korrel", "Bakkerij", "Utrecht", -3) == []


def test_empty_inputs_do_not_raise():
    questions = generate_questions("", "", "", 50)
    assert len(questions) == 50
    assert all(isinstance(q, str) for q in questions)


def test_questions_use_all_three_inputs():
    questions = generate_questions("Korrel", "Bakkerij", "Utrecht")
    assert any("Korrel" in q for q in questions)
    assert any("Bakkerij" in q for q in questions)
    assert any("Utrecht" in q for q in questions)
