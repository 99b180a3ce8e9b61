from shoe_assistant.rag.scoring import score_product, searchable_text
from shoe_assistant.schemas import ProductRecord


def _product(**fields) -> ProductRecord:
    return ProductRecord(handle="h", **fields)


def test_searchable_text_joins_fields_lowercased():
    product = _product(title="Suede Brush", body="Works Well", tags="Brush", vendor="ACME")
    assert searchable_text(product) == "suede brush works well brush acme"


def test_title_match_scores_three():
    assert score_product(["suede"], _product(title="Suede Brush", tags="suede")) == 3


def test_tags_match_scores_two():
    assert score_product(["suede"], _product(title="Brush", tags="suede,care")) == 2


def test_body_match_scores_one():
    assert score_product(["suede"], _product(title="Brush", body="great on suede")) == 1


def test_vendor_match_scores_one():
    assert score_product(["acme"], _product(title="Brush", vendor="Acme")) == 1


def test_no_match_scores_zero():
    assert score_product(["canvas"], _product(title="Suede Brush", body="soft", tags="suede")) == 0


def test_substring_match_inside_longer_word():
    assert score_product(["leather"], _product(title="Leathers Kit")) == 3


def test_scores_are_summed_per_keyword(care_catalog):
    keywords = ["leather", "upper", "leather", "cleaner", "regularly"]
    assert [score_product(keywords, product) for product in care_catalog] == [9, 0, 2]


def test_repeated_keyword_is_scored_each_time():
    product = _product(title="Leather Balm")
    assert score_product(["leather"], product) == 3
    assert score_product(["leather", "leather"], product) == 6


def test_keyword_order_does_not_change_score():
    product = _product(title="Suede Brush", tags="suede,rubber", body="for rubber soles")
    assert score_product(["suede", "rubber", "soles"], product) == score_product(["soles", "rubber", "suede"], product)


def test_empty_keyword_matches_every_product():
    assert score_product([""], _product()) == 3
    assert score_product([""], _product(title="Anything", body="at all")) == 3


def test_no_keywords_scores_zero():
    assert score_product([], _product(title="Leather Balm")) == 0
