from curryclub.models import CatalogProduct, FeedKind, HeatLevel


def test_heat_level_parse():
    assert HeatLevel.parse("medium") is HeatLevel.MEDIUM
    assert HeatLevel.parse(HeatLevel.HOT) is HeatLevel.HOT
    assert HeatLevel.parse("scorching") is None
    assert HeatLevel.parse(None) is None


def test_catalog_product_labels_and_dict():
    product = CatalogProduct(
        slug="chana-masala",
        name="Chana Masala",
        description="Chickpeas",
        image="",
        heat=HeatLevel.MEDIUM,
        tags=("classic",),
        diet=("vegan",),
    )
    assert product.labels == ("classic", "vegan")
    payload = product.to_dict()
    assert payload["heat"] == "Medium"
    assert payload["tags"] == ["classic"]
    assert payload["allergens"] == []


def test_feed_kind_labels():
    assert FeedKind.NEWS.label == "News"
    assert FeedKind.CASE_STUDY.label == "Case Study"
