import pytest

from haversack import BagColor, Content, Rule
from haversack.models.graph import ContainmentGraph


def test_bag_color_compares_by_value():
    assert BagColor("shiny", "gold") == BagColor("shiny", "gold")
    assert BagColor("shiny", "gold") != BagColor("shiny", "red")
    assert len({BagColor("shiny", "gold"), BagColor("shiny", "gold")}) == 1


def test_bag_color_parse():
    assert BagColor.parse("shiny gold bags.") == BagColor("shiny", "gold")
    with pytest.raises(ValueError):
        BagColor.parse("gold")


def test_content_rendering_uses_plural():
    gold = BagColor("shiny", "gold")
    assert str(Content(1, gold)) == "1 shiny gold bag"
    assert str(Content(3, gold)) == "3 shiny gold bags"


def test_content_requires_positive_quantity():
    with pytest.raises(ValueError):
        Content(0, BagColor("shiny", "gold"))


def test_rule_describe_and_contains():
    rule = Rule(
        BagColor("bright", "white"),
        (Content(1, BagColor("shiny", "gold")),),
    )
    assert rule.describe() == "bright white bags contain 1 shiny gold bag."
    assert rule.contains(BagColor("shiny", "gold"))
    assert not rule.contains(BagColor("dark", "olive"))
    assert Rule(BagColor("faded", "blue")).describe() == "faded blue bags contain no other bags."


def test_graph_accumulates_repeated_edges():
    graph = ContainmentGraph()
    red = BagColor("light", "red")
    white = BagColor("bright", "white")
    graph.add_edge(red, white, 1)
    graph.add_edge(red, white, 2)
    assert graph.get_edge(red, white).quantity == 3
    assert list(graph.neighbors(white, reverse=True)) == [red]
    assert graph.neighbors(white) == {}
    assert red in graph
