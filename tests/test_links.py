import pytest
from hal_resource.core.errors import MissingLink
from hal_resource.core.links import (
    LinkTable,
    get_embedded,
    get_link,
    get_link_href,
    get_link_title,
)
from hal_resource.models import Link


def test_get_link_basic_cases():
    assert get_link({"id": 1}, "customer") is None
    payload = {"_links": {"customer": {"href": "/customers/7", "title": "ACME"}}}
    assert get_link(payload, "customer") == {
        "href": "/customers/7",
        "title": "ACME",
    }
    assert get_link(payload, "missing") is None


def test_get_link_array_returns_first():
    payload = {"_links": {"items": [{"href": "/items/1"}, {"href": "/items/2"}]}}
    assert get_link_href(payload, "items") == "/items/1"
    assert get_link({"_links": {"items": []}}, "items") is None


def test_get_link_href_and_title():
    payload = {
        "_links": {
            "self": {"href": "/orders/1"},
            "status": {"href": "/statuses/1", "title": "Shipped"},
        }
    }
    assert get_link_href(payload, "self") == "/orders/1"
    assert get_link_title(payload, "status") == "Shipped"
    assert get_link_href(payload, "nope") is None
    assert get_link_title(payload, "nope") is None


def test_get_embedded_cases():
    assert get_embedded({"id": 2}, "status") is None
    emb = {"_embedded": {"status": {"id": 1, "name": "Closed"}}}
    assert get_embedded(emb, "status") == {"id": 1, "name": "Closed"}


def test_link_table_get_returns_model():
    table = LinkTable({"_links": {"self": {"href": "/orders/1", "title": "Order"}}})
    link = table.get("self")
    assert isinstance(link, Link)
    assert link.href == "/orders/1"
    assert link.title == "Order"


def test_link_table_get_without_links_raises():
    with pytest.raises(MissingLink) as exc:
        LinkTable({"id": 1}).get("self")
    assert exc.value.relation == "self"


def test_link_table_get_unknown_relation_raises():
    with pytest.raises(MissingLink) as exc:
        LinkTable({"_links": {"self": {"href": "/a"}}}).get("parent")
    assert "parent" in str(exc.value)


def test_link_table_get_without_href_raises():
    with pytest.raises(MissingLink):
        LinkTable({"_links": {"broken": {"title": "no href"}}}).get("broken")


def test_link_table_set_merges_relations():
    content = {"_links": {"self": {"href": "/orders/1"}}}
    table = LinkTable(content)

    table.set("customer", "/customers/7")
    table.set("invoice", {"href": "/invoices/3", "title": "Invoice"})
    table.set("self", Link(href="/orders/2"))

    assert content["_links"] == {
        "self": {"href": "/orders/2"},
        "customer": {"href": "/customers/7"},
        "invoice": {"href": "/invoices/3", "title": "Invoice"},
    }


def test_link_table_set_creates_links_map():
    content = {"name": "fresh"}
    LinkTable(content).set("owner", "/users/1")
    assert content == {"name": "fresh", "_links": {"owner": {"href": "/users/1"}}}


def test_link_table_entries_and_membership():
    table = LinkTable(
        {
            "_links": {
                "self": {"href": "/orders/1"},
                "items": [
                    {"href": "/items/1"},
                    {"title": "no href"},
                    {"href": "/items/2"},
                ],
                "find": {"href": "/orders{?id}", "templated": True},
                "junk": "not a link",
            }
        }
    )

    entries = [(rel, idx, link.href) for rel, idx, link in table.entries()]
    assert entries == [
        ("self", None, "/orders/1"),
        ("items", 0, "/items/1"),
        ("items", 2, "/items/2"),
        ("find", None, "/orders{?id}"),
    ]
    assert "items" in table
    assert "nope" not in table
    assert len(table) == 4
    assert list(table) == ["self", "items", "find", "junk"]


def test_link_table_get_all():
    table = LinkTable({"_links": {"items": [{"href": "/i/1"}, {"href": "/i/2"}]}})
    assert [link.href for link in table.get_all("items")] == ["/i/1", "/i/2"]
    with pytest.raises(MissingLink):
        table.get_all("other")


def test_null_sections_count_as_absent():
    content = {"_links": None, "_embedded": None}
    assert get_link(content, "self") is None
    assert get_link_href(content, "self") is None
    assert get_embedded(content, "customer") is None

    table = LinkTable(content)
    assert len(table) == 0
    assert list(table.entries()) == []
    with pytest.raises(MissingLink):
        table.get("self")

    table.set("self", "/orders/1")
    assert content["_links"] == {"self": {"href": "/orders/1"}}


def test_non_object_link_value_is_missing():
    table = LinkTable({"_links": {"self": "/orders/1"}})
    assert get_link({"_links": {"self": "/orders/1"}}, "self") is None
    with pytest.raises(MissingLink):
        table.get("self")
