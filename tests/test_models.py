from hal_resource.models import HALDocument, Link


def test_link_keeps_extra_fields():
    link = Link.model_validate(
        {"href": "/orders/1", "title": "Order", "deprecation": "/docs/deprecated"}
    )
    assert link.href == "/orders/1"
    assert link.templated is False
    assert link.model_dump(exclude_none=True)["deprecation"] == "/docs/deprecated"


def test_hal_document_link_helpers():
    document = HALDocument.model_validate(
        {
            "_links": {
                "self": {"href": "/orders/1"},
                "items": [{"href": "/items/1", "title": "First"}, {"href": "/items/2"}],
                "broken": "nope",
            },
            "_embedded": {"customer": {"name": "ACME"}, "lines": [{"qty": 1}]},
        }
    )
    assert document.link_href("self") == "/orders/1"
    assert document.link_href("items") == "/items/1"
    assert document.link_title("items") == "First"
    assert document.link_href("broken") is None
    assert document.link_href("missing") is None
    assert document.embedded_raw("customer") == {"name": "ACME"}
    assert document.embedded_raw("lines") is None


def test_hal_document_defaults_when_sections_absent():
    document = HALDocument.model_validate({"id": 3})
    assert document.links == {}
    assert document.embedded == {}


def test_link_accepts_loose_descriptive_fields():
    link = Link.model_validate(
        {"href": "/b", "title": 7, "name": ["x"], "type": None, "templated": None}
    )
    assert link.href == "/b"
    assert link.title == 7
    assert not link.templated
