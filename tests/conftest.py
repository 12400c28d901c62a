"""Shared pytest fixtures: the same result sets in XML and JSON serializations."""

import pytest

from helpers import WD, XSD_INT, json_response, uri, xml_response


@pytest.fixture
def scenario_a_json():
    return json_response(
        ["wikidata_id"],
        [
            {"wikidata_id": uri(WD + "Q14860079")},
            {"wikidata_id": uri(WD + "Q24420953")},
        ],
    )


@pytest.fixture
def scenario_a_xml():
    return xml_response(
        ["wikidata_id"],
        [
            {"wikidata_id": f"<uri>{WD}Q14860079</uri>"},
            {"wikidata_id": f"<uri>{WD}Q24420953</uri>"},
        ],
    )


@pytest.fixture
def scenario_b_json():
    return json_response(
        ["species", "wikidata_id"],
        [
            {"species": uri(WD + "Q83310"), "wikidata_id": uri(WD + "Q14860079")},
            {"species": uri(WD + "Q184224"), "wikidata_id": uri(WD + "Q24420953")},
        ],
    )


@pytest.fixture
def scenario_b_xml():
    return xml_response(
        ["species", "wikidata_id"],
        [
            {"species": f"<uri>{WD}Q83310</uri>", "wikidata_id": f"<uri>{WD}Q14860079</uri>"},
            {"species": f"<uri>{WD}Q184224</uri>", "wikidata_id": f"<uri>{WD}Q24420953</uri>"},
        ],
    )


@pytest.fixture
def mixed_json():
    """All four value kinds plus an unbound OPTIONAL variable in row 1."""
    return json_response(
        ["item", "label", "count", "node"],
        [
            {
                "item": uri(WD + "Q83310"),
                "label": {"type": "literal", "value": "house mouse", "xml:lang": "en"},
                "count": {"type": "literal", "value": "42", "datatype": XSD_INT},
                "node": {"type": "bnode", "value": "b0"},
            },
            {
                "item": uri(WD + "Q184224"),
                "count": {"type": "typed-literal", "value": "7", "datatype": XSD_INT},
            },
        ],
    )


@pytest.fixture
def mixed_xml():
    return xml_response(
        ["item", "label", "count", "node"],
        [
            {
                "item": f"<uri>{WD}Q83310</uri>",
                "label": '<literal xml:lang="en">house mouse</literal>',
                "count": f'<literal datatype="{XSD_INT}">42</literal>',
                "node": "<bnode>b0</bnode>",
            },
            {
                "item": f"<uri>{WD}Q184224</uri>",
                "count": f'<literal datatype="{XSD_INT}">7</literal>',
            },
        ],
    )
