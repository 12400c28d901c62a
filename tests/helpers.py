"""Payload builders for SPARQL XML and JSON result documents."""

import json

WD = "http://www.wikidata.org/entity/"
XSD_INT = "http://www.w3.org/2001/XMLSchema#integer"


def xml_response(variables, results, links=()):
    """Build a SPARQL XML results document.

    ``results`` is a list of dicts mapping variable name to the inner XML
    of its <binding> element.
    """
    head = "".join(f'<variable name="{v}"/>' for v in variables)
    head += "".join(f'<link href="{h}"/>' for h in links)
    body = ""
    for row in results:
        bindings = "".join(f'<binding name="{k}">{v}</binding>' for k, v in row.items())
        body += f"<result>{bindings}</result>"
    return (
        '<?xml version="1.0"?>'
        '<sparql xmlns="http://www.w3.org/2005/sparql-results#">'
        f"<head>{head}</head><results>{body}</results></sparql>"
    ).encode("utf-8")


def json_response(variables, bindings, links=None):
    head = {"vars": list(variables)}
    if links:
        head["link"] = list(links)
    return json.dumps({"head": head, "results": {"bindings": bindings}}).encode("utf-8")


def uri(value):
    return {"type": "uri", "value": value}
