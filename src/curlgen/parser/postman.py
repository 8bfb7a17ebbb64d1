"""Postman Collection v2.x importer.

Flattens the collection's folder tree into RequestRecords, one per leaf
request, in document order.
"""

import json

from pydantic import BaseModel

from .base import BasicAuth, RequestRecord


class Leaf(BaseModel):
    """A collection item carrying one request."""

    request: dict | str


class Folder(BaseModel):
    """A collection item grouping child items."""

    children: list["Folder | Leaf"] = []


Folder.model_rebuild()


def parse_postman(text: str) -> list[RequestRecord]:
    """Parse a Postman collection JSON string into a list of RequestRecord.

    Raises json.JSONDecodeError for malformed JSON. A collection without
    an ``item`` list yields an empty list.
    """
    collection = json.loads(text)
    if not isinstance(collection, dict):
        return []

    root = Folder(children=_build_nodes(collection.get("item")))
    return [_parse_request(leaf.request) for leaf in _flatten(root)]


def _build_nodes(items) -> list[Folder | Leaf]:
    """Turn raw item dicts into Folder/Leaf nodes, dropping anything else."""
    if not isinstance(items, list):
        return []

    nodes: list[Folder | Leaf] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        if isinstance(item.get("item"), list):
            nodes.append(Folder(children=_build_nodes(item["item"])))
        elif isinstance(item.get("request"), (dict, str)):
            nodes.append(Leaf(request=item["request"]))
    return nodes


def _flatten(folder: Folder) -> list[Leaf]:
    """Pre-order walk collecting leaves."""
    leaves: list[Leaf] = []
    for node in folder.children:
        if isinstance(node, Folder):
            leaves.extend(_flatten(node))
        else:
            leaves.append(node)
    return leaves


def _parse_request(req: dict | str) -> RequestRecord:
    if isinstance(req, str):
        return RequestRecord(url=req)

    return RequestRecord(
        method=req.get("method") or "GET",
        url=_parse_url(req.get("url")),
        headers=_parse_headers(req.get("header")),
        body=_parse_body(req.get("body")),
        auth=_parse_auth(req.get("auth")),
    )


def _parse_url(url) -> str:
    if isinstance(url, str):
        return url
    if not isinstance(url, dict):
        return ""
    if url.get("raw"):
        return url["raw"]

    protocol = url.get("protocol") or "https"
    host = _join(url.get("host"), ".") or "localhost"
    if url.get("port"):
        host = f"{host}:{url['port']}"
    path = _join(url.get("path"), "/")

    result = f"{protocol}://{host}/{path}"
    query = [
        f"{q.get('key', '')}={q.get('value') or ''}"
        for q in url.get("query") or []
        if isinstance(q, dict) and not q.get("disabled")
    ]
    if query:
        result += "?" + "&".join(query)
    return result


def _join(value, sep: str) -> str:
    if isinstance(value, list):
        return sep.join(str(part) for part in value)
    return value or ""


def _parse_headers(headers) -> dict[str, str]:
    if not isinstance(headers, list):
        return {}
    return {
        str(h["key"]): str(h.get("value") or "")
        for h in headers
        if isinstance(h, dict) and "key" in h
    }


def _parse_body(body) -> str | None:
    if not isinstance(body, dict):
        return None
    mode = body.get("mode")
    if mode == "raw":
        return body.get("raw") or None
    if mode == "urlencoded" and isinstance(body.get("urlencoded"), list):
        pairs = [f"{p.get('key', '')}={p.get('value') or ''}" for p in body["urlencoded"] if isinstance(p, dict)]
        return "&".join(pairs) or None
    return None


def _parse_auth(auth) -> BasicAuth | None:
    if not isinstance(auth, dict) or auth.get("type") != "basic":
        return None

    basic = auth.get("basic")
    if isinstance(basic, dict):
        entries = basic
    elif isinstance(basic, list):
        entries = {e.get("key"): e.get("value") for e in basic if isinstance(e, dict)}
    else:
        return None

    if entries.get("username") is None:
        return None
    return BasicAuth(user=str(entries["username"]), password=str(entries.get("password") or ""))
