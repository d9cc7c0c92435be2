"""Map Pinecone matches to orchestration search results."""
from typing import Any


def field(obj: Any, name: str, default: Any = None) -> Any:
    """Read ``name`` from an SDK object or a plain mapping."""
    if obj is None:
        return default
    if isinstance(obj, dict):
        return obj.get(name, default)
    return getattr(obj, name, default)


def map_match(match: Any) -> dict[str, Any]:
    """Convert one match into a search result.

    Fallbacks are tried in order and any falsy value moves on to the next:
    title, document_title, id for the title; text, chunk_text, "" for the
    body; url, document_url for the url, which is left out when neither is
    set.
    """
    md = field(match, "metadata") or {}
    title = md.get("title") or md.get("document_title") or field(match, "id")
    body = md.get("text") or md.get("chunk_text") or ""
    url = md.get("url") or md.get("document_url")

    result = {
        "result_metadata": {"score": field(match, "score")},
        "title": title,
        "body": body,
    }
    if url:
        result["url"] = url
    return result


def map_matches(matches: list | None) -> list[dict[str, Any]]:
    """Map matches in the order the index ranked them."""
    return [map_match(m) for m in matches or []]
