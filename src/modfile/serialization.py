"""Document serialization: JSON-compatible dicts for downstream tools.

Converts a parsed Document to and from the plain shape consumed by
resolvers and fetchers:

    {
      "name": "...",
      "requires": [{"path": "...", "version": "..."}, ...],
      "excludes": [{"path": "...", "version": "..."}, ...],
      "replaces": [{"from": {...}, "to": {...}}, ...]
    }

JSON output is deterministic (sorted keys) for cache-key stability.
Rendering a Document back to manifest text is not provided here.

Example:
    from modfile import parse
    from modfile.serialization import to_json, from_json

    doc = parse('module "m"\\nrequire "p" v1.0.0\\n')
    restored = from_json(to_json(doc))
    assert doc == restored

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from typing import Any

from modfile.nodes import Document, Package, PackageMapping


def to_dict(doc: Document) -> dict[str, Any]:
    """Convert a Document to a JSON-compatible dict."""
    return {
        "name": doc.name,
        "requires": [_package_to_dict(pkg) for pkg in doc.requires],
        "excludes": [_package_to_dict(pkg) for pkg in doc.excludes],
        "replaces": [
            {"from": _package_to_dict(m.from_), "to": _package_to_dict(m.to)}
            for m in doc.replaces
        ],
    }


def _package_to_dict(pkg: Package) -> dict[str, str]:
    return {"path": pkg.path, "version": pkg.version}


def from_dict(data: dict[str, Any]) -> Document:
    """Reconstruct a Document from a dict produced by to_dict.

    Missing sequence keys are treated as empty; ``name`` is required.

    Raises:
        ValueError: If a required key is missing.

    """
    if "name" not in data:
        msg = "Missing 'name' field in serialized document"
        raise ValueError(msg)

    return Document(
        name=data["name"],
        requires=tuple(_package_from_dict(p) for p in data.get("requires", ())),
        excludes=tuple(_package_from_dict(p) for p in data.get("excludes", ())),
        replaces=tuple(_mapping_from_dict(m) for m in data.get("replaces", ())),
    )


def _package_from_dict(data: dict[str, Any]) -> Package:
    try:
        return Package(path=data["path"], version=data["version"])
    except KeyError as e:
        msg = f"Missing {e.args[0]!r} field in serialized package"
        raise ValueError(msg) from e


def _mapping_from_dict(data: dict[str, Any]) -> PackageMapping:
    for key in ("from", "to"):
        if key not in data:
            msg = f"Missing {key!r} field in serialized mapping"
            raise ValueError(msg)
    return PackageMapping(_package_from_dict(data["from"]), _package_from_dict(data["to"]))


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Args:
        doc: Document to serialize.
        indent: JSON indentation (None for compact output).

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(json_str: str) -> Document:
    """Deserialize a Document from a JSON string."""
    return from_dict(json.loads(json_str))


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
