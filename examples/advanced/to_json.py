"""Hand a parsed manifest to downstream tools as JSON."""

from modfile import from_json, parse, to_json

doc = parse('module "m"\nrequire (\n    "a" v1.0.0\n    "b" v2.0.0\n)\n')
payload = to_json(doc, indent=2)
print(payload)
assert from_json(payload) == doc
