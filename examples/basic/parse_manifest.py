"""Parse a manifest and list its dependencies — zero config, zero deps."""

from modfile import parse

doc = parse(
    'module "example.com/widget"\n'
    'require "example.com/dep" v1.2.3\n'
    'replace "example.com/dep" v1.2.3 => "example.com/fork" v1.2.4-patched\n'
)
for pkg in doc.requires:
    print(pkg, "->", doc.replacement_for(pkg) or pkg)
