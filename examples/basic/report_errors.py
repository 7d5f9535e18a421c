"""Malformed manifests raise a located ParseError."""

from modfile import ParseError, parse

try:
    parse('module "m"\nrequire "p"\n', source_file="widget.mod")
except ParseError as e:
    print(e)  # widget.mod:2:12 expect package version, got newline
