"""Typed document model for parsed manifests.

All nodes are frozen dataclasses with slots:
- Immutability: a Document is never mutated after ``parse`` returns it
- Structural equality: parsing the same text twice gives equal Documents
- Pattern matching: ``match`` statements work naturally

Node Hierarchy:
Document
├── requires: Package*
├── excludes: Package*
└── replaces: PackageMapping*
    ├── from_: Package
    └── to: Package

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Package:
    """An import path paired with a version literal.

    Both fields are opaque strings; the version is kept exactly as written.

    """

    path: str
    version: str

    def __str__(self) -> str:
        return f"{self.path}@{self.version}"


@dataclass(frozen=True, slots=True)
class PackageMapping:
    """A replace directive: use ``to`` wherever ``from_`` is referenced."""

    from_: Package
    to: Package


@dataclass(frozen=True, slots=True)
class Document:
    """Parse result for one manifest.

    Sequences preserve declaration order, duplicates included.

    Attributes:
        name: Module identifier from the ``module`` line
        requires: Packages from ``require`` declarations
        excludes: Packages from ``exclude`` declarations
        replaces: Mappings from ``replace`` declarations

    """

    name: str
    requires: tuple[Package, ...] = ()
    excludes: tuple[Package, ...] = ()
    replaces: tuple[PackageMapping, ...] = ()

    def is_required(self, path: str) -> bool:
        """Check whether any require declaration names this path."""
        return any(pkg.path == path for pkg in self.requires)

    def is_excluded(self, package: Package) -> bool:
        """Check whether this exact path and version is excluded."""
        return package in self.excludes

    def replacement_for(self, package: Package) -> Package | None:
        """Find the replacement declared for a package.

        When several mappings match, the last one declared wins.

        Returns:
            The mapping target, or None if the package is not replaced.
        """
        for mapping in reversed(self.replaces):
            if mapping.from_ == package:
                return mapping.to
        return None
