"""Validation, searching and labelling of the remote extension catalog."""

from __future__ import annotations

from typing import Iterable

from omni_palette.models import (
    GITHUB_SOURCE_ID,
    CatalogEntry,
    ExtensionCatalog,
    ExtensionKind,
    GitHubExtensionSource,
    InstalledExtension,
    Os,
    os_label,
)


class CatalogSourceError(ValueError):
    """The catalog source lacks one or more required fields."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(
            f"Catalog source is incomplete. Fill in: {', '.join(self.missing)}."
        )


def validate_catalog_source(source: GitHubExtensionSource) -> None:
    """Raise CatalogSourceError naming every blank required field."""
    fields = (
        (source.owner, "owner"),
        (source.repo, "repo"),
        (source.branch, "branch"),
        (source.catalog_path, "catalog path"),
    )
    missing = [name for value, name in fields if not value.strip()]
    if missing:
        raise CatalogSourceError(missing)


def catalog_entry_matches_query(entry: CatalogEntry, query: str) -> bool:
    """True if the query occurs in the name, id, description or a keyword, ignoring case."""
    query = query.lower()
    haystacks = [entry.name, entry.id, entry.description or "", *entry.keywords]
    return any(query in text.lower() for text in haystacks)


def filter_catalog_entries(
    entries: Iterable[CatalogEntry], query: str
) -> list[CatalogEntry]:
    """Entries matching the query; all of them when the query is blank."""
    query = query.strip().lower()
    if not query:
        return list(entries)
    return [entry for entry in entries if catalog_entry_matches_query(entry, query)]


def platform_entries(catalog: ExtensionCatalog, os: Os) -> list[CatalogEntry]:
    """Entries for the given platform, sorted by name."""
    return sorted(
        (entry for entry in catalog.entries if entry.platform == os),
        key=lambda entry: entry.name,
    )


def visible_catalog_entries(
    catalog: ExtensionCatalog, os: Os, query: str
) -> list[CatalogEntry]:
    """Platform entries that match the search query, sorted by name."""
    return sorted(
        filter_catalog_entries(platform_entries(catalog, os), query.strip()),
        key=lambda entry: entry.name,
    )


def installed_versions_by_id(
    extensions: Iterable[InstalledExtension],
) -> dict[str, str]:
    """Installed version of each extension that came from the remote catalog."""
    return {
        extension.id: extension.version
        for extension in extensions
        if extension.source_id == GITHUB_SOURCE_ID
    }


def extension_busy_key(extension_id: str, source_id: str) -> str:
    """Key identifying an extension while an operation on it is running."""
    return f"{source_id}/{extension_id}"


def catalog_action_label(
    entry: CatalogEntry, installed_version: str | None
) -> str | None:
    """Install button text for an entry, or None when it cannot be installed."""
    if entry.kind is not ExtensionKind.STATIC:
        return None
    if installed_version is None:
        return "Install"
    if installed_version == entry.version:
        return "Reinstall"
    return "Update"


def catalog_refresh_message(catalog: ExtensionCatalog, os: Os) -> str:
    """Status text after a successful catalog refresh."""
    supported_count = sum(1 for entry in catalog.entries if entry.platform == os)
    return f"Catalog refreshed: {supported_count} {os_label(os)} extensions available"