"""PlaygroundService — browse closed sets, describe variants, run pages.

The only runtime failure in the domain is a raw-value lookup that matches
nothing; here it becomes a ``NOT_FOUND`` result rather than an exception.
Unknown set, variant and page names are reported the same way.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import Any

import structlog

from enumplay.domain.catalog import CATALOG, CatalogEntry, UnknownSetError, get_entry
from enumplay.domain.closed_set import ClosedSet, IntRawSet, RawValueSet, UnknownVariantError
from enumplay.pages import PAGES
from enumplay.services.result import ServiceResult, fail

log = structlog.get_logger(__name__)

_INT_TEXT = re.compile(r"-?[0-9]+")


def _variant_item(variant: ClosedSet) -> dict[str, Any]:
    item: dict[str, Any] = {"id": variant.name.lower(), "label": variant.label}
    if isinstance(variant, RawValueSet):
        item["raw_value"] = variant.raw_value
    return item


def _coerce_raw(set_cls: type[RawValueSet], raw: str) -> object:
    """Convert CLI text into the set's raw type; anything else stays a str.

    Only plain ASCII integers (``-?[0-9]+``) convert. ``int()`` alone would
    also take whitespace, ``1_0`` and non-ASCII digits.
    """
    if issubclass(set_cls, IntRawSet) and _INT_TEXT.fullmatch(raw):
        return int(raw)
    return raw


class PlaygroundService:
    """Operations over the closed-set catalog and the playground pages."""

    def __init__(
        self,
        catalog: Mapping[str, CatalogEntry] | None = None,
        pages: Mapping[str, Callable[[], Iterator[str]]] | None = None,
    ) -> None:
        self._catalog = CATALOG if catalog is None else catalog
        self._pages = PAGES if pages is None else pages

    def _entry(self, key: str) -> CatalogEntry:
        return get_entry(key, self._catalog)

    # ── Catalog ──────────────────────────────────────────────────────

    def list_sets(self) -> ServiceResult:
        items = [
            {
                "id": entry.key,
                "type": entry.set_cls.__name__,
                "summary": entry.summary,
                "variants": len(entry.set_cls),
                "raw_values": entry.has_raw_values,
            }
            for entry in self._catalog.values()
        ]
        return ServiceResult(ok=True, op="list_sets", data={"items": items, "count": len(items)})

    def list_variants(self, set_key: str) -> ServiceResult:
        op = "list_variants"
        try:
            entry = self._entry(set_key)
        except UnknownSetError as exc:
            return fail(op, "UNKNOWN_SET", str(exc), set=set_key)

        items = [_variant_item(variant) for variant in entry.set_cls.variants()]
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "set": entry.key,
                "type": entry.set_cls.__name__,
                "items": items,
                "count": len(items),
            },
        )

    def describe(self, set_key: str, variant_name: str) -> ServiceResult:
        """Run every describer registered for *set_key* on one variant."""
        op = "describe"
        try:
            entry = self._entry(set_key)
            variant = entry.set_cls.from_name(variant_name)
        except UnknownSetError as exc:
            return fail(op, "UNKNOWN_SET", str(exc), set=set_key)
        except UnknownVariantError as exc:
            return fail(
                op,
                "UNKNOWN_VARIANT",
                str(exc),
                set=set_key,
                variant=variant_name,
                choices=[v.name.lower() for v in exc.set_cls],
            )

        data = _variant_item(variant)
        data["set"] = entry.key
        data["descriptions"] = entry.describe(variant)
        log.debug("describe", set=entry.key, variant=variant.name)
        return ServiceResult(ok=True, op=op, data=data)

    def lookup(self, set_key: str, raw: str) -> ServiceResult:
        """Find the variant whose raw value equals *raw*."""
        op = "lookup"
        try:
            entry = self._entry(set_key)
        except UnknownSetError as exc:
            return fail(op, "UNKNOWN_SET", str(exc), set=set_key)

        set_cls = entry.set_cls
        if not issubclass(set_cls, RawValueSet):
            return fail(
                op,
                "NO_RAW_VALUES",
                f"{set_cls.__name__} variants carry no raw values",
                set=entry.key,
            )

        variant = set_cls.from_raw(_coerce_raw(set_cls, raw))
        log.debug("raw_lookup", set=entry.key, raw=raw, found=variant is not None)
        if variant is None:
            return fail(
                op,
                "NOT_FOUND",
                f"No {set_cls.__name__} variant has raw value {raw!r}",
                set=entry.key,
                raw=raw,
            )

        data = _variant_item(variant)
        data["set"] = entry.key
        return ServiceResult(ok=True, op=op, data=data)

    # ── Pages ────────────────────────────────────────────────────────

    def run_pages(self, pages: Sequence[str]) -> ServiceResult:
        """Execute *pages* in order, collecting every output line."""
        op = "demo"
        unknown = [name for name in pages if name not in self._pages]
        if unknown:
            return fail(
                op,
                "UNKNOWN_PAGE",
                f"Unknown page(s): {', '.join(unknown)}",
                pages=unknown,
                choices=sorted(self._pages),
            )

        lines: list[str] = []
        for name in pages:
            page_lines = list(self._pages[name]())
            log.debug("page_run", page=name, lines=len(page_lines))
            lines.extend(page_lines)
        return ServiceResult(ok=True, op=op, data={"pages": list(pages), "lines": lines})
