# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : builder.py
#   file_relpath : src/sitesetdoc/tree/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build a settings reference from its source documents.

Entry points, from innermost to outermost:

- `build_forest`: the pure tree construction over already parsed data.
- `build_settings_reference`: loads the sources through a `TextLoader`, then
  calls `build_forest`. Raises on fatal source errors.
- `process_directive`: like `build_settings_reference`, but turns fatal source
  errors into an `ErrorPlaceholder` for the renderer.

Error policy:
    - The settings document is required. When it cannot be read
      (`SourceMissingError`) or holds no ``settings`` mapping
      (`SourceMalformedError`), nothing is built.
    - The category document and the translation file are optional. When they are
      missing or malformed the build proceeds with empty mappings.
    - A single malformed setting or category is skipped with a warning.
    - Categories caught in a parent cycle are skipped with a warning, together
      with the settings filed under them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from sitesetdoc.config.keys import Yaml
from sitesetdoc.config.logging import get_logger
from sitesetdoc.config.model import BuildOptions
from sitesetdoc.constants import ERROR_PLACEHOLDER_TEXT
from sitesetdoc.core.anchors import reduce_anchor
from sitesetdoc.core.errors import (
    CategoryCycleError,
    MalformedEntryError,
    SourceError,
    SourceMalformedError,
    SourceMissingError,
    SourceNotFoundError,
    SourceParseError,
)
from sitesetdoc.sources.discovery import locate_labels_file
from sitesetdoc.sources.parsers import parse_structured, parse_xliff
from sitesetdoc.tree.assembler import assemble
from sitesetdoc.tree.categories import (
    build_category_index,
    link_categories,
    unreachable_categories,
)
from sitesetdoc.tree.entries import build_entry
from sitesetdoc.tree.labels import resolve_labels
from sitesetdoc.tree.model import (
    CategoryDefinition,
    ErrorPlaceholder,
    SettingDefinition,
    SettingsReference,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from sitesetdoc.config.logging import SitesetLogger
    from sitesetdoc.core.diagnostics import DiagnosticLog
    from sitesetdoc.sources.loader import TextLoader
    from sitesetdoc.tree.model import CategoryOutputNode, SettingEntry, TranslationEntry

logger: SitesetLogger = get_logger(__name__)

D = TypeVar("D")


def _skip_entry(exc: MalformedEntryError, diagnostics: DiagnosticLog | None) -> None:
    logger.warning("Skipping %s: %s", exc.entry_id, exc)
    if diagnostics is not None:
        diagnostics.add_warning(str(exc))


def _parse_definitions(
    raw: Mapping[Any, object],
    parse: Callable[[str, object], D],
    diagnostics: DiagnosticLog | None,
) -> list[D]:
    definitions: list[D] = []
    for key, value in raw.items():
        try:
            definitions.append(parse(str(key), value))
        except MalformedEntryError as exc:
            _skip_entry(exc, diagnostics)
    return definitions


def build_forest(
    settings: Mapping[Any, object],
    categories: Mapping[Any, object] | None = None,
    translations: Iterable[TranslationEntry] = (),
    *,
    id_prefix: str = "",
    diagnostics: DiagnosticLog | None = None,
) -> list[CategoryOutputNode]:
    """Build the category forest from parsed source data.

    Args:
        settings (Mapping[Any, object]): The ``settings`` mapping (id -> definition).
        categories (Mapping[Any, object] | None): The ``categories`` mapping (id -> declaration).
        translations (Iterable[TranslationEntry]): Translation entries in source order.
        id_prefix (str): Prefix for all anchors.
        diagnostics (DiagnosticLog | None): Receives a warning per skipped entry.

    Returns:
        list[CategoryOutputNode]: Declared root categories in declaration order,
        followed by orphan categories in order of first reference.
    """
    labels = resolve_labels(translations)

    declarations = _parse_definitions(
        categories or {}, CategoryDefinition.from_mapping, diagnostics
    )
    index = build_category_index(declarations, labels.category_labels)
    roots = link_categories(index)
    logger.debug("Indexed %d categories (%d roots)", len(index), len(roots))
    detached: set[str] = set()
    for node in unreachable_categories(index, roots):
        detached.add(node.id)
        _skip_entry(
            CategoryCycleError(
                f"Category {node.id!r} is not below any root category (cyclic parent chain)",
                entry_id=node.id,
            ),
            diagnostics,
        )

    built: list[tuple[SettingEntry, str]] = []
    for definition in _parse_definitions(settings, SettingDefinition.from_mapping, diagnostics):
        if definition.category_id in detached:
            _skip_entry(
                CategoryCycleError(
                    f"Setting {definition.id!r} belongs to category {definition.category_id!r},"
                    " which has a cyclic parent chain",
                    entry_id=definition.id,
                ),
                diagnostics,
            )
            continue
        try:
            entry = build_entry(definition, labels, index, id_prefix=id_prefix)
        except MalformedEntryError as exc:
            _skip_entry(exc, diagnostics)
            continue
        built.append((entry, definition.category_id))

    forest = assemble(built, index, roots, id_prefix=id_prefix)
    logger.info("Built %d settings in %d root categories", len(built), len(forest))
    return forest


def load_settings_document(
    source: str, loader: TextLoader
) -> tuple[Mapping[Any, object], Mapping[Any, object]]:
    """Load the settings definition document.

    Args:
        source (str): Logical path of ``settings.definitions.yaml``.
        loader (TextLoader): Document loader.

    Returns:
        tuple[Mapping[Any, object], Mapping[Any, object]]: The ``settings`` mapping and
        the document's own ``categories`` mapping (empty when absent).

    Raises:
        SourceMissingError: If the document cannot be read.
        SourceMalformedError: If it does not parse or has no ``settings`` mapping.
    """
    try:
        text = loader.load_text(source)
    except SourceNotFoundError as exc:
        raise SourceMissingError(str(exc), path=source) from exc
    try:
        data = parse_structured(text, path=source)
    except SourceParseError as exc:
        raise SourceMalformedError(str(exc), path=source) from exc

    settings = data.get(Yaml.SECTION_SETTINGS) if isinstance(data, Mapping) else None
    if not isinstance(settings, Mapping):
        raise SourceMalformedError(
            f"The source at path {source} did not contain any settings", path=source
        )
    categories = data.get(Yaml.SECTION_CATEGORIES)
    return settings, categories if isinstance(categories, Mapping) else {}


def load_category_document(path: str, loader: TextLoader) -> Mapping[Any, object]:
    """Load the ``categories`` mapping of an optional category document.

    Returns an empty mapping when the document is missing, malformed, or has
    no ``categories`` mapping.
    """
    try:
        data = parse_structured(loader.load_text(path), path=path)
    except SourceError as exc:
        logger.debug("Ignoring optional category source %s: %s", path, exc)
        return {}
    categories = data.get(Yaml.SECTION_CATEGORIES) if isinstance(data, Mapping) else None
    if not isinstance(categories, Mapping):
        logger.debug("Optional category source %s has no categories mapping", path)
        return {}
    return categories


def load_translations(path: str, loader: TextLoader) -> list[TranslationEntry]:
    """Load the entries of an optional XLIFF file; empty when unavailable."""
    try:
        return parse_xliff(loader.load_text(path), path=path)
    except SourceError as exc:
        logger.debug("Ignoring optional translation source %s: %s", path, exc)
        return []


def build_settings_reference(
    source: str,
    *,
    loader: TextLoader,
    options: BuildOptions | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> SettingsReference:
    """Load the sources of a site set and build its settings reference.

    Categories declared in the settings document come first; a separate
    category document (``options.categories_file``) adds to them and overrides
    declarations with the same id.

    Args:
        source (str): Logical path of ``settings.definitions.yaml``.
        loader (TextLoader): Document loader.
        options (BuildOptions | None): Build options; defaults apply when ``None``.
        diagnostics (DiagnosticLog | None): Receives a warning per skipped entry.

    Returns:
        SettingsReference: The built reference.

    Raises:
        SourceMissingError: If the settings document cannot be read.
        SourceMalformedError: If it has no usable ``settings`` mapping.
    """
    options = options or BuildOptions()
    settings, inline_categories = load_settings_document(source, loader)

    categories: dict[Any, object] = dict(inline_categories)
    if options.categories_file:
        categories.update(load_category_document(options.categories_file, loader))

    labels_path = locate_labels_file(source, loader, explicit=options.labels_file)
    translations = load_translations(labels_path, loader)
    logger.debug("Using %d translation entries from %s", len(translations), labels_path)

    forest = build_forest(
        settings,
        categories,
        translations,
        id_prefix=options.id_prefix,
        diagnostics=diagnostics,
    )
    return SettingsReference(
        anchor=reduce_anchor(options.name),
        source=source,
        categories=forest,
        caption=options.caption,
        display=options.display,
        noindex=options.noindex,
        fields={k: dict(v) for k, v in options.fields.items()},
    )


def process_directive(
    source: str,
    *,
    loader: TextLoader,
    options: BuildOptions | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> SettingsReference | ErrorPlaceholder:
    """Build a settings reference, degrading fatal source errors to a placeholder.

    The failure is logged as a warning; no partial tree is returned.

    Args:
        source (str): Logical path of ``settings.definitions.yaml``.
        loader (TextLoader): Document loader.
        options (BuildOptions | None): Build options.
        diagnostics (DiagnosticLog | None): Receives skipped entries and the fatal error.

    Returns:
        SettingsReference | ErrorPlaceholder: The reference, or the placeholder.
    """
    try:
        return build_settings_reference(
            source, loader=loader, options=options, diagnostics=diagnostics
        )
    except (SourceMissingError, SourceMalformedError) as exc:
        logger.warning("%s", exc)
        if diagnostics is not None:
            diagnostics.add_error(str(exc))
        return ErrorPlaceholder(message=ERROR_PLACEHOLDER_TEXT, reason=str(exc))
