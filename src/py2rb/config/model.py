# topmark:header:start
#
#   project      : Py2Rb
#   file         : model.py
#   file_relpath : src/py2rb/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Py2Rb configuration model: immutable runtime `Config` and its `MutableConfig` builder.

Layering (lowest to highest precedence):
    1. Runtime defaults (``load_defaults_dict``).
    2. Discovered project config in the working directory: ``pyproject.toml``
       (``[tool.py2rb]``) then ``py2rb.toml``.
    3. Extra config files given with ``--config`` (in order).
    4. CLI overrides (e.g. ``--indent-width``).

Merge semantics:
    - Scalars and lists: a value set in a higher layer replaces the lower one.
    - Substitution tables: merged key by key. Existing keys keep their position
      (so the default order of ``[reserved_words]`` is preserved); new keys are appended.

Testing guidance:
    - Unit-test merge behavior with synthetic dicts via ``from_toml_dict`` (no I/O).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar, cast

from py2rb.config.io import (
    get_int_value_or_none_checked,
    get_string_list_value_or_none_checked,
    get_string_mapping_checked,
    get_string_value_or_none_checked,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
    warn_unknown_keys,
)
from py2rb.config.keys import Toml
from py2rb.config.logging import get_logger
from py2rb.config.tables import SubstitutionTables, TableKind
from py2rb.constants import PY2RB_TOML_NAME, PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION
from py2rb.core.diagnostics import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from pathlib import Path

    from py2rb.config.io import TomlTable
    from py2rb.config.logging import Py2RbLogger

logger: Py2RbLogger = get_logger(__name__)

_T = TypeVar("_T")


def _layout_default(value: _T | None, key: str) -> _T:
    """Return ``value``, or the built-in ``[layout]`` default for ``key`` when unset."""
    if value is not None:
        return value
    return cast("_T", get_table_value(load_defaults_dict(), Toml.SECTION_LAYOUT)[key])


def _override(lower: _T | None, higher: _T | None) -> _T | None:
    return lower if higher is None else higher


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Py2Rb.

    This snapshot is produced by `MutableConfig.freeze` after merging defaults,
    project files, extra config files, and CLI overrides. Use `Config.thaw` to
    obtain a mutable builder for edits.

    Attributes:
        indent_width (int): Indentation unit assumed in the input; one terminator is
            emitted per unit of dedent.
        terminator (str): Synthetic block-closing line text (``end``).
        comment_prefix (str): Single-line comment marker used for block strings (``#``).
        continuation_marker (str): Explicit trailing line-join marker (``\\``).
        block_opener (str): Trailing block-opening marker stripped from statements (``:``).
        block_string_delimiters (tuple[str, ...]): Triple delimiters that open block strings.
        continuation_keywords (tuple[str, ...]): Source keywords that continue the enclosing
            block (``else``, ``except``...); one fewer terminator is emitted before them.
        tables (SubstitutionTables): The four substitution tables.
        config_files (tuple[str, ...]): Config sources merged into this snapshot.
        diagnostics (tuple[Diagnostic, ...]): Warnings encountered while loading config.
    """

    indent_width: int
    terminator: str
    comment_prefix: str
    continuation_marker: str
    block_opener: str
    block_string_delimiters: tuple[str, ...]
    continuation_keywords: tuple[str, ...]
    tables: SubstitutionTables
    config_files: tuple[str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            indent_width=self.indent_width,
            terminator=self.terminator,
            comment_prefix=self.comment_prefix,
            continuation_marker=self.continuation_marker,
            block_opener=self.block_opener,
            block_string_delimiters=list(self.block_string_delimiters),
            continuation_keywords=list(self.continuation_keywords),
            reserved_words=dict(self.tables.reserved_words),
            functions_to_methods=dict(self.tables.functions_to_methods),
            functions_to_functions=dict(self.tables.functions_to_functions),
            special_methods=dict(self.tables.special_methods),
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog(items=list(self.diagnostics)),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the effective configuration as a TOML-ready dict."""
        layout: TomlTable = {
            Toml.KEY_INDENT_WIDTH: self.indent_width,
            Toml.KEY_TERMINATOR: self.terminator,
            Toml.KEY_COMMENT_PREFIX: self.comment_prefix,
            Toml.KEY_CONTINUATION_MARKER: self.continuation_marker,
            Toml.KEY_BLOCK_OPENER: self.block_opener,
            Toml.KEY_BLOCK_STRING_DELIMITERS: list(self.block_string_delimiters),
            Toml.KEY_CONTINUATION_KEYWORDS: list(self.continuation_keywords),
        }
        return {Toml.SECTION_LAYOUT: layout, **self.tables.to_toml_dict()}

    def to_toml(self) -> str:
        """Render the effective configuration as a TOML document."""
        return to_toml(self.to_toml_dict())


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Fields left as ``None`` inherit from the layer below when merged; `freeze`
    fills any remaining gaps from the runtime defaults.
    """

    indent_width: int | None = None
    terminator: str | None = None
    comment_prefix: str | None = None
    continuation_marker: str | None = None
    block_opener: str | None = None
    block_string_delimiters: list[str] | None = None
    continuation_keywords: list[str] | None = None

    reserved_words: dict[str, str] = field(default_factory=lambda: {})
    functions_to_methods: dict[str, str] = field(default_factory=lambda: {})
    functions_to_functions: dict[str, str] = field(default_factory=lambda: {})
    special_methods: dict[str, str] = field(default_factory=lambda: {})

    # Provenance
    config_files: list[str] = field(default_factory=lambda: [])

    # Collected diagnostics while loading / merging / sanitizing config.
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------

    def sanitize(self) -> None:
        """Drop values that cannot work at runtime, recording a warning for each."""
        if self.indent_width is not None and self.indent_width < 1:
            logger.warning("Ignoring non-positive [layout].indent_width: %d", self.indent_width)
            self.diagnostics.add_warning(
                f"Ignoring non-positive [layout].indent_width: {self.indent_width}"
            )
            self.indent_width = None

        if self.continuation_marker == "":
            logger.warning("Ignoring empty [layout].continuation_marker")
            self.diagnostics.add_warning("Ignoring empty [layout].continuation_marker")
            self.continuation_marker = None

        if self.block_string_delimiters is not None:
            kept: list[str] = [d for d in self.block_string_delimiters if d]
            if len(kept) != len(self.block_string_delimiters):
                logger.warning("Ignoring empty [layout].block_string_delimiters entry")
                self.diagnostics.add_warning(
                    "Ignoring empty [layout].block_string_delimiters entry"
                )
            self.block_string_delimiters = kept

        for word in list(self.reserved_words):
            try:
                re.compile(word)
            except re.error as exc:
                logger.warning("Ignoring invalid [reserved_words] key %r: %s", word, exc)
                self.diagnostics.add_warning(
                    f"Ignoring invalid [reserved_words] key {word!r}: {exc}"
                )
                del self.reserved_words[word]

    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config.

        Unset ``[layout]`` values fall back to the runtime defaults. Substitution
        tables are taken as they are: a builder that did not start from
        `from_defaults` freezes with only the entries it was given.

        Returns:
            Config: The immutable snapshot.
        """
        self.sanitize()

        return Config(
            indent_width=_layout_default(self.indent_width, Toml.KEY_INDENT_WIDTH),
            terminator=_layout_default(self.terminator, Toml.KEY_TERMINATOR),
            comment_prefix=_layout_default(self.comment_prefix, Toml.KEY_COMMENT_PREFIX),
            continuation_marker=_layout_default(
                self.continuation_marker, Toml.KEY_CONTINUATION_MARKER
            ),
            block_opener=_layout_default(self.block_opener, Toml.KEY_BLOCK_OPENER),
            block_string_delimiters=tuple(
                _layout_default(self.block_string_delimiters, Toml.KEY_BLOCK_STRING_DELIMITERS)
            ),
            continuation_keywords=tuple(
                _layout_default(self.continuation_keywords, Toml.KEY_CONTINUATION_KEYWORDS)
            ),
            tables=SubstitutionTables.from_mappings(
                reserved_words=self.reserved_words,
                functions_to_methods=self.functions_to_methods,
                functions_to_functions=self.functions_to_functions,
                special_methods=self.special_methods,
            ),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder with ``other`` layered on top of ``self``.

        Args:
            other (MutableConfig): The higher-precedence layer.

        Returns:
            MutableConfig: The merged builder; ``self`` and ``other`` are left untouched.
        """

        merged = MutableConfig(
            indent_width=_override(self.indent_width, other.indent_width),
            terminator=_override(self.terminator, other.terminator),
            comment_prefix=_override(self.comment_prefix, other.comment_prefix),
            continuation_marker=_override(self.continuation_marker, other.continuation_marker),
            block_opener=_override(self.block_opener, other.block_opener),
            block_string_delimiters=_override(
                self.block_string_delimiters, other.block_string_delimiters
            ),
            continuation_keywords=_override(
                self.continuation_keywords, other.continuation_keywords
            ),
            reserved_words={**self.reserved_words, **other.reserved_words},
            functions_to_methods={**self.functions_to_methods, **other.functions_to_methods},
            functions_to_functions={
                **self.functions_to_functions,
                **other.functions_to_functions,
            },
            special_methods={**self.special_methods, **other.special_methods},
            config_files=[*self.config_files, *other.config_files],
        )
        merged.diagnostics.extend(self.diagnostics)
        merged.diagnostics.extend(other.diagnostics)
        return merged

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: str | None = None) -> MutableConfig:
        """Parse a TOML document (as a plain dict) into a builder.

        Unknown keys and values of the wrong type are reported as diagnostics and
        otherwise ignored.

        Args:
            data (TomlTable): The parsed TOML document.
            source (str | None): Where the document came from, recorded in ``config_files``.

        Returns:
            MutableConfig: The parsed builder (unset keys stay ``None``).
        """
        draft = cls()
        diags: DiagnosticLog = draft.diagnostics

        warn_unknown_keys(
            data, Toml.ALLOWED_TOP_LEVEL_KEYS, where="top level", diagnostics=diags, logger=logger
        )

        layout: TomlTable = get_table_value(data, Toml.SECTION_LAYOUT)
        where: str = f"[{Toml.SECTION_LAYOUT}]"
        warn_unknown_keys(
            layout, Toml.ALLOWED_LAYOUT_KEYS, where=where, diagnostics=diags, logger=logger
        )
        draft.indent_width = get_int_value_or_none_checked(
            layout, Toml.KEY_INDENT_WIDTH, where=where, diagnostics=diags, logger=logger
        )
        draft.terminator = get_string_value_or_none_checked(
            layout, Toml.KEY_TERMINATOR, where=where, diagnostics=diags, logger=logger
        )
        draft.comment_prefix = get_string_value_or_none_checked(
            layout, Toml.KEY_COMMENT_PREFIX, where=where, diagnostics=diags, logger=logger
        )
        draft.continuation_marker = get_string_value_or_none_checked(
            layout, Toml.KEY_CONTINUATION_MARKER, where=where, diagnostics=diags, logger=logger
        )
        draft.block_opener = get_string_value_or_none_checked(
            layout, Toml.KEY_BLOCK_OPENER, where=where, diagnostics=diags, logger=logger
        )
        draft.block_string_delimiters = get_string_list_value_or_none_checked(
            layout, Toml.KEY_BLOCK_STRING_DELIMITERS, where=where, diagnostics=diags, logger=logger
        )
        draft.continuation_keywords = get_string_list_value_or_none_checked(
            layout, Toml.KEY_CONTINUATION_KEYWORDS, where=where, diagnostics=diags, logger=logger
        )

        draft.reserved_words = get_string_mapping_checked(
            data, TableKind.RESERVED_WORDS.value, diagnostics=diags, logger=logger
        )
        draft.functions_to_methods = get_string_mapping_checked(
            data, TableKind.FUNCTIONS_TO_METHODS.value, diagnostics=diags, logger=logger
        )
        draft.functions_to_functions = get_string_mapping_checked(
            data, TableKind.FUNCTIONS_TO_FUNCTIONS.value, diagnostics=diags, logger=logger
        )
        draft.special_methods = get_string_mapping_checked(
            data, TableKind.SPECIAL_METHODS.value, diagnostics=diags, logger=logger
        )

        if source is not None:
            draft.config_files.append(source)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``py2rb.toml`` and ``pyproject.toml`` files, extracting the
        ``[tool.py2rb]`` section from the latter.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The parsed builder; None when a ``pyproject.toml``
                has no ``[tool.py2rb]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable = get_table_value(
                get_table_value(toml_data, "tool"), PYPROJECT_TOOL_SECTION
            )
            if not tool_section:
                logger.debug("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            toml_data = tool_section

        return cls.from_toml_dict(toml_data, source=str(path))

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found in ``start``, lowest precedence first.

        When both are present, ``pyproject.toml`` comes first and ``py2rb.toml``
        second, so the dedicated file wins on conflicts.
        """
        found: list[Path] = []
        for name in (PYPROJECT_TOML_NAME, PY2RB_TOML_NAME):
            candidate: Path = start / name
            if candidate.is_file():
                found.append(candidate)
        logger.debug("Discovered config files in %s: %s", start, found)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: list[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Build a builder from defaults, discovered files and extra files.

        Args:
            start (Path | None): Directory where project config is discovered.
            extra_config_files (list[Path] | None): Extra files merged last, in order.
            no_config (bool): Skip discovery (extra files are still merged).

        Returns:
            MutableConfig: The merged builder; call `freeze` to obtain a `Config`.
        """
        draft: MutableConfig = cls.from_defaults()
        paths: list[Path] = []
        if not no_config and start is not None:
            paths.extend(cls.discover_local_config_files(start))
        paths.extend(extra_config_files or [])

        for path in paths:
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is not None:
                draft = draft.merge_with(layer)
        return draft
