"""Registry of named IR type definitions.

The registry is the top-level container holding every named type ready
for rendering. It deduplicates registrations, records the one-level
reference graph between entries and renders all entries in dependency
order.

A registry is an ordinary value owned by its caller. Several registries
can coexist (e.g. one per output file); there is no shared state and no
internal locking, so registration must not run concurrently.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Callable, Hashable, Iterator
from dataclasses import dataclass, field

from yaml_to_ts.errors import IdentityCollisionError, UnresolvedReferenceError
from yaml_to_ts.ir.types import (
    GenericParam,
    IndexedAccess,
    Intersection,
    Record,
    Reference,
    TypeDef,
    references,
    walk,
)
from yaml_to_ts.render import typescript

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamedEntry:
    """A named type declaration in the registry.

    Attributes
    ----------
        name: Rendered type name.
        typedef: Body of the declaration.
        namespace: Namespace path segments wrapping the declaration.
        generics: Generic parameters of the declaration head.
        module: Grouping key used by the multi-file writer.
        wrapper: Utility type wrapping the body (e.g. ``Prettify``).
        origin: Identity of the declared type that produced the entry.
            Not part of structural equality.
        dependencies: Qualified names referenced one level deep by the
            body and the generic parameters. Self-references are kept.

    """

    name: str
    typedef: TypeDef
    namespace: tuple[str, ...] = ()
    generics: tuple[GenericParam, ...] = ()
    module: str | None = None
    wrapper: str | None = None
    origin: Hashable | None = field(default=None, compare=False)
    dependencies: frozenset[str] = field(init=False)

    def __post_init__(self) -> None:
        """Compute the dependency set from the body and generics."""
        refs = references(self.typedef)
        for param in self.generics:
            for bound in (param.constraint, param.default):
                if bound is not None:
                    refs.extend(references(bound))
        object.__setattr__(self, "dependencies", frozenset(r.qualified_name for r in refs))

    @property
    def qualified_name(self) -> str:
        """Registry key: namespace path and name joined by dots."""
        return ".".join((*self.namespace, self.name))


class TypeRegistry:
    """Deduplicating, dependency-ordering store of named types.

    Usage:
        registry = TypeRegistry()
        registry.register("User", build_user)
        text = registry.render()
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._entries: dict[str, NamedEntry] = {}
        self._origins: dict[str, Hashable | None] = {}
        self._order: dict[str, int] = {}
        self._in_progress: dict[str, Hashable | None] = {}
        self._counter = itertools.count()
        self._journal: list[str] | None = None

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self,
        name: str,
        build: Callable[[], NamedEntry],
        *,
        origin: Hashable | None = None,
    ) -> None:
        """Register a named type, building it at most once.

        ``name`` is marked in progress before ``build`` runs, so a
        builder that (directly or through other types) registers ``name``
        again returns immediately instead of recursing.

        Args:
        ----
            name: Qualified name of the type.
            build: Callable producing the entry. It may register other
                types on this registry.
            origin: Identity of the declared type. A second registration
                from the same origin (or without one) is a no-op.

        Raises:
        ------
            IdentityCollisionError: If a different declared type already
                owns ``name`` with a structurally different definition.

        """
        if name in self._in_progress:
            self._check_origin(name, self._in_progress[name], origin)
            return

        existing = self._entries.get(name)
        if existing is not None and (origin is None or origin == self._origins[name]):
            return

        entry = self._build(name, build, origin, existing)

        if existing is not None:
            logger.debug("Deduplicated '%s' registered from %r", name, origin)
            return

        self._insert(entry, origin)

    def add(self, entry: NamedEntry) -> None:
        """Insert a prebuilt entry.

        Adding a structurally equal entry again is a no-op.

        Args:
        ----
            entry: The entry to add.

        Raises:
        ------
            IdentityCollisionError: If a different entry owns the name.

        """
        name = entry.qualified_name
        existing = self._entries.get(name)
        if existing is not None:
            if existing != entry:
                raise IdentityCollisionError(
                    f"'{name}' is already registered with a different definition",
                    type_name=name,
                )
            return
        if name in self._in_progress:
            raise IdentityCollisionError(f"'{name}' is being built", type_name=name)
        self._order.setdefault(name, next(self._counter))
        self._insert(entry, entry.origin)

    def _build(
        self,
        name: str,
        build: Callable[[], NamedEntry],
        origin: Hashable | None,
        existing: NamedEntry | None = None,
    ) -> NamedEntry:
        top_level = not self._in_progress
        if top_level:
            self._journal = []
        if name not in self._order:
            self._order[name] = next(self._counter)
            self._track(name)

        self._in_progress[name] = origin
        try:
            entry = build()
        except Exception:
            del self._in_progress[name]
            if top_level:
                self._rollback()
            raise
        del self._in_progress[name]

        if entry.qualified_name != name:
            if top_level:
                self._rollback()
            raise ValueError(
                f"Builder for '{name}' produced an entry named '{entry.qualified_name}'"
            )
        if existing is not None and entry != existing:
            if top_level:
                self._rollback()
            raise IdentityCollisionError(
                f"'{name}' is already registered with a different definition "
                f"(from {self._origins[name]!r}, now from {origin!r})",
                type_name=name,
            )
        if top_level:
            self._journal = None
        return entry

    def _insert(self, entry: NamedEntry, origin: Hashable | None) -> None:
        name = entry.qualified_name
        self._entries[name] = entry
        self._origins[name] = origin
        self._track(name)
        logger.debug(
            "Registered '%s' (depends on %s)",
            name,
            ", ".join(sorted(entry.dependencies)) or "nothing",
        )

    def _track(self, name: str) -> None:
        if self._journal is not None:
            self._journal.append(name)

    def _rollback(self) -> None:
        journal, self._journal = self._journal or [], None
        for name in journal:
            self._entries.pop(name, None)
            self._origins.pop(name, None)
            self._order.pop(name, None)
        if journal:
            logger.debug("Rolled back %d registration(s)", len(set(journal)))

    @staticmethod
    def _check_origin(name: str, current: Hashable | None, origin: Hashable | None) -> None:
        if current is not None and origin is not None and current != origin:
            raise IdentityCollisionError(
                f"'{name}' is being built from {current!r} and was registered "
                f"again from {origin!r}",
                type_name=name,
            )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, name: str) -> NamedEntry | None:
        """Get an entry by qualified name."""
        return self._entries.get(name)

    def __contains__(self, name: object) -> bool:
        """Check whether a qualified name has an entry."""
        return name in self._entries

    def __len__(self) -> int:
        """Number of registered entries."""
        return len(self._entries)

    def __iter__(self) -> Iterator[NamedEntry]:
        """Iterate entries in first-registration order."""
        return (self._entries[name] for name in self.type_names())

    def type_names(self) -> list[str]:
        """Qualified names in first-registration order."""
        return sorted(self._entries, key=self._order.__getitem__)

    def sorted_types(self) -> list[str]:
        """Qualified names in dependency order."""
        return self.dependency_order()

    def graph(self) -> list[tuple[str, frozenset[str]]]:
        """Return ``(name, dependencies)`` pairs in dependency order.

        Used by tooling that needs the raw reference graph without the
        rendered text.
        """
        return [(name, self._entries[name].dependencies) for name in self.dependency_order()]

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def dependency_order(self) -> list[str]:
        """Order entries so that dependencies come before dependents.

        Cycles are collapsed into strongly connected components; the
        components are then ordered topologically. Ready components, and
        the members of one component, are taken in first-registration
        order, which keeps the output stable.

        Returns
        -------
            Qualified names of all entries.

        """
        nodes = self.type_names()
        edges = {
            name: sorted(
                (dep for dep in self._entries[name].dependencies if dep in self._entries),
                key=self._order.__getitem__,
            )
            for name in nodes
        }

        components = _strongly_connected(nodes, edges)
        component_of = {name: i for i, members in enumerate(components) for name in members}

        # Kahn's algorithm over the condensation
        blockers: dict[int, set[int]] = {i: set() for i in range(len(components))}
        dependents: dict[int, set[int]] = {i: set() for i in range(len(components))}
        for name, deps in edges.items():
            for dep in deps:
                src, dst = component_of[name], component_of[dep]
                if src != dst:
                    blockers[src].add(dst)
                    dependents[dst].add(src)

        rank = [min(self._order[m] for m in members) for members in components]
        ready = [(rank[i], i) for i, deps in blockers.items() if not deps]
        heapq.heapify(ready)

        result: list[str] = []
        while ready:
            _, i = heapq.heappop(ready)
            result.extend(sorted(components[i], key=self._order.__getitem__))
            for j in dependents[i]:
                blockers[j].discard(i)
                if not blockers[j]:
                    heapq.heappush(ready, (rank[j], j))
        return result

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Render all entries as TypeScript, in dependency order.

        Raises
        ------
            UnresolvedReferenceError: If an extends or indexed-access
                target is not registered.

        """
        return self._render(export=False)

    def render_exported(self) -> str:
        """Render all entries with ``export`` declarations."""
        return self._render(export=True)

    def render_entries(self, names: list[str], export: bool = False) -> str:
        """Render a subset of entries, in the given order."""
        entries = [self._entries[name] for name in names]
        for entry in entries:
            self._check_references(entry)
        if not entries:
            return ""
        return "\n\n".join(typescript.render_declaration(e, export=export) for e in entries) + "\n"

    def _render(self, export: bool) -> str:
        return self.render_entries(self.dependency_order(), export=export)

    def _check_references(self, entry: NamedEntry) -> None:
        for node in walk(entry.typedef):
            if isinstance(node, IndexedAccess):
                target = self._require(entry, node.base, "index")
                if isinstance(target.typedef, Record) and (
                    node.key.value not in target.typedef.field_names
                ):
                    raise UnresolvedReferenceError(
                        f"'{node.base.qualified_name}' has no field {node.key.value!r}",
                        type_name=entry.qualified_name,
                        attribute="key",
                    )
            elif isinstance(node, Intersection):
                for member in node.members:
                    if isinstance(member, Reference) and not member.param:
                        self._require(entry, member, "extends")

    def _require(self, entry: NamedEntry, ref: Reference, attribute: str) -> NamedEntry:
        target = self._entries.get(ref.qualified_name)
        if target is None:
            raise UnresolvedReferenceError(
                f"'{ref.qualified_name}' is not registered",
                type_name=entry.qualified_name,
                attribute=attribute,
            )
        return target


def _strongly_connected(nodes: list[str], edges: dict[str, list[str]]) -> list[list[str]]:
    """Tarjan's algorithm, iterative to avoid deep recursion."""
    index: dict[str, int] = {}
    low: dict[str, int] = {}
    stack: list[str] = []
    on_stack: set[str] = set()
    components: list[list[str]] = []
    counter = itertools.count()

    def visit(node: str) -> None:
        index[node] = low[node] = next(counter)
        stack.append(node)
        on_stack.add(node)

    for root in nodes:
        if root in index:
            continue
        visit(root)
        work = [(root, iter(edges[root]))]
        while work:
            node, successors = work[-1]
            for succ in successors:
                if succ not in index:
                    visit(succ)
                    work.append((succ, iter(edges[succ])))
                    break
                if succ in on_stack:
                    low[node] = min(low[node], index[succ])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    low[parent] = min(low[parent], low[node])
                if low[node] == index[node]:
                    component = []
                    while True:
                        member = stack.pop()
                        on_stack.discard(member)
                        component.append(member)
                        if member == node:
                            break
                    components.append(component)
    return components
