from __future__ import annotations

from typing import Any, Iterator

from pathmask.core.mask_functions import MaskFunction
from pathmask.core.paths import ROOT_PATH, RuleSet
from pathmask.ports.observer import WalkObserver


class TreeWalker:
    """Depth-first walk that rebuilds a JSON tree with masked nodes replaced."""
    def __init__(
        self,
        rules: RuleSet,
        mask_function: MaskFunction,
        observer: WalkObserver | None = None,
    ) -> None:
        self.rules = rules
        self.mask_function = mask_function
        self.observer = observer

    def walk(self, value: Any, path: str = ROOT_PATH) -> Any:
        """Return a masked copy of ``value``.

        Args:
            value (Any): Decoded JSON value (dict, list, str, number, bool or None).
            path (str): Path of ``value`` inside the document.

        Returns:
            Any: New tree of the same shape with matching nodes replaced.

        Notes:
            Objects and arrays are rebuilt rather than mutated, so the input
            tree is left untouched. Once a node is masked its children are
            discarded without being evaluated against the rules. Pending
            children are kept on an explicit stack, so nesting depth is not
            bounded by the interpreter's recursion limit.
        """
        result, children = self._visit(value, path)
        stack = [children] if children is not None else []
        while stack:
            try:
                container, key, item, item_path = next(stack[-1])
            except StopIteration:
                stack.pop()
                continue
            container[key], grandchildren = self._visit(item, item_path)
            if grandchildren is not None:
                stack.append(grandchildren)
        return result

    def _visit(self, value: Any, path: str) -> tuple[Any, Iterator[tuple] | None]:
        if self.observer is not None:
            self.observer.node_visited(path)

        canonical_path = self.rules.canonicalize(path)
        if canonical_path in self.rules:
            masked = self.mask_function(value)
            if self.observer is not None:
                self.observer.node_masked(path, canonical_path)
            return masked, None

        if isinstance(value, dict):
            copy: dict = {}
            return copy, ((copy, key, item, f"{path}.{key}") for key, item in value.items())
        if isinstance(value, list):
            items: list = [None] * len(value)
            return items, ((items, index, item, f"{path}[{index}]") for index, item in enumerate(value))
        return value, None
