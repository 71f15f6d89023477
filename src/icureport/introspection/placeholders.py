"""Placeholder extraction from parsed ICU templates.

Retrieves every argument element of a template: elements with a placeholder
in them, like '{varName}' or '{varName, number, bytes}', as opposed to the
literal text between them.

Plural branches are inspected recursively, and their placeholders need to be
deduplicated: in "=1{hello {icu}} other{hello {icu}}" the placeholder "icu"
appears twice. The result is keyed on the placeholder name; the last
occurrence wins, since repeats only differ in where they sit in the template.

Select branches are not descended into: only plural branches are.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable

from icureport.syntax import ArgumentElement, MessageElement, PluralFormat

__all__ = ["collect_argument_elements", "extract_placeholders"]


def collect_argument_elements(
    elements: Iterable[MessageElement],
    seen_elements_by_id: dict[str, ArgumentElement] | None = None,
) -> dict[str, ArgumentElement]:
    """Collect all argument elements of a template, keyed by placeholder name.

    Args:
        elements: Top-level AST nodes (MessageAst.elements)
        seen_elements_by_id: Accumulator shared across recursive calls.
            Callers normally omit it.

    Returns:
        Mapping from placeholder name to its argument element. Insertion order
        follows first appearance in the template.

    Example:
        >>> ast = parse_message("{n, plural, =1{{n} file in {dir}} other{{n} files in {dir}}}")
        >>> list(collect_argument_elements(ast.elements))
        ['n', 'dir']
    """
    if seen_elements_by_id is None:
        seen_elements_by_id = {}

    for element in elements:
        if not ArgumentElement.guard(element):
            continue

        seen_elements_by_id[element.id] = element

        if not isinstance(element.format, PluralFormat):
            continue
        for option in element.format.options:
            collect_argument_elements(option.value.elements, seen_elements_by_id)

    return seen_elements_by_id


def extract_placeholders(elements: Iterable[MessageElement]) -> frozenset[str]:
    """Names of all placeholders a template uses.

    Example:
        >>> extract_placeholders(parse_message("{a} and {b, number}").elements)
        frozenset({'a', 'b'})
    """
    return frozenset(collect_argument_elements(elements))
