"""
Identifier handling for generated code.

Provides collision-free renaming of sibling items (overloaded functions,
duplicate parameter names) and escaping of AssemblyScript reserved words.
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence, Set, TypeVar

T = TypeVar('T')


# Reserved words that cannot be used as parameter, getter or method names
RESERVED_WORDS: Set[str] = {
    'await', 'break', 'case', 'catch', 'class', 'const', 'continue',
    'debugger', 'delete', 'do', 'else', 'enum', 'export', 'extends',
    'false', 'finally', 'for', 'function', 'if', 'implements', 'import',
    'in', 'instanceof', 'interface', 'let', 'new', 'null', 'package',
    'private', 'protected', 'public', 'return', 'static', 'super',
    'switch', 'this', 'throw', 'true', 'try', 'typeof', 'var', 'void',
    'while', 'with', 'yield',
}


def safe_identifier(name: str, extra_reserved: Iterable[str] = ()) -> str:
    """Append an underscore to names that clash with reserved words or `extra_reserved`."""
    if name in RESERVED_WORDS or name in extra_reserved:
        return f'{name}_'
    return name


def capitalize(name: str) -> str:
    """Upper-case the first character only (`getData` -> `GetData`)."""
    return name[:1].upper() + name[1:]


def disambiguate_names(
    values: Sequence[T],
    get_name: Callable[[T, int], str],
    set_name: Callable[[T, str], T],
    on_rename: Optional[Callable[[str, str], None]] = None,
) -> List[T]:
    """
    Assign pairwise distinct names to an ordered sequence of items.

    The first occurrence of a name is kept; each later occurrence gets the
    name followed by the number of earlier duplicates (`transfer`,
    `transfer1`, `transfer2`). If that candidate is already in use the
    number keeps increasing until a free name is found.

    Args:
        values: The items, in declaration order
        get_name: Returns the candidate name of an item given its position
        set_name: Returns the item carrying the assigned name
        on_rename: Called with (original, alias) for every renamed item

    Returns:
        The renamed items, in the original order
    """
    used: Set[str] = set()
    ordinals: Dict[str, int] = {}
    result = []

    for index, value in enumerate(values):
        name = get_name(value, index)
        alias = name
        if alias in used:
            ordinal = ordinals.get(name, 1)
            while f'{name}{ordinal}' in used:
                ordinal += 1
            alias = f'{name}{ordinal}'
            ordinals[name] = ordinal + 1
            if on_rename is not None:
                on_rename(name, alias)
        used.add(alias)
        result.append(set_name(value, alias))

    return result
