"""Named modal logic frame systems and the properties each one requires."""

from typing import Iterable

PROPERTIES = ("reflexive", "symmetric", "transitive")

FRAME_SYSTEMS: dict[str, tuple[str, ...]] = {
    "K": (),
    "T": ("reflexive",),
    "B": ("reflexive", "symmetric"),
    "K4": ("transitive",),
    "S4": ("reflexive", "transitive"),
    "S5": ("reflexive", "symmetric", "transitive"),
}


def expand_requirements(names: Iterable[str]) -> tuple[str, ...]:
    """Resolve property and system names into an ordered tuple of properties.

    Args:
        names: Property names ("reflexive", ...) and/or system names ("S4", ...)

    Returns:
        The required properties in canonical order, without duplicates

    Raises:
        ValueError: If a name is neither a property nor a known system
    """
    wanted = set()
    for name in names:
        if name in PROPERTIES:
            wanted.add(name)
        elif name in FRAME_SYSTEMS:
            wanted.update(FRAME_SYSTEMS[name])
        else:
            options = ", ".join([*PROPERTIES, *FRAME_SYSTEMS])
            raise ValueError(f"Unknown frame property or system '{name}' (expected one of: {options})")
    return tuple(p for p in PROPERTIES if p in wanted)


def satisfied_systems(properties: dict[str, bool]) -> list[str]:
    """Systems whose required properties all hold."""
    return [
        name for name, required in FRAME_SYSTEMS.items()
        if all(properties.get(p, False) for p in required)
    ]
