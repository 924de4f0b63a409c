"""Unit family bookkeeping shared by every typed quantity of the fleet engine.

Each physical quantity used by the engine (distance, duration, speed) forms a
family. A family has exactly one root class, flagged with ``IS_FAMILY_ROOT``;
every subclass inherits that root automatically. Two quantities may only be
combined or compared when they share the same root, which keeps a speed from
being added to a distance by mistake.

Classes:
    Unit: Mixin that resolves the family root of each subclass.
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Mixin resolving the family root of a unit class.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class of the family.
        SYMBOL (ClassVar[str]): Display symbol.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the class that starts a family.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Attach the nearest ancestor flagged as family root to ``cls``."""
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return
        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return
        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type) -> None:
        """Reject an operation mixing two unit families.

        Plain numbers are accepted and read as SI values.

        Args:
            unit_type: Type of the other operand.

        Raises:
            TypeError: If ``unit_type`` is a unit of another family.
        """
        if not issubclass(unit_type, Unit):
            return
        if cls.ROOT is not unit_type.ROOT:
            msg = f"Cannot mix {cls.ROOT.__name__} with {unit_type.ROOT.__name__}"
            raise TypeError(msg)
