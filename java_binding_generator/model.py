"""
Structural model of the Rust methods being bound
"""

from dataclasses import dataclass, field
from typing import Union

from .naming import to_camel_case


@dataclass(frozen=True)
class SelfBorrow:
    """&self and &mut self"""
    mutable: bool = False


@dataclass(frozen=True)
class SelfOwned:
    """self and mut self"""
    mutable: bool = False


@dataclass(frozen=True)
class Captured:
    """A regular named argument"""
    name: str
    ty: str

    @property
    def java_name(self) -> str:
        return to_camel_case(self.name)


Argument = Union[SelfBorrow, SelfOwned, Captured]


def is_receiver(arg: Argument) -> bool:
    if isinstance(arg, (SelfBorrow, SelfOwned)):
        return True
    if isinstance(arg, Captured):
        return False
    raise TypeError(f"Unknown argument variant: {arg!r}")


@dataclass(frozen=True)
class Method:
    """A public method found in an impl block"""
    name: str
    return_type: str | None = None
    args: tuple[Argument, ...] = ()

    def __post_init__(self):
        # Accept lists from callers but keep the record immutable
        object.__setattr__(self, "args", tuple(self.args))
        receivers = [i for i, arg in enumerate(self.args) if is_receiver(arg)]
        if len(receivers) > 1:
            raise ValueError(f"Method {self.name} has more than one self receiver")
        if receivers and receivers[0] != 0:
            raise ValueError(f"Method {self.name} must take its self receiver first")

    @property
    def is_static(self) -> bool:
        """A method without a self receiver is static"""
        return not any(is_receiver(arg) for arg in self.args)

    @property
    def java_name(self) -> str:
        return to_camel_case(self.name)

    @property
    def captured_args(self) -> list[Captured]:
        return [arg for arg in self.args if isinstance(arg, Captured)]


@dataclass(frozen=True)
class Entity:
    """The Rust type whose methods are exported"""
    name: str
    methods: tuple[Method, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "methods", tuple(self.methods))
