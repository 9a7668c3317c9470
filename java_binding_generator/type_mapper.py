"""
Type mapping logic for converting Rust types to JNI and Java types
"""

from dataclasses import dataclass

from .constants import JNI_TYPE_MAP, RETURN_BOUNDARY_OVERRIDES, DEFAULT_RUNTIME_CRATE
from .errors import UnsupportedReturnType
from .model import Method


@dataclass(frozen=True)
class TypeMapping:
    """One entry of the Rust -> (JNI, Java) table"""
    rust_type: str
    boundary: str
    host: str
    arg_converter: str
    retval_converter: str

    @property
    def return_boundary(self) -> str:
        return RETURN_BOUNDARY_OVERRIDES.get(self.boundary, self.boundary)


class TypeMapper:
    """Maps Rust types to their JNI boundary and Java declared types"""

    def __init__(self, runtime_crate: str = DEFAULT_RUNTIME_CRATE):
        self.runtime_crate = runtime_crate
        self.type_map = {
            rust_type: TypeMapping(rust_type, *entry)
            for rust_type, entry in JNI_TYPE_MAP.items()
        }

    def map_type(self, rust_type: str) -> TypeMapping | None:
        """Look up a Rust type; None means the type is not supported"""
        if rust_type is None:
            return None
        return self.type_map.get(rust_type.replace(" ", ""))

    def is_supported(self, rust_type: str) -> bool:
        return self.map_type(rust_type) is not None

    def qualify(self, name: str) -> str:
        """Prefix a runtime item with the runtime crate path"""
        return f"{self.runtime_crate}::{name}"

    def converter_path(self, converter: str) -> str:
        return f"{self.runtime_crate}::convert::{converter}"

    def java_return_type(self, method: Method) -> str:
        """Java return type of a method, 'void' when nothing is returned

        Raises:
            UnsupportedReturnType: the return type has no mapping
        """
        if method.return_type is None:
            return "void"
        mapping = self.map_type(method.return_type)
        if mapping is None:
            raise UnsupportedReturnType(method.name, method.return_type)
        return mapping.host

    def jni_return_mapping(self, method: Method) -> TypeMapping | None:
        """Mapping of the returned value, None for methods without a return value

        Raises:
            UnsupportedReturnType: the return type has no mapping
        """
        if method.return_type is None:
            return None
        mapping = self.map_type(method.return_type)
        if mapping is None:
            raise UnsupportedReturnType(method.name, method.return_type)
        return mapping
