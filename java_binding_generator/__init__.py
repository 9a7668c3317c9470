"""
Java Bindings Generator - Generate JNI glue and Java stub classes from Rust sources
"""

from .generator import JavaBindingsGenerator
from .type_mapper import TypeMapper, TypeMapping
from .code_generators import CodeGenerator, OutputBuilder
from .discovery import SourceIndex, discover_methods
from .model import Entity, Method, SelfBorrow, SelfOwned, Captured
from .errors import BindingGeneratorError, UnsupportedReturnType
from .constants import (
    JNI_TYPE_MAP,
    DEFAULT_SYMBOL_PREFIX,
    DEFAULT_RUNTIME_CRATE,
)

__version__ = "0.1.0"

__all__ = [
    "JavaBindingsGenerator",
    "TypeMapper",
    "TypeMapping",
    "CodeGenerator",
    "OutputBuilder",
    "SourceIndex",
    "discover_methods",
    "Entity",
    "Method",
    "SelfBorrow",
    "SelfOwned",
    "Captured",
    "BindingGeneratorError",
    "UnsupportedReturnType",
    "JNI_TYPE_MAP",
    "DEFAULT_SYMBOL_PREFIX",
    "DEFAULT_RUNTIME_CRATE",
]
