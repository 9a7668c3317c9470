"""
Discovery of public methods in Rust source trees using tree-sitter
"""

import re
from pathlib import Path

import tree_sitter_rust as tsrust
from tree_sitter import Language, Node, Parser

from .constants import BYTE_SEQUENCE_TYPE, RUST_SOURCE_SUFFIX
from .errors import SourceParseError, UnsupportedArgumentShape
from .model import Captured, Method, SelfBorrow, SelfOwned


RUST_LANGUAGE = Language(tsrust.language())

# Crate-root directories holding build output or VCS data, never user sources
DEFAULT_EXCLUDED_DIRS = ("target", ".git")

_DERIVE_PATTERN = re.compile(r"derive\s*\((.*)\)", re.DOTALL)


def _node_text(node: Node) -> str:
    return node.text.decode("utf-8")


def _compact(text: str) -> str:
    return re.sub(r"\s+", "", text)


def _type_path_name(node: Node) -> str | None:
    """Name of a named type path, None for any other type form

    Module prefixes are dropped (std::string::String -> String), generic
    arguments are kept without whitespace (Vec<u8>).
    """
    if node.type in ("primitive_type", "type_identifier"):
        return _node_text(node)
    if node.type == "scoped_type_identifier":
        return _node_text(node.child_by_field_name("name"))
    if node.type == "generic_type":
        base = _type_path_name(node.child_by_field_name("type"))
        arguments = node.child_by_field_name("type_arguments")
        if base is None or arguments is None:
            return None
        return base + _compact(_node_text(arguments))
    return None


def _impl_segments(node: Node) -> list[str]:
    """Path segments of an impl block's self type (crate::model::Foo<T> -> [crate, model, Foo])"""
    if node.type == "generic_type":
        node = node.child_by_field_name("type")
    text = _node_text(node)
    return [segment.strip() for segment in text.split("::") if segment.strip()]


def _is_public(node: Node) -> bool:
    for child in node.children:
        if child.type == "visibility_modifier":
            return _node_text(child) == "pub"
    return False


def _receiver(node: Node):
    tokens = [child.type for child in node.children]
    mutable = "mutable_specifier" in tokens
    if "&" in tokens:
        return SelfBorrow(mutable=mutable)
    return SelfOwned(mutable=mutable)


def _captured(method_name: str, node: Node) -> Captured:
    pattern = node.child_by_field_name("pattern")
    if pattern is not None and pattern.type == "mut_pattern":
        pattern = pattern.named_children[-1]
    if pattern is None or pattern.type != "identifier":
        raise UnsupportedArgumentShape(
            f"Unsupported argument pattern {_node_text(node)!r} on function {method_name}"
        )
    type_node = node.child_by_field_name("type")
    ty = _type_path_name(type_node) if type_node is not None else None
    if ty is None or ("<" in ty and ty != BYTE_SEQUENCE_TYPE):
        raise UnsupportedArgumentShape(
            f"Unsupported argument type {_node_text(node)!r} on function {method_name}"
        )
    return Captured(name=_node_text(pattern), ty=ty)


def _return_type(method_name: str, node: Node) -> str | None:
    ret = node.child_by_field_name("return_type")
    if ret is None:
        return None
    ty = _type_path_name(ret)
    if ty is None:
        raise UnsupportedArgumentShape(
            f"Unable to extract return type {_node_text(ret)!r} on function {method_name}"
        )
    return ty


def method_from_node(node: Node) -> Method:
    """Build a Method record from a function_item node"""
    name = _node_text(node.child_by_field_name("name"))
    args = []
    for param in node.child_by_field_name("parameters").named_children:
        if param.type == "self_parameter":
            args.append(_receiver(param))
        elif param.type == "parameter":
            args.append(_captured(name, param))
        elif param.type in ("attribute_item", "line_comment", "block_comment"):
            continue
        else:
            raise UnsupportedArgumentShape(
                f"Unsupported argument {_node_text(param)!r} on function {name}"
            )
    return Method(name=name, return_type=_return_type(name, node), args=args)


def _derives(attributes: list[str]) -> list[str]:
    names = []
    for attribute in attributes:
        match = _DERIVE_PATTERN.search(attribute)
        if not match:
            continue
        for entry in match.group(1).split(","):
            entry = entry.strip()
            if entry:
                names.append(entry.split("::")[-1].strip())
    return names


class SourceIndex:
    """Registry of impl-block methods for every Rust file under a root

    The tree is walked and parsed once; all entities of a run are resolved
    from the same index.
    """

    def __init__(self, root, exclude_dirs=DEFAULT_EXCLUDED_DIRS):
        self.root = Path(root)
        self.exclude_dirs = set(exclude_dirs)
        self.parser = Parser(RUST_LANGUAGE)
        self.files: list[Path] = []
        self.impl_blocks: list[tuple[list[str], list[Node]]] = []
        self.structs: list[tuple[str, list[str]]] = []  # (name, derives)

    def source_files(self) -> list[Path]:
        """Rust sources below the root in lexicographic path order"""
        files = []
        for path in self.root.rglob(f"*{RUST_SOURCE_SUFFIX}"):
            relative = path.relative_to(self.root)
            if len(relative.parts) > 1 and relative.parts[0] in self.exclude_dirs:
                continue
            if path.is_file():
                files.append(path)
        return sorted(files, key=lambda p: p.relative_to(self.root).as_posix())

    def load(self) -> "SourceIndex":
        if not self.root.is_dir():
            raise SourceParseError(self.root, "source root is not a directory")
        for path in self.source_files():
            self.index_file(path)
        return self

    def index_file(self, path: Path):
        try:
            source = path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceParseError(path, str(e))
        self.files.append(path)
        self.index_source(source, path)

    def index_source(self, source: str, path="<string>"):
        tree = self.parser.parse(source.encode("utf-8"))
        root = tree.root_node
        if root.has_error:
            raise SourceParseError(path, "syntax error")

        attributes = []
        for item in root.named_children:
            if item.type == "attribute_item":
                attributes.append(_node_text(item))
                continue
            if item.type in ("line_comment", "block_comment"):
                continue

            if item.type in ("struct_item", "enum_item"):
                name = _node_text(item.child_by_field_name("name"))
                self.structs.append((name, _derives(attributes)))
            elif item.type == "impl_item":
                self._index_impl(item)
            attributes = []

    def _index_impl(self, node: Node):
        type_node = node.child_by_field_name("type")
        body = node.child_by_field_name("body")
        if type_node is None or body is None:
            return
        functions = [
            child
            for child in body.named_children
            if child.type == "function_item" and _is_public(child)
        ]
        self.impl_blocks.append((_impl_segments(type_node), functions))

    def methods_for(self, ident: str) -> list[Method]:
        """Public methods of every impl block whose type path mentions ident

        Signatures are only converted for matching blocks, so unsupported
        shapes in unrelated types never abort the run.
        """
        methods = []
        for segments, functions in self.impl_blocks:
            if ident in segments:
                methods.extend(method_from_node(node) for node in functions)
        return methods

    def annotated_entities(self, marker: str) -> list[str]:
        """Names of structs and enums deriving the given marker, in source order"""
        names = []
        for name, derives in self.structs:
            if marker in derives and name not in names:
                names.append(name)
        return names


def discover_methods(root, ident: str) -> list[Method]:
    """Walk a source tree and collect the public methods of one type"""
    return SourceIndex(root).load().methods_for(ident)
