"""
Main Java bindings generator orchestration
"""

import sys
import tomllib
from pathlib import Path

from .code_generators import CodeGenerator
from .constants import (
    DEFAULT_EXPORT_MARKER,
    DEFAULT_RUNTIME_CRATE,
    DEFAULT_SYMBOL_PREFIX,
    GLUE_FILE_NAME,
    JAVA_DIR_NAME,
    JAVA_SOURCE_SUFFIX,
)
from .discovery import SourceIndex
from .errors import BindingGeneratorError, OutputWriteError
from .model import Entity
from .naming import to_pascal_case
from .type_mapper import TypeMapper


def resolve_library_name(source_root) -> str:
    """Name of the shared library built from a crate

    Uses the [lib] name from Cargo.toml, then the package name with dashes
    turned into underscores as cargo does, then the directory name.
    """
    root = Path(source_root).resolve()
    manifest = root / "Cargo.toml"
    if manifest.is_file():
        try:
            data = tomllib.loads(manifest.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
            print(f"Warning: Could not read {manifest}: {e}", file=sys.stderr)
            data = {}
        lib_name = data.get("lib", {}).get("name")
        if lib_name:
            return lib_name
        package_name = data.get("package", {}).get("name")
        if package_name:
            return package_name.replace("-", "_")
    return root.name.replace("-", "_")


def write_artifacts(files: dict[str, str], output_dir) -> list[Path]:
    """Write rendered artifacts below output_dir; keys are relative paths"""
    output_path = Path(output_dir)
    written = []
    for relative, content in files.items():
        target = output_path / relative
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(f"Could not write {target}: {e}")
        written.append(target)
    return written


class JavaBindingsGenerator:
    """Main orchestrator for generating JNI glue and Java stubs from Rust sources"""

    def __init__(self, symbol_prefix: str = DEFAULT_SYMBOL_PREFIX,
                 runtime_crate: str = DEFAULT_RUNTIME_CRATE, quiet: bool = False):
        self.type_mapper = TypeMapper(runtime_crate)
        self.code_generator = CodeGenerator(self.type_mapper, symbol_prefix)
        self.quiet = quiet

    def _log(self, message: str):
        if not self.quiet:
            print(message)

    def build_entity(self, index: SourceIndex, ident: str) -> Entity:
        """Resolve an identifier against the index into an Entity"""
        name = to_pascal_case(ident)
        methods = index.methods_for(name)
        if not methods:
            print(f"Warning: No public methods found for {name}", file=sys.stderr)
        return Entity(name, methods)

    def render_entity(self, entity: Entity, library_name: str, package: str = None) -> tuple[str, str]:
        """Render (native glue, Java class) for one entity"""
        glue = self.code_generator.emit_native_glue(entity)
        java = self.code_generator.emit_java_class(entity, library_name, package)
        return glue, java

    def render(self, entities: list[Entity], library_name: str, package: str = None) -> dict[str, str]:
        """Render every artifact of a run, keyed by path relative to the output directory"""
        files = {}
        glue_parts = []
        java_dir = Path(JAVA_DIR_NAME)
        if package:
            java_dir = java_dir.joinpath(*package.split("."))

        for entity in entities:
            glue, java = self.render_entity(entity, library_name, package)
            if glue:
                glue_parts.append(glue)
            files[(java_dir / f"{entity.name}{JAVA_SOURCE_SUFFIX}").as_posix()] = java

        files[GLUE_FILE_NAME] = "\n".join(glue_parts)
        return files

    def generate(self, source, entities: list[str] = None, library_name: str = None,
                 output=None, package: str = None,
                 export_marker: str = DEFAULT_EXPORT_MARKER) -> dict[str, str]:
        """Generate bindings for a Rust source tree

        Args:
            source: Root directory of the Rust sources
            entities: Type names to bind; annotated types are used when empty
            library_name: Library passed to System.loadLibrary (derived from Cargo.toml if None)
            output: Output directory; nothing is written when None
            package: Optional Java package for the stub classes
            export_marker: Derive name marking exported types

        Returns:
            Dictionary of relative file path -> content

        Raises:
            BindingGeneratorError: on any generation failure, before anything is written
        """
        index = SourceIndex(source).load()
        self._log(f"Processing: {len(index.files)} source file(s) under {source}")

        if not entities:
            entities = index.annotated_entities(export_marker)
            if not entities:
                raise BindingGeneratorError(
                    f"No entities given and no types derive {export_marker} under {source}"
                )

        if library_name is None:
            library_name = resolve_library_name(source)

        resolved = []
        seen = set()
        for ident in entities:
            entity = self.build_entity(index, ident)
            if entity.name in seen:
                continue
            seen.add(entity.name)
            self._log(f"  {entity.name}: {len(entity.methods)} method(s)")
            resolved.append(entity)

        files = self.render(resolved, library_name, package)

        if output is not None:
            for path in write_artifacts(files, output):
                self._log(f"Generated bindings: {path}")

        return files
