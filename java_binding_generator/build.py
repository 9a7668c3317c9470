"""
Build location record and artifact installation
"""

import json
import shutil
import subprocess
import sys
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from .constants import BUILD_RECORD_FILE, DEFAULT_OUTPUT_DIR, JAVA_DIR_NAME
from .errors import BuildError


@dataclass
class BuildRecord:
    """Where the compiled library and generated sources live, and where they go"""
    root: str
    name: str
    bin_source: str
    bin_target: str
    java_source: str
    java_target: str

    @classmethod
    def with_defaults(cls, root, name: str, output: str = DEFAULT_OUTPUT_DIR, **overrides) -> "BuildRecord":
        """Record with the conventional cargo + maven layout below root"""
        root_path = Path(root).resolve()
        output_path = Path(output)
        if not output_path.is_absolute():
            output_path = root_path / output_path
        values = {
            "root": str(root_path),
            "name": name,
            "bin_source": str(root_path / "target" / "debug"),
            "bin_target": str(root_path / "src" / "main" / "resources"),
            "java_source": str(output_path / JAVA_DIR_NAME),
            "java_target": str(root_path / "src" / "main" / "java"),
        }
        values.update({key: str(value) for key, value in overrides.items() if value is not None})
        return cls(**values)


def write_record(record: BuildRecord) -> Path:
    """Persist the record as JSON at the project root"""
    path = Path(record.root) / BUILD_RECORD_FILE
    path.write_text(json.dumps(asdict(record), indent=2) + "\n", encoding="utf-8")
    return path


def read_record(path) -> BuildRecord:
    """Load a record written by write_record"""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise FileNotFoundError(f"Build record not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Could not decode build record {path}: {e}")

    expected = {f.name for f in fields(BuildRecord)}
    missing = expected - set(data)
    if missing:
        raise ValueError(f"Build record {path} is missing: {', '.join(sorted(missing))}")
    return BuildRecord(**{key: data[key] for key in expected})


def shared_library_name(name: str, platform: str = None) -> str:
    """File name cargo gives a cdylib on the platform"""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return f"{name}.dll"
    if platform == "darwin":
        return f"lib{name}.dylib"
    return f"lib{name}.so"


def run_cargo_build(root, quiet: bool = False):
    """Build the crate with `cargo build`"""
    if not quiet:
        print("Building the rust project via `cargo build` (this may take a while)")
    try:
        result = subprocess.run(["cargo", "build"], cwd=root, capture_output=True, text=True)
    except OSError as e:
        raise BuildError(f"`cargo build` failed: {e}")
    if result.returncode != 0:
        raise BuildError(f"`cargo build` failed (status {result.returncode}):\n{result.stderr}")


def install_artifacts(record: BuildRecord, platform: str = None, quiet: bool = False) -> list[Path]:
    """Copy the compiled library and generated Java sources into the Java project"""
    library = shared_library_name(record.name, platform)
    source = Path(record.bin_source) / library
    target_dir = Path(record.bin_target)
    if not source.is_file():
        raise BuildError(f"Build artifact not found: {source}")

    installed = []
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        installed.append(Path(shutil.copy2(source, target_dir / library)))
        if not quiet:
            print(f"Copied {source} -> {target_dir / library}")

        java_source = Path(record.java_source)
        if not java_source.is_dir():
            raise BuildError(f"Generated Java sources not found: {java_source}")
        shutil.copytree(java_source, record.java_target, dirs_exist_ok=True)
    except OSError as e:
        raise BuildError(f"Failed to copy artifacts: {e}")

    for path in sorted(java_source.rglob("*.java")):
        installed.append(Path(record.java_target) / path.relative_to(java_source))
    if not quiet:
        print(f"Copied {java_source} -> {record.java_target}")
    return installed
