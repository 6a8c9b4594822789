"""Directory driver: discover inputs, dispatch by extension, write generated files"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from dominator_static.core.html.emit import render_html
from dominator_static.core.html.parse import HTML_EXTENSIONS
from dominator_static.core.markdown.emit import render_markdown
from dominator_static.core.markdown.parse import MD_EXTENSIONS
from dominator_static.errors import ConvertError, OutputError, UnsupportedFileError


logger = logging.getLogger(__name__)

DEFAULT_SUFFIX = ".rs.inc"


@dataclass
class ConvertReport:
    """Outcome of one run; failures are per file and do not stop the run."""
    converted: list[tuple[Path, Path]] = field(default_factory=list)
    skipped:   list[Path] = field(default_factory=list)
    failed:    list[tuple[Path, Exception]] = field(default_factory=list)


def discover_files(path: Path) -> list[Path]:
    """Return [path] for a file, else every entry below path, sorted."""
    if path.is_file():
        return [path]
    return sorted(path.rglob('*'))


def output_path(src: Path, root: Path, out_dir: Path, suffix: str = DEFAULT_SUFFIX) -> Path:
    """Mirror src (relative to root) under out_dir with its extension replaced by suffix.

    e.g. root/docs/intro.html -> out_dir/docs/intro.rs.inc
    """
    return out_dir / src.relative_to(root).with_suffix(suffix)


def render_file(path: Path, trim: bool = False, parser_config: str = 'gfm-like') -> str:
    """Read path as UTF-8 and render it with the emitter matching its extension."""
    ext = path.suffix.lower()
    if ext not in HTML_EXTENSIONS | MD_EXTENSIONS:
        raise UnsupportedFileError(f"Unexpected extension {path.suffix!r} on {path.name}")
    try:
        source = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise OutputError(f"Failed to read contents of {path}: {e}") from e
    logger.debug("Rendering %s as %s", path, "html" if ext in HTML_EXTENSIONS else "markdown")
    if ext in HTML_EXTENSIONS:
        return render_html(source, trim)
    return render_markdown(source, trim, parser_config)


def write_output(path: Path, text: str) -> None:
    """Write text to path; a partially written file is removed on failure."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(f"Could not create directory {path.parent}: {e}") from e
    try:
        path.write_text(text, encoding='utf-8')
    except OSError as e:
        if path.is_file():
            path.unlink()
        raise OutputError(f"Could not write {path}: {e}") from e


def run_convert(
    path: Path,
    out_dir: Path,
    trim: bool = False,
    parser_config: str = 'gfm-like',
    suffix: str = DEFAULT_SUFFIX,
    ) -> ConvertReport:
    """Convert path (file or directory) into out_dir. Returns a per-file report."""
    root = path if path.is_dir() else path.parent
    report = ConvertReport()

    for src in discover_files(path):
        if src.is_symlink():
            logger.warning("Symlinks unsupported (entry at %s), skipping", src)
            report.skipped.append(src)
            continue
        if src.is_dir():
            (out_dir / src.relative_to(root)).mkdir(parents=True, exist_ok=True)
            continue

        dest = output_path(src, root, out_dir, suffix)
        try:
            text = render_file(src, trim, parser_config)
            write_output(dest, text)
        except UnsupportedFileError as e:
            logger.warning("%s, skipping", e)
            report.skipped.append(src)
        except ConvertError as e:
            logger.error("Failed to convert %s: %s", src, e)
            # no stale output from an earlier run may survive a failure
            dest.unlink(missing_ok=True)
            report.failed.append((src, e))
        else:
            report.converted.append((src, dest))
    return report
