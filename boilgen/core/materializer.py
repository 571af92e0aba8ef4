"""Write a template's files under a target root.

For each file spec the path template is validated, substituted and resolved
against the target root. The last path segment is always the file and every
earlier segment is a directory, so ``"__tests__/buildName.spec.ts"`` creates
``__tests__/`` on the way. Content lines are substituted one by one and
joined with ``"\\n"``.

An invalid file spec is skipped with a warning; the rest of the template is
still written. Filesystem errors (``OSError``) propagate and stop the run;
files written before the failure are left in place.
"""

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath, PureWindowsPath

from boilgen.config import CATALOG_ENCODING
from boilgen.core.catalog import Template
from boilgen.core.errors import InvalidPathTemplateError
from boilgen.core.path_validator import RESERVED_CHARACTERS, is_valid_file_path
from boilgen.core.substitution import substitute
from boilgen.core.variables import VariableSet
from boilgen.helpers.helpers_logging import print_warning

_RESERVED_HINT = " ".join(RESERVED_CHARACTERS)


@dataclass
class MaterializeReport:
    """Outcome of one materialize run.

    Attributes:
        written: Files written, in template order.
        skipped: File specs that were not written, with the reason.
    """

    written: list[Path] = field(default_factory=list)
    skipped: list[InvalidPathTemplateError] = field(default_factory=list)


def _normalize_segments(path_template: str, relative: str) -> list[str]:
    """Split a substituted path into clean segments under the root.

    Raises:
        InvalidPathTemplateError: If the path is absolute, empty, or climbs
            above the root.
    """
    if PurePosixPath(relative).is_absolute() or PureWindowsPath(relative).anchor:
        raise InvalidPathTemplateError(path_template, f"'{relative}' is an absolute path")

    raw_segments = relative.split("/")
    # A trailing "/", "." or ".." names a directory, never a file
    if raw_segments[-1] in ("", ".", ".."):
        raise InvalidPathTemplateError(path_template, "has no file name")

    segments: list[str] = []
    for segment in raw_segments:
        if segment in ("", "."):
            continue
        if segment == "..":
            if not segments:
                raise InvalidPathTemplateError(
                    path_template, f"'{relative}' escapes the target directory",
                )
            segments.pop()
            continue
        segments.append(segment)

    if not segments:
        raise InvalidPathTemplateError(path_template, "resolves to an empty path")

    return segments


def resolve_target_path(
    target_root: Path,
    path_template: str,
    variables: VariableSet,
) -> Path:
    """Resolve a path template to an absolute file path under ``target_root``.

    Raises:
        InvalidPathTemplateError: If the template contains reserved
            characters before or after substitution, or does not resolve to
            a file strictly inside ``target_root``.
    """
    if not is_valid_file_path(path_template):
        raise InvalidPathTemplateError(
            path_template, f"contains a reserved character ({_RESERVED_HINT})",
        )

    relative = substitute(path_template, variables).replace("\\", "/")
    segments = _normalize_segments(path_template, relative)

    # Substituted values may carry characters the raw template did not
    for segment in segments:
        if not is_valid_file_path(segment):
            raise InvalidPathTemplateError(
                path_template,
                f"resolved segment '{segment}' contains a reserved character "
                + f"({_RESERVED_HINT})",
            )

    return target_root.joinpath(*segments)


def render_content(lines: list[str], variables: VariableSet) -> str:
    """Substitute each line and join with single newlines."""
    return "\n".join(substitute(line, variables) for line in lines)


def write_file_with_dirs(target_root: Path, file_path: Path, content: str) -> None:
    """Create each missing directory between ``target_root`` and the file, then write it.

    Raises:
        OSError: On any filesystem failure.
    """
    current = target_root
    for segment in file_path.relative_to(target_root).parts[:-1]:
        current = current / segment
        current.mkdir(exist_ok=True)

    file_path.write_text(content, encoding=CATALOG_ENCODING, newline="")


def materialize(
    target_root: Path,
    template: Template,
    variables: VariableSet,
) -> MaterializeReport:
    """Write every file spec of ``template`` under ``target_root``.

    Args:
        target_root: Existing directory of the entity being generated.
        template: Path template -> content lines.
        variables: Variable set shared by all substitutions in the run.

    Returns:
        Report of written and skipped file specs.

    Raises:
        OSError: On the first filesystem failure; remaining specs are not
            written.
    """
    report = MaterializeReport()

    for path_template, lines in template.items():
        try:
            file_path = resolve_target_path(target_root, path_template, variables)
        except InvalidPathTemplateError as e:
            print_warning(str(e))
            report.skipped.append(e)
            continue

        write_file_with_dirs(target_root, file_path, render_content(lines, variables))
        report.written.append(file_path)

    return report
