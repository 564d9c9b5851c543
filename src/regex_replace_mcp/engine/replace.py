"""Regex replace across a glob-selected file set."""

from __future__ import annotations

import logging

from ..core.globbing import expand_glob
from ..core.template import compile_template, escape_replacement
from ..types import FileChange, LineChange, ReplaceOutcome, ReplaceResult, SkippedFile
from ._helpers import _compile_pattern, _read_text, _split_lines, _write_text

logger = logging.getLogger(__name__)


def replace_in_files(
    pattern: str,
    replacement: str,
    files: str,
    dry_run: bool = False,
) -> ReplaceResult:
    """Replace regex matches in every file selected by a glob.

    The replacement uses ``$1``/``$0`` back-references. Any other ``$`` is
    literal (see ``escape_replacement``).

    Each file is read once. Unchanged files are dropped. Changed files get a
    per-line before/after listing and, unless ``dry_run``, are rewritten in
    place. Files are processed in order and a write failure stops the batch;
    earlier writes are kept.

    Args:
        pattern: Regex pattern (Python ``re`` syntax)
        replacement: Replacement template
        files: Glob pattern selecting files
        dry_run: Preview changes without writing

    Returns:
        ReplaceResult with per-file outcomes in processing order

    Raises:
        InvalidPatternError: Regex does not compile
        InvalidGlobError: Glob is malformed
        FileWriteError: Writing a changed file failed
    """
    rx = _compile_pattern(pattern)
    replacer = compile_template(escape_replacement(replacement))

    paths = expand_glob(files)
    outcomes: list[ReplaceOutcome] = []

    for path in paths:
        try:
            content = _read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Skipping {path}: {e}")
            outcomes.append(SkippedFile(path=str(path), reason=str(e)))
            continue

        new_content = rx.sub(replacer, content)
        if new_content == content:
            continue

        change = FileChange(
            path=str(path),
            match_count=sum(1 for _ in rx.finditer(content)),
        )
        for line_number, line in enumerate(_split_lines(content), start=1):
            if rx.search(line):
                change.lines.append(
                    LineChange(line_number=line_number, before=line, after=rx.sub(replacer, line))
                )
        outcomes.append(change)

        if dry_run:
            logger.debug(f"Dry run, not writing {path} ({change.match_count} match(es))")
        else:
            _write_text(path, new_content)
            logger.info(f"Replaced {change.match_count} match(es) in {path}")

    return ReplaceResult(outcomes=outcomes, files_matched=len(paths), dry_run=dry_run)
