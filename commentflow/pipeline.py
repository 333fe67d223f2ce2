from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import typer

from .convert.extract import extract_block
from .convert.reflow import DEFAULT_VERBATIM_TAGS, DOCUMENTATION, ReflowOptions, reflow_block
from .detect.boundary import find_block_range
from .document import LineDocument, Position, Selection, TextDocument
from .utils.io import read_text_file, write_text_file
from .utils.language import language_for_path
from .utils.logging import get_logger


@dataclass
class ReflowConfig:
    width: int = 80
    mode: str = DOCUMENTATION
    wrap_lists: bool = False
    verbatim_tags: Tuple[str, ...] = DEFAULT_VERBATIM_TAGS

    def options(self) -> ReflowOptions:
        return ReflowOptions(mode=self.mode, wrap_lists=self.wrap_lists, verbatim_tags=self.verbatim_tags)


@dataclass
class ReflowEdit:
    start: Position
    end: Position
    text: str
    changed: bool


@dataclass
class RunConfig:
    file: Path
    line: int  # 1-based, as shown by editors
    end_line: Optional[int] = None
    output: Optional[Path] = None
    in_place: bool = False
    language: Optional[str] = None
    width: int = 80
    mode: str = DOCUMENTATION
    wrap_lists: bool = False
    log_level: str = "INFO"


def reflow_comment(
    document: TextDocument,
    selection: Selection,
    config: Optional[ReflowConfig] = None,
) -> Optional[ReflowEdit]:
    """Reflow the comment block at ``selection`` and apply it to ``document``.

    Returns the edit, or ``None`` when there is no comment to reflow. The
    document receives at most one :meth:`TextDocument.replace` call, and none
    when the block is already formatted.
    """
    logger = get_logger()
    config = config or ReflowConfig()
    lines = [document.line_at(i) for i in range(document.line_count)]

    span = find_block_range(
        lines,
        selection.start.line,
        selection.end.line,
        document.language_id,
        is_empty=selection.is_empty,
    )
    if span is None:
        logger.info("No comment at the cursor; nothing to reflow")
        return None
    start_line, end_line = span

    block = extract_block(lines[start_line : end_line + 1])
    if block is None:
        logger.info(f"Unrecognized comment prefix on line {start_line + 1}; leaving text as is")
        return None
    logger.debug(f"Comment block lines {start_line + 1}-{end_line + 1} prefix={block.prefix!r} indent={len(block.indentation)}")

    text = reflow_block(block, config.width, config.options())
    original = "\n".join(lines[start_line : end_line + 1])
    edit = ReflowEdit(
        start=Position(start_line, 0),
        end=Position(end_line, len(lines[end_line])),
        text=text,
        changed=text != original,
    )
    if edit.changed:
        document.replace(edit.start, edit.end, edit.text)
    else:
        logger.debug("Comment block already reflowed")
    return edit


def _selection_for(cfg: RunConfig, document: LineDocument, logger) -> Selection:
    line_count = document.line_count
    end = cfg.end_line if cfg.end_line is not None else cfg.line
    if not (1 <= cfg.line <= line_count) or not (cfg.line <= end <= line_count):
        logger.error(f"Line range {cfg.line}-{end} is outside the file (1-{line_count})")
        raise SystemExit(2)
    if cfg.end_line is None:
        return Selection.cursor(cfg.line - 1)
    last = end - 1
    return Selection(Position(cfg.line - 1, 0), Position(last, len(document.line_at(last))))


def run(cfg: RunConfig) -> Optional[ReflowEdit]:
    logger = get_logger()
    language = cfg.language or language_for_path(cfg.file)
    logger.debug(f"Source: {cfg.file} ({language})")

    document = LineDocument.from_text(read_text_file(cfg.file), language_id=language)
    selection = _selection_for(cfg, document, logger)
    config = ReflowConfig(width=cfg.width, mode=cfg.mode, wrap_lists=cfg.wrap_lists)
    edit = reflow_comment(document, selection, config)

    if cfg.in_place or cfg.output:
        out_path = cfg.file if cfg.in_place else cfg.output
        if cfg.in_place and (edit is None or not edit.changed):
            logger.info(f"Unchanged: {cfg.file}")
            return edit
        written = write_text_file(out_path, document.text)
        logger.info(f"Saved: {written.path} ({written.bytes_written} bytes)")
    else:
        typer.echo(document.text, nl=False)
    return edit
