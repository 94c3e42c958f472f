"""
Validação em lote de arquivos SDP.

Para cada arquivo: parse, árvore da sessão, SDP reconstruído e, ao final,
uma tabela de resumo. O código de saída é 0 quando todos os arquivos foram
parseados e 1 caso contrário.
"""

import argparse
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

from tinysdp import __version__
from tinysdp.errors import ParseFailure
from tinysdp.logging_utils import RichSDPLogger, setup_logging
from tinysdp.parser import parse
from tinysdp.report import FileResult, reconstructed_panel, session_tree, summary_table

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_LEVEL_ENV = "TINYSDP_LOG_LEVEL"

logger = logging.getLogger(__name__)


def default_log_level() -> str:
    """Nível de log vindo do ambiente (WARNING se ausente ou inválido)"""
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    return level if level in LOG_LEVELS else "WARNING"


def discover_files(paths: Sequence[str], pattern: str = "*.sdp") -> list[Path]:
    """Expande diretórios (arquivos que casam com pattern, ordenados) e mantém arquivos"""
    found: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            found.extend(sorted(p for p in path.glob(pattern) if p.is_file()))
        else:
            # Arquivos inexistentes viram resultado de falha em process_file
            found.append(path)
    return found


def process_file(
    path: Path,
    report: RichSDPLogger,
    show_reconstructed: bool = True,
    show_tree: bool = True,
) -> FileResult:
    """Processa um único arquivo SDP"""
    filename = path.name
    if show_tree:
        report.log_file_header(f"Processing: {path}")

    if not path.is_file():
        msg = f"File not found: {path.resolve()}"
        report.log_warning(msg)
        return FileResult.fail(filename, msg)

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"{type(e).__name__}: {e}"
        report.log_error(e, context=filename)
        return FileResult.fail(filename, msg)

    try:
        session = parse(content)
    except ParseFailure as e:
        msg = f"{type(e).__name__}: {e}"
        report.log_error(e, context=filename)
        return FileResult.fail(filename, msg)

    logger.debug(f"{filename}: {len(session.media)} media sections")
    if show_tree:
        report.log_success("Parse successful")
        report.log_renderable(session_tree(session, title=filename))
    if show_reconstructed:
        report.log_renderable(reconstructed_panel(session))

    return FileResult.ok(filename, session)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinysdp",
        description="Parse SDP files, show their structure and the reconstructed SDP",
    )
    parser.add_argument("paths", nargs="+", help="SDP files or directories to scan")
    parser.add_argument(
        "--pattern",
        default="*.sdp",
        help="Glob used when scanning directories (default: *.sdp)",
    )
    parser.add_argument(
        "--no-reconstructed",
        action="store_true",
        help="Do not print the reconstructed SDP",
    )
    parser.add_argument(
        "--summary-only",
        action="store_true",
        help="Only print the summary table",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=default_log_level(),
        choices=LOG_LEVELS,
        help=f"Logging verbosity (default from ${LOG_LEVEL_ENV} or WARNING)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Shortcut for --log-level=DEBUG",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    args = build_parser().parse_args(argv)

    output = console or Console()
    setup_logging("DEBUG" if args.debug else args.log_level, output=output)
    report = RichSDPLogger("tinysdp.report", output=output)

    results = []
    for path in discover_files(args.paths, args.pattern):
        results.append(
            process_file(
                path,
                report,
                show_reconstructed=not (args.no_reconstructed or args.summary_only),
                show_tree=not args.summary_only,
            )
        )

    report.log_renderable(summary_table(results))
    return 0 if results and all(r.success for r in results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
