"""
Renderização Rich de sessões SDP para o relatório em lote.

Usa apenas a API pública (SDPSession e to_text); falhas de parse aparecem
somente como mensagem.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from tinysdp.attributes import Attribute
from tinysdp.sdp import SDPMedia, SDPSession
from tinysdp.serializer import to_text
from tinysdp.timing import format_timing

SINGLE_VALUE_WIDTH = 72
MULTI_VALUE_WIDTH = 68


@dataclass
class AttributeGroup:
    """Atributos agrupados por nome, na ordem de aparição"""

    name: str
    values: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.values)

    @property
    def is_flag(self) -> bool:
        return all(not v for v in self.values)


@dataclass
class FileResult:
    """Resultado do processamento de um arquivo SDP"""

    filename: str
    success: bool
    error: str | None = None
    session: SDPSession | None = None

    @classmethod
    def ok(cls, filename: str, session: SDPSession) -> "FileResult":
        return cls(filename, True, session=session)

    @classmethod
    def fail(cls, filename: str, error: str) -> "FileResult":
        return cls(filename, False, error=error)


def truncate(value: str, width: int) -> str:
    if len(value) <= width:
        return value
    return value[: width - 3] + "…"


def attribute_breakdown(attrs: Iterable[Attribute]) -> list[AttributeGroup]:
    """Agrupa atributos por nome preservando a ordem de inserção"""
    groups: dict[str, AttributeGroup] = {}
    for attr in attrs:
        group = groups.setdefault(attr.name, AttributeGroup(attr.name))
        group.values.append(attr.value or "")
    return list(groups.values())


def _add_breakdown(parent: Tree, attrs: Sequence[Attribute]) -> None:
    for group in attribute_breakdown(attrs):
        label = Text()
        label.append(f"{group.name:<22}", style="bold magenta")
        label.append(f" ×{group.count:<3}", style="dim")
        if group.is_flag:
            label.append(" (flag, presence only)", style="italic dim")
            parent.add(label)
        elif group.count == 1:
            label.append(" " + truncate(group.values[0], SINGLE_VALUE_WIDTH))
            parent.add(label)
        else:
            node = parent.add(label)
            for value in group.values:
                node.add(Text("↳ " + truncate(value, MULTI_VALUE_WIDTH)))


def _field(label: str, value: str) -> Text:
    text = Text()
    text.append(f"{label:<22}", style="bold")
    text.append(value)
    return text


def _media_node(parent: Tree, index: int, media: SDPMedia) -> None:
    header = Text()
    header.append(f"[{index}] ", style="bold cyan")
    header.append(f"type={media.media_type:<8} ", style="cyan")
    port = f"{media.port}/{media.port_count}" if media.port_count != 1 else str(media.port)
    header.append(f"port={port:<6} proto={media.protocol:<14} ")
    header.append(f"fmt=[{', '.join(media.formats)}]", style="dim")
    node = parent.add(header)

    if media.connection is not None:
        node.add(_field("Connection (c=)", str(media.connection)))
    if media.bandwidths:
        node.add(_field("Bandwidth (b=)", ", ".join(str(b) for b in media.bandwidths)))
    if media.attributes:
        attrs = node.add(_field("Attributes (a=)", f"{len(media.attributes)} total"))
        _add_breakdown(attrs, media.attributes)


def session_tree(session: SDPSession, title: str = "SDP Session") -> Tree:
    """Árvore Rich com campos de sessão, atributos agrupados e medias"""
    tree = Tree(Text(title, style="bold green"))

    tree.add(_field("Session Name (s=)", session.session_name or "(none)"))
    tree.add(_field("Origin (o=)", str(session.origin)))
    tree.add(_field("Timing (t=)", format_timing(session.start_time, session.stop_time)))
    if session.connection is not None:
        tree.add(_field("Connection (c=)", str(session.connection)))
    else:
        tree.add(_field("Connection (c=)", "(none at session level)"))

    if session.uri is not None:
        tree.add(_field("URI (u=)", session.uri))
    if session.information is not None:
        tree.add(_field("Information (i=)", session.information))
    if session.emails:
        tree.add(_field("Emails (e=)", ", ".join(session.emails)))
    if session.phones:
        tree.add(_field("Phones (p=)", ", ".join(session.phones)))
    if session.bandwidths:
        tree.add(_field("Bandwidth (b=)", ", ".join(str(b) for b in session.bandwidths)))

    count = len(session.attributes)
    attrs = tree.add(
        _field("Session Attrs (a=)", f"{count} attribute{'' if count == 1 else 's'}")
    )
    _add_breakdown(attrs, session.attributes)

    media = tree.add(_field("Media Sections (m=)", str(len(session.media))))
    for index, section in enumerate(session.media, start=1):
        _media_node(media, index, section)

    return tree


def reconstructed_panel(session: SDPSession) -> Panel:
    """Panel com o SDP reconstruído pelo serializer"""
    body = to_text(session).rstrip("\r\n").replace("\r\n", "\n")
    return Panel(
        Text(body),
        title="Reconstructed SDP",
        title_align="left",
        border_style="blue",
        expand=False,
    )


def summary_table(results: Sequence[FileResult]) -> Table:
    """Tabela de resumo do processamento em lote"""
    passed = sum(1 for r in results if r.success)
    failed = len(results) - passed

    title = f"SUMMARY: {len(results)} checked, {passed} passed, {failed} failed/missing"
    table = Table(title=title, title_style="bold", min_width=len(title) + 4)
    table.add_column("", width=2)
    table.add_column("File", style="bold")
    table.add_column("Media", justify="right")
    table.add_column("Session attrs", justify="right")
    table.add_column("Media attrs", justify="right")
    table.add_column("Error", style="red")

    for r in results:
        if r.success and r.session is not None:
            media_attrs = sum(len(m.attributes) for m in r.session.media)
            table.add_row(
                Text("✔", style="green"),
                Text(r.filename),
                str(len(r.session.media)),
                str(len(r.session.attributes)),
                str(media_attrs),
                "",
            )
        else:
            table.add_row(
                Text("✘", style="red"),
                Text(r.filename),
                "",
                "",
                "",
                Text(truncate(r.error or "unknown error", 44)),
            )

    return table
