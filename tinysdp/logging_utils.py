"""
Módulo centralizado de logging com Rich para TinySDP
"""

import logging

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

# Console global compartilhado
console = Console()


class RichConsoleHandler(logging.Handler):
    """Handler personalizado que usa Rich console diretamente"""

    def __init__(self, console: Console | None = None):
        super().__init__()
        self.console = console or Console()

    def emit(self, record):
        """Emitir log usando Rich console"""
        try:
            # Se a mensagem é um objeto Rich, renderizar diretamente
            if hasattr(record.msg, "__rich__") or hasattr(record.msg, "__rich_console__"):
                self.console.print(record.msg)
            else:
                self.console.print(self.format(record), markup=False, highlight=False)
        except Exception:
            self.handleError(record)


class RichSDPLogger:
    """Logger de apresentação para o relatório de arquivos SDP"""

    def __init__(self, name: str, output: Console | None = None):
        self.name = name
        self.logger = logging.getLogger(name)
        # Um console explícito substitui o handler anterior (útil em testes)
        if output is not None:
            for handler in self.logger.handlers[:]:
                self.logger.removeHandler(handler)
        if not self.logger.handlers:
            self.logger.addHandler(RichConsoleHandler(output or console))
            self.logger.setLevel(logging.DEBUG)
            self.logger.propagate = False  # Evitar propagação para root logger

    def log_file_header(self, title: str):
        """Cabeçalho de seção para um arquivo processado"""
        panel = Panel(Text(title, style="bold"), border_style="cyan", expand=False)
        self.logger.info(panel)

    def log_error(self, error: Exception | str, context: str | None = None):
        """Log de erro com panel"""
        title = "✘ ERROR"
        if context:
            title += f" in {context}"

        if isinstance(error, Exception):
            error_text = f"{type(error).__name__}: {error}"
        else:
            error_text = error
        panel = Panel(
            Text(error_text), title=title, title_align="left", border_style="red", expand=False
        )
        self.logger.info(panel)

    def log_warning(self, message: str):
        """Log de aviso"""
        text = Text()
        text.append("⚠  ", style="bold yellow")
        text.append(message, style="yellow")
        self.logger.info(text)

    def log_info(self, message: str, style: str = ""):
        """Log de informação simples"""
        text = Text(message, style=style)
        self.logger.info(text)

    def log_success(self, message: str):
        """Log de sucesso"""
        text = Text()
        text.append("✔  ", style="bold green")
        text.append(message, style="green")
        self.logger.info(text)

    def log_renderable(self, renderable):
        """Log de qualquer renderable Rich (Tree, Table, Panel)"""
        self.logger.info(renderable)


# Função para configurar logging global
def setup_logging(level: str = "WARNING", output: Console | None = None) -> None:
    """Configura o sistema de logging global para TinySDP"""
    handler = RichConsoleHandler(output or console)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    logging.basicConfig(
        level=level.upper(),
        handlers=[handler],
        force=True,  # Força reconfiguração
    )
