from rich.console import Console
from rich.theme import Theme

theme = Theme(
    {
        "transport": "bold cyan",
        "muted": "dim",
    }
)

main_console = Console(theme=theme, highlight=False)
