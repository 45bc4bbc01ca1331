# cli.py
import asyncio
import logging
import sys
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.panel import Panel
from rich import box

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.admin import CatalogAdmin
from sdk.config import ClientSettings
from sdk.models import EDITABLE_FIELDS, ProductForm
from sdk.state import CatalogState
from sdk.store import ProductStore
from sdk.views import ConsoleProjection, admin_order, render_admin, render_catalog

console = Console()
session: Optional[PromptSession] = None

# Custom prompt style for prompt_toolkit
custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
    )
    # one line per request is noise next to the pipeline diagnostics
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ---------------------------
# Layout and Header
# ---------------------------
def create_header(base_url: str):
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Catalog Admin",
        f"[bold blue]{base_url}[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Input helpers with autocomplete
# ---------------------------
async def ask(message: str, completer=None, default: str = "") -> str:
    return await session.prompt_async(f"{message} ", completer=completer, style=custom_style, default=default)


async def confirm(message: str) -> bool:
    answer = await ask(f"{message} [y/N]", completer=WordCompleter(["y", "n"]))
    return answer.strip().lower() in ("y", "yes")


def product_completer(state: CatalogState):
    names = [p.name for p in state.products]
    return WordCompleter([n for n in (state.ids() + names) if n], ignore_case=True)


def resolve_product(state: CatalogState, ref: str) -> Optional[str]:
    """Accept either an id or an exact (case-insensitive) product name."""
    ref = ref.strip()
    for p in state.products:
        if p.id == ref or p.name.lower() == ref.lower():
            return p.id
    console.print(f"[red]No product matches '{ref}'[/red]")
    return None


# ---------------------------
# Admin actions
# ---------------------------
async def edit_field(admin: CatalogAdmin):
    pid = resolve_product(admin.state, await ask("Product (id or name)", completer=product_completer(admin.state)))
    if not pid:
        return
    field = await ask("Field", completer=WordCompleter(list(EDITABLE_FIELDS)))
    field = field.strip()
    raw = await ask(f"New {field}")
    if field == "sortOrder":
        # same coercion the drop handler applies to positions
        raw = raw.strip()
        value = int(raw) if raw.lstrip("-").isdigit() else raw
        await admin.update_field(pid, field, value)
    else:
        await admin.commit_edit(pid, field, raw)


async def add_product(admin: CatalogAdmin, form: ProductForm):
    form.name = await ask("Name", default=form.name)
    form.price = await ask("💰 Price", default=form.price)
    form.image = await ask("🖼️ Image URL", default=form.image)
    form.sort_order = await ask("Sort order", default=form.sort_order or str(len(admin.state.products) + 1))
    if not await admin.add_product(form):
        console.print("[yellow]Product not added; your input is kept for the next try.[/yellow]")


async def delete_product(admin: CatalogAdmin):
    pid = resolve_product(admin.state, await ask("Product to delete (id or name)", completer=product_completer(admin.state)))
    if pid and await confirm(f"Delete {pid}?"):
        await admin.delete_product(pid)


async def reorder(admin: CatalogAdmin):
    # stand-in for dropping a dragged card: the whole grid order, start to end
    current = [p.id for p in admin_order(admin.state.products)]
    raw = await ask("New order (ids, space separated)", completer=product_completer(admin.state),
                    default=" ".join(current))
    failed = await admin.reorder(raw.split())
    if failed is None:
        console.print("[red]Order must list every product exactly once[/red]")
    elif failed:
        console.print(f"[yellow]{len(failed)} product(s) kept their old position[/yellow]")


# ---------------------------
# Main menu
# ---------------------------
async def menu(settings: ClientSettings):
    global session
    session = PromptSession()
    console.clear()
    console.print(create_header(settings.base_url))

    async with ProductStore(settings) as store:
        state = CatalogState(store)
        show_catalog = ConsoleProjection(console, render_catalog)
        state.subscribe(show_catalog)
        state.subscribe(ConsoleProjection(console, render_admin))
        admin = CatalogAdmin(state, render_catalog=show_catalog)
        form = ProductForm()

        await state.refresh()

        while True:
            menu_table = Table.grid(padding=(0, 2))
            menu_table.add_column("Key", style="bold cyan", width=4)
            menu_table.add_column("Option", width=30)
            menu_table.add_column("Key", style="bold cyan", width=4)
            menu_table.add_column("Option", width=30)

            options = [
                ("1", "📦 Show catalog", "5", "🗑️ Delete product"),
                ("2", "🔍 Search catalog", "6", "↕️ Reorder"),
                ("3", "✏️ Edit field", "7", "🔄 Refresh"),
                ("4", "➕ Add product", "q", "👋 Quit"),
            ]
            for row in options:
                menu_table.add_row(*row)
            console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

            choice = (await ask(
                "\nChoose an option",
                completer=WordCompleter([str(i) for i in range(1, 8)] + ["q", "quit", "exit"])
            )).strip()

            if choice == "1":
                show_catalog(state.products)
            elif choice == "2":
                admin.handle_search(await ask("Search"))
            elif choice == "3":
                await edit_field(admin)
            elif choice == "4":
                await add_product(admin, form)
            elif choice == "5":
                await delete_product(admin)
            elif choice == "6":
                await reorder(admin)
            elif choice == "7":
                await state.refresh()
            elif choice.lower() in ("q", "quit", "exit"):
                console.print(Panel.fit("[bold green]Bye! 👋[/bold green]", title="Goodbye"))
                return

            console.print()
            console.rule(style="dim")


def main():
    settings = ClientSettings()
    setup_logging(settings.log_level)
    try:
        asyncio.run(menu(settings))
    except (KeyboardInterrupt, EOFError):
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
