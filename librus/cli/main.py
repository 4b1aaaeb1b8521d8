"""Librus CLI - Main commands.

Credentials are read from LIBRUS_USERNAME and LIBRUS_PASSWORD.
"""
import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from librus import LibrusClient, LibrusError, setup_logging

app = typer.Typer(
    name="librus",
    help="Librus Synergia CLI",
    add_completion=False
)
console = Console()


def run_async(coro):
    """Run async function."""
    return asyncio.run(coro)


def run_with_client(action):
    """Log in from the environment, run action(client), report library errors."""
    async def runner():
        client = await LibrusClient.from_env()
        async with client:
            await action(client)

    try:
        run_async(runner())
    except LibrusError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def preview(text: Optional[str], width: int) -> str:
    if not text:
        return ""
    text = " ".join(text.split())
    return text if len(text) <= width else text[:width] + "..."


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Librus Synergia CLI."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        setup_logging(logging.DEBUG)


@app.command()
def me():
    """Show the logged-in account."""
    async def show(client: LibrusClient):
        data = await client.me()
        account = data.me.account
        console.print(f"[bold]User:[/bold] {data.me.user.first_name} {data.me.user.last_name}")
        console.print(f"[bold]Login:[/bold] {account.login}")
        console.print(f"[bold]Email:[/bold] {account.email}")
        console.print(f"[bold]Premium:[/bold] {account.is_premium}")

    run_with_client(show)


@app.command()
def grades(
    limit: int = typer.Option(0, "--limit", "-n", help="Show only the latest N grades"),
):
    """List grades."""
    async def show(client: LibrusClient):
        data = await client.grades()
        items = sorted(data.grades, key=lambda g: g.add_date, reverse=True)
        if limit:
            items = items[:limit]

        table = Table()
        table.add_column("Date", style="cyan")
        table.add_column("Grade", justify="center")
        table.add_column("Subject", style="dim")
        table.add_column("Semester", justify="right")
        for grade in items:
            table.add_row(grade.date, grade.grade, str(grade.subject.id), str(grade.semester))

        console.print(table)
        console.print(f"Total grades: {len(data.grades)}")

    run_with_client(show)


@app.command()
def notices(
    width: int = typer.Option(120, "--width", "-w", help="Preview length"),
):
    """List school notices as plain text."""
    async def show(client: LibrusClient):
        data = await client.school_notices()
        for notice in data.school_notices:
            console.print(
                f"[cyan][{notice.creation_date}][/cyan] [bold]{notice.subject}[/bold] - "
                f"{preview(notice.text, width)}"
            )

    run_with_client(show)


@app.command()
def homeworks():
    """List homeworks and class events."""
    async def show(client: LibrusClient):
        data = await client.homeworks()
        table = Table()
        table.add_column("Date", style="cyan")
        table.add_column("Time")
        table.add_column("Content")
        for homework in data.homeworks:
            table.add_row(
                homework.date,
                f"{homework.time_from}-{homework.time_to}",
                preview(homework.content, 80)
            )
        console.print(table)

    run_with_client(show)


@app.command()
def unread():
    """Show unread message counts."""
    async def show(client: LibrusClient):
        counts = await client.unread_counts()
        console.print(
            f"Unread inbox: {counts.inbox}, notes: {counts.notes}, alerts: {counts.alerts}"
        )

    run_with_client(show)


@app.command()
def inbox(
    page: int = typer.Option(1, "--page", "-p", help="Page number"),
    limit: int = typer.Option(10, "--limit", "-n", help="Messages per page"),
):
    """List inbox messages."""
    async def show(client: LibrusClient):
        messages = await client.inbox_messages(page, limit)
        table = Table()
        table.add_column("Date", style="cyan")
        table.add_column("From")
        table.add_column("Topic")
        table.add_column("ID", style="dim")
        for msg in messages:
            table.add_row(msg.send_date, msg.sender_name, msg.topic, msg.message_id)
        console.print(table)

    run_with_client(show)


@app.command()
def message(
    message_id: str = typer.Argument(..., help="Message ID"),
):
    """Show a message with its decoded body."""
    async def show(client: LibrusClient):
        detail = await client.message(message_id)
        console.print(f"[bold]From:[/bold] {detail.sender_name}")
        console.print(f"[bold]Subject:[/bold] {detail.topic}")
        console.print(f"[bold]Date:[/bold] {detail.send_date}")
        console.print()
        console.print(detail.text or "")
        if detail.attachments:
            console.print()
            for item in detail.attachments:
                console.print(f"[dim]Attachment {item.id}:[/dim] {item.name}")

    run_with_client(show)


@app.command()
def attachment(
    attachment_id: str = typer.Argument(..., help="Attachment ID"),
    message_id: str = typer.Argument(..., help="Message ID"),
    output: Path = typer.Option(None, "--output", "-o", help="Output file path"),
):
    """Download a message attachment."""
    async def download(client: LibrusClient):
        data = await client.attachment(attachment_id, message_id)
        target = output or Path(f"attachment-{attachment_id}")
        target.write_bytes(data)
        console.print(f"[green]Saved {len(data):,} bytes to {target}[/green]")

    run_with_client(download)


@app.command()
def check():
    """Walk the main endpoints of both APIs."""
    async def walk(client: LibrusClient):
        console.print("[green]Authentication successful![/green]")

        data = await client.me()
        console.print(f"User: {data.me.user.first_name} {data.me.user.last_name}")
        console.print(f"Total grades: {len((await client.grades()).grades)}")
        console.print(f"Total homeworks: {len((await client.homeworks()).homeworks)}")
        console.print(f"Total attendances: {len((await client.attendances()).attendances)}")

        counts = await client.unread_counts()
        console.print(
            f"Unread inbox: {counts.inbox}, notes: {counts.notes}, alerts: {counts.alerts}"
        )
        for msg in await client.inbox_messages(1, 5):
            console.print(
                f"  [{msg.send_date}] {msg.sender_name} - {msg.topic} ({preview(msg.text, 50)})"
            )

        console.print("\n[green]All API checks completed![/green]")

    run_with_client(walk)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
