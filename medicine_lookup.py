#!/usr/bin/env python3
"""
Medicine Lookup by Name
Resolves a medicine on drugs.com and prints the extracted sections
"""
import json
import sys

from rich.console import Console
from rich.table import Table

from app.utils.drugscom import MedicineClient, MedicineLookupError

console = Console(width=120)

PREVIEW_LENGTH = 200


def lookup_medicine(medicine_name):
    """
    Look up a medicine and print a summary table of its record
    """
    console.print(f"[bold blue]Looking up: [/bold blue][bold green]{medicine_name}[/bold green]")

    try:
        record = MedicineClient().get_medicine(medicine_name)
    except MedicineLookupError as e:
        console.print(f"[bold red]Error: {str(e)}[/bold red]")
        if e.attempted_url:
            console.print(f"[dim]Attempted URL: {e.attempted_url}[/dim]")
        return {
            "status": "error",
            "message": str(e),
            "attempted_url": e.attempted_url
        }

    data = record.to_dict()
    console.print(f"[bold green]✓ Found {data['name'] or medicine_name}[/bold green]")
    console.print(f"[dim]Source: {data['source']}[/dim]")

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Field", style="cyan", width=14)
    table.add_column("Value")
    for field, value in data.items():
        if field == "source":
            continue
        preview = f"{value[:PREVIEW_LENGTH]}..." if len(value) > PREVIEW_LENGTH else value
        table.add_row(field, preview)
    console.print(table)

    return {
        "status": "success",
        "medicine": medicine_name,
        "record": data
    }


if __name__ == "__main__":
    # Get medicine name from command line or use default
    args = [arg for arg in sys.argv[1:] if arg != "--save"]
    medicine_name = " ".join(args) if args else "ibuprofen"

    result = lookup_medicine(medicine_name)

    if result["status"] == "success" and "--save" in sys.argv:
        filename = f"{medicine_name.replace(' ', '_')}_record.json"
        with open(filename, "w") as f:
            json.dump(result["record"], f, indent=2)
        console.print(f"[bold green]✓ Saved record to {filename}[/bold green]")
