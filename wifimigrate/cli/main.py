"""
wifimigrate CLI - hand legacy Wi-Fi config and settings over to the new stack.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wifimigrate.cli.logs import LogHandler
from wifimigrate.config_manager import ConfigManager, PathResolver
from wifimigrate.errors import MalformedTransferDataError, MigrationError
from wifimigrate.legacy_store import YamlConfigStoreSource
from wifimigrate.migration import (
    SETTING_FIELDS,
    ConfigMigrationSnapshot,
    MigrationConsumer,
    MigrationEnvironment,
    MigrationOutcome,
    SettingsMigrationSnapshot,
    load_settings_from_provider,
    read_transfer,
    read_transfer_payloads,
    write_transfer,
)
from wifimigrate.settings_provider import (
    AdbSettingsProvider,
    InMemorySettingsProvider,
    SettingsProvider,
)

console = Console()


def configure_logging(debug: bool, rich_text: bool = True) -> LogHandler:
    logger = logging.getLogger("wifimigrate")
    logger.handlers = []

    handler = LogHandler(console, rich_text=rich_text)
    handler.setFormatter(
        logging.Formatter("%(levelname)s %(name)s %(message)s", "%H:%M:%S")
        if debug
        else logging.Formatter("%(message)s", "%H:%M:%S")
    )
    logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    return handler


def _settings_provider(device: Optional[str], settings_file: Optional[str]) -> SettingsProvider:
    if settings_file:
        with open(settings_file, "r", encoding="utf-8") as f:
            values = yaml.safe_load(f) or {}
        return InMemorySettingsProvider(values)
    return AdbSettingsProvider(serial=device)


def _format_value(value) -> str:
    if value is None:
        return "[dim]unset[/]"
    if isinstance(value, bool):
        return "[green]on[/]" if value else "[red]off[/]"
    return escape(str(value))


def render_settings(snapshot: Optional[SettingsMigrationSnapshot]) -> None:
    if snapshot is None:
        console.print("[yellow]No settings to migrate.[/]")
        return
    changed = set(snapshot.non_default_fields())
    table = Table(title="Wi-Fi settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Key", style="dim")
    table.add_column("Value")
    table.add_column("Default", style="dim")
    for field in SETTING_FIELDS:
        name = f"[bold]{field.name}[/]" if field.name in changed else field.name
        table.add_row(
            name,
            field.key,
            _format_value(getattr(snapshot, field.name)),
            _format_value(field.default),
        )
    console.print(table)


def render_config(snapshot: Optional[ConfigMigrationSnapshot]) -> None:
    if snapshot is None:
        console.print("[yellow]No config store migration needed.[/]")
        return

    if snapshot.saved_networks is None:
        console.print("Saved networks: [dim]nothing to migrate[/]")
    else:
        table = Table(title=f"Saved networks ({len(snapshot.saved_networks)})")
        table.add_column("SSID", style="cyan")
        table.add_column("Security", style="green")
        table.add_column("Hidden")
        table.add_column("Metered")
        for network in snapshot.saved_networks:
            table.add_row(
                escape(network.ssid),
                network.security.value,
                _format_value(network.hidden),
                network.metered_override.value,
            )
        console.print(table)

    ap = snapshot.ap_configuration
    if ap is None:
        console.print("Soft AP: [dim]nothing to migrate[/]")
    else:
        console.print(
            f"Soft AP: [cyan]{escape(ap.ssid or '<default>')}[/] "
            f"({ap.security.value}, band {ap.band.value}, channel {ap.channel or 'auto'})"
        )


def render_outcome(outcome: MigrationOutcome) -> None:
    render_config(outcome.config)
    render_settings(outcome.settings)
    for error in outcome.errors:
        console.print(f"[red]Skipped: {escape(error)}[/]")


@click.group()
@click.option("--config", "-c", "config_path", help="Path to config file", default=None)
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], debug: bool):
    """Migrate legacy Wi-Fi config store data and settings."""
    config = ConfigManager(config_path)
    debug_mode = debug or config.logging.debug
    configure_logging(debug_mode, config.logging.rich_text)
    ctx.obj = config


@cli.command()
@click.option("--device", "-d", help="Device serial number", default=None)
@click.option(
    "--settings-file",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML mapping of global settings keys to read instead of a device",
    default=None,
)
@click.pass_obj
def settings(config: ConfigManager, device: Optional[str], settings_file: Optional[str]):
    """Show the seven migrated Wi-Fi settings."""
    try:
        provider = _settings_provider(device or config.device.serial, settings_file)
        render_settings(load_settings_from_provider(provider))
    except Exception as e:
        console.print(f"[red]Error reading settings: {escape(str(e))}[/]")
        sys.exit(1)


@cli.command()
@click.option("--store", "-s", help="Legacy store YAML file", default=None)
@click.option("--device", "-d", help="Device serial number", default=None)
@click.option(
    "--settings-file",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML mapping of global settings keys to read instead of a device",
    default=None,
)
@click.option("--output", "-o", help="Transfer file to write", default=None)
@click.pass_obj
def export(
    config: ConfigManager,
    store: Optional[str],
    device: Optional[str],
    settings_file: Optional[str],
    output: Optional[str],
):
    """Load migration data once and write it to a transfer file."""
    logger = logging.getLogger("wifimigrate")
    store_path = PathResolver.resolve(store or config.legacy_store.path)
    output_path = (
        Path(output)
        if output
        else PathResolver.resolve(config.transfer.output_dir, create_if_missing=True)
        / config.transfer.file_name
    )

    serial = device or config.device.serial
    try:
        provider = _settings_provider(serial, settings_file)
        environment = MigrationEnvironment(settings=provider, device_serial=serial)
        source = YamlConfigStoreSource(store_path)

        config_snapshot = source.load_config_snapshot()
        settings_snapshot = source.load_settings_snapshot(environment)
        write_transfer(output_path, config_snapshot, settings_snapshot)
    except (MigrationError, OSError, yaml.YAMLError) as e:
        console.print(f"[red]Migration failed: {escape(str(e))}[/]")
        sys.exit(1)

    # The legacy store goes away only once the transfer file is on disk.
    try:
        source.commit()
    except OSError as e:
        console.print(f"[yellow]Transfer file written but legacy store not removed: {escape(str(e))}[/]")

    logger.info(f"Transfer file written to {output_path}")
    render_config(config_snapshot)
    render_settings(settings_snapshot)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def inspect(path: str):
    """Decode a transfer file and show its contents."""
    try:
        config_snapshot, settings_snapshot = read_transfer(path)
    except MalformedTransferDataError as e:
        console.print(f"[red]Malformed transfer file: {escape(str(e))}[/]")
        sys.exit(1)

    render_config(config_snapshot)
    render_settings(settings_snapshot)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def run(path: str):
    """Consume a transfer file, continuing without data that fails to decode."""
    logger = logging.getLogger("wifimigrate")
    consumer = MigrationConsumer()
    try:
        config_bytes, settings_bytes = read_transfer_payloads(path)
    except MalformedTransferDataError as e:
        logger.error(f"Proceeding without migrated data: {e}")
        render_outcome(MigrationOutcome(errors=(f"transfer file: {e}",)))
        return

    render_outcome(consumer.receive(config_bytes, settings_bytes))


if __name__ == "__main__":
    cli()
