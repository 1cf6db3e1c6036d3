"""CLI commands for uuid-codec."""

import json
import logging
import sys
from pathlib import Path

import click

from uuid_codec import (
    UUID,
    UUIDCodecError,
    UUIDGenerator,
    UUIDValidator,
    from_buffer,
    from_buffer_le,
    from_string,
    resolve_namespace,
    to_base64,
    to_base64url,
    to_string,
)
from uuid_codec.config import DEFAULT_CONFIG, Config

logger = logging.getLogger(__name__)

FORMATS = ["string", "base64", "base64url", "hex"]


def _encode(value: UUID, fmt: str) -> str:
    if fmt == "base64":
        return to_base64(value)
    if fmt == "base64url":
        return to_base64url(value)
    if fmt == "hex":
        return value.value.hex()
    return to_string(value)


def _fail(message: object) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _load_config(path: str | None) -> Config:
    if path is not None:
        return Config.from_toml(path)
    try:
        return Config.find_and_load()
    except FileNotFoundError:
        return DEFAULT_CONFIG


@click.group()
@click.version_option(package_name="uuid-codec")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to uuid-codec.toml",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """uuid-codec - RFC 9562 UUID generation, parsing and encoding."""
    try:
        config = _load_config(str(config_path) if config_path else None)
        config.configure_logging()
    except (OSError, ValueError) as e:
        # TOMLDecodeError and pydantic's ValidationError are both ValueErrors
        _fail(f"Invalid configuration: {e}")
    ctx.obj = config


@cli.command()
@click.option("--uuid-version", type=click.Choice(["4", "5"]), help="UUID version (default from config)")
@click.option("--namespace", help="Namespace for v5: dns, url, oid, x500 or a UUID")
@click.option("--name", "names", multiple=True, help="Name to hash for v5 (repeatable)")
@click.option("--count", type=int, default=1, help="Number of v4 UUIDs (default: 1)")
@click.option("--format", "fmt", type=click.Choice(FORMATS), help="Output encoding")
@click.pass_obj
def generate(
    config: Config,
    uuid_version: str | None,
    namespace: str | None,
    names: tuple[str, ...],
    count: int,
    fmt: str | None,
) -> None:
    """Generate version 4 or version 5 UUID(s)."""
    version = int(uuid_version) if uuid_version else config.generation.version
    fmt = fmt or config.output.format
    logger.debug(f"generate version={version} format={fmt}")

    try:
        if version == 5:
            if not names:
                _fail("--name is required for version 5")
            ns = resolve_namespace(namespace or config.generation.namespace)
            uuids = UUIDGenerator(5, namespace=ns).generate_batch(names=names)
        else:
            if names:
                _fail("--name is only valid for version 5")
            uuids = UUIDGenerator(4).generate_batch(count=count)
    except UUIDCodecError as e:
        _fail(e)

    for value in uuids:
        click.echo(_encode(value, fmt))


@cli.command()
@click.argument("uuid")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def parse(uuid: str, output_json: bool) -> None:
    """Parse a canonical UUID string and show its fields and encodings."""
    logger.debug(f"parse {uuid!r}")
    try:
        value = from_string(uuid)
    except UUIDCodecError as e:
        _fail(e)

    details = {
        "uuid": to_string(value),
        "hex": value.value.hex(),
        "version": value.version,
        "variant": value.variant,
        "base64": to_base64(value),
        "base64url": to_base64url(value),
    }

    if output_json:
        click.echo(json.dumps(details, indent=2))
        return

    click.echo(f"UUID: {details['uuid']}")
    click.echo(f"  hex:       {details['hex']}")
    click.echo(f"  version:   {details['version']}")
    click.echo(f"  variant:   {details['variant']:02b}")
    click.echo(f"  base64:    {details['base64']}")
    click.echo(f"  base64url: {details['base64url']}")


@cli.command()
@click.argument("uuid")
@click.option("--quiet", "-q", is_flag=True, help="Only output result (0=valid, 1=invalid)")
@click.option("--lenient", is_flag=True, help="Accept uppercase digits and other versions")
def validate(uuid: str, quiet: bool, lenient: bool) -> None:
    """Validate UUID format."""
    result = UUIDValidator().validate(uuid, strict=not lenient)

    if quiet:
        sys.exit(0 if result.valid else 1)

    if result.valid:
        click.echo(f"✓ Valid UUID: {uuid}")
        for warning in result.warnings or []:
            click.echo(f"  warning: {warning}")
        sys.exit(0)
    else:
        click.echo(f"✗ Invalid UUID: {result.error}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("hex_bytes")
@click.option("--little-endian", "-l", is_flag=True, help="Input is in Microsoft GUID byte order")
@click.option("--format", "fmt", type=click.Choice(FORMATS), help="Output encoding")
@click.pass_obj
def encode(config: Config, hex_bytes: str, little_endian: bool, fmt: str | None) -> None:
    """Import 16 raw bytes given as 32 hex digits and print an encoding."""
    fmt = fmt or config.output.format
    try:
        raw = bytes.fromhex(hex_bytes)
    except ValueError:
        _fail(f"Not a hex string: {hex_bytes}")

    try:
        value = from_buffer_le(raw) if little_endian else from_buffer(raw)
    except UUIDCodecError as e:
        _fail(e)

    click.echo(_encode(value, fmt))


if __name__ == "__main__":
    cli()
